"""DivePal: Streamlit app for finding dive sites and planning dives."""

import datetime
import html
import logging

import streamlit as st
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from divepal import state as app_state  # noqa: E402
from divepal.app_logging import setup_logging  # noqa: E402
from divepal.auth import AuthError, InMemoryAuthProvider  # noqa: E402
from divepal.calculators import (  # noqa: E402
    NDL_TABLE,
    PPO2_LIMITS,
    gas_duration,
    max_operating_depth,
    sac_rate,
    sac_rating,
    starting_weight,
)
from divepal.catalog import (  # noqa: E402
    CatalogError,
    RemoteCatalogProvider,
    StaticCatalogProvider,
    build_provider,
)
from divepal.config import Settings  # noqa: E402
from divepal.divelog import (  # noqa: E402
    DiveLogError,
    export_csv,
    find_sites,
    new_log_entry,
    profile_stats,
    save_site,
    toggle_completed,
)
from divepal.feed import (  # noqa: E402
    FeedError,
    add_comment,
    create_post,
    format_time_ago,
    load_feed,
    toggle_like,
)
from divepal.i18n import t  # noqa: E402
from divepal.models import (  # noqa: E402
    ACCESS_TYPES,
    ENTRY_DIFFICULTIES,
    EXPERIENCE_LEVELS,
    SUIT_TYPES,
    DiveSite,
    GasDurationInput,
    ModInput,
    SacInput,
    WeightInput,
)
from divepal.profile import ProfileError, default_profile, edit_profile  # noqa: E402
from divepal.questionnaire import (  # noqa: E402
    QUESTIONS,
    answer_key,
    answer_keys,
    build_query,
    map_filter_query,
    parse_number,
)
from divepal.renderers.site_map import nearest_site, render_site_map  # noqa: E402
from divepal.reviews import ReviewError, add_review, average_rating, load_reviews  # noqa: E402
from divepal.search import filter_sites, merge_sites, resolve_site, search_sites  # noqa: E402

_settings = Settings.from_env()
setup_logging(_settings.log_dir, _settings.log_level)
logger = logging.getLogger("divepal.app")


@st.cache_resource
def _auth_provider() -> InMemoryAuthProvider:
    return InMemoryAuthProvider()


# --- Language detection (browser-first via streamlit-js-eval) ---
# On the first run the JS call returns None; the rerun fills it in.
if "lang" not in st.session_state:
    _browser_lang: str | None = streamlit_js_eval(
        js_expressions="navigator.language", key="_lang_detect", height=0
    )
    if _browser_lang is not None:
        st.session_state.lang = "ko" if _browser_lang.lower().startswith("ko") else "en"

_lang: str = st.session_state.get("lang", "en")

st.set_page_config(
    page_title=t("page_title", _lang),
    page_icon="🌊",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Session state initialization ---
if "app" not in st.session_state:
    st.session_state.app = app_state.AppState()
if "answers" not in st.session_state:
    st.session_state.answers = {}
if "step" not in st.session_state:
    st.session_state.step = 0
if "search_result" not in st.session_state:
    st.session_state.search_result = None
if "use_remote" not in st.session_state:
    st.session_state.use_remote = _settings.data_source == "remote"
if "supabase_url" not in st.session_state:
    st.session_state.supabase_url = _settings.supabase_url
if "supabase_key" not in st.session_state:
    st.session_state.supabase_key = _settings.supabase_key
if "dive_log" not in st.session_state:
    st.session_state.dive_log = []
if "posts" not in st.session_state:
    st.session_state.posts = load_feed()
if "liked" not in st.session_state:
    st.session_state.liked = set()
if "flash" not in st.session_state:
    st.session_state.flash = None
if "saved_sites" not in st.session_state:
    st.session_state.saved_sites = ()
if "completed" not in st.session_state:
    st.session_state.completed = frozenset()
if "reviews" not in st.session_state:
    st.session_state.reviews = {}
if "profiles" not in st.session_state:
    st.session_state.profiles = {}

_catalog: tuple[DiveSite, ...] = StaticCatalogProvider().load_catalog()
_seed_reviews = load_reviews()


def _known_sites() -> tuple[DiveSite, ...]:
    """Sites from the latest search first, then saved sites, then the bundled catalog."""
    result = st.session_state.search_result
    found = result.sites if result is not None else ()
    return merge_sites(merge_sites(found, st.session_state.saved_sites), _catalog)


st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background: linear-gradient(180deg, #e8f4f8 0%, #ffffff 100%) !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    iframe[src*="streamlit_js_eval"] { display: none !important; }
    [data-testid="stButton"] button {
        border-radius: 8px !important;
        font-weight: 600;
    }
    .site-card {
        background: rgba(255,255,255,0.95);
        border: 1px solid #cde7f0;
        border-radius: 12px;
        padding: 1rem 1.2rem;
        margin-bottom: 0.6rem;
        color: #0b3954;
    }
    .site-card small { color: #4a7a93; }
    .badge {
        display: inline-block;
        background: #d9f0f7;
        border-radius: 6px;
        padding: 0 0.4rem;
        margin-right: 0.3rem;
        font-size: 0.8rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)


def _update(new_state: app_state.AppState) -> None:
    st.session_state.app = new_state


def _flash(message: str, kind: str = "success") -> None:
    st.session_state.flash = (kind, message)


def _render_data_source() -> None:
    st.session_state.use_remote = st.toggle(
        t("use_remote", _lang), value=st.session_state.use_remote
    )
    st.session_state.supabase_url = st.text_input(
        "Supabase URL", value=st.session_state.supabase_url
    )
    st.session_state.supabase_key = st.text_input(
        "Supabase key", value=st.session_state.supabase_key, type="password"
    )


def _site_card(site: DiveSite) -> None:
    badges = "".join(
        f"<span class='badge'>{html.escape(tag)}</span>" for tag in site.site_type
    )
    st.markdown(
        f"<div class='site-card'><b>{html.escape(site.name)}</b><br>"
        f"<small>{html.escape(site.location)} · {site.temp_min:.0f}–{site.temp_max:.0f}°C"
        f" · {site.visibility_min:.0f}m+ · {site.access_type} · {site.entry_difficulty}</small>"
        f"<br>{badges}</div>",
        unsafe_allow_html=True,
    )


# --- Navigation ---
_app: app_state.AppState = st.session_state.app
nav_cols = st.columns(len(app_state.SCREENS) + 1)
for col, screen in zip(nav_cols, app_state.SCREENS):
    with col:
        if st.button(
            t(f"nav_{screen}", _lang),
            key=f"nav_{screen}",
            use_container_width=True,
            type="primary" if _app.screen == screen else "secondary",
        ):
            _update(app_state.change_screen(_app, screen))
            st.rerun()
with nav_cols[-1]:
    if _app.user is None:
        if st.button(t("btn_sign_in", _lang), key="nav_auth", use_container_width=True):
            _update(app_state.request_sign_in(_app))
            st.rerun()
    elif st.button(t("btn_sign_out", _lang), key="nav_sign_out", use_container_width=True):
        _update(app_state.sign_out(_app))
        _flash(t("signed_out", _lang), "info")
        st.rerun()

if st.session_state.flash:
    _kind, _message = st.session_state.flash
    getattr(st, _kind)(_message)
    st.session_state.flash = None

# --- Authentication panel ---
if _app.auth_prompt:
    st.info(t("auth_required", _lang))
    sign_in_tab, sign_up_tab = st.tabs([t("btn_sign_in", _lang), t("btn_sign_up", _lang)])
    with sign_in_tab:
        email = st.text_input("Email", key="si_email")
        password = st.text_input("Password", type="password", key="si_password")
        if st.button(t("btn_sign_in", _lang), key="si_submit"):
            try:
                user = _auth_provider().sign_in(email, password)
                _update(app_state.sign_in(_app, user))
                st.rerun()
            except AuthError as e:
                st.error(t("auth_error", _lang).format(error=html.escape(str(e))))
    with sign_up_tab:
        name = st.text_input("Name", key="su_name")
        email = st.text_input("Email", key="su_email")
        password = st.text_input("Password", type="password", key="su_password")
        if st.button(t("btn_sign_up", _lang), key="su_submit"):
            try:
                user = _auth_provider().sign_up(name, email, password)
                _update(app_state.sign_in(_app, user))
                st.rerun()
            except AuthError as e:
                st.error(t("auth_error", _lang).format(error=html.escape(str(e))))
    if st.button(t("btn_back", _lang), key="auth_cancel"):
        _update(app_state.dismiss_auth(_app))
        st.rerun()
    st.stop()

# --- Dive log form ---
if _app.show_dive_log:
    st.subheader(t("btn_log_dive", _lang))
    preset = resolve_site(_app.dive_log_site_id, _known_sites())
    query_text = st.text_input("Search sites", value=preset.name if preset else "")
    candidates = find_sites(_known_sites(), query_text)
    site_choice = st.selectbox(
        "Dive site",
        options=[None, *candidates],
        index=candidates.index(preset) + 1 if preset in candidates else 0,
        format_func=lambda s: "-" if s is None else f"{s.name} ({s.location})",
    )
    dive_date = st.date_input("Date", value=datetime.date.today())
    notes = st.text_area("Notes")
    col_save, col_back = st.columns(2)
    with col_save:
        if st.button(t("btn_save", _lang), use_container_width=True):
            try:
                entry = new_log_entry(site_choice, dive_date.isoformat(), notes)
                st.session_state.dive_log = [*st.session_state.dive_log, entry]
                logger.info("Logged dive at site %s", entry.site_id)
                _update(app_state.close_dive_log(_app))
                _flash(t("log_saved", _lang).format(site=entry.site_name))
                st.rerun()
            except DiveLogError as e:
                st.error(str(e))
    with col_back:
        if st.button(t("btn_back", _lang), use_container_width=True):
            _update(app_state.close_dive_log(_app))
            st.rerun()
    st.stop()

# --- Settings ---
if _app.show_settings:
    st.subheader(t("btn_settings", _lang))
    st.markdown(f"**{t('data_source', _lang)}**")
    _render_data_source()
    if st.button(t("btn_test_connection", _lang), key="settings_ping"):
        remote = RemoteCatalogProvider(
            st.session_state.supabase_url,
            st.session_state.supabase_key,
            table=_settings.remote_table,
            timeout=_settings.http_timeout,
        )
        try:
            remote.ping()
            st.success(t("connection_ok", _lang))
        except CatalogError as e:
            logger.warning("Supabase connection test failed: %s", e)
            st.error(t("connection_failed", _lang).format(error=html.escape(str(e))))
    if st.button(t("btn_back", _lang), key="settings_back"):
        _update(app_state.open_settings(_app, False))
        st.rerun()
    st.stop()

# --- Site summary ---
site = resolve_site(_app.selected_site_id, _known_sites())
if site is not None:
    st.header(site.name)
    st.caption(site.location)
    st.write(site.description)
    c1, c2, c3 = st.columns(3)
    c1.metric("Water", f"{site.temp_min:.0f}–{site.temp_max:.0f}°C")
    c2.metric("Visibility", f"{site.visibility_min:.0f}m+")
    c3.metric("Difficulty", site.entry_difficulty.capitalize())
    st.markdown("**Marine life:** " + ", ".join(site.marine_life))
    if site.coral_type:
        st.markdown("**Coral:** " + ", ".join(site.coral_type))
    b1, b2, b3, b4 = st.columns(4)
    with b1:
        if st.button(t("btn_back", _lang), use_container_width=True):
            _update(app_state.back_to_results(_app))
            st.rerun()
    with b2:
        if st.button(t("btn_open_map", _lang), use_container_width=True):
            _update(app_state.open_map(_app, site.lat, site.lon))
            st.rerun()
    with b3:
        if st.button(t("btn_log_dive", _lang), use_container_width=True):
            _update(app_state.open_dive_log(_app, site.id))
            st.rerun()
    with b4:
        done = site.id in st.session_state.completed
        if st.button(
            t("btn_completed" if done else "btn_mark_completed", _lang),
            use_container_width=True,
            type="primary" if done else "secondary",
        ):
            st.session_state.completed, done = toggle_completed(
                st.session_state.completed, site.id
            )
            _flash(t("marked_completed" if done else "unmarked_completed", _lang).format(site=site.name))
            st.rerun()

    site_reviews = st.session_state.reviews.get(site.id, _seed_reviews)
    st.subheader(
        t("reviews_title", _lang).format(
            rating=average_rating(site_reviews), count=len(site_reviews)
        )
    )
    if _app.user is None:
        if st.button(t("btn_write_review", _lang), key="review_sign_in"):
            _update(app_state.request_sign_in(_app))
            st.rerun()
    else:
        with st.expander(t("btn_write_review", _lang)):
            rating = st.select_slider("Rating", options=[0, 1, 2, 3, 4, 5], value=0)
            comment = st.text_area("Review", key=f"review_text_{site.id}")
            if st.button(t("btn_submit_review", _lang), key="review_submit"):
                try:
                    st.session_state.reviews = {
                        **st.session_state.reviews,
                        site.id: add_review(site_reviews, _app.user.name, rating, comment),
                    }
                    _flash(t("review_submitted", _lang))
                    st.rerun()
                except ReviewError as e:
                    st.error(str(e))
    for review in site_reviews:
        st.markdown(
            f"**{html.escape(review.user_name)}** · {'★' * review.rating}{'☆' * (5 - review.rating)}"
            f" · {review.date}"
        )
        st.caption(review.comment)
    st.stop()


def _render_search() -> None:
    if _app.view == "results" and st.session_state.search_result is not None:
        result = st.session_state.search_result
        if result.source == "static_fallback":
            st.warning(t("source_fallback", _lang).format(error=html.escape(result.error or "")))
        else:
            st.caption(t(f"source_{result.source}", _lang))
        if not result.sites:
            st.info(t("results_empty", _lang))
        else:
            st.subheader(t("results_title", _lang).format(count=len(result.sites)))
        saved_ids = {s.id for s in st.session_state.saved_sites}
        for site in result.sites:
            _site_card(site)
            col_open, col_save = st.columns(2)
            with col_open:
                if st.button(site.name, key=f"open_{site.id}", use_container_width=True):
                    _update(app_state.select_site(_app, site.id))
                    st.rerun()
            with col_save:
                saved = site.id in saved_ids
                if st.button(
                    t("btn_saved" if saved else "btn_save_site", _lang),
                    key=f"save_{site.id}",
                    disabled=saved,
                    use_container_width=True,
                ):
                    st.session_state.saved_sites = save_site(st.session_state.saved_sites, site)
                    st.rerun()
        if st.button(t("btn_new_search", _lang), key="new_search"):
            for key in answer_keys(st.session_state.keys()):
                del st.session_state[key]
            st.session_state.answers = {}
            st.session_state.step = 0
            st.session_state.search_result = None
            _update(app_state.reset_search(_app))
            st.rerun()
        return

    with st.expander(t("data_source", _lang)):
        _render_data_source()

    step = st.session_state.step
    question = QUESTIONS[step]
    st.progress((step + 1) / len(QUESTIONS))
    st.subheader(t(f"q_{question['id']}", _lang))

    if question["kind"] == "select":
        access = st.selectbox(t("label_access_type", _lang), ["", *ACCESS_TYPES])
        difficulty = st.selectbox(t("label_difficulty", _lang), ["", *ENTRY_DIFFICULTIES])
        answer_updates = {"access_type": access, "entry_difficulty": difficulty}
    else:
        helper = "helper_number" if question["kind"] == "number" else "helper_list"
        raw = st.text_input(t(helper, _lang), key=answer_key(question["id"]))
        answer_updates = {question["id"]: raw}

    last = step == len(QUESTIONS) - 1
    col_skip, col_next = st.columns(2)
    with col_skip:
        skipped = st.button(t("btn_skip", _lang), use_container_width=True)
    with col_next:
        advanced = st.button(
            t("btn_search" if last else "btn_next", _lang),
            use_container_width=True,
            type="primary",
        )
    if not (skipped or advanced):
        return

    if advanced:
        st.session_state.answers = {**st.session_state.answers, **answer_updates}
    if not last:
        st.session_state.step = step + 1
        st.rerun()

    query = build_query(st.session_state.answers)
    settings = _settings.with_remote(
        st.session_state.use_remote,
        st.session_state.supabase_url,
        st.session_state.supabase_key,
    )
    with st.spinner():
        st.session_state.search_result = search_sites(query, build_provider(settings))
    _update(app_state.show_results(_app))
    st.rerun()


def _render_map() -> None:
    sites = _known_sites()
    focus = None
    if _app.map_center is not None:
        focus = nearest_site(sites, *_app.map_center)
    with st.expander(t("map_filters", _lang)):
        f1, f2 = st.columns(2)
        marine_life = f1.text_input(t("label_marine_life", _lang), key="map_marine_life")
        site_type = f2.text_input(t("label_site_type", _lang), key="map_site_type")
        difficulty = f1.selectbox(t("label_difficulty", _lang), ["", *ENTRY_DIFFICULTIES])
        visibility = f2.slider(t("label_visibility", _lang), 0, 40, 0, step=5)
    query = map_filter_query(marine_life, difficulty, float(visibility), site_type)
    shown = filter_sites(sites, query)
    fig = render_site_map(
        shown, selected_id=focus.id if focus else None, center=_app.map_center
    )
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})
    pick = st.selectbox(
        "Site",
        options=[None, *shown],
        format_func=lambda s: "-" if s is None else s.name,
    )
    if pick is not None and st.button(pick.name, key="map_open"):
        _update(app_state.select_site(_app, pick.id))
        st.rerun()


def _render_feed() -> None:
    user = _app.user
    assert user is not None
    with st.expander(t("btn_post", _lang)):
        caption = st.text_area("Caption", key="new_caption")
        site_pick = st.selectbox(
            "Dive site",
            options=[None, *_known_sites()],
            format_func=lambda s: "-" if s is None else s.name,
            key="new_post_site",
        )
        if st.button(t("btn_post", _lang), key="new_post"):
            try:
                st.session_state.posts = create_post(
                    st.session_state.posts, user, site_pick, caption
                )
                st.rerun()
            except FeedError as e:
                st.error(str(e))

    posts = list(st.session_state.posts)
    for i, post in enumerate(posts):
        st.markdown(
            f"**{html.escape(post.user_name)}** · {html.escape(post.site_name)}"
            f" · {format_time_ago(post.created_at)}"
        )
        st.write(post.caption)
        liked = post.id in st.session_state.liked
        if st.button(f"♥ {post.likes_count}", key=f"like_{post.id}", type="primary" if liked else "secondary"):
            posts[i], now_liked = toggle_like(post, liked)
            st.session_state.liked = (
                st.session_state.liked | {post.id} if now_liked else st.session_state.liked - {post.id}
            )
            st.session_state.posts = tuple(posts)
            st.rerun()
        for comment in post.comments:
            st.caption(f"{comment.user_name}: {comment.comment}")
        text = st.text_input(t("btn_comment", _lang), key=f"comment_{post.id}")
        if st.button(t("btn_comment", _lang), key=f"send_{post.id}"):
            try:
                posts[i] = add_comment(post, user.name, text)
                st.session_state.posts = tuple(posts)
                st.rerun()
            except FeedError as e:
                st.error(str(e))
        st.divider()


def _number(label: str, key: str) -> float | None:
    return parse_number(st.text_input(label, key=key))


def _render_tools() -> None:
    st.header(t("tools_title", _lang))
    gas_tab, sac_tab, ndl_tab, mod_tab, weight_tab = st.tabs(
        [t(k, _lang) for k in ("tab_gas", "tab_sac", "tab_ndl", "tab_mod", "tab_weight")]
    )
    with gas_tab:
        data = GasDurationInput(
            tank_size=_number("Tank Size (L)", "gas_tank"),
            start_pressure=_number("Start Pressure (bar)", "gas_start"),
            end_pressure=_number("Reserve Pressure (bar)", "gas_end"),
            depth=_number("Depth (m)", "gas_depth"),
        )
        if st.button(t("btn_calculate", _lang), key="calc_gas"):
            minutes = gas_duration(data)
            if minutes is None:
                st.warning(t("result_missing", _lang))
            else:
                st.success(t("result_gas", _lang).format(value=minutes))
    with sac_tab:
        data = SacInput(
            air_used=_number("Air Used (L)", "sac_air"),
            depth=_number("Average Depth (m)", "sac_depth"),
            time=_number("Dive Time (min)", "sac_time"),
        )
        if st.button(t("btn_calculate", _lang), key="calc_sac"):
            sac = sac_rate(data)
            if sac is None:
                st.warning(t("result_missing", _lang))
            else:
                st.success(t("result_sac", _lang).format(value=sac, rating=sac_rating(sac)))
    with ndl_tab:
        st.table([{"Depth (m)": depth, "NDL": limit} for depth, limit in NDL_TABLE])
        st.warning(t("ndl_warning", _lang))
    with mod_tab:
        oxygen = _number("Oxygen Percentage (%)", "mod_o2")
        ppo2 = st.selectbox(
            "Max PPO2",
            options=list(PPO2_LIMITS),
            format_func=lambda v: f"{v} ({PPO2_LIMITS[v]})",
        )
        if st.button(t("btn_calculate", _lang), key="calc_mod"):
            mod = max_operating_depth(ModInput(oxygen_percentage=oxygen, max_ppo2=ppo2))
            if mod is None:
                st.warning(t("result_missing", _lang))
            else:
                st.success(t("result_mod", _lang).format(value=mod))
    with weight_tab:
        body = _number("Body Weight (kg)", "w_body")
        suit = st.selectbox("Suit Type", ["", *SUIT_TYPES])
        experience = st.selectbox("Experience Level", ["", *EXPERIENCE_LEVELS])
        saltwater = st.radio("Water Type", ["Saltwater", "Freshwater"]) == "Saltwater"
        if st.button(t("btn_calculate", _lang), key="calc_weight"):
            kg = starting_weight(
                WeightInput(body_weight=body, suit_type=suit, experience=experience, saltwater=saltwater)
            )
            if kg is None:
                st.warning(t("result_missing", _lang))
            else:
                st.success(t("result_weight", _lang).format(value=kg))
                st.caption(t("weight_note", _lang))


def _render_profile() -> None:
    user = _app.user
    assert user is not None
    profile = st.session_state.profiles.get(user.id) or default_profile(user)
    st.header(profile.name)
    st.caption(user.email)
    if profile.bio:
        st.write(profile.bio)
    details = " · ".join(part for part in (profile.location, profile.certification) if part)
    if details:
        st.caption(details)
    with st.expander(t("btn_edit_profile", _lang)):
        name = st.text_input("Name", value=profile.name, key="profile_name")
        bio = st.text_area("Bio", value=profile.bio, key="profile_bio")
        location = st.text_input("Location", value=profile.location, key="profile_location")
        certification = st.text_input(
            "Certification", value=profile.certification, key="profile_cert"
        )
        if st.button(t("btn_save", _lang), key="profile_save"):
            try:
                st.session_state.profiles = {
                    **st.session_state.profiles,
                    user.id: edit_profile(profile, name, bio, location, certification),
                }
                _flash(t("profile_updated", _lang))
                st.rerun()
            except ProfileError as e:
                st.error(str(e))
    stats = profile_stats(st.session_state.dive_log)
    c1, c2, c3 = st.columns(3)
    c1.metric("Dives", stats.total_dives)
    c2.metric("Sites", stats.unique_sites)
    c3.metric("Photos", stats.photos)
    if st.button(t("btn_log_dive", _lang), key="profile_log"):
        _update(app_state.open_dive_log(_app))
        st.rerun()
    if st.button(t("btn_settings", _lang), key="profile_settings"):
        _update(app_state.open_settings(_app))
        st.rerun()
    log_tab, saved_tab = st.tabs([t("tab_dive_log", _lang), t("tab_saved", _lang)])
    with log_tab:
        if st.session_state.dive_log:
            st.download_button(
                t("btn_export_csv", _lang),
                data=export_csv(st.session_state.dive_log),
                file_name="dive_log.csv",
                mime="text/csv",
            )
        for entry in reversed(st.session_state.dive_log):
            st.markdown(f"**{html.escape(entry.site_name)}** · {entry.date}")
            if entry.notes:
                st.caption(entry.notes)
    with saved_tab:
        if not st.session_state.saved_sites:
            st.info(t("saved_empty", _lang))
        for saved in st.session_state.saved_sites:
            _site_card(saved)
            if st.button(saved.name, key=f"saved_open_{saved.id}"):
                _update(app_state.select_site(_app, saved.id))
                st.rerun()


_SCREEN_RENDERERS = {
    "chatbot": _render_search,
    "map": _render_map,
    "feed": _render_feed,
    "tools": _render_tools,
    "profile": _render_profile,
}
_SCREEN_RENDERERS[_app.screen]()
