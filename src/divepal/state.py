"""Explicit application state. Transitions are pure and return a new AppState."""

from dataclasses import dataclass, replace

from divepal.models import User

SCREENS: tuple[str, ...] = ("chatbot", "map", "feed", "tools", "profile")
PROTECTED_SCREENS: frozenset[str] = frozenset({"profile", "feed", "tools"})


@dataclass(frozen=True)
class AppState:
    screen: str = "chatbot"  # One of SCREENS
    view: str = "form"  # "form" or "results" on the chatbot screen
    selected_site_id: int | None = None
    map_center: tuple[float, float] | None = None  # (lat, lon)
    user: User | None = None
    show_settings: bool = False
    show_dive_log: bool = False
    dive_log_site_id: int | None = None
    auth_prompt: bool = False  # Sign-in dialog requested


def change_screen(state: AppState, screen: str) -> AppState:
    """Navigate to `screen`. Protected screens prompt for sign-in instead."""
    if screen not in SCREENS:
        raise ValueError(f"Unknown screen: {screen}")
    if state.user is None and screen in PROTECTED_SCREENS:
        return replace(state, auth_prompt=True)
    return replace(
        state,
        screen=screen,
        selected_site_id=None,
        map_center=None,
        show_settings=False,
        auth_prompt=False,
    )


def show_results(state: AppState) -> AppState:
    return replace(state, view="results")


def reset_search(state: AppState) -> AppState:
    return replace(state, view="form", selected_site_id=None)


def select_site(state: AppState, site_id: int) -> AppState:
    return replace(state, selected_site_id=site_id)


def back_to_results(state: AppState) -> AppState:
    return replace(state, selected_site_id=None)


def open_map(state: AppState, lat: float, lon: float) -> AppState:
    return replace(state, screen="map", map_center=(lat, lon), selected_site_id=None)


def open_settings(state: AppState, shown: bool = True) -> AppState:
    return replace(state, show_settings=shown)


def open_dive_log(state: AppState, site_id: int | None = None) -> AppState:
    """Open the dive-log form, optionally pre-filled with a site."""
    if state.user is None:
        return replace(state, auth_prompt=True)
    return replace(state, show_dive_log=True, dive_log_site_id=site_id)


def close_dive_log(state: AppState) -> AppState:
    return replace(state, show_dive_log=False, dive_log_site_id=None)


def request_sign_in(state: AppState) -> AppState:
    return replace(state, auth_prompt=True)


def dismiss_auth(state: AppState) -> AppState:
    return replace(state, auth_prompt=False)


def sign_in(state: AppState, user: User) -> AppState:
    return replace(state, user=user, auth_prompt=False)


def sign_out(state: AppState) -> AppState:
    return replace(
        state,
        user=None,
        screen="chatbot",
        show_dive_log=False,
        dive_log_site_id=None,
        show_settings=False,
    )
