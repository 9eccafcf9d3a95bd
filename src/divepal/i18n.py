"""Simple two-language (en/ko) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "다이브팔",
        "en": "DivePal",
    },
    "nav_chatbot": {
        "ko": "사이트 찾기",
        "en": "Find Sites",
    },
    "nav_map": {
        "ko": "지도",
        "en": "Map",
    },
    "nav_feed": {
        "ko": "피드",
        "en": "Feed",
    },
    "nav_tools": {
        "ko": "도구",
        "en": "Tools",
    },
    "nav_profile": {
        "ko": "프로필",
        "en": "Profile",
    },
    "q_temp_min": {
        "ko": "최저 수온은 몇 도인가요?",
        "en": "What is the minimum temperature?",
    },
    "q_temp_max": {
        "ko": "최고 수온은 몇 도인가요?",
        "en": "What is the maximum temperature?",
    },
    "q_marine_life": {
        "ko": "어떤 해양 생물을 보고 싶나요?",
        "en": "What marine life would you like to see?",
    },
    "q_coral_type": {
        "ko": "선호하는 산호 종류는?",
        "en": "What types of coral do you prefer?",
    },
    "q_visibility_min": {
        "ko": "최소 시야는 몇 미터인가요?",
        "en": "What is your minimum visibility requirement?",
    },
    "q_site_type": {
        "ko": "어떤 유형의 사이트를 탐험하고 싶나요?",
        "en": "What type of site would you like to explore?",
    },
    "q_access_difficulty": {
        "ko": "입수 방식과 난이도",
        "en": "Access type and entry difficulty",
    },
    "helper_number": {
        "ko": "숫자로 입력하거나 비워 두세요",
        "en": "Enter a number, or leave blank to skip",
    },
    "helper_list": {
        "ko": "쉼표로 구분해 입력하세요 (선택)",
        "en": "Comma-separated list (optional)",
    },
    "label_access_type": {
        "ko": "입수 방식",
        "en": "Access Type",
    },
    "label_difficulty": {
        "ko": "난이도",
        "en": "Entry Difficulty",
    },
    "btn_next": {
        "ko": "다음",
        "en": "Next",
    },
    "btn_skip": {
        "ko": "건너뛰기",
        "en": "Skip",
    },
    "btn_search": {
        "ko": "검색",
        "en": "Search",
    },
    "btn_new_search": {
        "ko": "새 검색",
        "en": "New Search",
    },
    "btn_back": {
        "ko": "뒤로",
        "en": "Back",
    },
    "btn_open_map": {
        "ko": "지도에서 보기",
        "en": "Open in Map",
    },
    "btn_log_dive": {
        "ko": "다이브 기록",
        "en": "Log a Dive",
    },
    "btn_sign_in": {
        "ko": "로그인",
        "en": "Sign In",
    },
    "btn_sign_up": {
        "ko": "가입하기",
        "en": "Sign Up",
    },
    "btn_sign_out": {
        "ko": "로그아웃",
        "en": "Sign Out",
    },
    "btn_settings": {
        "ko": "설정",
        "en": "Settings",
    },
    "btn_save_site": {
        "ko": "저장",
        "en": "Save",
    },
    "btn_saved": {
        "ko": "저장됨",
        "en": "Saved",
    },
    "btn_mark_completed": {
        "ko": "완료 표시",
        "en": "Mark Completed",
    },
    "btn_completed": {
        "ko": "완료함",
        "en": "Completed",
    },
    "marked_completed": {
        "ko": "{site}을(를) 완료한 다이브에 추가했어요",
        "en": "{site} added to your completed dives",
    },
    "unmarked_completed": {
        "ko": "{site}을(를) 완료 목록에서 뺐어요",
        "en": "{site} removed from your completed dives",
    },
    "reviews_title": {
        "ko": "리뷰 ★ {rating} ({count})",
        "en": "Reviews ★ {rating} ({count})",
    },
    "btn_write_review": {
        "ko": "리뷰 쓰기",
        "en": "Write a Review",
    },
    "btn_submit_review": {
        "ko": "리뷰 등록",
        "en": "Submit Review",
    },
    "review_submitted": {
        "ko": "경험을 공유해 주셔서 고마워요!",
        "en": "Thank you for sharing your experience!",
    },
    "btn_test_connection": {
        "ko": "연결 테스트",
        "en": "Test Connection",
    },
    "connection_ok": {
        "ko": "Supabase에 연결했어요",
        "en": "Successfully connected to Supabase",
    },
    "connection_failed": {
        "ko": "Supabase에 연결할 수 없어요 ({error})",
        "en": "Unable to connect to Supabase ({error})",
    },
    "btn_edit_profile": {
        "ko": "프로필 편집",
        "en": "Edit Profile",
    },
    "profile_updated": {
        "ko": "프로필을 저장했어요",
        "en": "Your profile information has been saved",
    },
    "tab_dive_log": {
        "ko": "다이브 로그",
        "en": "Dive Log",
    },
    "tab_saved": {
        "ko": "저장한 사이트",
        "en": "Saved Sites",
    },
    "saved_empty": {
        "ko": "아직 저장한 사이트가 없어요",
        "en": "No saved sites yet",
    },
    "btn_export_csv": {
        "ko": "CSV 내보내기",
        "en": "Export CSV",
    },
    "map_filters": {
        "ko": "필터",
        "en": "Filters",
    },
    "label_marine_life": {
        "ko": "해양 생물",
        "en": "Marine Life",
    },
    "label_site_type": {
        "ko": "사이트 유형",
        "en": "Site Type",
    },
    "label_visibility": {
        "ko": "최소 시야 (m)",
        "en": "Min Visibility (m)",
    },
    "btn_calculate": {
        "ko": "계산",
        "en": "Calculate",
    },
    "btn_save": {
        "ko": "저장",
        "en": "Save",
    },
    "btn_post": {
        "ko": "공유하기",
        "en": "Share Dive",
    },
    "btn_comment": {
        "ko": "댓글",
        "en": "Comment",
    },
    "results_title": {
        "ko": "{count}개의 다이브 사이트",
        "en": "{count} dive sites found",
    },
    "results_empty": {
        "ko": "조건에 맞는 사이트가 없어요. 조건을 줄여 다시 검색해 보세요.",
        "en": "No dive sites match your preferences. Try relaxing a few answers.",
    },
    "source_static": {
        "ko": "로컬 데이터에서 불러왔어요",
        "en": "Results loaded from local data",
    },
    "source_remote": {
        "ko": "Supabase에서 불러왔어요",
        "en": "Results loaded from Supabase",
    },
    "source_fallback": {
        "ko": "Supabase 연결 실패, 로컬 데이터를 표시합니다 ({error})",
        "en": "Supabase connection failed, showing local results ({error})",
    },
    "data_source": {
        "ko": "데이터 소스",
        "en": "Data Source",
    },
    "use_remote": {
        "ko": "Supabase 사용",
        "en": "Use live Supabase",
    },
    "auth_required": {
        "ko": "이 화면은 로그인이 필요해요",
        "en": "Please sign in to continue",
    },
    "auth_error": {
        "ko": "로그인할 수 없어요: {error}",
        "en": "Could not sign you in: {error}",
    },
    "signed_out": {
        "ko": "로그아웃했어요",
        "en": "You've been successfully signed out",
    },
    "log_saved": {
        "ko": "{site}에서의 다이브를 기록했어요",
        "en": "Your dive at {site} has been saved to your log",
    },
    "tools_title": {
        "ko": "다이브 계획 도구",
        "en": "Dive Planning Tools",
    },
    "tab_gas": {
        "ko": "공기 계산",
        "en": "Air Calc",
    },
    "tab_sac": {
        "ko": "SAC",
        "en": "SAC Rate",
    },
    "tab_ndl": {
        "ko": "NDL 표",
        "en": "NDL Ref",
    },
    "tab_mod": {
        "ko": "MOD",
        "en": "MOD Calc",
    },
    "tab_weight": {
        "ko": "웨이트",
        "en": "Weighting",
    },
    "result_gas": {
        "ko": "예상 시간: {value}분",
        "en": "Estimated duration: {value} minutes",
    },
    "result_sac": {
        "ko": "SAC: {value} L/min ({rating})",
        "en": "Your SAC rate: {value} L/min ({rating})",
    },
    "result_mod": {
        "ko": "최대 운용 수심: {value}m",
        "en": "Maximum operating depth: {value}m",
    },
    "result_weight": {
        "ko": "예상 웨이트: {value}kg",
        "en": "Estimated weight: {value}kg",
    },
    "result_missing": {
        "ko": "값을 모두 올바르게 입력하세요",
        "en": "Fill in every field with a valid value",
    },
    "ndl_warning": {
        "ko": "참고용 값입니다. 실제 계획에는 다이브 컴퓨터나 테이블을 사용하세요.",
        "en": "Reference values only. Always use your dive computer or tables for actual dive planning.",
    },
    "weight_note": {
        "ko": "시작값입니다. 부력 점검 후 조정하세요.",
        "en": "This is a starting point. Adjust based on a buoyancy check.",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
