"""사용자에게 그대로 보여주는 한국어 안내/오류 메시지."""

LOCATION_REQUIRED_MESSAGE = "어디 근처에서 찾을지(주소/지역)를 입력해 주세요."
FREE_TEXT_REQUIRED_MESSAGE = "오늘 점심에 대한 생각을 한 줄 적어 주세요."
LOCATION_NOT_FOUND_MESSAGE = "입력한 주소/지역으로 위치를 찾지 못했어요."
SEARCH_FAILED_MESSAGE = "맛집(장소) 검색 중 서버에서 오류가 발생했어요."
KAKAO_KEY_MISSING_MESSAGE = "KAKAO_REST_API_KEY 가 설정되어 있지 않아요."
OPENAI_KEY_MISSING_MESSAGE = "OPENAI_API_KEY가 설정되어 있지 않아요."
MENU_RECOMMEND_FAILED_MESSAGE = "메뉴 추천 중 서버에서 오류가 발생했어요."

RECOMMENDATION_FIELDS_REQUIRED_MESSAGE = "식당 이름, 주소, 추천 이유를 모두 입력해 주세요."
RECOMMENDATION_DUPLICATE_MESSAGE = "이미 같은 이름의 식당이 등록되어 있어요."
RECOMMENDATION_INVALID_ID_MESSAGE = "잘못된 ID입니다."
RECOMMENDATION_NOT_FOUND_MESSAGE = "해당 식당을 찾지 못했어요."

INVALID_REQUEST_MESSAGE = "요청 형식이 올바르지 않아요."
INTERNAL_ERROR_MESSAGE = "서버에서 오류가 발생했어요."
