"""기분/맛 표현과 메뉴 이름을 검색 키워드로 바꾸는 규칙 테이블."""
from typing import Dict, Iterable, List, Set

MAX_KEYWORDS = 4

# 기분/맛 표현 -> 메뉴 카테고리. 순서가 곧 확장 우선순위.
TASTE_MENU_TABLE: Dict[str, List[str]] = {
    "매운": ["김치찌개", "짬뽕", "마라탕", "떡볶이"],
    "얼큰": ["김치찌개", "짬뽕", "육개장", "부대찌개"],
    "해장": ["해장국", "콩나물국밥", "순댓국", "짬뽕"],
    "국물": ["국밥", "칼국수", "쌀국수", "찌개"],
    "뜨끈": ["국밥", "순댓국", "칼국수", "갈비탕"],
    "시원한": ["냉면", "막국수", "물회", "콩국수"],
    "가벼운": ["샐러드", "포케", "샌드위치", "쌀국수"],
    "가볍게": ["샐러드", "포케", "샌드위치", "김밥"],
    "다이어트": ["샐러드", "포케", "샤브샤브"],
    "든든": ["국밥", "돈까스", "제육볶음", "백반"],
    "고기": ["삼겹살", "제육볶음", "불고기", "갈비탕"],
    "간단": ["김밥", "덮밥", "샌드위치", "분식"],
    "빨리": ["김밥", "덮밥", "햄버거", "분식"],
    "느끼": ["파스타", "피자", "크림리조또"],
    "달달": ["불고기", "찜닭", "돈까스"],
    "비 오는": ["칼국수", "수제비", "파전"],
    "스트레스": ["마라탕", "떡볶이", "매운갈비찜"],
    "회식": ["삼겹살", "갈비", "중식"],
}

# 자유 텍스트에 직접 등장하는 메뉴/카테고리 이름.
MENU_KEYWORDS: List[str] = [
    "김치찌개", "된장찌개", "부대찌개", "순두부찌개", "찌개",
    "돼지국밥", "콩나물국밥", "국밥", "순댓국", "해장국", "갈비탕", "설렁탕",
    "칼국수", "쌀국수", "잔치국수", "국수", "냉면", "막국수", "우동", "라멘",
    "짬뽕", "짜장면", "마라탕", "중식",
    "초밥", "돈까스", "일식",
    "파스타", "피자", "햄버거", "버거", "양식",
    "샐러드", "포케", "샌드위치",
    "떡볶이", "김밥", "분식",
    "제육볶음", "불고기", "삼겹살", "백반", "비빔밥", "덮밥", "카레", "한식",
    "치킨", "닭갈비", "수제비",
]


def extract_taste_phrases(text: str) -> Set[str]:
    """텍스트에 포함된 기분/맛 표현 (대소문자 구분, 부분 문자열 일치)."""
    return {phrase for phrase in TASTE_MENU_TABLE if phrase in text}


def expand_to_menu_categories(phrases: Iterable[str]) -> List[str]:
    matched = set(phrases)
    categories: List[str] = []
    for phrase, menus in TASTE_MENU_TABLE.items():
        if phrase not in matched:
            continue
        for menu in menus:
            if menu not in categories:
                categories.append(menu)
    return categories[:MAX_KEYWORDS]


def extract_menu_keywords(text: str) -> List[str]:
    """
    텍스트에 등장하는 메뉴 이름. 긴 이름부터 확인해서
    '부대찌개'처럼 구체적인 메뉴가 '찌개' 같은 상위 카테고리보다 앞에 온다.
    """
    candidates = sorted(MENU_KEYWORDS, key=len, reverse=True)
    return [keyword for keyword in candidates if keyword in text][:MAX_KEYWORDS]
