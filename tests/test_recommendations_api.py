import pytest

from lunch_center.core.exceptions import InvalidRequestError
from lunch_center.services.recommendation_service import parse_recommendation_id


def _create(client, name="김치찌개집", **extra):
    body = {"name": name, "address": "서울 강남구 테헤란로 1", "reason": "국물이 진해요"}
    body.update(extra)
    return client.post("/api/frommer-recommendations", json=body)


def test_create_and_list(client):
    resp = _create(client, kakaoUrl="http://place.map.kakao.com/1", categories=["음식점"])

    assert resp.status_code == 201
    created = resp.json()
    assert created["name"] == "김치찌개집"
    assert created["kakao_url"] == "http://place.map.kakao.com/1"
    assert created["categories"] == ["음식점"]
    assert created["likes"] == 0

    rows = client.get("/api/frommer-recommendations").json()
    assert [r["id"] for r in rows] == [created["id"]]


def test_create_trims_and_requires_fields(client):
    resp = client.post(
        "/api/frommer-recommendations",
        json={"name": "  ", "address": "서울", "reason": "맛있어요"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "식당 이름, 주소, 추천 이유를 모두 입력해 주세요."}


def test_duplicate_name_is_conflict(client):
    assert _create(client, name="Pasta House").status_code == 201

    resp = _create(client, name="  pasta house ")

    assert resp.status_code == 409
    assert resp.json() == {"error": "이미 같은 이름의 식당이 등록되어 있어요."}


def test_list_latest_first_and_filter_by_category(client):
    first = _create(client, name="첫번째", categories=["카페"]).json()
    second = _create(client, name="두번째", categories=["음식점"]).json()

    rows = client.get("/api/frommer-recommendations").json()
    assert [r["id"] for r in rows] == [second["id"], first["id"]]

    cafes = client.get("/api/frommer-recommendations", params={"category": "카페"}).json()
    assert [r["id"] for r in cafes] == [first["id"]]


def test_like_increments_and_sort_by_likes(client):
    first = _create(client, name="첫번째").json()
    _create(client, name="두번째")

    resp = client.post("/api/frommer-recommendations/like", json={"id": first["id"]})
    assert resp.status_code == 200
    assert resp.json()["likes"] == 1

    resp = client.post("/api/frommer-recommendations/like", json={"id": str(first["id"]), "delta": 1})
    assert resp.json()["likes"] == 2

    rows = client.get("/api/frommer-recommendations", params={"sort": "likes"}).json()
    assert rows[0]["id"] == first["id"]


def test_unlike_never_goes_below_zero(client):
    created = _create(client).json()

    resp = client.post("/api/frommer-recommendations/like", json={"id": created["id"], "delta": -1})

    assert resp.status_code == 200
    assert resp.json()["likes"] == 0


def test_like_invalid_id(client):
    resp = client.post("/api/frommer-recommendations/like", json={"id": "abc"})

    assert resp.status_code == 400
    assert resp.json() == {"error": "잘못된 ID입니다."}


def test_like_unknown_id(client):
    resp = client.post("/api/frommer-recommendations/like", json={"id": 999})

    assert resp.status_code == 404
    assert resp.json() == {"error": "해당 식당을 찾지 못했어요."}


def test_like_accepts_whole_number_float_id(client):
    created = _create(client).json()

    resp = client.post("/api/frommer-recommendations/like", json={"id": float(created["id"])})

    assert resp.status_code == 200
    assert resp.json()["likes"] == 1


@pytest.mark.parametrize("raw_id, expected", [(7, 7), ("7", 7), (" 7 ", 7), (7.0, 7), ("7.0", 7), ("12abc", 12)])
def test_parse_recommendation_id_reads_leading_integer(raw_id, expected):
    assert parse_recommendation_id(raw_id) == expected


@pytest.mark.parametrize("raw_id", ["abc", "", None, True, [1]])
def test_parse_recommendation_id_rejects_non_numbers(raw_id):
    with pytest.raises(InvalidRequestError):
        parse_recommendation_id(raw_id)
