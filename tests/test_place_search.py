import httpx
import pytest

from lunch_center.core.exceptions import UpstreamError
from lunch_center.schemas.search import Coordinate
from lunch_center.services.place_search import (
    MAX_PAGES,
    PlaceSearchClient,
    dedupe_by_id,
)
from lunch_center.infrastructure.kakao.dto import KakaoPlaceDocument
from tests.kakao_fakes import FakeKakaoApi, make_place, page

CENTER = Coordinate(x=127.0, y=37.5)


@pytest.mark.asyncio
async def test_search_one_sends_restaurant_radius_paging_params():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [page([make_place("1")])]

    await PlaceSearchClient(fake.client()).search_one(CENTER, "국밥 맛집")

    params = fake.search_requests()[0].url.params
    assert params["category_group_code"] == "FD6"
    assert params["radius"] == "1000"
    assert params["size"] == "15"
    assert params["page"] == "1"
    assert params["x"] == "127.0"
    assert params["y"] == "37.5"
    assert fake.search_requests()[0].headers["Authorization"] == "KakaoAK test-kakao-key"


@pytest.mark.asyncio
async def test_search_one_stops_on_is_end():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [page([make_place(str(i)) for i in range(10)], is_end=True)]

    records = await PlaceSearchClient(fake.client()).search_one(CENTER, "국밥 맛집")

    assert len(records) == 10
    assert len(fake.search_requests()) == 1


@pytest.mark.asyncio
async def test_search_one_stops_on_empty_page():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [page([make_place("1")], is_end=False), page([], is_end=False)]

    records = await PlaceSearchClient(fake.client()).search_one(CENTER, "국밥 맛집")

    assert [r.id for r in records] == ["1"]
    assert len(fake.search_requests()) == 2


@pytest.mark.asyncio
async def test_search_one_caps_at_three_pages():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [
        page([make_place(f"{p}-{i}") for i in range(15)], is_end=False) for p in range(5)
    ]

    records = await PlaceSearchClient(fake.client()).search_one(CENTER, "국밥 맛집")

    assert len(fake.search_requests()) == MAX_PAGES
    assert len(records) == 45
    assert [r.url.params["page"] for r in fake.search_requests()] == ["1", "2", "3"]


@pytest.mark.asyncio
async def test_search_all_appends_suffix_and_dedupes_first_wins():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [page([make_place("X", name="첫번째"), make_place("A")])]
    fake.pages["순댓국 맛집"] = [page([make_place("X", name="두번째"), make_place("B")])]

    records = await PlaceSearchClient(fake.client()).search_all(CENTER, ["국밥", "순댓국"])

    assert fake.search_queries() == ["국밥 맛집", "순댓국 맛집"]
    assert [r.id for r in records] == ["X", "A", "B"]
    assert records[0].place_name == "첫번째"


@pytest.mark.asyncio
async def test_search_all_fails_whole_search_on_error():
    fake = FakeKakaoApi()
    fake.fail_status = 401

    with pytest.raises(UpstreamError) as exc_info:
        await PlaceSearchClient(fake.client()).search_all(CENTER, ["국밥"])

    assert "Kakao API error 401" in exc_info.value.message
    assert "AccessDeniedError: cannot access" in exc_info.value.message


@pytest.mark.asyncio
async def test_search_all_fails_when_later_page_fails_after_results():
    fake = FakeKakaoApi()
    fake.pages["국밥 맛집"] = [page([make_place("1")], is_end=True)]
    fake.pages["순댓국 맛집"] = [
        page([make_place("2")], is_end=False),
        httpx.Response(502, text="bad gateway"),
    ]

    with pytest.raises(UpstreamError) as exc_info:
        await PlaceSearchClient(fake.client()).search_all(CENTER, ["국밥", "순댓국"])

    assert exc_info.value.message == "Kakao API error 502 - bad gateway"
    assert [r.url.params["page"] for r in fake.search_requests()] == ["1", "1", "2"]


@pytest.mark.asyncio
async def test_non_json_body_is_upstream_error():
    fake = FakeKakaoApi()
    fake.raw_text = "<html>점검 중</html>"

    with pytest.raises(UpstreamError) as exc_info:
        await PlaceSearchClient(fake.client()).search_one(CENTER, "국밥 맛집")

    assert exc_info.value.message == "맛집(장소) 검색 중 서버에서 오류가 발생했어요."
    assert exc_info.value.upstream_status == 200


def test_dedupe_by_id():
    records = [KakaoPlaceDocument(**make_place(pid)) for pid in ["1", "2", "1", "3", "2"]]
    assert [r.id for r in dedupe_by_id(records)] == ["1", "2", "3"]
