import pytest

from lunch_center.core.exceptions import UpstreamError
from lunch_center.services.geocoder import Geocoder
from tests.kakao_fakes import FakeKakaoApi


@pytest.mark.asyncio
async def test_address_search_match_is_used():
    fake = FakeKakaoApi()
    fake.address_documents = [{"address_name": "서울 관악구 은천로 11-18", "x": "126.94", "y": "37.48"}]

    coordinate = await Geocoder(fake.client()).resolve("서울 관악구 은천로 11-18")

    assert (coordinate.x, coordinate.y) == (126.94, 37.48)
    assert len(fake.requests) == 1
    assert fake.requests[0].url.params["size"] == "1"


@pytest.mark.asyncio
async def test_falls_back_to_keyword_search():
    fake = FakeKakaoApi()
    fake.keyword_documents = [{"id": "1", "place_name": "강남역 2호선", "x": "127.0", "y": "37.5"}]

    coordinate = await Geocoder(fake.client()).resolve("강남역")

    assert (coordinate.x, coordinate.y) == (127.0, 37.5)
    assert [r.url.path.rsplit("/", 1)[-1] for r in fake.requests] == ["address.json", "keyword.json"]


@pytest.mark.asyncio
async def test_unparsable_address_coordinates_fall_back():
    fake = FakeKakaoApi()
    fake.address_documents = [{"address_name": "이상한 주소", "x": "", "y": None}]
    fake.keyword_documents = [{"id": "1", "place_name": "을지로입구역", "x": "126.98", "y": "37.56"}]

    coordinate = await Geocoder(fake.client()).resolve("을지로입구")

    assert coordinate.y == 37.56


@pytest.mark.asyncio
async def test_returns_none_when_nothing_found():
    fake = FakeKakaoApi()
    assert await Geocoder(fake.client()).resolve("없는동네") is None


@pytest.mark.asyncio
async def test_provider_error_propagates():
    fake = FakeKakaoApi()
    fake.fail_status = 500
    fake.fail_body = "boom"

    with pytest.raises(UpstreamError):
        await Geocoder(fake.client()).resolve("강남역")


@pytest.mark.asyncio
async def test_nan_address_coordinates_fall_back_to_keyword_search():
    fake = FakeKakaoApi()
    fake.address_documents = [{"address_name": "좌표 없는 주소", "x": "NaN", "y": "NaN"}]
    fake.keyword_documents = [{"id": "1", "place_name": "역삼역", "x": "127.036", "y": "37.5"}]

    coordinate = await Geocoder(fake.client()).resolve("역삼역")

    assert (coordinate.x, coordinate.y) == (127.036, 37.5)
    assert [r.url.path.rsplit("/", 1)[-1] for r in fake.requests] == ["address.json", "keyword.json"]


@pytest.mark.asyncio
async def test_infinite_coordinates_are_not_a_location():
    fake = FakeKakaoApi()
    fake.address_documents = [{"address_name": "이상한 주소", "x": "inf", "y": "37.5"}]
    fake.keyword_documents = [{"id": "1", "place_name": "이상한 곳", "x": "127.0", "y": "-inf"}]

    assert await Geocoder(fake.client()).resolve("이상한 곳") is None
