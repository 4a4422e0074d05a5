"""ユニットテスト共通のフィクスチャ（記録済みのプロバイダーレスポンス）"""
from typing import Any
from unittest.mock import MagicMock

import pytest

from geocoder_osm_google.shared.http.client import HTTPClient


@pytest.fixture
def google_white_house_result() -> dict[str, Any]:
    """Google Geocoding API の結果（ホワイトハウス）"""
    return {
        "address_components": [
            {"long_name": "1600", "short_name": "1600", "types": ["street_number"]},
            {
                "long_name": "Pennsylvania Avenue Northwest",
                "short_name": "Pennsylvania Avenue NW",
                "types": ["route"],
            },
            {
                "long_name": "Northwest Washington",
                "short_name": "Northwest Washington",
                "types": ["neighborhood", "political"],
            },
            {
                "long_name": "Washington",
                "short_name": "Washington",
                "types": ["locality", "political"],
            },
            {
                "long_name": "District of Columbia",
                "short_name": "DC",
                "types": ["administrative_area_level_1", "political"],
            },
            {
                "long_name": "United States",
                "short_name": "US",
                "types": ["country", "political"],
            },
            {"long_name": "20500", "short_name": "20500", "types": ["postal_code"]},
        ],
        "formatted_address": "1600 Pennsylvania Avenue NW, Washington, DC 20500, USA",
        "geometry": {"location": {"lat": 38.8976763, "lng": -77.0365298}},
        "place_id": "ChIJGVtI4by3t4kRr51d_Qm_x58",
        "types": ["street_address"],
    }


@pytest.fixture
def nominatim_search_hit() -> dict[str, Any]:
    """Nominatim search の1件目"""
    return {
        "place_id": 295165268,
        "osm_type": "way",
        "osm_id": 238241022,
        "lat": "38.897699700000004",
        "lon": "-77.03655315",
        "display_name": "White House, 1600, Pennsylvania Avenue Northwest, Washington, District of Columbia, 20500, United States",
        "class": "office",
        "type": "government",
    }


@pytest.fixture
def nominatim_reverse_payload() -> dict[str, Any]:
    """Nominatim reverse のレスポンス"""
    return {
        "place_id": 295165268,
        "lat": "38.8976763",
        "lon": "-77.0365298",
        "display_name": "White House, 1600, Pennsylvania Avenue Northwest, Washington, District of Columbia, 20500, United States",
        "address": {
            "office": "White House",
            "house_number": "1600",
            "road": "Pennsylvania Avenue Northwest",
            "borough": "Ward 2",
            "city": "Washington",
            "state": "District of Columbia",
            "postcode": "20500",
            "country": "United States",
            "country_code": "us",
        },
    }


@pytest.fixture
def mock_http_client() -> MagicMock:
    """get_json をスタブ化したHTTPクライアント"""
    return MagicMock(spec=HTTPClient)

