"""Google Maps Geocoding API実装"""
import logging
from typing import Any, Optional, Union

import googlemaps

from ..domain.enums import GeocodingDirection
from ..domain.models import GeocodeResult, GeoLocation
from ..domain.normalization import build_result, fold_google_components
from ....shared.exceptions.errors import ConfigurationError
from ....shared.logging.config import get_logger

STATUS_ZERO_RESULTS = "ZERO_RESULTS"


class GoogleMapsGeocoder:
    """
    Google Maps Geocoding API実装

    クライアントは呼び出し側で認証済みのものを渡す。このクラスは
    認証情報を管理しない。通信エラー（TransportError、Timeout）は
    そのまま送出し、呼び出し元のファサードで文字列に変換する。
    """

    def __init__(self, client: Any, logger: Optional[logging.Logger] = None) -> None:
        """
        Args:
            client: 認証済みの googlemaps.Client（geocode / reverse_geocode を持つもの）
            logger: ロガー（省略時はモジュールロガー）
        """
        self.client = client
        self.logger = logger or get_logger(__name__)

    @classmethod
    def from_api_key(
        cls, api_key: str, logger: Optional[logging.Logger] = None
    ) -> "GoogleMapsGeocoder":
        """
        API キーから googlemaps.Client を生成

        Raises:
            ConfigurationError: クライアントの初期化に失敗した場合
        """
        try:
            client = googlemaps.Client(key=api_key, retry_over_query_limit=False)
        except Exception as e:
            raise ConfigurationError(f"Failed to initialize Google Maps client: {e}") from e
        return cls(client, logger=logger)

    def geocode(self, address: str) -> Union[GeocodeResult, str]:
        """
        住所をジオコーディング

        Args:
            address: 住所文字列（加工せずにそのまま送る）

        Returns:
            GeocodeResult、または失敗理由の文字列
        """
        self.logger.debug(f"Google geocoding address: {address}")
        try:
            results = self.client.geocode(address)
        except googlemaps.exceptions.ApiError as e:
            return self._failure(GeocodingDirection.FORWARD, e.status)

        return self._handle_results(GeocodingDirection.FORWARD, results)

    def reverse_geocode(self, location: GeoLocation) -> Union[GeocodeResult, str]:
        """
        座標から住所を取得（逆ジオコーディング）

        Args:
            location: 座標

        Returns:
            GeocodeResult、または失敗理由の文字列
        """
        self.logger.debug(f"Google reverse geocoding: {location}")
        try:
            results = self.client.reverse_geocode(location.to_google_latlng())
        except googlemaps.exceptions.ApiError as e:
            return self._failure(GeocodingDirection.REVERSE, e.status)

        return self._handle_results(GeocodingDirection.REVERSE, results)

    def _handle_results(
        self, direction: GeocodingDirection, results: Optional[list[dict[str, Any]]]
    ) -> Union[GeocodeResult, str]:
        # googlemaps は ZERO_RESULTS を例外ではなく空リストで返す
        if not results:
            return self._failure(direction, STATUS_ZERO_RESULTS)

        # 最初の結果を使用
        result = results[0]
        self.logger.debug(f"Google {direction.value} geocoding first result: {result}")

        fields = fold_google_components(result.get("address_components") or [])
        point = result["geometry"]["location"]
        location = GeoLocation(lat=float(point["lat"]), long=float(point["lng"]))

        return build_result(fields, location, raw_response=result)

    def _failure(self, direction: GeocodingDirection, status: Any) -> str:
        message = f"Google {direction.value} Geocoding failed: {status}"
        self.logger.error(message)
        return message
