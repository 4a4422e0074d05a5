"""Nominatim (OpenStreetMap) ジオコーディング実装"""
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Optional, Union

from ..domain.enums import GeocodingDirection
from ..domain.models import GeocodeResult, GeoLocation
from ..domain.normalization import build_result, pick_nominatim_fields
from ....shared.exceptions.errors import GeocodingError, describe_error
from ....shared.http.client import DEFAULT_USER_AGENT, HTTPClient
from ....shared.logging.config import get_logger

DEFAULT_BASE_URL = "https://nominatim.openstreetmap.org"
NO_RESULTS_MESSAGE = "Nominatim Forward Geocoding failed: No results found"


class NominatimGeocoder:
    """
    Nominatim (OpenStreetMap) ジオコーディング実装

    - APIキー不要。利用規約上 1リクエスト/秒の制限があるが、制御は呼び出し側の責任
    - 正引き・逆引きのどちらでも、最後に必ず reverse エンドポイントを呼び、
      その address オブジェクトだけから正規化項目を作る
    - 公開メソッドは例外を送出せず、失敗時は理由を表す文字列を返す
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 20,
        http_client: Optional[HTTPClient] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            base_url: NominatimのベースURL
            user_agent: User-Agentヘッダー
            timeout: リクエストタイムアウト（秒）
            http_client: 外部から注入するHTTPクライアント（省略時は呼び出しごとに生成・破棄）
            logger: ロガー（省略時はモジュールロガー）
        """
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.http_client = http_client
        self.logger = logger or get_logger(__name__)

    @property
    def search_url(self) -> str:
        return f"{self.base_url}/search"

    @property
    def reverse_url(self) -> str:
        return f"{self.base_url}/reverse"

    def geocode(self, address: str) -> Union[GeocodeResult, str]:
        """
        住所をジオコーディング（search → reverse の2段階）

        Args:
            address: 住所文字列

        Returns:
            GeocodeResult、または失敗理由の文字列
        """
        return self._lookup(GeocodingDirection.FORWARD, address=address)

    def reverse_geocode(self, location: GeoLocation) -> Union[GeocodeResult, str]:
        """
        座標から住所を取得（reverse のみ）

        Args:
            location: 座標

        Returns:
            GeocodeResult、または失敗理由の文字列
        """
        return self._lookup(GeocodingDirection.REVERSE, location=location)

    def _lookup(
        self,
        direction: GeocodingDirection,
        address: Optional[str] = None,
        location: Optional[GeoLocation] = None,
    ) -> Union[GeocodeResult, str]:
        try:
            with self._client() as client:
                forward_hit: Optional[dict[str, Any]] = None

                if direction is GeocodingDirection.FORWARD:
                    forward_hit = self._search(client, address or "")
                    if forward_hit is None:
                        self.logger.error(NO_RESULTS_MESSAGE)
                        return NO_RESULTS_MESSAGE
                    location = GeoLocation(
                        lat=float(forward_hit["lat"]), long=float(forward_hit["lon"])
                    )

                if location is None:
                    raise GeocodingError("No location coordinates available")

                # 正引きでも必ず逆引きして住所項目を取得する
                reverse_data = self._reverse(client, location)

            fields = pick_nominatim_fields(reverse_data.get("address") or {})
            resolved = GeoLocation(
                lat=float(reverse_data["lat"]), long=float(reverse_data["lon"])
            )

            return build_result(
                fields,
                resolved,
                raw_response=forward_hit if forward_hit is not None else reverse_data,
            )

        except Exception as e:
            message = f"Nominatim {direction.value} Geocoding error: {describe_error(e)}"
            self.logger.error(message)
            return message

    def _search(self, client: HTTPClient, address: str) -> Optional[dict[str, Any]]:
        """search エンドポイントを呼び、最初のヒットを返す（0件ならNone）"""
        # シングルクォートはクエリを壊すことがあるので除去
        sanitized = address.replace("'", "")
        self.logger.debug(f"Nominatim search: {sanitized}")

        data = client.get_json(self.search_url, params={"format": "json", "q": sanitized})

        if not isinstance(data, list):
            raise GeocodingError(f"Unexpected search response: {data!r}")
        if not data:
            return None
        return data[0]

    def _reverse(self, client: HTTPClient, location: GeoLocation) -> dict[str, Any]:
        """reverse エンドポイントを呼び、レスポンス全体を返す"""
        self.logger.debug(f"Nominatim reverse: {location}")

        data = client.get_json(
            self.reverse_url,
            params={"format": "json", "lat": location.lat, "lon": location.long},
        )

        if not isinstance(data, dict):
            raise GeocodingError(f"Unexpected reverse response: {data!r}")
        # 該当なしの場合も HTTP 200 で {"error": "Unable to geocode"} が返る
        if "error" in data:
            raise GeocodingError(str(data["error"]))
        return data

    @contextmanager
    def _client(self) -> Iterator[HTTPClient]:
        """注入されたクライアントを使うか、この呼び出し限りのクライアントを生成する"""
        if self.http_client is not None:
            yield self.http_client
            return

        with HTTPClient(
            timeout=self.timeout, user_agent=self.user_agent, logger=self.logger
        ) as client:
            yield client
