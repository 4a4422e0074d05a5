"""ジオコーディングサービス（Geocoder ファサード）"""
import logging
from typing import Any, Optional, Union

from ..domain.enums import GeocodingDirection, GeocodingProvider
from ..domain.models import GeocodeResult, GeoLocation
from ..providers.google_maps_geocoder import GoogleMapsGeocoder
from ..providers.nominatim_geocoder import NominatimGeocoder
from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import ConfigurationError, describe_error
from ....shared.logging.config import get_logger

NO_ADDRESS_MESSAGE = "No address provided for forward geocoding"
NO_LOCATION_MESSAGE = "No location coordinates provided for reverse geocoding"

ProviderName = Union[GeocodingProvider, str]


class Geocoder:
    """
    正引き・逆引きジオコーディングのファサード

    住所文字列か座標のどちらか一方だけを生成時に保持し、以降は変更しない。
    1リクエストごとに生成して使い捨てる想定で、キャッシュや接続は保持しない。

    Usage:
        geocoder = Geocoder("1600 Pennsylvania Avenue, Washington DC")
        result = geocoder.geocode()
        if isinstance(result, str):
            logger.error(f"Geocoding failed: {result}")
        else:
            print(result.location)

        geocoder = Geocoder({"lat": 38.8976763, "long": -77.0365298})
        result = geocoder.reverse_geocode("google")
    """

    def __init__(
        self,
        address_or_location: Union[str, GeoLocation, Any],
        *,
        google_client: Any = None,
        settings: Optional[Settings] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Args:
            address_or_location: 正引き用の住所文字列、または逆引き用の座標
                （GeoLocation、lat/long キーを持つ辞書、lat/long 属性を持つオブジェクト）
            google_client: 認証済みの googlemaps.Client（省略時は設定のAPIキーから生成）
            settings: 設定（省略時は環境変数・デフォルト値から読み込む）
            logger: ロガー（省略時はモジュールロガー）

        Raises:
            ValidationError: 座標に lat または long が欠けている場合
        """
        self._address: Optional[str] = None
        self._location: Optional[GeoLocation] = None

        if isinstance(address_or_location, str):
            self._address = address_or_location
        else:
            self._location = GeoLocation.from_value(address_or_location)

        self._google_client = google_client
        self._settings = settings
        self._logger = logger or get_logger(__name__)

    @property
    def address(self) -> Optional[str]:
        return self._address

    @property
    def location(self) -> Optional[GeoLocation]:
        return self._location

    def geocode(self, provider: ProviderName = "nominatim") -> Union[GeocodeResult, str]:
        """
        正引きジオコーディング（住所 → 座標）

        Args:
            provider: 'google' または 'nominatim'（デフォルト: 'nominatim'）

        Returns:
            GeocodeResult、または失敗理由の文字列（例外は送出しない）
        """
        return self._run(GeocodingDirection.FORWARD, provider)

    def reverse_geocode(self, provider: ProviderName = "nominatim") -> Union[GeocodeResult, str]:
        """
        逆引きジオコーディング（座標 → 住所）

        Args:
            provider: 'google' または 'nominatim'（デフォルト: 'nominatim'）

        Returns:
            GeocodeResult、または失敗理由の文字列（例外は送出しない）
        """
        return self._run(GeocodingDirection.REVERSE, provider)

    def _run(
        self, direction: GeocodingDirection, provider: ProviderName
    ) -> Union[GeocodeResult, str]:
        provider_name = provider.value if isinstance(provider, GeocodingProvider) else str(provider)

        try:
            if direction is GeocodingDirection.FORWARD and not self._address:
                self._logger.warning(NO_ADDRESS_MESSAGE)
                return NO_ADDRESS_MESSAGE
            if direction is GeocodingDirection.REVERSE and self._location is None:
                self._logger.warning(NO_LOCATION_MESSAGE)
                return NO_LOCATION_MESSAGE

            adapter = self._adapter_for(provider_name)
            self._logger.info(f"{direction.value} geocoding with {provider_name}")

            if direction is GeocodingDirection.FORWARD:
                return adapter.geocode(self._address)
            return adapter.reverse_geocode(self._location)

        except Exception as e:
            message = f"{direction.value} Geocoding error with {provider_name}: {describe_error(e)}"
            self._logger.error(message)
            return message

    def _adapter_for(self, provider_name: str) -> Union[GoogleMapsGeocoder, NominatimGeocoder]:
        try:
            selected = GeocodingProvider(provider_name)
        except ValueError as e:
            raise ConfigurationError(f"Unsupported geocoding provider: {provider_name}") from e

        if selected is GeocodingProvider.GOOGLE:
            return self._google_adapter()
        return self._nominatim_adapter()

    def _get_settings(self) -> Settings:
        return self._settings or Settings()

    def _google_adapter(self) -> GoogleMapsGeocoder:
        if self._google_client is not None:
            return GoogleMapsGeocoder(self._google_client, logger=self._logger)

        api_key = self._get_settings().google_maps_api_key
        if not api_key:
            raise ConfigurationError("Google Maps client is not configured")
        return GoogleMapsGeocoder.from_api_key(api_key, logger=self._logger)

    def _nominatim_adapter(self) -> NominatimGeocoder:
        settings = self._get_settings()
        return NominatimGeocoder(
            base_url=settings.nominatim_base_url,
            user_agent=settings.nominatim_user_agent,
            timeout=settings.http_timeout,
            logger=self._logger,
        )
