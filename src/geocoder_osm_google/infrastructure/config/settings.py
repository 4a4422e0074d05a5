"""ジオコーダー設定（Pydantic Settings）"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    ジオコーダー設定

    すべての項目にデフォルト値があり、環境変数が無くても動作する。
    環境変数（GEOCODER_ プレフィックス）や .env で上書きできる。
    """

    model_config = SettingsConfigDict(
        env_prefix="GEOCODER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Nominatim
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="NominatimのベースURL（search / reverse エンドポイントの親）",
    )
    nominatim_user_agent: str = Field(
        default="geocoder-osm-google/1.0",
        description="Nominatimへ送るUser-Agent（利用規約で必須）",
    )
    http_timeout: float = Field(
        default=20.0,
        description="HTTPリクエストのタイムアウト（秒）",
    )

    # Google Maps
    google_maps_api_key: Optional[str] = Field(
        default=None,
        description="Google Maps API Key（クライアントが注入されない場合のみ使用）",
    )

