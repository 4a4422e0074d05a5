"""ジオコーディング機能のEnum定義"""
from enum import Enum


class GeocodingProvider(str, Enum):
    """ジオコーディングプロバイダー（この2つのみ）"""

    GOOGLE = "google"
    NOMINATIM = "nominatim"


class GeocodingDirection(str, Enum):
    """ジオコーディングの方向（値はエラーメッセージに埋め込まれる）"""

    FORWARD = "Forward"  # 住所 → 座標
    REVERSE = "Reverse"  # 座標 → 住所
