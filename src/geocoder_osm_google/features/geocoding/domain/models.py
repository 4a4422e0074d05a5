"""ジオコーディング機能のドメインモデル"""
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional

from ....shared.exceptions.errors import ValidationError

INVALID_LOCATION_MESSAGE = "Invalid location object: must contain lat and long properties"


@dataclass(frozen=True)
class GeoLocation:
    """地理的位置（緯度 [-90, 90]、経度 [-180, 180]）"""

    lat: float  # 緯度
    long: float  # 経度

    def __repr__(self) -> str:
        return f"GeoLocation(lat={self.lat}, long={self.long})"

    @classmethod
    def from_value(cls, value: Any) -> "GeoLocation":
        """
        GeoLocation、lat/long キーを持つ辞書、または lat/long 属性を持つ
        オブジェクトから生成

        Raises:
            ValidationError: 緯度・経度のどちらかが欠けている、または数値でない場合
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, Mapping):
            lat = value.get("lat")
            long = value.get("long")
        else:
            lat = getattr(value, "lat", None)
            long = getattr(value, "long", None)

        if lat is None or long is None or isinstance(lat, bool) or isinstance(long, bool):
            raise ValidationError(INVALID_LOCATION_MESSAGE)

        try:
            return cls(lat=float(lat), long=float(long))
        except (TypeError, ValueError) as e:
            raise ValidationError(INVALID_LOCATION_MESSAGE) from e

    def to_google_latlng(self) -> dict[str, float]:
        """Google Maps APIの形式（long ではなく lng）に変換"""
        return {"lat": self.lat, "lng": self.long}


@dataclass
class GeocodeResult:
    """
    プロバイダー非依存の正規化済みジオコーディング結果

    プロバイダーが返さなかった項目は空文字列になる（Noneにはならない）。
    """

    location: GeoLocation  # 解決された座標（入力値から多少ずれることがある）
    nation: str = ""  # 国
    province: str = ""  # 第一級行政区画（州・都道府県）
    county: str = ""  # 第二級行政区画（末尾の " County" は除去済み）
    town: str = ""  # 市町村
    borough: str = ""  # 区
    street: str = ""  # 番地 + 通り名
    zip: str = ""  # 郵便番号
    raw_response: Optional[dict[str, Any]] = None  # プロバイダーの生レスポンス

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return {
            "nation": self.nation,
            "province": self.province,
            "county": self.county,
            "town": self.town,
            "borough": self.borough,
            "street": self.street,
            "zip": self.zip,
            "location": {"lat": self.location.lat, "long": self.location.long},
            "raw_response": self.raw_response,
        }
