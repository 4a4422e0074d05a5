"""住所項目の正規化

プロバイダーごとに項目名は異なるが、出力スキーマは共通。
" County" 除去と番地の連結はここでのみ行う。
"""
from collections.abc import Iterable, Mapping
from typing import Any, Optional

from .models import GeocodeResult, GeoLocation

COUNTY_SUFFIX = " County"

# Google の address_components の type タグ → 中間項目キー
GOOGLE_COMPONENT_FIELDS: dict[str, str] = {
    "country": "nation",
    "administrative_area_level_1": "province",
    "administrative_area_level_2": "county",
    "locality": "town",
    "sublocality_level_1": "borough",
    "street_number": "house_number",
    "route": "road",
    "postal_code": "zip",
}

# 中間項目キー → Nominatim の address キー（先頭から順に採用）
NOMINATIM_ADDRESS_FIELDS: dict[str, tuple[str, ...]] = {
    "nation": ("country",),
    "province": ("state",),
    "county": ("county",),
    "town": ("town", "city"),
    "borough": ("borough",),
    "house_number": ("house_number",),
    "road": ("road",),
    "zip": ("postcode",),
}


def remove_county_suffix(county: str) -> str:
    """
    末尾の " County" を1つだけ除去

    >>> remove_county_suffix("Loudoun County")
    'Loudoun'
    >>> remove_county_suffix("Loudoun")
    'Loudoun'
    """
    if county.endswith(COUNTY_SUFFIX):
        return county[: -len(COUNTY_SUFFIX)]
    return county


def join_street(house_number: str, road: str) -> str:
    """番地と通り名をスペースで連結し、前後の空白を除去"""
    return f"{house_number} {road}".strip()


def fold_google_components(components: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """
    Google の address_components を中間項目に畳み込む

    1つのコンポーネントが複数のタグを持つことがある。既知のタグはそれぞれ
    対応する項目に割り当て、未知のタグは無視する。同じタグが複数回現れた
    場合は後のものが優先される。
    """
    fields: dict[str, str] = {}
    for component in components:
        long_name = component.get("long_name") or ""
        for tag in component.get("types") or []:
            field = GOOGLE_COMPONENT_FIELDS.get(tag)
            if field:
                fields[field] = long_name
    return fields


def pick_nominatim_fields(address: Mapping[str, Any]) -> dict[str, str]:
    """Nominatim の address オブジェクトから中間項目を取り出す"""
    fields: dict[str, str] = {}
    for field, keys in NOMINATIM_ADDRESS_FIELDS.items():
        for key in keys:
            value = address.get(key)
            if value:
                fields[field] = str(value)
                break
    return fields


def build_result(
    fields: Mapping[str, str],
    location: GeoLocation,
    raw_response: Optional[dict[str, Any]] = None,
) -> GeocodeResult:
    """
    中間項目から正規化済みの GeocodeResult を組み立てる

    Args:
        fields: fold_google_components / pick_nominatim_fields の結果
        location: 解決された座標
        raw_response: プロバイダーの生レスポンス

    Returns:
        GeocodeResult: 欠けている項目は空文字列
    """
    return GeocodeResult(
        nation=fields.get("nation", ""),
        province=fields.get("province", ""),
        county=remove_county_suffix(fields.get("county", "")),
        town=fields.get("town", ""),
        borough=fields.get("borough", ""),
        street=join_street(fields.get("house_number", ""), fields.get("road", "")),
        zip=fields.get("zip", ""),
        location=location,
        raw_response=raw_response,
    )
