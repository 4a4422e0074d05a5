"""カスタム例外定義"""


class GeocoderError(Exception):
    """ジオコーダー基底例外"""

    pass


class HTTPError(GeocoderError):
    """HTTP関連のエラー"""

    pass


class GeocodingError(GeocoderError):
    """プロバイダーからの応答が不正な場合のエラー"""

    pass


class ConfigurationError(GeocoderError):
    """設定エラー"""

    pass


class ValidationError(GeocoderError):
    """入力値のバリデーションエラー（呼び出し側のプログラミングエラー）"""

    pass


def describe_error(error: BaseException) -> str:
    """例外メッセージを返す（メッセージが空なら例外クラス名）"""
    return str(error) or type(error).__name__
