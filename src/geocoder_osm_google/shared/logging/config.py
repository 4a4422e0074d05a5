"""ロギング設定

ライブラリはルートロガーを設定しない。ハンドラーやレベルの設定は
利用するアプリケーション側で行う。
"""
import logging


def get_logger(name: str) -> logging.Logger:
    """
    指定名のロガーを取得

    Args:
        name: ロガー名（通常は__name__を指定）

    Returns:
        ロガーインスタンス
    """
    return logging.getLogger(name)
