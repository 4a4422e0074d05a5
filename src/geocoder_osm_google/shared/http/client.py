"""HTTPクライアント"""

import logging
from typing import Any, Optional

import requests

from ..exceptions.errors import HTTPError
from ..logging.config import get_logger

DEFAULT_USER_AGENT = "geocoder-osm-google/1.0"


class HTTPClient:
    """
    HTTPクライアント

    Features:
    - タイムアウト設定
    - User-Agentヘッダー（Nominatimの利用規約で必須）
    - セッション管理

    リトライは行わない。失敗はすべて HTTPError として呼び出し側に返し、
    ここでは debug レベルでのみ記録する。
    """

    def __init__(
        self,
        timeout: float = 20,
        user_agent: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Args:
            timeout: リクエストタイムアウト（秒）
            user_agent: User-Agentヘッダー
            logger: ロガー（省略時はモジュールロガー）
        """
        self.timeout = timeout
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.logger = logger or get_logger(__name__)

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()
        session.headers.update({"User-Agent": self.user_agent})
        return session

    def get(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> requests.Response:
        """
        GETリクエスト

        Args:
            url: リクエストURL
            params: クエリパラメータ（URLエンコードはrequestsが行う）
            headers: 追加ヘッダー

        Returns:
            レスポンスオブジェクト

        Raises:
            HTTPError: 通信失敗、または2xx以外のステータス
        """
        try:
            self.logger.debug(f"GET request to {url} params={params}")
            response = self.session.get(
                url,
                params=params,
                headers=headers,
                timeout=self.timeout,
            )

            response.raise_for_status()
            self.logger.debug(f"GET request successful: {url} (status={response.status_code})")
            return response

        except requests.RequestException as e:
            self.logger.debug(f"GET request failed: {url} - {e}")
            raise HTTPError(f"Failed to GET {url}: {e}") from e

    def get_json(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """
        GETリクエストを送信し、JSONボディを返す

        Raises:
            HTTPError: 通信失敗、2xx以外のステータス、またはJSONとして解釈できないボディ
        """
        response = self.get(url, params=params, headers=headers)
        try:
            return response.json()
        except ValueError as e:
            self.logger.debug(f"Invalid JSON response: {url} - {e}")
            raise HTTPError(f"Invalid JSON from {url}: {e}") from e

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            self.logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
