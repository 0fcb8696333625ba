"""API-FOOTBALL 客户端：负责与第三方足球数据 API 通信。

约定：
- 每次调用都是一次全新的网络请求（无缓存、无重试）
- 任何非 2xx 响应统一抛出 UpstreamError
- 成功时只返回信封中的 response 字段
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx
from loguru import logger
from pydantic import ValidationError

from src.shared.api_football_schemas import ExternalApiResponse
from src.shared.config import Settings, get_settings
from src.shared.exceptions import UpstreamError

API_KEY_HEADER = "x-apisports-key"


class ApiFootballClient:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self.config = self._settings.service.api_football
        # 测试时注入 httpx.MockTransport
        self._transport = transport

    def _api_key(self) -> str:
        # 每次请求时读取，空 Key 不做校验，交由上游拒绝
        return self._settings.api_football_key or ""

    def build_url(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> str:
        query_string = urlencode(params or {})
        url = f"{self.config.base_url}{endpoint}"
        return f"{url}?{query_string}" if query_string else url

    async def fetch(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> List[Any]:
        """
        调用上游端点并返回 response 字段

        Args:
            endpoint: 端点路径，如 /leagues
            params: 查询参数（会被 URL 编码）

        Returns:
            信封中的 response 列表（上游缺失时为空列表）

        Raises:
            UpstreamError: 非 2xx 响应或响应体无法解析
        """
        url = self.build_url(endpoint, params)
        api_key = self._api_key()
        if not api_key:
            logger.warning("API_FOOTBALL_KEY is empty, request will likely be rejected upstream")

        logger.debug(f"Fetching URL: {url}")

        async with httpx.AsyncClient(
            transport=self._transport,
            timeout=self.config.timeout_seconds,
        ) as client:
            response = await client.get(url, headers={API_KEY_HEADER: api_key})

        logger.debug(f"Response status: {response.status_code}")

        if not response.is_success:
            logger.error(f"API-FOOTBALL error {response.status_code} on {endpoint}: {response.text}")
            raise UpstreamError(status_code=response.status_code)

        try:
            envelope = ExternalApiResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"API-FOOTBALL returned an unreadable body on {endpoint}: {e}")
            raise UpstreamError(status_code=response.status_code) from e

        if envelope.errors:
            # 上游有时以 200 返回业务错误，仅记录
            logger.warning(f"API-FOOTBALL reported errors on {endpoint}: {envelope.errors}")

        return envelope.response or []
