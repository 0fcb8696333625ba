"""领域异常定义。

只区分两类错误：
1. UpstreamError：API-FOOTBALL 返回非 2xx（对应 HTTP 502）
2. NotFoundError：按 ID 查询无匹配记录（对应 HTTP 404）
"""
from __future__ import annotations

from typing import Optional


class InFootballError(Exception):
    """所有领域异常的基类"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(InFootballError):
    """上游 API 调用失败（不区分 4xx / 5xx / 限流 / 认证）"""

    def __init__(
        self,
        message: str = "Error al obtener datos de API-FOOTBALL",
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        # 仅用于日志诊断，调用方不应据此分支
        self.status_code = status_code


class NotFoundError(InFootballError):
    """按 ID 查询时未找到记录"""
