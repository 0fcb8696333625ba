"""定义外部 API (API-FOOTBALL v3) 的响应信封结构。

所有端点都返回同一个信封：
    {"get": ..., "parameters": ..., "errors": ..., "results": N, "paging": {...}, "response": [...]}
这里只在边界处校验信封本身，记录内部的字段由 normalizer 的映射表处理。
"""
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

class ExternalPaging(BaseModel):
    current: int = 1
    total: int = 1

class ExternalApiResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    get: Optional[str] = None
    parameters: Union[Dict[str, Any], List[Any], None] = None
    # API-FOOTBALL 在无错误时返回 []，有错误时返回 {"token": "..."}
    errors: Union[Dict[str, Any], List[Any], None] = None
    results: Optional[int] = None
    paging: Optional[ExternalPaging] = None
    response: Optional[List[Any]] = None
