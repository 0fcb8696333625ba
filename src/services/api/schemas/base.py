"""API Schema 公共基类：对外统一输出 camelCase 字段。"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Python 侧使用 snake_case，序列化为 camelCase（与前端约定一致）。"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
