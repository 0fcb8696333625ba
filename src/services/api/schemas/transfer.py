"""转会相关的 API Schema。"""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field, field_validator

from src.services.api.schemas.base import CamelModel


# ============ 上游聚合（不落库） ============

class AggregatedTransfer(CamelModel):
    """由热门球队转会记录聚合而来，id 为 "{playerId}-{date}" """
    id: str
    player_name: Optional[str] = None
    player_photo: Optional[str] = None
    from_team: Optional[str] = None
    from_team_logo: Optional[str] = None
    to_team: Optional[str] = None
    to_team_logo: Optional[str] = None
    transfer_date: Optional[str] = None
    transfer_type: str
    fee: str


# ============ 持久化实体 ============

class TeamRead(CamelModel):
    id: str
    name: str
    logo: Optional[str] = None
    country: Optional[str] = None


class PlayerRead(CamelModel):
    id: str
    name: str
    photo: Optional[str] = None
    nationality: Optional[str] = None
    position: Optional[str] = None


class TransferRead(CamelModel):
    id: str
    player: Optional[PlayerRead] = None
    from_team: Optional[TeamRead] = None
    to_team: Optional[TeamRead] = None
    transfer_date: date
    transfer_fee: Optional[Decimal] = None
    transfer_type: Optional[str] = None
    season: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TransferCreate(CamelModel):
    player_id: str
    from_team_id: Optional[str] = None
    to_team_id: str
    transfer_date: date
    transfer_fee: Optional[Decimal] = Field(default=None, ge=0)
    transfer_type: Optional[str] = None
    season: str = Field(..., min_length=4, max_length=9)


class TransferUpdate(CamelModel):
    player_id: Optional[str] = None
    from_team_id: Optional[str] = None
    to_team_id: Optional[str] = None
    transfer_date: Optional[date] = None
    transfer_fee: Optional[Decimal] = Field(default=None, ge=0)
    transfer_type: Optional[str] = None
    season: Optional[str] = Field(default=None, min_length=4, max_length=9)

    @field_validator("player_id", "to_team_id", "transfer_date", "season")
    @classmethod
    def reject_null(cls, value):
        # 这些列在库中为 NOT NULL，只能省略不能置空
        if value is None:
            raise ValueError("must not be null")
        return value
