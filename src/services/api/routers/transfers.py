"""转会 API 的路由定义。"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Response, status

from src.services.api.dependencies import get_transfers_service
from src.services.api.schemas.transfer import (
    AggregatedTransfer,
    TransferCreate,
    TransferRead,
    TransferUpdate,
)
from src.services.transfers_service import TransfersService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/transfers", tags=["transfers"])


# ============ 上游聚合 ============

@router.get("/api", response_model=List[AggregatedTransfer])
async def list_transfers_from_api(
    service: TransfersService = Depends(get_transfers_service),
) -> List[AggregatedTransfer]:
    """热门球队最新转会（按日期倒序，最多 50 条）"""
    return await service.find_all_from_api()


# ============ 本地数据 ============

@router.get("", response_model=List[TransferRead])
async def list_transfers(
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.find_all()


@router.get("/top", response_model=List[TransferRead])
async def list_top_transfers(
    limit: int = Query(default=10, ge=1, le=100),
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.find_top_transfers(limit)


@router.get("/season/{season}", response_model=List[TransferRead])
async def list_transfers_by_season(
    season: str,
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.find_by_season(season)


@router.get("/player/{player_id}", response_model=List[TransferRead])
async def list_transfers_by_player(
    player_id: str,
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.find_by_player(player_id)


@router.get("/{transfer_id}", response_model=TransferRead)
async def get_transfer(
    transfer_id: str,
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.find_one(transfer_id)


@router.post("", response_model=TransferRead, status_code=status.HTTP_201_CREATED)
async def create_transfer(
    payload: TransferCreate,
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.create(payload.model_dump())


@router.patch("/{transfer_id}", response_model=TransferRead)
async def update_transfer(
    transfer_id: str,
    payload: TransferUpdate,
    service: TransfersService = Depends(get_transfers_service),
):
    return await service.update(transfer_id, payload.model_dump(exclude_unset=True))


@router.delete("/{transfer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_transfer(
    transfer_id: str,
    service: TransfersService = Depends(get_transfers_service),
) -> Response:
    await service.remove(transfer_id)
    logger.info(f"Transfer {transfer_id} deleted via API")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
