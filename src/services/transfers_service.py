"""
TransfersService - 转会服务层

职责：
1. 聚合热门球队的转会记录（API-FOOTBALL，并发拉取，不落库）
2. 转会实体的 CRUD（本地 DB）

注意：
- 聚合时单支球队失败只影响该球队（替换为空列表），不影响整体结果
- 所有 DB 查询都预加载 player / from_team / to_team
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from datetime import date
from typing import Any, Callable, Dict, List, Optional, Sequence

import httpx
from pydantic import ValidationError
from sqlalchemy import select, update, delete, desc
from sqlalchemy.orm import selectinload

from src.infra.db.models import Transfer
from src.infra.db.session import get_async_session
from src.services.api.schemas.transfer import AggregatedTransfer
from src.services.config import transfer_config
from src.services.normalizer import AGGREGATED_TRANSFER, classify_fee, pluck, reshape
from src.shared.api_football_client import ApiFootballClient
from src.shared.exceptions import InFootballError, NotFoundError

logger = logging.getLogger(__name__)


def _parse_transfer_date(value: Optional[str]) -> Optional[date]:
    """上游日期形如 2024-07-01，偶尔缺失或格式异常"""
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def sort_by_transfer_date(transfers: List[AggregatedTransfer]) -> List[AggregatedTransfer]:
    """按转会日期倒序，无法解析的日期排在最后"""
    dated = []
    undated = []
    for transfer in transfers:
        parsed = _parse_transfer_date(transfer.transfer_date)
        if parsed is None:
            undated.append(transfer)
        else:
            dated.append((parsed, transfer))
    dated.sort(key=lambda pair: pair[0], reverse=True)
    return [transfer for _, transfer in dated] + undated


class TransfersService:
    """
    转会服务

    popular_team_ids 由配置注入，聚合时只查询前 TEAMS_TO_QUERY 支
    """

    def __init__(
        self,
        client: ApiFootballClient,
        popular_team_ids: Sequence[int],
        loan_label: str,
        session_factory: Callable = get_async_session,
    ):
        self._client = client
        self._popular_team_ids = list(popular_team_ids)
        self._loan_label = loan_label
        self._session_factory = session_factory
        self._config = transfer_config

    # ==================== 上游聚合 ====================

    def _flatten(self, team_transfers: List[Dict[str, Any]]) -> List[AggregatedTransfer]:
        """把 [{player, transfers: [...]}, ...] 展平为逐条转会"""
        results = []
        for player_data in team_transfers:
            player = pluck(player_data, "player")
            transfers = pluck(player_data, "transfers")
            if not isinstance(player, dict) or not isinstance(transfers, list):
                logger.debug(f"Skipping malformed transfer record: {player_data!r:.200}")
                continue
            for transfer in transfers:
                if not isinstance(transfer, dict):
                    continue
                record = {"player": player, "transfer": transfer}
                fields = reshape(record, AGGREGATED_TRANSFER)
                player_id = pluck(player, "id")
                transfer_date = pluck(transfer, "date")
                try:
                    results.append(AggregatedTransfer(
                        id=f"{'' if player_id is None else player_id}-{transfer_date or ''}",
                        fee=classify_fee(pluck(transfer, "type"), self._loan_label),
                        **fields,
                    ))
                except ValidationError as e:
                    logger.debug(f"Skipping malformed transfer of player {player_id}: {e}")
        return results

    async def _fetch_team_transfers(self, team_id: int) -> List[AggregatedTransfer]:
        """拉取单支球队的转会；任何失败都替换为空列表"""
        try:
            team_transfers = await self._client.fetch("/transfers", {"team": str(team_id)})
            return self._flatten(team_transfers)
        except (InFootballError, httpx.HTTPError, ValueError) as e:
            logger.warning(f"Transfers for team {team_id} unavailable, skipping: {e}")
            return []

    async def find_all_from_api(self) -> List[AggregatedTransfer]:
        """
        聚合热门球队的最新转会

        Returns:
            按日期倒序、最多 MAX_AGGREGATED_TRANSFERS 条
        """
        team_ids = self._popular_team_ids[:self._config.TEAMS_TO_QUERY]
        results = await asyncio.gather(*(self._fetch_team_transfers(team_id) for team_id in team_ids))

        all_transfers = [transfer for team_transfers in results for transfer in team_transfers]
        logger.info(f"Aggregated {len(all_transfers)} transfers from {len(team_ids)} teams")

        return sort_by_transfer_date(all_transfers)[:self._config.MAX_AGGREGATED_TRANSFERS]

    # ==================== 本地 CRUD ====================

    @staticmethod
    def _with_relations(query):
        return query.options(
            selectinload(Transfer.player),
            selectinload(Transfer.from_team),
            selectinload(Transfer.to_team),
        )

    async def create(self, transfer_data: Dict[str, Any]) -> Transfer:
        transfer = Transfer(id=str(uuid.uuid4()), **transfer_data)
        async with self._session_factory() as session:
            session.add(transfer)
            await session.commit()
        logger.info(f"Transfer created: {transfer.id}")
        return await self.find_one(transfer.id)

    async def find_all(self) -> List[Transfer]:
        async with self._session_factory() as session:
            result = await session.execute(
                self._with_relations(select(Transfer)).order_by(desc(Transfer.transfer_date))
            )
            return list(result.scalars().all())

    async def find_one(self, transfer_id: str) -> Transfer:
        """
        Raises:
            NotFoundError: 无此 ID
        """
        async with self._session_factory() as session:
            result = await session.execute(
                self._with_relations(select(Transfer)).where(Transfer.id == transfer_id)
            )
            transfer = result.scalar_one_or_none()

        if transfer is None:
            raise NotFoundError(f"Fichaje con ID {transfer_id} no encontrado")
        return transfer

    async def find_by_player(self, player_id: str) -> List[Transfer]:
        async with self._session_factory() as session:
            result = await session.execute(
                self._with_relations(select(Transfer))
                .where(Transfer.player_id == player_id)
                .order_by(desc(Transfer.transfer_date))
            )
            return list(result.scalars().all())

    async def find_by_season(self, season: str) -> List[Transfer]:
        async with self._session_factory() as session:
            result = await session.execute(
                self._with_relations(select(Transfer))
                .where(Transfer.season == season)
                .order_by(desc(Transfer.transfer_fee).nulls_last())
            )
            return list(result.scalars().all())

    async def find_top_transfers(self, limit: Optional[int] = None) -> List[Transfer]:
        limit = limit or self._config.DEFAULT_TOP_LIMIT
        async with self._session_factory() as session:
            result = await session.execute(
                self._with_relations(select(Transfer))
                .order_by(desc(Transfer.transfer_fee).nulls_last())
                .limit(limit)
            )
            return list(result.scalars().all())

    async def update(self, transfer_id: str, transfer_data: Dict[str, Any]) -> Transfer:
        """
        Raises:
            NotFoundError: 无此 ID
        """
        if transfer_data:
            async with self._session_factory() as session:
                await session.execute(
                    update(Transfer).where(Transfer.id == transfer_id).values(**transfer_data)
                )
                await session.commit()
        return await self.find_one(transfer_id)

    async def remove(self, transfer_id: str) -> None:
        """
        Raises:
            NotFoundError: 无此 ID
        """
        async with self._session_factory() as session:
            result = await session.execute(delete(Transfer).where(Transfer.id == transfer_id))
            await session.commit()

        if result.rowcount == 0:
            raise NotFoundError(f"Fichaje con ID {transfer_id} no encontrado")
        logger.info(f"Transfer removed: {transfer_id}")
