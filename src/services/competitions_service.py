"""
CompetitionsService - 赛事数据服务层

职责：
1. 联赛列表 / 单个联赛查询
2. 积分榜、射手榜、未来赛程
3. 未指定赛季时先查询联赛元数据确定赛季（两次上游请求）

注意：
- 所有数据实时来自 API-FOOTBALL，不落库
- 字段转换统一交给 normalizer 的映射表
"""
from __future__ import annotations

import logging
from typing import List, Optional

from src.services.api.schemas.competition import (
    Competition,
    CompetitionSummary,
    Standings,
    StandingRow,
    TopScorer,
    UpcomingMatch,
)
from src.services.config import competition_config
from src.services.normalizer import (
    COMPETITION,
    STANDINGS_COMPETITION,
    STANDING_ROW,
    TOP_SCORER,
    UPCOMING_MATCH,
    pluck,
    reshape,
)
from src.shared.api_football_client import ApiFootballClient
from src.shared.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class CompetitionsService:
    """
    赛事数据服务

    season 参数均为可选；缺省时使用 find_one_from_api 返回的赛季
    """

    def __init__(self, client: ApiFootballClient, default_season: str):
        self._client = client
        self._default_season = default_season
        self._config = competition_config

    def _to_competition(self, item: dict) -> Competition:
        return Competition(**reshape(item, COMPETITION, defaults={"season": self._default_season}))

    # ==================== 联赛 ====================

    async def find_all_from_api(self, country: Optional[str] = None) -> List[Competition]:
        """
        获取当前进行中的联赛列表

        Args:
            country: 国家名过滤（可选，由上游过滤）
        """
        params = {
            "current": "true",
            "type": self._config.LEAGUE_TYPE,
        }
        if country:
            params["country"] = country

        leagues = await self._client.fetch("/leagues", params)
        return [self._to_competition(item) for item in leagues]

    async def find_one_from_api(self, competition_id: str) -> Competition:
        """
        按 ID 获取单个联赛

        Raises:
            NotFoundError: 上游返回空列表
        """
        leagues = await self._client.fetch("/leagues", {"id": competition_id})
        if not leagues:
            raise NotFoundError("Competición no encontrada")
        return self._to_competition(leagues[0])

    async def resolve_season(self, competition_id: str, season: Optional[str] = None) -> str:
        """未指定赛季时，取联赛元数据中的赛季"""
        if season:
            return season
        competition = await self.find_one_from_api(competition_id)
        logger.info(f"Resolved season {competition.season} for competition {competition_id}")
        return competition.season

    # ==================== 积分榜 ====================

    async def get_standings(self, competition_id: str, season: Optional[str] = None) -> Standings:
        """
        获取积分榜

        上游无数据时返回空积分榜（不是错误）；
        多分组联赛只取第一组
        """
        current_season = await self.resolve_season(competition_id, season)

        standings = await self._client.fetch("/standings", {
            "league": competition_id,
            "season": current_season,
        })
        if not standings:
            return Standings(standings=[])

        league_data = pluck(standings[0], "league") or {}
        rows = pluck(league_data, "standings.0") or []

        return Standings(
            competition=CompetitionSummary(**reshape(league_data, STANDINGS_COMPETITION)),
            standings=[StandingRow(**reshape(row, STANDING_ROW)) for row in rows],
        )

    # ==================== 射手榜 ====================

    async def get_top_scorers(self, competition_id: str, season: Optional[str] = None) -> List[TopScorer]:
        current_season = await self.resolve_season(competition_id, season)

        scorers = await self._client.fetch("/players/topscorers", {
            "league": competition_id,
            "season": current_season,
        })
        limit = self._config.TOP_SCORERS_LIMIT
        return [TopScorer(**reshape(item, TOP_SCORER)) for item in scorers[:limit]]

    # ==================== 赛程 ====================

    async def get_upcoming_matches(self, competition_id: str, season: Optional[str] = None) -> List[UpcomingMatch]:
        current_season = await self.resolve_season(competition_id, season)

        fixtures = await self._client.fetch("/fixtures", {
            "league": competition_id,
            "season": current_season,
            "next": str(self._config.UPCOMING_FIXTURES),
        })
        return [UpcomingMatch(**reshape(item, UPCOMING_MATCH)) for item in fixtures]
