"""赛事 API 的路由定义（数据实时来自 API-FOOTBALL）。"""
from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from src.services.api.dependencies import get_competitions_service
from src.services.api.schemas.competition import Competition, Standings, TopScorer, UpcomingMatch
from src.services.competitions_service import CompetitionsService

router = APIRouter(prefix="/competitions", tags=["competitions"])


@router.get("", response_model=List[Competition])
async def list_competitions(
    country: Optional[str] = Query(default=None, description="国家名，如 Spain"),
    service: CompetitionsService = Depends(get_competitions_service),
) -> List[Competition]:
    return await service.find_all_from_api(country=country)


@router.get("/{competition_id}", response_model=Competition)
async def get_competition(
    competition_id: str,
    service: CompetitionsService = Depends(get_competitions_service),
) -> Competition:
    return await service.find_one_from_api(competition_id)


@router.get("/{competition_id}/standings", response_model=Standings, response_model_exclude_unset=True)
async def get_standings(
    competition_id: str,
    season: Optional[str] = Query(default=None, description="赛季年份，缺省时使用联赛当前赛季"),
    service: CompetitionsService = Depends(get_competitions_service),
) -> Standings:
    """
    获取积分榜

    上游无数据时返回 `{"standings": []}`
    """
    return await service.get_standings(competition_id, season=season)


@router.get("/{competition_id}/top-scorers", response_model=List[TopScorer])
async def get_top_scorers(
    competition_id: str,
    season: Optional[str] = Query(default=None),
    service: CompetitionsService = Depends(get_competitions_service),
) -> List[TopScorer]:
    return await service.get_top_scorers(competition_id, season=season)


@router.get("/{competition_id}/matches", response_model=List[UpcomingMatch])
async def get_upcoming_matches(
    competition_id: str,
    season: Optional[str] = Query(default=None),
    service: CompetitionsService = Depends(get_competitions_service),
) -> List[UpcomingMatch]:
    return await service.get_upcoming_matches(competition_id, season=season)
