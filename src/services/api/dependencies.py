"""FastAPI 依赖注入：管理服务实例的生命周期。"""
from __future__ import annotations

from functools import lru_cache

from src.services.competitions_service import CompetitionsService
from src.services.transfers_service import TransfersService
from src.shared.api_football_client import ApiFootballClient
from src.shared.config import get_settings

# 1. 上游客户端（无状态，可复用）
@lru_cache(maxsize=1)
def get_api_football_client() -> ApiFootballClient:
    return ApiFootballClient(get_settings())

# 2. 赛事服务
@lru_cache(maxsize=1)
def get_competitions_service() -> CompetitionsService:
    settings = get_settings()
    return CompetitionsService(
        client=get_api_football_client(),
        default_season=settings.service.api_football.default_season,
    )

# 3. 转会服务（热门球队列表来自配置）
@lru_cache(maxsize=1)
def get_transfers_service() -> TransfersService:
    transfers_config = get_settings().service.transfers
    return TransfersService(
        client=get_api_football_client(),
        popular_team_ids=transfers_config.popular_team_ids,
        loan_label=transfers_config.loan_label,
    )
