#!/usr/bin/env python3
"""
API-FOOTBALL 连通性检查
用法: python scripts/check_api_football.py [联赛ID] [赛季]

1. 检查 API_FOOTBALL_KEY 是否已加载
2. 查询联赛信息与积分榜前 5 名
"""
import asyncio
import sys
import os

sys.path.append(os.getcwd())

from src.services.competitions_service import CompetitionsService
from src.shared.api_football_client import ApiFootballClient
from src.shared.config import get_settings
from src.shared.exceptions import InFootballError


async def main(competition_id: str, season: str = None) -> int:
    settings = get_settings()
    key = settings.api_football_key
    print(f"API_FOOTBALL_KEY loaded: {'YES (length: %d)' % len(key) if key else 'NO'}")

    service = CompetitionsService(
        ApiFootballClient(settings),
        default_season=settings.service.api_football.default_season,
    )

    try:
        competition = await service.find_one_from_api(competition_id)
        print(f"[OK] {competition.name} ({competition.country}) season={competition.season}")

        standings = await service.get_standings(competition_id, season=season)
        if not standings.standings:
            print("[WARN] 没有积分榜数据")
            return 0
        for row in standings.standings[:5]:
            print(f"  {row.position!s:>2}. {row.team.name!s:<25} {row.points} pts  {''.join(row.form)}")
    except InFootballError as e:
        print(f"[ERROR] {e.message}")
        return 1
    return 0


if __name__ == "__main__":
    league = sys.argv[1] if len(sys.argv) > 1 else "39"
    season_arg = sys.argv[2] if len(sys.argv) > 2 else None
    sys.exit(asyncio.run(main(league, season_arg)))
