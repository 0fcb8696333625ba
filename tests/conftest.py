"""
Pytest 配置文件

提供测试固件和通用配置：
1. 上游 API Mock（httpx.MockTransport）
2. 数据库会话 Mock
3. HTTP 客户端固件
4. 示例上游数据
"""
import os
from typing import AsyncGenerator, Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio

from tests.factories import MockAsyncContextManager, UpstreamStub

# 设置测试环境
os.environ.setdefault("INFOOTBALL_ENVIRONMENT", "test")
os.environ.setdefault("API_FOOTBALL_KEY", "test-key")


# ============ 上游 API Mock ============

@pytest.fixture
def make_client() -> Callable:
    """
    生成使用 MockTransport 的 ApiFootballClient

    用法：
        stub = UpstreamStub({"/leagues": [...]})
        client = make_client(stub)
    """
    from src.shared.api_football_client import ApiFootballClient
    from src.shared.config import Settings

    def _make(stub: UpstreamStub, api_key: str = "test-key") -> ApiFootballClient:
        settings = Settings(API_FOOTBALL_KEY=api_key)
        return ApiFootballClient(settings, transport=httpx.MockTransport(stub))

    return _make


# ============ 数据库相关 ============

@pytest.fixture
def mock_db_session() -> MagicMock:
    """
    Mock 数据库会话

    用于单元测试，不连接真实数据库
    """
    session = MagicMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    return session


@pytest.fixture
def session_factory(mock_db_session) -> Callable:
    return lambda: MockAsyncContextManager(mock_db_session)


# ============ HTTP 客户端 ============

@pytest_asyncio.fixture
async def client() -> AsyncGenerator:
    """
    FastAPI 测试客户端

    使用 httpx.AsyncClient 进行 API 测试；测试结束后清除依赖覆盖
    """
    from httpx import AsyncClient, ASGITransport
    from src.services.api.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


# ============ 测试数据 ============

@pytest.fixture
def sample_league() -> dict:
    """/leagues 的单个元素"""
    return {
        "league": {
            "id": 39,
            "name": "Premier League",
            "type": "League",
            "logo": "https://media.api-sports.io/football/leagues/39.png",
        },
        "country": {
            "name": "England",
            "code": "GB",
            "flag": "https://media.api-sports.io/flags/gb.svg",
        },
        "seasons": [
            {"year": 2023, "start": "2023-08-11", "end": "2024-05-19", "current": True},
        ],
    }


@pytest.fixture
def sample_standings() -> list:
    """/standings 的 response"""
    return [
        {
            "league": {
                "id": 39,
                "name": "Premier League",
                "country": "England",
                "logo": "https://media.api-sports.io/football/leagues/39.png",
                "season": 2023,
                "standings": [[
                    {
                        "rank": 1,
                        "team": {"id": 50, "name": "Manchester City", "logo": "https://media.api-sports.io/football/teams/50.png"},
                        "points": 91,
                        "goalsDiff": 62,
                        "form": "WWWWD",
                        "all": {"played": 38, "win": 28, "draw": 7, "lose": 3, "goals": {"for": 96, "against": 34}},
                    },
                    {
                        "rank": 2,
                        "team": {"id": 42, "name": "Arsenal", "logo": "https://media.api-sports.io/football/teams/42.png"},
                        "points": 89,
                        "goalsDiff": 62,
                        "form": None,
                        "all": {"played": 38, "win": 28, "draw": 5, "lose": 5, "goals": {"for": 91, "against": 29}},
                    },
                ]],
            }
        }
    ]


@pytest.fixture
def sample_fixture() -> dict:
    """/fixtures 的单个元素"""
    return {
        "fixture": {
            "id": 1035037,
            "date": "2024-08-16T19:00:00+00:00",
            "timestamp": 1723834800,
            "venue": {"id": 556, "name": "Old Trafford", "city": "Manchester"},
            "status": {"long": "Not Started", "short": "NS"},
        },
        "teams": {
            "home": {"id": 33, "name": "Manchester United", "logo": "https://media.api-sports.io/football/teams/33.png"},
            "away": {"id": 36, "name": "Fulham", "logo": "https://media.api-sports.io/football/teams/36.png"},
        },
        "goals": {"home": None, "away": None},
    }
