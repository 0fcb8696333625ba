"""赛事相关的 API Schema（联赛、积分榜、射手榜、赛程）。"""
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from src.services.api.schemas.base import CamelModel


class TeamRef(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None


class Competition(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    country: Optional[str] = None
    country_flag: Optional[str] = None
    type: Optional[str] = None
    season: str
    is_active: bool = False


class CompetitionSummary(CamelModel):
    """积分榜响应中的联赛信息"""
    id: Optional[int] = None
    name: Optional[str] = None
    logo: Optional[str] = None
    country: Optional[str] = None
    season: Optional[int] = None


class StandingRow(CamelModel):
    position: Optional[int] = None
    team: TeamRef
    played: Optional[int] = None
    won: Optional[int] = None
    drawn: Optional[int] = None
    lost: Optional[int] = None
    goals_for: Optional[int] = None
    goals_against: Optional[int] = None
    goal_difference: Optional[int] = None
    points: Optional[int] = None
    form: List[str] = Field(default_factory=list)


class Standings(CamelModel):
    """上游无数据时只包含空的 standings（competition 不输出）"""
    competition: Optional[CompetitionSummary] = None
    standings: List[StandingRow] = Field(default_factory=list)


class ScorerPlayer(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    photo: Optional[str] = None
    nationality: Optional[str] = None


class TopScorer(CamelModel):
    player: ScorerPlayer
    team: TeamRef
    goals: Optional[int] = None
    assists: int = 0
    matches: Optional[int] = None


class Venue(CamelModel):
    name: str
    city: str


class MatchStatus(CamelModel):
    short: Optional[str] = None
    long: Optional[str] = None


class MatchGoals(CamelModel):
    home: Optional[int] = None
    away: Optional[int] = None


class UpcomingMatch(CamelModel):
    id: Optional[int] = None
    date: Optional[str] = None
    timestamp: Optional[int] = None
    venue: Venue
    status: MatchStatus
    home_team: TeamRef
    away_team: TeamRef
    goals: MatchGoals
