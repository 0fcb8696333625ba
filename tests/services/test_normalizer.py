"""
Normalizer 单元测试

测试覆盖：
1. pluck 路径取值
2. reshape 默认值填充
3. 各资源映射表
4. 转会费用分类
"""
import pytest

from src.services.normalizer import (
    COMPETITION,
    STANDING_ROW,
    TOP_SCORER,
    UPCOMING_MATCH,
    FieldMap,
    classify_fee,
    pluck,
    reshape,
)
from tests.factories import make_scorer


class TestPluck:
    """测试 pluck 函数"""

    def test_nested_dict_and_list_index(self):
        record = {"statistics": [{"goals": {"total": 27}}]}
        assert pluck(record, "statistics.0.goals.total") == 27

    def test_missing_links_return_none(self):
        assert pluck({"statistics": []}, "statistics.0.goals.total") is None
        assert pluck({"venue": None}, "venue.name") is None
        assert pluck({}, "a.b.c") is None
        assert pluck({"a": "text"}, "a.b") is None

    def test_non_numeric_index_on_list(self):
        assert pluck({"a": [1, 2]}, "a.first") is None


class TestReshape:
    """测试 reshape 函数"""

    def test_every_field_is_present(self):
        table = {"id": FieldMap("id"), "team": {"name": FieldMap("team.name")}}
        assert reshape({}, table) == {"id": None, "team": {"name": None}}

    def test_empty_string_takes_default(self):
        table = {"name": FieldMap("name", default="Por definir")}
        assert reshape({"name": ""}, table) == {"name": "Por definir"}

    def test_zero_is_kept(self):
        table = {"goals": FieldMap("goals", default=99)}
        assert reshape({"goals": 0}, table) == {"goals": 0}

    def test_runtime_default_override(self):
        table = {"season": FieldMap("seasons.0.year", transform=str)}
        assert reshape({"seasons": []}, table, defaults={"season": "2024"}) == {"season": "2024"}

    def test_default_factory_is_not_shared(self):
        table = {"form": FieldMap("form", default_factory=list)}
        first = reshape({}, table)
        first["form"].append("W")
        assert reshape({}, table) == {"form": []}


class TestCompetitionTable:
    """测试联赛映射"""

    def test_full_record(self, sample_league):
        result = reshape(sample_league, COMPETITION, defaults={"season": "2024"})

        assert result == {
            "id": 39,
            "name": "Premier League",
            "logo": "https://media.api-sports.io/football/leagues/39.png",
            "country": "England",
            "country_flag": "https://media.api-sports.io/flags/gb.svg",
            "type": "League",
            "season": "2023",
            "is_active": True,
        }

    @pytest.mark.parametrize("seasons", [[], [{}], [{"year": None}], None])
    def test_missing_season_year_uses_default(self, sample_league, seasons):
        sample_league["seasons"] = seasons

        result = reshape(sample_league, COMPETITION, defaults={"season": "2024"})

        assert result["season"] == "2024"
        assert result["is_active"] is False


class TestStandingRowTable:
    """测试积分榜行映射"""

    def test_form_is_split_into_characters(self, sample_standings):
        row = sample_standings[0]["league"]["standings"][0][0]

        result = reshape(row, STANDING_ROW)

        assert result["form"] == ["W", "W", "W", "W", "D"]
        assert result["position"] == 1
        assert result["team"] == {
            "id": 50,
            "name": "Manchester City",
            "logo": "https://media.api-sports.io/football/teams/50.png",
        }
        assert (result["played"], result["won"], result["drawn"], result["lost"]) == (38, 28, 7, 3)
        assert (result["goals_for"], result["goals_against"]) == (96, 34)
        assert result["goal_difference"] == 62
        assert result["points"] == 91

    def test_missing_form_is_empty_list(self, sample_standings):
        row = sample_standings[0]["league"]["standings"][0][1]

        assert reshape(row, STANDING_ROW)["form"] == []


class TestTopScorerTable:
    """测试射手映射"""

    def test_stats_come_from_first_statistics_entry(self):
        result = reshape(make_scorer(1100, goals=27, assists=5), TOP_SCORER)

        assert result["goals"] == 27
        assert result["assists"] == 5
        assert result["matches"] == 31
        assert result["team"]["id"] == 50
        assert result["player"]["nationality"] == "Norway"

    def test_missing_assists_default_to_zero(self):
        result = reshape(make_scorer(1100, goals=27, assists=None), TOP_SCORER)

        assert result["assists"] == 0


class TestUpcomingMatchTable:
    """测试赛程映射"""

    def test_full_fixture(self, sample_fixture):
        result = reshape(sample_fixture, UPCOMING_MATCH)

        assert result["venue"] == {"name": "Old Trafford", "city": "Manchester"}
        assert result["status"] == {"short": "NS", "long": "Not Started"}
        assert result["home_team"]["name"] == "Manchester United"
        assert result["away_team"]["id"] == 36
        assert result["goals"] == {"home": None, "away": None}

    @pytest.mark.parametrize("venue", [None, {}, {"name": None, "city": None}, {"name": "", "city": ""}])
    def test_missing_venue_uses_defaults(self, sample_fixture, venue):
        sample_fixture["fixture"]["venue"] = venue

        result = reshape(sample_fixture, UPCOMING_MATCH)

        assert result["venue"] == {"name": "Por definir", "city": ""}


class TestClassifyFee:
    """测试转会费用分类"""

    def test_free_transfer(self):
        assert classify_fee("Free", "Préstamo") == "Libre"

    def test_loan_uses_configured_label(self):
        assert classify_fee("Loan", "Préstamo") == "Préstamo"
        assert classify_fee("Loan", "Loan deal") == "Loan deal"

    @pytest.mark.parametrize("transfer_type", ["€ 80M", "N/A", "Transfer", "", None, "free", "loan"])
    def test_anything_else_is_not_available(self, transfer_type):
        assert classify_fee(transfer_type, "Préstamo") == "N/A"
