"""
Normalizer - 上游 JSON 归一化

职责：
1. 用声明式映射表描述「上游字段路径 → 输出字段 + 默认值」
2. 用一个通用的 reshape() 把上游记录转换为稳定的输出结构
3. 保证输出中不存在缺失字段（缺失即填默认值，默认值为 None 时显式返回 None）

映射表示例：
    {
        "id": FieldMap("league.id"),
        "team": {"id": FieldMap("team.id"), ...},   # 嵌套表生成嵌套对象
        "season": FieldMap("seasons.0.year", transform=str),
    }
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union

from src.services.config import competition_config, transfer_config


@dataclass(frozen=True)
class FieldMap:
    """单个输出字段的来源描述"""
    source: str
    default: Any = None
    default_factory: Optional[Callable[[], Any]] = None
    transform: Optional[Callable[[Any], Any]] = None

    def resolve_default(self) -> Any:
        if self.default_factory is not None:
            return self.default_factory()
        return self.default


MappingTable = Dict[str, Union[FieldMap, "MappingTable"]]


def pluck(record: Any, path: str) -> Any:
    """
    按点分路径取值，数字段表示列表下标

    任何一环缺失都返回 None：
        pluck({"a": [{"b": 1}]}, "a.0.b") -> 1
        pluck({"a": []}, "a.0.b") -> None
    """
    current = record
    for key in path.split("."):
        if isinstance(current, Mapping):
            current = current.get(key)
        elif isinstance(current, list):
            try:
                current = current[int(key)]
            except (ValueError, IndexError):
                return None
        else:
            return None
        if current is None:
            return None
    return current


def _is_missing(value: Any) -> bool:
    # 空字符串同样视为缺失
    return value is None or value == ""


def reshape(
    record: Any,
    table: MappingTable,
    defaults: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    按映射表转换单条记录

    Args:
        record: 上游原始记录
        table: 映射表（值为 FieldMap 或嵌套映射表）
        defaults: 运行时覆盖的顶层默认值，如 {"season": "2024"}

    Returns:
        输出字典，映射表中的每个字段都存在
    """
    defaults = defaults or {}
    result: Dict[str, Any] = {}
    for target, field_map in table.items():
        if isinstance(field_map, dict):
            result[target] = reshape(record, field_map)
            continue

        value = pluck(record, field_map.source)
        if not _is_missing(value) and field_map.transform is not None:
            value = field_map.transform(value)
        if _is_missing(value):
            value = defaults[target] if target in defaults else field_map.resolve_default()
        result[target] = value
    return result


def split_form(form: str) -> list:
    """'WWDLW' -> ['W', 'W', 'D', 'L', 'W']"""
    return list(form)


def classify_fee(transfer_type: Optional[str], loan_label: str) -> str:
    """转会类型 → 费用标签，原始类型不会原样透传"""
    if transfer_type == "Free":
        return transfer_config.FREE_LABEL
    if transfer_type == "Loan":
        return loan_label
    return transfer_config.UNKNOWN_FEE_LABEL


# ==================== 映射表 ====================

def _team_table(prefix: str) -> MappingTable:
    return {
        "id": FieldMap(f"{prefix}.id"),
        "name": FieldMap(f"{prefix}.name"),
        "logo": FieldMap(f"{prefix}.logo"),
    }


# /leagues 的单个元素；season 的默认值在运行时由配置注入
COMPETITION: MappingTable = {
    "id": FieldMap("league.id"),
    "name": FieldMap("league.name"),
    "logo": FieldMap("league.logo"),
    "country": FieldMap("country.name"),
    "country_flag": FieldMap("country.flag"),
    "type": FieldMap("league.type"),
    "season": FieldMap("seasons.0.year", transform=str),
    "is_active": FieldMap("seasons.0.current", default=False),
}

# /standings 的 response[0].league
STANDINGS_COMPETITION: MappingTable = {
    "id": FieldMap("id"),
    "name": FieldMap("name"),
    "logo": FieldMap("logo"),
    "country": FieldMap("country"),
    "season": FieldMap("season"),
}

# /standings 的 response[0].league.standings[0][i]
STANDING_ROW: MappingTable = {
    "position": FieldMap("rank"),
    "team": _team_table("team"),
    "played": FieldMap("all.played"),
    "won": FieldMap("all.win"),
    "drawn": FieldMap("all.draw"),
    "lost": FieldMap("all.lose"),
    "goals_for": FieldMap("all.goals.for"),
    "goals_against": FieldMap("all.goals.against"),
    "goal_difference": FieldMap("goalsDiff"),
    "points": FieldMap("points"),
    "form": FieldMap("form", transform=split_form, default_factory=list),
}

# /players/topscorers 的单个元素，统计取 statistics[0]
TOP_SCORER: MappingTable = {
    "player": {
        "id": FieldMap("player.id"),
        "name": FieldMap("player.name"),
        "photo": FieldMap("player.photo"),
        "nationality": FieldMap("player.nationality"),
    },
    "team": _team_table("statistics.0.team"),
    "goals": FieldMap("statistics.0.goals.total"),
    "assists": FieldMap("statistics.0.goals.assists", default=0),
    "matches": FieldMap("statistics.0.games.appearences"),
}

# /fixtures 的单个元素
UPCOMING_MATCH: MappingTable = {
    "id": FieldMap("fixture.id"),
    "date": FieldMap("fixture.date"),
    "timestamp": FieldMap("fixture.timestamp"),
    "venue": {
        "name": FieldMap("fixture.venue.name", default=competition_config.DEFAULT_VENUE_NAME),
        "city": FieldMap("fixture.venue.city", default=competition_config.DEFAULT_VENUE_CITY),
    },
    "status": {
        "short": FieldMap("fixture.status.short"),
        "long": FieldMap("fixture.status.long"),
    },
    "home_team": _team_table("teams.home"),
    "away_team": _team_table("teams.away"),
    "goals": {
        "home": FieldMap("goals.home"),
        "away": FieldMap("goals.away"),
    },
}

# /transfers 展平后的 {"player": {...}, "transfer": {...}}；
# id 与 fee 依赖多个字段，由 transfers_service 组装
AGGREGATED_TRANSFER: MappingTable = {
    "player_name": FieldMap("player.name"),
    "player_photo": FieldMap("player.photo"),
    "from_team": FieldMap("transfer.teams.out.name"),
    "from_team_logo": FieldMap("transfer.teams.out.logo"),
    "to_team": FieldMap("transfer.teams.in.name"),
    "to_team_logo": FieldMap("transfer.teams.in.logo"),
    "transfer_date": FieldMap("transfer.date"),
    "transfer_type": FieldMap("transfer.type", default=transfer_config.DEFAULT_TRANSFER_TYPE),
}
