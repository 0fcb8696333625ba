"""
服务层配置

统一管理所有服务层的常量参数，避免硬编码
（部署相关参数如 API 地址、热门球队列表见 config/service.yaml）
"""
from dataclasses import dataclass


@dataclass
class CompetitionConfig:
    """赛事服务配置"""

    # 联赛列表查询条件
    LEAGUE_TYPE: str = "league"

    # 射手榜只保留前 N 名（拉取后截断，非上游限制）
    TOP_SCORERS_LIMIT: int = 10

    # 未来赛程数量（上游 next 参数）
    UPCOMING_FIXTURES: int = 10

    # 场馆缺省值
    DEFAULT_VENUE_NAME: str = "Por definir"
    DEFAULT_VENUE_CITY: str = ""


@dataclass
class TransferConfig:
    """转会服务配置"""

    # 并发查询的球队数量（取热门球队列表的前 N 个）
    TEAMS_TO_QUERY: int = 5

    # 聚合结果上限
    MAX_AGGREGATED_TRANSFERS: int = 50

    # 默认排行数量
    DEFAULT_TOP_LIMIT: int = 10

    # 转会类型 / 费用标签
    DEFAULT_TRANSFER_TYPE: str = "Fichaje"
    FREE_LABEL: str = "Libre"
    UNKNOWN_FEE_LABEL: str = "N/A"


# 全局配置实例
competition_config = CompetitionConfig()
transfer_config = TransferConfig()
