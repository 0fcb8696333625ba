"""全局配置加载与强类型定义。
该模块负责读取 config/ 目录下的 YAML 文件，并映射为 Pydantic 模型。
API Key 等敏感信息只从环境变量 / .env 读取，不写入 YAML。
"""
from __future__ import annotations

import functools
import pathlib
from typing import Any, Dict, List, Optional

import yaml
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 定位到项目根目录
BASE_DIR = pathlib.Path(__file__).resolve().parents[2]
CONFIG_DIR = BASE_DIR / "config"

def _load_yaml(filename: str) -> Dict[str, Any]:
    """辅助函数：安全加载 YAML 文件"""
    path = CONFIG_DIR / filename
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

# --- 1. DB Config Model ---
class DbConnection(BaseModel):
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = "postgres"
    database: str = "infootball"
    pool_size: int = 20
    max_overflow: int = 10
    pool_timeout: int = 30
    pool_recycle: int = 1800

class DbConfig(BaseModel):
    default: DbConnection = Field(default_factory=DbConnection)

# --- 2. Service Config Model ---
class ApiConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    enable_docs: bool = True
    prefix: str = "/api/v1"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

class ApiFootballConfig(BaseModel):
    base_url: str = "https://v3.football.api-sports.io"
    # None 表示不设超时（与上游行为保持一致）
    timeout_seconds: Optional[float] = None
    # 上游缺少 seasons[0].year 时使用的赛季
    default_season: str = "2024"

class TransfersConfig(BaseModel):
    # API-FOOTBALL 热门球队 ID（皇马、巴萨、马竞、曼城、曼联 ...）
    popular_team_ids: List[int] = Field(
        default_factory=lambda: [541, 529, 530, 50, 33, 40, 42, 47, 489, 492, 496, 157, 165, 85]
    )
    loan_label: str = "Préstamo"

class ServiceConfig(BaseModel):
    api: ApiConfig = Field(default_factory=ApiConfig)
    api_football: ApiFootballConfig = Field(default_factory=ApiFootballConfig)
    transfers: TransfersConfig = Field(default_factory=TransfersConfig)

# --- 全局 Settings 聚合 ---
class Settings(BaseSettings):
    app_name: str = "InFootball API"
    app_version: str = "0.1.0"
    environment: str = "dev"

    # 兼容原部署方式：直接读取 API_FOOTBALL_KEY
    api_football_key: str = Field(
        default="",
        validation_alias=AliasChoices("API_FOOTBALL_KEY", "INFOOTBALL_API_FOOTBALL_KEY"),
    )

    db: DbConfig = Field(default_factory=lambda: DbConfig(**_load_yaml("db.yaml")))
    service: ServiceConfig = Field(default_factory=lambda: ServiceConfig(**_load_yaml("service.yaml")))

    model_config = SettingsConfigDict(
        env_prefix="INFOOTBALL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """获取全局单例配置。"""
    return Settings()
