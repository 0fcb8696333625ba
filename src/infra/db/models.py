"""数据库实体定义：转会域（球队 + 球员 + 转会）。"""
import uuid

from sqlalchemy import Column, String, Date, DateTime, ForeignKey, Numeric, CheckConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class Team(Base):
    __tablename__ = "teams"
    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    logo = Column(String)
    country = Column(String)


class Player(Base):
    __tablename__ = "players"
    id = Column(String, primary_key=True, default=_new_id)
    name = Column(String, nullable=False)
    photo = Column(String)
    nationality = Column(String)
    position = Column(String)
    transfers = relationship("Transfer", back_populates="player")


class Transfer(Base):
    """转会表：唯一落库的实体"""
    __tablename__ = "transfers"

    id = Column(String, primary_key=True, default=_new_id)
    player_id = Column(String, ForeignKey("players.id"), nullable=False, index=True)
    # 自由球员 / 青训出身时可为空
    from_team_id = Column(String, ForeignKey("teams.id"), nullable=True)
    to_team_id = Column(String, ForeignKey("teams.id"), nullable=False)

    transfer_date = Column(Date, nullable=False, index=True)
    transfer_fee = Column(Numeric(14, 2), nullable=True)
    transfer_type = Column(String)
    season = Column(String, nullable=False, index=True)

    # 关系定义（查询时预加载）
    player = relationship("Player", back_populates="transfers")
    from_team = relationship("Team", foreign_keys=[from_team_id])
    to_team = relationship("Team", foreign_keys=[to_team_id])

    __table_args__ = (
        CheckConstraint('transfer_fee >= 0', name='check_fee_positive'),
        CheckConstraint('from_team_id IS NULL OR from_team_id != to_team_id', name='check_diff_teams'),
    )

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
