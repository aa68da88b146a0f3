"""SQLAlchemy ORM models for user ledgers, budgets and habits"""

import uuid
from sqlalchemy import Column, String, Float, DateTime, Date, Integer, ForeignKey, Text, UniqueConstraint
from sqlalchemy.orm import declarative_base, relationship
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class UserProfile(Base):
    """Per-user settings; created lazily on first write"""

    __tablename__ = "user_profile"

    user_id = Column(Text, primary_key=True)
    monthly_budget = Column(Float, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    finances = relationship("FinanceEntry", back_populates="user", cascade="all, delete-orphan")
    habits = relationship("HabitRecord", back_populates="user", cascade="all, delete-orphan")


class FinanceEntry(Base):
    """Single income or expense ledger row"""

    __tablename__ = "finance_entry"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True)
    kind = Column(Text, nullable=False)  # "expense" | "income"
    description = Column(Text, nullable=False)
    amount = Column(Float, nullable=False)
    category = Column(Text, nullable=False, default="Uncategorized")
    entry_date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    user = relationship("UserProfile", back_populates="finances")


class HabitRecord(Base):
    """Tracked habit with its current streak"""

    __tablename__ = "habit"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, ForeignKey("user_profile.user_id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    streak = Column(Integer, nullable=False, default=0)
    last_done = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    user = relationship("UserProfile", back_populates="habits")


class HabitLogEntry(Base):
    """Habit completed on a given day; kept after the habit is deleted"""

    __tablename__ = "habit_log"
    __table_args__ = (UniqueConstraint("user_id", "log_date", "habit_name"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    log_date = Column(Date, nullable=False)
    habit_name = Column(Text, nullable=False)
