"""SQLAlchemy models for Account Store."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from typing import Any

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    DateTime,
    Integer,
    String,
    func,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)

MIN_GRADE = 1
MAX_GRADE = 4
DEFAULT_MAX_CREDITS = 18
DEFAULT_MAX_POINTS = 90


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Account(Base):
    """Account model - one registered student."""

    __tablename__ = "students"
    __table_args__ = (
        CheckConstraint(f"grade BETWEEN {MIN_GRADE} AND {MAX_GRADE}", name="ck_students_grade"),
    )

    student_id: Mapped[int] = mapped_column(BigInteger, primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    department: Mapped[str] = mapped_column(String(100), nullable=False)
    grade: Mapped[int] = mapped_column(Integer, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    max_credits: Mapped[int] = mapped_column(Integer, nullable=False)
    max_points: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    def __init__(
        self,
        student_id: int,
        name: str,
        department: str,
        grade: int,
        password: str,
        max_credits: int = DEFAULT_MAX_CREDITS,
        max_points: int = DEFAULT_MAX_POINTS,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.student_id = student_id
        self.name = name
        self.department = department
        self.grade = grade
        self.password = password
        self.max_credits = max_credits
        self.max_points = max_points

    def __repr__(self) -> str:
        # password is deliberately left out
        return (
            f"<Account(student_id={self.student_id!r}, name={self.name!r}, "
            f"department={self.department!r}, grade={self.grade!r})>"
        )
