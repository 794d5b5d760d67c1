"""SQLAlchemy declarative base with common mixins."""
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql.compiler import SQLCompiler
from sqlalchemy.sql.functions import FunctionElement


class clock_now(FunctionElement):  # noqa: N801
    """
    Wall-clock "now" for timestamp columns.

    Renders as clock_timestamp() on PostgreSQL, which (unlike now()) advances
    within a transaction, and CURRENT_TIMESTAMP elsewhere.
    """

    type = DateTime(timezone=True)
    inherit_cache = True


@compiles(clock_now)
def _compile_clock_now(_element: clock_now, _compiler: SQLCompiler, **_kw: Any) -> str:
    return "CURRENT_TIMESTAMP"


@compiles(clock_now, "postgresql")
def _compile_clock_now_pg(_element: clock_now, _compiler: SQLCompiler, **_kw: Any) -> str:
    return "clock_timestamp()"


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at columns.

    All timestamps are timezone-aware (stored as TIMESTAMP WITH TIME ZONE in PostgreSQL).

    Uses clock_now() so timestamps reflect wall-clock time rather than transaction
    start time. updated_at has no onupdate hook: services that mutate user-facing
    fields set it explicitly, so bookkeeping writes don't bump it.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=clock_now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=clock_now(),
        nullable=False,
    )
