"""
UserVar Entity

Per-user, per-workspace key-value variable.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel


class UserVar(SQLModel, table=True):
    """
    UserVar entity - a JSON value stored for (user, workspace, key).

    Business Rules:
    - At most one value per (user_id, workspace_id, key)
    - Used as the deletion-warning ledger of the workspace cleaner
    """

    __tablename__ = "user_vars"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    workspace_id: UUID = Field(nullable=False, index=True)
    key: str = Field(max_length=255)
    value: Optional[Any] = Field(default=None, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    __table_args__ = (
        Index("idx_user_var_user_workspace_key", "user_id", "workspace_id", "key", unique=True),
    )
