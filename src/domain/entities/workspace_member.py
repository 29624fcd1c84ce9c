"""
WorkspaceMember Entity

Links a user to a workspace.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .workspace import Workspace


class WorkspaceMember(SQLModel, table=True):
    """
    WorkspaceMember entity - links a user to a workspace.

    Business Rules:
    - (user_id, workspace_id) must be unique
    - user_id is the identity used to key per-user workspace variables
    """

    __tablename__ = "workspace_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(nullable=False, index=True)
    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    workspace: "Workspace" = Relationship(back_populates="members")

    __table_args__ = (
        Index("idx_workspace_member_user_workspace", "user_id", "workspace_id", unique=True),
    )
