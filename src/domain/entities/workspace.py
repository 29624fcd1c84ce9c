"""
Workspace Entity

Represents an isolated tenant workspace.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import WorkspaceActivationStatus

if TYPE_CHECKING:
    from .workspace_member import WorkspaceMember


class Workspace(SQLModel, table=True):
    """
    Workspace entity - isolated tenant workspace.

    Business Rules:
    - Only suspended workspaces enter the cleanup pipeline
    - Deletion is a hard delete, cascading to members, subscriptions and user vars
    """

    __tablename__ = "workspaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    display_name: str = Field(default="", max_length=255)

    activation_status: WorkspaceActivationStatus = Field(
        default=WorkspaceActivationStatus.active
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.utcnow(), sa_column=Column(DateTime)
    )

    # Relationships
    members: list["WorkspaceMember"] = Relationship(back_populates="workspace")

    __table_args__ = (Index("idx_workspace_activation_status", "activation_status"),)
