"""Workspace cleaner use cases for the scheduled lifecycle cleanup."""

from .clean_suspended_workspaces_use_case import (
    CleanSuspendedWorkspacesResponse,
    CleanSuspendedWorkspacesUseCase,
    WorkspaceCleanupOutcome,
)
from .settings import WorkspaceCleanerSettings

__all__ = [
    "CleanSuspendedWorkspacesUseCase",
    "CleanSuspendedWorkspacesResponse",
    "WorkspaceCleanupOutcome",
    "WorkspaceCleanerSettings",
]
