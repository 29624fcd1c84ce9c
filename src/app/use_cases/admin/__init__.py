"""Admin use cases for workspace billing integration."""

from .suspend_workspace_use_case import SuspendWorkspaceUseCase, SuspendWorkspaceResponse
from .restore_workspace_use_case import RestoreWorkspaceUseCase, RestoreWorkspaceResponse

__all__ = [
    "SuspendWorkspaceUseCase",
    "SuspendWorkspaceResponse",
    "RestoreWorkspaceUseCase",
    "RestoreWorkspaceResponse",
]
