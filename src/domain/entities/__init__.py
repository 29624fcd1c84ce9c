"""
Workspace Cleaner Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    WorkspaceActivationStatus,
    BillingSubscriptionStatus,
)

# Export all entities
from .workspace import Workspace
from .workspace_member import WorkspaceMember
from .billing_subscription import BillingSubscription
from .user_var import UserVar
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "WorkspaceActivationStatus",
    "BillingSubscriptionStatus",
    # Entities
    "Workspace",
    "WorkspaceMember",
    "BillingSubscription",
    "UserVar",
    "AuditEvent",
]
