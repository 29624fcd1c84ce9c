"""
Workspace Cleaner Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class WorkspaceActivationStatus(str, Enum):
    """Workspace activation status"""

    pending_creation = "pending_creation"
    active = "active"
    suspended = "suspended"
    inactive = "inactive"


class BillingSubscriptionStatus(str, Enum):
    """Billing subscription status, as reported by the billing provider"""

    active = "active"
    trialing = "trialing"
    past_due = "past_due"
    unpaid = "unpaid"
    canceled = "canceled"
    incomplete = "incomplete"
    incomplete_expired = "incomplete_expired"
    paused = "paused"
