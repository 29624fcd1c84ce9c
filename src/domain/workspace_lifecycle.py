"""
Workspace lifecycle classification.

Maps the billing inactivity of a suspended workspace to the cleanup action
the workspace cleaner should take. Stateless: the decision is recomputed
from scratch on every run.
"""

from enum import Enum
from typing import Optional

USER_WORKSPACE_DELETION_WARNING_SENT_KEY = "USER_WORKSPACE_DELETION_WARNING_SENT"


class WorkspaceLifecycleAction(str, Enum):
    """Cleanup action for a suspended workspace"""

    none = "none"
    warn = "warn"
    delete = "delete"


def classify_workspace(
    inactivity_days: Optional[int],
    warn_threshold: int,
    delete_threshold: int,
) -> WorkspaceLifecycleAction:
    """
    Classify a workspace by its billing inactivity.

    Args:
        inactivity_days: Whole days since the last billing activity,
            None when the workspace has no billing history
        warn_threshold: Inactive days after which members are warned
        delete_threshold: Inactive days after which the workspace is deleted

    Returns:
        delete when inactivity_days > delete_threshold,
        warn when warn_threshold < inactivity_days <= delete_threshold,
        none otherwise (including unknown inactivity)
    """
    if inactivity_days is None:
        return WorkspaceLifecycleAction.none

    if inactivity_days > delete_threshold:
        return WorkspaceLifecycleAction.delete

    if warn_threshold < inactivity_days <= delete_threshold:
        return WorkspaceLifecycleAction.warn

    return WorkspaceLifecycleAction.none
