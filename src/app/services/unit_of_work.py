from abc import ABC, abstractmethod
from typing import Callable

from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.billing_subscription_repository import IBillingSubscriptionRepository
from src.app.repositories.user_var_repository import IUserVarRepository
from src.app.repositories.workspace_member_repository import IWorkspaceMemberRepository
from src.app.repositories.workspace_repository import IWorkspaceRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    workspaces: IWorkspaceRepository
    workspace_members: IWorkspaceMemberRepository
    billing_subscriptions: IBillingSubscriptionRepository
    user_vars: IUserVarRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


# Each call returns a fresh unit of work with its own session, so concurrently
# running tasks never share a session.
UnitOfWorkFactory = Callable[[], UnitOfWork]
