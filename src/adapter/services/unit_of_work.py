from typing import Callable

from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.billing_subscription_repository import BillingSubscriptionRepository
from src.adapter.repositories.user_var_repository import UserVarRepository
from src.adapter.repositories.workspace_member_repository import WorkspaceMemberRepository
from src.adapter.repositories.workspace_repository import WorkspaceRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, owns_session: bool = False):
        self.session = session
        self.owns_session = owns_session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.workspaces = WorkspaceRepository(self.session)
        self.workspace_members = WorkspaceMemberRepository(self.session)
        self.billing_subscriptions = BillingSubscriptionRepository(self.session)
        self.user_vars = UserVarRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Detach first: loaded instances keep their state after the rollback
        self.session.expunge_all()
        await self.rollback()
        if self.owns_session:
            await self.session.close()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()


class SqlAlchemyUnitOfWorkFactory:
    """Builds units of work that each own a fresh session"""

    def __init__(self, session_factory: Callable[[], AsyncSession]):
        self.session_factory = session_factory

    def __call__(self) -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(self.session_factory(), owns_session=True)
