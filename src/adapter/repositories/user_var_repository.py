from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_var_repository import IUserVarRepository
from src.domain.entities import UserVar


class UserVarRepository(IUserVarRepository):
    """UserVar key-value store implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_row(self, user_id: UUID, workspace_id: UUID, key: str) -> Optional[UserVar]:
        stmt = select(UserVar).where(
            UserVar.user_id == user_id,
            UserVar.workspace_id == workspace_id,
            UserVar.key == key,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get(self, user_id: UUID, workspace_id: UUID, key: str) -> Optional[Any]:
        """Get the value stored for (user, workspace, key)"""
        user_var = await self._get_row(user_id, workspace_id, key)
        return user_var.value if user_var else None

    async def set(self, user_id: UUID, workspace_id: UUID, key: str, value: Any) -> None:
        """Insert or overwrite the value stored for (user, workspace, key)"""
        user_var = await self._get_row(user_id, workspace_id, key)
        if user_var is None:
            user_var = UserVar(user_id=user_id, workspace_id=workspace_id, key=key, value=value)
        else:
            user_var.value = value
            user_var.updated_at = datetime.utcnow()
        self.session.add(user_var)
        await self.session.flush()

    async def delete(self, user_id: UUID, workspace_id: UUID, key: str) -> None:
        """Delete the value stored for (user, workspace, key)"""
        stmt = delete(UserVar).where(
            UserVar.user_id == user_id,
            UserVar.workspace_id == workspace_id,
            UserVar.key == key,
        )
        await self.session.execute(stmt)
        await self.session.flush()
