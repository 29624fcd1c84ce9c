import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from src.depends import (
    get_notifier,
    get_unit_of_work,
    get_unit_of_work_factory,
    get_workspace_cleaner_settings,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork, SqlAlchemyUnitOfWorkFactory
from src.app.use_cases.workspace_cleaner import WorkspaceCleanerSettings


class RecordingNotifier:
    def __init__(self):
        self.calls = []

    async def send_deletion_warning(self, workspace, members, days_until_deletion):
        self.calls.append((workspace.id, [m.user_id for m in members], days_until_deletion))


@pytest_asyncio.fixture
async def engine(tmp_path):
    # File database: concurrent units of work each need their own connection
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def uow_factory(session_factory):
    return SqlAlchemyUnitOfWorkFactory(session_factory)


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
def cleaner_settings():
    return WorkspaceCleanerSettings(
        inactive_days_before_warning=15,
        inactive_days_before_deletion=30,
        max_deletions_per_run=3,
        chunk_size=5,
    )


@pytest_asyncio.fixture
async def client(session_factory, uow_factory, notifier, cleaner_settings):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_unit_of_work_factory] = lambda: uow_factory
    app.dependency_overrides[get_notifier] = lambda: notifier
    app.dependency_overrides[get_workspace_cleaner_settings] = lambda: cleaner_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
