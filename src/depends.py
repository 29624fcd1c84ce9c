from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.logging_notifier import LoggingNotifier
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork, SqlAlchemyUnitOfWorkFactory
from src.app.services.notifier import INotifier
from src.app.services.unit_of_work import UnitOfWorkFactory
from src.app.use_cases.workspace_cleaner import WorkspaceCleanerSettings

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_unit_of_work_factory() -> UnitOfWorkFactory:
    return SqlAlchemyUnitOfWorkFactory(AsyncSessionLocal)


def get_notifier() -> INotifier:
    return LoggingNotifier()


def get_workspace_cleaner_settings() -> WorkspaceCleanerSettings:
    return WorkspaceCleanerSettings.from_config(ApplicationConfig)
