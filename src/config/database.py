import contextlib
from collections.abc import AsyncIterator, Callable
from typing import AsyncContextManager

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from src.config.settings import settings

SessionManager = Callable[..., AsyncContextManager[AsyncSession]]


def create_engine(url: str) -> AsyncEngine:
    url = str(url)
    use_echo = settings.LOG_DB
    connect_args = {}
    if "sqlite" in url:
        connect_args = {"timeout": 15}
    return create_async_engine(
        url,
        echo=use_echo,
        future=True,  # use the sqlalchemy 2.0 classes
        connect_args=connect_args,
    )


engine = create_engine(settings.database_url)
async_session_maker = async_sessionmaker(engine, expire_on_commit=False)


async def get_async_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        yield session


def make_session_manager(session_maker: async_sessionmaker[AsyncSession]) -> SessionManager:
    """Build an ``async_session_manager`` bound to ``session_maker``.

    The returned context manager commits when the block exits cleanly and
    rolls back (re-raising) when it does not.
    """

    @contextlib.asynccontextmanager
    async def session_manager(auto_commit=True) -> AsyncIterator[AsyncSession]:
        async with session_maker() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                raise e
            else:
                if auto_commit:
                    await session.commit()

    return session_manager


async_session_manager = make_session_manager(async_session_maker)
