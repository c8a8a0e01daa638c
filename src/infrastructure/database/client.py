import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
    AsyncSession,
)
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateSchema
from src.infrastructure.config.settings import to_async_url
from src.infrastructure.database.models import Base
from src.infrastructure.database.statement_recorder import StatementRecorder

logger = logging.getLogger(__name__)


class PostgresClient:
    def __init__(
        self,
        db_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 3600,
        echo: bool = False,
        recorder: Optional[StatementRecorder] = None,
    ):
        self._db_url = to_async_url(db_url)

        self._engine = create_async_engine(
            self._db_url,
            echo=echo,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_recycle=pool_recycle,
            pool_pre_ping=True,
        )

        self._session_factory = async_sessionmaker(
            bind=self._engine,
            expire_on_commit=False,
            class_=AsyncSession,
        )
        self._recorder = recorder or StatementRecorder()
        self._recorder.attach(self._engine)
        self._is_initialized = False

    @property
    def recorder(self) -> StatementRecorder:
        return self._recorder

    async def init(self, create_schema: bool = True) -> None:
        """
        Open the connection and optionally create the schemas and tables.

        Safe to call more than once.
        """
        if self._is_initialized:
            return

        logger.info("Initializing PostgreSQL connection...")

        async with self._engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

            if create_schema:
                logger.info("Creating database schema...")
                schemas = sorted(
                    {t.schema for t in Base.metadata.tables.values() if t.schema}
                )
                for schema in schemas:
                    await conn.execute(CreateSchema(schema, if_not_exists=True))
                await conn.run_sync(Base.metadata.create_all)

        self._is_initialized = True
        logger.info("PostgreSQL client initialized successfully")

    async def close(self) -> None:
        """
        Dispose the engine and release pooled connections.
        """
        await self._engine.dispose()
        if self._is_initialized:
            self._is_initialized = False
            logger.info("PostgreSQL client closed")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Async session context manager; rolls back on error.
        """
        async with self._session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logger.error(f"Error in DB session, rollback applied: {e}")
                raise

    async def health_check(self) -> bool:
        """
        Run SELECT 1 to verify connectivity.
        """
        try:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False
