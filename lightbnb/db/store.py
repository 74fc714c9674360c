from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from structlog import get_logger
from typing import Optional, Sequence

logger = get_logger()

class Store:
    """Handle over an async engine. Statements use asyncpg's native ``$n``
    placeholders and go to the driver untouched via ``exec_driver_sql``.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_url(cls, url: str, pool_size: int = 5, echo: bool = False) -> "Store":
        engine = create_async_engine(url, pool_size=pool_size, echo=echo)
        logger.info("Created store", pool_size=pool_size)
        return cls(engine)

    async def fetch_all(self, statement: str, params: Sequence = ()) -> list[dict]:
        async with self.engine.connect() as conn:
            result = await conn.exec_driver_sql(statement, tuple(params))
            return [dict(row) for row in result.mappings().all()]

    async def fetch_one(self, statement: str, params: Sequence = ()) -> Optional[dict]:
        rows = await self.fetch_all(statement, params)
        return rows[0] if rows else None

    async def execute_returning(self, statement: str, params: Sequence = ()) -> Optional[dict]:
        # engine.begin() commits on exit
        async with self.engine.begin() as conn:
            result = await conn.exec_driver_sql(statement, tuple(params))
            row = result.mappings().first()
            return dict(row) if row is not None else None

    async def dispose(self):
        await self.engine.dispose()
        logger.info("Store disposed")
