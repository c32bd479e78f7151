from typing import Any, Dict, List, Sequence

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from structlog import get_logger

from app.config import Settings
from app.errors import DataAccessError, IntegrityViolation

logger = get_logger(__name__)


def bind_name(index: int) -> str:
    """Bind parameter name for the 1-based position ``index`` of a parameter list."""
    return f"p{index}"


def placeholder(index: int) -> str:
    return f":{bind_name(index)}"


class Database:
    """
    Executor for parameterized statements.

    Statements reference their parameters positionally as ``:p1 .. :pN``;
    ``params[i - 1]`` is bound to ``:p{i}``. Each call runs in its own
    connection checkout so concurrent calls never share state.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        engine = create_async_engine(
            settings.DATABASE_URL,
            pool_size=settings.DB_POOL_SIZE,
            echo=settings.DB_ECHO,
            future=True,
        )
        return cls(engine)

    async def execute(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        bound = {bind_name(i): value for i, value in enumerate(params, start=1)}
        try:
            async with self.engine.begin() as conn:
                result = await conn.execute(text(sql), bound)
                if not result.returns_rows:
                    return []
                # Convert Row objects to dictionaries; on duplicate column names the last one wins
                columns = result.keys()
                return [dict(zip(columns, row)) for row in result.fetchall()]
        except IntegrityError as e:
            logger.warning("Constraint violated", sql=sql, error=str(e))
            raise IntegrityViolation(str(e), sql, params) from e
        except (SQLAlchemyError, OSError) as e:
            logger.error("Statement failed", sql=sql, params=list(params), error=str(e))
            raise DataAccessError(str(e), sql, params) from e

    async def dispose(self) -> None:
        await self.engine.dispose()


# Dependency for getting the executor in FastAPI routes
async def get_database(request: Request) -> Database:
    return request.app.state.db
