from typing import Any, Dict, Optional

from structlog import get_logger

from app.database import Database
from app.schemas.user import UserCreate

logger = get_logger(__name__)


async def get_user_with_email(db: Database, email: str) -> Optional[Dict[str, Any]]:
    """The user with ``email``, or None when there is no such user."""
    rows = await db.execute("SELECT * FROM users WHERE email = :p1", [email])
    return rows[0] if rows else None


async def get_user_with_id(db: Database, user_id: int) -> Optional[Dict[str, Any]]:
    """The user with ``user_id``, or None when there is no such user."""
    rows = await db.execute("SELECT * FROM users WHERE id = :p1", [user_id])
    return rows[0] if rows else None


async def add_user(db: Database, user: UserCreate) -> Dict[str, Any]:
    rows = await db.execute(
        """
        INSERT INTO users (name, email, password)
        VALUES (:p1, :p2, :p3)
        RETURNING *
        """,
        [user.name, user.email, user.password],
    )
    logger.info("User added", user_id=rows[0].get("id"))
    return rows[0]
