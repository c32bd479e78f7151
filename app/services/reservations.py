from typing import Any, Dict, List

from app.config import settings
from app.database import Database

GUEST_RESERVATIONS = """
SELECT reservations.*, properties.*, avg(property_reviews.rating) AS average_rating
FROM reservations
JOIN properties ON reservations.property_id = properties.id
JOIN property_reviews ON properties.id = property_reviews.property_id
WHERE reservations.guest_id = :p1
GROUP BY properties.id, reservations.id
ORDER BY reservations.start_date
LIMIT :p2
"""


async def get_all_reservations(db: Database, guest_id: int, limit: int = settings.DEFAULT_SEARCH_LIMIT) -> List[Dict[str, Any]]:
    """Reservations made by ``guest_id``, earliest start date first."""
    if limit < 1:
        raise ValueError("limit must be a positive integer")
    return await db.execute(GUEST_RESERVATIONS, [guest_id, limit])
