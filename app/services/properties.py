from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List

from structlog import get_logger

from app.config import settings
from app.database import Database
from app.schemas.property import PropertyCreate
from app.schemas.property_search import PropertySearchCriteria
from app.services.query_builder import QueryBuilder

logger = get_logger(__name__)

PROPERTY_SEARCH_BASE = """
SELECT properties.*, average_rating
FROM properties
JOIN (SELECT property_id, avg(property_reviews.rating) AS average_rating
      FROM property_reviews
      GROUP BY property_id
) AS prop_reviews ON prop_reviews.property_id = properties.id
"""

PROPERTY_COLUMNS = (
    "owner_id",
    "title",
    "description",
    "thumbnail_photo_url",
    "cover_photo_url",
    "cost_per_night",
    "street",
    "city",
    "province",
    "post_code",
    "country",
    "parking_spaces",
    "number_of_bathrooms",
    "number_of_bedrooms",
)


def to_minor_units(amount: float) -> int:
    """Converts a price in dollars to the cents stored in ``cost_per_night``."""
    cents = Decimal(str(amount)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_property_search(criteria: PropertySearchCriteria, limit: int = settings.DEFAULT_SEARCH_LIMIT):
    """
    Returns ``(sql, params)`` for a property search.

    Conditions are added in a fixed order (city, owner, minimum price,
    maximum price, minimum rating) regardless of how the criteria were set.
    """
    builder = QueryBuilder(PROPERTY_SEARCH_BASE)
    if criteria.city is not None:
        builder.where("city LIKE {}", f"%{criteria.city}%")
    if criteria.owner_id is not None:
        builder.where("owner_id = {}", criteria.owner_id)
    if criteria.minimum_price_per_night is not None:
        builder.where("cost_per_night >= {}", to_minor_units(criteria.minimum_price_per_night))
    if criteria.maximum_price_per_night is not None:
        builder.where("cost_per_night <= {}", to_minor_units(criteria.maximum_price_per_night))
    if criteria.minimum_rating is not None:
        builder.where("average_rating >= {}", Decimal(str(criteria.minimum_rating)))

    limit_placeholder = builder.bind(limit)
    return builder.build(
        f"""
        GROUP BY properties.id, average_rating
        ORDER BY cost_per_night
        LIMIT {limit_placeholder}
        """
    )


async def get_all_properties(
    db: Database, criteria: PropertySearchCriteria | None = None, limit: int = settings.DEFAULT_SEARCH_LIMIT
) -> List[Dict[str, Any]]:
    """
    Properties matching every supplied criterion, cheapest first, each row
    carrying its ``average_rating``. An empty list means nothing matched;
    a store failure raises ``DataAccessError``.
    """
    if limit < 1:
        raise ValueError("limit must be a positive integer")
    sql, params = build_property_search(criteria or PropertySearchCriteria(), limit)
    rows = await db.execute(sql, params)
    logger.debug("Property search executed", conditions=len(params) - 1, result_count=len(rows))
    return rows


async def add_property(db: Database, prop: PropertyCreate) -> Dict[str, Any]:
    builder = QueryBuilder("")
    values = prop.model_dump()
    values["cost_per_night"] = to_minor_units(prop.cost_per_night)
    placeholders = [builder.bind(values[column]) for column in PROPERTY_COLUMNS]
    sql = (
        f"INSERT INTO properties ({', '.join(PROPERTY_COLUMNS)})\n"
        f"VALUES ({', '.join(placeholders)})\n"
        "RETURNING *"
    )
    rows = await db.execute(sql, builder.params)
    logger.info("Property added", property_id=rows[0].get("id"), owner_id=prop.owner_id)
    return rows[0]
