from fastapi import APIRouter, Depends, Query
from typing import Optional
from app.config import settings
from app.database import Database, get_database
from app.schemas.property import PropertyCreate
from app.schemas.property_search import PropertySearchCriteria, PropertySearchResponse
from app.services.properties import get_all_properties, add_property
from structlog import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/api", tags=["properties"])

@router.get("/properties", response_model=PropertySearchResponse)
async def search_properties(
    city: Optional[str] = None,
    owner_id: Optional[int] = None,
    minimum_price_per_night: Optional[float] = Query(default=None, ge=0, allow_inf_nan=False),
    maximum_price_per_night: Optional[float] = Query(default=None, ge=0, allow_inf_nan=False),
    minimum_rating: Optional[float] = Query(default=None, ge=0, le=5, allow_inf_nan=False),
    limit: int = Query(default=settings.DEFAULT_SEARCH_LIMIT, ge=1),
    db: Database = Depends(get_database),
):
    criteria = PropertySearchCriteria(
        city=city,
        owner_id=owner_id,
        minimum_price_per_night=minimum_price_per_night,
        maximum_price_per_night=maximum_price_per_night,
        minimum_rating=minimum_rating,
    )
    properties = await get_all_properties(db, criteria, limit)
    logger.info("Property search served", criteria=criteria.model_dump(exclude_none=True), limit=limit, result_count=len(properties))
    return PropertySearchResponse(properties=properties)

@router.post("/properties", response_model=dict, status_code=201)
async def create_property(request: PropertyCreate, db: Database = Depends(get_database)):
    return await add_property(db, request)
