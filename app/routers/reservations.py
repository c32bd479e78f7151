from fastapi import APIRouter, Depends, Query
from app.config import settings
from app.database import Database, get_database
from app.services.reservations import get_all_reservations

router = APIRouter(prefix="/api", tags=["reservations"])

@router.get("/reservations", response_model=dict)
async def list_reservations(guest_id: int, limit: int = Query(default=settings.DEFAULT_SEARCH_LIMIT, ge=1), db: Database = Depends(get_database)):
    reservations = await get_all_reservations(db, guest_id, limit)
    return {"reservations": reservations}
