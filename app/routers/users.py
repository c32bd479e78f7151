from fastapi import APIRouter, Depends, HTTPException
from app.database import Database, get_database
from app.errors import IntegrityViolation
from app.schemas.user import UserCreate, UserResponse
from app.services.users import add_user, get_user_with_email, get_user_with_id

router = APIRouter(prefix="/api", tags=["users"])

@router.post("/users", response_model=UserResponse, status_code=201)
async def create_user(request: UserCreate, db: Database = Depends(get_database)):
    if await get_user_with_email(db, request.email) is not None:
        raise HTTPException(status_code=409, detail="Email already registered")
    try:
        return await add_user(db, request)
    except IntegrityViolation:
        # Lost a race with a concurrent sign-up for the same email
        raise HTTPException(status_code=409, detail="Email already registered")

@router.get("/users/{user_id}", response_model=UserResponse)
async def read_user(user_id: int, db: Database = Depends(get_database)):
    user = await get_user_with_id(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user
