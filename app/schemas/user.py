from pydantic import BaseModel, Field

class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    password: str = Field(min_length=1)

class UserResponse(BaseModel):
    id: int
    name: str
    email: str
