from pydantic import BaseModel, Field, field_validator
from typing import List, Dict, Optional

class PropertySearchCriteria(BaseModel):
    city: Optional[str] = None
    owner_id: Optional[int] = None
    minimum_price_per_night: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    maximum_price_per_night: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    minimum_rating: Optional[float] = Field(default=None, ge=0, le=5, allow_inf_nan=False)

    @field_validator("city")
    def blank_city_is_absent(cls, v):
        # Search forms submit an empty string when the field is left alone
        if v is not None and not v.strip():
            return None
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "city": "Vancouver",
                "minimum_price_per_night": 50,
                "maximum_price_per_night": 200,
                "minimum_rating": 4
            }
        }

class PropertySearchResponse(BaseModel):
    properties: List[Dict]
