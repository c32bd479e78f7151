from pydantic import BaseModel, Field

class PropertyCreate(BaseModel):
    owner_id: int
    title: str
    description: str
    thumbnail_photo_url: str
    cover_photo_url: str
    cost_per_night: float = Field(ge=0, allow_inf_nan=False)  # major currency units; stored ×100
    street: str
    city: str
    province: str
    post_code: str
    country: str
    parking_spaces: int = Field(default=0, ge=0)
    number_of_bathrooms: int = Field(default=0, ge=0)
    number_of_bedrooms: int = Field(default=0, ge=0)

    class Config:
        json_schema_extra = {
            "example": {
                "owner_id": 1,
                "title": "Speed lamp",
                "description": "description",
                "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
                "cost_per_night": 930.61,
                "street": "536 Namsub Highway",
                "city": "Sotboske",
                "province": "Quebec",
                "post_code": "28142",
                "country": "Canada",
                "parking_spaces": 6,
                "number_of_bathrooms": 4,
                "number_of_bedrooms": 8
            }
        }
