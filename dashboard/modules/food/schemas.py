from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class FoodPhotoRename(BaseModel):
    name: str


class FoodPhotoResponse(BaseModel):
    id: str
    name: str
    url: str
    user_id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FoodReviewCreate(BaseModel):
    content: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class FoodReviewUpdate(BaseModel):
    content: str
    rating: Optional[int] = Field(default=None, ge=1, le=5)


class FoodReviewResponse(BaseModel):
    id: str
    food_id: str
    user_id: str
    content: str
    rating: Optional[int] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FoodPhotoWithReviews(FoodPhotoResponse):
    reviews: List[FoodReviewResponse] = []
