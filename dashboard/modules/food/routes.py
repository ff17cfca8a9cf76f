from fastapi import APIRouter, Depends, File, Query, UploadFile
from dashboard.database.supabase_client import get_supabase
from dashboard.modules.auth.schemas import Identity
from dashboard.modules.food.schemas import (
    FoodPhotoRename, FoodPhotoResponse, FoodPhotoWithReviews,
    FoodReviewCreate, FoodReviewUpdate, FoodReviewResponse
)
from dashboard.modules.food.service import FoodService
from dashboard.core.dependencies import get_current_identity, require_confirmation
from supabase import Client
from typing import List, Literal, Optional

router = APIRouter(prefix="/food", tags=["food"])


def get_food_service(supabase: Client = Depends(get_supabase)) -> FoodService:
    return FoodService(supabase)


@router.get("/photos", response_model=List[FoodPhotoWithReviews])
async def list_photos(
    sort: Literal["created_at", "name"] = "created_at",
    search: Optional[str] = None,
    include_reviews: bool = False,
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    """List food photos, optionally searched by name and with their reviews"""
    return service.list_photos(identity.id, sort=sort, search=search, include_reviews=include_reviews)


@router.post("/photos", response_model=FoodPhotoResponse, status_code=201)
async def upload_photo(
    file: UploadFile = File(...),
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    """Upload a food photo (images only)"""
    return await service.upload_photo(file, identity.id)


@router.patch("/photos/{photo_id}", response_model=FoodPhotoResponse)
async def rename_photo(
    photo_id: str,
    rename: FoodPhotoRename,
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    return service.rename_photo(photo_id, rename, identity.id)


@router.delete("/photos/{photo_id}", status_code=204)
async def delete_photo(
    photo_id: str,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: FoodService = Depends(get_food_service)
):
    """Delete a photo and all its reviews"""
    service.delete_photo(photo_id, identity.id)
    return None


@router.get("/photos/{photo_id}/reviews", response_model=List[FoodReviewResponse])
async def list_reviews(
    photo_id: str,
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    return service.list_reviews(photo_id, identity.id)


@router.post("/photos/{photo_id}/reviews", response_model=FoodReviewResponse, status_code=201)
async def add_review(
    photo_id: str,
    review_data: FoodReviewCreate,
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    return service.add_review(photo_id, review_data, identity.id)


@router.patch("/reviews/{review_id}", response_model=FoodReviewResponse)
async def edit_review(
    review_id: str,
    review_data: FoodReviewUpdate,
    identity: Identity = Depends(get_current_identity),
    service: FoodService = Depends(get_food_service)
):
    return service.edit_review(review_id, review_data, identity.id)


@router.delete("/reviews/{review_id}", status_code=204)
async def delete_review(
    review_id: str,
    identity: Identity = Depends(get_current_identity),
    confirmed: bool = Depends(require_confirmation),
    service: FoodService = Depends(get_food_service)
):
    service.delete_review(review_id, identity.id)
    return None
