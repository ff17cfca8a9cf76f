import logging
from supabase import Client
from fastapi import UploadFile
from dashboard.config import settings
from dashboard.core.owned_collection import OwnedCollection, require_text
from dashboard.core.storage import ObjectBucket, read_upload
from dashboard.modules.food.schemas import (
    FoodPhotoRename, FoodPhotoResponse, FoodPhotoWithReviews,
    FoodReviewCreate, FoodReviewUpdate, FoodReviewResponse
)
from typing import List, Optional

logger = logging.getLogger(__name__)

PHOTO_SORTS = {
    "created_at": ("created_at", True),
    "name": ("name", False),
}


class FoodService:
    def __init__(self, supabase: Client):
        self.supabase = supabase
        self.bucket = ObjectBucket(supabase, settings.food_bucket)
        self.photos = OwnedCollection(supabase, "food_photos", FoodPhotoResponse, label="food photo")
        self.reviews = OwnedCollection(supabase, "reviews", FoodReviewResponse, label="review")

    def list_photos(
        self,
        user_id: str,
        sort: str = "created_at",
        search: Optional[str] = None,
        include_reviews: bool = False,
    ) -> List[FoodPhotoWithReviews]:
        """List food photos sorted by date (newest first) or name (A-Z), optionally filtered by name"""
        order_by, descending = PHOTO_SORTS.get(sort, PHOTO_SORTS["created_at"])
        photos = self.photos.fetch(user_id, order_by=order_by, descending=descending)
        if search and search.strip():
            needle = search.strip().lower()
            photos = [p for p in photos if needle in p.name.lower()]
        result = []
        for photo in photos:
            reviews = self._reviews_for(photo.id) if include_reviews else []
            result.append(FoodPhotoWithReviews(**photo.model_dump(), reviews=reviews))
        return result

    async def upload_photo(self, file: UploadFile, user_id: str) -> FoodPhotoResponse:
        content = await read_upload(file, settings.max_upload_bytes, image_only=True)
        record = self.photos.create_with_object(
            user_id, self.bucket, file.filename, content, content_type=file.content_type
        )
        logger.info(f"User {user_id} uploaded food photo {record.id}")
        return record

    def rename_photo(self, photo_id: str, rename: FoodPhotoRename, user_id: str) -> FoodPhotoResponse:
        name = require_text(rename.name, "Name")
        return self.photos.replace(photo_id, user_id, {"name": name})

    def delete_photo(self, photo_id: str, user_id: str) -> None:
        """Delete the photo's reviews, its stored object, then the photo row"""
        def drop_reviews(photo: FoodPhotoResponse) -> None:
            removed = self.reviews.delete_where("food_id", photo.id)
            logger.info(f"Deleted {removed} review(s) of food photo {photo.id}")

        self.photos.delete_with_object(photo_id, user_id, self.bucket, before_delete=drop_reviews)

    def _reviews_for(self, photo_id: str) -> List[FoodReviewResponse]:
        return self.reviews.fetch(None, filters={"food_id": photo_id})

    def list_reviews(self, photo_id: str, user_id: str) -> List[FoodReviewResponse]:
        """Reviews of one of the user's photos, newest first"""
        self.photos.get(photo_id, user_id)
        return self._reviews_for(photo_id)

    def add_review(self, photo_id: str, review_data: FoodReviewCreate, user_id: str) -> FoodReviewResponse:
        content = require_text(review_data.content, "Review")
        self.photos.get(photo_id, user_id)
        return self.reviews.create(
            user_id, {"food_id": photo_id, "content": content, "rating": review_data.rating}
        )

    def edit_review(self, review_id: str, review_data: FoodReviewUpdate, user_id: str) -> FoodReviewResponse:
        changes = {"content": require_text(review_data.content, "Review")}
        if review_data.rating is not None:
            changes["rating"] = review_data.rating
        return self.reviews.replace(review_id, user_id, changes)

    def delete_review(self, review_id: str, user_id: str) -> None:
        self.reviews.delete(review_id, user_id)
