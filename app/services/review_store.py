import logging
from datetime import datetime, timezone
from pymongo import errors
from app.models.review.review import ReviewCreate
from app.utilities.convert_object_id import review_document_to_json

logger = logging.getLogger(__name__)


class ReviewStore:
    def __init__(self, collection):
        """
        `collection` is the motor collection holding review documents,
        e.g. client["reviews"]["reviews"]
        """
        self.collection = collection

    async def create_review(self, payload: ReviewCreate) -> dict:
        """Insert one review and return it as persisted, with `id` and `createdAt`"""
        review_doc = payload.model_dump(exclude_none=True)
        review_doc["createdAt"] = datetime.now(timezone.utc)

        insert_result = await self.collection.insert_one(review_doc)

        # Read back so the response carries what the store actually kept.
        # The insert already succeeded, so a failed read falls back to the
        # document that was sent.
        try:
            stored = await self.collection.find_one({"_id": insert_result.inserted_id})
        except errors.PyMongoError as e:
            logger.warning("Read-back of review %s failed: %s", insert_result.inserted_id, e)
            stored = None

        if stored is None:
            stored = {**review_doc, "_id": insert_result.inserted_id}
        return review_document_to_json(stored)

    async def list_reviews(self, product_id: str) -> list:
        cursor = self.collection.find({"productId": product_id})

        reviews = []
        async for doc in cursor:
            reviews.append(review_document_to_json(doc))
        return reviews
