import json
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError
from bson.errors import BSONError
from pymongo import errors
from app.models.review.review import Review, ReviewCreate
from app.database.db import get_review_store
from app.services.review_store import ReviewStore
from app.services.json import return_error_json

logger = logging.getLogger(__name__)

review_router = APIRouter(
    prefix="/api/reviews",
    tags=["ReviewAPI"],
)

# Submit a review
@review_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Review,
    response_model_exclude_none=True,
)
async def create_review(
    request: Request,
    store: ReviewStore = Depends(get_review_store),
):
    try:
        body = await request.json()
    except ValueError as e:
        return return_error_json(message="Request body is not valid JSON", data=str(e))

    try:
        payload = ReviewCreate.model_validate(body)
    except ValidationError as e:
        return return_error_json(
            message="Review validation failed",
            data=json.loads(e.json(include_url=False)),
        )

    # The driver encodes to BSON before sending; oversized ints and lone
    # surrogates fail there rather than in the server.
    try:
        return await store.create_review(payload)
    except (errors.PyMongoError, BSONError, OverflowError, UnicodeEncodeError) as e:
        logger.warning("Review insert rejected by store: %s", e)
        return return_error_json(message="Review could not be saved", data=str(e))

# List the reviews of a product
@review_router.get(
    "/{product_id}",
    response_model=List[Review],
    response_model_exclude_none=True,
)
async def list_reviews(
    product_id: str,
    store: ReviewStore = Depends(get_review_store),
):
    try:
        return await store.list_reviews(product_id)

    except HTTPException as e:
        raise e

    except Exception as e:
        logger.exception("Failed to list reviews for product %s", product_id)
        raise HTTPException(status_code=500, detail=str(e))
