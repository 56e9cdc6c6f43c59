from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union


class ReviewCreate(BaseModel):
    # Unknown keys (including id, _id and createdAt) are dropped. NaN and
    # infinite ratings are typing failures.
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, allow_inf_nan=False)

    productId: str = Field(..., description="Product the review belongs to")
    userName: Optional[str] = None
    rating: Optional[Union[int, float]] = None
    reviewText: Optional[str] = None
    photo: Optional[str] = Field(None, description="Photo URL or reference")
    video: Optional[str] = Field(None, description="Video URL or reference")


class Review(ReviewCreate):
    id: str
    createdAt: datetime
