import pytest
from pymongo import errors
from app.models.review.review import ReviewCreate


@pytest.mark.asyncio
async def test_create_review_persists_document(review_store, review_collection):
    review = await review_store.create_review(
        ReviewCreate(productId="p1", userName="Alice", rating=5, reviewText="Great")
    )

    stored = await review_collection.find_one({"productId": "p1"})
    assert str(stored["_id"]) == review["id"]
    assert stored["userName"] == "Alice"
    assert "createdAt" in stored
    # Absent optional fields are not written
    assert "photo" not in stored
    assert "video" not in stored


@pytest.mark.asyncio
async def test_list_reviews_filters_by_product(review_store):
    await review_store.create_review(ReviewCreate(productId="p1", userName="Alice"))
    await review_store.create_review(ReviewCreate(productId="p2", userName="Bob"))
    await review_store.create_review(ReviewCreate(productId="p1", userName="Carol"))

    reviews = await review_store.list_reviews("p1")

    assert [review["userName"] for review in reviews] == ["Alice", "Carol"]
    assert all("_id" not in review for review in reviews)


@pytest.mark.asyncio
async def test_list_reviews_for_unknown_product(review_store):
    assert await review_store.list_reviews("nothing-here") == []


def test_review_create_typing():
    review = ReviewCreate.model_validate({"productId": 17, "rating": "3.5", "unknown": True})

    assert review.productId == "17"
    assert review.rating == 3.5
    assert not hasattr(review, "unknown")


@pytest.mark.asyncio
async def test_failed_read_back_returns_inserted_review(review_store, review_collection, monkeypatch):
    class UnreadableCollection:
        async def insert_one(self, document):
            return await review_collection.insert_one(document)

        async def find_one(self, query):
            raise errors.AutoReconnect("connection reset")

    monkeypatch.setattr(review_store, "collection", UnreadableCollection())

    review = await review_store.create_review(ReviewCreate(productId="p1", userName="Alice", rating=5))

    stored = await review_collection.find_one({"productId": "p1"})
    assert review["id"] == str(stored["_id"])
    assert review["userName"] == "Alice"
    assert review["rating"] == 5
    assert "createdAt" in review
