from fastapi import Request
from app.services.review_store import ReviewStore


def get_review_store(request: Request) -> ReviewStore:
    # Created by the lifespan in app.database.connections
    return request.app.state.review_store
