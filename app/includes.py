from app.routes.review.router import review_router as review
from app.routes.frontend.router import api_router as frontend


def get_all_routers():
    return [
        review,
        frontend,
    ]
