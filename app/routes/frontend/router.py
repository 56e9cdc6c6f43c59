import httpx
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from app.components.review_list import ReviewList

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Customer Reviews</title></head>
<body>
{content}
</body>
</html>
"""

api_router = APIRouter(
    prefix="/products",
    tags=["Frontend"],
)

# Render the review list of a product
@api_router.get("/{product_id}/reviews", response_class=HTMLResponse)
async def product_reviews_page(product_id: str, request: Request):
    # The view talks to this same app over in-process HTTP.
    transport = httpx.ASGITransport(app=request.app)
    async with httpx.AsyncClient(transport=transport, base_url=str(request.base_url)) as client:
        review_list = ReviewList(client)
        await review_list.set_product_id(product_id)

    return HTMLResponse(content=PAGE_TEMPLATE.format(content=review_list.render()))
