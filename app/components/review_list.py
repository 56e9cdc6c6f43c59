import html
import logging
import re
from typing import Optional
from urllib.parse import quote
import httpx

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")

LIST_TEMPLATE = """<div>
<h3>Customer Reviews</h3>
{{items}}</div>"""

ITEM_TEMPLATE = """<div data-key="{{id}}">
<h4>{{userName}}</h4>
<p>Rating: {{rating}} stars</p>
<p>{{reviewText}}</p>
{{media}}</div>
"""

PHOTO_TEMPLATE = '<img src="{{photo}}" alt="Review">\n'
VIDEO_TEMPLATE = '<video src="{{video}}" controls></video>\n'


class ReviewList:
    """
    Lists the reviews of one product.

    The product id is the only dependency: `set_product_id` fetches once
    whenever it changes, and `render` draws whatever was last fetched.
    A failed fetch is logged and leaves the current reviews in place.
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client
        self.product_id: Optional[str] = None
        self.reviews: list = []

    async def set_product_id(self, product_id: str):
        if product_id == self.product_id:
            return
        self.product_id = product_id
        await self.fetch_reviews()

    async def fetch_reviews(self):
        try:
            response = await self.client.get(f"/api/reviews/{quote(self.product_id, safe='')}")
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as error:
            logger.error("There was an error fetching the reviews: %s", error)
            return

        if not isinstance(data, list):
            logger.error("There was an error fetching the reviews: expected a list, got %s", type(data).__name__)
            return
        self.reviews = data

    def render(self) -> str:
        items = "".join(self._render_review(review) for review in self.reviews)
        return self._replace_placeholders(LIST_TEMPLATE, items=items)

    def _render_review(self, review: dict) -> str:
        media = ""
        if review.get("photo"):
            media += self._replace_placeholders(PHOTO_TEMPLATE, photo=html.escape(review["photo"]))
        if review.get("video"):
            media += self._replace_placeholders(VIDEO_TEMPLATE, video=html.escape(review["video"]))

        return self._replace_placeholders(
            ITEM_TEMPLATE,
            id=html.escape(str(review.get("id", ""))),
            userName=html.escape(str(review.get("userName") or "")),
            rating=html.escape(str(review.get("rating", ""))),
            reviewText=html.escape(str(review.get("reviewText") or "")),
            media=media,
        )

    def _replace_placeholders(self, content: str, **kwargs) -> str:
        """Replace {{variable}} placeholders with actual values, in a single pass"""
        return PLACEHOLDER.sub(
            lambda match: str(kwargs.get(match.group(1), match.group(0))),
            content,
        )
