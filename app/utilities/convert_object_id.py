from datetime import datetime
from bson import ObjectId


def convert_object_ids(obj):
    if isinstance(obj, list):
        return [convert_object_ids(item) for item in obj]
    elif isinstance(obj, dict):
        return {key: convert_object_ids(value) for key, value in obj.items()}
    elif isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, datetime):
        return obj.isoformat()
    else:
        return obj


def review_document_to_json(doc: dict) -> dict:
    """Turn a stored review document into its JSON shape (`_id` becomes `id`)."""
    review = convert_object_ids(doc)
    review["id"] = review.pop("_id")
    return review
