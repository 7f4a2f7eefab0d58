"""Document <-> JSON conversion shared by the user repositories."""

from typing import Any, Dict

from bson import ObjectId
from fastapi.encoders import jsonable_encoder


def document_to_json(document: Dict[str, Any]) -> Dict[str, Any]:
    """Make a stored document JSON-ready.

    ObjectId values become hex strings at any depth and datetimes become ISO
    strings. Keys are kept as-is (``sqlalchemy_safe`` would drop ``_sa*``
    keys, which are legal user fields here).
    """
    encoded: Dict[str, Any] = jsonable_encoder(
        document,
        custom_encoder={ObjectId: str},
        sqlalchemy_safe=False,
    )
    return encoded
