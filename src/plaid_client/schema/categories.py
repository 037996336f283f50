from __future__ import annotations

from typing import List

from .base import PlaidModel


class Category(PlaidModel):
    category_id: str
    # "place" for physical transactions, "special" for bank charges and the like
    group: str
    hierarchy: List[str]


class GetCategoriesResponse(PlaidModel):
    request_id: str
    categories: List[Category]
