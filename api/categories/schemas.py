"""
Category API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class Category(BaseModel):
    id: int
    name: str
    # Empty when no banner illustrates the category.
    url: str = ""
