"""
Partner API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class Partner(BaseModel):
    id: int
    headline: str
    description: str
    latitude: float
    longitude: float
    price_level: int | None = None
    headline_banner_url: str = ""
