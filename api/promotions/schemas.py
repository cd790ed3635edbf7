"""
Promotion API schemas.
"""

from __future__ import annotations

from pydantic import BaseModel


class Promotion(BaseModel):
    id: int
    title: str
    description: str
    headline_banner_url: str = ""
