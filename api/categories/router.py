"""
Category API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query

from core import db, params

from . import repository
from .schemas import Category

router = APIRouter()


@router.get("/categories", response_model=list[Category])
async def get_categories(
    parent: str | None = Query(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[Category]:
    """
    Children of the `parent` category. Unparsable or missing `parent` means Root.
    """
    return await repository.list_categories(pool, params.parse_int(parent))
