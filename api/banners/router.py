"""
Banner image endpoint.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from core import db

from . import repository

router = APIRouter()


@router.get("/image", response_class=Response)
async def get_image(
    url: str = Query(default=""),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> Response:
    image = await repository.get_banner_image(pool, url)
    return Response(content=image, media_type="image/jpeg")
