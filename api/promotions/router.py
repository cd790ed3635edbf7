"""
Promotion API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Query

from core import db, params

from . import service
from .schemas import Promotion

router = APIRouter()


# The path spelling is what deployed clients call.
@router.get("/promtions", response_model=list[Promotion])
async def get_promotions(
    partner: str | None = Query(default=None),
    lat: str | None = Query(default=None),
    long: str | None = Query(default=None),
    pool: asyncpg.Pool = Depends(db.get_pool),
) -> list[Promotion]:
    """
    Promotions for a partner (0/missing means all), or ranked by distance
    when both `lat` and `long` are given and non-zero.
    """
    return await service.list_promotions(
        pool,
        partner_id=params.parse_int(partner),
        latitude=params.parse_float(lat),
        longitude=params.parse_float(long),
    )
