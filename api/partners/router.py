"""
Partner API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends

from core import db

from . import repository
from .schemas import Partner

router = APIRouter()


@router.get("/partners", response_model=list[Partner])
async def get_partners(pool: asyncpg.Pool = Depends(db.get_pool)) -> list[Partner]:
    return await repository.list_partners(pool)
