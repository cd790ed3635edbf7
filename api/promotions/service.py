"""
Promotion lookup dispatch.

Geo mode wins whenever both coordinates are non-zero; otherwise the partner
filter applies, where partner 0 means "all partners".
"""

from __future__ import annotations

import logging

import asyncpg

from . import repository
from .schemas import Promotion

logger = logging.getLogger(__name__)

ALL_PARTNERS = 0


def wants_geo(latitude: float, longitude: float) -> bool:
    return latitude != 0 and longitude != 0


def partner_filter(partner_id: int) -> int | None:
    """
    Translate the external sentinel (0) into "no filter".
    """
    return None if partner_id == ALL_PARTNERS else partner_id


async def list_promotions(
    pool: asyncpg.Pool,
    *,
    partner_id: int = ALL_PARTNERS,
    latitude: float = 0.0,
    longitude: float = 0.0,
) -> list[Promotion]:
    if wants_geo(latitude, longitude):
        logger.debug("promotions_mode mode=geo latitude=%s longitude=%s", latitude, longitude)
        return await repository.list_promotions_by_geo(pool, longitude, latitude)

    logger.debug("promotions_mode mode=partner partner_id=%s", partner_id)
    return await repository.list_promotions_by_partner(pool, partner_filter(partner_id))
