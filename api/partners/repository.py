"""
Partner reads (raw SQL).

`partner.location` is a Postgres point stored as (latitude, longitude).
"""

from __future__ import annotations

import asyncpg

from core import db

from .schemas import Partner


async def list_partners(pool: asyncpg.Pool) -> list[Partner]:
    with db.repository_operation("list_partners"):
        rows = await db.fetch_all(
            pool,
            """
            SELECT
              p.id,
              p.headline,
              p.description,
              p.location[0] AS latitude,
              p.location[1] AS longitude,
              p.price_level,
              COALESCE(hb.url, '') AS headline_banner_url
            FROM partner p
            LEFT JOIN LATERAL (
              SELECT b.url
              FROM headline_banner b
              WHERE b.partner_id = p.id
              ORDER BY b.url
              LIMIT 1
            ) hb ON true
            """
        )
    return [Partner(**row) for row in rows]
