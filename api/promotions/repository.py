"""
Promotion SQL (raw).

Two read paths over the same rows:
- partner-scoped, with an optional partner filter
- geo-ranked by distance from the owning partner's location
"""

from __future__ import annotations

import asyncpg

from core import db

from .schemas import Promotion


async def list_promotions_by_partner(pool: asyncpg.Pool, partner_id: int | None) -> list[Promotion]:
    """
    Promotions owned by `partner_id`, or every promotion when it is None.
    """
    with db.repository_operation("list_promotions_by_partner"):
        rows = await db.fetch_all(
            pool,
            """
            SELECT
              pr.id,
              pr.title,
              pr.description,
              COALESCE(hb.url, '') AS headline_banner_url
            FROM promotion pr
            LEFT JOIN LATERAL (
              SELECT b.url
              FROM headline_banner b
              WHERE b.promotion_id = pr.id
              ORDER BY b.url
              LIMIT 1
            ) hb ON true
            WHERE $1::int IS NULL
               OR pr.partner_id = $1::int
            """,
            partner_id,
        )
    return [Promotion(**row) for row in rows]


async def list_promotions_by_geo(
    pool: asyncpg.Pool,
    longitude: float,
    latitude: float,
) -> list[Promotion]:
    """
    Every promotion, nearest owning partner first. No limit is applied.

    The reference point is built as point(latitude, longitude) to match how
    partner locations are stored. `<->` on points is planar distance in
    degrees, not great-circle distance, so at high latitudes a farther
    partner can rank ahead of a nearer one.
    """
    with db.repository_operation("list_promotions_by_geo"):
        rows = await db.fetch_all(
            pool,
            """
            SELECT
              pr.id,
              pr.title,
              pr.description,
              COALESCE(hb.url, '') AS headline_banner_url
            FROM promotion pr
            JOIN partner p ON p.id = pr.partner_id
            LEFT JOIN LATERAL (
              SELECT b.url
              FROM headline_banner b
              WHERE b.promotion_id = pr.id
              ORDER BY b.url
              LIMIT 1
            ) hb ON true
            ORDER BY p.location <-> point($2::float8, $1::float8) ASC, pr.id
            """,
            longitude,
            latitude,
        )
    return [Promotion(**row) for row in rows]
