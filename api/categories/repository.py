"""
Category tree reads (raw SQL).
"""

from __future__ import annotations

import asyncpg

from core import db

from .schemas import Category


async def list_categories(pool: asyncpg.Pool, parent_id: int) -> list[Category]:
    """
    Direct children of `parent_id`, each with at most one banner URL.

    parent_id=0 is the Root category, so it yields the top-level tiles.
    """
    with db.repository_operation("list_categories"):
        rows = await db.fetch_all(
            pool,
            """
            SELECT
              c.id,
              c.name,
              COALESCE(hb.url, '') AS url
            FROM category c
            LEFT JOIN LATERAL (
              SELECT b.url
              FROM headline_banner b
              WHERE b.category_id = c.id
              ORDER BY b.url
              LIMIT 1
            ) hb ON true
            WHERE c.parent_id = $1::int
            """,
            parent_id,
        )
    return [Category(**row) for row in rows]
