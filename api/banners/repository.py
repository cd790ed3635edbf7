"""
Headline banner persistence.
"""

from __future__ import annotations

import asyncpg

from core import db
from core.errors import RepositoryError


async def get_banner_image(pool: asyncpg.Pool, url: str) -> bytes:
    """
    Raw image bytes for the banner keyed by exactly `url`.

    Exactly one row is expected; a miss is an error, never empty bytes.
    """
    with db.repository_operation("get_banner_image"):
        row = await db.fetch_one(
            pool,
            """
            SELECT image
            FROM headline_banner
            WHERE url = $1
            """,
            url,
        )
    if row is None:
        raise RepositoryError("get_banner_image", f"no banner with url {url!r}")
    return bytes(row["image"])
