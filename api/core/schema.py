"""
Schema bootstrap.

Runs on every process start. Tables are created only when missing and the
category taxonomy is seeded with ON CONFLICT DO NOTHING, so re-running is a
no-op. Failures propagate: the app must not serve traffic without a schema.
"""

from __future__ import annotations

import logging

import asyncpg

logger = logging.getLogger(__name__)

ROOT_CATEGORY_ID = 0

# (id, parent_id, name)
CATEGORY_SEED: tuple[tuple[int, int | None, str], ...] = (
    (0, None, "Root"),
    (1, 0, "Eating out"),
    (2, 0, "Supermarkets"),
    (3, 0, "Clothes & etc."),
    (4, 0, "Entertainment"),
    (5, 0, "Transport"),
    (6, 0, "Health & Beauty"),
    (7, 1, "Bars"),
    (8, 1, "Restaurants"),
    (9, 1, "Cafe"),
    (10, 1, "Burgers"),
    (11, 1, "Gyros"),
)

INIT_SQL = """
CREATE TABLE IF NOT EXISTS "user" (
  id int PRIMARY KEY NOT NULL,
  mail text,
  phone_number text
);

CREATE TABLE IF NOT EXISTS partner (
  id int PRIMARY KEY NOT NULL,
  headline text NOT NULL,
  description text NOT NULL,
  location point NOT NULL,
  price_level smallint CHECK (price_level BETWEEN 1 AND 5)
);

CREATE TABLE IF NOT EXISTS category (
  id int PRIMARY KEY NOT NULL,
  parent_id int NULL REFERENCES category(id),
  name text NOT NULL
);

CREATE TABLE IF NOT EXISTS promotion (
  id int PRIMARY KEY NOT NULL,
  partner_id int NOT NULL REFERENCES partner(id),
  category_id int NOT NULL REFERENCES category(id),
  title text NOT NULL,
  description text NOT NULL
);

CREATE TABLE IF NOT EXISTS action (
  id int PRIMARY KEY NOT NULL,
  "type" text NOT NULL CHECK ("type" IN ('taken', 'expended')),
  user_id int NOT NULL REFERENCES "user"(id),
  promotion_id int NOT NULL REFERENCES promotion(id)
);

CREATE TABLE IF NOT EXISTS headline_banner (
  url text PRIMARY KEY,
  partner_id int NULL REFERENCES partner(id),
  promotion_id int NULL REFERENCES promotion(id),
  category_id int NULL REFERENCES category(id),
  image bytea NOT NULL
);
"""

# Serializes concurrent bootstraps from several workers or replicas.
SCHEMA_LOCK_KEY = 7305001

SEED_CATEGORY_SQL = """
INSERT INTO category (id, parent_id, name)
VALUES ($1, $2, $3)
ON CONFLICT DO NOTHING
"""


async def init_schema(pool: asyncpg.Pool) -> None:
    """
    Create tables and seed categories in one transaction.

    A transaction-scoped advisory lock is taken first: concurrent
    CREATE TABLE IF NOT EXISTS can otherwise fail on pg_type. Seed rows are
    inserted in order so every parent exists before its children.
    """
    async with pool.acquire() as conn:
        async with conn.transaction():
            await conn.execute("SELECT pg_advisory_xact_lock($1)", SCHEMA_LOCK_KEY)
            await conn.execute(INIT_SQL)
            await conn.executemany(SEED_CATEGORY_SQL, CATEGORY_SEED)
    logger.info("schema_initialized categories_seeded=%s", len(CATEGORY_SEED))
