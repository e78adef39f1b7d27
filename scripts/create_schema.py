#!/usr/bin/env python3
"""Create the votables table with Logfire error tracking."""

import asyncio
import sys

import logfire
from sqlalchemy import Table
from sqlalchemy.ext.asyncio import AsyncEngine

from votable.config import Settings
from votable.domain.value import VotableSchema
from votable.util.di.container import create_container
from votable.util.logging import setup_logging
from votable.util.observability import configure_logfire


async def create_schema() -> None:
    """Create the votables table (and its indexes) if missing."""
    container = create_container()
    try:
        schema = await container.get(VotableSchema)
        table = await container.get(Table)
        engine = await container.get(AsyncEngine)

        async with engine.begin() as conn:
            await conn.run_sync(table.metadata.create_all)

        logfire.info(
            "Votables table ready",
            table=schema.table_name,
            downvoting_enabled=schema.downvoting_enabled,
            indexed=schema.indexed,
        )
    finally:
        await container.close()


def main() -> int:
    """Create the schema and log any errors to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Creating votables schema")
        asyncio.run(create_schema())
        return 0

    except Exception as e:
        logfire.error(
            "Schema creation failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
