from __future__ import annotations

from sqlalchemy.engine import Engine


SCHEMA_STATEMENTS = (
    """
    CREATE TABLE IF NOT EXISTS legendary_claim (
        species_id VARCHAR(64) NOT NULL,
        location_id VARCHAR(64) NOT NULL,
        angler_id VARCHAR(64) NOT NULL,
        PRIMARY KEY (species_id, location_id)
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS catch_record (
        angler_id VARCHAR(64) NOT NULL,
        species_id VARCHAR(64) NOT NULL,
        best_weight DOUBLE NOT NULL DEFAULT 0,
        best_value INTEGER NOT NULL DEFAULT 0,
        total_caught INTEGER NOT NULL DEFAULT 0,
        PRIMARY KEY (angler_id, species_id)
    )
    """,
)


def ensure_schema(engine: Engine) -> int:
    """Create the ledger and record tables if missing; returns statements executed."""
    count = 0
    with engine.begin() as conn:
        for count, statement in enumerate(SCHEMA_STATEMENTS, start=1):
            conn.exec_driver_sql(statement)
    return count
