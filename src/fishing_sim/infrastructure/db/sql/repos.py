from __future__ import annotations

from typing import List, Optional

from sqlalchemy import text
from sqlalchemy.orm import sessionmaker

from fishing_sim.domain.models.catch import CatchRecord
from fishing_sim.domain.repositories import CatchRecordRepository, LegendaryLedgerRepository


def _dialect(session) -> str:
    return session.bind.dialect.name if session.bind is not None else "mysql"


def insert_claim(session, *, species_id: str, location_id: str, angler_id: str) -> bool:
    """Insert the claim row unless one exists; True when this call wrote it."""
    if _dialect(session) == "mysql":
        statement = """
            INSERT IGNORE INTO legendary_claim (species_id, location_id, angler_id)
            VALUES (:species_id, :location_id, :angler_id)
        """
    else:
        statement = """
            INSERT INTO legendary_claim (species_id, location_id, angler_id)
            VALUES (:species_id, :location_id, :angler_id)
            ON CONFLICT(species_id, location_id) DO NOTHING
        """
    result = session.execute(
        text(statement),
        {"species_id": species_id, "location_id": location_id, "angler_id": angler_id},
    )
    return int(result.rowcount or 0) == 1


def load_record(session, angler_id: str, species_id: str, *, for_update: bool = False) -> Optional[CatchRecord]:
    statement = """
        SELECT angler_id, species_id, best_weight, best_value, total_caught
        FROM catch_record
        WHERE angler_id = :angler_id AND species_id = :species_id
    """
    if for_update and _dialect(session) == "mysql":
        statement += " FOR UPDATE"
    row = session.execute(text(statement), {"angler_id": angler_id, "species_id": species_id}).first()
    if row is None:
        return None
    return CatchRecord(
        angler_id=row.angler_id,
        species_id=row.species_id,
        best_weight=float(row.best_weight),
        best_value=int(row.best_value),
        total_caught=int(row.total_caught),
    )


def upsert_record(session, record: CatchRecord) -> None:
    if _dialect(session) == "mysql":
        statement = """
            INSERT INTO catch_record (angler_id, species_id, best_weight, best_value, total_caught)
            VALUES (:angler_id, :species_id, :best_weight, :best_value, :total_caught)
            ON DUPLICATE KEY UPDATE
                best_weight = VALUES(best_weight),
                best_value = VALUES(best_value),
                total_caught = VALUES(total_caught)
        """
    else:
        statement = """
            INSERT INTO catch_record (angler_id, species_id, best_weight, best_value, total_caught)
            VALUES (:angler_id, :species_id, :best_weight, :best_value, :total_caught)
            ON CONFLICT(angler_id, species_id) DO UPDATE SET
                best_weight = excluded.best_weight,
                best_value = excluded.best_value,
                total_caught = excluded.total_caught
        """
    session.execute(
        text(statement),
        {
            "angler_id": record.angler_id,
            "species_id": record.species_id,
            "best_weight": float(record.best_weight),
            "best_value": int(record.best_value),
            "total_caught": int(record.total_caught),
        },
    )


class SqlLegendaryLedger(LegendaryLedgerRepository):
    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    def claimed_at(self, location_id: str) -> set[str]:
        with self.session_factory() as session:
            rows = session.execute(
                text("SELECT species_id FROM legendary_claim WHERE location_id = :location_id"),
                {"location_id": location_id},
            ).all()
            return {str(row.species_id) for row in rows}

    def claim(self, *, species_id: str, location_id: str, angler_id: str) -> bool:
        with self.session_factory.begin() as session:
            return insert_claim(session, species_id=species_id, location_id=location_id, angler_id=angler_id)

    def claimed_by(self, species_id: str, location_id: str) -> Optional[str]:
        with self.session_factory() as session:
            row = session.execute(
                text(
                    """
                    SELECT angler_id FROM legendary_claim
                    WHERE species_id = :species_id AND location_id = :location_id
                    """
                ),
                {"species_id": species_id, "location_id": location_id},
            ).first()
            return None if row is None else str(row.angler_id)


class SqlCatchRecordRepository(CatchRecordRepository):
    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory

    def get(self, angler_id: str, species_id: str) -> Optional[CatchRecord]:
        with self.session_factory() as session:
            return load_record(session, angler_id, species_id)

    def save(self, record: CatchRecord) -> None:
        with self.session_factory.begin() as session:
            upsert_record(session, record)

    def list_for_angler(self, angler_id: str) -> List[CatchRecord]:
        with self.session_factory() as session:
            rows = session.execute(
                text(
                    """
                    SELECT angler_id, species_id, best_weight, best_value, total_caught
                    FROM catch_record
                    WHERE angler_id = :angler_id
                    ORDER BY species_id
                    """
                ),
                {"angler_id": angler_id},
            ).all()
            return [
                CatchRecord(
                    angler_id=row.angler_id,
                    species_id=row.species_id,
                    best_weight=float(row.best_weight),
                    best_value=int(row.best_value),
                    total_caught=int(row.total_caught),
                )
                for row in rows
            ]
