from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.orm import sessionmaker

from fishing_sim.domain.models.catch import CatchCommit, CatchRecord, CommitResult
from fishing_sim.infrastructure.db.sql.repos import insert_claim, load_record, upsert_record


def create_sql_catch_persistor(session_factory: sessionmaker) -> Callable[[CatchCommit], CommitResult]:
    def _persist(commit: CatchCommit) -> CommitResult:
        """Claim and record update share one transaction; any failure rolls both back."""
        with session_factory.begin() as session:
            claimed = False
            conflict = False
            if commit.claim_legendary:
                claimed = insert_claim(
                    session,
                    species_id=commit.species_id,
                    location_id=commit.location_id,
                    angler_id=commit.angler_id,
                )
                conflict = not claimed

            record = load_record(session, commit.angler_id, commit.species_id, for_update=True) or CatchRecord(
                angler_id=commit.angler_id,
                species_id=commit.species_id,
            )
            is_new_record = record.register(commit.weight, commit.value)
            upsert_record(session, record)

        return CommitResult(is_new_record=is_new_record, legendary_claimed=claimed, legendary_conflict=conflict)

    return _persist
