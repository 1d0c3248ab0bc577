from __future__ import annotations

import logging
from collections.abc import Callable

from fishing_sim.domain.models.catch import CatchCommit, CatchRecord, CommitResult
from fishing_sim.infrastructure.inmemory.repos import InMemoryCatchRecordRepository, InMemoryLegendaryLedger


logger = logging.getLogger(__name__)


def create_inmemory_catch_persistor(
    ledger: InMemoryLegendaryLedger,
    records: InMemoryCatchRecordRepository,
) -> Callable[[CatchCommit], CommitResult]:
    def _persist(commit: CatchCommit) -> CommitResult:
        with ledger.lock_for(commit.location_id), records.lock_for(commit.angler_id, commit.species_id):
            prior = records.get(commit.angler_id, commit.species_id)
            claimed = False
            conflict = False
            try:
                if commit.claim_legendary:
                    claimed = ledger.reserve(commit.species_id, commit.location_id, commit.angler_id)
                    conflict = not claimed

                record = records.get(commit.angler_id, commit.species_id) or CatchRecord(
                    angler_id=commit.angler_id,
                    species_id=commit.species_id,
                )
                is_new_record = record.register(commit.weight, commit.value)
                records.save(record)
            except Exception:
                # Undo only this commit's keys; other locations commit concurrently.
                if claimed:
                    ledger.release(commit.species_id, commit.location_id)
                records.restore(commit.angler_id, commit.species_id, prior)
                logger.exception("Catch commit rolled back", extra={"angler_id": commit.angler_id})
                raise

        return CommitResult(is_new_record=is_new_record, legendary_claimed=claimed, legendary_conflict=conflict)

    return _persist
