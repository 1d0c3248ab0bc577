import sys
from pathlib import Path
import unittest
from unittest import mock

from sqlalchemy import text

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fishing_sim.domain.models.catch import CatchCommit, CatchRecord
from fishing_sim.infrastructure.db.sql import atomic_persistence
from fishing_sim.infrastructure.db.sql.atomic_persistence import create_sql_catch_persistor
from fishing_sim.infrastructure.db.sql.connection import create_db_engine, create_session_factory
from fishing_sim.infrastructure.db.sql.repos import SqlCatchRecordRepository, SqlLegendaryLedger
from fishing_sim.infrastructure.db.sql.schema import SCHEMA_STATEMENTS, ensure_schema


def _commit(angler_id: str = "a1", *, weight: float = 21.5, legendary: bool = True) -> CatchCommit:
    return CatchCommit(
        angler_id=angler_id,
        species_id="RIVER_KING",
        location_id="red_gulch_creek",
        weight=weight,
        value=1075,
        claim_legendary=legendary,
    )


class SqlCatchPersistenceIntegrationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.engine = create_db_engine("sqlite://")
        ensure_schema(self.engine)
        self.SessionLocal = create_session_factory(engine=self.engine)
        self.ledger = SqlLegendaryLedger(self.SessionLocal)
        self.records = SqlCatchRecordRepository(self.SessionLocal)
        self.persist = create_sql_catch_persistor(self.SessionLocal)

    def tearDown(self) -> None:
        self.engine.dispose()

    def _count(self, table: str) -> int:
        with self.engine.connect() as conn:
            return int(conn.execute(text(f"SELECT COUNT(*) FROM {table}")).scalar_one())

    def test_schema_creation_is_idempotent(self) -> None:
        self.assertEqual(len(SCHEMA_STATEMENTS), ensure_schema(self.engine))
        self.assertEqual(0, self._count("legendary_claim"))

    def test_commit_writes_claim_and_record_together(self) -> None:
        result = self.persist(_commit())

        self.assertTrue(result.legendary_claimed)
        self.assertTrue(result.is_new_record)
        self.assertEqual("a1", self.ledger.claimed_by("RIVER_KING", "red_gulch_creek"))
        self.assertTrue(self.ledger.is_claimed("RIVER_KING", "red_gulch_creek"))
        record = self.records.get("a1", "RIVER_KING")
        self.assertEqual(21.5, record.best_weight)
        self.assertEqual(1075, record.best_value)
        self.assertEqual(1, record.total_caught)

    def test_second_claim_is_a_conflict_not_an_error(self) -> None:
        self.persist(_commit("a1"))

        result = self.persist(_commit("a2", weight=19.0))

        self.assertFalse(result.legendary_claimed)
        self.assertTrue(result.legendary_conflict)
        self.assertEqual(1, self._count("legendary_claim"))
        self.assertEqual("a1", self.ledger.claimed_by("RIVER_KING", "red_gulch_creek"))
        self.assertEqual(1, self.records.get("a2", "RIVER_KING").total_caught)

    def test_record_upsert_keeps_best_weight_and_counts_catches(self) -> None:
        self.persist(_commit(weight=21.5, legendary=False))
        result = self.persist(_commit(weight=18.25, legendary=False))

        self.assertFalse(result.is_new_record)
        record = self.records.get("a1", "RIVER_KING")
        self.assertEqual(21.5, record.best_weight)
        self.assertEqual(2, record.total_caught)
        self.assertEqual(0, self._count("legendary_claim"))

    def test_failed_record_write_rolls_back_claim(self) -> None:
        with mock.patch.object(atomic_persistence, "upsert_record", side_effect=RuntimeError("disk full")):
            with self.assertRaises(RuntimeError):
                self.persist(_commit())

        self.assertEqual(0, self._count("legendary_claim"))
        self.assertEqual(0, self._count("catch_record"))
        self.assertIsNone(self.ledger.claimed_by("RIVER_KING", "red_gulch_creek"))

    def test_repositories_round_trip_outside_the_persistor(self) -> None:
        self.assertTrue(self.ledger.claim(species_id="THE_GHOST", location_id="mountain_lake", angler_id="a1"))
        self.assertFalse(self.ledger.claim(species_id="THE_GHOST", location_id="mountain_lake", angler_id="a2"))
        self.records.save(CatchRecord(angler_id="a1", species_id="PERCH", best_weight=0.9, best_value=4, total_caught=3))
        self.records.save(CatchRecord(angler_id="a1", species_id="GAR", best_weight=80.0, best_value=120, total_caught=1))

        self.assertEqual({"THE_GHOST"}, self.ledger.claimed_at("mountain_lake"))
        self.assertEqual(["GAR", "PERCH"], [record.species_id for record in self.records.list_for_angler("a1")])
        self.assertEqual([], self.records.list_for_angler("a2"))


if __name__ == "__main__":
    unittest.main()
