import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fishing_sim.application.services.balance_tables import EngineSettings
from fishing_sim.application.services.encounter_driver import ManualClock, SimulationReport, simulate_encounter
from fishing_sim.bootstrap import create_fishing_runtime
from fishing_sim.domain.models.angler import AnglerProfile, Equipment
from fishing_sim.domain.models.encounter import TERMINAL_PHASES
from fishing_sim.domain.models.species import BaitType, Weather


class ReplayDeterminismTests(unittest.TestCase):
    def _build(self):
        clock = ManualClock()
        runtime = create_fishing_runtime(clock=clock, settings=EngineSettings(world_seed=42))
        runtime.anglers.save(
            AnglerProfile(id="hank", name="Hank", skill=35, equipment=Equipment(bait=BaitType.WORMS))
        )
        runtime.world_state.set_conditions(weather=Weather.CLOUDY, hour=7)
        return runtime, clock

    @staticmethod
    def _snapshot(report: SimulationReport) -> dict:
        outcome = report.outcome
        return {
            "phase": outcome.phase,
            "escape_reason": outcome.escape_reason,
            "catch": outcome.catch,
            "hooked_at_ms": report.hooked_at_ms,
            "ended_at_ms": report.ended_at_ms,
            "actions": list(report.actions),
        }

    def _play(self, seeds: list[int | None]) -> list[dict]:
        runtime, clock = self._build()
        snapshots = []
        for seed in seeds:
            report = simulate_encounter(runtime.service, clock, "hank", "coyote_river", seed=seed, hook_delay_ms=150)
            snapshots.append(self._snapshot(report))
        return snapshots

    def test_same_seeds_replay_identically(self) -> None:
        seeds = list(range(100, 112))
        self.assertEqual(self._play(seeds), self._play(seeds))

    def test_derived_cast_seeds_replay_identically(self) -> None:
        self.assertEqual(self._play([None] * 8), self._play([None] * 8))

    def test_every_replayed_cast_reaches_a_terminal_phase(self) -> None:
        for snapshot in self._play(list(range(20))):
            self.assertIn(snapshot["phase"], TERMINAL_PHASES)
            self.assertTrue(snapshot["catch"] is None or snapshot["escape_reason"] is None)


if __name__ == "__main__":
    unittest.main()
