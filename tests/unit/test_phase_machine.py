import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fishing_sim.domain.errors import InvalidTransitionError
from fishing_sim.domain.models.encounter import EncounterPhase, EscapeReason, TERMINAL_PHASES
from fishing_sim.domain.services.phase_machine import (
    CANCELLABLE_PHASES,
    PhaseEvent,
    escape_reason_for,
    transition,
)


class PhaseMachineTests(unittest.TestCase):
    def test_happy_path_walks_cast_to_landed(self) -> None:
        phase = EncounterPhase.IDLE
        for event in (
            PhaseEvent.CAST,
            PhaseEvent.LINE_SETTLED,
            PhaseEvent.BITE,
            PhaseEvent.HOOK,
            PhaseEvent.HOOK_SET,
            PhaseEvent.FISH_EXHAUSTED,
        ):
            phase = transition(phase, event)
        self.assertEqual(EncounterPhase.LANDED, phase)

    def test_no_bite_wait_times_out_directly(self) -> None:
        self.assertEqual(EncounterPhase.TIMED_OUT, transition(EncounterPhase.WAITING, PhaseEvent.WAIT_EXPIRED))
        self.assertEqual(EscapeReason.NO_BITE, escape_reason_for(PhaseEvent.WAIT_EXPIRED))

    def test_missed_bite_and_slipped_hook_escape(self) -> None:
        self.assertEqual(EncounterPhase.ESCAPED, transition(EncounterPhase.BITING, PhaseEvent.BITE_WINDOW_EXPIRED))
        self.assertEqual(EncounterPhase.ESCAPED, transition(EncounterPhase.HOOKING, PhaseEvent.HOOK_SLIPPED))

    def test_fight_endings(self) -> None:
        self.assertEqual(EncounterPhase.BROKE_OFF, transition(EncounterPhase.FIGHTING, PhaseEvent.LINE_SNAPPED))
        self.assertEqual(EncounterPhase.TIMED_OUT, transition(EncounterPhase.FIGHTING, PhaseEvent.FIGHT_EXPIRED))
        self.assertEqual(EscapeReason.LINE_BROKE, escape_reason_for(PhaseEvent.LINE_SNAPPED))

    def test_cancel_escapes_from_every_live_phase(self) -> None:
        for phase in CANCELLABLE_PHASES:
            with self.subTest(phase=phase):
                self.assertEqual(EncounterPhase.ESCAPED, transition(phase, PhaseEvent.CANCEL))

    def test_cancel_on_terminal_phase_is_a_no_op(self) -> None:
        for phase in TERMINAL_PHASES:
            with self.subTest(phase=phase):
                self.assertEqual(phase, transition(phase, PhaseEvent.CANCEL))

    def test_skipping_a_phase_is_rejected(self) -> None:
        with self.assertRaises(InvalidTransitionError):
            transition(EncounterPhase.WAITING, PhaseEvent.HOOK)
        with self.assertRaises(InvalidTransitionError):
            transition(EncounterPhase.IDLE, PhaseEvent.CANCEL)
        with self.assertRaises(InvalidTransitionError):
            transition(EncounterPhase.LANDED, PhaseEvent.BITE)

    def test_landing_has_no_escape_reason(self) -> None:
        self.assertIsNone(escape_reason_for(PhaseEvent.FISH_EXHAUSTED))


if __name__ == "__main__":
    unittest.main()
