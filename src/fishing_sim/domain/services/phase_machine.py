"""Explicit transition table for one fishing encounter.

Every phase change in the engine goes through :func:`transition`, so the full set of
legal moves is the table below and nothing else.
"""

from __future__ import annotations

from enum import Enum

from fishing_sim.domain.errors import InvalidTransitionError
from fishing_sim.domain.models.encounter import EncounterPhase, EscapeReason, TERMINAL_PHASES


class PhaseEvent(str, Enum):
    CAST = "cast"
    LINE_SETTLED = "line_settled"
    BITE = "bite"
    WAIT_EXPIRED = "wait_expired"
    HOOK = "hook"
    BITE_WINDOW_EXPIRED = "bite_window_expired"
    HOOK_SET = "hook_set"
    HOOK_SLIPPED = "hook_slipped"
    FISH_EXHAUSTED = "fish_exhausted"
    LINE_SNAPPED = "line_snapped"
    FIGHT_EXPIRED = "fight_expired"
    CANCEL = "cancel"


TRANSITIONS: dict[tuple[EncounterPhase, PhaseEvent], EncounterPhase] = {
    (EncounterPhase.IDLE, PhaseEvent.CAST): EncounterPhase.CASTING,
    (EncounterPhase.CASTING, PhaseEvent.LINE_SETTLED): EncounterPhase.WAITING,
    (EncounterPhase.WAITING, PhaseEvent.BITE): EncounterPhase.BITING,
    (EncounterPhase.WAITING, PhaseEvent.WAIT_EXPIRED): EncounterPhase.TIMED_OUT,
    (EncounterPhase.BITING, PhaseEvent.HOOK): EncounterPhase.HOOKING,
    (EncounterPhase.BITING, PhaseEvent.BITE_WINDOW_EXPIRED): EncounterPhase.ESCAPED,
    (EncounterPhase.HOOKING, PhaseEvent.HOOK_SET): EncounterPhase.FIGHTING,
    (EncounterPhase.HOOKING, PhaseEvent.HOOK_SLIPPED): EncounterPhase.ESCAPED,
    (EncounterPhase.FIGHTING, PhaseEvent.FISH_EXHAUSTED): EncounterPhase.LANDED,
    (EncounterPhase.FIGHTING, PhaseEvent.LINE_SNAPPED): EncounterPhase.BROKE_OFF,
    (EncounterPhase.FIGHTING, PhaseEvent.FIGHT_EXPIRED): EncounterPhase.TIMED_OUT,
}

CANCELLABLE_PHASES = frozenset(
    {
        EncounterPhase.CASTING,
        EncounterPhase.WAITING,
        EncounterPhase.BITING,
        EncounterPhase.HOOKING,
        EncounterPhase.FIGHTING,
    }
)

ESCAPE_REASONS: dict[PhaseEvent, EscapeReason] = {
    PhaseEvent.WAIT_EXPIRED: EscapeReason.NO_BITE,
    PhaseEvent.BITE_WINDOW_EXPIRED: EscapeReason.MISSED_BITE,
    PhaseEvent.HOOK_SLIPPED: EscapeReason.HOOK_SLIPPED,
    PhaseEvent.LINE_SNAPPED: EscapeReason.LINE_BROKE,
    PhaseEvent.FIGHT_EXPIRED: EscapeReason.FIGHT_TIMED_OUT,
    PhaseEvent.CANCEL: EscapeReason.CANCELLED,
}


def transition(phase: EncounterPhase, event: PhaseEvent) -> EncounterPhase:
    if event == PhaseEvent.CANCEL:
        if phase in TERMINAL_PHASES:
            return phase
        if phase in CANCELLABLE_PHASES:
            return EncounterPhase.ESCAPED
        raise InvalidTransitionError(phase.value, event.value)

    target = TRANSITIONS.get((phase, event))
    if target is None:
        raise InvalidTransitionError(phase.value, event.value)
    return target


def escape_reason_for(event: PhaseEvent) -> EscapeReason | None:
    return ESCAPE_REASONS.get(event)
