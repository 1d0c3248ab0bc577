"""Stamina/tension race run once per fight tick.

Each tick consumes exactly one ``random()`` from the encounter RNG (the burst roll), so
a seed plus the sequence of queued actions fully determines the fight.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from fishing_sim.application.services.balance_tables import (
    BASE_STAMINA_DRAIN,
    METER_MAX,
    REEL_TENSION_GAIN,
    SLACK_STAMINA_RECOVERY,
    SLACK_TENSION_RELIEF,
    TENSION_DECAY,
    EngineSettings,
    burst_probability,
    burst_tension,
    reel_damage,
)
from fishing_sim.domain.models.encounter import FightAction, FishingEncounter


class FightOutcome(str, Enum):
    CONTINUE = "continue"
    LANDED = "landed"
    BROKE_OFF = "broke_off"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class FightTick:
    tick: int
    action: FightAction | None
    fish_stamina: float
    line_tension: float
    burst: bool
    outcome: FightOutcome


def _clamp(value: float) -> float:
    return max(0.0, min(METER_MAX, value))


class FightResolver:
    def __init__(self, settings: EngineSettings | None = None) -> None:
        self.settings = settings or EngineSettings()

    def begin(self, encounter: FishingEncounter) -> None:
        encounter.fish_stamina = METER_MAX
        encounter.line_tension = 0.0
        encounter.fight_ticks = 0
        encounter.pending_action = None

    def tick(self, encounter: FishingEncounter, rng: random.Random) -> FightTick:
        species = encounter.species
        if species is None:
            raise ValueError(f"Encounter {encounter.id} is fighting without a fish")

        fight = species.fight
        context = encounter.context
        tick_number = encounter.fight_ticks + 1
        action = encounter.pending_action
        encounter.pending_action = None

        meter_per_unit = METER_MAX / max(1.0, float(fight.stamina))
        drain = BASE_STAMINA_DRAIN
        tension = encounter.line_tension
        if action == FightAction.REEL:
            drain += reel_damage(context.rod.reel_power, context.angler_skill, fight.fight_difficulty)
            tension += REEL_TENSION_GAIN
        elif action == FightAction.GIVE_SLACK:
            drain -= SLACK_STAMINA_RECOVERY
            tension -= SLACK_TENSION_RELIEF

        stamina = encounter.fish_stamina - drain * meter_per_unit

        burst = rng.random() < burst_probability(fight.aggression)
        if burst:
            tension += burst_tension(fight.aggression)
        elif action != FightAction.REEL:
            tension -= TENSION_DECAY

        if stamina <= 0:
            outcome = FightOutcome.LANDED
        elif tension > self.settings.break_threshold:
            outcome = FightOutcome.BROKE_OFF
        elif tick_number >= fight.max_ticks:
            outcome = FightOutcome.TIMED_OUT
        else:
            outcome = FightOutcome.CONTINUE

        encounter.fish_stamina = _clamp(stamina)
        encounter.line_tension = _clamp(tension)
        encounter.fight_ticks = tick_number
        return FightTick(
            tick=tick_number,
            action=action,
            fish_stamina=encounter.fish_stamina,
            line_tension=encounter.line_tension,
            burst=burst,
            outcome=outcome,
        )
