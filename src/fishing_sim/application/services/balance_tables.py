from __future__ import annotations

from dataclasses import dataclass


BAIT_MATCH_MULTIPLIER = 1.5
SPOT_MATCH_MULTIPLIER = 1.2
NO_BITE_RATIO = 0.3

NO_BITE_WAIT_MIN_MS = 8_000
NO_BITE_WAIT_MAX_MS = 20_000
BITE_SPEED_SPREAD = 0.3

BITE_WINDOW_MS = 1_500
BITE_WINDOW_FLOOR_MS = 500

FIGHT_TICK_MS = 250
BREAK_THRESHOLD = 100.0
METER_MAX = 100.0

BASE_STAMINA_DRAIN = 0.5
REEL_SKILL_FACTOR = 0.1
REEL_TENSION_GAIN = 4.0
SLACK_TENSION_RELIEF = 12.0
SLACK_STAMINA_RECOVERY = 2.0
TENSION_DECAY = 3.0
BURST_PROBABILITY_DIVISOR = 500.0
BURST_TENSION_BASE = 10.0
BURST_TENSION_PER_AGGRESSION = 0.2

FINISHED_ENCOUNTERS_MAX = 500

DAWN_START_HOUR = 5
MORNING_START_HOUR = 8
AFTERNOON_START_HOUR = 12
DUSK_START_HOUR = 17
NIGHT_START_HOUR = 20


@dataclass(frozen=True)
class EngineSettings:
    tick_ms: int = FIGHT_TICK_MS
    no_bite_ratio: float = NO_BITE_RATIO
    no_bite_weight: float | None = None
    bait_match_multiplier: float = BAIT_MATCH_MULTIPLIER
    spot_match_multiplier: float = SPOT_MATCH_MULTIPLIER
    no_bite_wait_ms: tuple[int, int] = (NO_BITE_WAIT_MIN_MS, NO_BITE_WAIT_MAX_MS)
    bite_speed_spread: float = BITE_SPEED_SPREAD
    bite_window_ms: int = BITE_WINDOW_MS
    bite_window_floor_ms: int = BITE_WINDOW_FLOOR_MS
    break_threshold: float = BREAK_THRESHOLD
    world_seed: int = 1


def bite_window_ms(hook_difficulty: float, base_ms: int = BITE_WINDOW_MS, floor_ms: int = BITE_WINDOW_FLOOR_MS) -> int:
    shortened = base_ms * (1.0 - max(0.0, min(100.0, float(hook_difficulty))) / 100.0)
    return max(int(floor_ms), int(round(shortened)))


def burst_probability(aggression: float) -> float:
    return max(0.0, min(1.0, float(aggression) / BURST_PROBABILITY_DIVISOR))


def burst_tension(aggression: float) -> float:
    return BURST_TENSION_BASE + max(0.0, float(aggression)) * BURST_TENSION_PER_AGGRESSION


def reel_damage(reel_power: float, skill: float, fight_difficulty: float) -> float:
    """Stamina units one reel removes; harder fights shave off up to half of it."""
    difficulty = max(0.0, min(100.0, float(fight_difficulty)))
    raw = max(0.0, float(reel_power)) + max(0.0, float(skill)) * REEL_SKILL_FACTOR
    return raw * (1.0 - difficulty / 200.0)


def catch_value(base_value: int, weight: float, average_weight: float) -> int:
    if average_weight <= 0:
        return max(1, int(base_value))
    return max(1, int(round(base_value * (weight / average_weight))))
