from __future__ import annotations

import random
from dataclasses import dataclass

SKILL_JITTER = 10.0


@dataclass(frozen=True)
class SkillCheckResult:
    difficulty: float
    effective: float
    jitter: float

    @property
    def success(self) -> bool:
        return self.effective > self.difficulty


def normalized_difficulty(value: float) -> float:
    return max(0.0, min(100.0, float(value)))


def skill_check(
    difficulty: float,
    skill: float,
    equipment_bonus: float,
    rng: random.Random,
    jitter: float = SKILL_JITTER,
) -> SkillCheckResult:
    """Additive check: skill + gear + uniform jitter must beat the difficulty."""
    roll = rng.uniform(-jitter, jitter)
    effective = float(skill) + float(equipment_bonus) + roll
    return SkillCheckResult(difficulty=normalized_difficulty(difficulty), effective=effective, jitter=roll)
