import random
import sys
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fishing_sim.application.services.balance_tables import EngineSettings
from fishing_sim.application.services.fight_resolver import FightOutcome, FightResolver
from fishing_sim.domain.models.angler import RodProfile
from fishing_sim.domain.models.encounter import EncounterContext, FightAction, FishingEncounter
from fishing_sim.domain.models.species import (
    FightProfile,
    FishCategory,
    FishRarity,
    FishSpecies,
    TimeOfDay,
    WaterType,
    Weather,
    WeightRange,
)


def _fighter(*, stamina: int, aggression: int, base_fight_time: int = 100, fight_difficulty: int = 0) -> FishSpecies:
    return FishSpecies(
        id="FIGHTER",
        name="Fighter",
        rarity=FishRarity.RARE,
        category=FishCategory.EXOTIC,
        water_types=frozenset({WaterType.RIVER}),
        locations=frozenset({"river"}),
        active_time_of_day=frozenset(TimeOfDay),
        preferred_weather=frozenset(),
        depth_preference=frozenset(),
        weight=WeightRange(minimum=1, maximum=2, average=1.5, record=2),
        base_chance=1,
        bite_speed_ms=1000,
        hook_difficulty=10,
        fight=FightProfile(
            base_fight_time=base_fight_time,
            fight_difficulty=fight_difficulty,
            stamina=stamina,
            aggression=aggression,
        ),
    )


def _encounter(species: FishSpecies, *, seed: int = 1, reel_power: float = 8.0, skill: float = 0.0) -> FishingEncounter:
    context = EncounterContext(
        location_id="river",
        water_types=frozenset({WaterType.RIVER}),
        time_of_day=TimeOfDay.DUSK,
        weather=Weather.CLOUDY,
        rod=RodProfile(reel_power=reel_power),
        angler_skill=skill,
    )
    return FishingEncounter(id="enc", angler_id="a1", context=context, rng=random.Random(seed), species=species)


def _run(resolver: FightResolver, encounter: FishingEncounter, action: FightAction | None) -> list:
    resolver.begin(encounter)
    ticks = []
    while True:
        encounter.pending_action = action
        result = resolver.tick(encounter, encounter.rng)
        ticks.append(result)
        if result.outcome != FightOutcome.CONTINUE:
            return ticks


class FightResolverTests(unittest.TestCase):
    def setUp(self) -> None:
        self.resolver = FightResolver(EngineSettings())

    def test_idle_fish_tires_out_on_base_drain(self) -> None:
        encounter = _encounter(_fighter(stamina=50, aggression=0, base_fight_time=50))

        ticks = _run(self.resolver, encounter, None)

        self.assertEqual(FightOutcome.LANDED, ticks[-1].outcome)
        self.assertEqual(100, ticks[-1].tick)
        self.assertEqual(0.0, encounter.fish_stamina)

    def test_steady_reeling_without_bursts_snaps_the_line(self) -> None:
        encounter = _encounter(_fighter(stamina=1000, aggression=0))

        ticks = _run(self.resolver, encounter, FightAction.REEL)

        self.assertEqual(FightOutcome.BROKE_OFF, ticks[-1].outcome)
        self.assertEqual(26, ticks[-1].tick)
        self.assertEqual(100.0, encounter.line_tension)

    def test_fight_times_out_after_three_times_base_fight_time(self) -> None:
        encounter = _encounter(_fighter(stamina=1000, aggression=0, base_fight_time=10))

        ticks = _run(self.resolver, encounter, None)

        self.assertEqual(FightOutcome.TIMED_OUT, ticks[-1].outcome)
        self.assertEqual(30, ticks[-1].tick)

    def test_giving_slack_relieves_tension_and_lets_fish_recover(self) -> None:
        encounter = _encounter(_fighter(stamina=100, aggression=0))
        self.resolver.begin(encounter)
        for _ in range(5):
            encounter.pending_action = FightAction.REEL
            self.resolver.tick(encounter, encounter.rng)
        self.assertEqual(20.0, encounter.line_tension)
        stamina_before = encounter.fish_stamina

        encounter.pending_action = FightAction.GIVE_SLACK
        result = self.resolver.tick(encounter, encounter.rng)

        self.assertEqual(5.0, result.line_tension)
        self.assertAlmostEqual(stamina_before + 1.5, result.fish_stamina)

    def test_pending_action_is_consumed_by_one_tick(self) -> None:
        encounter = _encounter(_fighter(stamina=1000, aggression=0))
        self.resolver.begin(encounter)
        encounter.pending_action = FightAction.REEL

        first = self.resolver.tick(encounter, encounter.rng)
        second = self.resolver.tick(encounter, encounter.rng)

        self.assertEqual(FightAction.REEL, first.action)
        self.assertIsNone(second.action)
        self.assertIsNone(encounter.pending_action)

    def test_exhaustion_is_checked_before_line_break(self) -> None:
        encounter = _encounter(_fighter(stamina=100, aggression=0), reel_power=50)
        self.resolver.begin(encounter)
        encounter.fish_stamina = 1.0
        encounter.line_tension = 99.0
        encounter.pending_action = FightAction.REEL

        result = self.resolver.tick(encounter, encounter.rng)

        self.assertEqual(FightOutcome.LANDED, result.outcome)

    def test_meters_stay_within_bounds(self) -> None:
        encounter = _encounter(_fighter(stamina=60, aggression=100, base_fight_time=200), seed=11)
        self.resolver.begin(encounter)
        rng = random.Random(99)
        while True:
            encounter.pending_action = rng.choice([FightAction.REEL, FightAction.GIVE_SLACK, None])
            result = self.resolver.tick(encounter, encounter.rng)
            self.assertGreaterEqual(result.fish_stamina, 0.0)
            self.assertLessEqual(result.fish_stamina, 100.0)
            self.assertGreaterEqual(result.line_tension, 0.0)
            self.assertLessEqual(result.line_tension, 100.0)
            if result.outcome != FightOutcome.CONTINUE:
                break

    def test_heavy_aggressive_fish_resolves_within_hard_timeout(self) -> None:
        species = _fighter(stamina=200, aggression=90, base_fight_time=60, fight_difficulty=50)
        for seed in range(25):
            with self.subTest(seed=seed):
                encounter = _encounter(species, seed=seed, reel_power=10)
                ticks = _run(self.resolver, encounter, FightAction.REEL)
                self.assertIn(
                    ticks[-1].outcome,
                    {FightOutcome.LANDED, FightOutcome.BROKE_OFF, FightOutcome.TIMED_OUT},
                )
                self.assertLessEqual(len(ticks), species.fight.max_ticks)

    def test_same_seed_and_actions_replay_identically(self) -> None:
        species = _fighter(stamina=200, aggression=90, base_fight_time=60, fight_difficulty=50)

        first = _run(self.resolver, _encounter(species, seed=7, reel_power=10), FightAction.REEL)
        second = _run(self.resolver, _encounter(species, seed=7, reel_power=10), FightAction.REEL)

        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
