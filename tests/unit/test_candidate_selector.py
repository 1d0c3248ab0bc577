import random
import sys
from collections import Counter
from pathlib import Path
import unittest

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from fishing_sim.application.dtos import CandidateEntry, CandidateSet
from fishing_sim.application.services.balance_tables import EngineSettings
from fishing_sim.application.services.candidate_selector import CandidateSelector, draw_candidate
from fishing_sim.domain.errors import NoViableWaterError
from fishing_sim.domain.models.angler import RodProfile
from fishing_sim.domain.models.encounter import EncounterContext
from fishing_sim.domain.models.species import (
    BaitType,
    FightProfile,
    FishCategory,
    FishRarity,
    FishSpecies,
    SpotType,
    TimeOfDay,
    WaterType,
    Weather,
    WeightRange,
)
from fishing_sim.infrastructure.inmemory.fish_species_data import FISH_SPECIES
from fishing_sim.infrastructure.inmemory.repos import InMemoryLegendaryLedger, InMemorySpeciesCatalog


def _species(species_id: str, **overrides) -> FishSpecies:
    values = dict(
        id=species_id,
        name=species_id.title(),
        rarity=FishRarity.COMMON,
        category=FishCategory.PANFISH,
        water_types=frozenset({WaterType.LAKE}),
        locations=frozenset({"test_lake"}),
        active_time_of_day=frozenset(TimeOfDay),
        preferred_weather=frozenset(),
        depth_preference=frozenset({SpotType.SHALLOW}),
        weight=WeightRange(minimum=1, maximum=3, average=2, record=3),
        base_chance=10,
        bite_speed_ms=2000,
        hook_difficulty=20,
        fight=FightProfile(base_fight_time=20, fight_difficulty=20, stamina=30, aggression=20),
    )
    values.update(overrides)
    return FishSpecies(**values)


def _context(location_id: str = "test_lake", **overrides) -> EncounterContext:
    values = dict(
        location_id=location_id,
        water_types=frozenset({WaterType.LAKE}),
        time_of_day=TimeOfDay.MORNING,
        weather=Weather.CLEAR,
    )
    values.update(overrides)
    return EncounterContext(**values)


class DrawCandidateTests(unittest.TestCase):
    def test_equal_weights_are_drawn_uniformly(self) -> None:
        catalog = InMemorySpeciesCatalog({sid: _species(sid) for sid in ("A", "B", "C", "D")})
        selector = CandidateSelector(catalog, InMemoryLegendaryLedger(), EngineSettings(no_bite_weight=0.0))
        candidates = selector.build(_context())
        rng = random.Random(2024)

        draws = 20_000
        counts = Counter(draw_candidate(candidates, rng).label for _ in range(draws))

        self.assertEqual({"A", "B", "C", "D"}, set(counts))
        for label in ("A", "B", "C", "D"):
            self.assertAlmostEqual(0.25, counts[label] / draws, delta=0.02)

    def test_draw_consumes_exactly_one_random_value(self) -> None:
        candidates = CandidateSet(
            location_id="x",
            entries=(
                CandidateEntry(species=_species("A"), weight=1.0),
                CandidateEntry(species=None, weight=1.0),
            ),
        )
        rng = random.Random(5)
        twin = random.Random(5)

        draw_candidate(candidates, rng)
        twin.random()

        self.assertEqual(twin.random(), rng.random())

    def test_zero_total_resolves_to_no_bite(self) -> None:
        candidates = CandidateSet(location_id="x", entries=(CandidateEntry(species=None, weight=0.0),))
        self.assertTrue(draw_candidate(candidates, random.Random(1)).is_no_bite)


class CandidateSelectorTests(unittest.TestCase):
    def test_filters_by_time_weather_and_water(self) -> None:
        catalog = InMemorySpeciesCatalog(
            {
                "DAY": _species("DAY"),
                "NIGHT": _species("NIGHT", active_time_of_day=frozenset({TimeOfDay.NIGHT})),
                "STORMY": _species("STORMY", preferred_weather=frozenset({Weather.STORM})),
                "RIVER": _species("RIVER", water_types=frozenset({WaterType.RIVER})),
            }
        )
        selector = CandidateSelector(catalog, InMemoryLegendaryLedger())

        candidates = selector.build(_context())

        self.assertEqual(["DAY"], candidates.species_ids())

    def test_weight_combines_bait_rod_and_spot_multipliers(self) -> None:
        catalog = InMemorySpeciesCatalog(
            {"A": _species("A", base_chance=20, preferred_bait=frozenset({BaitType.WORMS}))}
        )
        selector = CandidateSelector(catalog, InMemoryLegendaryLedger())

        plain = selector.build(_context())
        tuned = selector.build(
            _context(
                bait=BaitType.WORMS,
                rod=RodProfile(catch_multiplier=2.0),
                spot_type=SpotType.SHALLOW,
            )
        )

        self.assertAlmostEqual(20.0, plain.species_entries[0].weight)
        self.assertAlmostEqual(20.0 * 1.5 * 2.0 * 1.2, tuned.species_entries[0].weight)

    def test_no_bite_weight_defaults_to_thirty_percent_of_candidates(self) -> None:
        catalog = InMemorySpeciesCatalog({"BLUEGILL": FISH_SPECIES["BLUEGILL"]})
        selector = CandidateSelector(catalog, InMemoryLegendaryLedger())

        candidates = selector.build(_context("spirit_springs_lake"))

        self.assertAlmostEqual(35.0, candidates.species_entries[0].weight)
        self.assertAlmostEqual(10.5, candidates.no_bite_weight)
        self.assertTrue(candidates.entries[-1].is_no_bite)

    def test_configured_no_bite_weight_is_used_as_is(self) -> None:
        catalog = InMemorySpeciesCatalog({"A": _species("A")})
        selector = CandidateSelector(catalog, InMemoryLegendaryLedger(), EngineSettings(no_bite_weight=4.0))

        self.assertAlmostEqual(4.0, selector.build(_context()).no_bite_weight)

    def test_special_bait_gate_for_the_ghost(self) -> None:
        selector = CandidateSelector(InMemorySpeciesCatalog(), InMemoryLegendaryLedger())
        night_lake = dict(
            water_types=frozenset({WaterType.LAKE, WaterType.STREAM}),
            time_of_day=TimeOfDay.NIGHT,
            weather=Weather.FOG,
        )

        with_worms = selector.build(_context("mountain_lake", bait=BaitType.WORMS, **night_lake))
        with_spirit_worm = selector.build(_context("mountain_lake", bait=BaitType.SPIRIT_WORM, **night_lake))

        self.assertNotIn("THE_GHOST", with_worms.species_ids())
        self.assertIn("THE_GHOST", with_spirit_worm.species_ids())

    def test_claimed_legendary_is_never_offered_again_at_that_location(self) -> None:
        ledger = InMemoryLegendaryLedger()
        selector = CandidateSelector(InMemorySpeciesCatalog(), ledger)
        context = _context(
            "mountain_lake",
            water_types=frozenset({WaterType.LAKE, WaterType.STREAM}),
            time_of_day=TimeOfDay.NIGHT,
            weather=Weather.CLEAR,
            bait=BaitType.SPIRIT_WORM,
        )
        self.assertIn("THE_GHOST", selector.build(context).species_ids())

        self.assertTrue(ledger.claim(species_id="THE_GHOST", location_id="mountain_lake", angler_id="a1"))

        self.assertNotIn("THE_GHOST", selector.build(context).species_ids())

    def test_location_with_no_matching_water_raises(self) -> None:
        selector = CandidateSelector(InMemorySpeciesCatalog(), InMemoryLegendaryLedger())
        with self.assertRaises(NoViableWaterError):
            selector.build(_context("spring_pools", water_types=frozenset({WaterType.POND})))

    def test_filtered_out_context_still_resolves_to_no_bite(self) -> None:
        selector = CandidateSelector(InMemorySpeciesCatalog(), InMemoryLegendaryLedger())
        context = _context("spirit_springs_lake", time_of_day=TimeOfDay.NIGHT, bait=BaitType.WORMS)

        candidates = selector.build(context)

        self.assertEqual([], candidates.species_ids())
        self.assertTrue(selector.select(context, random.Random(3)).is_no_bite)


if __name__ == "__main__":
    unittest.main()
