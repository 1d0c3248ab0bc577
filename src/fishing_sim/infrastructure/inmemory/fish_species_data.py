"""Bundled frontier catalog: every fish species and fishing location shipped with the game."""

from __future__ import annotations

from typing import Dict, Iterable, Sequence

from fishing_sim.domain.models.location import FishingLocation
from fishing_sim.domain.models.species import (
    BaitType as B,
    FightProfile,
    FishCategory as C,
    FishRarity as R,
    FishSpecies,
    LootDrop,
    LureType as L,
    SpotType as S,
    TimeOfDay as T,
    WaterType as W,
    Weather as X,
    WeightRange,
)


def _drops(*entries: tuple[str, float, int, int]) -> tuple[LootDrop, ...]:
    return tuple(LootDrop(item_id=item, chance=chance, quantity=(low, high)) for item, chance, low, high in entries)


def _fish(
    species_id: str,
    name: str,
    rarity: R,
    category: C,
    *,
    water: Iterable[W],
    locations: Sequence[str],
    times: Iterable[T],
    weather: Iterable[X],
    depth: Iterable[S],
    weight: tuple[float, float, float, float],
    chance: float,
    bite_ms: int,
    hook: int,
    fight: tuple[int, int, int, int],
    bait: Iterable[B] = (),
    lures: Iterable[L] = (),
    value: int,
    xp: int,
    drops: tuple[LootDrop, ...] = (),
    legendary: bool = False,
    one_per_location: bool = False,
    special_bait: bool = False,
    scientific: str = "",
    description: str = "",
    lore: str = "",
) -> FishSpecies:
    low, high, average, record = weight
    fight_time, fight_difficulty, stamina, aggression = fight
    return FishSpecies(
        id=species_id,
        name=name,
        rarity=rarity,
        category=category,
        water_types=frozenset(water),
        locations=frozenset(locations),
        active_time_of_day=frozenset(times),
        preferred_weather=frozenset(weather),
        depth_preference=frozenset(depth),
        weight=WeightRange(minimum=low, maximum=high, average=average, record=record),
        base_chance=chance,
        bite_speed_ms=bite_ms,
        hook_difficulty=hook,
        fight=FightProfile(
            base_fight_time=fight_time,
            fight_difficulty=fight_difficulty,
            stamina=stamina,
            aggression=aggression,
        ),
        preferred_bait=frozenset(bait),
        preferred_lures=frozenset(lures),
        base_value=value,
        experience=xp,
        is_legendary=legendary,
        one_per_location=one_per_location,
        requires_special_bait=special_bait,
        drops=drops,
        scientific_name=scientific,
        description=description,
        lore=lore,
    )


_ALL_DAY = (T.DAWN, T.MORNING, T.AFTERNOON, T.DUSK, T.NIGHT)

FISH_SPECIES: Dict[str, FishSpecies] = {
    species.id: species
    for species in (
        # common
        _fish(
            "CATFISH", "Catfish", R.COMMON, C.CATFISH,
            water=(W.RIVER, W.LAKE, W.POND),
            locations=("red_gulch_creek", "coyote_river", "rio_frontera"),
            times=(T.DUSK, T.NIGHT, T.DAWN),
            weather=(X.CLOUDY, X.RAIN),
            depth=(S.BOTTOM, S.DEEP),
            weight=(2, 15, 6, 15),
            chance=25, bite_ms=3000, hook=20, fight=(30, 25, 40, 30),
            bait=(B.WORMS, B.CUT_BAIT, B.CRAWFISH),
            value=8, xp=15,
            drops=_drops(("fish_meat", 1.0, 1, 2), ("fish_bones", 0.5, 1, 1)),
            scientific="Ictalurus punctatus",
            description="A bottom-dwelling whisker fish. Common in muddy waters.",
        ),
        _fish(
            "BLUEGILL", "Bluegill", R.COMMON, C.PANFISH,
            water=(W.POND, W.LAKE),
            locations=("spirit_springs_lake", "longhorn_reservoir"),
            times=(T.MORNING, T.AFTERNOON),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.SHALLOW, S.STRUCTURE),
            weight=(0.5, 2, 0.8, 2),
            chance=35, bite_ms=2000, hook=15, fight=(15, 15, 25, 20),
            bait=(B.WORMS, B.INSECTS),
            lures=(L.FLY_LURE, L.JIG),
            value=5, xp=10,
            drops=_drops(("fish_meat", 1.0, 1, 1)),
            scientific="Lepomis macrochirus",
            description="A small panfish with blue-tinted gills. Easy to catch and good eating.",
        ),
        _fish(
            "LARGEMOUTH_BASS", "Largemouth Bass", R.COMMON, C.BASS,
            water=(W.LAKE, W.POND, W.RIVER),
            locations=("red_gulch_creek", "spirit_springs_lake", "longhorn_reservoir"),
            times=(T.DAWN, T.DUSK, T.MORNING),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.STRUCTURE, S.SHALLOW, S.DEEP),
            weight=(1, 10, 4, 10),
            chance=20, bite_ms=2500, hook=30, fight=(45, 35, 50, 60),
            bait=(B.MINNOWS, B.WORMS, B.CRAWFISH),
            lures=(L.SPOON_LURE, L.PLUG, L.JIG),
            value=12, xp=25,
            drops=_drops(("fish_meat", 1.0, 2, 3), ("bass_scale", 0.3, 1, 2)),
            scientific="Micropterus salmoides",
            description="Popular sport fish with a big mouth and fighting spirit.",
        ),
        _fish(
            "SMALLMOUTH_BASS", "Smallmouth Bass", R.COMMON, C.BASS,
            water=(W.RIVER, W.STREAM),
            locations=("coyote_river", "mountain_lake"),
            times=(T.MORNING, T.AFTERNOON, T.DUSK),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.STRUCTURE, S.DEEP),
            weight=(0.5, 6, 2.5, 6),
            chance=18, bite_ms=2000, hook=35, fight=(40, 40, 55, 70),
            bait=(B.MINNOWS, B.CRAWFISH),
            lures=(L.SPOON_LURE, L.JIG),
            value=14, xp=30,
            drops=_drops(("fish_meat", 1.0, 2, 2), ("bass_scale", 0.4, 1, 2)),
            scientific="Micropterus dolomieu",
            description="A scrappy fighter found in cooler, clearer waters.",
        ),
        _fish(
            "CRAPPIE", "Crappie", R.COMMON, C.PANFISH,
            water=(W.LAKE, W.POND),
            locations=("longhorn_reservoir", "spirit_springs_lake"),
            times=(T.DAWN, T.DUSK),
            weather=(X.CLOUDY, X.RAIN),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(0.5, 3, 1, 3),
            chance=30, bite_ms=2500, hook=20, fight=(20, 20, 30, 25),
            bait=(B.MINNOWS, B.INSECTS),
            lures=(L.JIG, L.FLY_LURE),
            value=7, xp=12,
            drops=_drops(("fish_meat", 1.0, 1, 2)),
            scientific="Pomoxis nigromaculatus",
            description="Schooling panfish known for excellent flavor. Find one, find many.",
        ),
        _fish(
            "PERCH", "Perch", R.COMMON, C.PANFISH,
            water=(W.LAKE, W.RIVER),
            locations=("coyote_river", "longhorn_reservoir"),
            times=(T.MORNING, T.AFTERNOON),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(0.3, 1.5, 0.6, 1.5),
            chance=32, bite_ms=2000, hook=15, fight=(15, 18, 28, 30),
            bait=(B.WORMS, B.MINNOWS, B.INSECTS),
            lures=(L.JIG,),
            value=6, xp=10,
            drops=_drops(("fish_meat", 1.0, 1, 1)),
            scientific="Perca flavescens",
            description="Small but abundant yellow-striped fish.",
        ),
        _fish(
            "SUNFISH", "Sunfish", R.COMMON, C.PANFISH,
            water=(W.POND, W.LAKE),
            locations=("spirit_springs_lake", "longhorn_reservoir"),
            times=(T.MORNING, T.AFTERNOON),
            weather=(X.CLEAR,),
            depth=(S.SHALLOW, S.SURFACE),
            weight=(0.2, 1, 0.4, 1),
            chance=40, bite_ms=1500, hook=10, fight=(10, 12, 20, 15),
            bait=(B.WORMS, B.INSECTS),
            lures=(L.FLY_LURE,),
            value=5, xp=8,
            drops=_drops(("fish_meat", 1.0, 1, 1)),
            scientific="Lepomis gibbosus",
            description="Colorful little fish that practically jump on the hook.",
        ),
        # quality
        _fish(
            "RAINBOW_TROUT", "Rainbow Trout", R.QUALITY, C.TROUT,
            water=(W.STREAM, W.RIVER, W.LAKE),
            locations=("mountain_lake", "coyote_river"),
            times=(T.DAWN, T.DUSK, T.MORNING),
            weather=(X.CLOUDY, X.RAIN),
            depth=(S.SURFACE, S.STRUCTURE),
            weight=(1, 8, 3, 8),
            chance=15, bite_ms=2000, hook=40, fight=(50, 45, 60, 75),
            bait=(B.INSECTS, B.WORMS),
            lures=(L.FLY_LURE, L.SPOON_LURE),
            value=25, xp=45,
            drops=_drops(("fish_meat", 1.0, 2, 3), ("trout_roe", 0.3, 1, 2), ("fish_oil", 0.2, 1, 1)),
            scientific="Oncorhynchus mykiss",
            description="Beautiful cold-water fish with rainbow stripes. Acrobatic fighter.",
        ),
        _fish(
            "BROWN_TROUT", "Brown Trout", R.QUALITY, C.TROUT,
            water=(W.STREAM, W.RIVER),
            locations=("coyote_river", "mountain_lake"),
            times=(T.DAWN, T.DUSK, T.NIGHT),
            weather=(X.CLOUDY, X.RAIN, X.FOG),
            depth=(S.STRUCTURE, S.DEEP),
            weight=(1, 12, 4, 12),
            chance=12, bite_ms=1800, hook=50, fight=(60, 55, 70, 65),
            bait=(B.INSECTS, B.MINNOWS),
            lures=(L.FLY_LURE, L.SPOON_LURE),
            value=35, xp=60,
            drops=_drops(("fish_meat", 1.0, 2, 4), ("trout_roe", 0.4, 1, 3), ("fish_oil", 0.3, 1, 2)),
            scientific="Salmo trutta",
            description="Wary and challenging trout. Smart fish that tests your skill.",
        ),
        _fish(
            "BROOK_TROUT", "Brook Trout", R.QUALITY, C.TROUT,
            water=(W.STREAM,),
            locations=("mountain_lake",),
            times=(T.DAWN, T.MORNING),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.SHALLOW, S.STRUCTURE),
            weight=(0.5, 5, 1.5, 5),
            chance=14, bite_ms=2000, hook=38, fight=(40, 40, 50, 60),
            bait=(B.INSECTS, B.WORMS),
            lures=(L.FLY_LURE,),
            value=28, xp=50,
            drops=_drops(("fish_meat", 1.0, 1, 2), ("trout_roe", 0.35, 1, 2)),
            scientific="Salvelinus fontinalis",
            description="Native to mountain streams. Delicate and beautiful.",
        ),
        _fish(
            "WALLEYE", "Walleye", R.QUALITY, C.PIKE,
            water=(W.LAKE, W.RIVER),
            locations=("longhorn_reservoir", "coyote_river"),
            times=(T.DUSK, T.NIGHT, T.DAWN),
            weather=(X.CLOUDY, X.RAIN, X.FOG),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(2, 15, 5, 15),
            chance=10, bite_ms=2500, hook=45, fight=(55, 50, 65, 55),
            bait=(B.MINNOWS, B.CRAWFISH),
            lures=(L.JIG, L.PLUG),
            value=42, xp=70,
            drops=_drops(("fish_meat", 1.0, 3, 4), ("fish_oil", 0.4, 1, 2)),
            scientific="Sander vitreus",
            description="Night feeder with excellent table quality. Prized by anglers.",
        ),
        _fish(
            "PIKE", "Northern Pike", R.QUALITY, C.PIKE,
            water=(W.LAKE, W.RIVER),
            locations=("longhorn_reservoir", "coyote_river"),
            times=(T.MORNING, T.AFTERNOON, T.DUSK),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.STRUCTURE, S.DEEP, S.SHALLOW),
            weight=(3, 25, 8, 25),
            chance=8, bite_ms=1500, hook=50, fight=(70, 60, 80, 85),
            bait=(B.MINNOWS,),
            lures=(L.SPOON_LURE, L.PLUG),
            value=48, xp=85,
            drops=_drops(("fish_meat", 1.0, 3, 5), ("pike_tooth", 0.5, 1, 3), ("fish_oil", 0.3, 1, 2)),
            scientific="Esox lucius",
            description="Aggressive predator with sharp teeth. Strong fighter.",
        ),
        _fish(
            "MUSKIE", "Muskellunge", R.QUALITY, C.PIKE,
            water=(W.LAKE, W.RIVER),
            locations=("longhorn_reservoir",),
            times=(T.DAWN, T.DUSK),
            weather=(X.CLOUDY, X.FOG),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(10, 50, 20, 50),
            chance=5, bite_ms=2000, hook=60, fight=(90, 70, 100, 90),
            bait=(B.MINNOWS, B.SPECIAL_BAIT),
            lures=(L.PLUG, L.SPOON_LURE),
            value=85, xp=120,
            drops=_drops(("fish_meat", 1.0, 5, 8), ("pike_tooth", 0.7, 2, 5), ("trophy_scale", 0.4, 1, 2)),
            scientific="Esox masquinongy",
            description="Trophy fish. Massive predator that fights like the devil.",
        ),
        _fish(
            "CHANNEL_CATFISH", "Channel Catfish", R.QUALITY, C.CATFISH,
            water=(W.RIVER, W.LAKE),
            locations=("rio_frontera", "coyote_river"),
            times=(T.DUSK, T.NIGHT),
            weather=(X.CLOUDY, X.RAIN, X.STORM),
            depth=(S.BOTTOM, S.DEEP),
            weight=(5, 30, 12, 30),
            chance=10, bite_ms=3500, hook=35, fight=(65, 48, 75, 50),
            bait=(B.CUT_BAIT, B.CRAWFISH, B.SPECIAL_BAIT),
            value=38, xp=65,
            drops=_drops(("fish_meat", 1.0, 3, 5), ("fish_bones", 0.6, 2, 3)),
            scientific="Ictalurus punctatus",
            description="Large, strong catfish. Puts up a serious fight.",
        ),
        # rare
        _fish(
            "GOLDEN_TROUT", "Golden Trout", R.RARE, C.TROUT,
            water=(W.STREAM, W.LAKE),
            locations=("mountain_lake", "sacred_waters"),
            times=(T.DAWN, T.DUSK),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(1, 6, 2.5, 6),
            chance=3, bite_ms=1500, hook=65, fight=(55, 60, 70, 70),
            bait=(B.INSECTS, B.SPECIAL_BAIT),
            lures=(L.FLY_LURE,),
            value=120, xp=150,
            drops=_drops(("fish_meat", 1.0, 2, 3), ("golden_scale", 0.8, 1, 3), ("trout_roe", 0.6, 2, 4)),
            scientific="Oncorhynchus aguabonita",
            description="Rare high-altitude trout with golden coloring. Found in the clearest mountain waters.",
            lore="Native legends say this fish swam in sacred pools before the settlers came.",
        ),
        _fish(
            "APACHE_TROUT", "Apache Trout", R.RARE, C.TROUT,
            water=(W.STREAM,),
            locations=("sacred_waters",),
            times=(T.DAWN, T.MORNING),
            weather=(X.CLEAR,),
            depth=(S.SHALLOW, S.STRUCTURE),
            weight=(0.5, 4, 1.5, 4),
            chance=4, bite_ms=1800, hook=60, fight=(45, 55, 65, 65),
            bait=(B.INSECTS,),
            lures=(L.FLY_LURE,),
            value=150, xp=175,
            drops=_drops(("fish_meat", 1.0, 1, 2), ("sacred_scale", 0.9, 1, 2), ("spirit_essence", 0.3, 1, 1)),
            scientific="Oncorhynchus apache",
            description="Native trout found only in protected Coalition waters.",
            lore="The Nahi Coalition protects this sacred fish. Fishing requires their blessing.",
        ),
        _fish(
            "STURGEON", "Sturgeon", R.RARE, C.STURGEON,
            water=(W.RIVER,),
            locations=("rio_frontera", "coyote_river"),
            times=(T.DAWN, T.DUSK, T.NIGHT),
            weather=(X.CLOUDY, X.RAIN),
            depth=(S.BOTTOM, S.DEEP),
            weight=(50, 200, 100, 200),
            chance=2, bite_ms=4000, hook=70, fight=(120, 80, 150, 60),
            bait=(B.CUT_BAIT, B.SPECIAL_BAIT),
            value=180, xp=250,
            drops=_drops(
                ("fish_meat", 1.0, 10, 15),
                ("sturgeon_roe", 0.7, 3, 6),
                ("ancient_scale", 0.5, 2, 4),
                ("fish_oil", 0.6, 3, 5),
            ),
            scientific="Acipenser transmontanus",
            description="Ancient armored fish. Living fossil that can weigh hundreds of pounds.",
            lore="Some sturgeon in these waters are older than the Territory itself.",
        ),
        _fish(
            "PADDLEFISH", "Paddlefish", R.RARE, C.STURGEON,
            water=(W.RIVER, W.LAKE),
            locations=("rio_frontera", "longhorn_reservoir"),
            times=(T.DAWN, T.DUSK),
            weather=(X.CLOUDY, X.FOG),
            depth=(S.DEEP, S.BOTTOM),
            weight=(30, 120, 60, 120),
            chance=2.5, bite_ms=4000, hook=65, fight=(100, 75, 130, 55),
            bait=(B.SPECIAL_BAIT,),
            value=160, xp=220,
            special_bait=True,
            drops=_drops(("fish_meat", 1.0, 8, 12), ("paddlefish_roe", 0.8, 3, 5), ("ancient_scale", 0.4, 1, 3)),
            scientific="Polyodon spathula",
            description="Prehistoric fish with a bizarre paddle-shaped nose. Filter feeder.",
            lore="Older than the mountains. Some say they remember when spirits walked the earth.",
        ),
        _fish(
            "GAR", "Alligator Gar", R.RARE, C.EXOTIC,
            water=(W.RIVER,),
            locations=("rio_frontera",),
            times=(T.DAWN, T.DUSK, T.NIGHT),
            weather=(X.CLEAR, X.CLOUDY),
            depth=(S.DEEP, S.STRUCTURE),
            weight=(20, 150, 60, 150),
            chance=3, bite_ms=2000, hook=75, fight=(110, 85, 140, 95),
            bait=(B.CUT_BAIT, B.MINNOWS),
            value=170, xp=240,
            drops=_drops(("fish_meat", 1.0, 8, 12), ("gar_scale", 0.9, 5, 8), ("gar_tooth", 0.7, 3, 6)),
            scientific="Atractosteus spatula",
            description="Armor-plated predator with rows of needle teeth. Living dinosaur.",
            lore="Fronterans say El Diablo himself put these things in the river to punish fishermen.",
        ),
        _fish(
            "CAVE_BLINDFISH", "Blind Cave Fish", R.RARE, C.EXOTIC,
            water=(W.UNDERGROUND,),
            locations=("underground_river",),
            times=_ALL_DAY,
            # no sky underground
            weather=(),
            depth=(S.DEEP, S.BOTTOM),
            weight=(0.2, 0.8, 0.4, 0.8),
            chance=8, bite_ms=3000, hook=25, fight=(20, 20, 25, 15),
            bait=(B.INSECTS, B.WORMS),
            value=100, xp=120,
            drops=_drops(("fish_meat", 1.0, 1, 1), ("cave_specimen", 0.7, 1, 1)),
            scientific="Amblyopsis spelaea",
            description="Eyeless fish adapted to total darkness in underground waters.",
            lore="Found only in the deepest mine tunnels that broke through to underground rivers.",
        ),
        # legendary
        _fish(
            "OLD_WHISKERS", "Old Whiskers", R.LEGENDARY, C.CATFISH,
            water=(W.LAKE,),
            locations=("spirit_springs_lake",),
            times=(T.NIGHT,),
            weather=(X.STORM, X.FOG),
            depth=(S.BOTTOM, S.DEEP),
            weight=(80, 100, 90, 100),
            chance=0.5, bite_ms=5000, hook=90, fight=(180, 95, 200, 80),
            bait=(B.SPECIAL_BAIT, B.BLOOD_LURE),
            value=600, xp=500,
            legendary=True, one_per_location=True, special_bait=True,
            drops=_drops(
                ("fish_meat", 1.0, 15, 20),
                ("legendary_whisker", 1.0, 1, 1),
                ("ancient_scale", 0.8, 3, 5),
                ("fish_oil", 0.9, 5, 8),
            ),
            scientific="Ictalurus giganteus",
            description="The giant catfish of Spirit Springs. Said to be 50 years old and big as a man.",
            lore="Every angler in the Territory has a story about Old Whiskers. Nobody has a photo.",
        ),
        _fish(
            "THE_GHOST", "The Ghost", R.RARE, C.TROUT,
            water=(W.LAKE,),
            locations=("mountain_lake",),
            times=(T.NIGHT,),
            weather=(X.CLEAR, X.FOG),
            depth=(S.DEEP,),
            weight=(12, 15, 13, 15),
            chance=0.8, bite_ms=1000, hook=85, fight=(90, 88, 120, 90),
            bait=(B.SPIRIT_WORM, B.SPECIAL_BAIT),
            lures=(L.FLY_LURE,),
            value=800, xp=600,
            legendary=True, one_per_location=True, special_bait=True,
            drops=_drops(
                ("fish_meat", 1.0, 5, 7),
                ("ghost_scale", 1.0, 3, 5),
                ("spirit_essence", 0.9, 2, 3),
                ("moonlight_pearl", 0.5, 1, 1),
            ),
            scientific="Oncorhynchus albinus",
            description="Pure white albino trout of Mountain Lake. Seen only in moonlight.",
            lore="Nahi shamans say The Ghost is a warrior who chose to remain in the sacred lake forever.",
        ),
        _fish(
            "RIVER_KING", "River King", R.LEGENDARY, C.BASS,
            water=(W.RIVER,),
            locations=("red_gulch_creek",),
            times=(T.DAWN, T.DUSK),
            weather=(X.CLOUDY, X.RAIN),
            depth=(S.STRUCTURE, S.DEEP),
            weight=(18, 22, 20, 22),
            chance=1.0, bite_ms=1500, hook=82, fight=(100, 85, 140, 95),
            bait=(B.MINNOWS, B.CRAWFISH, B.GOLDEN_GRUB),
            lures=(L.PLUG, L.SPOON_LURE),
            value=1000, xp=700,
            legendary=True, one_per_location=True,
            drops=_drops(("fish_meat", 1.0, 8, 10), ("kings_scale", 1.0, 1, 1), ("trophy_scale", 0.9, 3, 5)),
            scientific="Micropterus maximus",
            description="Massive bass that rules Red Gulch Creek. Bigger than any bass has a right to be.",
            lore="Creek prospectors used to feed him their lunch scraps for luck. Still likes cornbread.",
        ),
        _fish(
            "EL_DIABLO", "El Diablo", R.LEGENDARY, C.EXOTIC,
            water=(W.SACRED,),
            locations=("the_scar_pool",),
            times=(T.NIGHT,),
            weather=(X.STORM, X.FOG),
            depth=(S.DEEP, S.BOTTOM),
            weight=(25, 30, 27, 30),
            chance=0.3, bite_ms=800, hook=95, fight=(150, 98, 180, 100),
            bait=(B.BLOOD_LURE, B.SPECIAL_BAIT),
            value=2000, xp=1000,
            legendary=True, one_per_location=True, special_bait=True,
            drops=_drops(
                ("fish_meat", 1.0, 10, 12),
                ("diablo_scale", 1.0, 3, 5),
                ("cursed_essence", 0.9, 2, 4),
                ("blood_crystal", 0.6, 1, 2),
            ),
            scientific="Sanguis infernus",
            description="Blood-red fish from the cursed waters of The Scar. Not entirely natural.",
            lore="Fronterans won't fish there anymore. They say El Diablo doesn't bite hooks; he chooses who to take.",
        ),
    )
}


FISHING_LOCATIONS: Dict[str, FishingLocation] = {
    location.id: location
    for location in (
        FishingLocation(
            id="red_gulch_creek",
            name="Red Gulch Creek",
            water_types=(W.RIVER,),
            spot_types=(S.SHALLOW, S.STRUCTURE, S.DEEP),
            difficulty=1,
            description="A winding creek popular with local anglers. Good for beginners.",
        ),
        FishingLocation(
            id="coyote_river",
            name="Coyote River",
            water_types=(W.RIVER, W.STREAM),
            spot_types=(S.SHALLOW, S.STRUCTURE, S.DEEP, S.BOTTOM),
            difficulty=2,
            description="Fast water running down from the hills, busy with bass, trout and pike.",
        ),
        FishingLocation(
            id="rio_frontera",
            name="Rio Frontera",
            water_types=(W.RIVER,),
            spot_types=(S.DEEP, S.BOTTOM, S.STRUCTURE),
            difficulty=3,
            description="The wide border river. Its muddy depths hide the biggest fish in the Territory.",
        ),
        FishingLocation(
            id="spirit_springs_lake",
            name="Spirit Springs Lake",
            water_types=(W.LAKE,),
            spot_types=(S.SURFACE, S.SHALLOW, S.STRUCTURE, S.DEEP, S.BOTTOM),
            difficulty=2,
            description="Crystal clear water fed by natural springs. Sacred to the Nahi.",
        ),
        FishingLocation(
            id="longhorn_reservoir",
            name="Longhorn Reservoir",
            water_types=(W.LAKE,),
            spot_types=(S.SURFACE, S.SHALLOW, S.STRUCTURE, S.DEEP, S.BOTTOM),
            difficulty=2,
            description="A dammed ranch reservoir stocked with panfish and big predators.",
        ),
        FishingLocation(
            id="mountain_lake",
            name="Mountain Lake",
            water_types=(W.LAKE, W.STREAM),
            spot_types=(S.SURFACE, S.SHALLOW, S.STRUCTURE, S.DEEP),
            difficulty=3,
            description="Cold alpine water and the streams that feed it.",
        ),
        FishingLocation(
            id="sacred_waters",
            name="Sacred Waters",
            water_types=(W.STREAM, W.LAKE),
            spot_types=(S.SHALLOW, S.STRUCTURE, S.DEEP),
            difficulty=4,
            description="Protected Coalition streams. Fishing here requires their blessing.",
            tags=("sacred",),
        ),
        FishingLocation(
            id="the_scar_pool",
            name="The Scar Pool",
            water_types=(W.SACRED,),
            spot_types=(S.DEEP, S.BOTTOM),
            difficulty=5,
            description="A blood-red pool in the meteor crater. The locals keep well away.",
            tags=("cursed",),
        ),
        FishingLocation(
            id="underground_river",
            name="Underground River",
            water_types=(W.UNDERGROUND,),
            spot_types=(S.DEEP, S.BOTTOM),
            difficulty=3,
            description="A black river reached through the deepest mine tunnels.",
        ),
        FishingLocation(
            id="spring_pools",
            name="Spring Pools",
            water_types=(W.POND,),
            spot_types=(S.SHALLOW,),
            difficulty=1,
            description="Natural pools fed by underground springs. Peaceful and secluded.",
        ),
        FishingLocation(
            id="dry_wash",
            name="Dry Wash",
            water_types=(),
            difficulty=1,
            description="A creek bed that has not seen water since the drought.",
        ),
    )
}
