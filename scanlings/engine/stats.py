# scanlings/engine/stats.py
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .models import ArchetypeKit, CreatureStats, MoveDef
from .rules import rarity_multiplier, round_half_up
from ..content.kits import BASE_STATS, DEFAULT_BASE_STATS, DEFAULT_KIT, KITS


def _build_kit(archetype: str, data: Dict[str, Any]) -> ArchetypeKit:
    moves = tuple(MoveDef.from_dict(m) for m in data["moves"])
    if len(moves) != 2:
        raise ValueError(f"kit for {archetype!r} must define exactly two moves")
    return ArchetypeKit(
        archetype=archetype,
        role=data["role"],
        hp_max=int(data["hp_max"]),
        moves=moves,
    )


# Built once at import; shared read-only by every battle.
KIT_CATALOG: Mapping[str, ArchetypeKit] = MappingProxyType(
    {archetype: _build_kit(archetype, data) for archetype, data in KITS.items()}
)


def kit_for(archetype: str) -> ArchetypeKit:
    """Total over any string: unknown archetypes get the generic dps kit under their own name."""
    kit = KIT_CATALOG.get(archetype)
    if kit is not None:
        return kit
    return _build_kit(str(archetype), DEFAULT_KIT)


def base_stats_for_archetype(archetype: str) -> Dict[str, int]:
    return dict(BASE_STATS.get(archetype, DEFAULT_BASE_STATS))


def stats_for_creature(archetype: str, rarity: str) -> CreatureStats:
    """
    Rarity-scaled card stats. Reported to clients only; the resolver
    runs on the unscaled kit hp_max.
    """
    kit = kit_for(archetype)
    m = rarity_multiplier(rarity)
    base = base_stats_for_archetype(archetype)
    return CreatureStats(
        hp=max(1, round_half_up(kit.hp_max * m)),
        atk=max(1, round_half_up(base["atk"] * m)),
        defense=max(1, round_half_up(base["def"] * m)),
        spd=max(1, round_half_up(base["spd"] * m)),
    )
