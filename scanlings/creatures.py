# scanlings/creatures.py
from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .content.kits import (
    DEFAULT_ARCHETYPE,
    DEFAULT_ELEMENT,
    DEFAULT_RARITY,
    ELEMENTS,
    KITS,
    RARITIES,
    SILHOUETTES,
)
from .engine.stats import kit_for, stats_for_creature

_HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")
_NON_WORD_RE = re.compile(r"[^a-z0-9\s]")

GENERIC_LABELS = {
    "coffee mug",
    "mug",
    "cup",
    "bottle",
    "chair",
    "table",
    "phone",
    "keyboard",
    "mouse",
    "remote",
    "tv",
    "television",
    "lamp",
}

LIMITS = {
    "name": 28,
    "texture_notes": 160,
    "essence": 140,
    "flavor_text": 220,
    "palette": 5,
    "move_names": 2,
}


@dataclass
class CreatureSpec:
    """Validated output of the vision classifier."""
    name: str
    archetype: str
    element: str
    rarity: str
    silhouette_id: str = ""
    silhouette_desc: str = ""
    palette_hex: List[str] = field(default_factory=list)
    texture_notes: str = ""
    move_name_overrides: List[str] = field(default_factory=list)
    essence: str = ""
    flavor_text: str = ""


def _clamp_to(value: Any, allowed, fallback: str) -> str:
    return str(value) if str(value) in allowed else fallback


def _text(value: Any, limit: int) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()[:limit]


def is_generic_label(name: str) -> bool:
    key = _NON_WORD_RE.sub("", name.lower()).strip()
    if key in GENERIC_LABELS:
        return True
    words = key.split()
    return len(words) >= 3 and " ".join(words[-2:]) in GENERIC_LABELS


def normalize_creature_spec(raw: Any) -> CreatureSpec:
    if not isinstance(raw, dict):
        raise ValueError("creature spec must be an object")

    archetype = _clamp_to(raw.get("archetype"), KITS, DEFAULT_ARCHETYPE)
    element = _clamp_to(raw.get("element"), ELEMENTS, DEFAULT_ELEMENT)
    rarity = _clamp_to(raw.get("rarity"), RARITIES, DEFAULT_RARITY)

    raw_name = raw.get("name").strip() if isinstance(raw.get("name"), str) else ""
    name = raw_name[: LIMITS["name"]] if raw_name and not is_generic_label(raw_name) else archetype

    silhouettes = SILHOUETTES.get(archetype, {})
    silhouette_id = raw.get("silhouette_id").strip() if isinstance(raw.get("silhouette_id"), str) else ""
    if silhouette_id not in silhouettes:
        silhouette_id = next(iter(silhouettes), "")

    palette_in = raw.get("palette_hex") if isinstance(raw.get("palette_hex"), list) else []
    palette = [str(x).strip() for x in palette_in]
    palette = [x for x in palette if _HEX_RE.match(x)][: LIMITS["palette"]]

    names_in = raw.get("move_name_overrides") if isinstance(raw.get("move_name_overrides"), list) else []
    move_names = [str(x).strip() for x in names_in]
    move_names = [x for x in move_names if x][: LIMITS["move_names"]]

    return CreatureSpec(
        name=name,
        archetype=archetype,
        element=element,
        rarity=rarity,
        silhouette_id=silhouette_id,
        silhouette_desc=silhouettes.get(silhouette_id, ""),
        palette_hex=palette,
        texture_notes=_text(raw.get("texture_notes"), LIMITS["texture_notes"]),
        move_name_overrides=move_names,
        essence=_text(raw.get("essence"), LIMITS["essence"]),
        flavor_text=_text(raw.get("flavor_text"), LIMITS["flavor_text"]),
    )


def fallback_creature_spec(rng: Optional[random.Random] = None) -> CreatureSpec:
    """Random catalog archetype, used when no classifier result is available."""
    r = rng or random.Random()
    pick = r.choice(list(KITS))
    return CreatureSpec(name=pick, archetype=pick, element=DEFAULT_ELEMENT, rarity=DEFAULT_RARITY)


def build_creature(spec: CreatureSpec) -> Dict[str, Any]:
    kit = kit_for(spec.archetype)
    stats = stats_for_creature(kit.archetype, spec.rarity)
    moves = []
    for i, move in enumerate(kit.moves):
        name = spec.move_name_overrides[i] if i < len(spec.move_name_overrides) else move.name
        moves.append({"move_id": move.move_id, "name": name, "cue": move.cue})
    return {
        "name": spec.name,
        "archetype": kit.archetype,
        "role": kit.role,
        "element": spec.element,
        "rarity": spec.rarity,
        "silhouette_id": spec.silhouette_id,
        "silhouette_desc": spec.silhouette_desc,
        "palette_hex": list(spec.palette_hex),
        "texture_notes": spec.texture_notes,
        "essence": spec.essence,
        "flavor_text": spec.flavor_text,
        "stats": stats.as_dict(),
        "moves": moves,
    }
