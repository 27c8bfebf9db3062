# scanlings/engine/effects.py
from __future__ import annotations

from typing import Tuple

from .models import SideState
from .rules import clamp, shield_cap
from ..content.balance import JAM_DURATION


def add_shield(side: SideState, index: int, amount: int) -> int:
    """Stack shield onto a unit up to its cap. Returns the applied delta."""
    before = side.shield[index]
    cap = shield_cap(side.units[index].hp_max)
    side.shield[index] = clamp(before + amount, 0, cap)
    return side.shield[index] - before


def consume_shield(side: SideState, index: int, damage: int) -> Tuple[int, int]:
    """Shield soaks damage first. Returns (absorbed, damage_left_for_hp)."""
    absorbed = min(side.shield[index], damage)
    side.shield[index] -= absorbed
    return absorbed, damage - absorbed


def apply_hp_damage(side: SideState, index: int, amount: int) -> bool:
    """Subtract hp floored at zero. True when this hit knocked the unit out."""
    before = side.hp[index]
    side.hp[index] = max(0, before - amount)
    return before > 0 and side.hp[index] == 0


def apply_heal(side: SideState, index: int, amount: int) -> int:
    before = side.hp[index]
    side.hp[index] = clamp(before + amount, 0, side.units[index].hp_max)
    return side.hp[index] - before


def is_jammed(side: SideState, index: int) -> bool:
    return side.jam[index] > 0


def tick_jam(side: SideState, index: int) -> None:
    side.jam[index] = max(0, side.jam[index] - 1)


def apply_jam(side: SideState, index: int) -> None:
    # overwrite, never stack
    side.jam[index] = JAM_DURATION
