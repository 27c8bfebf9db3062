# scanlings/engine/rules.py
import math

from ..content.balance import CRIT_MULT, RAMP, RARITY_MULT, ROLE_DAMAGE_MULT, SHIELD_CAP, TURNS


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def rarity_multiplier(rarity: str) -> float:
    return RARITY_MULT.get(rarity, 1.0)


def role_multiplier(role: str) -> float:
    return ROLE_DAMAGE_MULT.get(role, 1.0)


def damage_ramp(turn: int) -> float:
    # past the soft cap damage grows each turn to force a result
    soft_cap = TURNS["soft_cap"]
    if turn <= soft_cap:
        return 1.0
    return 1 + RAMP["damage_per_turn"] * (turn - soft_cap)


def restore_damp(turn: int) -> float:
    # heals and shields decay past the soft cap, floored at zero
    soft_cap = TURNS["soft_cap"]
    if turn <= soft_cap:
        return 1.0
    return max(0.0, 1 - RAMP["restore_decay_per_turn"] * (turn - soft_cap))


def shield_cap(hp_max: int) -> int:
    return max(SHIELD_CAP["flat"], int(math.floor(hp_max * SHIELD_CAP["hp_ratio"])))


def damage_amount(base: int, variance: int, role: str, crit: bool, turn: int) -> int:
    crit_mult = CRIT_MULT if crit else 1.0
    raw = (base + variance) * role_multiplier(role) * crit_mult * damage_ramp(turn)
    return max(1, int(math.floor(raw)))


def restore_amount(base: int, variance: int, turn: int) -> int:
    """Heal or shield magnitude before target clamping."""
    return max(1, int(math.floor((base + variance) * restore_damp(turn))))
