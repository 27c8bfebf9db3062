# scanlings/content/balance.py
TURNS = {
    "soft_cap": 20,
    "hard_cap": 60,
}

RAMP = {
    "damage_per_turn": 0.12,
    "restore_decay_per_turn": 0.08,
}

ROLE_DAMAGE_MULT = {
    "tank": 0.75,
    "support": 0.60,
    "control": 0.80,
    "dps": 1.00,
}

CHANCES = {
    "crit": 0.10,
    "intercept": 0.45,
    "jam_apply": 0.35,
    "misfire": 0.20,
}

CRIT_MULT = 1.5

# Variance rolls are floor(rand01 * n).
VARIANCE = {
    "heal": 5,
    "shield": 4,
    "damage": 7,
}

SHIELD_CAP = {
    "flat": 40,
    "hp_ratio": 0.3,
}

JAM_DURATION = 1

RARITY_MULT = {
    "Common": 1.00,
    "Rare": 1.08,
    "Epic": 1.16,
    "Legendary": 1.25,
}

FORMATION = {
    "frontline": (0, 1),
    "backline": (2, 3, 4),
}

ROSTER = {
    "min": 3,
    "max": 5,
}

REWARDS = {
    "rating_delta": 12,
    "essence_win": 20,
    "essence_loss": 10,
}
