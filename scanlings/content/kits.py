# scanlings/content/kits.py
KITS = {
    "Bulwark Golem": {
        "role": "tank",
        "hp_max": 160,
        "moves": [
            {"move_id": "stonewall_slam", "name": "Stonewall Slam", "cue": "CUE_CHARGE_SHAKE", "kind": "damage", "base": 14, "targeting": "frontline"},
            {"move_id": "guard_up", "name": "Guard Up", "cue": "CUE_RING_PULSE", "kind": "shield", "base": 10, "targeting": "self"},
        ],
    },
    "Forge Pup": {
        "role": "tank",
        "hp_max": 150,
        "moves": [
            {"move_id": "spark_bite", "name": "Spark Bite", "cue": "CUE_TWO_BEAT", "kind": "damage", "base": 15, "targeting": "frontline"},
            {"move_id": "heat_guard", "name": "Heat Guard", "cue": "CUE_RING_PULSE", "kind": "shield", "base": 9, "targeting": "ally_lowest_hp"},
        ],
    },
    "Sprout Medic": {
        "role": "support",
        "hp_max": 120,
        "moves": [
            {"move_id": "green_patch", "name": "Green Patch", "cue": "CUE_RING_PULSE", "kind": "heal", "base": 16, "targeting": "ally_lowest_hp"},
            {"move_id": "seed_shield", "name": "Seed Shield", "cue": "CUE_TARGET_MARK", "kind": "shield", "base": 10, "targeting": "ally_lowest_hp"},
        ],
    },
    "Hex Scholar": {
        "role": "support",
        "hp_max": 115,
        "moves": [
            {"move_id": "sigil_mend", "name": "Sigil Mend", "cue": "CUE_RING_PULSE", "kind": "heal", "base": 14, "targeting": "ally_lowest_hp"},
            {"move_id": "ward_rune", "name": "Ward Rune", "cue": "CUE_TARGET_MARK", "kind": "shield", "base": 11, "targeting": "ally_lowest_hp"},
        ],
    },
    "Cannon Critter": {
        "role": "dps",
        "hp_max": 100,
        "moves": [
            {"move_id": "scoop_n_fling", "name": "Scoop 'n Fling", "cue": "CUE_TWO_BEAT", "kind": "damage", "base": 22, "targeting": "frontline"},
            {"move_id": "cutlery_clatter", "name": "Cutlery Clatter", "cue": "CUE_TARGET_MARK", "kind": "damage", "base": 18, "targeting": "frontline"},
        ],
    },
    "Pouncer": {
        "role": "dps",
        "hp_max": 105,
        "moves": [
            {"move_id": "pounce", "name": "Pounce", "cue": "CUE_CHARGE_SHAKE", "kind": "damage", "base": 21, "targeting": "backline_random"},
            {"move_id": "backflip_kick", "name": "Backflip Kick", "cue": "CUE_TWO_BEAT", "kind": "damage", "base": 19, "targeting": "frontline"},
        ],
    },
    "Zoner Wisp": {
        "role": "control",
        "hp_max": 112,
        "moves": [
            {"move_id": "zone_burst", "name": "Zone Burst", "cue": "CUE_TARGET_MARK", "kind": "control", "base": 16, "targeting": "frontline"},
            {"move_id": "slow_field", "name": "Slow Field", "cue": "CUE_RING_PULSE", "kind": "control", "base": 0, "targeting": "frontline"},
        ],
    },
    "Storm Skater": {
        "role": "control",
        "hp_max": 110,
        "moves": [
            {"move_id": "static_dash", "name": "Static Dash", "cue": "CUE_TWO_BEAT", "kind": "damage", "base": 17, "targeting": "frontline"},
            {"move_id": "arc_jam", "name": "Arc Jam", "cue": "CUE_TARGET_MARK", "kind": "control", "base": 0, "targeting": "frontline"},
        ],
    },
}

# Used for any archetype missing from KITS.
DEFAULT_KIT = {
    "role": "dps",
    "hp_max": 100,
    "moves": [
        {"move_id": "slam", "name": "Slam", "cue": "CUE_CHARGE_SHAKE", "kind": "damage", "base": 18, "targeting": "frontline"},
        {"move_id": "jab", "name": "Jab", "cue": "CUE_TWO_BEAT", "kind": "damage", "base": 16, "targeting": "frontline"},
    ],
}

# Common-rarity baselines, scaled by rarity in stats_for_creature.
BASE_STATS = {
    "Bulwark Golem": {"atk": 12, "def": 16, "spd": 8},
    "Cannon Critter": {"atk": 18, "def": 10, "spd": 12},
    "Sprout Medic": {"atk": 10, "def": 14, "spd": 11},
    "Zoner Wisp": {"atk": 12, "def": 12, "spd": 14},
    "Pouncer": {"atk": 17, "def": 9, "spd": 16},
    "Forge Pup": {"atk": 16, "def": 12, "spd": 11},
    "Hex Scholar": {"atk": 12, "def": 12, "spd": 12},
    "Storm Skater": {"atk": 13, "def": 10, "spd": 18},
}

DEFAULT_BASE_STATS = {"atk": 14, "def": 12, "spd": 12}

ROLES = ("tank", "support", "dps", "control")
MOVE_KINDS = ("damage", "heal", "shield", "control")
TARGETINGS = ("frontline", "backline_random", "enemy_lowest_hp", "ally_lowest_hp", "self")

ELEMENTS = ("Fire", "Water", "Earth", "Air", "Electric", "Nature", "Metal", "Shadow")
RARITIES = ("Common", "Rare", "Epic", "Legendary")

DEFAULT_ELEMENT = "Water"
DEFAULT_RARITY = "Common"
DEFAULT_ARCHETYPE = "Cannon Critter"

SILHOUETTES = {
    "Bulwark Golem": {
        "bulwark_golem_01": "squat boulder body, big fists",
        "bulwark_golem_02": "barrel torso, shield slab arm",
        "bulwark_golem_03": "turtle-golem shell, low stance",
    },
    "Pouncer": {
        "pouncer_01": "catlike crouch, blade tail",
        "pouncer_02": "bat-imp, wing cloak",
        "pouncer_03": "fox sprite, dagger ears",
    },
    "Zoner Wisp": {
        "zoner_wisp_01": "floating orb + ribbon arms",
        "zoner_wisp_02": "lantern wisp, dangling tassels",
        "zoner_wisp_03": "cloud jelly, drifting tendrils",
    },
    "Sprout Medic": {
        "sprout_medic_01": "sprout kid, leaf cape",
        "sprout_medic_02": "potion bud, bottle belly",
        "sprout_medic_03": "mushroom nurse, cap hat",
    },
    "Cannon Critter": {
        "cannon_critter_01": "chubby raccoon with arm-cannon",
        "cannon_critter_02": "penguin blaster, chest turret",
        "cannon_critter_03": "snail tank, shell cannon",
    },
    "Hex Scholar": {
        "hex_scholar_01": "owl mage, scroll wings",
        "hex_scholar_02": "witch doll, big sleeves",
        "hex_scholar_03": "book imp, page cape",
    },
    "Storm Skater": {
        "storm_skater_01": "slick lizard, fin shoes",
        "storm_skater_02": "sparrow skater, wing blades",
        "storm_skater_03": "electric eel, hover tail",
    },
    "Forge Pup": {
        "forge_pup_01": "metal puppy, big jaw",
        "forge_pup_02": "boar cub, rivet hide",
        "forge_pup_03": "bearlet, furnace belly",
    },
}
