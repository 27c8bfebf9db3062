# scanlings/engine/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple

from .dice import XorShift32

Side = Literal["me", "opp"]
Role = Literal["tank", "support", "dps", "control"]
MoveKind = Literal["damage", "heal", "shield", "control"]
Targeting = Literal["frontline", "backline_random", "enemy_lowest_hp", "ally_lowest_hp", "self"]

SIDES: Tuple[Side, Side] = ("me", "opp")


def other_side(side: Side) -> Side:
    return "opp" if side == "me" else "me"


def unit_ref(side: Side, index: int) -> str:
    return f"{side}_{index + 1}"


@dataclass(frozen=True)
class MoveDef:
    move_id: str
    name: str
    cue: str
    kind: MoveKind
    base: int
    targeting: Targeting

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MoveDef":
        return cls(
            move_id=data["move_id"],
            name=data["name"],
            cue=data["cue"],
            kind=data["kind"],
            base=int(data["base"]),
            targeting=data["targeting"],
        )


@dataclass(frozen=True)
class ArchetypeKit:
    archetype: str
    role: Role
    hp_max: int
    moves: Tuple[MoveDef, MoveDef]


@dataclass(frozen=True)
class CreatureStats:
    hp: int
    atk: int
    defense: int
    spd: int

    def as_dict(self) -> Dict[str, int]:
        return {"hp": self.hp, "atk": self.atk, "def": self.defense, "spd": self.spd}


@dataclass(frozen=True)
class UnitRef:
    """Caller-supplied roster entry (already validated)."""
    local_id: str
    archetype: str
    element: str
    rarity: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UnitRef":
        return cls(
            local_id=str(data["local_id"]),
            archetype=str(data["archetype"]),
            element=str(data["element"]),
            rarity=str(data["rarity"]),
        )


@dataclass(frozen=True)
class BattleUnit:
    ref: str
    local_id: str
    archetype: str
    element: str
    rarity: str
    role: Role
    hp_max: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "ref": self.ref,
            "local_id": self.local_id,
            "archetype": self.archetype,
            "element": self.element,
            "rarity": self.rarity,
            "role": self.role,
            "hp_max": self.hp_max,
        }


@dataclass
class SideState:
    units: List[BattleUnit]
    kits: List[ArchetypeKit]
    hp: List[int] = field(default_factory=list)
    shield: List[int] = field(default_factory=list)
    jam: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.hp:
            self.hp = [u.hp_max for u in self.units]
        if not self.shield:
            self.shield = [0 for _ in self.units]
        if not self.jam:
            self.jam = [0 for _ in self.units]

    @property
    def size(self) -> int:
        return len(self.units)

    @property
    def hp_max(self) -> List[int]:
        return [u.hp_max for u in self.units]

    def alive(self, index: int) -> bool:
        return 0 <= index < self.size and self.hp[index] > 0

    def any_alive(self) -> bool:
        return any(h > 0 for h in self.hp)

    def wiped(self) -> bool:
        return all(h <= 0 for h in self.hp)


@dataclass
class BattleState:
    """Mutable per-battle state; discarded when the resolution call returns."""
    me: SideState
    opp: SideState
    rng: XorShift32
    turns: List["TurnRecord"] = field(default_factory=list)

    def side(self, name: Side) -> SideState:
        return self.me if name == "me" else self.opp

    def jam_snapshot(self) -> Dict[str, int]:
        snap: Dict[str, int] = {}
        for name in SIDES:
            for i, value in enumerate(self.side(name).jam):
                snap[unit_ref(name, i)] = value
        return snap


@dataclass(frozen=True)
class ActionContext:
    turn: int
    side: Side
    actor_index: int
    move: MoveDef
    role: Role

    @property
    def actor_ref(self) -> str:
        return unit_ref(self.side, self.actor_index)


@dataclass
class TurnRecord:
    turn: int
    actor: str
    target: str
    move_id: str
    move_name: str
    cue: str
    targeting: str
    hit: bool = True
    misfire: bool = False
    target_original: Optional[str] = None
    intercepted: bool = False
    damage: int = 0
    healing: int = 0
    shield_delta: int = 0
    absorbed: int = 0
    target_hp: int = 0
    target_shield: int = 0
    ko: bool = False
    status_applied: List[str] = field(default_factory=list)
    status_consumed: List[str] = field(default_factory=list)
    jam_remaining_by_ref: Dict[str, int] = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "actor": self.actor,
            "target": self.target,
            "target_original": self.target_original,
            "intercepted": self.intercepted,
            "move_id": self.move_id,
            "move_name": self.move_name,
            "cue": self.cue,
            "targeting": self.targeting,
            "hit": self.hit,
            "misfire": self.misfire,
            "damage": self.damage,
            "healing": self.healing,
            "shield_delta": self.shield_delta,
            "absorbed": self.absorbed,
            "target_hp": self.target_hp,
            "target_shield": self.target_shield,
            "ko": self.ko,
            "status_applied": list(self.status_applied),
            "status_consumed": list(self.status_consumed),
            "jam_remaining_by_ref": dict(self.jam_remaining_by_ref),
        }


@dataclass
class BattleResult:
    battle_id: str
    winner: Side
    winner_reason: str
    end_turn: int
    rating_delta: Dict[str, int]
    essence_reward: int
    seed: int
    units: Dict[str, List[BattleUnit]]
    initial_hp: Dict[str, List[int]]
    turn_log: List[TurnRecord]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "battle_id": self.battle_id,
            "winner": self.winner,
            "winner_reason": self.winner_reason,
            "end_turn": self.end_turn,
            "rating_delta": dict(self.rating_delta),
            "essence_reward": self.essence_reward,
            "seed": self.seed,
            "units": {side: [u.as_dict() for u in units] for side, units in self.units.items()},
            "initial_hp": {side: list(hp) for side, hp in self.initial_hp.items()},
            "turn_log": [record.as_dict() for record in self.turn_log],
        }
