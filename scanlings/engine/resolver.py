# scanlings/engine/resolver.py
from __future__ import annotations

import logging
import time
from typing import Any, List, Mapping, Optional, Sequence, Union

from .dice import rng_for
from .effects import (
    add_shield,
    apply_heal,
    apply_hp_damage,
    apply_jam,
    consume_shield,
    is_jammed,
    tick_jam,
)
from .models import (
    ActionContext,
    BattleResult,
    BattleState,
    BattleUnit,
    Side,
    SideState,
    TurnRecord,
    UnitRef,
    other_side,
    unit_ref,
)
from .rules import damage_amount, restore_amount
from .stats import kit_for
from ..content.balance import CHANCES, FORMATION, REWARDS, TURNS, VARIANCE

LOGGER = logging.getLogger(__name__)

UnitInput = Union[UnitRef, Mapping[str, Any]]


def _coerce_unit(unit: UnitInput) -> UnitRef:
    if isinstance(unit, UnitRef):
        return unit
    return UnitRef.from_dict(unit)


def build_side(side: Side, team: Sequence[UnitInput]) -> SideState:
    """Full unscaled kit hp, no shield, no jam."""
    units: List[BattleUnit] = []
    kits = []
    for i, raw in enumerate(team):
        ref = _coerce_unit(raw)
        kit = kit_for(ref.archetype)
        kits.append(kit)
        units.append(
            BattleUnit(
                ref=unit_ref(side, i),
                local_id=ref.local_id,
                archetype=ref.archetype,
                element=ref.element,
                rarity=ref.rarity,
                role=kit.role,
                hp_max=kit.hp_max,
            )
        )
    return SideState(units=units, kits=kits)


def new_battle_state(my_team: Sequence[UnitInput], opponent_team: Sequence[UnitInput], seed: int) -> BattleState:
    return BattleState(
        me=build_side("me", my_team),
        opp=build_side("opp", opponent_team),
        rng=rng_for(seed),
    )


def _slots(kind: str, size: int) -> List[int]:
    return [i for i in FORMATION[kind] if i < size]


def first_alive_in(side: SideState, indices: Sequence[int]) -> int:
    for i in indices:
        if side.alive(i):
            return i
    return -1


def lowest_alive(side: SideState) -> int:
    """Index of the living unit with the least hp; ties go to the lowest slot."""
    best = -1
    best_hp = None
    for i, hp in enumerate(side.hp):
        if hp > 0 and (best_hp is None or hp < best_hp):
            best = i
            best_hp = hp
    return best


def pick_actor(side: SideState, turn: int) -> int:
    """Round-robin slot for this turn, advanced to the next living unit. -1 if none."""
    if side.size == 0:
        return -1
    index = (turn - 1) % side.size
    for _ in range(side.size):
        if side.alive(index):
            return index
        index = (index + 1) % side.size
    return -1


def select_move(state: BattleState, side: Side, actor_index: int, turn: int) -> ActionContext:
    kit = state.side(side).kits[actor_index]
    move = kit.moves[(turn + actor_index) % 2]
    return ActionContext(turn=turn, side=side, actor_index=actor_index, move=move, role=kit.role)


def _record(state: BattleState, action: ActionContext, target: str, **fields) -> TurnRecord:
    move = action.move
    record = TurnRecord(
        turn=action.turn,
        actor=action.actor_ref,
        target=target,
        move_id=move.move_id,
        move_name=move.name,
        cue=move.cue,
        targeting=move.targeting,
        jam_remaining_by_ref=state.jam_snapshot(),
        **fields,
    )
    state.turns.append(record)
    return record


def resolve_misfire(state: BattleState, action: ActionContext) -> TurnRecord:
    own = state.side(action.side)
    i = action.actor_index
    return _record(
        state,
        action,
        action.actor_ref,
        hit=False,
        misfire=True,
        target_hp=own.hp[i],
        target_shield=own.shield[i],
        status_consumed=["jam"],
    )


def _ally_target(own: SideState, action: ActionContext) -> int:
    if action.move.targeting == "self":
        return action.actor_index
    return lowest_alive(own)


def resolve_heal(state: BattleState, action: ActionContext) -> Optional[TurnRecord]:
    own = state.side(action.side)
    target = _ally_target(own, action)
    if target == -1:
        return None
    variance = state.rng.below(VARIANCE["heal"])
    healed = apply_heal(own, target, restore_amount(action.move.base, variance, action.turn))
    return _record(
        state,
        action,
        unit_ref(action.side, target),
        healing=healed,
        target_hp=own.hp[target],
        target_shield=own.shield[target],
    )


def resolve_shield(state: BattleState, action: ActionContext) -> Optional[TurnRecord]:
    own = state.side(action.side)
    target = _ally_target(own, action)
    if target == -1:
        return None
    variance = state.rng.below(VARIANCE["shield"])
    delta = add_shield(own, target, restore_amount(action.move.base, variance, action.turn))
    return _record(
        state,
        action,
        unit_ref(action.side, target),
        shield_delta=delta,
        target_hp=own.hp[target],
        target_shield=own.shield[target],
        status_applied=["shield"],
    )


def choose_strike_target(state: BattleState, action: ActionContext) -> int:
    defender = state.side(other_side(action.side))
    frontline = _slots("frontline", defender.size)
    backline = _slots("backline", defender.size)

    target = -1
    if action.move.targeting == "backline_random":
        alive_back = [i for i in backline if defender.alive(i)]
        if alive_back:
            target = state.rng.pick(alive_back)
    if target == -1:
        target = first_alive_in(defender, frontline)
    if target == -1:
        target = first_alive_in(defender, backline)
    return target


def intercepting_tank(defender: SideState) -> int:
    for i in _slots("frontline", defender.size):
        if defender.alive(i) and defender.units[i].role == "tank":
            return i
    return -1


def resolve_strike(state: BattleState, action: ActionContext) -> Optional[TurnRecord]:
    """Shared damage/control path: target, intercept, damage through shield, jam."""
    def_side = other_side(action.side)
    defender = state.side(def_side)
    rng = state.rng

    target = choose_strike_target(state, action)
    if target == -1:
        return None

    intercepted = False
    target_original = None
    if target >= 2:
        tank = intercepting_tank(defender)
        if tank != -1 and rng.chance(CHANCES["intercept"]):
            intercepted = True
            target_original = target
            target = tank

    variance = rng.below(VARIANCE["damage"])
    crit = rng.chance(CHANCES["crit"])
    damage = damage_amount(action.move.base, variance, action.role, crit, action.turn)

    absorbed, to_hp = consume_shield(defender, target, damage)
    ko = apply_hp_damage(defender, target, to_hp)

    statuses: List[str] = []
    if action.role == "control" and rng.chance(CHANCES["jam_apply"]):
        statuses.append("jam")
        apply_jam(defender, target)
        # the attacking side loses any jam at the same slot index
        attacker = state.side(action.side)
        if target < attacker.size:
            attacker.jam[target] = 0

    return _record(
        state,
        action,
        unit_ref(def_side, target),
        target_original=None if target_original is None else unit_ref(def_side, target_original),
        intercepted=intercepted,
        damage=damage,
        shield_delta=-absorbed,
        absorbed=absorbed,
        target_hp=defender.hp[target],
        target_shield=defender.shield[target],
        ko=ko,
        status_applied=statuses,
    )


_HANDLERS = {
    "heal": resolve_heal,
    "shield": resolve_shield,
    "damage": resolve_strike,
    "control": resolve_strike,
}


def resolve_action(state: BattleState, action: ActionContext) -> Optional[TurnRecord]:
    """
    One action step: jam check, then move-kind dispatch.
    Returns None when the move had no valid target (nothing is logged).
    """
    own = state.side(action.side)
    if is_jammed(own, action.actor_index):
        tick_jam(own, action.actor_index)
        if state.rng.chance(CHANCES["misfire"]):
            return resolve_misfire(state, action)
    handler = _HANDLERS.get(action.move.kind, resolve_strike)
    return handler(state, action)


def determine_winner(state: BattleState) -> Side:
    me_alive = state.me.any_alive()
    opp_alive = state.opp.any_alive()
    if opp_alive and not me_alive:
        return "opp"
    # both alive at the hard cap (or neither) defaults to me
    return "me"


def run_battle(state: BattleState) -> BattleState:
    for turn in range(1, TURNS["hard_cap"] + 1):
        if state.me.wiped() or state.opp.wiped():
            break
        side: Side = "me" if turn % 2 == 1 else "opp"
        actor = pick_actor(state.side(side), turn)
        if actor == -1:
            break
        resolve_action(state, select_move(state, side, actor, turn))
    return state


def make_battle_result(
    my_team: Sequence[UnitInput],
    opponent_team: Sequence[UnitInput],
    seed: int,
    battle_id: Optional[str] = None,
) -> BattleResult:
    """
    Simulate a whole ladder battle. Rosters are assumed validated by the caller;
    in-battle anomalies (no target, no actor) are skips, never errors.
    """
    state = run_battle(new_battle_state(my_team, opponent_team, seed))

    winner = determine_winner(state)
    end_turn = state.turns[-1].turn if state.turns else 0
    reason = "sudden_death_hard_cap" if end_turn >= TURNS["hard_cap"] else "wipeout"
    delta = REWARDS["rating_delta"]

    if battle_id is None:
        battle_id = f"b_{seed}_{int(time.time() * 1000)}"

    LOGGER.debug(
        "battle.resolve seed=%s size=%s winner=%s reason=%s end_turn=%s actions=%s",
        seed,
        state.me.size,
        winner,
        reason,
        end_turn,
        len(state.turns),
    )

    return BattleResult(
        battle_id=battle_id,
        winner=winner,
        winner_reason=reason,
        end_turn=end_turn,
        rating_delta={"me": delta, "opp": -delta} if winner == "me" else {"me": -delta, "opp": delta},
        essence_reward=REWARDS["essence_win"] if winner == "me" else REWARDS["essence_loss"],
        seed=seed,
        units={"me": list(state.me.units), "opp": list(state.opp.units)},
        initial_hp={"me": state.me.hp_max, "opp": state.opp.hp_max},
        turn_log=list(state.turns),
    )
