from __future__ import annotations

from typing import List

import pytest

from scanlings.engine import effects, resolver
from scanlings.engine.models import ActionContext, UnitRef
from scanlings.engine.stats import kit_for

RECORD_KEYS = {
    "turn", "actor", "target", "target_original", "intercepted", "move_id", "move_name", "cue",
    "targeting", "hit", "misfire", "damage", "healing", "shield_delta", "absorbed", "target_hp",
    "target_shield", "ko", "status_applied", "status_consumed", "jam_remaining_by_ref",
}


def team(archetypes: List[str], prefix: str, rarity: str = "Common") -> List[UnitRef]:
    return [UnitRef(f"{prefix}{i}", name, "Fire", rarity) for i, name in enumerate(archetypes)]


def fresh_state(me: List[str], opp: List[str], seed: int = 1):
    return resolver.new_battle_state(team(me, "m"), team(opp, "o"), seed)


def test_initial_state_uses_unscaled_kit_hp() -> None:
    state = fresh_state(["Bulwark Golem", "Pouncer", "Sprout Medic"], ["Cannon Critter"] * 3)
    assert state.me.hp == [160, 105, 120]
    assert state.me.shield == [0, 0, 0]
    assert state.me.jam == [0, 0, 0]

    legendary = resolver.new_battle_state(team(["Bulwark Golem"] * 3, "m", "Legendary"), team(["Pouncer"] * 3, "o"), 1)
    assert legendary.me.hp == [160, 160, 160]


def test_pick_actor_round_robin_skips_dead_and_wraps() -> None:
    state = fresh_state(["Pouncer"] * 3, ["Pouncer"] * 3)
    assert resolver.pick_actor(state.me, 1) == 0
    assert resolver.pick_actor(state.me, 5) == 1
    state.me.hp = [0, 50, 0]
    assert resolver.pick_actor(state.me, 3) == 1
    state.me.hp = [0, 0, 0]
    assert resolver.pick_actor(state.me, 3) == -1


def test_move_alternates_on_turn_plus_slot() -> None:
    state = fresh_state(["Storm Skater"] * 3, ["Pouncer"] * 3)
    assert resolver.select_move(state, "me", 0, 1).move.move_id == "arc_jam"
    assert resolver.select_move(state, "me", 1, 1).move.move_id == "static_dash"
    assert resolver.select_move(state, "me", 0, 2).move.move_id == "static_dash"
    assert resolver.select_move(state, "me", 2, 3).role == "control"


def test_lowest_alive_prefers_lowest_slot_on_ties() -> None:
    state = fresh_state(["Sprout Medic"] * 4, ["Pouncer"] * 4)
    state.me.hp = [40, 0, 30, 30]
    assert resolver.lowest_alive(state.me) == 2
    state.me.hp = [0, 0, 0, 0]
    assert resolver.lowest_alive(state.me) == -1


def test_strike_prefers_frontline_then_backline() -> None:
    state = fresh_state(["Cannon Critter"] * 4, ["Pouncer"] * 4)
    action = resolver.select_move(state, "me", 0, 1)
    assert resolver.choose_strike_target(state, action) == 0
    state.opp.hp = [0, 0, 0, 80]
    assert resolver.choose_strike_target(state, action) == 3


def test_strike_against_wiped_side_is_skipped_silently() -> None:
    state = fresh_state(["Cannon Critter"] * 3, ["Pouncer"] * 3)
    state.opp.hp = [0, 0, 0]
    action = resolver.select_move(state, "me", 0, 1)
    assert resolver.resolve_strike(state, action) is None
    assert state.turns == []


def test_shield_soaks_damage_before_hp() -> None:
    state = fresh_state(["Cannon Critter"] * 3, ["Pouncer"] * 3, seed=42)
    state.opp.shield[0] = 5
    action = resolver.select_move(state, "me", 0, 1)
    record = resolver.resolve_strike(state, action)
    assert record.target == "opp_1"
    assert record.absorbed == 5
    assert record.shield_delta == -5
    assert record.target_shield == 0
    assert record.target_hp == 105 - (record.damage - 5)


def test_knockout_flagged_only_on_transition_to_zero() -> None:
    state = fresh_state(["Cannon Critter"] * 3, ["Pouncer"] * 3, seed=42)
    state.opp.hp[0] = 1
    record = resolver.resolve_strike(state, resolver.select_move(state, "me", 0, 1))
    assert record.ko is True
    assert record.target_hp == 0


def test_shield_move_stacks_up_to_cap() -> None:
    state = fresh_state(["Bulwark Golem"] * 3, ["Pouncer"] * 3, seed=9)
    guard = kit_for("Bulwark Golem").moves[1]
    action = ActionContext(turn=1, side="me", actor_index=0, move=guard, role="tank")
    for _ in range(10):
        record = resolver.resolve_shield(state, action)
        assert record.target == "me_1"
        assert record.status_applied == ["shield"]
    assert state.me.shield[0] == 48
    assert record.shield_delta == 0


def test_add_shield_reports_clamped_delta() -> None:
    state = fresh_state(["Sprout Medic"] * 3, ["Pouncer"] * 3)
    state.me.shield[1] = 35
    assert effects.add_shield(state.me, 1, 12) == 5
    assert state.me.shield[1] == 40


def test_heal_never_exceeds_max() -> None:
    state = fresh_state(["Sprout Medic"] * 3, ["Pouncer"] * 3, seed=3)
    state.me.hp = [118, 120, 120]
    patch = kit_for("Sprout Medic").moves[0]
    record = resolver.resolve_heal(state, ActionContext(turn=2, side="me", actor_index=1, move=patch, role="support"))
    assert record.target == "me_1"
    assert record.healing == 2
    assert record.target_hp == 120


def test_control_jam_overwrites_without_stacking() -> None:
    state = fresh_state(["Storm Skater"] * 3, ["Bulwark Golem"] * 3, seed=11)
    action = resolver.select_move(state, "me", 1, 1)
    applied = None
    for _ in range(200):
        state.opp.hp = list(state.opp.hp_max)
        state.opp.jam[0] = 1
        record = resolver.resolve_strike(state, action)
        assert state.opp.jam[0] == 1
        if record.status_applied == ["jam"]:
            applied = record
    assert applied is not None
    assert applied.jam_remaining_by_ref["opp_1"] == 1


def test_non_control_roles_never_jam() -> None:
    state = fresh_state(["Cannon Critter"] * 3, ["Pouncer"] * 3, seed=8)
    action = resolver.select_move(state, "me", 0, 1)
    for _ in range(100):
        state.opp.hp = list(state.opp.hp_max)
        record = resolver.resolve_strike(state, action)
        assert record.status_applied == []
    assert state.opp.jam == [0, 0, 0]


def test_misfire_logs_self_targeted_no_op() -> None:
    state = fresh_state(["Cannon Critter"] * 3, ["Pouncer"] * 3, seed=17)
    action = resolver.select_move(state, "me", 0, 1)
    misfire = None
    for _ in range(200):
        state.me.jam[0] = 1
        state.opp.hp = list(state.opp.hp_max)
        record = resolver.resolve_action(state, action)
        if record.misfire:
            misfire = record
            break
    assert misfire is not None
    assert misfire.hit is False
    assert misfire.target == misfire.actor == "me_1"
    assert misfire.damage == misfire.healing == misfire.shield_delta == misfire.absorbed == 0
    assert misfire.status_consumed == ["jam"]
    assert misfire.jam_remaining_by_ref["me_1"] == 0


def test_winner_defaults_to_me_when_both_or_neither_survive() -> None:
    state = fresh_state(["Pouncer"] * 3, ["Pouncer"] * 3)
    assert resolver.determine_winner(state) == "me"
    state.opp.hp = [0, 0, 0]
    assert resolver.determine_winner(state) == "me"
    state.me.hp = [0, 0, 0]
    assert resolver.determine_winner(state) == "me"
    state.opp.hp = [1, 0, 0]
    assert resolver.determine_winner(state) == "opp"


def test_result_shape_and_rewards() -> None:
    result = resolver.make_battle_result(
        team(["Bulwark Golem", "Pouncer", "Zoner Wisp"], "m", "Epic"),
        team(["Sprout Medic", "Cannon Critter", "Storm Skater"], "o"),
        seed=555,
        battle_id="b_test",
    ).as_dict()

    assert result["battle_id"] == "b_test"
    assert result["seed"] == 555
    assert result["initial_hp"] == {"me": [160, 105, 112], "opp": [120, 100, 110]}
    assert [u["ref"] for u in result["units"]["me"]] == ["me_1", "me_2", "me_3"]
    assert result["units"]["me"][0]["role"] == "tank"
    assert result["units"]["me"][0]["rarity"] == "Epic"
    assert result["turn_log"], "a battle always logs at least one action"
    assert all(set(r) == RECORD_KEYS for r in result["turn_log"])
    assert result["end_turn"] == result["turn_log"][-1]["turn"]

    if result["winner"] == "me":
        assert result["rating_delta"] == {"me": 12, "opp": -12}
        assert result["essence_reward"] == 20
    else:
        assert result["rating_delta"] == {"me": -12, "opp": 12}
        assert result["essence_reward"] == 10


def test_accepts_plain_mappings_for_rosters() -> None:
    me = [{"local_id": f"m{i}", "archetype": "Pouncer", "element": "Air", "rarity": "Rare"} for i in range(3)]
    opp = [{"local_id": f"o{i}", "archetype": "Forge Pup", "element": "Metal", "rarity": "Common"} for i in range(3)]
    result = resolver.make_battle_result(me, opp, seed=10, battle_id="b")
    assert result.units["opp"][2].local_id == "o2"


def test_generated_battle_id_embeds_seed() -> None:
    result = resolver.make_battle_result(team(["Pouncer"] * 3, "m"), team(["Pouncer"] * 3, "o"), seed=77)
    assert result.battle_id.startswith("b_77_")


@pytest.mark.parametrize("seed", [0, 1, 2**31, 2**32 - 1])
def test_battle_always_halts_within_hard_cap(seed: int) -> None:
    result = resolver.make_battle_result(
        team(["Bulwark Golem", "Forge Pup", "Hex Scholar", "Sprout Medic", "Bulwark Golem"], "m"),
        team(["Forge Pup", "Bulwark Golem", "Sprout Medic", "Hex Scholar", "Forge Pup"], "o"),
        seed=seed,
    )
    assert 1 <= result.end_turn <= 60
    turns = [r.turn for r in result.turn_log]
    assert turns == sorted(turns)
    assert len(turns) <= 60


def test_jam_clears_attacker_slot_matching_the_target() -> None:
    state = fresh_state(["Storm Skater"] * 3, ["Bulwark Golem"] * 3, seed=21)
    action = resolver.select_move(state, "me", 1, 1)
    seen_jam = seen_miss = False
    for _ in range(200):
        state.opp.hp = list(state.opp.hp_max)
        state.opp.jam = [0, 0, 0]
        state.me.jam = [1, 0, 1]
        record = resolver.resolve_strike(state, action)
        assert record.target == "opp_1"
        if record.status_applied == ["jam"]:
            seen_jam = True
            assert state.me.jam == [0, 0, 1]
            assert state.opp.jam == [1, 0, 0]
            assert record.jam_remaining_by_ref["me_1"] == 0
        else:
            seen_miss = True
            assert state.me.jam == [1, 0, 1]
    assert seen_jam and seen_miss


def test_jam_on_slot_missing_from_smaller_attacking_side() -> None:
    state = resolver.new_battle_state(team(["Storm Skater"] * 3, "m"), team(["Pouncer"] * 5, "o"), 5)
    state.opp.hp = [0, 0, 0, 0, 50]
    action = resolver.select_move(state, "me", 1, 1)
    for _ in range(100):
        state.opp.hp[4] = 50
        record = resolver.resolve_strike(state, action)
        assert record.target == "opp_5"
    assert state.me.jam == [0, 0, 0]


def test_backline_random_picks_only_living_backline_units() -> None:
    state = fresh_state(["Pouncer"] * 5, ["Cannon Critter"] * 5, seed=99)
    pounce = kit_for("Pouncer").moves[0]
    action = ActionContext(turn=2, side="me", actor_index=0, move=pounce, role="dps")
    counts = {}
    trials = 2000
    for _ in range(trials):
        state.opp.hp = [100, 100, 100, 0, 100]
        record = resolver.resolve_strike(state, action)
        assert record.intercepted is False
        counts[record.target] = counts.get(record.target, 0) + 1
    assert set(counts) == {"opp_3", "opp_5"}
    assert 0.45 <= counts["opp_3"] / trials <= 0.55


def test_backline_random_falls_back_to_frontline_when_backline_is_down() -> None:
    state = fresh_state(["Pouncer"] * 5, ["Cannon Critter"] * 5, seed=99)
    pounce = kit_for("Pouncer").moves[0]
    action = ActionContext(turn=2, side="me", actor_index=0, move=pounce, role="dps")
    state.opp.hp = [100, 100, 0, 0, 0]
    assert resolver.resolve_strike(state, action).target == "opp_1"
    state.opp.hp = [0, 100, 0, 0, 0]
    assert resolver.resolve_strike(state, action).target == "opp_2"
