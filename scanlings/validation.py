# scanlings/validation.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from .content.balance import ROSTER
from .engine.models import UnitRef

UNIT_FIELDS = ("local_id", "archetype", "element", "rarity")
TEAM_FIELDS = ("my_team", "opponent_team")


class BattleRequestError(ValueError):
    """Rejected before the resolver runs; maps to a 400 on the wire."""

    def __init__(self, code: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(code)
        self.code = code
        self.details = details

    def as_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.code}
        if self.details is not None:
            payload["details"] = self.details
        return payload


def _team_errors(name: str, team: Any) -> List[str]:
    if not isinstance(team, list):
        return [f"{name} must be an array"]
    errors = []
    if len(team) < ROSTER["min"]:
        errors.append(f"{name} must contain at least {ROSTER['min']} units")
    if len(team) > ROSTER["max"]:
        errors.append(f"{name} must contain at most {ROSTER['max']} units")
    for i, unit in enumerate(team):
        if not isinstance(unit, dict):
            errors.append(f"{name}[{i}] must be an object")
            continue
        for key in UNIT_FIELDS:
            value = unit.get(key)
            if not isinstance(value, str) or len(value) < 1:
                errors.append(f"{name}[{i}].{key} must be a non-empty string")
    return errors


def parse_ladder_request(payload: Any) -> Tuple[List[UnitRef], List[UnitRef]]:
    """
    Validate a ladder battle body into two equal-length rosters of 3-5 units.
    Shape problems raise invalid_body; a size mismatch is only reported once
    both teams are individually valid.
    """
    if not isinstance(payload, dict):
        raise BattleRequestError(
            "invalid_body",
            {"formErrors": ["body must be a JSON object"], "fieldErrors": {}},
        )

    field_errors: Dict[str, List[str]] = {}
    for name in TEAM_FIELDS:
        if name not in payload:
            field_errors[name] = ["Required"]
            continue
        errors = _team_errors(name, payload[name])
        if errors:
            field_errors[name] = errors
    if field_errors:
        raise BattleRequestError("invalid_body", {"formErrors": [], "fieldErrors": field_errors})

    my_team = [UnitRef.from_dict(u) for u in payload["my_team"]]
    opponent_team = [UnitRef.from_dict(u) for u in payload["opponent_team"]]
    if len(my_team) != len(opponent_team):
        raise BattleRequestError("team_size_mismatch")
    return my_team, opponent_team
