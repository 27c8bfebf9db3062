# scanlings/ladder.py
from __future__ import annotations

import random
from typing import Any, Optional

from .engine.models import BattleResult
from .engine.resolver import make_battle_result
from .validation import parse_ladder_request

SEED_SPACE = 1_000_000_000


def new_battle_seed() -> int:
    return random.randrange(SEED_SPACE)


def run_ladder_battle(payload: Any, seed: Optional[int] = None) -> BattleResult:
    """Validate a request body and resolve it. Raises BattleRequestError."""
    my_team, opponent_team = parse_ladder_request(payload)
    if seed is None:
        seed = new_battle_seed()
    return make_battle_result(my_team, opponent_team, seed)
