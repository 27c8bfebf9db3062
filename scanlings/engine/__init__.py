# scanlings/engine/__init__.py
from .resolver import make_battle_result
from .stats import kit_for, stats_for_creature

__all__ = ["make_battle_result", "kit_for", "stats_for_creature"]
