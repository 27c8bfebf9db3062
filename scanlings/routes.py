# scanlings/routes.py
import logging

from flask import Blueprint, current_app, jsonify, request

from . import ladder
from .config import Settings
from .content.kits import ELEMENTS, RARITIES, SILHOUETTES
from .creatures import build_creature, fallback_creature_spec, normalize_creature_spec
from .engine.stats import KIT_CATALOG
from .validation import BattleRequestError

LOGGER = logging.getLogger(__name__)

ladder_bp = Blueprint("ladder", __name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type, X-Device-Id",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
}


def _settings() -> Settings:
    return current_app.config.get("SCANLINGS_SETTINGS") or Settings()


def _reject(exc: BattleRequestError):
    LOGGER.info("request rejected: %s %s", request.path, exc.code)
    return jsonify(exc.as_payload()), 400


@ladder_bp.before_app_request
def preflight():
    if request.method == "OPTIONS":
        return "", 204
    return None


@ladder_bp.after_app_request
def add_cors_headers(response):
    for key, value in CORS_HEADERS.items():
        response.headers[key] = value
    return response


@ladder_bp.route("/health")
def health():
    return jsonify({"ok": True})


@ladder_bp.route("/v1/catalog")
def catalog():
    archetypes = []
    for name, kit in KIT_CATALOG.items():
        archetypes.append({
            "archetype": name,
            "role": kit.role,
            "hp_max": kit.hp_max,
            "moves": [
                {"move_id": m.move_id, "name": m.name, "cue": m.cue, "kind": m.kind, "targeting": m.targeting}
                for m in kit.moves
            ],
            "silhouette_ids": list(SILHOUETTES.get(name, {})),
        })
    return jsonify({"archetypes": archetypes, "elements": list(ELEMENTS), "rarities": list(RARITIES)})


@ladder_bp.route("/v1/creature", methods=["POST"])
def creature():
    raw = request.get_json(silent=True)
    if raw is None:
        spec = fallback_creature_spec()
    else:
        try:
            spec = normalize_creature_spec(raw)
        except ValueError as exc:
            return _reject(BattleRequestError("invalid_body", {"formErrors": [str(exc)], "fieldErrors": {}}))
    return jsonify({"creature": build_creature(spec)})


@ladder_bp.route("/v1/ladder/battle", methods=["POST"])
def ladder_battle():
    if _settings().require_device_id:
        device_id = (request.headers.get("X-Device-Id") or "").strip()
        if not device_id:
            return _reject(BattleRequestError("missing_x_device_id"))

    try:
        result = ladder.run_ladder_battle(request.get_json(silent=True))
    except BattleRequestError as exc:
        return _reject(exc)

    LOGGER.debug("ladder battle %s served: winner=%s end_turn=%s", result.battle_id, result.winner, result.end_turn)
    return jsonify(result.as_dict())
