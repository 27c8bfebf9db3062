# scanlings/sockets.py
from flask_socketio import emit

from . import ladder
from .validation import BattleRequestError


def register_ladder_socket_handlers(socketio):
    @socketio.on("ladder_battle")
    def ladder_battle(payload=None):
        try:
            result = ladder.run_ladder_battle(payload)
        except BattleRequestError as exc:
            emit("ladder_error", exc.as_payload())
            return
        emit("ladder_result", result.as_dict())
