# scanlings/app.py
from __future__ import annotations

import logging
from typing import Optional, Tuple

from flask import Flask
from flask_socketio import SocketIO

from . import init_ladder
from .config import Settings, configure_logging

LOGGER = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> Tuple[Flask, SocketIO]:
    settings = settings or Settings.from_env()
    app = Flask(__name__)
    app.config["SCANLINGS_SETTINGS"] = settings
    socketio = SocketIO(app, cors_allowed_origins="*")
    init_ladder(app, socketio)
    return app, socketio


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    app, socketio = create_app(settings)
    LOGGER.info("listening on %s:%s", settings.host, settings.port)
    socketio.run(app, host=settings.host, port=settings.port, allow_unsafe_werkzeug=True)


if __name__ == "__main__":
    main()
