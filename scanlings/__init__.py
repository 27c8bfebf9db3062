# scanlings/__init__.py
from .routes import ladder_bp
from .sockets import register_ladder_socket_handlers


def init_ladder(app, socketio):
    app.register_blueprint(ladder_bp)
    register_ladder_socket_handlers(socketio)
