import logging

from flask import Flask

from .config import Config
from .errors import register_error_handlers
from .extensions import cors, init_store
from .routes import diagnostics_bp, posts_bp, users_bp
from .store import Store

logger = logging.getLogger("demo_api")


def create_app(config_class: type = Config, store: Store = None) -> Flask:
    # Static files are served from the site root, so /index.html works too
    app = Flask(__name__, static_folder="static", static_url_path="")
    app.config.from_object(config_class)
    app.json.sort_keys = False

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    origins = [o.strip() for o in app.config["CORS_ALLOWED_ORIGINS"].split(",") if o.strip()]
    cors.init_app(app, origins=origins or "*")

    init_store(app, store)

    app.register_blueprint(users_bp)
    app.register_blueprint(posts_bp)
    app.register_blueprint(diagnostics_bp)
    register_error_handlers(app)

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    return app


__all__ = ["create_app", "Config", "Store"]
