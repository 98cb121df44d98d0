"""
api/__init__.py
App Factory do HookGate_FLS (Flask).

Uso:
    from api import create_app
    app = create_app()
"""

from flask import Flask, redirect, url_for

from api.blueprints.health import health_bp
from api.blueprints.webhooks import webhooks_bp
from api.config import DevelopmentConfig


def create_app(config_class=DevelopmentConfig) -> Flask:
    """Cria e configura a instância Flask."""

    app = Flask(__name__)

    app.config.from_object(config_class)

    # ── Blueprints ────────────────────────────────────
    app.register_blueprint(
        webhooks_bp, url_prefix="/webhooks"
    )
    app.register_blueprint(
        health_bp, url_prefix="/health"
    )

    # ── Rota raiz ─────────────────────────────────────
    @app.get("/")
    def index():
        return redirect(url_for("health.ping"))

    return app
