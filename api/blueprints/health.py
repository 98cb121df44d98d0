"""
api/blueprints/health.py
Blueprint de saúde do serviço.

Endpoints:
    GET /health/ping      — liveness check
    GET /health/receivers — receivers configurados e tipo de corpo aceito
"""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health", __name__)


@health_bp.get("/ping")
def ping():
    return jsonify(status="ok")


@health_bp.get("/receivers")
def receivers():
    """Mapeamento receiver → tipo de corpo."""
    configured = current_app.config.get("WEBHOOK_RECEIVERS", {})
    return jsonify(
        {name: str(getattr(body_type, "value", body_type)) for name, body_type in configured.items()}
    )
