"""
api/blueprints/webhooks.py
Blueprint de recepção de webhooks.

Endpoints:
    POST /webhooks/incoming/<receiver>            — id "default"
    POST /webhooks/incoming/<receiver>/<hook_id>

Cada receiver aceita um único tipo de corpo (form / json / xml), definido em
WEBHOOK_RECEIVERS. Requisições com Content-Type incompatível recebem 415.
O corpo nunca é lido nesta camada.
"""

from __future__ import annotations

from typing import Optional

from flask import Blueprint, current_app, jsonify, request

from api.http_utils import (
    receiver_body_type,
    unknown_receiver,
    unsupported_media_type,
)
from core.constants import CONTENT_TYPE_HEADER
from core.exceptions import UnknownReceiverError
from core.request_body_types import matches_body_type
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)

webhooks_bp = Blueprint("webhooks", __name__)


@webhooks_bp.errorhandler(UnknownReceiverError)
def _handle_unknown_receiver(exc: UnknownReceiverError):
    logger.warning("Webhook para receiver desconhecido: %s", exc.receiver)
    return unknown_receiver(exc)


# ── Rotas ────────────────────────────────────────────


@webhooks_bp.post("/incoming/<receiver>")
@webhooks_bp.post("/incoming/<receiver>/<hook_id>")
def incoming(receiver: str, hook_id: Optional[str] = None):
    """Valida o tipo de corpo e confirma o recebimento do webhook."""
    hook_id = hook_id or current_app.config.get("DEFAULT_HOOK_ID", "default")
    body_type = receiver_body_type(receiver)

    if not matches_body_type(request, body_type):
        logger.warning(
            "[%s/%s] Content-Type %r rejeitado; esperado corpo '%s'.",
            receiver, hook_id, request.headers.get(CONTENT_TYPE_HEADER), body_type.value,
        )
        return unsupported_media_type(request, receiver, body_type)

    logger.info("[%s/%s] Webhook aceito (%s).", receiver, hook_id, body_type.value)
    return jsonify(
        status="accepted",
        receiver=receiver,
        id=hook_id,
        body_type=body_type.value,
    )
