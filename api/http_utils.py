"""
api/http_utils.py
Utilitários HTTP exclusivos da camada web Flask.
"""

from __future__ import annotations

from flask import Request, current_app, jsonify

from core.constants import CONTENT_TYPE_HEADER, WebHookBodyType
from core.exceptions import UnknownReceiverError


def receiver_body_type(receiver: str) -> WebHookBodyType:
    """
    Tipo de corpo configurado para o receiver.

    Raises:
        UnknownReceiverError: receiver ausente de WEBHOOK_RECEIVERS.
    """
    receivers = current_app.config.get("WEBHOOK_RECEIVERS", {})
    try:
        return WebHookBodyType(receivers[receiver.lower()])
    except KeyError:
        raise UnknownReceiverError(receiver) from None


def unknown_receiver(exc: UnknownReceiverError):
    """Resposta 404 para receiver não configurado."""
    return jsonify(error=str(exc), receiver=exc.receiver), 404


def unsupported_media_type(request: Request, receiver: str, body_type: WebHookBodyType):
    """Resposta 415 quando o Content-Type não corresponde ao esperado."""
    return (
        jsonify(
            error=(
                f"O receiver '{receiver}' aceita apenas corpo do tipo "
                f"'{body_type.value}'."
            ),
            receiver=receiver,
            expected_body_type=body_type.value,
            content_type=request.headers.get(CONTENT_TYPE_HEADER),
        ),
        415,
    )
