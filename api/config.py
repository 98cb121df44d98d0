"""
api/config.py
Classes de configuração Flask por ambiente.

A classe ativa é selecionada ao chamar create_app(config_class=...).
"""

from __future__ import annotations

import os
from typing import Optional

from core.constants import WebHookBodyType

# Receivers habilitados quando HOOKGATE_RECEIVERS não está definida
DEFAULT_RECEIVERS: dict[str, WebHookBodyType] = {
    "github": WebHookBodyType.JSON,
    "azurealert": WebHookBodyType.JSON,
    "salesforce": WebHookBodyType.XML,
    "slack": WebHookBodyType.FORM,
}


def parse_receivers(raw: Optional[str]) -> dict[str, WebHookBodyType]:
    """
    Converte ``"github:json,salesforce:xml"`` em ``{receiver: WebHookBodyType}``.

    Raises:
        ValueError: entrada sem ``:`` ou com tipo de corpo desconhecido.
    """
    if raw is None or not raw.strip():
        return dict(DEFAULT_RECEIVERS)

    receivers: dict[str, WebHookBodyType] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        name, sep, body_type = entry.partition(":")
        if not sep or not name.strip():
            raise ValueError(f"Entrada de receiver inválida: '{entry}'")
        receivers[name.strip().lower()] = WebHookBodyType(body_type.strip().lower())
    return receivers


class BaseConfig:
    # ── Segurança ─────────────────────────────────────────────────────────────
    SECRET_KEY: str = os.getenv("FLASK_SECRET_KEY", "dev-secret-change-in-prod")

    # ── Receivers de webhook ──────────────────────────────────────────────────
    WEBHOOK_RECEIVERS: dict[str, WebHookBodyType] = parse_receivers(
        os.getenv("HOOKGATE_RECEIVERS")
    )
    DEFAULT_HOOK_ID: str = "default"


class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True
    TESTING: bool = False


class ProductionConfig(BaseConfig):
    DEBUG: bool = False
    TESTING: bool = False


class TestingConfig(BaseConfig):
    TESTING: bool = True
    WEBHOOK_RECEIVERS: dict[str, WebHookBodyType] = dict(DEFAULT_RECEIVERS)
