"""
core/constants.py
Constantes de domínio do HookGate_FLS.

Single source of truth para os media types de referência usados pelo
classificador de corpo de requisição e para os tipos de corpo aceitos
pelos receivers de webhook.
"""

from __future__ import annotations

from enum import Enum

from core.media_type import MediaType


class WebHookBodyType(str, Enum):
    """
    Tipo de corpo esperado por um receiver de webhook.

    Usar str como mixin mantém o valor serializável em JSON ("json") e
    permite comparar diretamente com strings de configuração.
    """

    FORM = "form"
    JSON = "json"
    XML = "xml"


# ── Header inspecionado ──────────────────────────────────────
CONTENT_TYPE_HEADER: str = "Content-Type"

# ── Tipo de topo aceito pelas regras de sufixo ───────────────
APPLICATION_TYPE: str = "application"

# ── JSON ─────────────────────────────────────────────────────
APPLICATION_JSON: MediaType = MediaType(type="application", subtype="json")
TEXT_JSON: MediaType = MediaType(type="text", subtype="json")
JSON_SUFFIX: str = "+json"

# ── XML ──────────────────────────────────────────────────────
APPLICATION_XML: MediaType = MediaType(type="application", subtype="xml")
TEXT_XML: MediaType = MediaType(type="text", subtype="xml")
XML_SUFFIX: str = "+xml"

# ── Formulários HTML ─────────────────────────────────────────
APPLICATION_FORM_URLENCODED: MediaType = MediaType(
    type="application", subtype="x-www-form-urlencoded"
)
MULTIPART_FORM_DATA: MediaType = MediaType(type="multipart", subtype="form-data")
