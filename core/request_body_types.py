"""
core/request_body_types.py
──────────────────────────
Classificação do corpo de uma requisição HTTP a partir do header Content-Type.

Responde "esta requisição carrega JSON / XML / formulário?" sem nunca ler o
corpo. O objeto ``request`` precisa apenas expor ``headers.get(...)``
(``flask.Request`` / ``werkzeug.wrappers.Request``).

Design Decisions
────────────────
1. Falha apenas por uso incorreto:
   ``request`` None lança ``InvalidArgumentError``. Qualquer conteúdo de
   header (ausente, vazio, malformado, desconhecido) resulta em ``False``.
   O header é controlado pelo cliente e nunca deve derrubar a requisição.

2. Regras de sufixo restritas a ``application/*``:
   RFC 3023 e RFC 6839 permitem ``*/*+json`` e ``*/*+xml``, mas o registro
   da IANA mostra praticamente todos os registros ``+json`` / ``+xml`` sob
   ``application/`` e nenhum ``+xml`` sob ``text/``. Por isso
   ``text/hal+json`` e ``text/rdf+xml`` NÃO são aceitos.

3. Sufixo por comparação literal:
   ``str.endswith`` sobre o subtipo já normalizado, sem regex, para evitar
   casamentos parciais.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from core.constants import (
    APPLICATION_FORM_URLENCODED,
    APPLICATION_JSON,
    APPLICATION_TYPE,
    APPLICATION_XML,
    CONTENT_TYPE_HEADER,
    JSON_SUFFIX,
    MULTIPART_FORM_DATA,
    TEXT_JSON,
    TEXT_XML,
    XML_SUFFIX,
    WebHookBodyType,
)
from core.exceptions import InvalidArgumentError
from core.media_type import MediaType
from internalloggin.logger import setup_logger

logger = setup_logger(__name__)


def _content_type(request: Any) -> Optional[MediaType]:
    """Extrai e interpreta o Content-Type; None se ausente ou malformado."""
    if request is None:
        raise InvalidArgumentError("request não pode ser None.")

    raw = request.headers.get(CONTENT_TYPE_HEADER)
    if raw is None or not raw.strip():
        return None

    media_type = MediaType.try_parse(raw)
    if media_type is None:
        logger.debug("Content-Type malformado ignorado: %r", raw)
    return media_type


def _has_application_suffix(media_type: MediaType, suffix: str) -> bool:
    return media_type.type == APPLICATION_TYPE and media_type.subtype.endswith(suffix)


def is_json(request: Any) -> bool:
    """
    True se o Content-Type for ``application/json``, ``text/json`` ou
    ``application/xyz+json`` (ex: ``application/hal+json``).

    Raises:
        InvalidArgumentError: ``request`` é None.
    """
    media_type = _content_type(request)
    if media_type is None:
        return False

    if media_type.is_subset_of(APPLICATION_JSON) or media_type.is_subset_of(TEXT_JSON):
        return True

    return _has_application_suffix(media_type, JSON_SUFFIX)


def is_xml(request: Any) -> bool:
    """
    True se o Content-Type for ``application/xml``, ``text/xml`` ou
    ``application/xyz+xml`` (ex: ``application/rdf+xml``).

    Raises:
        InvalidArgumentError: ``request`` é None.
    """
    media_type = _content_type(request)
    if media_type is None:
        return False

    if media_type.is_subset_of(APPLICATION_XML) or media_type.is_subset_of(TEXT_XML):
        return True

    return _has_application_suffix(media_type, XML_SUFFIX)


def is_form(request: Any) -> bool:
    """True para ``application/x-www-form-urlencoded`` ou ``multipart/form-data``."""
    media_type = _content_type(request)
    if media_type is None:
        return False

    return media_type.is_subset_of(APPLICATION_FORM_URLENCODED) or media_type.is_subset_of(
        MULTIPART_FORM_DATA
    )


_CHECKS = {
    WebHookBodyType.FORM: is_form,
    WebHookBodyType.JSON: is_json,
    WebHookBodyType.XML: is_xml,
}


def matches_body_type(request: Any, body_type: Union[WebHookBodyType, str]) -> bool:
    """
    Verifica se a requisição carrega o tipo de corpo indicado.

    Raises:
        InvalidArgumentError: ``request`` é None.
        ValueError: ``body_type`` desconhecido.
    """
    if request is None:
        raise InvalidArgumentError("request não pode ser None.")

    if not isinstance(body_type, WebHookBodyType):
        body_type = WebHookBodyType(str(body_type).strip().lower())

    return _CHECKS[body_type](request)
