"""
core/
Núcleo do HookGate_FLS.

Contém:
- media_type.py          : Media type estruturado e relação subset-of.
- request_body_types.py  : Classificação JSON / XML / formulário via Content-Type.
- constants.py           : Media types de referência e WebHookBodyType.
- exceptions.py          : Hierarquia de exceções do projeto.
"""

from .constants import WebHookBodyType
from .exceptions import (
    HookGateError,
    InvalidArgumentError,
    InvalidMediaTypeError,
    UnknownReceiverError,
)
from .media_type import MediaType
from .request_body_types import is_form, is_json, is_xml, matches_body_type

__all__ = [
    "HookGateError",
    "InvalidArgumentError",
    "InvalidMediaTypeError",
    "MediaType",
    "UnknownReceiverError",
    "WebHookBodyType",
    "is_form",
    "is_json",
    "is_xml",
    "matches_body_type",
]
