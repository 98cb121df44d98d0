"""
core/media_type.py
──────────────────
Representação estruturada de um media type HTTP (``type/subtype; params``).

O parsing do texto bruto do header é delegado ao Werkzeug
(``werkzeug.http.parse_options_header``); este módulo valida o resultado,
normaliza a caixa e implementa a relação *subset-of* usada pelo classificador
de corpo de requisição (``core/request_body_types.py``).

Design Decisions
────────────────
1. ``MediaType`` como Pydantic BaseModel congelado:
   Instâncias são imutáveis e hasheáveis, podendo ser usadas como constantes
   de módulo compartilhadas entre threads sem sincronização.

2. Normalização na validação:
   ``type``, ``subtype`` e nomes de parâmetros são convertidos para
   minúsculas (RFC 9110 §8.3.1: comparação case-insensitive). Valores de
   parâmetros são preservados como recebidos.

3. Relação subset-of:
   ``A.is_subset_of(B)`` é verdadeiro quando A é igual ou mais específico que
   B. O lado B (o "conjunto") pode conter curingas::

       */*            → aceita qualquer tipo
       application/*  → aceita qualquer subtipo de application
       application/*+json → aceita qualquer subtipo com sufixo +json

   Todo parâmetro de B (exceto ``q``) precisa existir em A com o mesmo valor.
   Parâmetros extras em A são permitidos: ``application/json; charset=utf-8``
   é subconjunto de ``application/json``.

4. Sufixos estruturados (RFC 6839):
   O sufixo é o texto após o **último** ``+`` do subtipo, comparado por
   igualdade literal, nunca por expressão regular.
"""

from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from werkzeug.http import parse_options_header

from core.exceptions import InvalidMediaTypeError

# token = 1*tchar (RFC 9110 §5.6.2)
_TOKEN_RE = re.compile(r"^[!#$%&'*+.^_`|~0-9A-Za-z-]+$")

WILDCARD = "*"

# Parâmetros ignorados na comparação subset-of
_IGNORED_PARAMETERS: frozenset[str] = frozenset({"q"})


class MediaType(BaseModel):
    """
    Media type imutável no formato ``type/subtype`` com parâmetros opcionais.

    Exemplos:

        MediaType.parse("application/hal+json; charset=UTF-8")
        # → type="application", subtype="hal+json", parameters={"charset": "UTF-8"}

        MediaType(type="text", subtype="xml")
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    type: str = Field(..., description="Tipo de topo (ex: 'application').")
    subtype: str = Field(..., description="Subtipo, incluindo sufixo (ex: 'hal+json').")
    parameters: dict[str, str] = Field(
        default_factory=dict,
        description="Parâmetros do media type com nomes em minúsculas.",
    )

    # ── Validadores ───────────────────────────────────────────────────────────

    @field_validator("type", "subtype")
    @classmethod
    def _validate_token(cls, value: str) -> str:
        if not _TOKEN_RE.match(value):
            raise ValueError(f"'{value}' não é um token HTTP válido.")
        return value.lower()

    @field_validator("parameters")
    @classmethod
    def _normalize_parameters(cls, value: dict[str, str]) -> dict[str, str]:
        return {name.strip().lower(): val for name, val in value.items()}

    def __hash__(self) -> int:
        return hash((self.type, self.subtype, tuple(sorted(self.parameters.items()))))

    # ── Construção ────────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, value: str) -> "MediaType":
        """
        Interpreta o valor de um header Content-Type.

        Raises:
            InvalidMediaTypeError: valor vazio, sem ``/`` ou com tokens inválidos.
        """
        if value is None or not value.strip():
            raise InvalidMediaTypeError("Content-Type vazio.")

        essence, params = parse_options_header(value)
        type_, sep, subtype = essence.partition("/")
        if not sep:
            raise InvalidMediaTypeError(f"Content-Type sem '/': {value!r}")

        try:
            return cls(type=type_, subtype=subtype, parameters=params)
        except ValidationError as exc:
            raise InvalidMediaTypeError(f"Content-Type inválido: {value!r}") from exc

    @classmethod
    def try_parse(cls, value: Optional[str]) -> Optional["MediaType"]:
        """Como ``parse``, mas retorna None em vez de lançar exceção."""
        if value is None:
            return None
        try:
            return cls.parse(value)
        except InvalidMediaTypeError:
            return None

    # ── Propriedades derivadas ────────────────────────────────────────────────

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"

    @property
    def suffix(self) -> Optional[str]:
        """Sufixo estruturado (ex: ``json`` em ``hal+json``), ou None."""
        base, sep, suffix = self.subtype.rpartition("+")
        if not sep or not base or not suffix:
            return None
        return suffix

    @property
    def subtype_without_suffix(self) -> str:
        if self.suffix is None:
            return self.subtype
        return self.subtype.rpartition("+")[0]

    @property
    def matches_all_types(self) -> bool:
        return self.type == WILDCARD

    @property
    def matches_all_subtypes(self) -> bool:
        return self.subtype == WILDCARD

    # ── Comparação ────────────────────────────────────────────────────────────

    def is_subset_of(self, other: "MediaType") -> bool:
        """True se este media type é igual ou mais específico que ``other``."""
        return (
            self._matches_type(other)
            and self._matches_subtype(other)
            and self._matches_parameters(other)
        )

    def _matches_type(self, other: "MediaType") -> bool:
        return other.matches_all_types or other.type == self.type

    def _matches_subtype(self, other: "MediaType") -> bool:
        if other.matches_all_subtypes:
            return True

        if other.suffix is not None and other.subtype_without_suffix == WILDCARD:
            # application/*+json
            return self.suffix == other.suffix

        return other.subtype == self.subtype

    def _matches_parameters(self, other: "MediaType") -> bool:
        for name, value in other.parameters.items():
            if name in _IGNORED_PARAMETERS:
                continue
            local = self.parameters.get(name)
            if local is None or local.lower() != value.lower():
                return False
        return True

    def __str__(self) -> str:
        params = "".join(f"; {name}={val}" for name, val in self.parameters.items())
        return f"{self.essence}{params}"
