"""
core/exceptions.py
──────────────────
Hierarquia de exceções do HookGate_FLS.

Todas herdam de ``HookGateError`` e também do tipo nativo equivalente
(``ValueError`` / ``KeyError``), de modo que o chamador pode capturar tanto
pela semântica do projeto quanto pela semântica padrão do Python.
"""


class HookGateError(Exception):
    """Exceção base do HookGate_FLS."""


class InvalidArgumentError(HookGateError, ValueError):
    """Argumento obrigatório ausente (ex: ``request`` é None)."""


class InvalidMediaTypeError(HookGateError, ValueError):
    """Valor de Content-Type não pôde ser interpretado como media type."""


class UnknownReceiverError(HookGateError, KeyError):
    """Receiver de webhook não está configurado."""

    def __init__(self, receiver: str) -> None:
        super().__init__(receiver)
        self.receiver = receiver

    def __str__(self) -> str:
        return f"Receiver '{self.receiver}' não configurado."
