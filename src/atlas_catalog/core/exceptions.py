"""
Atlas Catalog — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do Atlas Catalog.

Existem dois estilos de sinalização de falha, e a distinção é intencional:

- **Uso incorreto da fachada** (backend desconhecido, argumentos ausentes,
  catálogo consultado antes de ser construído): sempre via exceção tipada,
  falhando cedo e de forma explícita.
- **Falha operacional do backend** (compilação falhou, fetch falhou): nunca
  via exceção. O backend devolve `catalog=None` e um `error_message`
  descritivo, e o chamador inspeciona `valid` / `error_message`.

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- A mensagem deve ser curta e humana.
- Instâncias não são congeladas: o interpretador e `contextlib` atribuem
  `__traceback__` durante a propagação. `eq=False` mantém igualdade e hash
  por identidade, como em `Exception`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(eq=False)
class CatalogException(Exception):
    """Base class para exceções internas do Atlas Catalog."""

    message: str
    details: Dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Seleção de backend
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class UnknownBackendError(CatalogException):
    """Nome de backend explícito não corresponde a nenhuma variante conhecida."""


@dataclass(eq=False)
class DuplicateBackendError(CatalogException):
    """Tentativa de registrar duas classes para o mesmo `BackendKind`."""


# ---------------------------------------------------------------------------
# Uso da fachada
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidArgumentError(CatalogException):
    """Argumento obrigatório ausente ou de tipo inválido no ponto de chamada."""


@dataclass(eq=False)
class CatalogError(CatalogException):
    """
    Catálogo indisponível para consulta.

    Levantada por `Catalog.resources()` quando o catálogo ainda não foi
    construído, ou foi construído mas é inválido (a mensagem é o
    `error_message` armazenado).
    """


@dataclass(eq=False)
class CatalogShapeError(CatalogError):
    """
    Violação de invariante interna: o catálogo normalizado não possui
    `data.resources` nem `resources` como lista.

    Não é erro do usuário. Indica defeito no backend ou na normalização e
    deve ser registrado como tal.
    """
