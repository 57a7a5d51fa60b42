"""
Seleção determinística de backend de catálogo.

A seleção é uma cadeia fixa de prioridade, não uma busca pelo melhor
candidato: a primeira condição satisfeita decide e as seguintes nunca são
consultadas.

    1. `backend` explícito     → variante correspondente (ou UnknownBackendError)
    2. `json` presente         → JSON
    3. `puppetdb` presente     → PUPPETDB
    4. `puppet_master` presente → PUPPETMASTER
    5. caso contrário          → COMPUTED

Intenção explícita do operador (1) sempre prevalece sobre intenção inferida
pelo formato das opções (2-4). O default (5) é o caminho que executa
trabalho real e nunca vence silenciosamente quando existe indicação de um
caminho mais barato.

Componentes:
    - BackendKind      → enum das cinco variantes
    - select_backend   → função pura options → BackendKind
    - BackendRegistry  → associação BackendKind → classe de backend
    - create_backend   → seleção + instanciação
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Type

from .backends import (
    ComputedBackend,
    JsonBackend,
    NoopBackend,
    PuppetDBBackend,
    PuppetMasterBackend,
)
from .config.options import CatalogOptions
from .exceptions import DuplicateBackendError, UnknownBackendError


class BackendKind(str, Enum):
    """Variantes de backend. Os valores são os nomes aceitos em `backend`."""

    JSON = "json"
    PUPPETDB = "puppetdb"
    PUPPETMASTER = "puppetmaster"
    COMPUTED = "computed"
    NOOP = "noop"


_NAME_ALIASES: Dict[str, BackendKind] = {
    "datastore": BackendKind.PUPPETDB,
    "remote-compiler": BackendKind.PUPPETMASTER,
    "remote_compiler": BackendKind.PUPPETMASTER,
    "puppet_master": BackendKind.PUPPETMASTER,
}


def _present(value: Any) -> bool:
    return value is not None and value is not False and value != ""


def backend_kind_from_name(name: str) -> BackendKind:
    """
    Resolve o nome explícito de backend.

    Raises:
        UnknownBackendError: se o nome não corresponder a nenhuma variante.
    """
    normalized = str(name).strip().lower().lstrip(":")
    try:
        return BackendKind(normalized)
    except ValueError:
        pass
    if normalized in _NAME_ALIASES:
        return _NAME_ALIASES[normalized]
    raise UnknownBackendError(
        f"Unknown backend :{name}",
        details={"backend": name, "supported": [k.value for k in BackendKind]},
    )


def select_backend(options: CatalogOptions) -> BackendKind:
    if _present(options.backend):
        return backend_kind_from_name(options.backend)
    if _present(options.json):
        return BackendKind.JSON
    if _present(options.puppetdb):
        return BackendKind.PUPPETDB
    if _present(options.puppet_master):
        return BackendKind.PUPPETMASTER
    return BackendKind.COMPUTED


@dataclass
class BackendRegistry:
    """
    Registro de classes de backend por `BackendKind`.

    Invariantes:
        - Cada `BackendKind` possui no máximo uma classe registrada
        - A ordem de registro é preservada
    """

    _classes: Dict[BackendKind, Type[Any]] = field(default_factory=dict, init=False, repr=False)
    _order: List[BackendKind] = field(default_factory=list, init=False, repr=False)

    def add(self, kind: BackendKind, backend_cls: Type[Any]) -> None:
        if not isinstance(kind, BackendKind):
            raise ValueError("kind must be a BackendKind")

        if kind in self._classes:
            raise DuplicateBackendError(f"Duplicate backend kind: {kind.value}")

        self._classes[kind] = backend_cls
        self._order.append(kind)

    def get(self, kind: BackendKind) -> Type[Any]:
        if kind not in self._classes:
            raise UnknownBackendError(f"No backend registered for :{kind.value}")
        return self._classes[kind]

    def kinds(self) -> List[BackendKind]:
        return list(self._order)


def default_registry() -> BackendRegistry:
    registry = BackendRegistry()
    registry.add(BackendKind.JSON, JsonBackend)
    registry.add(BackendKind.PUPPETDB, PuppetDBBackend)
    registry.add(BackendKind.PUPPETMASTER, PuppetMasterBackend)
    registry.add(BackendKind.COMPUTED, ComputedBackend)
    registry.add(BackendKind.NOOP, NoopBackend)
    return registry


def create_backend(options: CatalogOptions, registry: Optional[BackendRegistry] = None) -> Any:
    """Seleciona a variante para `options` e a instancia."""
    registry = registry or default_registry()
    return registry.get(select_backend(options))(options)
