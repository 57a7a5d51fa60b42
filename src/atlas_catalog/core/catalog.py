"""
Fachada canônica de catálogo do Atlas Catalog.

`Catalog` representa um conjunto compilado de declarações de recursos
gerenciados para um nó, independentemente do backend que o produziu.

Ciclo de vida (máquina de estados):
    Unbuilt → Built (terminal, nunca reverte)

    - `build(logger)` é idempotente: após a primeira chamada, é no-op.
    - O estado passa a Built *antes* de qualquer trabalho, de modo que uma
      chamada reentrante não duplica a construção.
    - Backends sem construção sob demanda (JSON, noop) já possuem o
      resultado ao fim do próprio construtor; nesse caso a fachada
      normaliza imediatamente, e chamar `build` depois é seguro.

Validade:
    `valid` é verdadeiro se e somente se `catalog` não é None. É a única
    fonte de verdade sobre o sucesso do build; `error_message` sozinho não
    invalida o catálogo.

Sinalização de falhas:
    - uso incorreto da fachada → exceções tipadas (`core.exceptions`)
    - falha operacional do backend → dados (`valid` False + `error_message`)

Concorrência:
    Uma instância não é segura para chamadas concorrentes de `build` a
    partir de múltiplas threads. O logger recebido por `build` não é
    armazenado na fachada nem no backend.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from .backends.base import UNSUPPORTED, capability
from .config.options import CatalogOptions
from .exceptions import CatalogError, CatalogShapeError, InvalidArgumentError
from .hooks import run_post_build_hooks
from .resource_index import ResourceIndex, extract_resources
from .selector import BackendRegistry, create_backend

LOGGER = logging.getLogger(__name__)

MAX_ERROR_MESSAGE_LENGTH = 20_000


def _builds_on_demand(backend: Any) -> bool:
    """Backends sem `build` são pré-construídos: o resultado existe ao fim do construtor."""
    return callable(getattr(backend, "build", None))


@dataclass(frozen=True)
class CatalogSummary:
    """Resumo serializável do resultado de um build, para logs e relatórios."""

    builder: str
    built: bool
    valid: bool
    error_message: Optional[str]
    retries: Optional[int]
    puppet_version: Optional[str]
    compilation_dir: Optional[str]
    resource_count: Optional[int]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class Catalog:
    """
    Catálogo construído por um único backend, selecionado a partir das opções.

    Args:
        options: `CatalogOptions` ou mapeamento equivalente (ver
            `CatalogOptions.from_mapping`).
        registry: registro alternativo de backends (default: as cinco
            variantes embutidas).

    Raises:
        UnknownBackendError: se `backend` explícito não for reconhecido.
        OptionTypeError: se as opções forem inválidas.
    """

    def __init__(
        self,
        options: Union[CatalogOptions, Mapping[str, Any], None] = None,
        *,
        registry: Optional[BackendRegistry] = None,
    ) -> None:
        if options is None:
            options = CatalogOptions()
        elif not isinstance(options, CatalogOptions):
            options = CatalogOptions.from_mapping(options)

        self.options: CatalogOptions = options
        self._backend = create_backend(options, registry)

        self._built = False
        self._catalog: Optional[Dict[str, Any]] = None
        self._catalog_json: Optional[str] = None
        self._error_message: Optional[str] = None
        self._resource_index: Optional[ResourceIndex] = None

        # Sobrepõe o diretório reportado pelo backend (ex.: em testes)
        self._override_compilation_dir: Optional[str] = None

        if not _builds_on_demand(self._backend):
            self.build()

    # ------------------------------------------------------------------
    # Build lifecycle
    # ------------------------------------------------------------------
    def build(self, logger: Optional[logging.Logger] = None) -> None:
        """
        Constrói o catálogo uma única vez.

        Exceções levantadas pelo `build` do backend propagam sem modificação.
        """
        if self._built:
            return
        self._built = True

        log = logger or LOGGER

        if _builds_on_demand(self._backend):
            log.debug("Calling build for object %s", self.builder)
            self._backend.build(log)

        self._catalog = self._backend.catalog()
        self._catalog_json = self._backend.catalog_json()
        self._error_message = self._backend.error_message()

        # Recalculado no primeiro lookup
        self._resource_index = None

        if not self.valid:
            log.debug("Catalog build by %s failed: %s", self.builder, self.error_message)
            return

        run_post_build_hooks(self, options=self.options, backend=self._backend, logger=log)

    @property
    def built(self) -> bool:
        return self._built

    @property
    def builder(self) -> str:
        """Nome da classe do backend em uso (para logs)."""
        return type(self._backend).__name__

    @property
    def backend(self) -> Any:
        return self._backend

    @property
    def valid(self) -> bool:
        return self._catalog is not None

    # ------------------------------------------------------------------
    # Normalized state
    # ------------------------------------------------------------------
    @property
    def catalog(self) -> Optional[Dict[str, Any]]:
        return self._catalog

    @property
    def catalog_json(self) -> Optional[str]:
        return self._catalog_json

    @catalog_json.setter
    def catalog_json(self, value: Optional[str]) -> None:
        self._catalog_json = value
        self._resource_index = None

    @property
    def error_message(self) -> Optional[str]:
        """Mensagem de erro, truncada em 20.000 caracteres; None se não houver."""
        if not isinstance(self._error_message, str):
            return None
        return self._error_message[:MAX_ERROR_MESSAGE_LENGTH]

    @error_message.setter
    def error_message(self, error: str) -> None:
        """Define a falha do catálogo; limpa documento, JSON e índice."""
        if not isinstance(error, str):
            raise InvalidArgumentError(
                "Error message must be a string",
                details={"received": type(error).__name__},
            )
        self._error_message = error
        self._catalog = None
        self._catalog_json = None
        self._resource_index = None

    # ------------------------------------------------------------------
    # Backend-reported metadata
    # ------------------------------------------------------------------
    @property
    def compilation_dir(self) -> Optional[str]:
        if self._override_compilation_dir is not None:
            return self._override_compilation_dir
        value = capability(self._backend, "compilation_dir")
        return self.options.basedir if value is UNSUPPORTED else value

    @compilation_dir.setter
    def compilation_dir(self, path: Optional[str]) -> None:
        self._override_compilation_dir = path

    @property
    def puppet_version(self) -> Optional[str]:
        value = capability(self._backend, "puppet_version")
        return self.options.puppet_version if value is UNSUPPORTED else value

    @property
    def retries(self) -> Optional[int]:
        """Tentativas extras de compilação; None quando o backend não suporta retry."""
        value = capability(self._backend, "retries")
        return None if value is UNSUPPORTED else value

    @property
    def convert_file_resources(self) -> bool:
        value = capability(self._backend, "convert_file_resources")
        return True if value is UNSUPPORTED else value

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------
    def resources(self) -> List[Dict[str, Any]]:
        """
        Lista de recursos do catálogo.

        Raises:
            CatalogError: catálogo não construído, ou construído e inválido
                (a mensagem é o `error_message` armazenado).
            CatalogShapeError: catálogo válido sem formato reconhecido (defeito).
        """
        if not self.valid:
            message = self.error_message
            if message is None:
                raise CatalogError("catalog not built", details={"builder": self.builder})
            raise CatalogError(message, details={"builder": self.builder})

        try:
            return extract_resources(self._catalog)
        except CatalogShapeError as e:
            LOGGER.error(
                "Catalog from %s has an unrecognized shape: %s",
                self.builder,
                e.details,
                extra={"defect": True},
            )
            raise

    def resource(self, resource_type: Optional[str] = None, title: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Lookup O(1) de um recurso por tipo e título.

        Returns:
            O recurso, ou None se não existir (inclusive quando não há
            nenhum recurso daquele tipo).

        Raises:
            InvalidArgumentError: se `resource_type` ou `title` estiver ausente.
        """
        if resource_type is None or title is None:
            raise InvalidArgumentError(
                "type and title are required",
                details={"type": resource_type, "title": title},
            )
        if self._resource_index is None:
            self._resource_index = ResourceIndex.from_resources(self.resources())
        return self._resource_index.lookup(resource_type, title)

    def to_summary(self) -> CatalogSummary:
        return CatalogSummary(
            builder=self.builder,
            built=self.built,
            valid=self.valid,
            error_message=self.error_message,
            retries=self.retries,
            puppet_version=self.puppet_version,
            compilation_dir=self.compilation_dir,
            resource_count=self._resource_count(),
        )

    def _resource_count(self) -> Optional[int]:
        if not self.valid:
            return None
        try:
            return len(self.resources())
        except CatalogShapeError:
            # Defeito já registrado por `resources()`
            return None

    def __repr__(self) -> str:
        return f"Catalog(builder={self.builder!r}, built={self._built}, valid={self.valid})"
