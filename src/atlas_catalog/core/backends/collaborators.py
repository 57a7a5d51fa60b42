"""
Colaboradores externos consumidos pelos backends.

O mecanismo real de compilação e o transporte até datastores ou
compiladores remotos não pertencem ao Atlas Catalog. Os backends consomem
apenas estes protocolos, implementados e injetados pelo chamador via
`CatalogOptions.compiler`, `CatalogOptions.puppetdb` e
`CatalogOptions.puppet_master`.

Convenção de falha:
    - falha recuperável → `CatalogCompileFailure` / `CatalogFetchError`
      (convertida pelo backend em `error_message`)
    - qualquer outra exceção propaga até o chamador de `Catalog.build`
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable


class CatalogCompileFailure(Exception):
    """Compilação do catálogo falhou por motivo operacional."""


class CatalogFetchError(Exception):
    """Busca remota do catálogo falhou por motivo operacional."""


@runtime_checkable
class CatalogCompiler(Protocol):
    """
    Compilador local de catálogos.

    `compile` retorna o catálogo como `str` JSON ou `dict`. Compiladores
    podem expor opcionalmente `version()` e o atributo `compilation_dir`.
    """

    def compile(self, *, node: str, basedir: Optional[str], logger: logging.Logger) -> Any:
        ...


@runtime_checkable
class CatalogFetcher(Protocol):
    """
    Cliente de busca de catálogos já compilados (datastore ou compilador remoto).

    `fetch_catalog` retorna o catálogo como `str` JSON ou `dict`.
    """

    def fetch_catalog(self, node: str, *, logger: logging.Logger) -> Any:
        ...
