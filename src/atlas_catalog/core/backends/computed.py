"""
Backend `computed`: compila o catálogo a partir das definições locais.

É a variante default da seleção. O compilador em si é um colaborador
externo (`CatalogCompiler`) injetado via `options.compiler`; este backend
apenas orquestra tentativas, normaliza o resultado e reporta metadados
(diretório de compilação, versão, tentativas extras).
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from atlas_catalog.core.config.options import CatalogOptions

from .base import UNSUPPORTED, BaseBackend
from .collaborators import CatalogCompileFailure


class ComputedBackend(BaseBackend):
    """Compilação local sob demanda, com retry configurável."""


    def __init__(self, options: CatalogOptions) -> None:
        super().__init__(options)
        self._retries: Optional[int] = None

    def build(self, logger: logging.Logger) -> None:
        compiler = self.options.compiler
        node = self.options.node

        if compiler is None:
            self._set_failure("No catalog compiler configured for the computed backend")
            return
        if not node:
            self._set_failure("A node name is required to compile a catalog")
            return

        logger.debug("Compiling catalog for node %s in %s", node, self.options.basedir)

        raw, failure, retries = self._run_with_retries(
            lambda: compiler.compile(node=node, basedir=self.options.basedir, logger=logger),
            CatalogCompileFailure,
            logger,
        )
        self._retries = retries

        if failure is not None:
            self._set_failure(str(failure) or "Catalog compilation failed")
            return

        self._set_result(raw)

    def compilation_dir(self) -> Any:
        value = getattr(self.options.compiler, "compilation_dir", None)
        return value if value is not None else UNSUPPORTED

    def retries(self) -> Optional[int]:
        return self._retries

    def puppet_version(self) -> Any:
        version = getattr(self.options.compiler, "version", None)
        if not callable(version):
            return UNSUPPORTED
        return version()
