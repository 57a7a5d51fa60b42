"""
Base comum dos backends que buscam catálogos já compilados.

O transporte (HTTP, autenticação, timeouts) pertence ao `CatalogFetcher`
injetado. A referência configurada (`options.puppetdb` ou
`options.puppet_master`) é usada como fetcher quando implementa
`fetch_catalog`; qualquer outro valor (ex.: uma URL) sem fetcher associado
resulta em falha operacional reportada como dado.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from .base import BaseBackend
from .collaborators import CatalogFetcher, CatalogFetchError


class RemoteFetchBackend(BaseBackend):
    """Subclasses definem `reference_option`, o campo de `CatalogOptions` com a referência."""

    reference_option = "puppetdb"
    source_label = "remote source"

    def _reference(self) -> Any:
        return getattr(self.options, self.reference_option)

    def _fetcher(self) -> Optional[CatalogFetcher]:
        ref = self._reference()
        return ref if isinstance(ref, CatalogFetcher) else None

    def _fetch(self, logger: logging.Logger) -> Optional[int]:
        """Busca o catálogo e retorna o número de tentativas extras usadas."""
        fetcher = self._fetcher()
        node = self.options.node

        if fetcher is None:
            self._set_failure(f"No catalog fetcher available for {self.source_label} {self._reference()!r}")
            return None
        if not node:
            self._set_failure(f"A node name is required to fetch a catalog from {self.source_label}")
            return None

        logger.debug("Fetching catalog for node %s from %s", node, self.source_label)

        raw, failure, retries = self._run_with_retries(
            lambda: fetcher.fetch_catalog(node, logger=logger),
            CatalogFetchError,
            logger,
        )

        if failure is not None:
            self._set_failure(str(failure) or f"Failed to fetch catalog from {self.source_label}")
        else:
            self._set_result(raw)

        return retries
