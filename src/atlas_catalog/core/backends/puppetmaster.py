"""Backend `puppetmaster`: catálogo compilado por um compilador remoto."""

from __future__ import annotations

import logging
from typing import Any, Optional

from atlas_catalog.core.config.options import CatalogOptions

from .base import UNSUPPORTED
from .remote import RemoteFetchBackend


class PuppetMasterBackend(RemoteFetchBackend):
    """Busca no compilador remoto via `options.puppet_master`, com retry."""

    reference_option = "puppet_master"
    source_label = "Puppet master"

    def __init__(self, options: CatalogOptions) -> None:
        super().__init__(options)
        self._retries: Optional[int] = None

    def build(self, logger: logging.Logger) -> None:
        self._retries = self._fetch(logger)

    def retries(self) -> Optional[int]:
        return self._retries

    def puppet_version(self) -> Any:
        version = getattr(self._fetcher(), "version", None)
        if not callable(version):
            return UNSUPPORTED
        return version()
