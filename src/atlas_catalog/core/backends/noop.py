"""Backend `noop`: placeholder vazio, usado quando nenhum catálogo é necessário."""

from __future__ import annotations

from atlas_catalog.core.config.options import CatalogOptions

from .base import BaseBackend


EMPTY_CATALOG_JSON = '{"resources": []}'


class NoopBackend(BaseBackend):
    """Catálogo válido e sem recursos, disponível desde a construção."""


    def __init__(self, options: CatalogOptions) -> None:
        super().__init__(options)
        self._catalog = {"resources": []}
        self._catalog_json = EMPTY_CATALOG_JSON
