"""Backend `json`: catálogo fornecido pronto, como texto JSON ou documento."""

from __future__ import annotations

from typing import Optional

from atlas_catalog.core.config.options import CatalogOptions

from .base import BaseBackend, decode_catalog_document


class JsonBackend(BaseBackend):
    """
    Catálogo pré-construído a partir de `options.json`.

    O parse ocorre no construtor; falha de parse vira `error_message`.
    Quando `options.node` não é informado, o nó é lido do campo `name` do
    catálogo (ou `data.name`, no formato com envelope).
    """

    def __init__(self, options: CatalogOptions) -> None:
        super().__init__(options)
        self.node: Optional[str] = options.node

        try:
            document, serialized = decode_catalog_document(options.json)
        except ValueError as e:
            self._set_failure(f"Catalog JSON input failed to parse: {e}")
            return

        self._catalog = document
        self._catalog_json = serialized

        if self.node is None:
            data = document.get("data")
            name = data.get("name") if isinstance(data, dict) else document.get("name")
            if isinstance(name, str):
                self.node = name
