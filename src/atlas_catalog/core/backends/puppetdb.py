"""Backend `puppetdb`: catálogo buscado no datastore de catálogos compilados."""

from __future__ import annotations

import logging

from .remote import RemoteFetchBackend


class PuppetDBBackend(RemoteFetchBackend):
    """
    Busca no datastore via `options.puppetdb`.

    Catálogos armazenados não trazem a árvore de código-fonte, então a
    conversão de recursos File é declarada como não suportada.
    """

    reference_option = "puppetdb"
    source_label = "PuppetDB"

    def build(self, logger: logging.Logger) -> None:
        self._fetch(logger)

    def convert_file_resources(self) -> bool:
        return False
