"""
Atlas Catalog — fachada unificada de catálogos de configuração.

Um catálogo é o conjunto compilado de declarações de recursos gerenciados
("o arquivo X deve ter este conteúdo", "o serviço Y deve estar rodando")
para um nó. O Atlas Catalog oferece uma única representação consultável
desse catálogo, independentemente do backend que o produziu: compilação
local, JSON, datastore, compilador remoto ou placeholder vazio.

Uso típico:

    from atlas_catalog import Catalog

    catalog = Catalog({"json": raw_json})
    if catalog.valid:
        catalog.resource("File", "/etc/hosts")
    else:
        print(catalog.error_message)
"""

import logging

from .core.backends import UNSUPPORTED
from .core.catalog import Catalog, CatalogSummary
from .core.config import CatalogOptions, load_options
from .core.exceptions import (
    CatalogError,
    CatalogException,
    CatalogShapeError,
    InvalidArgumentError,
    UnknownBackendError,
)
from .core.parallel import build_catalogs
from .core.selector import BackendKind, select_backend

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "UNSUPPORTED",
    "BackendKind",
    "Catalog",
    "CatalogError",
    "CatalogException",
    "CatalogOptions",
    "CatalogShapeError",
    "CatalogSummary",
    "InvalidArgumentError",
    "UnknownBackendError",
    "build_catalogs",
    "load_options",
    "select_backend",
]
