"""
Variantes de backend de catálogo.

- base          → `CatalogSource`, `BaseBackend`, sentinel `UNSUPPORTED`
- collaborators → protocolos de compilador e fetcher externos
- computed      → compilação local (default da seleção)
- json_catalog  → catálogo fornecido como JSON
- puppetdb      → busca no datastore
- puppetmaster  → busca no compilador remoto
- noop          → placeholder vazio
"""

from .base import UNSUPPORTED, BaseBackend, CatalogSource, capability
from .collaborators import (
    CatalogCompileFailure,
    CatalogCompiler,
    CatalogFetcher,
    CatalogFetchError,
)
from .computed import ComputedBackend
from .json_catalog import JsonBackend
from .noop import NoopBackend
from .puppetdb import PuppetDBBackend
from .puppetmaster import PuppetMasterBackend

__all__ = [
    "UNSUPPORTED",
    "BaseBackend",
    "CatalogCompileFailure",
    "CatalogCompiler",
    "CatalogFetchError",
    "CatalogFetcher",
    "CatalogSource",
    "ComputedBackend",
    "JsonBackend",
    "NoopBackend",
    "PuppetDBBackend",
    "PuppetMasterBackend",
    "capability",
]
