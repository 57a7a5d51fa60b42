"""
Despacho de hooks pós-build.

Hoje existe um único hook: a conversão de conteúdo de recursos File
(`source` → `content`). A conversão em si é um colaborador externo
(`FileResourceConverter`); este módulo decide apenas *se* ela roda.

Regra de decisão (após build válido):
    - `options.compare_file_text` deve ser True, e
    - `backend.convert_file_resources()` não pode retornar explicitamente
      False (ausência da capacidade significa "suportado")
"""

from __future__ import annotations

import logging
from typing import Any, Protocol, runtime_checkable

from .backends.base import capability
from .config.options import CatalogOptions


@runtime_checkable
class FileResourceConverter(Protocol):
    """Transformação in-place dos recursos File de um catálogo já construído."""

    def __call__(self, catalog: Any) -> None:
        ...


def backend_supports_file_conversion(backend: Any) -> bool:
    return capability(backend, "convert_file_resources") is not False


def should_convert_file_resources(options: CatalogOptions, backend: Any) -> bool:
    if not options.compare_file_text:
        return False
    return backend_supports_file_conversion(backend)


def run_post_build_hooks(
    catalog: Any,
    *,
    options: CatalogOptions,
    backend: Any,
    logger: logging.Logger,
) -> bool:
    """
    Executa os hooks pós-build aplicáveis.

    Returns:
        True se a conversão de recursos File foi executada.
    """
    if not should_convert_file_resources(options, backend):
        return False

    converter = options.file_resource_converter
    if converter is None:
        logger.warning(
            "compare_file_text requested but no file resource converter configured; skipping"
        )
        return False

    logger.debug("Converting file resources for %s", type(backend).__name__)
    converter(catalog)
    return True
