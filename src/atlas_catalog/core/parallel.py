"""
Construção de vários catálogos em paralelo, um por nó.

Cada tarefa recebe apenas as opções (dados serializáveis) e constrói seu
próprio logger transitório; nenhum logger, stream ou handle é compartilhado
entre tarefas. Cada `Catalog` é construído e consultado por uma única
tarefa, respeitando a ausência de sincronização interna da fachada.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .catalog import Catalog
from .config.options import CatalogOptions

OptionsLike = Union[CatalogOptions, Mapping[str, Any]]


def _label_for(position: int, options: CatalogOptions) -> str:
    return options.node or str(position)


def _build_one(label: str, options: CatalogOptions) -> Tuple[str, Catalog]:
    worker_logger = logging.getLogger(f"atlas_catalog.worker.{label}")
    catalog = Catalog(options)
    catalog.build(worker_logger)
    worker_logger.debug("Built catalog with %s (valid=%s)", catalog.builder, catalog.valid)
    return label, catalog


def build_catalogs(
    option_sets: Sequence[OptionsLike],
    *,
    max_workers: Optional[int] = None,
) -> Dict[str, Catalog]:
    """
    Constrói um catálogo por conjunto de opções.

    O rótulo de cada resultado é `options.node`, ou a posição na sequência
    quando o nó não é informado. Rótulos repetidos recebem o sufixo
    `#<n>`, começando na posição e incrementado até um rótulo livre.

    Exceções levantadas por backends propagam para o chamador.
    """
    normalized = [
        o if isinstance(o, CatalogOptions) else CatalogOptions.from_mapping(o)
        for o in option_sets
    ]

    labels = []
    seen = set()
    for position, options in enumerate(normalized):
        base = label = _label_for(position, options)
        suffix = position
        while label in seen:
            label = f"{base}#{suffix}"
            suffix += 1
        seen.add(label)
        labels.append(label)

    results: Dict[str, Catalog] = {}
    if not normalized:
        return results

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = [pool.submit(_build_one, label, o) for label, o in zip(labels, normalized)]
        for future in futures:
            label, catalog = future.result()
            results[label] = catalog

    return results
