"""
Índice de recursos para lookup O(1) por (type, title).

Formatos de catálogo suportados na extração da lista de recursos:
    - envelope `data`:  {"data": {"resources": [...]}}
    - formato plano:    {"resources": [...]}

Qualquer outro formato é violação de invariante interna (`CatalogShapeError`).

Duplicidade de (type, title) não é erro: o índice mantém o último recurso
visto, e a ambiguidade fica visível ao chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import CatalogShapeError


def extract_resources(catalog: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Retorna a lista de recursos de um catálogo normalizado.

    Raises:
        CatalogShapeError: se o catálogo não possuir nenhum dos formatos conhecidos.
    """
    data = catalog.get("data")
    if isinstance(data, dict) and isinstance(data.get("resources"), list):
        return data["resources"]
    if isinstance(catalog.get("resources"), list):
        return catalog["resources"]
    raise CatalogShapeError(
        "BUG: catalog has no data::resources or ::resources array",
        details={"keys": sorted(str(k) for k in catalog.keys())},
    )


@dataclass
class ResourceIndex:
    """Mapa type → title → recurso, construído em uma única passada."""

    _by_type: Dict[Any, Dict[Any, Dict[str, Any]]] = field(default_factory=dict)

    @classmethod
    def from_resources(cls, resources: Iterable[Dict[str, Any]]) -> "ResourceIndex":
        index = cls()
        for resource in resources:
            index._by_type.setdefault(resource.get("type"), {})[resource.get("title")] = resource
        return index

    def lookup(self, resource_type: str, title: str) -> Optional[Dict[str, Any]]:
        titles = self._by_type.get(resource_type)
        if not isinstance(titles, dict):
            return None
        return titles.get(title)

    def types(self) -> List[Any]:
        return list(self._by_type)

    def __len__(self) -> int:
        return sum(len(titles) for titles in self._by_type.values())
