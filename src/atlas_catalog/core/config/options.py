"""
Opções canônicas de construção de catálogo.

Este módulo define `CatalogOptions`, o pacote de configuração recebido pela
fachada `Catalog` e repassado, sem interpretação adicional, ao backend
selecionado.

As opções podem vir de:
    - um dicionário já resolvido (uso programático e testes)
    - arquivos YAML/JSON via `load_options`

Normalização de chaves:
    Além dos nomes canônicos (snake_case), as grafias camelCase usadas na
    documentação de produto são aceitas como aliases:

        explicitBackend   → backend
        jsonContent       → json
        datastoreRef      → puppetdb
        remoteCompilerRef → puppet_master
        compareFileText   → compare_file_text
        baseDir           → basedir
        puppetVersion     → puppet_version
        retryFailedCatalog → retry_failed_catalog

    Chaves desconhecidas não são rejeitadas: são preservadas em `extra`
    como opções de passagem para backends específicos.

Invariantes:
    - `compare_file_text` é sempre booleano (default False)
    - `retry_failed_catalog` é sempre inteiro não negativo (default 0)
    - `extra` nunca é compartilhado entre instâncias

Limites explícitos:
    - Não seleciona backend (ver `core.selector`)
    - Não valida a existência de arquivos ou diretórios
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional

from .errors import OptionTypeError


_ALIASES: Dict[str, str] = {
    "explicitBackend": "backend",
    "jsonContent": "json",
    "datastoreRef": "puppetdb",
    "remoteCompilerRef": "puppet_master",
    "compareFileText": "compare_file_text",
    "baseDir": "basedir",
    "puppetVersion": "puppet_version",
    "retryFailedCatalog": "retry_failed_catalog",
    "fileResourceConverter": "file_resource_converter",
}


@dataclass
class CatalogOptions:
    """
    Pacote de opções de uma única construção de catálogo.

    Campos:
        - backend: nome explícito do backend (sobrepõe qualquer inferência)
        - json: conteúdo JSON do catálogo (str) ou documento já decodificado
        - puppetdb: referência ao datastore (cliente com `fetch_catalog` ou URL)
        - puppet_master: referência ao compilador remoto
        - node: nome do nó cujo catálogo é construído
        - basedir: diretório base (fallback de `compilation_dir`)
        - puppet_version: versão declarada pelo chamador (fallback)
        - compare_file_text: habilita a conversão de recursos File pós-build
        - retry_failed_catalog: tentativas extras de compilação local
        - compiler: compilador local injetado (ver `CatalogCompiler`)
        - file_resource_converter: transformação pós-build injetada
        - extra: opções de passagem não interpretadas pela fachada
    """

    backend: Optional[str] = None
    json: Any = None
    puppetdb: Any = None
    puppet_master: Any = None
    node: Optional[str] = None
    basedir: Optional[str] = None
    puppet_version: Optional[str] = None
    compare_file_text: bool = False
    retry_failed_catalog: int = 0
    compiler: Any = None
    file_resource_converter: Any = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.compare_file_text, bool):
            raise OptionTypeError(
                f"compare_file_text deve ser bool, recebido: {type(self.compare_file_text).__name__}"
            )
        retries = self.retry_failed_catalog
        if isinstance(retries, bool) or not isinstance(retries, int) or retries < 0:
            raise OptionTypeError(
                f"retry_failed_catalog deve ser inteiro >= 0, recebido: {retries!r}"
            )
        if self.backend is not None and not isinstance(self.backend, str):
            raise OptionTypeError(
                f"backend deve ser str, recebido: {type(self.backend).__name__}"
            )
        for name in ("node", "basedir", "puppet_version"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise OptionTypeError(f"{name} deve ser str, recebido: {type(value).__name__}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "CatalogOptions":
        """
        Constrói `CatalogOptions` a partir de um dicionário de opções.

        Aliases camelCase são resolvidos para o nome canônico. Informar o
        mesmo campo pelas duas grafias é tratado como conflito explícito.

        Raises:
            OptionTypeError: tipo inválido ou chave informada em duplicidade.
        """
        if not isinstance(mapping, Mapping):
            raise OptionTypeError(
                f"opções devem ser um mapeamento, recebido: {type(mapping).__name__}"
            )

        known = {f.name for f in fields(cls)} - {"extra"}
        kwargs: Dict[str, Any] = {}
        extra: Dict[str, Any] = dict(mapping.get("extra") or {})

        for key, value in mapping.items():
            if key == "extra":
                continue
            name = _ALIASES.get(key, key)
            if name not in known:
                extra[key] = value
                continue
            if name in kwargs:
                raise OptionTypeError(f"opção informada em duplicidade: {name} (via {key})")
            kwargs[name] = value

        return cls(extra=extra, **kwargs)

    def get(self, key: str, default: Any = None) -> Any:
        """Lê um campo canônico ou, na ausência dele, uma opção de passagem."""
        if key in {f.name for f in fields(self)}:
            value = getattr(self, key)
            return default if value is None else value
        return self.extra.get(key, default)
