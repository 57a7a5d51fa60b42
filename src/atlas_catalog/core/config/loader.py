"""
Loader de opções de catálogo a partir de arquivos.

As opções são resolvidas a partir de:
    - um arquivo de defaults (obrigatório)
    - um arquivo local de overrides (opcional; ignorado se não existir)

Formatos suportados (v1):
    - YAML (.yaml, .yml) via PyYAML `safe_load`
    - JSON (.json)

Opções que não são serializáveis (compilador, fetchers, conversor de
recursos) não vêm de arquivo: são injetadas pelo chamador via `overrides`.

Limites explícitos:
    - Não seleciona backend
    - Não constrói catálogo
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import json

import yaml  # PyYAML

from .errors import (
    InvalidConfigRootTypeError,
    OptionsFileNotFoundError,
    UnsupportedConfigFormatError,
)
from .merge import merge_option_layers
from .options import CatalogOptions


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de opções e valida que a raiz é um dicionário.

    Arquivos vazios são interpretados como dicionários vazios.

    Raises:
        OptionsFileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise OptionsFileNotFoundError(f"Arquivo de opções não encontrado: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz das opções deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def load_options(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CatalogOptions:
    """
    Carrega e resolve as opções efetivas de uma construção de catálogo.

    Precedência (menor → maior): defaults, arquivo local, `overrides`.
    `overrides` é aplicado sem merge recursivo, pois costuma carregar
    objetos injetados (compilador, fetchers) que não devem ser copiados.

    Args:
        defaults_path (str): Caminho para o arquivo de opções base.
        local_path (Optional[str]): Caminho opcional para overrides locais.
        overrides (Optional[Mapping[str, Any]]): Opções programáticas.

    Returns:
        CatalogOptions: Opções normalizadas.

    Raises:
        OptionsFileNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        OptionTypeError: Se ocorrer conflito de tipos ou opção inválida.
    """
    effective = _load_file(Path(defaults_path))

    if local_path is not None:
        local_file = Path(local_path)
        if local_file.exists():
            effective = merge_option_layers(effective, _load_file(local_file))

    if overrides:
        effective = {**effective, **dict(overrides)}

    return CatalogOptions.from_mapping(effective)
