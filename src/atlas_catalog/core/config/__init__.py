"""
Camada de configuração do Atlas Catalog.

Responsabilidades do pacote:
    - Modelo canônico de opções (`CatalogOptions`)
    - Carregamento de opções a partir de YAML/JSON (defaults + local)
    - Merge determinístico de camadas de opções
    - Exceções tipadas de configuração

Limites explícitos:
    - Não seleciona backend
    - Não constrói nem consulta catálogos
"""

from .errors import (
    ConfigError,
    InvalidConfigRootTypeError,
    OptionsFileNotFoundError,
    OptionTypeError,
    UnsupportedConfigFormatError,
)
from .loader import load_options
from .merge import merge_option_layers
from .options import CatalogOptions

__all__ = [
    "CatalogOptions",
    "ConfigError",
    "InvalidConfigRootTypeError",
    "OptionsFileNotFoundError",
    "OptionTypeError",
    "UnsupportedConfigFormatError",
    "load_options",
    "merge_option_layers",
]
