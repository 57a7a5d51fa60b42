"""
Exceções canônicas da camada de configuração do Atlas Catalog.

As exceções aqui definidas representam falhas estruturais durante o
carregamento e a normalização das opções de catálogo, e não falhas
operacionais de backend.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa falha de compilação ou fetch de catálogo
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados às opções do Atlas Catalog.

    Permite captura genérica de erros de configuração, distinta das
    exceções de uso da fachada (`CatalogException`).
    """


class OptionsFileNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de opções base (defaults)
    não é encontrado no caminho especificado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de opções não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz do arquivo de opções
    não é um dicionário (`dict`).
    """


class OptionTypeError(ConfigError):
    """
    Exceção levantada quando uma opção possui tipo incompatível.

    Ocorre em dois momentos:
        - durante o merge de camadas (defaults vs local) com tipos divergentes
        - durante a normalização para `CatalogOptions` (ex.: `compare_file_text`
          não booleano)

    A mensagem sempre inclui o caminho completo da chave (ex.: `extra.timeout`).
    """
