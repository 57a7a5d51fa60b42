# tests/core/config/test_loader.py
"""
Testes do carregador de opções (load_options).

Os testes asseguram que:
- o arquivo defaults é obrigatório
- o arquivo local é opcional e sobrepõe defaults via merge recursivo
- formatos não suportados e raízes inválidas são rejeitados
- overrides programáticos têm a maior precedência

Invariantes:
    - O resultado é sempre um `CatalogOptions`
    - Nenhuma configuração parcial é retornada em caso de erro
"""

import pytest
from pathlib import Path

try:
    from atlas_catalog.core.config.loader import load_options
    from atlas_catalog.core.config.options import CatalogOptions
    from atlas_catalog.core.config.errors import (
        InvalidConfigRootTypeError,
        OptionsFileNotFoundError,
        OptionTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_options = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de opções e suas exceções tipadas estejam disponíveis.

    Falha imediatamente, com mensagem que descreve os módulos esperados,
    em vez de produzir erros indiretos nos testes.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/atlas_catalog/core/config/loader.py (load_options)\n"
            "- src/atlas_catalog/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_missing_defaults_raises(tmp_path: Path):
    """
    Verifica que a ausência do arquivo de defaults é tratada como erro fatal.

    Invariantes:
        - A exceção utilizada é específica (`OptionsFileNotFoundError`)
        - Nenhuma configuração parcial é retornada
    """
    _require_imports()
    with pytest.raises(OptionsFileNotFoundError):
        load_options(defaults_path=str(tmp_path / "missing.yaml"))


def test_defaults_only(tmp_path: Path, options_defaults_yaml: str):
    """Verifica que apenas o arquivo de defaults produz opções completas."""
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    defaults.write_text(options_defaults_yaml, encoding="utf-8")

    options = load_options(defaults_path=str(defaults))

    assert isinstance(options, CatalogOptions)
    assert options.node == "web01.example.com"
    assert options.basedir == "/srv/code"
    assert options.compare_file_text is False
    assert options.retry_failed_catalog == 1
    assert options.extra["environment"] == "production"


def test_local_overrides_defaults(tmp_path: Path, options_defaults_yaml: str, options_local_json: str):
    """
    Verifica que o arquivo local (JSON) sobrepõe os defaults (YAML).

    Decisões arquiteturais:
        - Dicionários aninhados são mesclados recursivamente
        - Chaves não sobrescritas são preservadas
    """
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    local = tmp_path / "catalog.local.json"
    defaults.write_text(options_defaults_yaml, encoding="utf-8")
    local.write_text(options_local_json, encoding="utf-8")

    options = load_options(defaults_path=str(defaults), local_path=str(local))

    assert options.backend == "noop"
    assert options.compare_file_text is True
    assert options.node == "web01.example.com"
    assert options.extra["timeouts"] == {"compile": 300}
    assert options.extra["environment"] == "production"


def test_missing_local_is_ignored(tmp_path: Path, options_defaults_yaml: str):
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    defaults.write_text(options_defaults_yaml, encoding="utf-8")

    options = load_options(defaults_path=str(defaults), local_path=str(tmp_path / "nope.yaml"))

    assert options.backend is None


def test_unsupported_format_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "catalog.defaults.toml"
    defaults.write_text("node = 'x'\n", encoding="utf-8")
    with pytest.raises(UnsupportedConfigFormatError):
        load_options(defaults_path=str(defaults))


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(InvalidConfigRootTypeError):
        load_options(defaults_path=str(defaults))


def test_empty_defaults_file_yields_default_options(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yml"
    defaults.write_text("", encoding="utf-8")

    options = load_options(defaults_path=str(defaults))

    assert options == CatalogOptions()


def test_type_conflict_between_layers_raises(tmp_path: Path, options_defaults_yaml: str):
    """Verifica que tipos divergentes entre defaults e local interrompem o merge."""
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    local = tmp_path / "catalog.local.yaml"
    defaults.write_text(options_defaults_yaml, encoding="utf-8")
    local.write_text("extra:\n  timeouts: fast\n", encoding="utf-8")

    with pytest.raises(OptionTypeError, match="extra.timeouts"):
        load_options(defaults_path=str(defaults), local_path=str(local))


def test_programmatic_overrides_win(tmp_path: Path, options_defaults_yaml: str, FakeCompiler):
    """Objetos injetados (compilador) chegam intactos às opções."""
    _require_imports()
    defaults = tmp_path / "catalog.defaults.yaml"
    defaults.write_text(options_defaults_yaml, encoding="utf-8")
    compiler = FakeCompiler()

    options = load_options(
        defaults_path=str(defaults),
        overrides={"compiler": compiler, "node": "other.example.com"},
    )

    assert options.compiler is compiler
    assert options.node == "other.example.com"
