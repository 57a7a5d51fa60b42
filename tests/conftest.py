"""
Fixtures compartilhados para testes do Atlas Catalog.

Este módulo define fixtures reutilizáveis que fornecem:
- catálogos mínimos nos dois formatos suportados (plano e com envelope `data`)
- conteúdos YAML de opções (defaults + local)
- colaboradores falsos (compilador e fetcher) com contagem de chamadas

Decisões arquiteturais:
    - Colaboradores falsos utilizam duck typing em vez de herança
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas
    - Nenhuma fixture realiza I/O de rede

Limites explícitos:
    - Não representa compiladores ou datastores reais
    - Não contém lógica condicional complexa
"""

import json

import pytest


# =====================================================
# Catálogos
# =====================================================

@pytest.fixture
def two_file_resources() -> list:
    """Dois recursos File distintos, na ordem em que aparecem no catálogo."""
    return [
        {"type": "File", "title": "/etc/passwd", "parameters": {"mode": "0644"}},
        {"type": "File", "title": "/etc/hosts", "parameters": {"mode": "0644"}},
    ]


@pytest.fixture
def flat_catalog(two_file_resources) -> dict:
    """
    Catálogo no formato plano (`resources` na raiz).

    Returns:
        dict: documento com `name`, `version` e `resources`.
    """
    return {"name": "web01.example.com", "version": "1", "resources": two_file_resources}


@pytest.fixture
def wrapped_catalog(two_file_resources) -> dict:
    """Catálogo no formato com envelope (`data.resources`)."""
    return {
        "document_type": "Catalog",
        "data": {"name": "db01.example.com", "resources": two_file_resources},
    }


@pytest.fixture
def flat_catalog_json(flat_catalog) -> str:
    return json.dumps(flat_catalog)


# =====================================================
# Opções em arquivo
# =====================================================

@pytest.fixture
def options_defaults_yaml() -> str:
    """
    YAML de opções padrão semelhante ao uso real do projeto.

    Invariantes:
        - YAML sintaticamente válido
        - Pode ser combinado com opções locais sem ambiguidade
    """
    return """\
node: web01.example.com
basedir: /srv/code
compare_file_text: false
retry_failed_catalog: 1
extra:
  environment: production
  timeouts:
    compile: 120
"""


@pytest.fixture
def options_local_json() -> str:
    """JSON de overrides locais (muda o backend e um timeout aninhado)."""
    return json.dumps({
        "backend": "noop",
        "compare_file_text": True,
        "extra": {"timeouts": {"compile": 300}},
    })


# =====================================================
# Colaboradores falsos
# =====================================================

@pytest.fixture
def FakeCompiler():
    """
    Fixture que fornece uma classe de compilador falso.

    O compilador falha com `CatalogCompileFailure` nas primeiras `failures`
    chamadas e depois retorna `payload`. Quando `error` é informado, a
    exceção é levantada em toda chamada (falha não recuperável).

    Returns:
        type: Classe _FakeCompiler que pode ser instanciada pelos testes.
    """
    from atlas_catalog.core.backends import CatalogCompileFailure

    class _FakeCompiler:
        def __init__(
            self,
            payload=None,
            *,
            failures: int = 0,
            failure_message: str = "compile failed",
            error: Exception = None,
            puppet_version: str = None,
            compilation_dir: str = None,
        ):
            self.payload = payload if payload is not None else {"resources": []}
            self.failures = failures
            self.failure_message = failure_message
            self.error = error
            self.puppet_version = puppet_version
            self.compilation_dir = compilation_dir
            self.calls = []

        def compile(self, *, node, basedir, logger):
            self.calls.append({"node": node, "basedir": basedir, "logger": logger})
            if self.error is not None:
                raise self.error
            if len(self.calls) <= self.failures:
                raise CatalogCompileFailure(self.failure_message)
            return self.payload

        def version(self):
            return self.puppet_version

    return _FakeCompiler


@pytest.fixture
def FakeFetcher():
    """Classe de fetcher falso (datastore / compilador remoto)."""
    from atlas_catalog.core.backends import CatalogFetchError

    class _FakeFetcher:
        def __init__(self, payload=None, *, failures: int = 0, failure_message: str = "fetch failed"):
            self.payload = payload if payload is not None else {"resources": []}
            self.failures = failures
            self.failure_message = failure_message
            self.calls = []

        def fetch_catalog(self, node, *, logger):
            self.calls.append(node)
            if len(self.calls) <= self.failures:
                raise CatalogFetchError(self.failure_message)
            return self.payload

    return _FakeFetcher


@pytest.fixture
def RecordingConverter():
    """Conversor de recursos File que apenas registra os catálogos recebidos."""

    class _RecordingConverter:
        def __init__(self):
            self.seen = []

        def __call__(self, catalog):
            self.seen.append(catalog)

    return _RecordingConverter
