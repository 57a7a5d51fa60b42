"""
Contrato canônico de backend de catálogo.

Um backend é uma estratégia para produzir um catálogo: compilar localmente,
carregar de JSON, buscar em um datastore, buscar em um compilador remoto
ou produzir um placeholder vazio.

Superfície obrigatória (`CatalogSource`), consultada uma vez por build:
    - catalog()        → documento normalizado ou None
    - catalog_json()   → forma serializada do documento ou None
    - error_message()  → descrição da falha ou None

Capacidades opcionais (nem toda variante as possui):
    - build(logger)                → construção sob demanda
    - compilation_dir()            → diretório de compilação
    - retries()                    → tentativas extras usadas
    - puppet_version()             → versão do compilador
    - convert_file_resources()     → suporta conversão de recursos File

Uma capacidade ausente é sinalizada pelo sentinel `UNSUPPORTED`, nunca por
`None` (que é um valor legítimo, ex.: `retries()` antes do build). A
fachada também aceita backends que simplesmente não definem o método,
via `capability()`.

Falhas operacionais são dados: o backend define `catalog=None` e um
`error_message`. Backends não levantam exceções para falhas de compilação
ou fetch.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, Optional, Protocol, Tuple, Type, runtime_checkable

from atlas_catalog.core.config.options import CatalogOptions


class _Unsupported:
    """Sentinel de capacidade ausente."""

    _instance: Optional["_Unsupported"] = None

    def __new__(cls) -> "_Unsupported":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNSUPPORTED"


UNSUPPORTED = _Unsupported()


@runtime_checkable
class CatalogSource(Protocol):
    """Superfície mínima que toda variante de backend deve expor."""

    def catalog(self) -> Optional[Dict[str, Any]]:
        ...

    def catalog_json(self) -> Optional[str]:
        ...

    def error_message(self) -> Optional[str]:
        ...


def capability(backend: Any, name: str, *args: Any) -> Any:
    """
    Invoca uma capacidade opcional do backend.

    Returns:
        O valor retornado pelo backend, ou `UNSUPPORTED` quando o backend
        não define o método.
    """
    method = getattr(backend, name, None)
    if not callable(method):
        return UNSUPPORTED
    return method(*args)


def decode_catalog_document(raw: Any) -> Tuple[Dict[str, Any], str]:
    """
    Normaliza um catálogo recebido como `str` JSON ou `dict`.

    Returns:
        Tupla (documento, forma serializada).

    Raises:
        ValueError: conteúdo não decodificável ou raiz diferente de objeto.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")

    if isinstance(raw, str):
        document = json.loads(raw)
        serialized = raw
    elif isinstance(raw, dict):
        document = raw
        serialized = json.dumps(raw, sort_keys=True)
    else:
        raise ValueError(f"unsupported catalog payload type: {type(raw).__name__}")

    if not isinstance(document, dict):
        raise ValueError(f"catalog root must be an object, got {type(document).__name__}")

    return document, serialized


class BaseBackend:
    """
    Implementação base compartilhada pelas variantes embutidas.

    Não define `build`: uma subclasse que não o implementa é pré-construída,
    com o resultado disponível ao fim do construtor.
    """

    def __init__(self, options: CatalogOptions) -> None:
        self.options = options
        self._catalog: Optional[Dict[str, Any]] = None
        self._catalog_json: Optional[str] = None
        self._error_message: Optional[str] = None

    # -----------------------------
    # Superfície obrigatória
    # -----------------------------
    def catalog(self) -> Optional[Dict[str, Any]]:
        return self._catalog

    def catalog_json(self) -> Optional[str]:
        return self._catalog_json

    def error_message(self) -> Optional[str]:
        return self._error_message

    # -----------------------------
    # Capacidades opcionais
    # -----------------------------
    def compilation_dir(self) -> Any:
        return UNSUPPORTED

    def retries(self) -> Any:
        return UNSUPPORTED

    def puppet_version(self) -> Any:
        return UNSUPPORTED

    def convert_file_resources(self) -> Any:
        return UNSUPPORTED

    # -----------------------------
    # Helpers de resultado
    # -----------------------------
    def _set_result(self, raw: Any) -> None:
        try:
            document, serialized = decode_catalog_document(raw)
        except ValueError as e:
            self._set_failure(f"Catalog payload failed to parse: {e}")
            return
        self._catalog = document
        self._catalog_json = serialized
        self._error_message = None

    def _set_failure(self, message: str) -> None:
        self._catalog = None
        self._catalog_json = None
        self._error_message = message

    def _run_with_retries(
        self,
        action: Callable[[], Any],
        failure_type: Type[Exception],
        logger: logging.Logger,
    ) -> Tuple[Any, Optional[Exception], int]:
        """
        Executa `action` até `1 + retry_failed_catalog` vezes.

        Apenas `failure_type` é tratado como falha recuperável; qualquer
        outra exceção propaga sem modificação.

        Returns:
            Tupla (resultado, última falha, tentativas extras usadas).
        """
        max_retries = self.options.retry_failed_catalog
        last_failure: Optional[Exception] = None

        for attempt in range(max_retries + 1):
            try:
                return action(), None, attempt
            except failure_type as e:
                last_failure = e
                logger.debug(
                    "%s attempt %d/%d failed: %s",
                    type(self).__name__,
                    attempt + 1,
                    max_retries + 1,
                    e,
                )

        return None, last_failure, max_retries
