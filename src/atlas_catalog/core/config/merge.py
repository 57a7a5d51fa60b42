"""
Merge de camadas de opções (defaults + local).

Política de merge (v1):
    - dict + dict → merge recursivo por chave
    - override `None` → mantém o valor da base (não apaga opções)
    - list / escalar → sobrescrita total
    - conflito de tipos → `OptionTypeError` com o caminho completo da chave

`bool` e `int` são tratados como tipos distintos: `retry_failed_catalog: true`
sobre `retry_failed_catalog: 2` é conflito, não coerção.

Nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict, Tuple

from .errors import OptionTypeError


def merge_option_layers(
    base: Dict[str, Any],
    override: Dict[str, Any],
    _path: Tuple[str, ...] = (),
) -> Dict[str, Any]:
    """
    Mescla `override` sobre `base` e retorna um novo dicionário.

    Raises:
        OptionTypeError: se uma mesma chave possuir tipos incompatíveis.
    """
    result: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        path = _path + (str(key),)

        if value is None:
            result.setdefault(key, None)
            continue

        if key not in result or result[key] is None:
            result[key] = deepcopy(value)
            continue

        current = result[key]

        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = merge_option_layers(current, value, path)
            continue

        if type(current) is not type(value):
            raise OptionTypeError(
                f"Conflito de tipo na opção '{'.'.join(path)}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )

        result[key] = deepcopy(value)

    return result
