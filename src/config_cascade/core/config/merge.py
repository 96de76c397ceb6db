# src/config_cascade/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Este módulo implementa a política de deep-merge utilizada para dobrar os
arquivos de configuração descobertos em uma única configuração agregada.

Política de merge:
    - dict + dict → merge recursivo por chave
    - list + list → concatenação (elementos do target, depois do source)
    - qualquer outro par → o source substitui o target

Princípios fundamentais:
    - O merge é puramente funcional
    - Nenhum input é mutado durante o processo
    - O resultado não compartilha containers mutáveis com os inputs

Limites explícitos:
    - Não carrega arquivos
    - Não valida semântica nem tipos
    - Não trata conflito de tipos como erro (o source sempre vence)
"""

from copy import deepcopy
from typing import Any, Dict


def deep_merge(target: Any, source: Any) -> Any:
    """
    Realiza um deep-merge entre dois valores de configuração.

    O `source` tem precedência sobre o `target`. Quando ambos são
    dicionários, as chaves são combinadas recursivamente; quando ambos são
    listas, o resultado é a concatenação; em qualquer outro caso o
    `source` substitui integralmente o `target`.

    Invariantes:
        - `target` e `source` não sofrem mutação
        - Chaves presentes apenas no target são preservadas
        - O mesmo par de entrada sempre produz o mesmo resultado

    Args:
        target (Any): Valor acumulado (menor precedência).
        source (Any): Valor novo (maior precedência).

    Returns:
        Any: Novo valor resultante do merge.
    """

    if isinstance(target, dict) and isinstance(source, dict):
        result: Dict[str, Any] = deepcopy(target)

        for key, source_value in source.items():
            if key in result:
                result[key] = deep_merge(result[key], source_value)
            else:
                result[key] = deepcopy(source_value)

        return result

    # list -> concatenação
    if isinstance(target, list) and isinstance(source, list):
        return deepcopy(target) + deepcopy(source)

    return deepcopy(source)
