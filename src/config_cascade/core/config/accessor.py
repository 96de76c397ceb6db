# src/config_cascade/core/config/accessor.py
"""
Acesso por caminho pontuado à configuração agregada.

Este módulo define o `Config`, o objeto imutável entregue ao programa host
após o carregamento, e o resolvedor único de caminhos utilizado por
`Config.get` e `Config.has`.

Um caminho é uma string pontuada (`"db.host"`) ou uma sequência de
segmentos já separados (`["db", "host"]`). A resolução percorre a árvore
um segmento por vez:
    - em um dict, o segmento deve ser uma chave existente
    - em uma list, o segmento deve ser um índice decimal válido
    - qualquer outro nó intermediário (incluindo None) encerra a busca

Decisões arquiteturais:
    - Um único resolvedor retorna `Found(value)` ou `NOT_FOUND`
    - `get` levanta `UndefinedPropertyError`; `has` converte para bool
    - Valores falsy são resultados válidos para `get`
    - `has` reporta valores falsy como ausentes (contrato mantido)
    - Containers retornados são cópias; o agregado nunca é exposto

Limites explícitos:
    - Não mantém cache (cada chamada percorre a árvore)
    - Não valida tipos nem schema
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import UndefinedPropertyError
from .hashing import compute_config_hash
from .params import ResolvedParameters

PropertyPath = Union[str, Sequence[str]]


@dataclass(frozen=True)
class Found:
    value: Any


class _NotFound:
    def __repr__(self) -> str:
        return "NOT_FOUND"

    def __bool__(self) -> bool:
        return False


NOT_FOUND = _NotFound()


def split_path(path: PropertyPath) -> List[str]:
    if isinstance(path, str):
        return path.split(".")
    return [str(segment) for segment in path]


def format_path(path: PropertyPath) -> str:
    if isinstance(path, str):
        return path
    return ".".join(str(segment) for segment in path)


def resolve_path(tree: Any, path: PropertyPath) -> Union[Found, _NotFound]:
    """
    Percorre `tree` segmento a segmento.

    Returns:
        Found | NOT_FOUND: `Found(value)` quando todos os segmentos
        resolvem, inclusive para valores falsy; `NOT_FOUND` caso contrário.
    """
    node = tree

    for segment in split_path(path):
        if isinstance(node, dict):
            if segment not in node:
                return NOT_FOUND
            node = node[segment]

        elif isinstance(node, list):
            if not segment.isdecimal() or int(segment) >= len(node):
                return NOT_FOUND
            node = node[int(segment)]

        else:
            return NOT_FOUND

    return Found(node)


class Config:
    """
    Configuração agregada, imutável após a construção.

    Esta classe é o handle entregue pelo `load_config` ao programa host.
    Ela encapsula a configuração agregada e os metadados de carregamento,
    expondo apenas leitura.

    Invariantes:
        - O agregado interno é uma cópia própria e nunca é mutado
        - `get` e `has` compartilham o mesmo resolvedor

    Attributes:
        params (Optional[ResolvedParameters]): Parâmetros do carregamento.
        sources (Tuple[str, ...]): Arquivos mesclados, em ordem.
    """

    def __init__(
        self,
        data: Any,
        *,
        params: Optional[ResolvedParameters] = None,
        sources: Iterable[str] = (),
    ) -> None:
        self._data = deepcopy(data)
        self._params = params
        self._sources: Tuple[str, ...] = tuple(sources)

    @property
    def params(self) -> Optional[ResolvedParameters]:
        return self._params

    @property
    def sources(self) -> Tuple[str, ...]:
        return self._sources

    def get(self, path: PropertyPath) -> Any:
        """
        Retorna o valor no caminho pontuado.

        Args:
            path (PropertyPath): `"a.b.c"` ou `["a", "b", "c"]`.

        Returns:
            Any: Valor encontrado, incluindo None, 0, False ou "".

        Raises:
            UndefinedPropertyError: Se o caminho não resolve.
        """
        result = resolve_path(self._data, path)
        if result is NOT_FOUND:
            raise UndefinedPropertyError(format_path(path))
        return deepcopy(result.value)

    def has(self, path: PropertyPath) -> bool:
        """
        Indica se o caminho resolve para um valor truthy.

        Um valor escalar presente porém falsy (False, 0, "" ou None) é
        reportado como ausente. Dicts e listas, mesmo vazios, contam
        como presentes.
        """
        result = resolve_path(self._data, path)
        if result is NOT_FOUND:
            return False
        if isinstance(result.value, (dict, list)):
            return True
        return bool(result.value)

    def to_dict(self) -> Any:
        """Cópia integral da configuração agregada."""
        return deepcopy(self._data)

    @property
    def config_hash(self) -> str:
        return compute_config_hash(self._data)

    def __repr__(self) -> str:
        env = self.params.env if self.params is not None else None
        return f"Config(env={env!r}, sources={len(self.sources)})"
