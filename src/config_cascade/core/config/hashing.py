# src/config_cascade/core/config/hashing.py
"""
Hashing canônico da configuração agregada.

Este módulo gera um hash determinístico da configuração resolvida, usado
para identificar de forma estável qual configuração efetiva um processo
carregou (logs, auditoria, comparação entre ambientes).

Política de hashing:
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Escalares não-JSON produzidos pelo YAML (ex.: datas) viram `str`
    - Codificação UTF-8
    - SHA-256

Invariantes:
    - Configurações estruturalmente equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
    - Nenhuma mutação ocorre sobre o input

Limites explícitos:
    - Não carrega nem resolve configuração
    - Não persiste o hash
"""


import json
import hashlib
from typing import Any


def compute_config_hash(config: Any) -> str:
    """
    Gera um hash SHA-256 determinístico da configuração.

    Args:
        config (Any): Configuração agregada (normalmente um dict).

    Returns:
        str: Hash SHA-256 hexadecimal da configuração.
    """

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
