# src/config_cascade/core/config/__init__.py

"""
Camada de configuração em cascata.

Este pacote contém as estruturas e utilitários responsáveis por resolver
os parâmetros de carregamento, ler os arquivos YAML de um diretório,
mesclá-los por precedência e expor o resultado por caminho pontuado.

Responsabilidades do pacote:
    - Resolução de parâmetros (linha de comando, ambiente, padrões)
    - Carregamento de arquivos (ausentes e vazios são ignorados)
    - Deep-merge determinístico em ordem fixa de precedência
    - Acesso por caminho pontuado (`get` / `has`)
    - Hash canônico da configuração efetiva

Invariantes:
    - A configuração final é imutável após `load_config`
    - A mesma entrada sempre produz a mesma configuração final
    - Nenhum estado global é mantido pelo pacote
"""

from .accessor import NOT_FOUND, Config, Found, resolve_path
from .errors import ConfigError, ParseError, UndefinedPropertyError, UnreadableFileError
from .hashing import compute_config_hash
from .loader import load_config, load_file, merge_all
from .merge import deep_merge
from .params import ResolvedParameters, candidate_files, resolve_param, resolve_parameters

__all__ = [
    "Config",
    "ConfigError",
    "Found",
    "NOT_FOUND",
    "ParseError",
    "ResolvedParameters",
    "UndefinedPropertyError",
    "UnreadableFileError",
    "candidate_files",
    "compute_config_hash",
    "deep_merge",
    "load_config",
    "load_file",
    "merge_all",
    "resolve_param",
    "resolve_parameters",
    "resolve_path",
]
