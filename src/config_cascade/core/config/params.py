# src/config_cascade/core/config/params.py
"""
Resolução de parâmetros de carregamento da configuração.

Este módulo determina, a partir da linha de comando, das variáveis de
ambiente e de valores padrão, os três parâmetros que governam o
carregamento em cascata:

    - a chave que nomeia a variável de ambiente do environment
      (`NODE_CONFIG_ENV_NAME`, padrão `NODE_ENV`)
    - o environment efetivo (`NODE_CONFIG_ENV`, depois a variável nomeada
      pela chave acima, padrão `development`)
    - o diretório de configuração (`NODE_CONFIG_DIR`, padrão `<cwd>/config`)

Política de resolução:
    - flag `--NOME=valor` na linha de comando (match exato de prefixo)
    - variável de ambiente `NOME`
    - valor padrão fornecido

Decisões arquiteturais:
    - Cada estágio produz um valor opcional; a primeira fonte presente vence
    - String vazia é tratada como "não fornecida" em qualquer estágio
    - `argv`, `environ` e `cwd` são injetáveis para hosts e testes

Limites explícitos:
    - Não realiza coerção de tipos (todos os valores são strings)
    - Não lê arquivos
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

ENV_NAME_PARAM = "NODE_CONFIG_ENV_NAME"
ENV_PARAM = "NODE_CONFIG_ENV"
DIR_PARAM = "NODE_CONFIG_DIR"

DEFAULT_ENV_NAME_KEY = "NODE_ENV"
DEFAULT_ENV = "development"

EXTENSIONS: Tuple[str, ...] = ("yaml", "yml")


@dataclass(frozen=True)
class ResolvedParameters:
    """
    Parâmetros resolvidos uma única vez no início do carregamento.

    Attributes:
        env_name_key (str): Nome da variável que carrega o environment.
        env (str): Environment efetivo (ex.: "production").
        config_dir (str): Diretório onde os arquivos são procurados.
    """

    env_name_key: str
    env: str
    config_dir: str


def _present(value: Optional[str]) -> Optional[str]:
    # string vazia equivale a ausente
    if value is None or value == "":
        return None
    return value


def get_cmdline_arg(name: str, argv: Optional[Sequence[str]] = None) -> Optional[str]:
    """
    Procura `--<name>=valor` nos argumentos e retorna `valor`.

    Args:
        name (str): Nome do parâmetro, sem o prefixo `--`.
        argv (Optional[Sequence[str]]): Argumentos; padrão `sys.argv[1:]`.

    Returns:
        Optional[str]: Texto após o prefixo do primeiro argumento
        correspondente, ou None quando nenhum argumento corresponde.
    """
    args = sys.argv[1:] if argv is None else argv
    prefix = f"--{name}="

    for arg in args:
        if arg.startswith(prefix):
            return arg[len(prefix):]

    return None


def resolve_param(
    name: str,
    default: str,
    *,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Resolve um parâmetro: linha de comando, depois ambiente, depois padrão.

    Args:
        name (str): Nome do parâmetro (flag e variável de ambiente).
        default (str): Valor usado quando nenhuma fonte fornece o parâmetro.
        argv (Optional[Sequence[str]]): Argumentos; padrão `sys.argv[1:]`.
        environ (Optional[Mapping[str, str]]): Ambiente; padrão `os.environ`.

    Returns:
        str: Valor resolvido.
    """
    env = os.environ if environ is None else environ

    from_cmdline = _present(get_cmdline_arg(name, argv))
    if from_cmdline is not None:
        return from_cmdline

    from_env = _present(env.get(name))
    if from_env is not None:
        return from_env

    return default


def resolve_parameters(
    *,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> ResolvedParameters:
    """
    Resolve os três parâmetros de carregamento.

    Ordem de resolução:
        - env_name_key = NODE_CONFIG_ENV_NAME ou "NODE_ENV"
        - env          = NODE_CONFIG_ENV, senão <env_name_key>, senão "development"
        - config_dir   = NODE_CONFIG_DIR ou "<cwd>/config"

    Args:
        argv (Optional[Sequence[str]]): Argumentos; padrão `sys.argv[1:]`.
        environ (Optional[Mapping[str, str]]): Ambiente; padrão `os.environ`.
        cwd (Optional[str]): Diretório base do padrão; padrão `os.getcwd()`.

    Returns:
        ResolvedParameters: Parâmetros imutáveis.
    """
    base_dir = os.getcwd() if cwd is None else cwd

    env_name_key = resolve_param(ENV_NAME_PARAM, DEFAULT_ENV_NAME_KEY, argv=argv, environ=environ)
    env = resolve_param(
        ENV_PARAM,
        resolve_param(env_name_key, DEFAULT_ENV, argv=argv, environ=environ),
        argv=argv,
        environ=environ,
    )
    config_dir = resolve_param(DIR_PARAM, os.path.join(base_dir, "config"), argv=argv, environ=environ)

    params = ResolvedParameters(env_name_key=env_name_key, env=env, config_dir=config_dir)
    logger.debug("Parâmetros resolvidos: %s", params)
    return params


def base_names(env: str) -> List[str]:
    """Nomes base em ordem crescente de precedência."""
    return [
        "default",
        env,
        "local",
        f"local-{env}",
        "application",
        f"application-{env}",
    ]


def candidate_files(
    names: Sequence[str],
    extensions: Sequence[str] = EXTENSIONS,
) -> List[Tuple[str, str]]:
    """
    Lista ordenada de pares (nome base, extensão) a tentar.

    A ordem define a precedência do merge: cada nome base é tentado com
    `yaml` antes de `yml`, e nomes posteriores sobrescrevem anteriores.
    """
    return [(name, ext) for name in names for ext in extensions]
