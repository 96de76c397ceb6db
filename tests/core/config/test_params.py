# tests/core/config/test_params.py
"""
Testes da resolução de parâmetros de carregamento.

Os testes asseguram que:
- a linha de comando tem precedência sobre o ambiente, que tem
  precedência sobre o padrão
- o match de flags é por prefixo exato `--NOME=`
- string vazia em qualquer fonte equivale a "não fornecida"
- o environment pode ser lido de uma variável com nome configurável
- a lista de candidatos segue a ordem fixa de precedência

Limites explícitos:
    - Não lê arquivos
    - Não valida merge
"""

import os
from pathlib import Path

from config_cascade.core.config.params import (
    ResolvedParameters,
    base_names,
    candidate_files,
    get_cmdline_arg,
    resolve_param,
    resolve_parameters,
)


def test_cmdline_arg_exact_prefix():
    argv = ["--NODE_CONFIG_ENV_NAMEX=wrong", "--NODE_CONFIG_ENV=staging", "--NODE_CONFIG_ENV=second"]

    assert get_cmdline_arg("NODE_CONFIG_ENV", argv) == "staging"
    assert get_cmdline_arg("NODE_CONFIG_ENV_NAME", argv) is None
    assert get_cmdline_arg("NODE_CONFIG_DIR", argv) is None


def test_cmdline_arg_keeps_equals_in_value():
    assert get_cmdline_arg("NODE_CONFIG_DIR", ["--NODE_CONFIG_DIR=/a=b"]) == "/a=b"


def test_cmdline_arg_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["prog", "--FOO=bar"])

    assert get_cmdline_arg("FOO") == "bar"


def test_resolve_precedence_cmdline_env_default():
    """
    Verifica a ordem de resolução: linha de comando, ambiente, padrão.
    """
    env = {"FOO": "from-env"}

    assert resolve_param("FOO", "dflt", argv=["--FOO=from-cli"], environ=env) == "from-cli"
    assert resolve_param("FOO", "dflt", argv=[], environ=env) == "from-env"
    assert resolve_param("FOO", "dflt", argv=[], environ={}) == "dflt"


def test_resolve_empty_values_fall_through():
    """
    Verifica que valores vazios não contam como fornecidos.

    Decisões arquiteturais:
        - `--FOO=` na linha de comando não sobrescreve o ambiente
        - `FOO=""` no ambiente não sobrescreve o padrão
    """
    assert resolve_param("FOO", "dflt", argv=["--FOO="], environ={"FOO": "from-env"}) == "from-env"
    assert resolve_param("FOO", "dflt", argv=["--FOO="], environ={"FOO": ""}) == "dflt"


def test_resolve_parameters_defaults(tmp_path: Path):
    params = resolve_parameters(argv=[], environ={}, cwd=str(tmp_path))

    assert params == ResolvedParameters(
        env_name_key="NODE_ENV",
        env="development",
        config_dir=os.path.join(str(tmp_path), "config"),
    )


def test_resolve_parameters_uses_node_env():
    params = resolve_parameters(argv=[], environ={"NODE_ENV": "production"}, cwd="/srv")

    assert params.env == "production"


def test_resolve_parameters_custom_env_name_key():
    """
    Verifica que NODE_CONFIG_ENV_NAME redireciona a variável lida para o
    environment, e que NODE_CONFIG_ENV continua tendo precedência.
    """
    environ = {"NODE_CONFIG_ENV_NAME": "APP_ENV", "APP_ENV": "staging", "NODE_ENV": "ignored"}

    params = resolve_parameters(argv=[], environ=environ, cwd="/srv")
    assert params.env_name_key == "APP_ENV"
    assert params.env == "staging"

    params = resolve_parameters(argv=["--NODE_CONFIG_ENV=qa"], environ=environ, cwd="/srv")
    assert params.env == "qa"


def test_resolve_parameters_env_name_key_from_cmdline():
    params = resolve_parameters(
        argv=["--NODE_CONFIG_ENV_NAME=APP_ENV", "--APP_ENV=test"],
        environ={},
        cwd="/srv",
    )

    assert params.env_name_key == "APP_ENV"
    assert params.env == "test"


def test_resolve_parameters_config_dir_override():
    params = resolve_parameters(
        argv=["--NODE_CONFIG_DIR=/etc/app"],
        environ={"NODE_CONFIG_DIR": "/ignored"},
        cwd="/srv",
    )

    assert params.config_dir == "/etc/app"


def test_candidate_files_order():
    assert candidate_files(base_names("production")) == [
        ("default", "yaml"),
        ("default", "yml"),
        ("production", "yaml"),
        ("production", "yml"),
        ("local", "yaml"),
        ("local", "yml"),
        ("local-production", "yaml"),
        ("local-production", "yml"),
        ("application", "yaml"),
        ("application", "yml"),
        ("application-production", "yaml"),
        ("application-production", "yml"),
    ]
