# src/config_cascade/__init__.py
"""
config_cascade — configuração YAML em camadas com acesso por caminho pontuado.

Os arquivos de um diretório de configuração são mesclados na ordem

    default, <env>, local, local-<env>, application, application-<env>

(cada um como `.yaml` e depois `.yml`), e o resultado é exposto como um
objeto `Config` imutável:

    from config_cascade import load_config

    config = load_config()
    config.get("db.host")
    config.has("features.beta")

Nota importante:
    Não existe singleton de módulo. O programa host chama `load_config`
    uma vez durante o startup e repassa o `Config` a quem precisar.
"""

from .core.config import (
    Config,
    ConfigError,
    ParseError,
    ResolvedParameters,
    UndefinedPropertyError,
    UnreadableFileError,
    load_config,
)

__all__ = [
    "Config",
    "ConfigError",
    "ParseError",
    "ResolvedParameters",
    "UndefinedPropertyError",
    "UnreadableFileError",
    "load_config",
]
