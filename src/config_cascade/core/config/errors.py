# src/config_cascade/core/config/errors.py
"""
Exceções canônicas da camada de configuração do config_cascade.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento dos arquivos de configuração e a consulta de propriedades
na configuração agregada.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Falhas de carregamento são fatais
    - Falhas de consulta são recuperáveis pelo chamador

Invariantes:
    - Todas as exceções próprias herdam de `ConfigError`
    - Erros de parse do YAML não são encapsulados (ver `ParseError`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do loader nem do accessor
"""

from typing import Any

import yaml


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de qualquer falha de carregamento ou consulta
    levantada pelo config_cascade.
    """


class UnreadableFileError(ConfigError):
    """
    Exceção levantada quando um arquivo de configuração existe, não está
    vazio, mas não pode ser lido (permissão, falha de I/O, encoding).

    Decisões arquiteturais:
        - Arquivo ausente ou vazio não é erro (é ignorado pelo loader)
        - Arquivo presente e ilegível aborta o carregamento

    Attributes:
        path (str): Caminho completo do arquivo ilegível.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Arquivo de configuração {path} não pode ser lido")


class UndefinedPropertyError(ConfigError):
    """
    Exceção levantada por `Config.get` quando o caminho pontuado solicitado
    não resolve para nenhum valor na configuração agregada.

    Valores falsy (None, 0, False, "") são resultados válidos e nunca
    disparam esta exceção.

    Attributes:
        path (str): Caminho pontuado original (ex.: "db.host").
    """

    def __init__(self, path: Any) -> None:
        self.path = path
        super().__init__(f'Propriedade de configuração "{path}" não está definida')


# Conteúdo YAML malformado é propagado sem modificação pelo loader.
ParseError = yaml.YAMLError
