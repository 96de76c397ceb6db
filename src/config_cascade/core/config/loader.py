# src/config_cascade/core/config/loader.py
"""
Loader canônico de configuração em cascata.

Este módulo é responsável por localizar, ler e dobrar os arquivos de
configuração de um diretório em uma configuração agregada única.

A configuração é resolvida a partir de até seis nomes base, em ordem
crescente de precedência:

    default, <env>, local, local-<env>, application, application-<env>

cada um tentado com as extensões `yaml` e `yml`, nesta ordem.

Responsabilidades do módulo:
    - Ler e parsear arquivos YAML individuais
    - Ignorar silenciosamente arquivos ausentes ou vazios
    - Dobrar os conteúdos via `deep_merge`, respeitando a precedência
    - Expor a função de inicialização `load_config`

Princípios fundamentais:
    - Carregamento síncrono, executado uma única vez na inicialização
    - Nenhum estado global: o host recebe e é dono do objeto `Config`
    - Erros de leitura e de parse são fatais

Invariantes:
    - Arquivo ausente ou vazio nunca afeta a configuração agregada
    - Arquivos de maior precedência sempre sobrescrevem os anteriores
    - A configuração agregada não é mutada após a construção

Limites explícitos:
    - Não valida schema nem semântica
    - Não observa alterações em disco
    - Não suporta formatos além de YAML
"""

from __future__ import annotations

import logging
import os
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import yaml  # PyYAML

from .accessor import Config
from .errors import UnreadableFileError
from .merge import deep_merge
from .params import EXTENSIONS, base_names, candidate_files, resolve_parameters

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


class StringKeyLoader(yaml.SafeLoader):
    """
    SafeLoader cujas chaves de mapeamento são sempre strings.

    Chaves escalares mantêm o texto exatamente como escrito no arquivo
    (`8080`, `on`, `'404'` viram "8080", "on" e "404"), de modo que o
    acesso por caminho pontuado e o merge entre arquivos operem sobre as
    mesmas chaves. Valores continuam resolvidos pelas regras do SafeLoader.
    """

    def construct_mapping(self, node, deep=False):
        if not isinstance(node, yaml.MappingNode):
            raise yaml.constructor.ConstructorError(
                None, None, f"esperado um mapeamento, encontrado {node.id}", node.start_mark
            )

        # expande chaves de merge (`<<`) antes de construir
        self.flatten_mapping(node)

        mapping = {}
        for key_node, value_node in node.value:
            if isinstance(key_node, yaml.ScalarNode):
                key = key_node.value
            else:
                key = str(self.construct_object(key_node, deep=True))
            mapping[key] = self.construct_object(value_node, deep=deep)

        return mapping


def _is_empty_document(data: Any) -> bool:
    # dicts e listas, mesmo vazios, são mesclados; escalares falsy não
    if isinstance(data, (dict, list)):
        return False
    return not data


def load_file(directory: str, base_name: str, extension: str) -> Optional[Any]:
    """
    Carrega e parseia um único arquivo de configuração, se existir.

    Decisões arquiteturais:
        - Arquivo inexistente ou com tamanho zero retorna None
        - Falhas de stat são tratadas como arquivo inexistente
        - Um único BOM inicial é removido antes do parse
        - Chaves de mapeamento são sempre strings (`StringKeyLoader`)
        - Erros do parser YAML são propagados sem modificação
        - Bytes UTF-8 inválidos tornam o arquivo ilegível; não há
          substituição silenciosa por U+FFFD

    Args:
        directory (str): Diretório de configuração.
        base_name (str): Nome base (ex.: "local-production").
        extension (str): Extensão sem ponto (ex.: "yaml").

    Returns:
        Optional[Any]: Estrutura parseada (dict, list, escalar ou None
        para documento vazio), ou None quando o arquivo é ignorado.

    Raises:
        UnreadableFileError: Se o arquivo existe, não está vazio e não
            pode ser lido.
        yaml.YAMLError: Se o conteúdo não é YAML válido.
    """
    path = os.path.join(directory, f"{base_name}.{extension}")

    try:
        stat = os.stat(path)
    except OSError:
        logger.debug("Arquivo ausente, ignorado: %s", path)
        return None

    if stat.st_size < 1:
        logger.debug("Arquivo vazio, ignorado: %s", path)
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise UnreadableFileError(path) from exc

    if content.startswith(_BOM):
        content = content[len(_BOM):]

    return yaml.load(content, Loader=StringKeyLoader)


def merge_all(
    directory: str,
    names: Sequence[str],
    extensions: Sequence[str] = EXTENSIONS,
) -> Tuple[Any, List[str]]:
    """
    Dobra todos os arquivos candidatos em uma configuração agregada.

    Para cada nome base (em ordem de precedência) e cada extensão, o
    arquivo é carregado via `load_file` e mesclado no agregado, que começa
    como um dicionário vazio. Documentos que resultam em None, False, 0 ou
    "" são ignorados como se o arquivo não existisse.

    Args:
        directory (str): Diretório de configuração.
        names (Sequence[str]): Nomes base, do menos ao mais prioritário.
        extensions (Sequence[str]): Extensões tentadas por nome base.

    Returns:
        Tuple[Any, List[str]]: Configuração agregada e caminhos dos
        arquivos efetivamente mesclados, na ordem do merge.
    """
    aggregate: Any = {}
    sources: List[str] = []

    for name, ext in candidate_files(names, extensions):
        data = load_file(directory, name, ext)
        if _is_empty_document(data):
            continue

        aggregate = deep_merge(aggregate, data)
        sources.append(os.path.join(directory, f"{name}.{ext}"))
        logger.debug("Arquivo mesclado: %s", sources[-1])

    return aggregate, sources


def load_config(
    *,
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    cwd: Optional[str] = None,
) -> Config:
    """
    Resolve parâmetros, carrega os arquivos e retorna a configuração final.

    Esta é a função de inicialização do pacote. Deve ser chamada uma vez
    pela sequência de startup do programa host; o `Config` retornado é
    imutável e pode ser compartilhado com qualquer componente.

    Args:
        argv (Optional[Sequence[str]]): Argumentos; padrão `sys.argv[1:]`.
        environ (Optional[Mapping[str, str]]): Ambiente; padrão `os.environ`.
        cwd (Optional[str]): Base do diretório padrão; padrão `os.getcwd()`.

    Returns:
        Config: Configuração agregada com acesso por caminho pontuado.

    Raises:
        UnreadableFileError: Se algum arquivo presente não puder ser lido.
        yaml.YAMLError: Se algum arquivo contiver YAML inválido.
    """
    params = resolve_parameters(argv=argv, environ=environ, cwd=cwd)
    aggregate, sources = merge_all(params.config_dir, base_names(params.env))

    logger.info(
        "Configuração carregada: env=%s dir=%s arquivos=%d",
        params.env,
        params.config_dir,
        len(sources),
    )

    return Config(aggregate, params=params, sources=sources)
