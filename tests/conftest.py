# tests/conftest.py
"""
Fixtures compartilhados para testes do config_cascade.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML semelhantes ao uso real (defaults + overrides)
- um diretório de configuração temporário e um helper de escrita
- ambiente e argv isolados do processo de teste

Decisões arquiteturais:
    - Arquivos são escritos apenas sob `tmp_path`
    - Ambiente e argv são passados explicitamente ao loader, nunca
      herdados do processo que executa o pytest
    - Dados retornados são determinísticos e isolados

Invariantes:
    - Nenhuma fixture altera `os.environ` ou `sys.argv` globais
    - Todas as fixtures são seguras para execução em paralelo
"""

from pathlib import Path
from typing import Callable, Dict

import pytest


@pytest.fixture
def project_like_default_yaml() -> str:
    """
    Conteúdo típico de um `default.yaml`: a base completa sobre a qual
    os demais arquivos aplicam overrides.
    """
    return """\
server:
  host: 0.0.0.0
  port: 8080
db:
  host: localhost
  pool: 5
features:
  beta: false
  tags: [core]
"""


@pytest.fixture
def project_like_production_yaml() -> str:
    """Override de environment (`production.yaml`)."""
    return """\
server:
  port: 80
db:
  host: db.prod.internal
features:
  tags: [prod]
"""


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    d = tmp_path / "config"
    d.mkdir()
    return d


@pytest.fixture
def write_config(config_dir: Path) -> Callable[[str, str], Path]:
    """
    Helper que escreve `<config_dir>/<filename>` com o conteúdo informado.

    Returns:
        Callable[[str, str], Path]: função (filename, content) -> caminho.
    """

    def _write(filename: str, content: str) -> Path:
        path = config_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def isolated_env(config_dir: Path) -> Dict[str, str]:
    """
    Ambiente mínimo apontando para o diretório temporário.

    O environment não é definido; cada teste adiciona o que precisa.
    """
    return {"NODE_CONFIG_DIR": str(config_dir)}
