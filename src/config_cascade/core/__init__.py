# src/config_cascade/core/__init__.py
"""
Core do config_cascade.

Reúne a implementação da configuração em cascata, independente de
qualquer framework, CLI ou programa host.

Componentes principais:
    - config → parâmetros, loader, merge, accessor e hashing

Limites explícitos:
    - Não configura handlers de logging
    - Não mantém estado global entre chamadas
"""
