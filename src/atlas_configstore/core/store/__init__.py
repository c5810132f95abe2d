# src/atlas_configstore/core/store/__init__.py
"""
Camada de orquestração do Atlas ConfigStore.

Contém o `ConfigStore`, suas opções, o lock leitores-escritor e o
adaptador de leitura de arquivos.
"""

from .options import Options
from .store import ConfigStore

__all__ = ["ConfigStore", "Options"]
