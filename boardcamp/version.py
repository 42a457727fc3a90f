"""
Centralização da versão do aplicativo
- Lê de variável de ambiente APP_VERSION ou do arquivo VERSION
"""
import os

DEFAULT_VERSION = "1.0.0"


def read_version(path: str = "VERSION") -> str:
    """Versão declarada em APP_VERSION, no arquivo VERSION ou a padrão"""
    version = os.getenv("APP_VERSION")
    if version:
        return version
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip() or DEFAULT_VERSION
    return DEFAULT_VERSION


APP_VERSION = read_version()
