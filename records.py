# records.py
# Leitura dos registros de deploy (JSON estilo hardhat: <pasta>/<Contrato><sufixo>.json).
from __future__ import annotations
from typing import Dict, List, Optional
import json
import logging
import os

logger = logging.getLogger(__name__)

VERSION_SUFFIX_PREFIX = "-v"


class RecordReaderError(RuntimeError):
    """Registro existe mas não pôde ser lido (ou a pasta de deploy não existe)."""


def version_suffix(version: int) -> str:
    return f"{VERSION_SUFFIX_PREFIX}{version}"


def _record_path(folder: str, name: str, suffix: str = "") -> str:
    return os.path.join(folder, f"{name}{suffix}.json")


def read_contract_address(folder: str, name: str, suffix: str = "") -> Optional[str]:
    """Retorna o endereço do contrato ou None se não houver registro.

    Arquivo ausente é um resultado normal (None). Arquivo ilegível ou JSON inválido
    é erro fatal.
    """
    if not os.path.isdir(folder):
        raise RecordReaderError(f"Pasta de deploy não encontrada: {folder}")
    path = _record_path(folder, name, suffix)
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        # ValueError cobre JSON inválido e UTF-8 inválido
        raise RecordReaderError(f"Falha ao ler {path}: {e}") from e
    address = data.get("address") if isinstance(data, dict) else None
    if not address:
        logger.debug("Registro sem endereço: %s", path)
        return None
    return str(address)


def read_contract_addresses(folder: str, names: List[str], suffix: str = "") -> Dict[str, Optional[str]]:
    return {name: read_contract_address(folder, name, suffix) for name in names}


def folder_lookup(folder: str):
    """Fecha a pasta num callable (name, suffix) -> endereço | None, usado pelo coletor."""
    def _lookup(name: str, suffix: str = "") -> Optional[str]:
        return read_contract_address(folder, name, suffix)
    return _lookup
