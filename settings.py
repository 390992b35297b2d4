# settings.py
# Carrega configs a partir de st.secrets (se existir) ou variáveis de ambiente.
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import os

import streamlit as st

from assembler import ID_VAR
from collector import DEFAULT_MAX_VERSIONS, MISSING_MARKER

# Contratos do core, na ordem em que aparecem no documento
DEFAULT_CONTRACTS = ["Mangrove", "MgvCleaner", "MgvReader", "MgvOracle"]


@dataclass
class Settings:
    contracts: List[str]
    missing_marker: str
    id_var: str
    max_versions: int
    deployment_dir: Optional[str]  # só usado como padrão na UI de preview


def _get_secret(path: str, default=None):
    """Busca em st.secrets usando 'a.b.c' como caminho. Se não achar, retorna default."""
    try:
        cur = st.secrets
        for k in path.split("."):
            cur = cur[k]
        return cur
    except Exception:
        # sem secrets.toml o Streamlit levanta FileNotFoundError/KeyError
        return default


def parse_contracts(value) -> List[str]:
    """Lista de contratos sem vazios nem repetidos, na ordem em que aparecem."""
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        items = str(value).split(",")
    out: List[str] = []
    for c in items:
        c = c.strip()
        if c and c not in out:
            out.append(c)
    return out


def check_contracts(contracts: List[str], id_var: str) -> None:
    if not contracts:
        raise ValueError("Lista de contratos vazia (addresses.contracts ou env ADDRESSES_CONTRACTS).")
    if id_var in contracts:
        raise ValueError(f"id_var '{id_var}' colide com um nome de contrato.")


def load_settings() -> Settings:
    raw_contracts = _get_secret("addresses.contracts") or os.getenv("ADDRESSES_CONTRACTS")
    contracts = parse_contracts(raw_contracts) if raw_contracts else list(DEFAULT_CONTRACTS)

    missing_marker = _get_secret("addresses.missing_marker") or os.getenv("ADDRESSES_MISSING_MARKER") or MISSING_MARKER
    id_var = str(_get_secret("addresses.id_var") or os.getenv("ADDRESSES_ID_VAR") or ID_VAR)
    check_contracts(contracts, id_var)

    raw_max = _get_secret("addresses.max_versions") or os.getenv("ADDRESSES_MAX_VERSIONS") or DEFAULT_MAX_VERSIONS
    try:
        max_versions = int(raw_max)
    except (TypeError, ValueError):
        raise ValueError(f"max_versions inválido: {raw_max!r}") from None
    if max_versions < 1:
        raise ValueError(f"max_versions deve ser >= 1 (recebido {max_versions}).")

    deployment_dir = _get_secret("addresses.deployment_dir") or os.getenv("ADDRESSES_DEPLOYMENT_DIR")

    return Settings(
        contracts=contracts,
        missing_marker=str(missing_marker),
        id_var=id_var,
        max_versions=max_versions,
        deployment_dir=deployment_dir,
    )
