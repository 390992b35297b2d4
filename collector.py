# collector.py
# Coleta endereços atuais e o histórico de versões (-v1, -v2, ...) dos contratos.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple
import logging

from records import version_suffix

logger = logging.getLogger(__name__)

MISSING_MARKER = "none"
DEFAULT_MAX_VERSIONS = 1000

Lookup = Callable[[str, str], Optional[str]]


class VersionLimitError(RuntimeError):
    """O teto de versões foi atingido e ainda havia endereços sendo encontrados."""


@dataclass(frozen=True)
class VersionEntry:
    version: int
    addresses: Dict[str, str] = field(default_factory=dict)

    def as_lookup(self, id_var: str = "id") -> Dict[str, str]:
        """Mapping para o template de versões anteriores (endereços + id da versão)."""
        out = dict(self.addresses)
        out[id_var] = str(self.version)
        return out


def normalize_missing(record: Dict[str, Optional[str]], marker: str = MISSING_MARKER) -> Dict[str, str]:
    return {name: (addr if addr is not None else marker) for name, addr in record.items()}


def _query(lookup: Lookup, names: List[str], suffix: str) -> Dict[str, Optional[str]]:
    return {name: lookup(name, suffix) for name in names}


def collect_addresses(
    lookup: Lookup,
    names: List[str],
    max_versions: int = DEFAULT_MAX_VERSIONS,
    missing_marker: str = MISSING_MARKER,
) -> Tuple[Dict[str, Optional[str]], List[VersionEntry]]:
    """Retorna (endereços atuais, histórico em ordem crescente de versão).

    O histórico para na primeira versão em que nenhum contrato tem registro; essa
    versão não entra no resultado. Ausências dentro de uma versão viram `missing_marker`.
    Os endereços atuais ficam com None onde não há registro. Mais de `max_versions`
    versões com registro -> VersionLimitError.
    """
    if max_versions < 1:
        raise ValueError("max_versions deve ser >= 1")

    current = _query(lookup, names, "")

    history: List[VersionEntry] = []
    v = 1
    while True:
        candidate = _query(lookup, names, version_suffix(v))
        absent = sum(1 for addr in candidate.values() if addr is None)
        if absent == len(candidate):
            break
        # a versão max_versions + 1 só é consultada para confirmar que o histórico acabou
        if v > max_versions:
            raise VersionLimitError(
                f"Ainda há registros na versão {v} (teto {max_versions}). Aumente max_versions."
            )
        history.append(VersionEntry(version=v, addresses=normalize_missing(candidate, missing_marker)))
        v += 1

    logger.debug("Versões anteriores encontradas: %d", len(history))
    return current, history
