# tables.py
# Tabela do histórico de endereços (atual + versões anteriores).
from __future__ import annotations
from typing import Dict, List, Optional
import pandas as pd

from collector import MISSING_MARKER, VersionEntry, normalize_missing


def history_dataframe(
    names: List[str],
    current: Dict[str, Optional[str]],
    history: List[VersionEntry],
    missing_marker: str = MISSING_MARKER,
) -> pd.DataFrame:
    """Uma linha por deploy ('current', depois v1..vk) e uma coluna por contrato."""
    rows = [["current"] + [normalize_missing(current, missing_marker).get(n, missing_marker) for n in names]]
    for entry in history:
        rows.append([f"v{entry.version}"] + [entry.addresses.get(n, missing_marker) for n in names])
    return pd.DataFrame(rows, columns=["Deployment"] + list(names))


def history_table_md(df: pd.DataFrame) -> str:
    if df.empty:
        return "_Sem dados_"
    cols = [str(c) for c in df.columns]
    lines = ["| " + " | ".join(cols) + " |", "|" + "---|" * len(cols)]
    for _, row in df.iterrows():
        lines.append("| " + " | ".join(str(v) for v in row.tolist()) + " |")
    return "\n".join(lines)
