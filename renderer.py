# renderer.py
from __future__ import annotations
from typing import List, Mapping, Tuple
import re


class UnresolvedPlaceholderError(KeyError):
    """Placeholder presente no template sem valor correspondente no mapping."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Sem valor para o placeholder '{{{{ {self.key} }}}}'"


def placeholder_pattern(key: str) -> re.Pattern:
    return re.compile(r"\{\{\s*" + re.escape(key) + r"\s*\}\}")


def _overlaps(start: int, end: int, spans: List[Tuple[int, int, str]]) -> bool:
    return any(start < e and s < end for s, e, _ in spans)


def render_template(names: List[str], lookup: Mapping[str, object], template: str) -> str:
    """Substitui a PRIMEIRA ocorrência de {{ key }} para cada key em `names`.

    As posições são buscadas no template original e trocadas numa passada só, então
    um valor inserido nunca é reprocessado. Placeholders fora de `names` ficam como estão.
    Key repetida em `names` pega a próxima ocorrência ainda livre.
    Key em `names` sem valor em `lookup` -> UnresolvedPlaceholderError.
    """
    spans: List[Tuple[int, int, str]] = []
    for key in names:
        m = next(
            (m for m in placeholder_pattern(key).finditer(template)
             if not _overlaps(m.start(), m.end(), spans)),
            None,
        )
        if m is None:
            continue
        if key not in lookup:
            raise UnresolvedPlaceholderError(key)
        spans.append((m.start(), m.end(), str(lookup[key])))

    spans.sort()
    out = []
    pos = 0
    for start, end, value in spans:
        out.append(template[pos:start])
        out.append(value)
        pos = end
    out.append(template[pos:])
    return "".join(out)
