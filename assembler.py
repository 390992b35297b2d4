# assembler.py
# Monta o documento final: seção atual + uma seção por versão anterior.
from __future__ import annotations
from typing import Dict, List, Optional
import logging

from collector import MISSING_MARKER, VersionEntry, normalize_missing
from renderer import render_template

logger = logging.getLogger(__name__)

ID_VAR = "id"


def assemble_document(current_section: str, previous_sections: List[str]) -> str:
    return current_section + "".join(previous_sections)


def render_previous_sections(
    names: List[str],
    history: List[VersionEntry],
    template_previous: str,
    id_var: str = ID_VAR,
) -> List[str]:
    variables = list(names) + [id_var]
    return [render_template(variables, entry.as_lookup(id_var), template_previous) for entry in history]


def build_document(
    names: List[str],
    current: Dict[str, Optional[str]],
    history: List[VersionEntry],
    template: str,
    template_previous: str,
    id_var: str = ID_VAR,
    missing_marker: str = MISSING_MARKER,
) -> str:
    """Renderiza os dois templates e concatena (atual primeiro, depois v1..vk)."""
    logger.debug("Montando seção dos endereços atuais...")
    current_section = render_template(names, normalize_missing(current, missing_marker), template)
    logger.debug("Montando seção das versões anteriores (%d)...", len(history))
    previous_sections = render_previous_sections(names, history, template_previous, id_var)
    return assemble_document(current_section, previous_sections)
