# app.py — Preview dos endereços de contratos (Streamlit UI)
from __future__ import annotations
import streamlit as st

from settings import check_contracts, load_settings, parse_contracts
from collector import VersionLimitError, collect_addresses
from records import RecordReaderError, folder_lookup
from assembler import build_document
from renderer import UnresolvedPlaceholderError
from tables import history_dataframe, history_table_md
from template_md import TEMPLATE, TEMPLATE_PREVIOUS

# >>> MANUAL INPUT (opcional): mostrar a tabela do histórico como DataFrame
SHOW_DATAFRAMES = True

st.set_page_config(page_title="Contract addresses", layout="wide")
st.title("📜 Contract addresses — preview")

# ---------- Carrega configs ----------
try:
    cfg = load_settings()
except ValueError as e:
    st.error(f"Configuração inválida: {e}")
    st.stop()

# ---------- Sidebar ----------
st.sidebar.header("Configurações")
deployment_dir = st.sidebar.text_input("Pasta de deploy", value=cfg.deployment_dir or "")
contracts = parse_contracts(st.sidebar.text_input("Contratos", value=", ".join(cfg.contracts)))
tpl_file = st.sidebar.file_uploader("Template (atuais)", type=["md", "txt"])
tpl_prev_file = st.sidebar.file_uploader("Template (anteriores)", type=["md", "txt"])

if not deployment_dir:
    st.info("Informe a pasta de deploy na barra lateral.")
    st.stop()
try:
    check_contracts(contracts, cfg.id_var)
except ValueError as e:
    st.warning(str(e))
    st.stop()

template = tpl_file.getvalue().decode("utf-8") if tpl_file else TEMPLATE
template_previous = tpl_prev_file.getvalue().decode("utf-8") if tpl_prev_file else TEMPLATE_PREVIOUS

# ---------- Coleta + render ----------
try:
    current, history = collect_addresses(
        folder_lookup(deployment_dir), contracts,
        max_versions=cfg.max_versions, missing_marker=cfg.missing_marker,
    )
    doc_md = build_document(
        contracts, current, history, template, template_previous,
        id_var=cfg.id_var, missing_marker=cfg.missing_marker,
    )
except (RecordReaderError, VersionLimitError, UnresolvedPlaceholderError) as e:
    st.error(f"Falhou: {e}")
    st.stop()

col_main, col_side = st.columns([4, 1])
with col_main:
    st.markdown(doc_md)

with col_side:
    st.download_button("⬇️ Baixar Markdown", data=doc_md, file_name="contract-addresses.md")
    st.metric("Versões anteriores", len(history))

if SHOW_DATAFRAMES:
    with st.expander("📊 Histórico de endereços"):
        df = history_dataframe(contracts, current, history, cfg.missing_marker)
        st.dataframe(df, use_container_width=True)
        st.code(history_table_md(df), language="markdown")
