# main.py
# Gera o markdown com os endereços atuais e anteriores dos contratos.
#
# Uso:
#   python main.py --deployment <pasta de deploy> --template <template.md> \
#       --templatePrevious <template-anteriores.md> --output <saida.md> [--debug]
from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import os
import sys

from assembler import build_document
from collector import VersionLimitError, collect_addresses
from records import RecordReaderError, folder_lookup
from renderer import UnresolvedPlaceholderError
from settings import Settings, check_contracts, load_settings, parse_contracts

logger = logging.getLogger("main")

# (nome exibido, dest no argparse)
REQUIRED_ARGS = [
    ("deployment", "deployment"),
    ("template", "template"),
    ("templatePrevious", "template_previous"),
    ("output", "output"),
]


class MissingArgumentError(ValueError):
    def __init__(self, missing: List[str]):
        super().__init__(", ".join(missing))
        self.missing = missing


class TemplateReadError(OSError):
    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Escreve o markdown de endereços de contratos a partir dos registros de deploy.",
        allow_abbrev=False,
    )
    parser.add_argument("--deployment", help="Pasta com os JSON de deploy (hardhat).")
    parser.add_argument("--template", help="Template markdown dos endereços atuais.")
    parser.add_argument("--templatePrevious", "--template-previous", dest="template_previous",
                        help="Template markdown de cada versão anterior.")
    parser.add_argument("--output", help="Arquivo markdown de saída (sobrescrito).")
    parser.add_argument("--contracts", help="Contratos separados por vírgula (padrão: settings).")
    parser.add_argument("--debug", action="store_true", help="Log de diagnóstico detalhado.")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Lê os args; desconhecidos viram warning, obrigatórios ausentes -> MissingArgumentError."""
    args, unknown = build_parser().parse_known_args(argv)
    for a in unknown:
        logger.warning("Unexpected argument '%s' - ignoring.", a)
    missing = [name for name, dest in REQUIRED_ARGS if getattr(args, dest) is None]
    if missing:
        raise MissingArgumentError(missing)
    return args


def read_template(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise TemplateReadError(f"Falha ao ler template {path}: {e}") from e


def write_output(path: str, content: str) -> None:
    # escreve num .tmp e troca, para nunca deixar saída pela metade
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    tmp = f"{path}.tmp"
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.remove(tmp)
        raise


def run(deployment: str, template_path: str, template_previous_path: str, output: str, cfg: Settings) -> str:
    """Pipeline completo. Só escreve `output` se tudo foi renderizado."""
    template = read_template(template_path)
    template_previous = read_template(template_previous_path)

    current, history = collect_addresses(
        folder_lookup(deployment), cfg.contracts,
        max_versions=cfg.max_versions, missing_marker=cfg.missing_marker,
    )
    logger.debug("Endereços atuais: %s", current)
    logger.debug("Endereços anteriores: %s", [(e.version, e.addresses) for e in history])

    content = build_document(
        cfg.contracts, current, history, template, template_previous,
        id_var=cfg.id_var, missing_marker=cfg.missing_marker,
    )
    logger.debug("Conteúdo a ser escrito em %s:\n%s", output, content)
    write_output(output, content)
    logger.info("Endereços escritos em %s (%d versões anteriores).", output, len(history))
    return content


def configure_logging(debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger().setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging("--debug" in argv)

    try:
        args = parse_args(argv)
    except MissingArgumentError as e:
        for name in e.missing:
            logger.error("Missing argument %s.", name)
        return 1
    logger.debug("Args: %s", vars(args))

    try:
        cfg = load_settings()
        if args.contracts:
            cfg.contracts = parse_contracts(args.contracts)
            check_contracts(cfg.contracts, cfg.id_var)
        run(args.deployment, args.template, args.template_previous, args.output, cfg)
    except (OSError, RecordReaderError, VersionLimitError, UnresolvedPlaceholderError, ValueError) as e:
        # TemplateReadError é OSError; falha de escrita da saída também cai aqui
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
