"""Entry point — wires Config → analysis client → rich output."""
import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from owlverload_client.analysis.barcode import BarcodeAnalysisClient
from owlverload_client.analysis.image import ImageAnalysisClient
from owlverload_client.config import Config
from owlverload_client.constants import (
    CLI_DESCRIPTION,
    CLI_PROG,
    FIELD_ANALYSIS,
    FIELD_PAYLOAD,
    MSG_CLI_ERROR,
    MSG_CLI_NO_TOKEN,
    MSG_CLI_UNPARSED,
    TITLE_BARCODE,
    TITLE_IMAGE,
)
from owlverload_client.errors import AnalysisError, AnalysisParseError
from owlverload_client.models import BarcodeAnalysis
from owlverload_client.parsing import parse_image_response

console = Console()


def _setup_logging(level: str) -> None:
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    list(map(root.removeHandler, root.handlers[:]))
    root.addHandler(RichHandler(rich_tracebacks=True))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=CLI_PROG, description=CLI_DESCRIPTION)
    parser.add_argument("--token", help="bearer token (defaults to OWLVERLOAD_AUTH_TOKEN)")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("barcode", help="analyze a barcode").add_argument("barcode")
    sub.add_parser("image", help="analyze a product photo").add_argument(
        "image", help="file path or data URL"
    )
    return parser


# ── rendering ─────────────────────────────────────────────────────────────────


def _table(title: str, rows: list[tuple[str, Any]]) -> Table:
    table = Table(title=title, show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    list(map(lambda row: table.add_row(row[0], Text(str(row[1]))), rows))
    return table


def render_barcode(response: dict[str, Any]) -> Table:
    analysis = BarcodeAnalysis.from_payload(response.get(FIELD_PAYLOAD))
    return _table(TITLE_BARCODE, [
        ("English", analysis.name.english),
        ("Korean", analysis.name.korean),
        ("Japanese", analysis.name.japanese),
        ("Chinese", analysis.name.chinese),
        ("Expiry Date", analysis.expiry_date),
        ("Ingredients", analysis.ingredients_translated),
        ("Contains Alcohol", analysis.contains_alcohol),
        ("Halal Status", analysis.halal_status),
        ("Reasoning", analysis.reasoning),
        ("New Item Created", "Yes" if analysis.is_new_item else "No"),
    ])


def render_image(response: dict[str, Any]) -> Table | str:
    try:
        analysis = parse_image_response(response)
    except AnalysisParseError as e:
        console.print(MSG_CLI_UNPARSED % e, style="yellow", markup=False)
        payload = response.get(FIELD_PAYLOAD)
        return str(payload.get(FIELD_ANALYSIS, "")) if isinstance(payload, dict) else ""
    return _table(TITLE_IMAGE, [
        ("Product Name", analysis.product_name),
        ("Expiry Date", analysis.expiry_date),
        ("Ingredients", analysis.ingredients),
        ("Alcohol", analysis.alcohol),
        ("Halal", analysis.halal),
        ("Reasoning", analysis.reasoning),
    ])


# ── commands ──────────────────────────────────────────────────────────────────


async def _run(args: argparse.Namespace, config: Config, token: str) -> Table | str:
    match args.command:
        case "barcode":
            client = BarcodeAnalysisClient(config.api_url)
            return render_barcode(await client.analyze(args.barcode, token))
        case "image":
            client = ImageAnalysisClient(config.api_url)
            return render_image(await client.analyze(args.image, token))


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = Config.from_env()
    _setup_logging(config.log_level)

    token = args.token or config.auth_token
    match token:
        case None | "":
            console.print(MSG_CLI_NO_TOKEN, style="red")
            return 2
        case _:
            pass

    try:
        result = asyncio.run(_run(args, config, token))
    except AnalysisError as e:
        console.print(MSG_CLI_ERROR % e.message, style="red", markup=False)
        return 1
    console.print(result, markup=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
