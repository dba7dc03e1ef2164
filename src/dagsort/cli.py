"""
Command-line interface for dagsort.

Usage:
    # Sort a graph document (YAML or JSON)
    dagsort sort graph.yaml

    # Plain text output, report written to a file
    dagsort sort graph.json --format text --output order.txt

    # Check an ordering against a graph
    dagsort verify graph.yaml --order 0,1,4,3,5,2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .config import OUTPUT_FORMATS, ConfigError, SorterConfig, load_config
from .errors import GraphError
from .graph import is_topological_order, validate_graph
from .io import DocumentError, load_graph, write_text
from .result import AbsentInput, CycleDetected, InvalidNodeReference, Sorted, outcome_from_error, try_sort_dag

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_ABSENT_INPUT = 3
EXIT_INVALID_NODE_REFERENCE = 4
EXIT_CYCLE_DETECTED = 5
EXIT_BAD_DOCUMENT = 6

_EXIT_CODES = {
    Sorted: EXIT_OK,
    AbsentInput: EXIT_ABSENT_INPUT,
    InvalidNodeReference: EXIT_INVALID_NODE_REFERENCE,
    CycleDetected: EXIT_CYCLE_DETECTED,
}


def _parse_order(value: str) -> list[int]:
    try:
        return [int(item) for item in value.split(",") if item.strip()]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"order must be comma-separated integers: {value!r}") from e


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", type=Path, default=None, help="Path to a YAML config file.")
    common.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format (overrides config).")
    common.add_argument("--output", type=Path, default=None, help="Write the report here instead of stdout.")

    parser = argparse.ArgumentParser(prog="dagsort", description="Topologically sort a DAG given as adjacency lists.")
    sub = parser.add_subparsers(dest="command", required=True)

    sort_p = sub.add_parser("sort", parents=[common], help="Print a topological ordering of the graph.")
    sort_p.add_argument("graph", type=Path, help="Graph document (YAML or JSON).")

    verify_p = sub.add_parser("verify", parents=[common], help="Check whether an ordering is topological for the graph.")
    verify_p.add_argument("graph", type=Path, help="Graph document (YAML or JSON).")
    verify_p.add_argument("--order", type=_parse_order, required=True, help="Comma-separated node indices.")
    return parser


def render(report: dict[str, Any], fmt: str, indent: int) -> str:
    if fmt == "json":
        return json.dumps(report, indent=indent) + "\n"
    if report["ok"] and "order" in report:
        return " ".join(str(n) for n in report["order"]) + "\n"
    if report["ok"]:
        return f"{report['kind']}\n"
    return f"{report['kind']}: {report.get('message', '')}\n"


def emit(report: dict[str, Any], cfg: SorterConfig, fmt: str, output: Path | None) -> None:
    text = render(report, fmt, cfg.json_indent)
    if output is not None:
        write_text(output, text)
    else:
        sys.stdout.write(text)


def run_sort(graph: list[list[int]] | None) -> tuple[dict[str, Any], int]:
    outcome = try_sort_dag(graph)
    if not outcome.ok:
        logger.error("Sort failed: %s", outcome.message)
    return outcome.to_dict(), _EXIT_CODES[type(outcome)]


def run_verify(graph: list[list[int]] | None, order: list[int]) -> tuple[dict[str, Any], int]:
    try:
        validate_graph(graph)
    except GraphError as e:
        outcome = outcome_from_error(e)
        logger.error("Verify failed: %s", outcome.message)
        return outcome.to_dict(), _EXIT_CODES[type(outcome)]
    if is_topological_order(graph, order):
        return {"ok": True, "kind": "verified", "order": order}, EXIT_OK
    return {
        "ok": False,
        "kind": "rejected",
        "order": order,
        "message": "Order is not a topological ordering of the graph",
    }, EXIT_REJECTED


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config)
    except ConfigError as e:
        sys.stderr.write(f"{e}\n")
        return EXIT_BAD_DOCUMENT
    logging.basicConfig(level=cfg.log_level, format="%(levelname)s %(name)s: %(message)s")
    fmt = args.format or cfg.output_format

    try:
        graph = load_graph(args.graph)
    except DocumentError as e:
        logger.error("%s", e)
        emit({"ok": False, "kind": "invalid_document", "message": str(e)}, cfg, fmt, args.output)
        return EXIT_BAD_DOCUMENT

    if args.command == "sort":
        report, code = run_sort(graph)
    else:
        report, code = run_verify(graph, args.order)
    emit(report, cfg, fmt, args.output)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
