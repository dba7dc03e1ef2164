from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .errors import GraphError
from .graph import from_edges

logger = logging.getLogger(__name__)

_ADJACENCY = {
    "type": "array",
    "items": {
        "type": ["array", "null"],
        "items": {"type": "integer"},
    },
}

GRAPH_DOCUMENT_SCHEMA: dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "oneOf": [
        {"type": "null"},
        _ADJACENCY,
        {
            "type": "object",
            "required": ["graph"],
            "properties": {"graph": {"oneOf": [{"type": "null"}, _ADJACENCY]}},
        },
        {
            "type": "object",
            "required": ["nodes", "edges"],
            "not": {"required": ["graph"]},
            "properties": {
                "nodes": {"type": "integer", "minimum": 0},
                "edges": {
                    "type": "array",
                    "items": {
                        "type": "array",
                        "items": {"type": "integer"},
                        "minItems": 2,
                        "maxItems": 2,
                    },
                },
            },
        },
    ],
}


class DocumentError(Exception):
    """Raised when a graph document cannot be read or has the wrong shape."""


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def read_text(p: Path) -> str:
    return p.read_text(encoding="utf-8")


def write_text(p: Path, s: str) -> None:
    ensure_dir(p.parent)
    p.write_text(s, encoding="utf-8")


def parse_graph_document(raw: Any) -> list[list[int]] | None:
    """Turn a decoded document into adjacency lists, or None for no graph.

    Only the document shape is checked here; node index bounds are left to
    the sorter so they are reported as InvalidNodeReferenceError.
    """
    try:
        jsonschema.validate(raw, GRAPH_DOCUMENT_SCHEMA)
    except jsonschema.ValidationError as e:
        raise DocumentError(f"Invalid graph document: {e.message}") from e

    if raw is None or isinstance(raw, list):
        return raw
    if "graph" in raw:
        return raw["graph"]
    try:
        return from_edges(raw["nodes"], [tuple(edge) for edge in raw["edges"]])
    except (GraphError, ValueError) as e:
        raise DocumentError(f"Invalid graph document: {e}") from e


def load_graph(path: Path) -> list[list[int]] | None:
    """Load a YAML or JSON graph document from *path*."""
    try:
        raw = yaml.safe_load(read_text(path))
    except OSError as e:
        raise DocumentError(f"Cannot read graph document {path}: {e}") from e
    except yaml.YAMLError as e:
        raise DocumentError(f"Cannot parse graph document {path}: {e}") from e
    graph = parse_graph_document(raw)
    logger.debug("Loaded graph document %s", path)
    return graph
