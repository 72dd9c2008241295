# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-09
# Description: main.py
# -----------------------------------------------------------------------------
"""
symvec command line.

  symvec upload symbols.jsonl [--batch-size 100] [--transport curl]
  symvec query --vector '[0.1, 0.2, ...]' --namespace type --top-k 5
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from config.Config import Config
from ingestion.PartitionProjector import IdSource
from utility.errors import ConfigError, SymVecError
from utility.logging_utils import LEVEL_NAMES, get_logger, set_level

logger = get_logger(__name__)


def _add_config_args(p: argparse.ArgumentParser, settings) -> None:
    p.add_argument("--api-key", default=None, help=f"Service API key (default: ${Config.ENV_VARS['api_key']})")
    p.add_argument("--project", default=None, help=f"Project id (default: ${Config.ENV_VARS['project']})")
    p.add_argument("--index", default=None, help=f"Index name (default: ${Config.ENV_VARS['index']})")
    p.add_argument(
        "--environment", default=None, help=f"Environment/region (default: ${Config.ENV_VARS['environment']})"
    )
    p.add_argument(
        "--transport", choices=["httpx", "curl"], default=settings.TRANSPORT,
        help="HTTP transport (default: %(default)s)",
    )
    p.add_argument(
        "--timeout", type=float, default=settings.HTTP_TIMEOUT,
        help="Per-request timeout in seconds (default: none)",
    )
    p.add_argument(
        "--log-level", type=str.upper, choices=LEVEL_NAMES, default=None,
        help="Log level (default: $SYM_LOG_LEVEL or INFO)",
    )


def build_parser() -> argparse.ArgumentParser:
    # Env tunables are checked on import; a bad value raises ConfigError here
    import settings

    parser = argparse.ArgumentParser(
        prog="symvec",
        description="Upload symbol name/type embeddings to a Pinecone index.",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True

    p = sub.add_parser("upload", help="Upload a JSONL file of symbol records")
    p.add_argument("input", type=Path, help="Path to the JSONL file")
    p.add_argument(
        "--batch-size", type=int, default=settings.BATCH_SIZE,
        help="Records per upsert call (default: %(default)s)",
    )
    p.add_argument(
        "--type-id-source", choices=[s.value for s in IdSource], default=settings.TYPE_ID_SOURCE,
        help="Hash used as vector id in the type namespace (default: %(default)s)",
    )
    _add_config_args(p, settings)
    p.set_defaults(func=cmd_upload)

    p = sub.add_parser("query", help="Query the index by vector")
    group = p.add_mutually_exclusive_group(required=True)
    group.add_argument("--vector", default=None, help="Query vector as a JSON array")
    group.add_argument("--vector-file", type=Path, default=None, help="File holding the JSON array")
    p.add_argument("--namespace", default=settings.NAME_NAMESPACE, help="Namespace (default: %(default)s)")
    p.add_argument("--top-k", type=int, default=10, help="Number of matches (default: %(default)s)")
    p.add_argument("--filter", default=None, help="Metadata filter as a JSON object")
    p.add_argument("--include-values", action="store_true", help="Return vector values with matches")
    _add_config_args(p, settings)
    p.set_defaults(func=cmd_query)

    return parser


def _resolve_config(args: argparse.Namespace) -> Config:
    return Config.from_env(
        api_key=args.api_key,
        project=args.project,
        index=args.index,
        environment=args.environment,
    )


def cmd_upload(args: argparse.Namespace) -> int:
    from cli.AppContainer import AppContainer

    if args.batch_size < 1:
        raise ConfigError(f"--batch-size must be >= 1, got {args.batch_size}")

    cfg = _resolve_config(args)
    logger.info("Resolved config: %s", cfg.summary())

    container = AppContainer(
        cfg,
        transport_kind=args.transport,
        batch_size=args.batch_size,
        type_id_source=args.type_id_source,
        timeout=args.timeout,
    )
    try:
        container.upload_service.upload_file(args.input)
    finally:
        container.close()
    return 0


def _load_json_arg(text: str, what: str):
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{what} is not valid JSON: {e}") from e


def cmd_query(args: argparse.Namespace) -> int:
    from cli.AppContainer import AppContainer

    raw_vector = args.vector if args.vector is not None else args.vector_file.read_text(encoding="utf-8")
    vector = _load_json_arg(raw_vector, "Query vector")
    if not isinstance(vector, list) or not all(isinstance(x, (int, float)) for x in vector):
        raise ConfigError("Query vector must be a JSON array of numbers")
    if args.top_k < 1:
        raise ConfigError(f"--top-k must be >= 1, got {args.top_k}")
    flt = _load_json_arg(args.filter, "--filter") if args.filter else None

    cfg = _resolve_config(args)
    container = AppContainer(cfg, transport_kind=args.transport, timeout=args.timeout)
    try:
        resp = container.query_service.query(
            vector,
            top_k=args.top_k,
            namespace=args.namespace,
            include_values=args.include_values,
            filter=flt,
        )
    finally:
        container.close()

    for hit in container.query_service.to_hits(resp):
        print(json.dumps(hit))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
        if args.log_level:
            set_level(args.log_level)
        return args.func(args)
    except SymVecError as e:
        logger.error("Run aborted at %s stage: %s", e.stage, e)
        print(f"error: {e.stage}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
