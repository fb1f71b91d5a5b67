"""Run the API with uvicorn: ``python -m blogapi [--host H] [--port P] [--data-file PATH]``."""

from __future__ import annotations

import argparse
import sys

import structlog
import uvicorn

from blogapi.app import create_app
from blogapi.core.config import ConfigurationError, get_settings

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="blogapi", description="Blog API backed by a JSON file")
    ap.add_argument("--host", help="Interface to bind (default: HOST or 0.0.0.0)")
    ap.add_argument("--port", type=int, help="Port to listen on (default: PORT or 4000)")
    ap.add_argument("--data-file", help="JSON database path (default: DATA_FILE or ./db.json)")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings().with_overrides(host=args.host, port=args.port, data_file=args.data_file)
    try:
        app = create_app(settings=settings)
    except ConfigurationError as exc:
        print(f"[blogapi] {exc}", file=sys.stderr)
        return 2
    logger.info("server.starting", host=settings.host, port=settings.port, data_file=settings.data_file)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
