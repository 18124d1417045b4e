# process entry point: load config, set up logging, then serve or run one-off lookups

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from .config import load_settings
from .errors import ConfigError
from .service import build_composite, lookup_all

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="multiweather", description="average temperature across weather providers")
    p.add_argument("--env-file", default=".env", help="dotenv file holding OPENWEATHER and WEATHERBIT")
    sub = p.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="run the http server")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    lookup = sub.add_parser("lookup", help="print the averaged temperature for each city")
    lookup.add_argument("cities", nargs="+")
    return p


def _serve(settings, host: Optional[str], port: Optional[int]) -> int:
    import uvicorn
    from .app import create_app

    app = create_app(build_composite(settings))
    uvicorn.run(app, host=host or settings.host, port=port or settings.port, log_level=settings.log_level.lower())
    return 0


def _lookup(settings, cities: List[str]) -> int:
    rows = lookup_all(build_composite(settings), cities)
    failed = 0
    for city, result, error in rows:
        if error is not None:
            failed += 1
            print(f"{city}: error: {error}", file=sys.stderr)
            continue
        print(f"{result.city} Average Temp: {result.kelvin:.2f} K")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    try:
        settings = load_settings(args.env_file)
    except ConfigError as exc:
        # startup errors are fatal
        _configure_logging("INFO")
        logger.error("configuration error: %s", exc)
        return 2

    _configure_logging(settings.log_level)
    if args.command == "serve":
        return _serve(settings, args.host, args.port)
    return _lookup(settings, args.cities)


if __name__ == "__main__":
    sys.exit(main())
