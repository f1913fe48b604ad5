"""
/**
 * @file deeplx/cli.py
 * @description 命令行入口：解析启动参数，合并配置，启动 uvicorn（可选 TLS）。
 */
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import uvicorn

from deeplx.config import Settings, load_settings
from deeplx.errors import RelayError
from deeplx.utils import split_csv


logger = logging.getLogger("deeplx")

KEEP_ALIVE = 75


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="deeplx", description="DeepL web API relay")
    parser.add_argument("--host", default=None)
    parser.add_argument("--port", type=int, default=None)
    parser.add_argument("--api-key", default=None, help="require this bearer token on /translate")
    parser.add_argument("--dl-session", default=None, help="DeepL dl_session cookie value")
    parser.add_argument(
        "--proxies",
        action="append",
        default=None,
        help="egress proxy URL, repeatable or comma separated",
    )
    parser.add_argument("--tls-cert", default=None)
    parser.add_argument("--tls-key", default=None)
    parser.add_argument("--log-level", default=None)
    return parser


def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    proxies: List[str] = []
    for value in args.proxies or []:
        proxies.extend(split_csv(value))
    return {
        "host": args.host,
        "port": args.port,
        "api_key": args.api_key,
        "dl_session": args.dl_session,
        "proxies": proxies,
        "tls_cert": args.tls_cert,
        "tls_key": args.tls_key,
        "log_level": args.log_level,
    }


def resolve_settings(argv: Optional[List[str]] = None, base: Optional[Settings] = None) -> Settings:
    args = build_parser().parse_args(argv)
    settings = (base or load_settings()).with_overrides(args_to_overrides(args))
    if bool(settings.tls_cert) != bool(settings.tls_key):
        raise SystemExit("--tls-cert and --tls-key must be given together")
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    settings = resolve_settings(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    from deeplx.main import create_app

    try:
        app = create_app(settings)
    except RelayError as e:
        logger.error(f"Startup failed: {e}")
        sys.exit(1)

    scheme = "https" if settings.tls_cert else "http"
    logger.info(f"Starting server at {scheme}://{settings.host}:{settings.port}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=KEEP_ALIVE,
        ssl_certfile=settings.tls_cert,
        ssl_keyfile=settings.tls_key,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
