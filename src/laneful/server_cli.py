"""CLI entry point for the Laneful webhook receiver."""

import argparse

from laneful.config import settings


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="laneful-webhooks",
        description="Laneful webhook receiver: verifies and dispatches email events",
    )
    parser.add_argument("--host", default=settings.host, help=f"Bind host (default: {settings.host})")
    parser.add_argument("--port", type=int, default=settings.port, help=f"Bind port (default: {settings.port})")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (default: %(default)s)")
    args = parser.parse_args(argv)
    settings.log_level = args.log_level

    import uvicorn

    uvicorn.run(
        "laneful.main:build_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level=args.log_level,
    )


if __name__ == "__main__":
    main()
