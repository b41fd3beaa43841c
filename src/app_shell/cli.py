import argparse
import logging
import os
import sys
from pathlib import Path

from src.adapters.clock import SystemClock
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLitePortRepo, SQLiteTerminalRepo
from src.app_shell.config import Settings, configure_logging, load_settings
from src.app_shell.seed import seed_demo_data

logger = logging.getLogger("cli")


def get_settings(config_path: str | None) -> Settings:
    try:
        return load_settings(Path(config_path) if config_path else None)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)


def handle_migrate(settings: Settings) -> None:
    migrator = SQLiteMigrator(settings.database.path, settings.database.migrations_dir)
    applied = migrator.run_migrations()
    print(f"Applied {len(applied)} migration(s) to {settings.database.path}.")


def handle_seed(settings: Settings) -> None:
    handle_migrate(settings)
    created = seed_demo_data(
        SQLitePortRepo(settings.database.path),
        SQLiteTerminalRepo(settings.database.path),
        SystemClock(),
    )
    print(f"Seeded {created} port(s).")


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    # The app builds its own settings; point it at the same file
    if args.config:
        os.environ["MARITIME_CONFIG"] = args.config

    uvicorn.run("src.api.main:app", host=args.host, port=args.port, reload=args.reload)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Maritime Registry CLI")
    parser.add_argument("--config", help="Path to config.yaml (default: MARITIME_CONFIG)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")
    subparsers.add_parser("seed", help="Migrate, then insert demo ports if none exist")

    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--reload", action="store_true")

    args = parser.parse_args(argv)

    settings = get_settings(args.config)
    configure_logging(settings)

    if args.command == "migrate":
        handle_migrate(settings)
    elif args.command == "seed":
        handle_seed(settings)
    elif args.command == "serve":
        handle_serve(args)


if __name__ == "__main__":
    main()
