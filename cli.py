"""CLI for configstore: inspect and edit the values stored for an application (path/get/set/delete/list)."""

import argparse
import json
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import load_config
from .errors import ConfigstoreError, NotFoundError
from .paths import AppUI
from .serializers import available_formats, get_serializer
from .store import Configstore

log = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def parse_value(text: str):
    """JSON if it parses, otherwise the raw string (so `set name Bob` works without quotes)."""
    try:
        return json.loads(text)
    except ValueError:
        return text


def open_store(args) -> Configstore:
    serializer = get_serializer(args.format)
    return Configstore(args.app, AppUI.parse(args.ui), serializer=serializer, base_dir=args.root)


def cmd_path(args):
    store = open_store(args)
    console.out(str(store.directory))
    return 0


def cmd_get(args):
    store = open_store(args)
    try:
        value = store.get(args.key)
    except NotFoundError:
        err_console.print(f"[yellow]No value stored for {escape(args.key)!r}.[/yellow]")
        return 1
    console.out(json.dumps(value, indent=2, ensure_ascii=False))
    return 0


def cmd_set(args):
    store = open_store(args)
    store.set(args.key, parse_value(args.value))
    log.info("Set %s in %s", args.key, store.directory)
    return 0


def cmd_delete(args):
    store = open_store(args)
    try:
        store.delete(args.key)
    except NotFoundError:
        err_console.print(f"[yellow]No value stored for {escape(args.key)!r}.[/yellow]")
        return 1
    console.print(f"[green]Deleted[/green] {escape(args.key)}")
    return 0


def cmd_list(args):
    store = open_store(args)
    keys = store.keys()
    if not keys:
        console.print(f"[yellow]No values stored in[/yellow] {escape(str(store.directory))}")
        return 0
    table = Table(show_header=True, header_style="bold cyan", title=escape(str(store.directory)))
    table.add_column("Key")
    table.add_column("Bytes", justify="right")
    for key in keys:
        table.add_row(escape(key), str(store.path_for(key).stat().st_size))
    console.print(table)
    return 0


def build_parser(cfg) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="configstore", description="Per-application key/value configuration files")
    parser.add_argument("--app", "-a", default=cfg["app_name"], help="Application name (config subdirectory)")
    parser.add_argument("--ui", choices=["cli", "gui"], default=cfg["app_ui"], help="Application type")
    parser.add_argument("--root", default=cfg["root"], help="Use this directory instead of the platform config root")
    parser.add_argument("--format", choices=available_formats(), default=cfg["format"], help="Serialization format")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("path", help="Print the configuration directory")
    p.set_defaults(func=cmd_path)

    g = sub.add_parser("get", help="Print the value stored under KEY as JSON")
    g.add_argument("key")
    g.set_defaults(func=cmd_get)

    s = sub.add_parser("set", help="Store VALUE (JSON, or a plain string) under KEY")
    s.add_argument("key")
    s.add_argument("value")
    s.set_defaults(func=cmd_set)

    d = sub.add_parser("delete", help="Remove the value stored under KEY")
    d.add_argument("key")
    d.set_defaults(func=cmd_delete)

    ls = sub.add_parser("list", help="List stored keys")
    ls.set_defaults(func=cmd_list)
    return parser


def main(argv=None) -> int:
    try:
        cfg = load_config()
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        return 1
    parser = build_parser(cfg)
    args = parser.parse_args(argv)
    try:
        setup_logging("DEBUG" if args.verbose else cfg["log_level"])
        return args.func(args)
    except (ConfigstoreError, ValueError) as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
