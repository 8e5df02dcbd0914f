"""CLI for passgen — generate passwords, show/set settings."""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import load_config, save_config, set_value, config_path
from .errors import ConfigError, RngUnavailable
from .generator import generate
from .models import NamedPolicy
from .policy import resolve
from .rng import SystemRandomSource

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

LABELS = {
    "custom": "Generated password",
    NamedPolicy.RANDOM.value: "Generated fully random password",
    NamedPolicy.PIN.value: "Generated pin",
    NamedPolicy.MEMORABLE.value: "Generated memorable password",
}

def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )

def cmd_generate(args, cfg):
    if args.copies < 1:
        raise ConfigError("--copies must be >= 1")
    length = args.length if args.length is not None else cfg["length"]
    if not args.type and cfg.get("type") and (args.numbers or args.symbols or args.capitalized):
        logger.warning(
            "password type %r comes from settings; --numbers/--symbols/--capitalized are ignored",
            cfg["type"],
        )
    policy = resolve(
        length,
        named_policy=args.type or cfg.get("type"),
        numbers=args.numbers,
        symbols=args.symbols,
        capitalized=args.capitalized,
        max_length=cfg["max_length"],
    )
    rng = SystemRandomSource()
    label = LABELS[policy.name]
    console.print("Welcome to the password generator 5000")
    for i in range(args.copies):
        pw = generate(policy, rng)
        # Text, not markup: symbols such as "[" are part of the password
        console.print(Text.assemble((f"{label} #{i+1}: ", "bold green"), pw), soft_wrap=True)

def cmd_config_show(args, cfg):
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)

def cmd_config_set(args, cfg):
    cfg = set_value(cfg, args.key, args.value)
    save_config(cfg)
    console.print(f"[green]Saved[/green] {args.key} = {cfg[args.key]}")

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="passgen")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, default=None, help="Password length (default from settings)")
    gen.add_argument("--numbers", action="store_true", help="Include digits")
    gen.add_argument("--symbols", action="store_true", help="Include symbols")
    gen.add_argument("--capitalized", action="store_true", help="Include uppercase letters")
    gen.add_argument(
        "--type",
        choices=[p.value for p in NamedPolicy],
        default=None,
        help="Named password type; overrides --numbers/--symbols/--capitalized",
    )
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.set_defaults(func=cmd_generate)

    c = sub.add_parser("config", help="Settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show effective settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change one setting")
    c_set.add_argument("key", type=str, help="Setting name")
    c_set.add_argument("value", type=str, help="New value ('none' clears type)")
    c_set.set_defaults(func=cmd_config_set)
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    try:
        args.func(args, load_config())
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 2
    except RngUnavailable as e:
        err_console.print(f"[red]Cannot generate passwords: {escape(str(e))}[/red]")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
