"""CLI for keysmith: generate passwords, score them, list character classes."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .config import check_copies, generation_config, load_config
from .errors import InvalidArgument
from .evaluator import measure
from .generator import CHARACTER_CLASSES, generate
from .score import tier_of
from .suggestions import suggest_improvements

log = logging.getLogger(__name__)


def _tier_markup(tier) -> str:
    return f"[{tier.color}]{tier.label}[/{tier.color}]"


def cmd_generate(args):
    cfg = load_config(args.config)
    if args.length is not None:
        cfg["length"] = args.length
    if args.no_upper:
        cfg["upper"] = False
    if args.no_lower:
        cfg["lower"] = False
    if args.no_digits:
        cfg["digits"] = False
    if args.symbols is not None:
        cfg["symbols"] = args.symbols
    copies = check_copies(args.copies if args.copies is not None else cfg["copies"])

    gen_cfg = generation_config(cfg)
    if not gen_cfg.selected_classes():
        print("[yellow]No character class selected, nothing to generate.[/yellow]")
        return
    if gen_cfg.length == 0:
        print("[yellow]Length is 0, nothing to generate.[/yellow]")
        return
    for i in range(copies):
        pw = generate(gen_cfg)
        tier = tier_of(measure(pw))
        print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}  ({_tier_markup(tier)})")


def cmd_score(args):
    pw = args.password
    sugg = suggest_improvements(pw)
    tier = tier_of(sugg["score"])
    header = f"Strength: {tier.label} (score {tier.score} / 4)"
    body = (
        f"Estimated entropy: {sugg['entropy']:.1f} bits\n"
        f"Progress: {tier.progress:.0%}"
    )
    print(Panel(body, title=header, border_style=tier.color))
    if sugg["suggestions"]:
        print("[bold]Suggestions:[/bold]")
        for s in sugg["suggestions"]:
            print(f" • {s}")
    if sugg["examples"]:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Example stronger password")
        for ex in sugg["examples"]:
            table.add_row(escape(ex))
        print(table)


def cmd_classes(args):
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Class")
    table.add_column("Size", justify="right")
    table.add_column("Characters")
    for c in CHARACTER_CLASSES:
        table.add_row(c.name, str(len(c)), escape(c.chars))
    print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="keysmith")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length (default from config, 12)")
    gen.add_argument("--no-upper", action="store_true", help="Disable uppercase")
    gen.add_argument("--no-lower", action="store_true", help="Disable lowercase")
    gen.add_argument("--no-digits", action="store_true", help="Disable digits")
    gen.add_argument("--symbols", dest="symbols", action="store_true", default=None, help="Enable symbols")
    gen.add_argument("--no-symbols", dest="symbols", action="store_false", help="Disable symbols")
    gen.add_argument("--copies", type=int, help="How many passwords to generate")
    gen.add_argument("--config", type=str, help="Path to a JSON settings file")
    gen.set_defaults(func=cmd_generate)

    sc = sub.add_parser("score", help="Score a password and show suggestions")
    sc.add_argument("password", type=str, help="Password to evaluate (wrap in quotes)")
    sc.set_defaults(func=cmd_score)

    cl = sub.add_parser("classes", help="List the character classes")
    cl.set_defaults(func=cmd_classes)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )
    try:
        args.func(args)
    except InvalidArgument as e:
        log.debug("rejected request", exc_info=True)
        print(f"[red]{e}[/red]")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
