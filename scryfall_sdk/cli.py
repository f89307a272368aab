"""CLI for quick lookups against the Scryfall API."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from scryfall_sdk.blocking import ScryfallBlocking
from scryfall_sdk.config import load_config
from scryfall_sdk.resources import HttpResource, bulk_data, card_sets, cards, rulings
from scryfall_sdk.resources.card_symbols import CardSymbolsResource, ManaCostResource
from scryfall_sdk.resources.catalog import Catalog, CatalogResource, Catalogs
from scryfall_sdk.resources.envelope import Err

console = Console()


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Set up logging
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    if not hasattr(args, "func"):
        parser.print_help()
        return

    args.func(args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scryfall-sdk",
        description="Look up cards, sets, rulings and symbols on Scryfall",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v info, -vv debug)",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to scryfall.yaml (default: scryfall.yaml)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="API base URL (overrides config)",
    )

    subparsers = parser.add_subparsers(title="commands", dest="command")

    # card
    card_parser = subparsers.add_parser("card", help="Show a card by name")
    card_parser.add_argument("name")
    card_parser.add_argument(
        "--fuzzy",
        action="store_true",
        help="Fuzzy name match instead of exact",
    )
    card_parser.set_defaults(func=_cmd_card)

    # random
    random_parser = subparsers.add_parser("random", help="Show a random card")
    random_parser.add_argument("query", nargs="?", default=None)
    random_parser.set_defaults(func=_cmd_random)

    # search
    search_parser = subparsers.add_parser("search", help="Full-text card search")
    search_parser.add_argument("query")
    search_parser.add_argument("--page", type=int, default=None)
    search_parser.add_argument(
        "--order",
        choices=[o.value for o in cards.SortOrder],
        default=None,
    )
    search_parser.add_argument(
        "--unique",
        choices=[u.value for u in cards.UniqueMode],
        default=None,
    )
    search_parser.set_defaults(func=_cmd_search)

    # autocomplete
    auto_parser = subparsers.add_parser("autocomplete", help="Complete a card name")
    auto_parser.add_argument("text")
    auto_parser.set_defaults(func=_cmd_autocomplete)

    # sets
    sets_parser = subparsers.add_parser("sets", help="List all sets")
    sets_parser.set_defaults(func=_cmd_sets)

    # set
    set_parser = subparsers.add_parser("set", help="Show a set by code or id")
    set_parser.add_argument("code")
    set_parser.set_defaults(func=_cmd_set)

    # rulings
    rulings_parser = subparsers.add_parser("rulings", help="Show rulings for a card id")
    rulings_parser.add_argument("card_id")
    rulings_parser.set_defaults(func=_cmd_rulings)

    # symbols
    symbols_parser = subparsers.add_parser("symbols", help="List card symbols")
    symbols_parser.set_defaults(func=_cmd_symbols)

    # parse-mana
    mana_parser = subparsers.add_parser("parse-mana", help="Parse a mana cost")
    mana_parser.add_argument("cost")
    mana_parser.set_defaults(func=_cmd_parse_mana)

    # catalog
    catalog_parser = subparsers.add_parser("catalog", help="Show a catalog")
    catalog_parser.add_argument("name", choices=[c.value for c in Catalogs])
    catalog_parser.set_defaults(func=_cmd_catalog)

    # bulk-data
    bulk_parser = subparsers.add_parser("bulk-data", help="List bulk data files")
    bulk_parser.add_argument("filter", nargs="?", default=None, help="Id or type")
    bulk_parser.set_defaults(func=_cmd_bulk_data)

    return parser


def _fetch(args: argparse.Namespace, resource: HttpResource[Any]) -> Any:
    """Run one request; print the error and exit 1 on failure."""
    config = load_config(args.config, base_url=args.base_url)
    with ScryfallBlocking.from_config(config) as client:
        result = client.request(resource)
    if isinstance(result, Err):
        console.print(f"[red]{escape(result.error.code)}[/red]: {escape(result.error.details)}")
        sys.exit(1)
    return result.value


def _table(title: str, columns: Dict[str, str], rows: List[List[str]]) -> Table:
    table = Table(title=escape(title))
    for name, style in columns.items():
        table.add_column(name, style=style or None)
    for row in rows:
        table.add_row(*(escape(cell) for cell in row))
    return table


# ------------------------------------------------------------------
# Command handlers
# ------------------------------------------------------------------


def _print_card(card: cards.Card) -> None:
    rows = [
        ["Mana cost", card.mana_cost or ""],
        ["Type", card.type_line or ""],
    ]
    if card.oracle_text:
        rows.append(["Text", card.oracle_text])
    if card.power is not None:
        rows.append(["P/T", f"{card.power}/{card.toughness}"])
    rows.append(["Set", f"{card.set_name} ({card.set.upper()}) #{card.collector_number}"])
    rows.append(["Rarity", card.rarity])
    rows.append(["Id", card.id])
    table = _table(card.name, {"Field": "cyan", "Value": ""}, rows)
    table.show_header = False
    console.print(table)


def _cmd_card(args: argparse.Namespace) -> None:
    resource = cards.NamedFuzzy(args.name) if args.fuzzy else cards.NamedExact(args.name)
    _print_card(_fetch(args, resource))


def _cmd_random(args: argparse.Namespace) -> None:
    _print_card(_fetch(args, cards.Random(args.query)))


def _cmd_search(args: argparse.Namespace) -> None:
    params = cards.SearchQueryParams(
        q=args.query,
        order=cards.SortOrder(args.order) if args.order else None,
        unique=cards.UniqueMode(args.unique) if args.unique else None,
        page=args.page,
    )
    page: cards.CardPage = _fetch(args, cards.Search(params))
    rows = [
        [c.name, c.mana_cost or "", c.type_line or "", c.set.upper()]
        for c in page.data
    ]
    console.print(_table(
        f"{page.total_cards} cards",
        {"Name": "cyan", "Cost": "", "Type": "", "Set": "green"},
        rows,
    ))
    if page.has_more:
        console.print("[yellow]More results available (use --page)[/yellow]")
    for warning in page.warnings or []:
        console.print(f"[yellow]{escape(warning)}[/yellow]")


def _print_catalog(catalog: Catalog) -> None:
    for value in catalog.data:
        console.print(escape(value))
    console.print(f"[green]{catalog.total_values} values[/green]")


def _cmd_autocomplete(args: argparse.Namespace) -> None:
    _print_catalog(_fetch(args, cards.Autocomplete(args.text)))


def _cmd_catalog(args: argparse.Namespace) -> None:
    _print_catalog(_fetch(args, CatalogResource(Catalogs(args.name))))


def _cmd_sets(args: argparse.Namespace) -> None:
    set_list: card_sets.CardSetList = _fetch(args, card_sets.CardSetListResource())
    rows = [
        [s.code.upper(), s.name, s.set_type, str(s.card_count), str(s.released_at or "")]
        for s in set_list.data
    ]
    console.print(_table(
        "Sets",
        {"Code": "cyan", "Name": "", "Type": "", "Cards": "", "Released": "green"},
        rows,
    ))


def _cmd_set(args: argparse.Namespace) -> None:
    s: card_sets.CardSet = _fetch(args, card_sets.Filter(args.code))
    console.print(_table(
        s.name,
        {"Code": "cyan", "Type": "", "Cards": "", "Released": "green"},
        [[s.code.upper(), s.set_type, str(s.card_count), str(s.released_at or "")]],
    ))


def _cmd_rulings(args: argparse.Namespace) -> None:
    ruling_list: rulings.RulingList = _fetch(args, rulings.ByCardId(args.card_id))
    if not ruling_list.data:
        console.print("No rulings")
        return
    rows = [[str(r.published_at), r.source, r.comment] for r in ruling_list.data]
    console.print(_table(
        "Rulings", {"Date": "green", "Source": "cyan", "Comment": ""}, rows
    ))


def _cmd_symbols(args: argparse.Namespace) -> None:
    symbols = _fetch(args, CardSymbolsResource())
    rows = [[s.symbol, s.english] for s in symbols.data]
    console.print(_table("Symbols", {"Symbol": "cyan", "Meaning": ""}, rows))


def _cmd_parse_mana(args: argparse.Namespace) -> None:
    mana = _fetch(args, ManaCostResource(args.cost))
    colors = "".join(c.value for c in mana.colors) or "colorless"
    console.print(f"[cyan]{escape(mana.cost)}[/cyan]  cmc {mana.cmc:g}  {colors}")


def _cmd_bulk_data(args: argparse.Namespace) -> None:
    resource: HttpResource[bulk_data.BulkData] = (
        bulk_data.Filter(args.filter) if args.filter else bulk_data.All()
    )
    data: bulk_data.BulkData = _fetch(args, resource)
    rows = [
        [e.kind.value, e.name, e.updated_at.isoformat(), e.download_uri]
        for e in data.data
    ]
    console.print(_table(
        "Bulk data",
        {"Type": "cyan", "Name": "", "Updated": "green", "Download": ""},
        rows,
    ))

