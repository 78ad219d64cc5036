"""Text output of merchandise, shelves and stock."""

from __future__ import annotations

import sys

from .ansi import FG_BLUE, FG_GREEN, NORMAL
from .inventory import WebstoreError

CONTINUE_ALERT_NUMBER = 20


def _out(file):
    return sys.stdout if file is None else file


def _ask(prompt):
    answer = input(f"{prompt} (y/n) ")
    return answer.strip().lower().startswith("y")


def format_merch(merch):
    """Return the coloured four-line description of one item."""
    rows = (
        ("Item:", "          ", merch.name),
        ("Description:", "   ", merch.desc),
        ("Price:", "         ", merch.price),
        ("Stock (Total):", " ", merch.total_amount),
    )
    return "".join(
        f"┃ > {FG_GREEN}{label}{NORMAL}{gap}{FG_BLUE}{value}{NORMAL}\n"
        for label, gap, value in rows
    )


def print_merch(merch, file=None):
    """Write the description of one item."""
    _out(file).write(format_merch(merch))


def display_shelf(store, shelf, file=None):
    """Write the names stored on ``shelf`` on one line."""
    if shelf is None:
        raise ValueError("shelf must not be None")
    names = store.get_locations(shelf)
    if names is None:
        raise WebstoreError(f"no such shelf {shelf!r}")
    line = f"┃ > {shelf}:" + "".join(f" {name}" for name in names)
    _out(file).write(line + "\n")


def list_shelfs(store, name, file=None):
    """Write every shelf holding ``name`` together with its amount."""
    out = _out(file)
    out.write(f"\n┃ -  Listing shelfs containing {name}  -\n")
    for number, loc in enumerate(store.merch_locs(name), start=1):
        out.write(f"┃ [{number}] > {loc.shelf}x{loc.amount}\n")


def show_stock(store, file=None):
    """Write every shelf with the items in stock on it, numbered from 1."""
    out = _out(file)
    shelves = store.shelves()
    if not shelves:
        out.write("┃ > Empty\n\n")
        return
    number = 1
    for shelf in shelves:
        names = store.get_locations(shelf) or []
        if not names:
            continue
        out.write(f"┃ - {shelf} -\n┃\n")
        for name in names:
            stock = store.merch_stock_on_shelf(name, shelf)
            if stock <= 0:
                continue
            out.write(f"┃ [{number}] {name}\n")
            out.write(f"┃ > Price: {store.merch_price(name)}Kr\n")
            out.write(f"┃ > Stock: {stock}St\n")
            out.write(f"┃ > Desc: {store.merch_description(name)}\n")
            out.write("┃\n")
            number += 1
    out.write("\n\n")


def list_merchandise(store, confirm=None, file=None):
    """Write all items, asking ``confirm`` before every twentieth one.

    Returns the number of items written.
    """
    if store is None:
        raise ValueError("store must not be None")
    ask = _ask if confirm is None else confirm
    out = _out(file)
    shown = 0
    for number, merch in enumerate(store.merchandise(), start=1):
        if number % CONTINUE_ALERT_NUMBER == 0 and not ask("Continue printing?"):
            break
        out.write(f"┏──╸ No.{number} \n")
        print_merch(merch, out)
        shown += 1
    return shown