import io

import pytest

from merchstore.ansi import FG_BLUE, FG_GREEN, NORMAL
from merchstore.display import (
    display_shelf,
    format_merch,
    list_merchandise,
    list_shelfs,
    print_merch,
    show_stock,
)
from merchstore.inventory import MerchNotFoundError, WebstoreError
from merchstore.webstore import Webstore


def new_item(store, name, desc, price, shelf, stock):
    store.add_merchandise(name, desc, price)
    store.set_shelf(name, shelf, stock)


@pytest.fixture
def store():
    s = Webstore()
    new_item(s, "Ferarri", "wrooooom!", 10, "A01", 3)
    new_item(s, "apple", "a fruit", 10, "A10", 1)
    new_item(s, "pear", "a fruit", 12, "A10", 1)
    new_item(s, "orange", "a fruit", 14, "D21", 123)
    return s


def test_format_merch_lines(store):
    text = format_merch(store.merch("pear"))
    lines = text.splitlines()
    assert len(lines) == 4
    assert lines[0] == f"┃ > {FG_GREEN}Item:{NORMAL}          {FG_BLUE}pear{NORMAL}"
    assert lines[2] == f"┃ > {FG_GREEN}Price:{NORMAL}         {FG_BLUE}12{NORMAL}"
    assert lines[3].endswith(f"{FG_BLUE}1{NORMAL}")


def test_print_merch_writes_format(store):
    buf = io.StringIO()
    print_merch(store.merch("pear"), buf)
    assert buf.getvalue() == format_merch(store.merch("pear"))


def test_display_shelf(store):
    buf = io.StringIO()
    display_shelf(store, "A01", buf)
    display_shelf(store, "A10", buf)
    display_shelf(store, "D21", buf)
    assert buf.getvalue() == "┃ > A01: Ferarri\n┃ > A10: apple pear\n┃ > D21: orange\n"


def test_display_shelf_storage_contains():
    s = Webstore()
    for _ in range(3):
        s.add_to_storage("A", "A10")
    buf = io.StringIO()
    display_shelf(s, "A10", buf)
    assert buf.getvalue() == "┃ > A10: A\n"
    assert s.storage_contains("A", "A10")


def test_display_missing_shelf_raises(store):
    with pytest.raises(WebstoreError):
        display_shelf(store, "Z99", io.StringIO())


def test_list_shelfs(store):
    for number, shelf in enumerate(["A11", "A12", "A13", "A14", "A15"], start=1):
        store.set_shelf("pear", shelf, number)
    buf = io.StringIO()
    list_shelfs(store, "pear", buf)
    assert buf.getvalue() == (
        "\n┃ -  Listing shelfs containing pear  -\n"
        "┃ [1] > A10x1\n"
        "┃ [2] > A11x1\n"
        "┃ [3] > A12x2\n"
        "┃ [4] > A13x3\n"
        "┃ [5] > A14x4\n"
        "┃ [6] > A15x5\n"
    )


def test_list_shelfs_unknown_merch(store):
    with pytest.raises(MerchNotFoundError):
        list_shelfs(store, "Soda", io.StringIO())


def test_show_stock(store):
    buf = io.StringIO()
    show_stock(store, buf)
    expected = (
        "┃ - A01 -\n┃\n"
        "┃ [1] Ferarri\n┃ > Price: 10Kr\n┃ > Stock: 3St\n┃ > Desc: wrooooom!\n┃\n"
        "┃ - A10 -\n┃\n"
        "┃ [2] apple\n┃ > Price: 10Kr\n┃ > Stock: 1St\n┃ > Desc: a fruit\n┃\n"
        "┃ [3] pear\n┃ > Price: 12Kr\n┃ > Stock: 1St\n┃ > Desc: a fruit\n┃\n"
        "┃ - D21 -\n┃\n"
        "┃ [4] orange\n┃ > Price: 14Kr\n┃ > Stock: 123St\n┃ > Desc: a fruit\n┃\n"
        "\n\n"
    )
    assert buf.getvalue() == expected


def test_show_stock_skips_empty_shelf_stock(store):
    store.set_shelf("apple", "A10", 0)
    buf = io.StringIO()
    show_stock(store, buf)
    out = buf.getvalue()
    assert "apple" not in out
    assert "┃ [2] pear\n" in out


def test_show_stock_empty_store():
    buf = io.StringIO()
    show_stock(Webstore(), buf)
    assert buf.getvalue() == "┃ > Empty\n\n"


def test_list_merchandise(store):
    buf = io.StringIO()
    shown = list_merchandise(store, lambda prompt: True, buf)
    out = buf.getvalue()
    assert shown == 4
    assert out.count("┏──╸ No.") == 4
    assert out.startswith("┏──╸ No.1 \n" + format_merch(store.merch("Ferarri")))


def test_list_merchandise_stops_when_declined():
    s = Webstore()
    for number in range(25):
        s.add_merchandise(f"item{number}", "thing", number)
    prompts = []

    def decline(prompt):
        prompts.append(prompt)
        return False

    buf = io.StringIO()
    shown = list_merchandise(s, decline, buf)
    assert shown == 19
    assert prompts == ["Continue printing?"]
    assert "No.20" not in buf.getvalue()


def test_list_merchandise_continues_when_accepted():
    s = Webstore()
    for number in range(25):
        s.add_merchandise(f"item{number}", "thing", number)
    shown = list_merchandise(s, lambda prompt: True, io.StringIO())
    assert shown == 25


def test_list_merchandise_empty_store():
    assert list_merchandise(Webstore(), lambda prompt: True, io.StringIO()) == 0