# merchstore

An in-memory database of merchandise and the warehouse shelves that hold it.
Each item has a name, a description, a price and stock spread over shelves.
Shelf names are one capital letter followed by two digits, such as `A10` or `D21`
(`merchstore.inventory.is_shelf` checks this).

## Installation

```
pip install .
```

## Usage

```python
from merchstore.webstore import Webstore
from merchstore.display import show_stock, list_shelfs

store = Webstore()
store.add_merchandise("apple", "a fruit", 10)
store.set_shelf("apple", "A10", 5)
store.set_shelf("apple", "A11", 3)

store.merch_stock("apple")                 # 8
store.merch_stock_on_shelf("apple", "A10") # 5

store.increase_stock("apple", "A10", 2)    # A10 now holds 7
store.decrease_equal_stock("apple", 4)     # taken from the shelves in order; A10 now holds 3

store.rename_merch("apple", "green apple")
store.shelf_exists("A10")                  # True

list_shelfs(store, "green apple")
show_stock(store)
```

`Webstore` keeps two mappings: `merch_db`, from an item name to its `Merch`
record, and `storage_db`, from a shelf name to the names stored on it.
`set_shelf` updates both. Adding an item whose name already exists leaves the
existing item untouched; removing an unknown item does nothing.

## Errors

All errors live in `merchstore.inventory` and derive from `WebstoreError`:

- `MerchNotFoundError` (also a `KeyError`) when an unknown item is looked up.
- `DuplicateMerchError` when renaming to a name that is already taken.
- `InvalidShelfError` (also a `ValueError`) for a badly formed shelf name.

`remove_shelf` and `increase_stock` raise `WebstoreError` for a shelf that is not
in storage, and `lookup_merch_name` raises `IndexError` for an index outside the
item list.

## Output

The functions in `merchstore.display` (`print_merch`, `display_shelf`,
`list_shelfs`, `show_stock`, `list_merchandise`) write to standard output unless
a `file` is given; `format_merch` returns the text instead. `list_merchandise`
asks before every twentieth item, through the `confirm` callable if one is
given, otherwise by reading a y/n answer from standard input.
`merchstore.ansi.colorize` wraps text in terminal colour codes.

## What it does not do

The package is a library only: it has no command to run, no interactive menu,
no shopping carts or checkout, and no storage on disk. Everything lives in
memory for as long as the `Webstore` object does.

## Running the tests

```
pip install .[test]
pytest
```