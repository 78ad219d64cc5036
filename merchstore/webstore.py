"""The merchandise database: items, their shelves and the storage map."""

from __future__ import annotations

from .inventory import (
    DuplicateMerchError,
    InvalidShelfError,
    Merch,
    MerchNotFoundError,
    Shelf,
    WebstoreError,
    is_shelf,
)


class Webstore:
    """Holds every merchandise item and what each shelf stores.

    ``merch_db`` maps a merchandise name to its :class:`Merch` record and
    ``storage_db`` maps a shelf name to the names of the merchandise kept
    on that shelf.
    """

    def __init__(self):
        self.merch_db: dict[str, Merch] = {}
        self.storage_db: dict[str, list[str]] = {}
        self.heap_strs: list[str] = []

    # ------------------------------------------------------------------
    # Merchandise
    # ------------------------------------------------------------------

    def merch(self, name):
        """Return the record for ``name`` or raise MerchNotFoundError."""
        try:
            return self.merch_db[name]
        except KeyError:
            raise MerchNotFoundError(name) from None

    def add_merchandise(self, name, desc, price):
        """Add a new item; an existing name is left untouched."""
        if name in self.merch_db:
            return
        self.merch_db[name] = Merch(name=name, desc=desc, price=price)

    def remove_merchandise(self, name):
        """Remove an item and its name from every shelf that held it."""
        merch = self.merch_db.get(name)
        if merch is None:
            return
        for loc in merch.locs:
            self.remove_name_from_shelf(loc.shelf, name)
        merch.locs.clear()
        del self.merch_db[name]

    def merch_exists(self, name):
        """Return True if an item called ``name`` exists."""
        return name in self.merch_db

    def merch_in_stock(self, name):
        """Return True if ``name`` is known; the stock level is not checked."""
        return name in self.merch_db

    def destroy_all_merch(self):
        """Remove every item, keeping the shelves themselves."""
        for name in list(self.merch_db):
            self.remove_merchandise(name)

    def rename_merch(self, name, new_name):
        """Give an existing item a new, unused name."""
        merch = self.merch(name)
        if new_name in self.merch_db:
            raise DuplicateMerchError(f"merchandise {new_name!r} already exists")
        merch.name = new_name
        self.merch_db[new_name] = merch
        del self.merch_db[name]
        for names in self.storage_db.values():
            for position, stored in enumerate(names):
                if stored == name:
                    names[position] = new_name

    def merch_locs(self, name):
        """Return the list of shelf records of an item."""
        return self.merch(name).locs

    def merch_description(self, name):
        """Return the description of an item."""
        return self.merch(name).desc

    def set_merch_description(self, name, desc):
        """Replace the description of an item."""
        merch = self.merch(name)
        if desc is None:
            raise ValueError("description must not be None")
        merch.desc = desc

    def merch_price(self, name):
        """Return the price of an item."""
        return self.merch(name).price

    def set_merch_price(self, name, price):
        """Replace the price of an item."""
        self.merch(name).price = price

    def merch_stock(self, name):
        """Return the total stock of an item over all its shelves."""
        return self.merch(name).stock()

    def merch_stock_on_shelf(self, name, shelf):
        """Return the amount of an item on one shelf, 0 if none."""
        merch = self.merch_db.get(name)
        if merch is None:
            return 0
        loc = merch.find_shelf(shelf)
        return loc.amount if loc is not None else 0

    def set_merch_stock(self, name, amount, location):
        """Set the stock of an item on a shelf, adding the shelf if new."""
        if location is None:
            raise ValueError("location must not be None")
        merch = self.merch(name)
        loc = merch.find_shelf(location)
        if loc is None:
            merch.locs.append(Shelf(location, amount))
        else:
            if amount < 0:
                raise ValueError("negative stock")
            loc.amount = amount
        merch.total_amount = merch.stock()

    def remove_shelf_from_merch(self, name, shelf):
        """Drop a shelf record from an item; unknown names are ignored."""
        if name is None or shelf is None:
            raise ValueError("name and shelf must not be None")
        merch = self.merch_db.get(name)
        if merch is None:
            return
        loc = merch.find_shelf(shelf)
        if loc is not None:
            merch.locs.remove(loc)
            merch.total_amount = merch.stock()

    def get_shelf_after_shelf_nr(self, shelf_nr, name):
        """Return the name of an item's ``shelf_nr``-th shelf, counted from 1."""
        locs = self.merch(name).locs
        if 1 <= shelf_nr <= len(locs):
            return locs[shelf_nr - 1].shelf
        return None

    def merchandise(self):
        """Return every item record in the store."""
        return list(self.merch_db.values())

    # ------------------------------------------------------------------
    # Saved strings
    # ------------------------------------------------------------------

    def save_str(self, text):
        """Keep ``text`` among the store's saved strings."""
        if text is None:
            raise ValueError("cannot save None")
        self.heap_strs.append(text)
        return True

    def is_saved_str(self, text):
        """Return True if an equal string has been saved."""
        return text is not None and text in self.heap_strs

    def free_saved_strs(self):
        """Forget every saved string."""
        self.heap_strs.clear()

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def shelf_exists(self, shelf):
        """Return True if ``shelf`` is a valid name present in storage."""
        return is_shelf(shelf) and shelf in self.storage_db

    def shelves(self):
        """Return the names of all shelves in storage."""
        return list(self.storage_db)

    def get_locations(self, shelf):
        """Return the names stored on ``shelf``, or None if there is no such shelf."""
        if not is_shelf(shelf):
            return None
        names = self.storage_db.get(shelf)
        return list(names) if names is not None else None

    def shelf_contains(self, shelf, name):
        """Return True if ``name`` is stored on ``shelf``."""
        if shelf is None:
            raise ValueError("shelf must not be None")
        return name in self.storage_db.get(shelf, ())

    def storage_contains(self, name, shelf):
        """Return True if ``shelf`` exists in storage and holds ``name``."""
        return name in self.storage_db.get(shelf, ())

    def remove_name_from_shelf(self, shelf, name):
        """Remove ``name`` from ``shelf``; the shelf itself stays."""
        names = self.storage_db.get(shelf)
        if names is not None and name in names:
            names.remove(name)

    def remove_from_storage(self, name, shelf):
        """Remove ``name`` from ``shelf`` if that shelf exists."""
        if shelf in self.storage_db:
            self.remove_name_from_shelf(shelf, name)

    def remove_shelf(self, shelf):
        """Remove a shelf from storage."""
        if shelf is None:
            raise ValueError("shelf must not be None")
        if shelf not in self.storage_db:
            raise WebstoreError(f"cannot remove non-existing shelf {shelf!r}")
        del self.storage_db[shelf]

    def destroy_storage(self):
        """Remove every shelf from storage."""
        for shelf in list(self.storage_db):
            self.remove_shelf(shelf)

    def add_to_storage(self, name, shelf):
        """Record that ``name`` is stored on ``shelf``."""
        if not name or not shelf:
            raise ValueError("cannot add empty names or shelves")
        names = self.storage_db.setdefault(shelf, [])
        if name not in names:
            names.append(name)

    def set_shelf(self, name, shelf, amount):
        """Place ``amount`` of an item on ``shelf``, updating both databases."""
        self.merch(name)
        if not is_shelf(shelf):
            raise InvalidShelfError(f"shelf name is incorrectly formatted: {shelf!r}")
        if not self.storage_contains(name, shelf):
            self.add_to_storage(name, shelf)
        self.set_merch_stock(name, amount, shelf)

    def sync_merch_stock(self, name):
        """Recompute an item's total and make sure stocked shelves list it.

        Returns True if the recorded total changed.
        """
        merch = self.merch(name)
        old_amount = merch.total_amount
        merch.total_amount = merch.stock()
        for loc in merch.locs:
            if loc.amount > 0 and not self.storage_contains(merch.name, loc.shelf):
                self.add_to_storage(merch.name, loc.shelf)
        return old_amount != merch.total_amount

    def decrease_equal_stock(self, name, amount):
        """Take ``amount`` from an item's shelves in order, never below zero.

        Stops at the first empty shelf. Returns the amount left on the last
        shelf touched.
        """
        merch = self.merch(name)
        remaining = amount
        new_amount = 0
        for loc in merch.locs:
            if loc.amount <= 0:
                break
            new_amount = loc.amount - remaining
            if new_amount < 0:
                loc.amount = 0
                remaining = -new_amount
            else:
                loc.amount = new_amount
                break
        self.sync_merch_stock(name)
        return max(new_amount, 0)

    def increase_stock(self, name, shelf_name, amount):
        """Add ``amount`` of an item on an existing shelf; return the new shelf stock."""
        if shelf_name is None:
            raise ValueError("shelf must not be None")
        merch = self.merch(name)
        if shelf_name not in self.storage_db:
            raise WebstoreError(f"storage does not contain shelf {shelf_name!r}")
        new_amount = self.merch_stock_on_shelf(name, shelf_name) + amount
        self.set_merch_stock(name, new_amount, shelf_name)
        merch.total_amount = merch.stock()
        return new_amount

    # ------------------------------------------------------------------
    # Numbering
    # ------------------------------------------------------------------

    def count_loc_dep_stock(self):
        """Return one more than the number of names stored over all shelves."""
        return 1 + sum(len(names) for names in self.storage_db.values())

    def get_merch_name_in_storage(self, nr_merch):
        """Return the ``nr_merch``-th stored name, counting shelves in order from 1."""
        number = 0
        for names in self.storage_db.values():
            for name in names:
                number += 1
                if number == nr_merch:
                    return name
        return None

    def lookup_merch_name(self, index):
        """Return the name of the item at ``index`` in the merchandise list."""
        if index < 0:
            raise IndexError("too small index")
        items = self.merchandise()
        if index >= len(items):
            raise IndexError("too large index")
        return items[index].name

    def valid_index(self, index):
        """Return True if ``index`` is a valid number for a stored item."""
        total = self.count_loc_dep_stock()
        return 1 <= index <= total

    def is_merch(self, index):
        """Return True if ``index`` refers to an item."""
        return self.valid_index(index)