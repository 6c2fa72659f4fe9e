# destinations.py
# In-memory list of saved destinations + the add/remove/list entry points
# the REPL calls.

from typing import NamedTuple

from validation import validate_destination


class Destination(NamedTuple):
    id: str
    name: str
    latitude: str
    longitude: str

    def label(self):
        return f"{self.name} ({self.latitude},{self.longitude})"


def _field(candidate, key):
    # candidates come in as dicts from tests/one-liners or as objects
    if isinstance(candidate, dict):
        return candidate[key]
    return getattr(candidate, key)


class DestinationStore:
    """
    Owns the ordered destination list and hands out ids.

    Ids are "1", "2", "3", ... in insertion order. A new id is always the
    last entry's id + 1, so removing from the middle leaves a gap that is
    never filled, and ids never collide. Removing the *last* entry does let
    its id come back on the next add.

    Everything that changes the list goes through add()/remove().
    """

    def __init__(self):
        self._items = []

    def add(self, candidate) -> Destination:
        """
        Append a destination built from candidate's name/latitude/longitude.
        No checks here: the caller validates first (see add_destination).
        """
        if not self._items:
            new_id = "1"
        else:
            new_id = str(int(self._items[-1].id) + 1)

        dest = Destination(
            id=new_id,
            name=_field(candidate, "name"),
            latitude=_field(candidate, "latitude"),
            longitude=_field(candidate, "longitude"),
        )
        self._items.append(dest)
        return dest

    def remove(self, dest_id: str) -> None:
        """Drop the entry with this id. Unknown ids are ignored."""
        self._items = [d for d in self._items if d.id != dest_id]

    def list(self):
        """Snapshot of the current list, as a tuple so callers can't edit it."""
        return tuple(self._items)

    def get(self, dest_id: str):
        for d in self._items:
            if d.id == dest_id:
                return d
        return None

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self.list())

    def __bool__(self):
        return bool(self._items)


# -------- UI entry points --------

def add_destination(store: DestinationStore, candidate) -> Destination:
    """
    The add-flow: validate the form, then store it.
    Raises a validation.ValidationError subclass and leaves the store alone
    if the form is bad.
    """
    name, latitude, longitude = validate_destination(
        _field(candidate, "name"),
        _field(candidate, "latitude"),
        _field(candidate, "longitude"),
    )
    return store.add({"name": name, "latitude": latitude, "longitude": longitude})


def remove_destination(store: DestinationStore, dest_id: str) -> None:
    store.remove(dest_id)


def list_destinations(store: DestinationStore):
    return store.list()
