"""Debug rendering of arbitrary values for failure messages."""

from __future__ import annotations

import reprlib
from typing import Any

from expectpy.config import InspectConfig, get_config


class _LimitedRepr(reprlib.Repr):
    """``reprlib.Repr`` with its limits taken from an ``InspectConfig``."""

    def __init__(self, settings: InspectConfig):
        super().__init__()
        self.maxlevel = settings.depth + 1
        for attr in ("maxtuple", "maxlist", "maxarray", "maxdict", "maxset", "maxfrozenset", "maxdeque"):
            setattr(self, attr, settings.max_items)
        self.maxstring = settings.max_string
        self.maxlong = settings.max_string
        self.maxother = settings.max_string


def inspect_value(value: Any) -> str:
    """Render *value* for a failure message.

    Never raises: circular containers stop at the configured depth, and
    objects with a broken ``__repr__`` fall back to a type-and-address form.
    """
    settings = get_config().inspect
    try:
        return _LimitedRepr(settings).repr(value)
    except Exception:
        return object.__repr__(value)
