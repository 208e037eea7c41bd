"""Signals and change-notifying properties."""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List


class Signal:
    """A list of callbacks invoked in connection order when emitted."""

    def __init__(self) -> None:
        self._slots: List[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register ``slot`` to be called on every emission."""
        self._slots.append(slot)

    def disconnect(self, slot: Callable[..., Any]) -> None:
        """Remove ``slot``; raises ValueError if it was never connected."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError("slot is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class Observable:
    """Base for objects whose properties announce changes through named signals."""

    def signal(self, name: str) -> Signal:
        """Return the signal called ``name``, creating it on first use."""
        signals: Dict[str, Signal] = self.__dict__.setdefault("_signals", {})
        if name not in signals:
            signals[name] = Signal()
        return signals[name]


class Property:
    """A stored attribute that emits ``<name>_changed`` whenever it is assigned."""

    def __init__(self, default: Any = None) -> None:
        self.default = default
        self.name = ""
        self._attr = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        self._attr = f"_prop_{name}"

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        store = instance.__dict__
        if self._attr not in store:
            store[self._attr] = copy.copy(self.default)
        return store[self._attr]

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self._attr] = value
        instance.signal(f"{self.name}_changed").emit()