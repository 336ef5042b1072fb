"""Ordered registry of code-generation backends.

The help renderer lists backends in registration order.  The registry
only stores backend descriptions; it never runs a generator.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from importlib.metadata import entry_points

from idlc.core.protocols import Backend
from idlc.exceptions import DuplicateBackendError

ENTRY_POINT_GROUP: str = "idlc.backends"
"""Distributions advertise backends under this entry-point group."""


class BackendRegistry:
    """Name-keyed, insertion-ordered collection of :class:`Backend` objects."""

    def __init__(self, backends: Iterable[Backend] = ()) -> None:
        self._backends: dict[str, Backend] = {}
        for backend in backends:
            self.register(backend)

    @classmethod
    def from_entry_points(cls, group: str = ENTRY_POINT_GROUP) -> BackendRegistry:
        """Build a registry from every installed ``group`` entry point.

        Each entry point must resolve to an object satisfying
        :class:`Backend`.  Entry points are loaded in name order so the
        help catalogue is stable across environments.
        """
        found = sorted(entry_points(group=group), key=lambda ep: ep.name)
        return cls(ep.load() for ep in found)

    def register(self, backend: Backend) -> None:
        """Add *backend*.

        Raises
        ------
        DuplicateBackendError
            If a backend with the same name is already registered.
        """
        if backend.name in self:
            raise DuplicateBackendError(
                f"backend {backend.name!r} is already registered",
            )
        self._backends[backend.name] = backend

    def all_backends(self) -> list[Backend]:
        """Return every registered backend, in registration order."""
        return list(self._backends.values())

    def __iter__(self) -> Iterator[Backend]:
        return iter(self._backends.values())

    def __len__(self) -> int:
        return len(self._backends)

    def __contains__(self, name: object) -> bool:
        return name in self._backends
