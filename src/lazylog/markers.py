"""
Named markers attached to log entries for downstream filtering.

Markers are created through a process-wide registry so that the same name
always maps to the same object. A marker can reference other markers; a
filter looking for a name matches the marker itself or any referenced marker.
"""

import logging
import threading
from typing import Dict, Iterator, List, Optional


class Marker:
    """Opaque named tag passed through to the backend unmodified."""

    def __init__(self, name: str):
        if not name:
            raise ValueError("Marker name must not be empty")
        self._name = name
        self._references: List["Marker"] = []
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def add(self, reference: "Marker") -> None:
        """Add a child marker reference."""
        if reference is self:
            return
        with self._lock:
            if reference not in self._references:
                self._references.append(reference)

    def remove(self, reference: "Marker") -> bool:
        with self._lock:
            if reference in self._references:
                self._references.remove(reference)
                return True
            return False

    def references(self) -> Iterator["Marker"]:
        with self._lock:
            return iter(list(self._references))

    def contains(self, name: str) -> bool:
        """True if this marker or any referenced marker has the given name."""
        return self._contains(name, set())

    def _contains(self, name: str, seen: set) -> bool:
        if self._name == name:
            return True
        seen.add(id(self))
        for reference in self.references():
            if id(reference) not in seen and reference._contains(name, seen):
                return True
        return False

    def __str__(self) -> str:
        return self._name

    def __repr__(self) -> str:
        return f"Marker({self._name!r})"


class MarkerFactory:
    """Registry creating markers on first use."""

    def __init__(self):
        self._markers: Dict[str, Marker] = {}
        self._lock = threading.Lock()

    def get_marker(self, name: str) -> Marker:
        marker = self._markers.get(name)
        if marker is None:
            with self._lock:
                marker = self._markers.get(name)
                if marker is None:
                    marker = Marker(name)
                    self._markers[name] = marker
        return marker

    def exists(self, name: str) -> bool:
        return name in self._markers


marker_factory = MarkerFactory()


def get_marker(name: str) -> Marker:
    """Get or create the marker with the given name."""
    return marker_factory.get_marker(name)


ENTRY = get_marker("ENTRY")
EXIT = get_marker("EXIT")
THROWING = get_marker("THROWING")
CATCHING = get_marker("CATCHING")


class MarkerFilter(logging.Filter):
    """Accept (or reject) records whose marker matches one of the given names.

    Records without a marker never match, so an accepting filter drops them and
    a rejecting filter lets them through.
    """

    def __init__(self, *names: str, accept: bool = True):
        super().__init__()
        self.names = names
        self.accept = accept

    def filter(self, record: logging.LogRecord) -> bool:
        marker: Optional[Marker] = getattr(record, "marker", None)
        matched = isinstance(marker, Marker) and any(
            marker.contains(name) for name in self.names
        )
        return matched if self.accept else not matched
