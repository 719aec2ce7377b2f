"""
HistorySnapshot - Immutable copy of the diagram entities at one point in time.
"""

import copy
from dataclasses import dataclass

from .component import ComponentData
from .connection import ConnectionData


@dataclass(frozen=True)
class HistorySnapshot:
    """
    Deep copy of (components, connections) owned by the history.

    Snapshots never share mutable structure with the live diagram:
    ``capture`` copies in and ``restore_*`` copies out.
    """

    components: tuple[ComponentData, ...] = ()
    connections: tuple[ConnectionData, ...] = ()

    @classmethod
    def capture(cls, components, connections) -> "HistorySnapshot":
        """Build a snapshot from live component and connection iterables."""
        return cls(
            components=tuple(copy.deepcopy(list(components))),
            connections=tuple(copy.deepcopy(list(connections))),
        )

    def restore_components(self) -> list[ComponentData]:
        """Return fresh copies of the stored components, in order."""
        return copy.deepcopy(list(self.components))

    def restore_connections(self) -> list[ConnectionData]:
        """Return fresh copies of the stored connections, in order."""
        return copy.deepcopy(list(self.connections))

    def copy(self) -> "HistorySnapshot":
        """Return a snapshot whose members share nothing with this one."""
        return HistorySnapshot(tuple(self.restore_components()), tuple(self.restore_connections()))

    def is_empty(self) -> bool:
        return not self.components and not self.connections

    def to_dict(self) -> dict:
        return {
            "components": [c.to_dict() for c in self.components],
            "connections": [c.to_dict() for c in self.connections],
        }
