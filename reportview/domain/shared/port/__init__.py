from typing import Protocol


class Port(Protocol):
    """Marker base for interfaces the domain depends on but does not implement."""
