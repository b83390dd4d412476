"""Registry of named control endpoints."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .errors import ConfigError


@dataclass(frozen=True)
class Endpoint:
    """A remote bot process that can be switched on and off.

    Attributes:
        name: Human-readable, case-insensitive identifier (e.g., "reasoning")
        url: Base address; control requests go to "<url>/<action>"
    """
    name: str
    url: str


class EndpointRegistry:
    """Fixed, ordered set of endpoints, looked up by name.

    Built once at startup and never mutated, so it can be shared by every
    message handler without locking.
    """

    def __init__(self, endpoints: Iterable[Endpoint]):
        self._endpoints: Tuple[Endpoint, ...] = tuple(endpoints)
        self._by_name = {}
        for endpoint in self._endpoints:
            key = endpoint.name.lower()
            if key in self._by_name:
                raise ConfigError(f"Duplicate bot name: {endpoint.name}")
            self._by_name[key] = endpoint

    def find(self, name: Optional[str]) -> Optional[Endpoint]:
        """Find an endpoint by exact, case-insensitive name."""
        if not name:
            return None
        return self._by_name.get(name.lower())

    def names(self) -> List[str]:
        """Get endpoint names in registration order."""
        return [endpoint.name for endpoint in self._endpoints]

    def listing(self) -> str:
        """Get the names as a comma-separated string for chat replies."""
        return ", ".join(self.names())

    def __iter__(self) -> Iterator[Endpoint]:
        return iter(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)
