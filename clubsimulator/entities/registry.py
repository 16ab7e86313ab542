"""Who is inside the club right now."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from clubsimulator.core.temporal import Instant

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Clients that have arrived and not yet left, seated or not.

    Each name is present at most once. Iteration follows arrival order;
    use ``sorted_names()`` for the closing-time order.
    """

    def __init__(self) -> None:
        self._arrivals: dict[str, Instant] = {}

    def admit(self, client: str, at: Instant) -> None:
        """Record ``client`` as present.

        Raises:
            ValueError: If the client is already inside.
        """
        if client in self._arrivals:
            raise ValueError(f"Client {client!r} is already in the club")
        self._arrivals[client] = at
        logger.debug("Admitted %s at %s (%d inside)", client, at, len(self._arrivals))

    def discharge(self, client: str) -> bool:
        """Forget ``client``. Returns False if they were not inside."""
        if self._arrivals.pop(client, None) is None:
            return False
        logger.debug("Discharged %s (%d inside)", client, len(self._arrivals))
        return True

    def arrived_at(self, client: str) -> Instant | None:
        return self._arrivals.get(client)

    def sorted_names(self) -> list[str]:
        return sorted(self._arrivals)

    def __contains__(self, client: object) -> bool:
        return client in self._arrivals

    def __len__(self) -> int:
        return len(self._arrivals)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._arrivals))

    def __repr__(self) -> str:
        return f"SessionRegistry(present={len(self._arrivals)})"
