"""Network settings aggregation over ``lxc.network.type`` declarations.

Each ``lxc.network.type`` line opens a new interface block and closes the
previous one.  Closing a block evaluates its type:

    ``none``                 no networking at all; the container must not
                             get the implicit loopback-only network
    ``""`` / ``empty``       contributes nothing
    anything else            one configured interface

The last block is never closed by a following declaration, so callers
must ``flush()`` once the walk is over.

When nothing configured an interface and nothing said ``none``, LXC
gives the container loopback only; the importer mirrors that with the
``PRIVNET`` feature.
"""
from __future__ import annotations

import logging

from lxcnative.conf import PropertyStore

logger = logging.getLogger(__name__)

NETWORK_TYPE_KEY = "lxc.network.type"
_NO_INTERFACE_TYPES = frozenset({"", "empty"})


class NetworkAggregator:
    """State machine tracking the current interface block."""

    __slots__ = ("pending_type", "implicit_private_network", "interface_count")

    def __init__(self) -> None:
        self.pending_type: str | None = None
        self.implicit_private_network: bool = True
        self.interface_count: int = 0

    def feed(self, net_type: str | None) -> None:
        """Close the current block and open a new one of type ``net_type``."""
        self._close()
        self.pending_type = net_type

    def flush(self) -> None:
        """Close the final block."""
        self._close()
        self.pending_type = None

    def _close(self) -> None:
        net_type = self.pending_type
        if net_type is None:
            return
        if net_type == "none":
            self.implicit_private_network = False
        elif net_type not in _NO_INTERFACE_TYPES:
            self.interface_count += 1

    @property
    def private_network(self) -> bool:
        """Whether the definition should get the loopback-only network."""
        return self.interface_count == 0 and self.implicit_private_network


def convert_network_settings(properties: PropertyStore) -> bool:
    """Walk every ``lxc.network.type`` entry and decide on ``PRIVNET``.

    Returns
    -------
    bool
        True if the private-network feature must be enabled.
    """
    aggregator = NetworkAggregator()
    for entry in properties:
        if entry.key == NETWORK_TYPE_KEY:
            aggregator.feed(entry.value)
    aggregator.flush()

    logger.debug(
        "Network settings: %d interface(s), private network %s",
        aggregator.interface_count,
        "on" if aggregator.private_network else "off",
    )
    return aggregator.private_network
