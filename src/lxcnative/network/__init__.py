"""Network settings aggregation.

Exports ``NetworkAggregator`` and ``convert_network_settings``.
"""
from __future__ import annotations

from lxcnative.network.aggregator import NetworkAggregator, convert_network_settings

__all__ = ["NetworkAggregator", "convert_network_settings"]
