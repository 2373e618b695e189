"""File discovery: grammar construction and recursive matching."""

from libbids.discovery.finder import DiscoveryError, iter_bids_files
from libbids.discovery.pattern import DiscoveryPattern, build_discovery_pattern

__all__ = ["DiscoveryPattern", "build_discovery_pattern", "iter_bids_files", "DiscoveryError"]
