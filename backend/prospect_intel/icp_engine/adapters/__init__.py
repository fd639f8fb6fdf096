"""
Fetcher factory and registry.
"""
from typing import Any, Dict, Optional

from .base import SourceFetcher
from .record_adapter import RecordSourceFetcher

# Registry of available fetchers
ADAPTER_REGISTRY = {
    "records": RecordSourceFetcher,
}


def get_adapter(source_type: str, config: Optional[Dict[str, Any]] = None) -> SourceFetcher:
    """
    Factory function to create appropriate fetcher.

    Args:
        source_type: Type of source (records)
        config: Fetcher configuration

    Returns:
        Instantiated fetcher
    """
    adapter_class = ADAPTER_REGISTRY.get(source_type)

    if not adapter_class:
        raise ValueError(
            f"Unknown source type: {source_type}. "
            f"Available: {list(ADAPTER_REGISTRY.keys())}"
        )

    return adapter_class(config or {})
