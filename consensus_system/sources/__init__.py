"""Source providers: where raw literature records come from."""

from consensus_system.sources.base_provider import BaseSourceProvider
from consensus_system.sources.synthetic_provider import SyntheticSourceProvider

__all__ = ["BaseSourceProvider", "SyntheticSourceProvider"]
