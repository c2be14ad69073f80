"""Base class for all source providers."""

from abc import ABC, abstractmethod

from consensus_system.data_management.schemas import RawSource


class BaseSourceProvider(ABC):
    """
    Abstract base class for literature source providers.

    A provider turns claim text into raw source records. Production providers
    would query a citation index over the network; retries and timeouts are
    the provider's concern, not the scoring core's.

    Attributes:
        name: Human-readable provider name
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def fetch_sources(self, claim_text: str) -> list[RawSource]:
        """
        Fetch raw sources relevant to a claim.

        An empty list is a legal answer and must not be treated as an error.

        Args:
            claim_text: Natural-language claim

        Returns:
            Fully materialized list of RawSource records
        """
        pass
