"""Synthetic literature provider standing in for a citation index.

Generates a deterministic but varied set of sources for a claim: the same
claim text always yields the same records. No network access.
"""

import hashlib
import random
from typing import Optional

from loguru import logger

from consensus_system.config.settings import settings
from consensus_system.data_management.schemas import RawSource, StudyType
from consensus_system.sources.base_provider import BaseSourceProvider

MOCK_TITLES: tuple[str, ...] = (
    "Systematic review and meta-analysis of outcomes in adult populations",
    "Randomized controlled trial of intervention effects on primary endpoints",
    "Cohort study of long-term follow-up and subgroup analyses",
    "Observational study of real-world effectiveness and safety",
    "Expert consensus and narrative review of current evidence",
    "Meta-analysis of randomized trials and sensitivity analyses",
    "Multicenter RCT with blinded outcome assessment",
    "Prospective cohort with propensity score matching",
    "Cross-sectional observational study and survey data",
    "Commentary and opinion on emerging evidence",
)

FIRST_YEAR = 2015
YEAR_SPAN = 10  # 2015-2024
MIN_CITATIONS = 10
CITATION_SPAN = 2000  # 10-2009
CLAIM_PREFIX_CHARS = 30


def claim_seed(claim_text: str) -> int:
    """Stable integer seed derived from the claim text."""
    return int(hashlib.sha256(claim_text.encode("utf-8")).hexdigest()[:16], 16)


class SyntheticSourceProvider(BaseSourceProvider):
    """
    Deterministic mock of a scholarly search backend.

    Source count is drawn from [min_sources, max_sources], capped at the
    size of the title pool so titles stay unique.

    Usage:
        provider = SyntheticSourceProvider()
        sources = await provider.fetch_sources("Coffee lowers mortality")
    """

    def __init__(
        self,
        min_sources: Optional[int] = None,
        max_sources: Optional[int] = None,
    ):
        super().__init__(name="synthetic")
        self.min_sources = settings.min_sources if min_sources is None else min_sources
        self.max_sources = settings.max_sources if max_sources is None else max_sources
        if self.min_sources > self.max_sources:
            raise ValueError(
                f"min_sources ({self.min_sources}) exceeds max_sources ({self.max_sources})"
            )
        self.logger = logger.bind(component="SyntheticSourceProvider")

    def generate(self, claim_text: str) -> list[RawSource]:
        """Build the synthetic source list for a claim (synchronous)."""
        rng = random.Random(claim_seed(claim_text))
        count = min(rng.randint(self.min_sources, self.max_sources), len(MOCK_TITLES))
        titles = rng.sample(MOCK_TITLES, count)
        suffix = claim_text[:CLAIM_PREFIX_CHARS]
        study_types = list(StudyType)

        sources = [
            RawSource(
                title=f"{title} ({suffix}…)",
                year=FIRST_YEAR + rng.randrange(YEAR_SPAN),
                citation_count=MIN_CITATIONS + rng.randrange(CITATION_SPAN),
                study_type=rng.choice(study_types),
            )
            for title in titles
        ]
        self.logger.debug(f"Generated {len(sources)} synthetic sources")
        return sources

    async def fetch_sources(self, claim_text: str) -> list[RawSource]:
        return self.generate(claim_text)


__all__ = ["SyntheticSourceProvider", "MOCK_TITLES", "claim_seed"]
