"""Claim analysis orchestration.

Fetches sources for a claim, runs the consensus engine and hands back an
AnalysisResult, saving it when a store is configured.

Usage:
    from consensus_system.pipeline import ClaimAnalysisPipeline

    pipeline = ClaimAnalysisPipeline()
    result = await pipeline.analyze("Vitamin D supplements prevent colds")
"""

from typing import Optional

from consensus_system.config.settings import resolve_current_year
from consensus_system.data_management.analysis_store import AnalysisStore
from consensus_system.data_management.schemas import AnalysisResult
from consensus_system.scoring.engine import ConsensusEngine
from consensus_system.sources.base_provider import BaseSourceProvider
from consensus_system.sources.synthetic_provider import SyntheticSourceProvider
from consensus_system.utils.logging import get_correlation_id, get_structured_logger


class ClaimAnalysisPipeline:
    """Orchestrates one claim analysis end to end.

    The current year is resolved once at construction and passed explicitly
    to the engine, so every analysis from one pipeline weights recency the
    same way.
    """

    def __init__(
        self,
        provider: Optional[BaseSourceProvider] = None,
        store: Optional[AnalysisStore] = None,
        current_year: Optional[int] = None,
    ) -> None:
        """Initialize ClaimAnalysisPipeline.

        Args:
            provider: Source provider. Synthetic provider if None.
            store: Where results are saved. Results are not persisted if None.
            current_year: Year for recency weighting. Settings or clock if None.
        """
        self.provider = provider or SyntheticSourceProvider()
        self.store = store
        self.current_year = resolve_current_year(current_year)
        self.engine = ConsensusEngine(self.current_year)
        self._logger = get_structured_logger(__name__, component="ClaimAnalysisPipeline")

    async def analyze(self, claim_text: str) -> AnalysisResult:
        """Analyze one claim.

        Args:
            claim_text: Natural-language claim.

        Returns:
            AnalysisResult with weighted sources and consensus outcome.

        Raises:
            ValueError: If the claim text is empty after stripping.
            InvalidStudyType: If the provider returns an unknown study type.
        """
        text = claim_text.strip() if isinstance(claim_text, str) else ""
        if not text:
            self._logger.warning("claim_rejected", reason="empty claim text")
            raise ValueError("Missing or invalid claim text.")

        log = self._logger.bind(correlation_id=get_correlation_id())
        raw_sources = await self.provider.fetch_sources(text)
        log.debug("sources_fetched", provider=self.provider.name, count=len(raw_sources))

        weighted, outcome = self.engine.evaluate(raw_sources)
        result = AnalysisResult(
            claim_text=text,
            current_year=self.current_year,
            sources=weighted,
            outcome=outcome,
        )

        if self.store is not None:
            await self.store.save_analysis(result)

        log.info(
            "analysis_completed",
            analysis_id=result.analysis_id,
            source_count=outcome.source_count,
            consensus_score=outcome.consensus_score,
            risk=outcome.misinformation_risk.value,
        )
        return result
