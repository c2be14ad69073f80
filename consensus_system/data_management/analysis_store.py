"""Analysis result storage with optional JSON persistence.

Follows the same patterns as the other stores:
- O(1) lookup by analysis_id, secondary index by claim_id
- Safe for concurrent use with an asyncio lock
- Optional JSON persistence, written on every save and loaded on startup

Usage:
    from consensus_system.data_management.analysis_store import AnalysisStore

    store = AnalysisStore()
    await store.save_analysis(result)
    result = await store.get_analysis(result.analysis_id)
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

import structlog

from consensus_system.data_management.schemas import AnalysisResult, MisinformationRisk
from consensus_system.exceptions import InvalidStudyType


class AnalysisStore:
    """Storage for claim analyses.

    Data structure:
    {
        analysis_id: AnalysisResult,
        ...
    }
    plus claim_id -> [analysis_id, ...] in save order.
    """

    def __init__(self, persistence_path: Optional[str] = None) -> None:
        """Initialize AnalysisStore.

        Args:
            persistence_path: Optional path to JSON file for persistence.
                            If None, storage is memory-only.
        """
        self._analyses: dict[str, AnalysisResult] = {}
        self._claim_index: dict[str, list[str]] = {}
        self._lock = asyncio.Lock()
        self._persistence_path = Path(persistence_path) if persistence_path else None
        self._logger = structlog.get_logger().bind(component="AnalysisStore")

        if self._persistence_path:
            self._load_from_file()

    async def save_analysis(self, result: AnalysisResult) -> None:
        """Save an analysis result, replacing any previous one with the same id.

        Args:
            result: AnalysisResult to store.
        """
        async with self._lock:
            self._index(result)

            self._logger.debug(
                "analysis_saved",
                analysis_id=result.analysis_id,
                claim_id=result.claim_id,
                risk=result.outcome.misinformation_risk.value,
            )

            if self._persistence_path:
                self._save_to_file()

    async def get_analysis(self, analysis_id: str) -> Optional[AnalysisResult]:
        """Get an analysis by id, or None if unknown."""
        async with self._lock:
            return self._analyses.get(analysis_id)

    async def get_by_claim(self, claim_id: str) -> list[AnalysisResult]:
        """Get all analyses of one claim, oldest first."""
        async with self._lock:
            return [self._analyses[a] for a in self._claim_index.get(claim_id, [])]

    async def list_analyses(self, limit: Optional[int] = None) -> list[AnalysisResult]:
        """List analyses newest first.

        Args:
            limit: Maximum number of results (all if None).
        """
        async with self._lock:
            ordered = sorted(
                self._analyses.values(),
                key=lambda r: r.created_at,
                reverse=True,
            )
            return ordered[:limit] if limit is not None else ordered

    async def get_stats(self) -> dict[str, Any]:
        """Get analysis counts, overall and per misinformation risk."""
        async with self._lock:
            risk_counts = {risk.value: 0 for risk in MisinformationRisk}
            for record in self._analyses.values():
                risk_counts[record.outcome.misinformation_risk.value] += 1
            return {
                "total": len(self._analyses),
                "claims": len(self._claim_index),
                "risk_counts": risk_counts,
            }

    def _index(self, result: AnalysisResult) -> None:
        is_new = result.analysis_id not in self._analyses
        self._analyses[result.analysis_id] = result
        if is_new:
            self._claim_index.setdefault(result.claim_id, []).append(result.analysis_id)

    def _save_to_file(self) -> None:
        """Save to JSON file (synchronous)."""
        if not self._persistence_path:
            return
        try:
            self._persistence_path.parent.mkdir(parents=True, exist_ok=True)
            data = {
                analysis_id: record.model_dump(mode="json")
                for analysis_id, record in self._analyses.items()
            }
            with open(self._persistence_path, "w") as f:
                json.dump(data, f, indent=2, default=str)
        except OSError as e:
            self._logger.error("persistence_failed", error=str(e))

    def _load_from_file(self) -> None:
        """Load analyses from JSON file and rebuild the claim index (synchronous)."""
        if not self._persistence_path or not self._persistence_path.exists():
            return
        try:
            with open(self._persistence_path, "r") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            records = [AnalysisResult.model_validate(raw) for raw in data.values()]
        except (OSError, ValueError, InvalidStudyType) as e:
            # ValueError covers both JSONDecodeError and pydantic ValidationError
            self._logger.error("load_failed", path=str(self._persistence_path), error=str(e))
            self._quarantine_file()
            return

        for record in sorted(records, key=lambda r: r.created_at):
            self._index(record)
        self._logger.info("analyses_loaded", count=len(self._analyses))

    def _quarantine_file(self) -> None:
        """Move an unreadable store file aside so the next save cannot overwrite it."""
        if not self._persistence_path or not self._persistence_path.exists():
            return
        corrupt_path = self._persistence_path.with_name(self._persistence_path.name + ".corrupt")
        try:
            self._persistence_path.replace(corrupt_path)
        except OSError as e:
            # Memory-only from here on; the unreadable file stays untouched
            self._logger.error("quarantine_failed", path=str(self._persistence_path), error=str(e))
            self._persistence_path = None
            return
        self._logger.warning("store_quarantined", corrupt_path=str(corrupt_path))
