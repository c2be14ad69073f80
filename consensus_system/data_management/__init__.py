"""Data management: schemas and analysis storage."""

from consensus_system.data_management.analysis_store import AnalysisStore

__all__ = ["AnalysisStore"]
