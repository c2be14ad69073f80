"""Pipeline orchestration for claim analysis.

- ClaimAnalysisPipeline: claim text -> sources -> consensus outcome -> store
"""

from consensus_system.pipeline.analysis_pipeline import ClaimAnalysisPipeline

__all__ = ["ClaimAnalysisPipeline"]
