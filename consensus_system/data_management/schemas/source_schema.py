"""Source schemas: literature records as returned by a source provider.

RawSource is owned by the caller and never mutated. WeightedSource adds a
credibility weight that is always recomputed from the raw fields and the
current year; it is never accepted as provider input.
"""

from enum import Enum
from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

from consensus_system.exceptions import InvalidStudyType


class StudyType(str, Enum):
    """Study-design category of a source.

    Declaration order is the canonical evidence ranking, strongest first:
    systematic synthesis > experimental > observational > anecdotal.
    """

    META_ANALYSIS = "Meta-analysis"
    RCT = "RCT"
    COHORT = "Cohort"
    OBSERVATIONAL = "Observational"
    OPINION = "Opinion"

    @classmethod
    def from_label(cls, value: Union["StudyType", str]) -> "StudyType":
        """Resolve a member from itself or its exact label.

        Raises:
            InvalidStudyType: If value is not one of the five labels.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidStudyType(value) from None


class RawSource(BaseModel):
    """One literature record as returned by a source provider."""

    title: str = Field(..., description="Publication title")
    year: int = Field(..., description="Publication year")
    citation_count: int = Field(..., ge=0, description="Times cited")
    study_type: StudyType = Field(..., description="Study-design category")

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Systematic review and meta-analysis of outcomes in adult populations",
                    "year": 2021,
                    "citation_count": 412,
                    "study_type": "Meta-analysis",
                }
            ]
        },
    }

    @field_validator("study_type", mode="before")
    @classmethod
    def resolve_study_type(cls, value: Any) -> StudyType:
        """Fail fast on categories outside the closed set.

        InvalidStudyType is not a ValueError, so pydantic lets it propagate
        instead of folding it into a ValidationError.
        """
        return StudyType.from_label(value)


class WeightedSource(RawSource):
    """A RawSource plus its derived credibility weight."""

    credibility_weight: float = Field(
        ..., ge=0.0, description="log(citations + 1) * type weight / recency"
    )

    @classmethod
    def from_raw(cls, raw: RawSource, credibility_weight: float) -> "WeightedSource":
        """Attach a computed weight to a raw source.

        Only the four raw fields are copied, so an already weighted source is
        re-weighted rather than carrying its old weight along.
        """
        return cls(
            title=raw.title,
            year=raw.year,
            citation_count=raw.citation_count,
            study_type=raw.study_type,
            credibility_weight=credibility_weight,
        )
