"""Quality assessments and rubrics for subjective tasks."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union


class QualityMetric(Enum):
    """A standard dimension along which a solution's quality is scored."""

    OVERALL = "overall"
    CREATIVITY = "creativity"
    ACCURACY = "accuracy"
    COHERENCE = "coherence"
    COMPLETENESS = "completeness"
    RELEVANCE = "relevance"


@dataclass(frozen=True)
class CustomMetric:
    """A task-specific metric identified by name."""

    name: str


Metric = Union[QualityMetric, CustomMetric]


@dataclass
class QualityAssessment:
    """Quality scores (0-100) given to a solution."""

    overall_score: int
    metrics: List[Tuple[Metric, int]] = field(default_factory=list)
    feedback: Optional[str] = None

    @classmethod
    def simple(cls, score: int) -> QualityAssessment:
        """Create an assessment with only an overall score."""
        return cls(overall_score=score)

    @classmethod
    def detailed(cls, metrics: Sequence[Tuple[Metric, int]]) -> QualityAssessment:
        """Create an assessment whose overall score is the truncated mean of the metrics."""
        metric_list = list(metrics)
        overall = (
            sum(score for _, score in metric_list) // len(metric_list)
            if metric_list
            else 0
        )
        return cls(overall_score=overall, metrics=metric_list)

    def with_feedback(self, feedback: str) -> QualityAssessment:
        """Return a copy of this assessment carrying textual feedback."""
        return dataclasses.replace(self, metrics=list(self.metrics), feedback=str(feedback))

    def meets_threshold(self, threshold: int) -> bool:
        """Return True if the overall score is at least ``threshold``."""
        return self.overall_score >= threshold

    def metric_score(self, metric: Metric) -> Optional[int]:
        """Return the score recorded for ``metric``, or None."""
        return next((score for m, score in self.metrics if m == metric), None)


@dataclass
class QualityRubric:
    """Weighted metrics and a passing threshold for one kind of task."""

    required_metrics: List[Metric] = field(
        default_factory=lambda: [QualityMetric.OVERALL]
    )
    weights: List[int] = field(default_factory=lambda: [100])
    passing_threshold: int = 70

    @classmethod
    def creative(cls) -> QualityRubric:
        """Rubric for creative tasks."""
        return cls(
            required_metrics=[
                QualityMetric.CREATIVITY,
                QualityMetric.COHERENCE,
                QualityMetric.RELEVANCE,
            ],
            weights=[40, 30, 30],
            passing_threshold=65,
        )

    @classmethod
    def accuracy_focused(cls) -> QualityRubric:
        """Rubric for accuracy-focused tasks."""
        return cls(
            required_metrics=[
                QualityMetric.ACCURACY,
                QualityMetric.COMPLETENESS,
                QualityMetric.RELEVANCE,
            ],
            weights=[50, 30, 20],
            passing_threshold=75,
        )

    def calculate_weighted_score(self, assessment: QualityAssessment) -> int:
        """Weighted mean of the assessed metrics, falling back to the overall score."""
        if len(self.required_metrics) != len(self.weights):
            return assessment.overall_score

        weighted_sum = 0
        total_weight = 0
        for metric, weight in zip(self.required_metrics, self.weights):
            score = assessment.metric_score(metric)
            if score is not None:
                weighted_sum += score * weight
                total_weight += weight

        if total_weight == 0:
            return assessment.overall_score
        return (weighted_sum // total_weight) & 0xFF

    def passes(self, assessment: QualityAssessment) -> bool:
        """Return True if the weighted score reaches the passing threshold."""
        return self.calculate_weighted_score(assessment) >= self.passing_threshold