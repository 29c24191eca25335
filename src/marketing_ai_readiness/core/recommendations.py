"""Recommendation selection and prioritisation.

Templates are gathered from three sources: dimension templates matched
against each dimension score, activity templates matched against each
selected activity score, and the industry's immediate templates matched
against the overall score. Candidates are scored for relevance, deduplicated
by template id, ordered, and truncated.

Ordering:
    1. priority HIGH -> MEDIUM -> LOW
    2. relevance score, highest first
    3. catalog declaration order
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from marketing_ai_readiness.core.models import (
    ActivityScore,
    DimensionScore,
    Recommendation,
    RecommendationTemplate,
)
from marketing_ai_readiness.core.policy import (
    ACTIVITY_BANDS,
    DEFAULT_MAX_RECOMMENDATIONS,
    DIMENSION_BANDS,
    HEALTHY_SCORE_THRESHOLD,
    INDUSTRY_BANDS,
    INDUSTRY_TEMPLATE_HORIZON,
    MAX_RELEVANCE_ADJUSTMENT,
    PRIORITY_BASE_RELEVANCE,
    PRIORITY_ORDER,
    band_for,
    clamp_score,
)
from marketing_ai_readiness.observability import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class _Candidate:
    order: int
    recommendation: Recommendation


def relevance_score(priority: str, source_score: float) -> float:
    """Compute the relevance of a template for a given underlying score.

    The priority sets the base (HIGH 80, MEDIUM 60, LOW 40). Scores below the
    healthy threshold of 70 raise relevance by up to 15 points; scores above
    it lower relevance by up to 15 points.

    Args:
        priority: Template priority.
        source_score: Score of the dimension, activity, or overall result
            the template was matched against.

    Returns:
        Relevance in range 0-100.
    """
    base = PRIORITY_BASE_RELEVANCE[priority]
    adjustment = (
        (HEALTHY_SCORE_THRESHOLD - source_score)
        / HEALTHY_SCORE_THRESHOLD
        * MAX_RELEVANCE_ADJUSTMENT
    )
    adjustment = max(-MAX_RELEVANCE_ADJUSTMENT, min(MAX_RELEVANCE_ADJUSTMENT, adjustment))
    return round(clamp_score(base + adjustment), 2)


class RecommendationSelector:
    """Chooses and ranks recommendation templates for one assessment."""

    def _source_score(
        self,
        template: RecommendationTemplate,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
        overall_score: float,
        industry_key: str | None,
    ) -> float | None:
        """Return the score a template should be matched against, if any."""
        kind, key = template.applies_to
        if kind == "dimension":
            dimension_score = dimension_scores.get(key or "")
            return dimension_score.value if dimension_score is not None else None
        if kind == "activity":
            activity_score = activity_scores.get(key or "")
            return activity_score.value if activity_score is not None else None
        if key != industry_key or template.horizon != INDUSTRY_TEMPLATE_HORIZON:
            return None
        return overall_score

    def select(
        self,
        dimension_scores: Mapping[str, DimensionScore],
        activity_scores: Mapping[str, ActivityScore],
        overall_score: float,
        industry_key: str | None,
        catalog: Iterable[RecommendationTemplate],
        max_results: int = DEFAULT_MAX_RECOMMENDATIONS,
    ) -> tuple[Recommendation, ...]:
        """Select, rank, and truncate recommendations.

        Args:
            dimension_scores: Dimension key -> DimensionScore.
            activity_scores: Activity key -> ActivityScore.
            overall_score: Overall score used for industry templates.
            industry_key: Selected industry, or None.
            catalog: Recommendation templates in declaration order.
            max_results: Maximum number of recommendations to return.

        Returns:
            Ordered tuple of at most ``max_results`` recommendations.
        """
        if max_results <= 0:
            return ()

        best: dict[str, _Candidate] = {}
        for order, template in enumerate(catalog):
            source_score = self._source_score(
                template, dimension_scores, activity_scores, overall_score, industry_key
            )
            if source_score is None or not template.score_band.contains(source_score):
                continue

            source, source_key = template.applies_to
            candidate = _Candidate(
                order=order,
                recommendation=Recommendation(
                    template_id=template.template_id,
                    title=template.title,
                    body=template.body,
                    priority=template.priority,
                    source=source,
                    source_key=source_key or "",
                    source_score=source_score,
                    relevance_score=relevance_score(template.priority, source_score),
                    horizon=template.horizon,
                    investment_hint=template.investment_hint,
                    timeline_hint=template.timeline_hint,
                ),
            )
            existing = best.get(template.template_id)
            if (
                existing is None
                or candidate.recommendation.relevance_score
                > existing.recommendation.relevance_score
            ):
                best[template.template_id] = candidate

        ranked = sorted(
            best.values(),
            key=lambda c: (
                PRIORITY_ORDER[c.recommendation.priority],
                -c.recommendation.relevance_score,
                c.order,
            ),
        )
        selected = tuple(c.recommendation for c in ranked[:max_results])

        logger.debug(
            "Recommendations selected",
            candidates=len(ranked),
            selected=len(selected),
            dimension_bands={
                key: band_for(score.value, DIMENSION_BANDS)
                for key, score in dimension_scores.items()
            },
            activity_bands={
                key: band_for(score.value, ACTIVITY_BANDS)
                for key, score in activity_scores.items()
            },
            industry_band=band_for(overall_score, INDUSTRY_BANDS),
        )
        return selected
