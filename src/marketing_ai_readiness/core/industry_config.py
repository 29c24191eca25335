"""Industry weighting and benchmark table.

Each profile redistributes the dimension weights for one industry and carries
the average and top-quartile readiness observed for it. Requests with an
unknown or absent industry key are scored against the equal-weight default
profile built by ``default_industry_profile``.
"""

from marketing_ai_readiness.core.models import IndustryProfile
from marketing_ai_readiness.core.policy import (
    FALLBACK_BENCHMARK_AVERAGE,
    FALLBACK_BENCHMARK_TOP_QUARTILE,
)

DEFAULT_INDUSTRY_KEY: str = "default"

INDUSTRY_PROFILES: list[IndustryProfile] = [
    IndustryProfile(
        key="b2b_saas",
        label="B2B SaaS",
        dimension_weights={
            "people_skills": 0.30,
            "process_infrastructure": 0.40,
            "strategy_leadership": 0.30,
        },
        benchmark_average=75.0,
        benchmark_top_quartile=90.0,
    ),
    IndustryProfile(
        key="manufacturing",
        label="Manufacturing",
        dimension_weights={
            "people_skills": 0.40,
            "process_infrastructure": 0.30,
            "strategy_leadership": 0.30,
        },
        benchmark_average=50.0,
        benchmark_top_quartile=70.0,
    ),
    IndustryProfile(
        key="healthcare",
        label="Healthcare",
        dimension_weights={
            "people_skills": 0.30,
            "process_infrastructure": 0.40,
            "strategy_leadership": 0.30,
        },
        benchmark_average=55.0,
        benchmark_top_quartile=72.0,
    ),
    IndustryProfile(
        key="financial_services",
        label="Financial Services",
        dimension_weights={
            "people_skills": 0.30,
            "process_infrastructure": 0.40,
            "strategy_leadership": 0.30,
        },
        benchmark_average=65.0,
        benchmark_top_quartile=85.0,
    ),
    IndustryProfile(
        key="ecommerce_retail",
        label="E-commerce/Retail",
        dimension_weights={
            "people_skills": 0.35,
            "process_infrastructure": 0.35,
            "strategy_leadership": 0.30,
        },
        benchmark_average=70.0,
        benchmark_top_quartile=88.0,
    ),
]


def default_industry_profile(dimensions: list[str]) -> IndustryProfile:
    """Build the equal-weight profile used when no industry matches.

    Args:
        dimensions: Dimension keys known to the catalog.

    Returns:
        IndustryProfile with key 'default', equal weights summing to 1.0,
        and the fallback benchmark (average 60, top quartile 80).
    """
    share = 1.0 / len(dimensions) if dimensions else 0.0
    return IndustryProfile(
        key=DEFAULT_INDUSTRY_KEY,
        label="General",
        dimension_weights={dimension: share for dimension in dimensions},
        benchmark_average=FALLBACK_BENCHMARK_AVERAGE,
        benchmark_top_quartile=FALLBACK_BENCHMARK_TOP_QUARTILE,
    )
