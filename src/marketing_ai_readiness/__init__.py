"""Marketing AI Readiness scoring service.

Turns Likert-scale answers about a marketing team's AI maturity into a
benchmark-normalised readiness score, peer comparison, prioritised
recommendations, and an illustrative ROI projection.
"""

__version__ = "0.1.0"
