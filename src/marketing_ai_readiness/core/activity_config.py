"""Marketing activity impact table and company size table.

Activity impact weights express how much AI changes each practice area and
are used to blend activity scores. ROI multipliers are the theoretical
productivity gain an AI-mature team realises in that activity.

Company sizes give the typical marketing team shape used as the labour cost
baseline for impact estimates.
"""

from marketing_ai_readiness.core.models import ActivityDefinition, CompanySizeProfile

ACTIVITIES: list[ActivityDefinition] = [
    ActivityDefinition(
        key="content_marketing",
        label="Content Marketing",
        impact_weight=0.15,
        roi_multiplier=3.5,
        ai_impact="Very High",
    ),
    ActivityDefinition(
        key="analytics_data",
        label="Analytics & Data",
        impact_weight=0.15,
        roi_multiplier=4.0,
        ai_impact="Very High",
    ),
    ActivityDefinition(
        key="seo_sem",
        label="SEO/SEM",
        impact_weight=0.12,
        roi_multiplier=2.0,
        ai_impact="High",
    ),
    ActivityDefinition(
        key="paid_advertising",
        label="Paid Advertising",
        impact_weight=0.12,
        roi_multiplier=1.5,
        ai_impact="High",
    ),
    ActivityDefinition(
        key="social_media",
        label="Social Media",
        impact_weight=0.10,
        roi_multiplier=2.5,
        ai_impact="High",
    ),
    ActivityDefinition(
        key="email_marketing",
        label="Email Marketing",
        impact_weight=0.10,
        roi_multiplier=2.0,
        ai_impact="High",
    ),
    ActivityDefinition(
        key="creative_design",
        label="Creative & Design",
        impact_weight=0.10,
        roi_multiplier=3.0,
        ai_impact="Very High",
    ),
    ActivityDefinition(
        key="marketing_automation",
        label="Marketing Automation",
        impact_weight=0.08,
        roi_multiplier=2.5,
        ai_impact="High",
    ),
    ActivityDefinition(
        key="pr_communications",
        label="PR & Communications",
        impact_weight=0.05,
        roi_multiplier=1.3,
        ai_impact="Moderate",
    ),
    ActivityDefinition(
        key="events_webinars",
        label="Events & Webinars",
        impact_weight=0.03,
        roi_multiplier=1.2,
        ai_impact="Moderate",
    ),
]

COMPANY_SIZES: list[CompanySizeProfile] = [
    CompanySizeProfile(key="solo", label="Solo marketer", team_size=1, cost_per_person=60000.0),
    CompanySizeProfile(key="small", label="Small team (2-5)", team_size=3, cost_per_person=65000.0),
    CompanySizeProfile(
        key="medium", label="Mid-size team (6-15)", team_size=8, cost_per_person=70000.0
    ),
    CompanySizeProfile(
        key="large", label="Large team (16+)", team_size=20, cost_per_person=75000.0
    ),
]
