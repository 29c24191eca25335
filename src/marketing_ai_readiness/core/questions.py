"""In-house marketing AI readiness question catalog.

Contains the core questions for the three capability dimensions, the
activity-specific questions for each marketing activity, and one
industry-context question per supported industry. Answers are option values
on a 0-5 scale; each question's ``option_scores`` maps the offered options to
points, and a ``None`` point value marks a "not applicable" option.

Dimensions:
    people_skills           - AI champions, learning culture, adoption habits
    process_infrastructure  - time, budget, tooling, data, and quality control
    strategy_leadership     - leadership attitude, ownership, decision speed

Activities pr_communications and events_webinars have no
questions; they are scored at the neutral default when selected.
"""

from marketing_ai_readiness.core.models import DimensionDefinition, Question

# Option maps shared by several questions. Not every question offers every
# value on the 0-5 scale.
_FULL_SCALE: dict[int, float | None] = {0: 0.0, 1: 1.0, 2: 2.0, 3: 3.0, 4: 4.0, 5: 5.0}
_NO_ONE: dict[int, float | None] = {0: 0.0, 2: 2.0, 3: 3.0, 4: 4.0, 5: 5.0}
_FROM_ONE: dict[int, float | None] = {1: 1.0, 2: 2.0, 3: 3.0, 4: 4.0, 5: 5.0}
# Option 0 means the team does not do this at all.
_OPTIONAL_PRACTICE: dict[int, float | None] = {
    0: None,
    1: 1.0,
    2: 2.0,
    3: 3.0,
    4: 4.0,
    5: 5.0,
}


DIMENSION_DEFINITIONS: list[DimensionDefinition] = [
    DimensionDefinition(
        key="people_skills",
        label="People & Skills",
        strength_insight="Strong AI skills foundation positions your team as an early adopter",
        gap_insight="Critical AI skills gap requires immediate training investment",
        risk_message="Skills Gap Risk: Limited AI expertise may slow implementation",
    ),
    DimensionDefinition(
        key="process_infrastructure",
        label="Process & Infrastructure",
        strength_insight="Mature process infrastructure enables rapid AI scaling",
        gap_insight="Process infrastructure gaps may limit AI implementation success",
        risk_message="Infrastructure Risk: Weak processes may limit AI scaling",
    ),
    DimensionDefinition(
        key="strategy_leadership",
        label="Strategy & Leadership",
        strength_insight="Strong leadership support provides foundation for AI transformation",
        gap_insight="Limited strategic planning may slow AI adoption progress",
        risk_message="Strategic Risk: Lack of leadership support may undermine initiatives",
    ),
]

ALL_DIMENSIONS: list[str] = [definition.key for definition in DIMENSION_DEFINITIONS]


QUESTION_BANK: list[Question] = [
    # -----------------------------------------------------------------------
    # Dimension: people_skills (5 core questions)
    # -----------------------------------------------------------------------
    Question(
        question_id="PS_01",
        dimension="people_skills",
        text="Is there someone on your team who gets excited about trying new marketing tools?",
        weight=4.0,
        option_scores=_NO_ONE,
    ),
    Question(
        question_id="PS_02",
        dimension="people_skills",
        text="When someone learns something new, what typically happens?",
        weight=3.0,
        option_scores=_NO_ONE,
    ),
    Question(
        question_id="PS_03",
        dimension="people_skills",
        text="What happens when someone tries a new approach and it doesn't work perfectly?",
        weight=3.5,
        option_scores={0: 0.0, 1: 1.0, 3: 3.0, 4: 4.0, 5: 5.0},
    ),
    Question(
        question_id="PS_04",
        dimension="people_skills",
        text="How does your team typically find out about new marketing tools?",
        weight=2.0,
        option_scores=_FROM_ONE,
    ),
    Question(
        question_id="PS_05",
        dimension="people_skills",
        text="Think about the last time you introduced a new tool or process. How did it go?",
        weight=3.0,
        option_scores=_FULL_SCALE,
    ),
    # -----------------------------------------------------------------------
    # Dimension: process_infrastructure (5 core questions)
    # -----------------------------------------------------------------------
    Question(
        question_id="PI_01",
        dimension="process_infrastructure",
        text="If we said 'spend 2 hours this week learning AI tools', what would happen?",
        weight=3.5,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="PI_02",
        dimension="process_infrastructure",
        text="If an AI tool could save 10 hours/week but cost £200/month, what would happen?",
        weight=3.0,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="PI_03",
        dimension="process_infrastructure",
        text="How well documented are your current marketing processes?",
        weight=2.5,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="PI_04",
        dimension="process_infrastructure",
        text="How organized is your marketing data and content?",
        weight=2.5,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="PI_05",
        dimension="process_infrastructure",
        text="How do you ensure quality and brand consistency now?",
        weight=3.0,
        option_scores=_FROM_ONE,
    ),
    # -----------------------------------------------------------------------
    # Dimension: strategy_leadership (5 core questions)
    # -----------------------------------------------------------------------
    Question(
        question_id="SL_01",
        dimension="strategy_leadership",
        text="What's your leadership's real attitude toward AI?",
        weight=4.0,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="SL_02",
        dimension="strategy_leadership",
        text="How long would it take to get approval for a new AI tool?",
        weight=3.0,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="SL_03",
        dimension="strategy_leadership",
        text="What metrics actually matter to your leadership?",
        weight=3.0,
        option_scores=_FROM_ONE,
    ),
    Question(
        question_id="SL_04",
        dimension="strategy_leadership",
        text="If you implemented AI across marketing, who would own it?",
        weight=3.5,
        option_scores=_FULL_SCALE,
    ),
    Question(
        question_id="SL_05",
        dimension="strategy_leadership",
        text="Be honest - is anyone already using AI tools like ChatGPT for work?",
        weight=3.0,
        option_scores=_FULL_SCALE,
    ),
    # -----------------------------------------------------------------------
    # Activity questions
    # -----------------------------------------------------------------------
    Question(
        question_id="ACT_CONTENT_01",
        dimension="process_infrastructure",
        activity="content_marketing",
        text="How do you feel about your content output volume?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_CONTENT_02",
        dimension="process_infrastructure",
        activity="content_marketing",
        text="How much do you repurpose content across channels?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_CONTENT_03",
        dimension="people_skills",
        activity="content_marketing",
        text="How do you feel about AI writing assistance?",
        weight=3.0,
    ),
    Question(
        question_id="ACT_SOCIAL_01",
        dimension="process_infrastructure",
        activity="social_media",
        text="How manageable is your social media workload?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_SOCIAL_02",
        dimension="process_infrastructure",
        activity="social_media",
        text="How do you handle posting schedules?",
        weight=1.5,
    ),
    Question(
        question_id="ACT_SOCIAL_03",
        dimension="strategy_leadership",
        activity="social_media",
        text="How well can you track what works on social?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_EMAIL_01",
        dimension="process_infrastructure",
        activity="email_marketing",
        text="How personalized are your email campaigns?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_EMAIL_02",
        dimension="process_infrastructure",
        activity="email_marketing",
        text="How automated are your email workflows?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_EMAIL_03",
        dimension="strategy_leadership",
        activity="email_marketing",
        text="How do you improve email performance?",
        weight=1.5,
    ),
    Question(
        question_id="ACT_SEO_01",
        dimension="people_skills",
        activity="seo_sem",
        text="How do you approach keyword research?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_SEO_02",
        dimension="process_infrastructure",
        activity="seo_sem",
        text="If you run paid search, how manageable is it?",
        weight=2.0,
        option_scores=_OPTIONAL_PRACTICE,
    ),
    Question(
        question_id="ACT_SEO_03",
        dimension="strategy_leadership",
        activity="seo_sem",
        text="How clear is your search ROI?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_ANALYTICS_01",
        dimension="process_infrastructure",
        activity="analytics_data",
        text="How organized is your marketing data?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_ANALYTICS_02",
        dimension="process_infrastructure",
        activity="analytics_data",
        text="How long does monthly reporting take?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_ANALYTICS_03",
        dimension="strategy_leadership",
        activity="analytics_data",
        text="Can you predict what will work before launching?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_PAID_01",
        dimension="process_infrastructure",
        activity="paid_advertising",
        text="How do you create ad variations?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_PAID_02",
        dimension="process_infrastructure",
        activity="paid_advertising",
        text="How do you optimize campaigns?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_PAID_03",
        dimension="process_infrastructure",
        activity="paid_advertising",
        text="How well do you manage across ad platforms?",
        weight=1.5,
        option_scores=_OPTIONAL_PRACTICE,
    ),
    Question(
        question_id="ACT_DESIGN_01",
        dimension="process_infrastructure",
        activity="creative_design",
        text="How often is design a bottleneck?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_DESIGN_02",
        dimension="process_infrastructure",
        activity="creative_design",
        text="How consistent is your visual brand?",
        weight=2.0,
    ),
    Question(
        question_id="ACT_DESIGN_03",
        dimension="people_skills",
        activity="creative_design",
        text="How interested are you in AI design tools?",
        weight=3.0,
    ),
    Question(
        question_id="ACT_AUTOMATION_01",
        dimension="process_infrastructure",
        activity="marketing_automation",
        text="How automated are your marketing workflows?",
        weight=3.0,
    ),
    Question(
        question_id="ACT_AUTOMATION_02",
        dimension="process_infrastructure",
        activity="marketing_automation",
        text="How do you nurture leads?",
        weight=2.5,
    ),
    Question(
        question_id="ACT_AUTOMATION_03",
        dimension="strategy_leadership",
        activity="marketing_automation",
        text="Can you measure automation impact?",
        weight=2.0,
    ),
    # -----------------------------------------------------------------------
    # Industry-context questions (scored under their dimension)
    # -----------------------------------------------------------------------
    Question(
        question_id="IND_SAAS_01",
        dimension="strategy_leadership",
        industry="b2b_saas",
        text=(
            "How closely is marketing aligned with product-led growth"
            " and customer lifecycle data?"
        ),
        weight=2.0,
    ),
    Question(
        question_id="IND_MFG_01",
        dimension="process_infrastructure",
        industry="manufacturing",
        text="How well are your technical product specifications organised for marketing reuse?",
        weight=2.0,
    ),
    Question(
        question_id="IND_HEALTH_01",
        dimension="process_infrastructure",
        industry="healthcare",
        text="How established is compliance review for AI-assisted patient and provider content?",
        weight=2.0,
    ),
    Question(
        question_id="IND_FIN_01",
        dimension="process_infrastructure",
        industry="financial_services",
        text="How mature are your controls for regulated marketing claims and disclosures?",
        weight=2.0,
    ),
    Question(
        question_id="IND_RETAIL_01",
        dimension="strategy_leadership",
        industry="ecommerce_retail",
        text="How connected are merchandising, inventory, and campaign planning?",
        weight=2.0,
    ),
]
