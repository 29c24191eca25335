"""Recommendation and action plan catalogs for the readiness assessment.

Templates are keyed to exactly one dimension, activity, or industry and to a
score band. The selector matches dimension templates against the dimension
score, activity templates against the activity score, and industry templates
against the overall score.

Score bands:
    dimensions  low 0-39, mid 40-69, high 70-100
    activities  low 0-49, mid 50-69, high 70-100
    industries  low 0-39, mid 40-69, high 70-84, top 85-100

Declaration order is the final tie-break when ranking, so within each block
the more foundational template is listed first.
"""

from marketing_ai_readiness.core.models import (
    ActionPlanPhase,
    RecommendationTemplate,
    ScoreBand,
)
from marketing_ai_readiness.core.policy import (
    ACTIVITY_BANDS,
    DIMENSION_BANDS,
    INDUSTRY_BANDS,
)


def _bands(table: list[tuple[str, float, float]]) -> dict[str, ScoreBand]:
    return {name: ScoreBand(name=name, min=lower, max=upper) for name, lower, upper in table}


_DIM = _bands(DIMENSION_BANDS)
_ACT = _bands(ACTIVITY_BANDS)
_IND = _bands(INDUSTRY_BANDS)


DIMENSION_TEMPLATES: list[RecommendationTemplate] = [
    # people_skills
    RecommendationTemplate(
        template_id="PS_LOW_TRAINING",
        dimension="people_skills",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Implement AI Literacy Training Program",
        body="Start with foundational AI training for the entire marketing team.",
        investment_hint="$2,000-5,000",
        timeline_hint="2-4 weeks",
    ),
    RecommendationTemplate(
        template_id="PS_LOW_CHAMPIONS",
        dimension="people_skills",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Designate AI Marketing Champions",
        body="Identify and train 2-3 team members as AI specialists.",
        investment_hint="$1,000-3,000 per person",
        timeline_hint="4-6 weeks",
    ),
    RecommendationTemplate(
        template_id="PS_LOW_AGENCY",
        dimension="people_skills",
        score_band=_DIM["low"],
        priority="MEDIUM",
        title="Partner with AI Marketing Agency",
        body="Work with an AI-specialised agency during the transition period.",
        horizon="short_term",
        investment_hint="$5,000-15,000/month",
        timeline_hint="6-12 months",
    ),
    RecommendationTemplate(
        template_id="PS_MID_ADVANCED_SKILLS",
        dimension="people_skills",
        score_band=_DIM["mid"],
        priority="HIGH",
        title="Advanced AI Skills Development",
        body=(
            "Move beyond basic AI to specialised skills such as prompt engineering"
            " and AI strategy."
        ),
        investment_hint="$3,000-8,000",
        timeline_hint="4-8 weeks",
    ),
    RecommendationTemplate(
        template_id="PS_MID_CROSS_FUNCTIONAL",
        dimension="people_skills",
        score_band=_DIM["mid"],
        priority="MEDIUM",
        title="Cross-Functional AI Training",
        body="Extend AI training to sales, customer service, and other departments.",
        horizon="short_term",
        investment_hint="$10,000-25,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="PS_HIGH_INNOVATION_LAB",
        dimension="people_skills",
        score_band=_DIM["high"],
        priority="MEDIUM",
        title="AI Innovation Labs",
        body="Experiment with cutting-edge AI tools and techniques.",
        investment_hint="$15,000-30,000",
        timeline_hint="Ongoing",
    ),
    RecommendationTemplate(
        template_id="PS_HIGH_THOUGHT_LEADERSHIP",
        dimension="people_skills",
        score_band=_DIM["high"],
        priority="LOW",
        title="AI Thought Leadership",
        body="Share AI expertise through speaking, writing, and consulting.",
        horizon="short_term",
        investment_hint="$10,000-20,000",
        timeline_hint="6-12 months",
    ),
    # process_infrastructure
    RecommendationTemplate(
        template_id="PI_LOW_CENTRALIZE_DATA",
        dimension="process_infrastructure",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Centralize Marketing Data",
        body="Implement a unified data platform for AI-ready analytics.",
        investment_hint="$10,000-50,000",
        timeline_hint="4-8 weeks",
    ),
    RecommendationTemplate(
        template_id="PI_LOW_GOVERNANCE",
        dimension="process_infrastructure",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Implement Basic AI Governance",
        body="Create policies for AI usage, data privacy, and quality control.",
        investment_hint="$2,000-5,000",
        timeline_hint="2-4 weeks",
    ),
    RecommendationTemplate(
        template_id="PI_LOW_AUTOMATE_ROUTINE",
        dimension="process_infrastructure",
        score_band=_DIM["low"],
        priority="MEDIUM",
        title="Automate Routine Marketing Tasks",
        body="Identify and automate 3-5 repetitive marketing processes.",
        horizon="short_term",
        investment_hint="$5,000-15,000",
        timeline_hint="6-12 weeks",
    ),
    RecommendationTemplate(
        template_id="PI_MID_OPTIMIZE_WORKFLOWS",
        dimension="process_infrastructure",
        score_band=_DIM["mid"],
        priority="HIGH",
        title="Optimize Existing AI Workflows",
        body="Improve the efficiency of current AI processes.",
        investment_hint="$5,000-15,000",
        timeline_hint="4-6 weeks",
    ),
    RecommendationTemplate(
        template_id="PI_MID_ADVANCED_ANALYTICS",
        dimension="process_infrastructure",
        score_band=_DIM["mid"],
        priority="MEDIUM",
        title="Advanced Analytics Implementation",
        body="Deploy predictive analytics and customer intelligence.",
        horizon="short_term",
        investment_hint="$25,000-75,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="PI_HIGH_CONTINUOUS_OPTIMIZATION",
        dimension="process_infrastructure",
        score_band=_DIM["high"],
        priority="MEDIUM",
        title="Continuous Optimization Program",
        body="Implement ongoing AI performance monitoring and improvement.",
        investment_hint="$10,000-25,000",
        timeline_hint="Ongoing",
    ),
    # strategy_leadership
    RecommendationTemplate(
        template_id="SL_LOW_STRATEGY",
        dimension="strategy_leadership",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Develop AI Marketing Strategy",
        body="Create a comprehensive AI roadmap aligned with business goals.",
        investment_hint="$5,000-15,000",
        timeline_hint="4-6 weeks",
    ),
    RecommendationTemplate(
        template_id="SL_LOW_EXECUTIVE_BUY_IN",
        dimension="strategy_leadership",
        score_band=_DIM["low"],
        priority="HIGH",
        title="Secure Executive Buy-in",
        body="Present the AI business case to leadership with ROI projections.",
        investment_hint="$2,000-5,000",
        timeline_hint="2-4 weeks",
    ),
    RecommendationTemplate(
        template_id="SL_LOW_METRICS",
        dimension="strategy_leadership",
        score_band=_DIM["low"],
        priority="MEDIUM",
        title="Establish AI Metrics and KPIs",
        body="Define success metrics for AI initiatives.",
        horizon="short_term",
        investment_hint="$3,000-8,000",
        timeline_hint="4-8 weeks",
    ),
    RecommendationTemplate(
        template_id="SL_MID_ACCELERATE",
        dimension="strategy_leadership",
        score_band=_DIM["mid"],
        priority="HIGH",
        title="Accelerate AI Implementation",
        body="Scale successful AI pilots across the organisation.",
        investment_hint="$25,000-75,000",
        timeline_hint="6-12 weeks",
    ),
    RecommendationTemplate(
        template_id="SL_MID_COMPETITIVE_INTELLIGENCE",
        dimension="strategy_leadership",
        score_band=_DIM["mid"],
        priority="MEDIUM",
        title="Build AI Competitive Intelligence",
        body="Monitor and analyse competitor AI strategies.",
        horizon="short_term",
        investment_hint="$10,000-25,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="SL_HIGH_OPTIMIZE_STRATEGY",
        dimension="strategy_leadership",
        score_band=_DIM["high"],
        priority="MEDIUM",
        title="AI Strategy Optimization",
        body="Refine and optimise the existing AI strategy based on results.",
        investment_hint="$10,000-30,000",
        timeline_hint="4-8 weeks",
    ),
    RecommendationTemplate(
        template_id="SL_HIGH_ECOSYSTEM",
        dimension="strategy_leadership",
        score_band=_DIM["high"],
        priority="LOW",
        title="AI Ecosystem Development",
        body="Build a network of AI partners, vendors, and collaborators.",
        horizon="long_term",
        investment_hint="$100,000-300,000",
        timeline_hint="18-36 months",
    ),
]


ACTIVITY_TEMPLATES: list[RecommendationTemplate] = [
    RecommendationTemplate(
        template_id="ACT_CONTENT_LOW_STACK",
        activity="content_marketing",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="Content Creation AI Stack",
        body="Implement basic AI tools for content generation.",
        investment_hint="$100-500/month",
        timeline_hint="1-2 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_CONTENT_LOW_QUALITY",
        activity="content_marketing",
        score_band=_ACT["low"],
        priority="LOW",
        title="AI Content Quality Framework",
        body="Establish processes to maintain brand voice with AI content.",
        investment_hint="$2,000-5,000",
        timeline_hint="2-4 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_CONTENT_MID_INTELLIGENCE",
        activity="content_marketing",
        score_band=_ACT["mid"],
        priority="MEDIUM",
        title="Advanced Content Intelligence",
        body="AI-powered content strategy and performance optimisation.",
        investment_hint="$5,000-15,000",
        timeline_hint="6-10 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_CONTENT_HIGH_PREDICTIVE",
        activity="content_marketing",
        score_band=_ACT["high"],
        priority="LOW",
        title="Predictive Content Strategy",
        body="AI that predicts content performance and optimises strategy.",
        investment_hint="$20,000-50,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="ACT_SOCIAL_LOW_AUTOMATION",
        activity="social_media",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="Social Media AI Automation",
        body="Basic AI scheduling and content creation for social channels.",
        investment_hint="$200-800/month",
        timeline_hint="1-3 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_SOCIAL_MID_LISTENING",
        activity="social_media",
        score_band=_ACT["mid"],
        priority="MEDIUM",
        title="AI Social Listening and Engagement",
        body="Advanced AI monitoring and automated engagement.",
        investment_hint="$2,000-8,000",
        timeline_hint="4-8 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_EMAIL_LOW_PERSONALIZATION",
        activity="email_marketing",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="AI Email Personalization",
        body="Use AI for subject lines, send-time optimisation, and dynamic content.",
        investment_hint="$300+/month",
        timeline_hint="2-3 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_SEO_LOW_RESEARCH",
        activity="seo_sem",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="AI Keyword and Content Gap Research",
        body="Adopt AI tools for keyword discovery and content gap analysis.",
        timeline_hint="1-2 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_ANALYTICS_LOW_REPORTING",
        activity="analytics_data",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="Automated Marketing Reporting",
        body="Replace manual monthly reporting with AI-generated insights and dashboards.",
        investment_hint="Free with GA4",
        timeline_hint="1 week",
    ),
    RecommendationTemplate(
        template_id="ACT_ANALYTICS_MID_ATTRIBUTION",
        activity="analytics_data",
        score_band=_ACT["mid"],
        priority="MEDIUM",
        title="AI Marketing Attribution",
        body="Implement AI-driven attribution and lead intelligence.",
        investment_hint="$890+/month",
        timeline_hint="4-6 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_PAID_LOW_AUTOMATED_BIDDING",
        activity="paid_advertising",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="Automated Campaign Optimization",
        body="Move campaigns onto AI bidding and automated creative variation.",
        investment_hint="% of ad spend",
        timeline_hint="2-3 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_DESIGN_LOW_TOOLS",
        activity="creative_design",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="AI Design Assistance",
        body="Introduce AI design tools to remove creative bottlenecks.",
        timeline_hint="1-2 weeks",
    ),
    RecommendationTemplate(
        template_id="ACT_AUTOMATION_LOW_WORKFLOWS",
        activity="marketing_automation",
        score_band=_ACT["low"],
        priority="MEDIUM",
        title="Workflow Automation Between Tools",
        body="Connect marketing apps with AI-assisted workflow automation.",
        investment_hint="$20-599/month",
        timeline_hint="1-2 weeks",
    ),
]


INDUSTRY_TEMPLATES: list[RecommendationTemplate] = [
    # b2b_saas
    RecommendationTemplate(
        template_id="IND_SAAS_LOW_PRODUCT_ANALYTICS",
        industry="b2b_saas",
        score_band=_IND["low"],
        priority="MEDIUM",
        title="Implement AI-Powered Product Analytics",
        body="Use AI to analyse product usage data for marketing insights.",
        investment_hint="$15,000-40,000",
        timeline_hint="6-8 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_SAAS_MID_CUSTOMER_SUCCESS",
        industry="b2b_saas",
        score_band=_IND["mid"],
        priority="MEDIUM",
        title="Predictive Customer Success Integration",
        body="Use AI to predict churn and optimise retention campaigns.",
        investment_hint="$30,000-80,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="IND_SAAS_HIGH_PMF",
        industry="b2b_saas",
        score_band=_IND["high"],
        priority="MEDIUM",
        title="Advanced Product-Market Fit Analysis",
        body="Use AI to analyse user behaviour and optimise product-market fit.",
        investment_hint="$50,000-150,000",
        timeline_hint="6-12 months",
    ),
    RecommendationTemplate(
        template_id="IND_SAAS_TOP_REVOPS",
        industry="b2b_saas",
        score_band=_IND["top"],
        priority="LOW",
        title="AI-Powered Revenue Operations",
        body="Integrate AI across the revenue funnel from marketing to customer success.",
        investment_hint="$100,000-300,000",
        timeline_hint="12-18 months",
    ),
    RecommendationTemplate(
        template_id="IND_SAAS_LOW_ABM",
        industry="b2b_saas",
        score_band=_IND["low"],
        priority="LOW",
        title="AI-Enhanced Account-Based Marketing",
        body="Implement AI tools for ABM targeting and personalisation.",
        horizon="short_term",
        investment_hint="$20,000-60,000",
        timeline_hint="8-12 weeks",
    ),
    # manufacturing
    RecommendationTemplate(
        template_id="IND_MFG_LOW_TECH_CONTENT",
        industry="manufacturing",
        score_band=_IND["low"],
        priority="MEDIUM",
        title="AI Technical Content Translation",
        body="Use AI to convert engineering specs into marketing content.",
        investment_hint="$5,000-15,000",
        timeline_hint="2-4 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_MFG_MID_TRADE_SHOWS",
        industry="manufacturing",
        score_band=_IND["mid"],
        priority="MEDIUM",
        title="AI-Enhanced Trade Show Optimization",
        body="Use AI for pre-show targeting and post-show follow-up.",
        investment_hint="$10,000-30,000",
        timeline_hint="8-12 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_MFG_HIGH_IOT",
        industry="manufacturing",
        score_band=_IND["high"],
        priority="LOW",
        title="Industrial IoT Marketing Integration",
        body="Connect IoT data with marketing for predictive maintenance campaigns.",
        investment_hint="$100,000-250,000",
        timeline_hint="12-18 months",
    ),
    # healthcare
    RecommendationTemplate(
        template_id="IND_HEALTH_LOW_COMPLIANT_FOUNDATION",
        industry="healthcare",
        score_band=_IND["low"],
        priority="HIGH",
        title="HIPAA-Compliant AI Foundation",
        body="Implement AI tools with proper healthcare compliance.",
        investment_hint="$20,000-60,000",
        timeline_hint="8-12 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_HEALTH_MID_PROVIDER_OUTREACH",
        industry="healthcare",
        score_band=_IND["mid"],
        priority="MEDIUM",
        title="Provider AI Outreach Optimization",
        body="AI-enhanced medical professional education and outreach.",
        investment_hint="$25,000-70,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="IND_HEALTH_HIGH_POPULATION",
        industry="healthcare",
        score_band=_IND["high"],
        priority="LOW",
        title="AI-Powered Population Health Marketing",
        body="Large-scale health communication optimisation.",
        investment_hint="$100,000-300,000",
        timeline_hint="12-24 months",
    ),
    # financial_services
    RecommendationTemplate(
        template_id="IND_FIN_LOW_COMPLIANT_PERSONALIZATION",
        industry="financial_services",
        score_band=_IND["low"],
        priority="HIGH",
        title="Regulatory-Compliant AI Personalization",
        body="Implement AI personalisation within financial regulations.",
        investment_hint="$30,000-80,000",
        timeline_hint="8-16 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_FIN_MID_LIFECYCLE_VALUE",
        industry="financial_services",
        score_band=_IND["mid"],
        priority="MEDIUM",
        title="Customer Lifecycle Value Optimization",
        body="AI prediction and optimisation of customer financial journeys.",
        investment_hint="$50,000-150,000",
        timeline_hint="4-8 months",
    ),
    RecommendationTemplate(
        template_id="IND_FIN_TOP_ADVISORY",
        industry="financial_services",
        score_band=_IND["top"],
        priority="LOW",
        title="AI Financial Advisory Marketing",
        body="Personalised financial guidance at scale.",
        investment_hint="$200,000-500,000",
        timeline_hint="12-24 months",
    ),
    # ecommerce_retail
    RecommendationTemplate(
        template_id="IND_RETAIL_LOW_PRODUCT_RECS",
        industry="ecommerce_retail",
        score_band=_IND["low"],
        priority="MEDIUM",
        title="AI Product Recommendation Engine",
        body="Implement basic AI-powered product recommendations.",
        investment_hint="$10,000-30,000",
        timeline_hint="4-6 weeks",
    ),
    RecommendationTemplate(
        template_id="IND_RETAIL_MID_OMNICHANNEL",
        industry="ecommerce_retail",
        score_band=_IND["mid"],
        priority="MEDIUM",
        title="Advanced Omnichannel Personalization",
        body="AI-powered personalisation across online and offline channels.",
        investment_hint="$50,000-150,000",
        timeline_hint="3-6 months",
    ),
    RecommendationTemplate(
        template_id="IND_RETAIL_HIGH_PREDICTIVE_COMMERCE",
        industry="ecommerce_retail",
        score_band=_IND["high"],
        priority="LOW",
        title="Predictive Commerce Platform",
        body="AI that anticipates customer needs across the shopping experience.",
        investment_hint="$200,000-600,000",
        timeline_hint="12-24 months",
    ),
]


RECOMMENDATION_CATALOG: list[RecommendationTemplate] = (
    DIMENSION_TEMPLATES + ACTIVITY_TEMPLATES + INDUSTRY_TEMPLATES
)


ACTION_PLAN_PHASES: list[ActionPlanPhase] = [
    ActionPlanPhase(
        band="foundation",
        phase="Foundation (0-3 months)",
        title="Establish AI Readiness Foundation",
        description="Focus on team training, basic tool adoption, and process documentation",
        key_actions=(
            "Complete AI literacy training for entire team",
            "Implement 2-3 basic AI tools (ChatGPT, email AI, basic analytics)",
            "Document current processes and identify automation opportunities",
            "Secure leadership buy-in and budget for AI initiatives",
        ),
        expected_outcome="Team prepared for AI adoption with clear improvement roadmap",
    ),
    ActionPlanPhase(
        band="foundation",
        phase="Development (3-9 months)",
        title="Build Core AI Capabilities",
        description="Implement integrated AI tools and optimize key marketing processes",
        key_actions=(
            "Deploy comprehensive AI marketing stack",
            "Automate 3-5 routine marketing processes",
            "Begin insourcing 1-2 marketing functions",
            "Establish AI governance and quality controls",
        ),
        expected_outcome="30-50% improvement in marketing efficiency",
    ),
    ActionPlanPhase(
        band="acceleration",
        phase="Acceleration (0-6 months)",
        title="Scale AI Implementation",
        description="Optimize existing AI tools and expand to advanced capabilities",
        key_actions=(
            "Optimize current AI workflows for maximum efficiency",
            "Implement advanced AI tools (predictive analytics, personalization)",
            "Launch AI-enhanced campaign strategies",
            "Develop AI ROI measurement framework",
        ),
        expected_outcome="50-80% improvement in marketing effectiveness",
    ),
    ActionPlanPhase(
        band="innovation",
        phase="Innovation (0-12 months)",
        title="AI Marketing Leadership",
        description="Establish competitive advantage through advanced AI capabilities",
        key_actions=(
            "Develop proprietary AI models and workflows",
            "Create AI-powered marketing innovations",
            "Establish thought leadership in AI marketing",
            "Mentor other teams in AI adoption",
        ),
        expected_outcome="Market-leading AI marketing capabilities and competitive advantage",
    ),
]
