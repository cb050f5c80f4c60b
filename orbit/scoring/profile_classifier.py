"""
scoring/profile_classifier.py

Assigns one profile label from the self rater's five raw opposed-dimension
scores by walking an ordered rule table; the first rule whose five
inclusive ranges all contain the score vector wins.

Vector order:
    (esteem, trust, driver, adaptability, problem_resolution)

Two tables exist and are never merged:
    achiever   - ten named archetypes, fallback "The Balanced Achiever"
    archetype  - trust/drive/adaptability composites, fallback "Profile Not Found"

Pole reading of the raw bands (see bands.py):
    Esteem HIGH = prideful        Trust HIGH = trusting
    Drive HIGH = driven           Adaptability HIGH = precise, LOW = flexible
    Problem Resolution HIGH = engages, LOW = avoids
"""

import structlog
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from orbit.models.enumerations import ProfileTable
from orbit.models.results import ProfileDescription
from orbit.scoring.bands import ANY, HIGH, LOW, MEDIUM

logger = structlog.get_logger(__name__)

Range = Tuple[float, float]
ScoreVector = Tuple[float, float, float, float, float]

BALANCED_ACHIEVER = "The Balanced Achiever"
PROFILE_NOT_FOUND = "Profile Not Found"


@dataclass(frozen=True)
class ProfileRule:
    """One row of a classification table: a label and five inclusive ranges."""
    name: str
    ranges: Tuple[Range, Range, Range, Range, Range]

    def matches(self, vector: Sequence[float]) -> bool:
        return all(lo <= value <= hi for (lo, hi), value in zip(self.ranges, vector))


class ProfileClassifier:
    """First-match lookup over an ordered rule table."""

    def __init__(self, table: ProfileTable, rules: Sequence[ProfileRule], fallback: str):
        self.table = table
        self.rules: Tuple[ProfileRule, ...] = tuple(rules)
        self.fallback = fallback

    def classify(self, vector: Sequence[float]) -> str:
        """
        Args:
            vector: Five raw dimension scores in (esteem, trust, driver,
                    adaptability, problem_resolution) order.

        Returns:
            Label of the first matching rule, else the table's fallback.
        """
        if len(vector) != 5:
            logger.warning("profile_vector_malformed", table=self.table.value, length=len(vector))
            return self.fallback

        for rule in self.rules:
            if rule.matches(vector):
                logger.info("profile_classified", table=self.table.value, profile=rule.name, vector=list(vector))
                return rule.name

        logger.info("profile_fallback", table=self.table.value, profile=self.fallback, vector=list(vector))
        return self.fallback

    def labels(self) -> List[str]:
        """Every label this table can return, fallback last."""
        names = [r.name for r in self.rules]
        if self.fallback not in names:
            names.append(self.fallback)
        return names


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------
#                       esteem   trust   driver  adapt   problem_res
ACHIEVER_RULES: Tuple[ProfileRule, ...] = (
    ProfileRule("The Confident Avoider",     (HIGH,   ANY,    ANY,    ANY,    LOW)),
    ProfileRule("The Direct Implementer",    (ANY,    LOW,    ANY,    HIGH,   HIGH)),
    ProfileRule("The Technical Authority",   (HIGH,   LOW,    ANY,    HIGH,   ANY)),
    ProfileRule("The Growth Catalyst",       (ANY,    ANY,    HIGH,   LOW,    HIGH)),
    ProfileRule("The Supportive Driver",     (ANY,    HIGH,   HIGH,   ANY,    ANY)),
    ProfileRule("The Analytical Resolver",   (ANY,    LOW,    ANY,    HIGH,   MEDIUM)),
    ProfileRule("The Process Improver",      (ANY,    HIGH,   ANY,    HIGH,   ANY)),
    ProfileRule("The Harmonizing Adaptor",   (ANY,    HIGH,   ANY,    LOW,    MEDIUM)),
    ProfileRule("The Diplomatic Stabilizer", (ANY,    HIGH,   LOW,    ANY,    LOW)),
    ProfileRule(BALANCED_ACHIEVER,           (MEDIUM, MEDIUM, MEDIUM, MEDIUM, MEDIUM)),
)

ARCHETYPE_RULES: Tuple[ProfileRule, ...] = (
    ProfileRule("The Trusting Driven Flexible",   (ANY, HIGH, HIGH, LOW,  ANY)),
    ProfileRule("The Trusting Driven Precise",    (ANY, HIGH, HIGH, HIGH, ANY)),
    ProfileRule("The Trusting Reserved Flexible", (ANY, HIGH, LOW,  LOW,  ANY)),
    ProfileRule("The Trusting Reserved Precise",  (ANY, HIGH, LOW,  HIGH, ANY)),
    ProfileRule("The Cautious Driven Flexible",   (ANY, LOW,  HIGH, LOW,  ANY)),
    ProfileRule("The Cautious Driven Precise",    (ANY, LOW,  HIGH, HIGH, ANY)),
    ProfileRule("The Cautious Reserved Flexible", (ANY, LOW,  LOW,  LOW,  ANY)),
    ProfileRule("The Cautious Reserved Precise",  (ANY, LOW,  LOW,  HIGH, ANY)),
)

PROFILE_TABLES: Dict[ProfileTable, Tuple[Tuple[ProfileRule, ...], str]] = {
    ProfileTable.ACHIEVER: (ACHIEVER_RULES, BALANCED_ACHIEVER),
    ProfileTable.ARCHETYPE: (ARCHETYPE_RULES, PROFILE_NOT_FOUND),
}


def get_classifier(table: ProfileTable = ProfileTable.ACHIEVER) -> ProfileClassifier:
    rules, fallback = PROFILE_TABLES[ProfileTable(table)]
    return ProfileClassifier(ProfileTable(table), rules, fallback)


# ---------------------------------------------------------------------------
# Descriptions
# ---------------------------------------------------------------------------

PROFILE_DESCRIPTIONS: Dict[str, ProfileDescription] = {
    d.name: d for d in (
        ProfileDescription(
            name="The Balanced Achiever",
            summary="Balanced, Proactive, Transparent",
            traits=[
                "Balances confidence with appropriate humility",
                "Actively pursues practice growth with collaborative approach",
                "Adapts to changes while maintaining core standards",
                "Directly addresses issues as they arise without delay",
                "Takes ownership of mistakes and works toward solutions",
            ],
        ),
        ProfileDescription(
            name="The Supportive Driver",
            summary="Diligent, Collaborative, Forthright",
            traits=[
                "Pursues results without seeking personal recognition",
                "Builds strong team relationships based on trust",
                "Addresses problems directly but with team consideration",
                "Drives business development with collaborative approach",
                "Handles difficult conversations with tact but directness",
            ],
        ),
        ProfileDescription(
            name="The Process Improver",
            summary="Methodical, Inclusive, Systematic",
            traits=[
                "Creates reliable systems with collaborative input",
                "Addresses systemic issues rather than symptoms",
                "Methodically analyzes problems before implementing solutions",
                "Builds consensus while maintaining progress momentum",
                "Documents issues and solutions thoroughly for future reference",
            ],
        ),
        ProfileDescription(
            name="The Technical Authority",
            summary="Expert, Precise, Straightforward",
            traits=[
                "Confidently addresses technical and medical problems",
                "Maintains high standards with direct feedback",
                "Confronts issues promptly with evidence-based approaches",
                "Independently verifies information before acting",
                "Communicates difficult information clearly and directly",
            ],
        ),
        ProfileDescription(
            name="The Harmonizing Adaptor",
            summary="Flexible, Diplomatic, Accommodating",
            traits=[
                "Adapts readily to changing practice needs",
                "Addresses problems with diplomacy and tact",
                "Balances direct resolution with relationship preservation",
                "Collaborates to find consensus-based solutions",
                "Adjusts approach based on situation and stakeholders",
            ],
        ),
        ProfileDescription(
            name="The Analytical Resolver",
            summary="Thorough, Cautious, Deliberate",
            traits=[
                "Methodically analyzes problems before addressing them",
                "Directly confronts issues but only after thorough research",
                "Maintains detailed documentation of issues and resolutions",
                "Prefers evidence-based approaches to problem-solving",
                "Communicates findings and concerns with precision",
            ],
        ),
        ProfileDescription(
            name="The Growth Catalyst",
            summary="Ambitious, Action-Oriented, Straightforward",
            traits=[
                "Aggressively pursues growth opportunities",
                "Addresses problems immediately without hesitation",
                "Initiates difficult conversations when necessary for progress",
                "Adapts quickly to changing circumstances",
                "Takes ownership of challenges and drives toward solutions",
            ],
        ),
        ProfileDescription(
            name="The Diplomatic Stabilizer",
            summary="Cautious, Harmonious, Gradual",
            traits=[
                "Builds strong relationships with team and clients",
                "Addresses issues gradually with focus on maintaining harmony",
                "May temporarily minimize problems to preserve relationships",
                "Takes time to consider all perspectives before addressing issues",
                "Prefers private conversations to public confrontation",
            ],
        ),
        ProfileDescription(
            name="The Confident Avoider",
            summary="Confident, Optimistic, Deflecting",
            traits=[
                "Projects confidence while minimizing problems",
                "Reframes challenges as temporary inconveniences",
                "Focuses on positive aspects rather than addressing difficulties",
                "Redirects attention from sensitive or problematic issues",
                "May delay addressing personnel or performance problems",
            ],
        ),
        ProfileDescription(
            name="The Direct Implementer",
            summary="Efficient, Practical, Confrontational",
            traits=[
                "Addresses problems immediately and directly",
                "Implements solutions systematically and thoroughly",
                "Confronts difficult situations without hesitation",
                "Communicates directly with minimal concern for feelings",
                "Prioritizes resolution over relationship preservation",
            ],
        ),
    )
}


def describe_profile(name: Optional[str]) -> ProfileDescription:
    """Description for a label; unknown labels get a placeholder."""
    if name and name in PROFILE_DESCRIPTIONS:
        return PROFILE_DESCRIPTIONS[name]
    return ProfileDescription(
        name=name or "",
        summary="Profile information not available",
        traits=["Detailed information not available for this profile"],
    )
