"""
Question Catalog
orbit/scoring/question_catalog.py

Immutable, versioned snapshots of the assessment questions. Two are built in:

    full-80   the complete bank, 7 per opposed sub-section, 10 Coachability
    core-24   short form, the first 2 per opposed sub-section and 4 Coachability

Any other snapshot comes from admin JSON. Scoring always receives a catalog explicitly;
nothing in the engine reads module state.

Usage:
    catalog = DEFAULT_CATALOG
    catalog.by_sub_section(SubSection.PRIDE)
    text = export_catalog_json(catalog)
    same = load_catalog_json(text, version="admin-edit")
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from orbit.core.exceptions import CatalogFormatException
from orbit.models.enumerations import Section, SubSection
from orbit.models.question import Question

logger = logging.getLogger(__name__)

_QUESTION_LIST = TypeAdapter(List[Question])


@dataclass(frozen=True)
class QuestionCatalog:
    """Read-only question snapshot with id/section/sub-section lookups."""

    version: str
    questions: Tuple[Question, ...]
    _by_id: Dict[str, Question] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        index: Dict[str, Question] = {}
        for q in self.questions:
            if q.id in index:
                raise CatalogFormatException(f"Duplicate question id '{q.id}'")
            index[q.id] = q
        object.__setattr__(self, "_by_id", index)

    def __len__(self) -> int:
        return len(self.questions)

    def all_questions(self) -> List[Question]:
        return list(self.questions)

    def by_id(self, question_id: str) -> Optional[Question]:
        return self._by_id.get(question_id)

    def by_section(self, section: Section) -> List[Question]:
        return [q for q in self.questions if q.section == section]

    def by_sub_section(self, sub_section: SubSection) -> List[Question]:
        return [q for q in self.questions if q.sub_section == sub_section]

    def count(self, sub_section: SubSection) -> int:
        return sum(1 for q in self.questions if q.sub_section == sub_section)


def _q(qid: str, text: str, section: Section, sub: SubSection,
       reversed_: bool, negative: bool) -> Question:
    return Question(
        id=qid,
        text=text,
        section=section,
        sub_section=sub,
        is_reversed=reversed_,
        negative_score=negative,
    )


_S, _U = Section, SubSection

FULL_CATALOG = QuestionCatalog(
    version="full-80",
    questions=(
        # ── Esteem ────────────────────────────────────────────────────────────
        _q("E1A1", "The individual frequently second-guesses their decisions even after they've been made.",
           _S.ESTEEM, _U.INSECURE, False, True),
        _q("E1A2", "The individual needs reassurance from others before feeling confident in their work.",
           _S.ESTEEM, _U.INSECURE, False, True),
        _q("E1A3", "The individual downplays their achievements when receiving recognition.",
           _S.ESTEEM, _U.INSECURE, False, True),
        _q("E1A4", "The individual feels comfortable asserting their expertise in areas where they have significant knowledge.",
           _S.ESTEEM, _U.INSECURE, True, True),
        _q("E1A5", "The individual worries about how others perceive their capabilities.",
           _S.ESTEEM, _U.INSECURE, False, True),
        _q("E1A6", "The individual apologizes excessively, even for minor issues or non-mistakes.",
           _S.ESTEEM, _U.INSECURE, False, True),
        _q("E1A7", "The individual accepts constructive criticism without taking it as a personal failure.",
           _S.ESTEEM, _U.INSECURE, True, True),
        _q("E1B1", "The individual confidently highlights their accomplishments when appropriate.",
           _S.ESTEEM, _U.PRIDE, False, False),
        _q("E1B2", "The individual trusts their judgment even when others disagree.",
           _S.ESTEEM, _U.PRIDE, False, False),
        _q("E1B3", "The individual maintains their position when they believe they are correct.",
           _S.ESTEEM, _U.PRIDE, False, False),
        _q("E1B4", "The individual frequently doubts their capabilities when faced with challenges.",
           _S.ESTEEM, _U.PRIDE, True, False),
        _q("E1B5", "The individual asserts their expertise in areas where they have significant knowledge.",
           _S.ESTEEM, _U.PRIDE, False, False),
        _q("E1B6", "The individual is comfortable advocating for recognition when they've made valuable contributions.",
           _S.ESTEEM, _U.PRIDE, False, False),
        _q("E1B7", "The individual hesitates to take credit for successful outcomes they helped create.",
           _S.ESTEEM, _U.PRIDE, True, False),

        # ── Trust ─────────────────────────────────────────────────────────────
        _q("T2A1", "The individual readily incorporates suggestions from colleagues into their work.",
           _S.TRUST, _U.TRUSTING, False, False),
        _q("T2A2", "The individual assumes positive intentions when receiving feedback or criticism.",
           _S.TRUST, _U.TRUSTING, False, False),
        _q("T2A3", "The individual is comfortable delegating important tasks to others.",
           _S.TRUST, _U.TRUSTING, False, False),
        _q("T2A4", "The individual prefers to verify information through multiple sources before accepting it.",
           _S.TRUST, _U.TRUSTING, True, False),
        _q("T2A5", "The individual values input from diverse perspectives when making decisions.",
           _S.TRUST, _U.TRUSTING, False, False),
        _q("T2A6", "The individual gives others the benefit of the doubt in ambiguous situations.",
           _S.TRUST, _U.TRUSTING, False, False),
        _q("T2A7", "The individual struggles to relinquish control over projects they're involved with.",
           _S.TRUST, _U.TRUSTING, True, False),
        _q("T2B1", "The individual carefully evaluates the credibility of information sources before accepting them.",
           _S.TRUST, _U.CAUTIOUS, False, True),
        _q("T2B2", "The individual is typically skeptical when presented with new ideas or claims.",
           _S.TRUST, _U.CAUTIOUS, False, True),
        _q("T2B3", "The individual prefers to rely on their own analysis rather than others' conclusions.",
           _S.TRUST, _U.CAUTIOUS, False, True),
        _q("T2B4", "The individual accepts information at face value without questioning underlying assumptions.",
           _S.TRUST, _U.CAUTIOUS, True, True),
        _q("T2B5", "The individual scrutinizes motives when others offer suggestions that affect their work.",
           _S.TRUST, _U.CAUTIOUS, False, True),
        _q("T2B6", "The individual takes time to independently verify information.",
           _S.TRUST, _U.CAUTIOUS, False, True),
        _q("T2B7", "The individual feels uncomfortable questioning the reliability of information provided by authority figures.",
           _S.TRUST, _U.CAUTIOUS, True, True),

        # ── Business Drive ────────────────────────────────────────────────────
        _q("D3A1", "The individual prefers letting their work quality speak for itself rather than actively promoting achievements.",
           _S.DRIVER, _U.RESERVED, False, False),
        _q("D3A2", "The individual feels uncomfortable discussing sales opportunities with potential clients or partners.",
           _S.DRIVER, _U.RESERVED, False, False),
        _q("D3A3", "The individual regularly shares practice accomplishments on social media and in professional networks.",
           _S.DRIVER, _U.RESERVED, True, False),
        _q("D3A4", "The individual waits for clients to approach them rather than proactively seeking new business.",
           _S.DRIVER, _U.RESERVED, False, False),
        _q("D3A5", "The individual hesitates to implement promotional campaigns for their practice or services.",
           _S.DRIVER, _U.RESERVED, False, False),
        _q("D3A6", "The individual prefers gradual, organic growth over aggressive expansion strategies.",
           _S.DRIVER, _U.RESERVED, False, False),
        _q("D3A7", "The individual actively pursues community engagements and industry visibility opportunities.",
           _S.DRIVER, _U.RESERVED, True, False),
        _q("D3B1", "The individual actively networks to build referral relationships with other professionals.",
           _S.DRIVER, _U.HUSTLE, False, True),
        _q("D3B2", "The individual feels its more appropriate for clients to request additional services rather than proactively recommending them.",
           _S.DRIVER, _U.HUSTLE, True, True),
        _q("D3B3", "The individual invests personal time in business development activities outside regular hours.",
           _S.DRIVER, _U.HUSTLE, False, True),
        _q("D3B4", "The individual consistently follows up with potential clients or business opportunities.",
           _S.DRIVER, _U.HUSTLE, False, True),
        _q("D3B5", "The individual hesitates to make cold calls or empower their team to do direct outreach to potential clients/partners.",
           _S.DRIVER, _U.HUSTLE, True, True),
        _q("D3B6", "The individual proactively identifies and pursues practice growth opportunities.",
           _S.DRIVER, _U.HUSTLE, False, True),
        _q("D3B7", "The individual is uncomfortable discussing the practice's competitive advantages with potential clients and team members.",
           _S.DRIVER, _U.HUSTLE, True, True),

        # ── Adaptability ──────────────────────────────────────────────────────
        _q("A4A1", "The individual follows established processes and procedures precisely.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A2", "The individual pays close attention to details in their work.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A3", "The individual creates detailed plans before starting new tasks or projects.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A4", "The individual double-checks their work for errors or inconsistencies.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A5", "The individual maintains thorough documentation of their work and decisions.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A6", "The individual analyzes information systematically before making decisions.",
           _S.ADAPTABILITY, _U.PRECISE, False, False),
        _q("A4A7", "The individual regularly miss deadlines or arrives late to meetings.",
           _S.ADAPTABILITY, _U.PRECISE, True, False),
        _q("A4B1", "The individual focuses on big-picture concepts rather than details in their work.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B2", "The individual is comfortable diving into new tasks without extensive planning.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B3", "The individual moves forward confidently with 'good enough' rather than perfect.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B4", "The individual prefers guidelines over rigid rules and procedures.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B5", "The individual trusts their intuition when making decisions.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B6", "The individual adjust schedules and timelines as circumstances change.",
           _S.ADAPTABILITY, _U.FLEXIBLE, False, True),
        _q("A4B7", "The individual feels uncomfortable when plans or processes change unexpectedly.",
           _S.ADAPTABILITY, _U.FLEXIBLE, True, True),

        # ── Problem Resolution ────────────────────────────────────────────────
        _q("PR5A1", "The individual addresses practice problems as soon as they become apparent.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, False, False),
        _q("PR5A2", "The individual willingly initiates difficult conversations about performance or compliance issues.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, False, False),
        _q("PR5A3", "The individual tends to avoid confronting team members about problematic behaviors.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, True, False),
        _q("PR5A4", "The individual directly addresses client complaints rather than hoping they'll resolve themselves.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, False, False),
        _q("PR5A5", "The individual takes ownership of mistakes and immediately works toward solutions.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, False, False),
        _q("PR5A6", "The individual hesitates to bring potential issues to leadership's attention.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, True, False),
        _q("PR5A7", "The individual communicates bad news or difficult information promptly and clearly.",
           _S.PROBLEM_RESOLUTION, _U.DIRECT, False, False),
        _q("PR5B1", "The individual hopes minor issues will resolve themselves without intervention.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, False, True),
        _q("PR5B2", "The individual frames problems as temporary inconveniences rather than systemic issues.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, False, True),
        _q("PR5B3", "The individual directly confronts emerging problems before they escalate.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, True, True),
        _q("PR5B4", "The individual redirects conversations when sensitive practice issues arise.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, False, True),
        _q("PR5B5", "The individual finds reasons to delay addressing performance problems with team members.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, False, True),
        _q("PR5B6", "The individual takes immediate ownership when mistakes or problems occur.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, True, True),
        _q("PR5B7", "The individual minimizes the significance of recurring problems.",
           _S.PROBLEM_RESOLUTION, _U.AVOIDANT, False, True),

        # ── Coachability ──────────────────────────────────────────────────────
        _q("C6A1", "The individual actively seeks feedback about their performance and implementation of suggested changes.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A2", "The individual regularly asks questions to clarify expectations and improve understanding.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A3", "The individual appears reluctant to try new approaches that are outside their comfort zone.",
           _S.COACHABILITY, _U.COACHABILITY, True, False),
        _q("C6A4", "The individual acknowledges mistakes and uses them as learning opportunities.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A5", "The individual implements suggested changes in behavior or approach when given feedback.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A6", "The individual appears open to different perspectives, especially from those with different backgrounds or expertise.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A7", "The individual becomes defensive in response to suggestions the differ from their own.",
           _S.COACHABILITY, _U.COACHABILITY, True, False),
        _q("C6A8", "The individual is willing to experiment with new behaviors based on suggestions from others.",
           _S.COACHABILITY, _U.COACHABILITY, False, False),
        _q("C6A9", "The individual is dismissive of feedback that doesn't align with their own self-perception.",
           _S.COACHABILITY, _U.COACHABILITY, True, False),
        _q("C6A10", "The individual avoids asking for help, even when it would benefit their performance.",
           _S.COACHABILITY, _U.COACHABILITY, True, False),
    ),
)


def _first_per_sub_section(questions, opposed: int, coachability: int) -> Tuple[Question, ...]:
    """Leading questions of each sub-section, in bank order."""
    taken: Dict[SubSection, int] = {}
    picked = []
    for q in questions:
        limit = coachability if q.sub_section == SubSection.COACHABILITY else opposed
        if taken.get(q.sub_section, 0) < limit:
            taken[q.sub_section] = taken.get(q.sub_section, 0) + 1
            picked.append(q)
    return tuple(picked)


# Short form: 2 per opposed sub-section, 4 Coachability
DEFAULT_CATALOG = QuestionCatalog(
    version="core-24",
    questions=_first_per_sub_section(FULL_CATALOG.questions, opposed=2, coachability=4),
)

BUILT_IN_CATALOGS: Dict[str, QuestionCatalog] = {
    c.version: c for c in (DEFAULT_CATALOG, FULL_CATALOG)
}


# ---------------------------------------------------------------------------
# JSON export / import (admin tool format)
# ---------------------------------------------------------------------------

def export_catalog_json(catalog: QuestionCatalog, indent: int = 2) -> str:
    """Serialize a catalog to the admin JSON format (list of question objects)."""
    return json.dumps(
        [q.model_dump(mode="json") for q in catalog.questions],
        indent=indent,
    )


def load_catalog_json(text: str, version: str) -> QuestionCatalog:
    """
    Build a catalog from admin JSON.

    Raises:
        CatalogFormatException: malformed JSON, invalid entries or duplicate ids.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise CatalogFormatException(f"Catalog is not valid JSON: {e}")

    try:
        questions = _QUESTION_LIST.validate_python(raw)
    except ValidationError as e:
        raise CatalogFormatException(f"Catalog entries failed validation: {e.error_count()} error(s)")

    catalog = QuestionCatalog(version=version, questions=tuple(questions))
    logger.info(f"Loaded question catalog '{version}' with {len(catalog)} questions")
    return catalog


def load_catalog_file(path: str) -> QuestionCatalog:
    """Load a catalog JSON file; the file stem becomes the version."""
    p = Path(path)
    return load_catalog_json(p.read_text(encoding="utf-8"), version=p.stem)
