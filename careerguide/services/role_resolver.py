# careerguide/services/role_resolver.py - Free-text role matching and roadmap enrichment

import logging
import re
from typing import Iterable, List, Optional, Sequence

from careerguide.models.assessment import AssessmentResult, QAPair
from careerguide.models.roadmap import FixedRoleRoadmap, RoadmapPayload, RoadmapStages
from careerguide.services.roadmap_catalog import (
    COMMON_FREELANCING_STRATEGY,
    COMMON_INTERNSHIP_STRATEGY,
    COMMON_SOFT_SKILLS,
    FIXED_ROADMAPS,
    KEYWORD_ROLE_MAP,
    ROADMAPS_BY_ROLE,
    UNSUPPORTED_SKILL_MESSAGE,
)

logger = logging.getLogger(__name__)

_ROLE_STRIP_RE = re.compile(r"[^\w\s/+.-]")
_WHITESPACE_RE = re.compile(r"\s+")

STAGE_FLOOR = 10
INTERVIEW_TOPICS_FLOOR = 8
RESUME_TIPS_FLOOR = 6
PORTFOLIO_FLOOR = 6
PROJECTS_FLOOR = 6
CHECKLIST_FLOOR = 8


def normalize_role(text: Optional[str]) -> str:
    """Lowercase, blank out everything but word chars and / + . -, collapse spaces"""
    value = _ROLE_STRIP_RE.sub(" ", str(text or "").lower())
    return _WHITESPACE_RE.sub(" ", value).strip()


def unique(items: Iterable[str]) -> List[str]:
    """Trim, drop blanks and keep the first occurrence of each string"""
    seen = set()
    result = []
    for item in items:
        value = str(item).strip()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return result


def ensure_min_items(items: Sequence[str], minimum: int, filler_prefix: str) -> List[str]:
    """Append numbered fillers ("<prefix> 1", "<prefix> 2", ...) until `minimum` is met.

    Existing items keep their order; a filler equal to an existing item is skipped.
    """
    result = unique(items)
    present = set(result)
    count = 1
    while len(result) < minimum:
        candidate = f"{filler_prefix} {count}"
        count += 1
        if candidate in present:
            continue
        present.add(candidate)
        result.append(candidate)
    return result


def expand_stages(role: str, roadmap: RoadmapStages) -> RoadmapStages:
    beginner = ensure_min_items(
        [
            *roadmap.beginner,
            f"Build a weekly {role} learning schedule and track progress",
            "Learn core fundamentals with official documentation and guided tutorials",
            "Practice daily with small focused exercises",
            "Create notes and revision sheets for key concepts",
            "Set up development/design environment and workflow tools",
            "Publish first project iteration with README/case summary",
            "Follow coding/design standards and basic accessibility/usability rules",
            "Learn version control basics and collaborative workflow",
            "Get mentor/peer feedback and iterate quickly",
        ],
        STAGE_FLOOR,
        "Beginner practice task",
    )
    intermediate = ensure_min_items(
        [
            *roadmap.intermediate,
            "Build feature-complete projects with real-world constraints",
            "Integrate APIs/services and handle errors edge-to-edge",
            "Write reusable modules/components and improve architecture quality",
            "Use testing/validation workflows for reliability",
            "Improve performance, security, and maintainability",
            "Document decisions, tradeoffs, and technical/design rationale",
            "Contribute to open-source or collaborative team repositories",
            "Run project demos and collect structured user/reviewer feedback",
            "Prepare internship-ready portfolio and resume artifacts",
        ],
        STAGE_FLOOR,
        "Intermediate implementation task",
    )
    advanced = ensure_min_items(
        [
            *roadmap.advanced,
            "Build production-grade capstone project with measurable outcomes",
            "Apply advanced optimization and quality standards",
            "Handle monitoring/analytics and continuous improvement loops",
            "Simulate interview scenarios and explain project architecture/process",
            "Tailor resume and portfolio for role-specific applications",
            "Run mock interviews and refine communication delivery",
            "Apply to internships/jobs consistently with weekly targets",
            "Prepare for domain-specific case studies and problem-solving rounds",
            "Track rejections/feedback and adapt strategy quickly",
        ],
        STAGE_FLOOR,
        "Advanced execution task",
    )
    return RoadmapStages(beginner=beginner, intermediate=intermediate, advanced=advanced)


def enrich_roadmap(entry: FixedRoleRoadmap) -> RoadmapPayload:
    """Expand a catalog entry into a full roadmap payload.

    Every auxiliary list is padded to its floor; curated items are never
    removed or reordered. The catalog entry itself is left untouched.
    """
    role = entry.canonical_role
    return RoadmapPayload(
        strength_profile=entry.strength_profile,
        career_persona=entry.career_persona,
        recommended_career=role,
        roadmap=expand_stages(role, entry.roadmap),
        estimated_timeline=entry.estimated_timeline,
        tools_to_learn=list(entry.tools_to_learn),
        certifications=list(entry.certifications),
        required_technical_skills=unique([
            *(entry.required_technical_skills or []),
            *entry.tools_to_learn[:8],
            "Fundamentals and core concepts",
            "Project architecture and problem decomposition",
        ]),
        required_soft_skills=unique([*(entry.required_soft_skills or []), *COMMON_SOFT_SKILLS]),
        internship_strategy=unique([*(entry.internship_strategy or []), *COMMON_INTERNSHIP_STRATEGY]),
        freelancing_strategy=unique([*(entry.freelancing_strategy or []), *COMMON_FREELANCING_STRATEGY]),
        interview_preparation_topics=ensure_min_items(
            [
                *entry.interview_preparation_topics,
                "Project walkthrough and technical/design tradeoffs",
                "Debugging/problem-solving approach",
                "Behavioral STAR answers",
                "System/process thinking for real use-cases",
                "Role-specific scenario questions",
            ],
            INTERVIEW_TOPICS_FLOOR,
            "Interview prep topic",
        ),
        resume_tips=ensure_min_items(
            [
                *entry.resume_tips,
                "Keep resume one page with high-signal achievements",
                "Put portfolio/GitHub links in header and ensure they work",
                "Add keywords from target job descriptions",
                "Quantify impact for each project and internship bullet",
            ],
            RESUME_TIPS_FLOOR,
            "Resume optimization tip",
        ),
        portfolio_requirements=ensure_min_items(
            [
                *entry.portfolio_requirements,
                "Include problem statement, approach, and final outcome",
                "Add deployment/demo links and clean documentation",
                "Show before/after improvements and measurable impact",
            ],
            PORTFOLIO_FLOOR,
            "Portfolio requirement",
        ),
        real_world_projects=ensure_min_items(
            [
                *entry.real_world_projects,
                f"{role} capstone project with production-quality standards",
                f"Collaborative {role.lower()} project in team setting",
                "Real-world scenario project with user/client feedback loop",
            ],
            PROJECTS_FLOOR,
            "Project build",
        ),
        job_ready_checklist=ensure_min_items(
            [
                *(entry.job_ready_checklist or []),
                "4+ portfolio-ready projects/case studies completed",
                "Resume and LinkedIn profile optimized for target role",
                "Mock interviews completed with feedback incorporated",
                "Consistent weekly applications on multiple platforms",
            ],
            CHECKLIST_FLOOR,
            "Job readiness checkpoint",
        ),
        salary_insight=entry.salary_insight or entry.salary_range or "",
        job_platforms_to_apply=list(entry.job_platforms_to_apply),
        skill_gap_preview=[item.model_copy() for item in entry.skill_gap_preview],
        source="fixed_catalog",
    )


def _score_entry(entry: FixedRoleRoadmap, normalized: str) -> int:
    tokens = set(normalized.split())
    score = 0
    for alias in entry.aliases:
        a = normalize_role(alias)
        if a == normalized:
            score += 6
        elif a in normalized:
            score += 4
        elif normalized in a and len(normalized) >= 4:
            score += 2
        # Token overlap accumulates per alias with no cap
        score += sum(1 for token in a.split() if token in tokens)
    return score


def match_role(target_role: Optional[str]) -> Optional[FixedRoleRoadmap]:
    """Resolve free text to a catalog entry without enrichment.

    Passes, first hit wins: keyword map (list order breaks ties), exact
    alias, then the highest fuzzy score (catalog order breaks ties).
    """
    normalized = normalize_role(target_role)
    if not normalized:
        return None

    for role, keywords in KEYWORD_ROLE_MAP:
        if any(normalize_role(keyword) in normalized for keyword in keywords):
            mapped = ROADMAPS_BY_ROLE.get(role)
            if mapped is not None:
                return mapped

    for entry in FIXED_ROADMAPS:
        if any(normalize_role(alias) == normalized for alias in entry.aliases):
            return entry

    best, best_score = None, 0
    for entry in FIXED_ROADMAPS:
        score = _score_entry(entry, normalized)
        if score > best_score:
            best, best_score = entry, score
    return best


def resolve_role(target_role: Optional[str]) -> Optional[RoadmapPayload]:
    """Matched and enriched roadmap for `target_role`, or None when unsupported"""
    entry = match_role(target_role)
    if entry is None:
        return None
    return enrich_roadmap(entry)


def build_unsupported_roadmap(target_role: Optional[str]) -> RoadmapPayload:
    role = str(target_role or "").strip() or "Selected Skill"
    return RoadmapPayload(
        strength_profile="You have clear intent to build career-ready skills through structured learning.",
        career_persona="Focused Growth Learner",
        recommended_career=role,
        roadmap=RoadmapStages(
            beginner=[UNSUPPORTED_SKILL_MESSAGE],
            intermediate=["This skill roadmap is not available yet."],
            advanced=["Choose one of the currently supported top industry-demand skills."],
        ),
        estimated_timeline="N/A",
        source="fixed_catalog_unsupported",
    )


def resolve_roadmap(target_role: Optional[str]) -> RoadmapPayload:
    """Always returns a payload: the enriched match or the unsupported fallback"""
    payload = resolve_role(target_role)
    if payload is None:
        logger.info("No catalog role matched %r; using unsupported roadmap", target_role)
        return build_unsupported_roadmap(target_role)
    return payload


def build_assessment_result(answers: Sequence[QAPair]) -> AssessmentResult:
    """Completion result derived from the first answer (the target role)"""
    target_role = answers[0].answer if answers else ""
    payload = resolve_roadmap(target_role)
    return AssessmentResult(
        strength_profile=payload.strength_profile,
        career_persona=payload.career_persona,
        suggested_career_path=payload.recommended_career,
        roadmap=payload.roadmap,
        skill_gap_preview=payload.skill_gap_preview,
        payload=payload,
    )


def supported_roles() -> List[str]:
    return [entry.canonical_role for entry in FIXED_ROADMAPS]
