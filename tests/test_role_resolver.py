import pytest

from careerguide.models.assessment import QAPair
from careerguide.services.roadmap_catalog import FIXED_ROADMAPS, ROADMAPS_BY_ROLE, UNSUPPORTED_SKILL_MESSAGE
from careerguide.services.role_resolver import (
    build_assessment_result,
    enrich_roadmap,
    ensure_min_items,
    match_role,
    normalize_role,
    resolve_role,
    resolve_roadmap,
    supported_roles,
    unique,
)


def test_catalog_has_twenty_unique_roles():
    roles = supported_roles()
    assert len(roles) == 20
    assert len(set(roles)) == 20
    assert roles[0] == "Frontend Developer"


def test_normalize_role():
    assert normalize_role("  UI/UX   Designer!! ") == "ui/ux designer"
    assert normalize_role("C++ / .NET dev") == "c++ / .net dev"
    assert normalize_role(None) == ""


def test_unique_trims_and_keeps_first_occurrence():
    assert unique([" a ", "b", "a", "", "  ", "c", "b"]) == ["a", "b", "c"]


def test_ensure_min_items_pads_with_numbered_fillers():
    assert ensure_min_items(["x", "x", "y"], 4, "Tip") == ["x", "y", "Tip 1", "Tip 2"]
    assert ensure_min_items(["a", "b", "c"], 2, "Tip") == ["a", "b", "c"]


def test_ensure_min_items_skips_fillers_already_present():
    assert ensure_min_items(["Tip 1"], 3, "Tip") == ["Tip 1", "Tip 2", "Tip 3"]


def test_frontend_developer_resolves_with_full_stages():
    payload = resolve_role("Frontend Developer")

    assert payload is not None
    assert payload.recommended_career == "Frontend Developer"
    assert payload.source == "fixed_catalog"
    for stage in (payload.roadmap.beginner, payload.roadmap.intermediate, payload.roadmap.advanced):
        assert len(stage) >= 10


def test_resolution_is_deterministic():
    first = resolve_role("react developer")
    second = resolve_role("react developer")
    assert first.model_dump() == second.model_dump()


@pytest.mark.parametrize("text, expected", [
    ("UI designer", "UI/UX Designer"),
    ("react developer", "Frontend Developer"),
    ("backend", "Backend Developer"),
    ("Kubernetes", "DevOps Engineer"),
    ("solidity", "Blockchain Developer"),
])
def test_keyword_pass(text, expected):
    assert match_role(text).canonical_role == expected


def test_keyword_order_breaks_ties():
    # "designer" (UI/UX) is listed before "photoshop" (Graphic Designer)
    assert match_role("photoshop designer").canonical_role == "UI/UX Designer"


def test_exact_alias_pass():
    assert match_role("Tester").canonical_role == "Software Tester / QA Engineer"


def test_fuzzy_pass_prefers_strongest_alias_match():
    assert match_role("junior mobile developer").canonical_role == "Mobile App Developer"


def test_token_overlap_is_uncapped_per_alias():
    # Four "... analyst" aliases outweigh Business Analyst's two token hits
    assert match_role("data analyst").canonical_role == "Cybersecurity Analyst"


@pytest.mark.parametrize("text", ["zzz-nonexistent-role", "", "   ", None, "!!!"])
def test_unsupported_roles_resolve_to_none(text):
    assert resolve_role(text) is None


def test_unsupported_roadmap_fallback():
    payload = resolve_roadmap("Astronaut")

    assert payload.source == "fixed_catalog_unsupported"
    assert not payload.is_supported
    assert payload.recommended_career == "Astronaut"
    assert payload.roadmap.beginner == [UNSUPPORTED_SKILL_MESSAGE]
    assert payload.estimated_timeline == "N/A"


def test_unsupported_roadmap_for_blank_text():
    assert resolve_roadmap("   ").recommended_career == "Selected Skill"


@pytest.mark.parametrize("entry", FIXED_ROADMAPS, ids=lambda e: e.canonical_role)
def test_enrichment_floors_hold_for_every_role(entry):
    payload = enrich_roadmap(entry)

    for stage in (payload.roadmap.beginner, payload.roadmap.intermediate, payload.roadmap.advanced):
        assert len(stage) >= 10
    assert len(payload.interview_preparation_topics) >= 8
    assert len(payload.resume_tips) >= 6
    assert len(payload.portfolio_requirements) >= 6
    assert len(payload.real_world_projects) >= 6
    assert len(payload.job_ready_checklist) >= 8
    assert len(payload.required_soft_skills) >= 6
    assert payload.salary_insight
    assert payload.job_platforms_to_apply


def test_enrichment_keeps_curated_items_first():
    entry = ROADMAPS_BY_ROLE["Frontend Developer"]
    payload = enrich_roadmap(entry)

    assert payload.roadmap.beginner[:len(entry.roadmap.beginner)] == entry.roadmap.beginner
    assert payload.tools_to_learn == entry.tools_to_learn
    assert payload.salary_insight == entry.salary_range
    assert payload.required_technical_skills[:5] == entry.tools_to_learn[:5]
    assert "Frontend Developer capstone project with production-quality standards" in payload.real_world_projects


def test_enrichment_does_not_mutate_catalog():
    entry = ROADMAPS_BY_ROLE["Data Scientist"]
    before = entry.model_dump()

    payload = enrich_roadmap(entry)
    payload.roadmap.beginner.append("extra")
    payload.skill_gap_preview[0].gap = 0

    assert entry.model_dump() == before


def test_assessment_result_uses_first_answer():
    answers = [QAPair(question="q1", answer="Android"), QAPair(question="q2", answer="I like cricket")]

    result = build_assessment_result(answers)

    assert result.suggested_career_path == "Android Developer"
    assert result.payload.recommended_career == "Android Developer"
    assert result.skill_gap_preview
    assert len(result.roadmap.advanced) >= 10


def test_assessment_result_for_unsupported_first_answer():
    result = build_assessment_result([QAPair(question="q1", answer="Astronaut")])

    assert result.payload.source == "fixed_catalog_unsupported"
    assert result.suggested_career_path == "Astronaut"
