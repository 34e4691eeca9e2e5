from models.schemas import (
    CandidateProfile,
    Contact,
    Project,
    RewriteContact,
    RewriteExperience,
    RewriteProject,
    RewriteResume,
)
from services.rewrite_sanitizer import (
    build_fallback_rewrite,
    sanitize_bullets,
    sanitize_rewrite,
)


def _payload(**overrides) -> RewriteResume:
    data = dict(
        contact=RewriteContact(name="Kerem Ünce", email=" kerem@example.com ", location="İstanbul"),
        headline="Frontend Developer",
        summary="Kerem Ünce — designer focusing on workflows",
        skills=["Figma", "Figma ", "Protótyping", "🚀"],
        experience=[
            RewriteExperience(
                company="Atlas (remote) | Travel",
                role="Designer",
                bullets=["One", "Two", "One", "Three", "Four", "• Five"],
            )
        ],
        projects=[RewriteProject(title="How to Draw (iOS) - Step-by-step", bullets=["a", "b", "c"])],
    )
    data.update(overrides)
    return RewriteResume(**data)


def test_sanitize_bullets_caps_and_dedupes():
    assert sanitize_bullets(["One", "One", "", "Two — more", "Three"], 2) == ["One", "Two - more"]


def test_sanitize_rewrite_caps_bullets():
    result = sanitize_rewrite(_payload(), "Product Designer", "Kerem Ünce")
    assert result.experience[0].bullets == ["One", "Two", "Three"]
    assert result.projects[0].bullets == ["a", "b"]


def test_sanitize_rewrite_caps_hold_for_many_entries():
    experience = [RewriteExperience(company=f"C{i}", role="R", bullets=[f"b{j}" for j in range(i)]) for i in range(8)]
    projects = [RewriteProject(title=f"P{i}", bullets=[f"b{j}" for j in range(i)]) for i in range(8)]
    result = sanitize_rewrite(_payload(experience=experience, projects=projects), "Role", "Name")
    assert all(len(e.bullets) <= 3 for e in result.experience)
    assert all(len(p.bullets) <= 2 for p in result.projects)


def test_sanitize_rewrite_forces_headline_and_strips_name():
    result = sanitize_rewrite(_payload(), "Product Designer", "Kerem Ünce")
    assert result.headline == "Product Designer"
    assert result.summary == "designer focusing on workflows"


def test_sanitize_rewrite_cleans_titles_and_skills():
    result = sanitize_rewrite(_payload(), "Product Designer", "Kerem Ünce")
    assert result.experience[0].company == "Atlas - Travel"
    assert result.projects[0].title == "How to Draw - Step-by-step"
    assert result.skills == ["Figma", "Prototyping"]


def test_sanitize_rewrite_contact():
    result = sanitize_rewrite(_payload(), "Product Designer", "Kerem Ünce")
    assert result.contact.name == "Kerem Unce"
    assert result.contact.email == "kerem@example.com"
    assert result.contact.location == "Istanbul"
    assert result.contact.phone is None


def test_sanitize_rewrite_contact_name_fallbacks():
    payload = _payload(contact=RewriteContact(name=""))
    assert sanitize_rewrite(payload, "Role", "Ana Li").contact.name == "Ana Li"
    assert sanitize_rewrite(payload, "Role", "").contact.name == "Candidate"


def test_sanitize_rewrite_blank_name_falls_back_to_candidate():
    payload = _payload(contact=RewriteContact(name="   "))
    assert sanitize_rewrite(payload, "Designer", "Ana Li").contact.name == "Ana Li"


def test_sanitize_rewrite_non_ascii_name_falls_back_to_placeholder():
    payload = _payload(contact=RewriteContact(name="李明"), summary="李明 designs flows")
    result = sanitize_rewrite(payload, "Designer", "李明")
    assert result.contact.name == "Candidate"
    assert result.summary == "designs flows"


def test_sanitize_rewrite_trims_separator_left_by_name():
    payload = _payload(summary="Kerem Ünce: | designer, researcher")
    assert sanitize_rewrite(payload, "Designer", "Kerem Ünce").summary == "designer, researcher"


def test_sanitize_rewrite_omits_absent_sections():
    payload = RewriteResume(contact=RewriteContact(name="Ana"), headline="x", summary="Builds flows")
    result = sanitize_rewrite(payload, "Designer", "Ana")
    assert result.skills is None
    assert result.experience is None
    assert result.projects is None
    assert result.education is None


def test_sanitize_rewrite_output_is_ascii():
    result = sanitize_rewrite(_payload(), "Prodüct Designer", "Kerem Ünce")
    dumped = result.model_dump_json()
    assert all(ord(ch) <= 0x7F for ch in dumped)


def test_build_fallback_rewrite():
    profile = CandidateProfile(
        contact=Contact(name="Ana Li", portfolio="https://ana.dev"),
        location="Lisbon",
        skills=["Figma"],
        tools=["Sketch", "Figma"],
        projects=[
            Project(name=f"P{i}", summary=f"Summary {i}", outcomes=["Shipped", "Measured"])
            for i in range(3)
        ],
        additional_context="Designer focused on research",
    )
    result = build_fallback_rewrite(profile, "Product Designer", ["figma"], ["sql"])

    assert result.summary == "Designer focused on research. Strengths: figma. Focus Areas: sql"
    assert result.skills == ["Figma", "Sketch"]
    assert len(result.experience) == 2
    assert result.experience[0].role == "Product Designer"
    assert len(result.projects) == 3
    assert result.contact.website == "https://ana.dev"
    assert result.contact.location == "Lisbon"

    sanitized = sanitize_rewrite(result, "Product Designer", "Ana Li")
    assert sanitized.experience[0].bullets == ["Summary 0", "Shipped", "Measured"]
    assert sanitized.projects[0].bullets == ["Summary 0", "Shipped"]


def test_build_fallback_rewrite_without_evidence_uses_target_role():
    profile = CandidateProfile(contact=Contact(name="Ana"))
    result = build_fallback_rewrite(profile, "Product Designer", [], [])
    assert result.summary == "Product Designer"
    assert result.projects is None
    assert result.experience == []
