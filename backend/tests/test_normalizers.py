from models.schemas import CandidateProfile, Contact, JobSpec, Project
from services.normalizers import (
    DEFAULT_CANDIDATE_NAME,
    DEFAULT_PROJECT_NAME,
    DEFAULT_PROJECT_SUMMARY,
    normalize_candidate_profile,
    normalize_job_spec,
    trim_list,
)


def test_trim_list_dedupes_exact_values_in_order():
    assert trim_list([" b", "a", "b ", "", "  ", "a"]) == ["b", "a"]
    assert trim_list(None) == []


def test_trim_list_is_case_sensitive():
    assert trim_list(["React", "react ", "REACT"]) == ["React", "react", "REACT"]


def test_normalize_job_spec(job_spec_raw):
    job = normalize_job_spec(JobSpec.model_validate(job_spec_raw))
    assert job.title == "Senior Product Designer"
    assert job.responsibilities == ["Design mobile flows", "Run usability testing"]
    assert job.must_haves == ["Figma", "Prototyping"]
    assert job.location is None
    assert job.employment_type is None


def test_normalize_job_spec_is_idempotent(job_spec_raw):
    once = normalize_job_spec(JobSpec.model_validate(job_spec_raw))
    assert normalize_job_spec(once) == once


def test_normalize_candidate_profile(candidate_profile_raw):
    profile = normalize_candidate_profile(CandidateProfile.model_validate(candidate_profile_raw))
    assert profile.contact.name == "Kerem Unce"
    assert profile.skills == ["Figma", "Prototyping"]
    assert profile.projects[0].name == "How to Draw - Step-by-step"


def test_normalize_candidate_profile_defaults():
    profile = normalize_candidate_profile(CandidateProfile(
        contact=Contact(name="   ", email=" ", phone=" +1 555 0100 "),
        title="",
        additional_context="   ",
        projects=[Project(name=" ", summary="")],
    ))
    assert profile.contact.name == DEFAULT_CANDIDATE_NAME
    assert profile.contact.email is None
    assert profile.contact.phone == "+1 555 0100"
    assert profile.title is None
    assert profile.additional_context is None
    assert profile.projects[0].name == DEFAULT_PROJECT_NAME
    assert profile.projects[0].summary == DEFAULT_PROJECT_SUMMARY


def test_normalize_candidate_profile_is_idempotent(candidate_profile_raw):
    once = normalize_candidate_profile(CandidateProfile.model_validate(candidate_profile_raw))
    assert normalize_candidate_profile(once) == once


def test_normalize_candidate_profile_parenthetical_only_name_is_idempotent():
    profile = CandidateProfile(contact=Contact(), projects=[Project(name="(draft)")])
    once = normalize_candidate_profile(profile)
    assert once.projects[0].name == DEFAULT_PROJECT_NAME
    assert normalize_candidate_profile(once) == once


def test_normalize_candidate_profile_does_not_mutate_input(candidate_profile_raw):
    original = CandidateProfile.model_validate(candidate_profile_raw)
    snapshot = original.model_copy(deep=True)
    normalize_candidate_profile(original)
    assert original == snapshot


def test_case_variants_survive_profile_normalization():
    profile = normalize_candidate_profile(CandidateProfile(
        contact=Contact(name="A"),
        skills=["React", "react ", "REACT"],
    ))
    assert profile.skills == ["React", "react", "REACT"]
