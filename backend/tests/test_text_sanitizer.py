import pytest

from services.text_sanitizer import (
    ascii_safe,
    clean_job_description,
    clean_resume_text,
    dedupe_lines,
)


@pytest.mark.parametrize("text", [
    "",
    "plain ascii",
    "Café • résumé — naïve",
    "🚀🔥✨",
    "  lots   of\t\tspace  ",
    "Ｆｕｌｌｗｉｄｔｈ ﬁle …",
    "line one\nline two",
])
def test_ascii_safe_is_idempotent_and_ascii(text):
    once = ascii_safe(text)
    assert ascii_safe(once) == once
    assert all(ord(ch) <= 0x7F for ch in once)


def test_ascii_safe_unifies_bullets_and_dashes():
    assert ascii_safe("Design • Research — Testing") == "Design - Research - Testing"
    assert ascii_safe("Column │ value") == "Column - value"


def test_ascii_safe_decomposes_accents():
    assert ascii_safe("Café résumé") == "Cafe resume"
    assert ascii_safe("ﬁle") == "file"


def test_ascii_safe_pure_emoji_is_empty():
    assert ascii_safe("🚀🔥") == ""


def test_ascii_safe_collapses_whitespace():
    assert ascii_safe("  a    b\t\tc  ") == "a b c"


def test_dedupe_lines():
    assert dedupe_lines("a\na\nb\n a ") == "a\nb"


def test_dedupe_lines_drops_blank_and_handles_crlf():
    assert dedupe_lines("first\r\n\r\nsecond\r\nfirst\n   \n") == "first\nsecond"


def test_clean_resume_text_unifies_bullets_and_strips_symbols():
    cleaned = clean_resume_text("• Built APIs\n▪ Led team #1 @ Acme!")
    assert cleaned == "- Built APIs - Led team 1 Acme"


def test_clean_job_description_truncates_benefits():
    raw = "Senior Designer\n\nResponsibilities:\n- Build flows\n\nBenefits\nFree lunch"
    cleaned = clean_job_description(raw)
    assert "Benefits" not in cleaned
    assert "Free lunch" not in cleaned
    assert "Build flows" in cleaned


@pytest.mark.parametrize("heading", ["What we offer", "COMPENSATION", "benefits"])
def test_clean_job_description_heading_phrases(heading):
    cleaned = clean_job_description(f"Own the roadmap.\n{heading}:\nEquity and PTO")
    assert cleaned == "Own the roadmap."


def test_clean_job_description_without_benefits_keeps_everything():
    assert clean_job_description("Python, SQL & APIs") == "Python, SQL & APIs"
