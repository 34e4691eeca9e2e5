"""Shared test configuration, fixtures, and a scripted narrative source."""

import pytest

from services.narrative import NarrativeMalformed, NarrativeOk, NarrativeResult, NarrativeSource


class ScriptedNarrativeSource(NarrativeSource):
    """Returns a fixed result and records the prompts it was sent."""

    name = "scripted"

    def __init__(self, result: NarrativeResult):
        self.result = result
        self.calls: list[tuple[str, str]] = []

    async def generate_json(self, system_prompt: str, user_content: str) -> NarrativeResult:
        self.calls.append((system_prompt, user_content))
        return self.result


@pytest.fixture
def narrative_ok():
    def _make(value: dict) -> ScriptedNarrativeSource:
        return ScriptedNarrativeSource(NarrativeOk(value=value))
    return _make


@pytest.fixture
def narrative_malformed():
    return ScriptedNarrativeSource(NarrativeMalformed(raw="not json", reason="invalid JSON"))


@pytest.fixture
def job_spec_raw():
    return {
        "title": "  Senior Product Designer ",
        "responsibilities": ["Design mobile flows", "Run usability testing", "Design mobile flows"],
        "mustHaves": ["Figma", "Prototyping", " "],
        "niceToHaves": ["Design systems"],
        "keywords": ["figma", "prototyping", "research"],
        "location": "  ",
    }


@pytest.fixture
def candidate_profile_raw():
    return {
        "contact": {"name": " Kerem Unce ", "email": "kerem@example.com", "behance": "https://behance.net/keremnce"},
        "title": "Product Designer",
        "location": "Istanbul, Turkey",
        "skills": ["Figma", "Prototyping", "Figma"],
        "tools": ["Sketch"],
        "projects": [
            {
                "name": "How to Draw (iOS) - Step-by-step",
                "summary": "Drawing tutorial app for iOS.",
                "skills": ["Usability testing"],
                "outcomes": ["Shipped mobile flows to 10k users", "Ran usability research"],
            }
        ],
        "additionalContext": "Designer focused on mobile research and prototyping.",
    }
