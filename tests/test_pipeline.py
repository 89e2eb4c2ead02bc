"""End-to-end tests for the audit pipeline."""

import json

import pytest
from sensoryaudit import perform_audit
from sensoryaudit.core.errors import UnresolvedReferenceError
from sensoryaudit.core.models import AuditInput, FlaggedChapter, FlagType, SensoryBaseline
from sensoryaudit.editor.report_synthesizer import NO_REVISIONS_MD


MANUSCRIPT = (
    "Chapter 1\n"
    "The fire burned low. She could smell the smoke and feel the heat on her skin. "
    "Somewhere a bell would ring.\n\n"
    "Chapter 2\n"
    "He did not know what to think. He felt sad, and he could not understand why. "
    "The ledger lay open on the desk.\n\n"
    "Chapter 3\n"
    "Snow fell. The cold light of winter filled the room."
)

PALETTE = {"fire": "Destruction", "cold": "Isolation", "documentation": "Records", "water": "?"}


def _input(flagged=None, exemplary=("Ch. 1",), palette=PALETTE):
    return AuditInput(
        manuscript_text=MANUSCRIPT,
        sensory_baseline=SensoryBaseline(
            exemplary_chapters=list(exemplary),
            richness_threshold=7.5,
            target_sensory_palette=palette,
        ),
        chapters_flagged_for_enrichment=flagged or [],
    )


def test_payload_keys():
    payload = perform_audit(_input()).to_dict()
    assert set(payload) == {
        "sensory_fingerprint",
        "exemplary_passages_analyzed",
        "richness_scorecard",
        "summary",
        "motif_mapping",
        "per_passage",
        "interactive_map_html",
        "audit_report_md",
        "enrichment_toolkit_md",
        "revisions_md",
        "roadmap_csv",
    }
    assert list(payload["motif_mapping"]) == ["fire", "cold", "documentation", "water"]


def test_phases_see_same_chapters():
    result = perform_audit(_input())
    assert [row.chapter for row in result.richness_scorecard] == [1, 2, 3]
    assert [c.chapter for c in result.motif_mapping["fire"].chapters_present] == [1, 2, 3]
    assert [p.source for p in result.per_passage] == ["Chapter 2"]
    assert result.baseline.exemplary_passages_analyzed[0].source == "Ch. 1"


def test_unknown_motif_absent_in_payload():
    payload = perform_audit(_input()).to_dict()
    for entry in payload["motif_mapping"]["water"]["chapters_present"]:
        assert entry["presence"] == "Absent"
        assert entry["description"] == "Not present"


def test_idempotent():
    first = json.dumps(perform_audit(_input()).to_dict(), sort_keys=True)
    second = json.dumps(perform_audit(_input()).to_dict(), sort_keys=True)
    assert first == second


def test_no_headings_few_tells():
    result = perform_audit(AuditInput(
        manuscript_text="A quiet street. I know the way.",
        sensory_baseline=SensoryBaseline(exemplary_chapters=[], richness_threshold=5),
    ))
    payload = result.to_dict()
    assert payload["per_passage"] == []
    assert payload["revisions_md"] == NO_REVISIONS_MD
    assert len(payload["richness_scorecard"]) == 1
    assert payload["richness_scorecard"][0]["chapter"] == 1


def test_flagged_chapters_only_touch_roadmap():
    flagged = [
        FlaggedChapter(chapter=2, issue="Needs texture", type=FlagType.UNDERWRITTEN),
        FlaggedChapter(chapter=9, issue="Plant the fire motif", type=FlagType.FORESHADOWING, section="Section 1"),
    ]
    plain = perform_audit(_input()).to_dict()
    with_flags = perform_audit(_input(flagged=flagged)).to_dict()

    assert with_flags["richness_scorecard"] == plain["richness_scorecard"]
    assert with_flags["motif_mapping"] == plain["motif_mapping"]
    assert with_flags["per_passage"] == plain["per_passage"]
    assert with_flags["roadmap_csv"] == (
        plain["roadmap_csv"] + "\n2,Needs texture,High\n9,Section 1 Plant the fire motif,High"
    )


def test_strict_pipeline_raises_on_unknown_motif():
    with pytest.raises(UnresolvedReferenceError):
        perform_audit(_input(), strict=True)


def test_strict_pipeline_passes_when_everything_resolves():
    result = perform_audit(_input(palette={"fire": ""}), strict=True)
    assert "fire" in result.motif_mapping
