"""Tests for the command-line interface."""

import json

import pytest
import yaml
from click.testing import CliRunner
from sensoryaudit.cli.main import cli


MANUSCRIPT = (
    "Chapter 1\nThe fire crackled. She could smell smoke and feel the heat.\n"
    "Chapter 2\nHe did not know what to think. He was sad and could not understand.\n"
)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def manuscript_file(tmp_path):
    path = tmp_path / "manuscript.md"
    path.write_text(MANUSCRIPT, encoding="utf-8")
    return path


def test_chapters_command(runner, manuscript_file):
    result = runner.invoke(cli, ["chapters", str(manuscript_file)])
    assert result.exit_code == 0
    assert "2 chapters" in result.output
    assert "Chapter 1: 11 words" in result.output


def test_audit_writes_artifacts(runner, manuscript_file, tmp_path):
    out_dir = tmp_path / "reports"
    result = runner.invoke(cli, [
        "audit", str(manuscript_file),
        "--exemplary", "Ch. 1",
        "--threshold", "7.5",
        "--motif", "fire",
        "--out", str(out_dir),
    ])
    assert result.exit_code == 0, result.output
    for name in ("audit_report.md", "enrichment_toolkit.md", "revisions.md",
                 "roadmap.csv", "interactive_map.html", "audit.json"):
        assert (out_dir / name).exists()

    payload = json.loads((out_dir / "audit.json").read_text(encoding="utf-8"))
    assert list(payload["motif_mapping"]) == ["fire"]
    assert payload["per_passage"][0]["source"] == "Chapter 2"
    assert "Wrote 6 files" in result.output


def test_audit_html_option(runner, manuscript_file, tmp_path):
    out_dir = tmp_path / "reports"
    result = runner.invoke(cli, ["audit", str(manuscript_file), "--out", str(out_dir), "--html"])
    assert result.exit_code == 0, result.output
    html = (out_dir / "audit_report.html").read_text(encoding="utf-8")
    assert "<h1>Sensory Audit Report</h1>" in html


def test_audit_with_baseline_file(runner, manuscript_file, tmp_path):
    baseline = tmp_path / "baseline.yaml"
    baseline.write_text(yaml.safe_dump({
        "sensory_baseline": {
            "exemplary_chapters": ["Ch. 1"],
            "richness_threshold": 5,
            "target_sensory_palette": {"cold": "Isolation"},
        },
        "chapters_flagged_for_enrichment": [
            {"chapter": 7, "issue": "Flat ending", "type": "Show-don't-tell"},
        ],
    }), encoding="utf-8")
    out_dir = tmp_path / "reports"

    result = runner.invoke(cli, [
        "audit", str(manuscript_file), "--baseline", str(baseline), "--out", str(out_dir),
    ])
    assert result.exit_code == 0, result.output
    roadmap = (out_dir / "roadmap.csv").read_text(encoding="utf-8")
    assert roadmap.endswith("7,Flat ending,High")
    payload = json.loads((out_dir / "audit.json").read_text(encoding="utf-8"))
    assert payload["richness_scorecard"][0]["baseline"] == 5


def test_audit_rejects_bad_threshold(runner, manuscript_file, tmp_path):
    result = runner.invoke(cli, [
        "audit", str(manuscript_file), "--threshold", "42", "--out", str(tmp_path / "out"),
    ])
    assert result.exit_code == 1
    assert "richness_threshold" in result.output


def test_audit_strict_unresolved(runner, manuscript_file, tmp_path):
    result = runner.invoke(cli, [
        "audit", str(manuscript_file), "--exemplary", "Ch. 12", "--strict",
        "--out", str(tmp_path / "out"),
    ])
    assert result.exit_code == 1
    assert "Could not resolve exemplary chapter" in result.output


def test_request_command(runner, tmp_path):
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps({
        "manuscript_text": MANUSCRIPT,
        "sensory_baseline": {"exemplary_chapters": [], "richness_threshold": 7.5},
    }), encoding="utf-8")

    result = runner.invoke(cli, ["request", str(request_file)])
    assert result.exit_code == 0, result.output
    assert '"roadmap_csv"' in result.output


def test_request_command_invalid(runner, tmp_path):
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps({"manuscript_text": 5}), encoding="utf-8")

    result = runner.invoke(cli, ["request", str(request_file)])
    assert result.exit_code == 1
    assert '"Invalid input"' in result.output
