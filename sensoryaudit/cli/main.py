"""Main CLI entry point for SensoryAudit."""

import click
import json
import sys
from pathlib import Path

from .. import __version__
from ..config import AuditConfig, setup_logging
from ..core.manuscript import split_into_chapters
from ..editor.pipeline import perform_audit
from ..io.file_handler import FileHandler
from ..io.request_handler import handle_audit_request, parse_audit_request


@click.group()
@click.version_option(version=__version__)
@click.option('--config', 'config_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML or JSON settings file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, config_file, debug):
    """SensoryAudit - sensory detail and motif audit for manuscripts"""
    ctx.ensure_object(dict)
    try:
        config = AuditConfig.from_file(config_file) if config_file else AuditConfig()
    except Exception as e:
        click.echo(f"❌ Error loading config: {e}", err=True)
        sys.exit(1)

    setup_logging('DEBUG' if debug else config.log_level, config.log_file)
    ctx.obj['config'] = config
    ctx.obj['file_handler'] = FileHandler()


def _build_payload(file_handler, manuscript_text, baseline_file, exemplary, threshold, motifs, default_threshold):
    """Merge a baseline file with command-line overrides into a request payload."""
    data = file_handler.read_config(baseline_file) if baseline_file else {}
    baseline = dict(data.get('sensory_baseline', data if 'exemplary_chapters' in data else {}))

    baseline.setdefault('exemplary_chapters', [])
    if exemplary:
        baseline['exemplary_chapters'] = list(baseline['exemplary_chapters']) + list(exemplary)
    if threshold is not None:
        baseline['richness_threshold'] = threshold
    baseline.setdefault('richness_threshold', default_threshold)
    if motifs:
        palette = dict(baseline.get('target_sensory_palette') or {})
        for motif in motifs:
            palette.setdefault(motif, "")
        baseline['target_sensory_palette'] = palette

    payload = {
        'manuscript_text': manuscript_text,
        'sensory_baseline': baseline,
    }
    if data.get('chapters_flagged_for_enrichment') is not None:
        payload['chapters_flagged_for_enrichment'] = data['chapters_flagged_for_enrichment']
    return payload


@cli.command()
@click.argument('manuscript', type=click.Path(exists=True, dir_okay=False))
@click.option('--baseline', 'baseline_file', type=click.Path(exists=True, dir_okay=False),
              help='YAML or JSON file with sensory_baseline and flagged chapters')
@click.option('--exemplary', multiple=True, help='Exemplary chapter identifier (repeatable)')
@click.option('--threshold', type=float, help='Richness threshold (1-20)')
@click.option('--motif', 'motifs', multiple=True, help='Motif to map (repeatable)')
@click.option('--out', 'out_dir', type=click.Path(file_okay=False), help='Directory for report artifacts')
@click.option('--html', is_flag=True, help='Also render markdown reports as HTML')
@click.option('--json', 'as_json', is_flag=True, help='Print the full result as JSON')
@click.option('--strict', is_flag=True, help='Fail on unresolved chapters or motifs')
@click.pass_context
def audit(ctx, manuscript, baseline_file, exemplary, threshold, motifs, out_dir, html, as_json, strict):
    """Audit a manuscript for sensory richness"""
    config = ctx.obj['config']
    file_handler = ctx.obj['file_handler']
    try:
        payload = _build_payload(
            file_handler,
            file_handler.read_file(manuscript),
            baseline_file,
            exemplary,
            threshold,
            motifs,
            config.default_threshold,
        )
        audit_input = parse_audit_request(payload, max_chars=config.max_manuscript_chars)
        result = perform_audit(audit_input, strict=strict or config.strict_resolution)

        if as_json:
            click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
            return

        output = Path(out_dir or config.output_dir)
        written = file_handler.write_artifacts(result, output, html=html)

        fingerprint = result.sensory_fingerprint
        summary = result.summary
        click.echo(f"📊 Baseline richness score: {fingerprint.baseline_richness_score:.1f}")
        click.echo(f"🎯 Sections scored: {len(result.richness_scorecard)}")
        click.echo(f"✅ Chapters at baseline: {summary.chapters_at_baseline}")
        below = ', '.join(str(n) for n in summary.chapters_below_baseline) or 'None'
        click.echo(f"⚠️  Chapters below baseline: {below}")
        click.echo(f"🔍 Weak points: {summary.consistent_weak_points}")
        click.echo(f"📁 Wrote {len(written)} files to {output}")

    except Exception as e:
        click.echo(f"❌ Error running audit: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('manuscript', type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def chapters(ctx, manuscript):
    """List the chapters detected in a manuscript"""
    try:
        text = ctx.obj['file_handler'].read_file(manuscript)
        parsed = split_into_chapters(text)

        click.echo(f"\n📚 {len(parsed)} chapters in {manuscript}")
        click.echo("=" * 50)
        for chapter in parsed:
            click.echo(f"Chapter {chapter.number}: {chapter.word_count:,} words")

    except Exception as e:
        click.echo(f"❌ Error reading chapters: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('request_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--strict', is_flag=True, help='Fail on unresolved chapters or motifs')
@click.pass_context
def request(ctx, request_file, strict):
    """Run a JSON audit request and print the JSON response"""
    config = ctx.obj['config']
    try:
        payload = ctx.obj['file_handler'].read_json(request_file)
    except Exception as e:
        click.echo(f"❌ Error reading request: {e}", err=True)
        sys.exit(1)

    status, body = handle_audit_request(
        payload,
        strict=strict or config.strict_resolution,
        max_chars=config.max_manuscript_chars,
    )
    click.echo(json.dumps(body, indent=2, ensure_ascii=False))
    if status != 200:
        sys.exit(1)


def main():
    """Main entry point for the CLI"""
    cli()


if __name__ == '__main__':
    main()
