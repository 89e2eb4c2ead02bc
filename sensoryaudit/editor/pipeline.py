"""Run a complete sensory audit."""

import logging

from ..core.manuscript import split_into_chapters
from ..core.models import AuditInput, AuditResult
from .baseline_builder import BaselineBuilder
from .motif_mapper import MotifMapper
from .report_synthesizer import ReportSynthesizer
from .richness_auditor import RichnessAuditor
from .show_dont_tell import ShowDontTellDetector

logger = logging.getLogger(__name__)


class AuditPipeline:
    """Segments the manuscript once and runs all four phases over it.

    The phases do not depend on one another; the synthesizer reads their
    combined result last. Externally flagged chapters only reach the
    roadmap artifact.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.baseline_builder = BaselineBuilder(strict=strict)
        self.richness_auditor = RichnessAuditor()
        self.motif_mapper = MotifMapper(strict=strict)
        self.show_dont_tell = ShowDontTellDetector()
        self.synthesizer = ReportSynthesizer()

    def run(self, audit_input: AuditInput) -> AuditResult:
        baseline = audit_input.sensory_baseline
        chapters = split_into_chapters(audit_input.manuscript_text)
        logger.info(f"Segmented manuscript into {len(chapters)} chapters")

        result = AuditResult(
            baseline=self.baseline_builder.build(chapters, baseline.exemplary_chapters),
            richness=self.richness_auditor.audit(chapters, baseline.richness_threshold),
            motif_mapping=self.motif_mapper.map(chapters, baseline.target_sensory_palette),
            per_passage=self.show_dont_tell.detect(chapters),
        )
        result.artifacts = self.synthesizer.synthesize(
            result, audit_input.chapters_flagged_for_enrichment
        )
        return result


def perform_audit(audit_input: AuditInput, strict: bool = False) -> AuditResult:
    """Run every phase and synthesize reports for one audit request."""
    return AuditPipeline(strict=strict).run(audit_input)
