"""Audit phases and report synthesis."""

from .baseline_builder import BaselineBuilder, establish_baseline
from .motif_mapper import MotifMapper, map_motifs
from .pipeline import AuditPipeline, perform_audit
from .report_synthesizer import ReportSynthesizer
from .richness_auditor import RichnessAuditor, audit_richness
from .show_dont_tell import ShowDontTellDetector, analyze_show_dont_tell

__all__ = [
    "BaselineBuilder",
    "establish_baseline",
    "MotifMapper",
    "map_motifs",
    "AuditPipeline",
    "perform_audit",
    "ReportSynthesizer",
    "RichnessAuditor",
    "audit_richness",
    "ShowDontTellDetector",
    "analyze_show_dont_tell",
]
