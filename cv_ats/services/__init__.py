from .documents import create_document, generated_document, optimize_document, reanalyze_document
from .engine import AnalysisOutcome, analyze, optimize
from .generation import GeneratedCv, build_cv_draft, derive_title, generate_cv
from .optimizer import build_optimization_plan
from .scoring import ScoreBreakdown, compute_ats_score, score_breakdown
from .stats import build_stats

__all__ = [
    "AnalysisOutcome",
    "analyze",
    "optimize",
    "build_stats",
    "ScoreBreakdown",
    "score_breakdown",
    "compute_ats_score",
    "build_optimization_plan",
    "GeneratedCv",
    "build_cv_draft",
    "derive_title",
    "generate_cv",
    "create_document",
    "reanalyze_document",
    "optimize_document",
    "generated_document",
]
