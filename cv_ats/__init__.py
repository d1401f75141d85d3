"""Resume text analysis: statistics, ATS scoring and improvement plans."""

from cv_ats.services.engine import AnalysisOutcome, analyze, optimize

__all__ = ["AnalysisOutcome", "analyze", "optimize"]
