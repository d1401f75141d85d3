from .catalogue import (
    DEFAULT_KEYWORDS,
    JOB_DESCRIPTION_STOP_WORDS,
    build_keyword_catalogue,
    extract_job_description_terms,
    unique_keywords,
)
from .matcher import compile_keyword_pattern, keyword_weight, match_keywords

__all__ = [
    "DEFAULT_KEYWORDS",
    "JOB_DESCRIPTION_STOP_WORDS",
    "build_keyword_catalogue",
    "extract_job_description_terms",
    "unique_keywords",
    "compile_keyword_pattern",
    "keyword_weight",
    "match_keywords",
]
