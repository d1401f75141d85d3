from .text import non_empty_lines, normalize_text

__all__ = ["normalize_text", "non_empty_lines"]
