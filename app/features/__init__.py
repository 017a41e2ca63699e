from .content_quality import analyze_content, readability_score
from .formatting import check_formatting
from .keywords import classify_importance, extract_keywords, match_keywords
from .skills import compute_skills_score, match_skills

__all__ = [
    "extract_keywords",
    "match_keywords",
    "classify_importance",
    "match_skills",
    "compute_skills_score",
    "check_formatting",
    "analyze_content",
    "readability_score",
]
