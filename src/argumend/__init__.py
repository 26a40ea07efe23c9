"""argumend

"Did you mean" suggestions for mistyped keyword arguments, ranked by
substring-block similarity rather than edit distance.
"""

from .config import Config, get_config
from .consts import PACKAGE_VERSION
from .exceptions import (
    ArguMendError,
    ArguMendLoadError,
    UnsupportedKeywordError,
)
from .keywords import (
    argumend,
    check_keyword_arguments,
    format_unsupported_keyword,
    suggest_keywords,
)
from .matching import (
    Match,
    ScoredCandidate,
    extract_close_matches,
    find_all_matches,
    find_longest_match,
    score_candidates,
    similarity_ratio,
)

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "argumend",
    "check_keyword_arguments",
    "extract_close_matches",
    "find_all_matches",
    "find_longest_match",
    "format_unsupported_keyword",
    "get_config",
    "score_candidates",
    "similarity_ratio",
    "suggest_keywords",
    "Config",
    "Match",
    "ScoredCandidate",
    "ArguMendError",
    "ArguMendLoadError",
    "UnsupportedKeywordError",
]
