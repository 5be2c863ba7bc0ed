"""
Matching thresholds.

Each value can be tuned on its own; backend.settings exposes all three as
environment-overridable settings with these values as defaults.

This module has no dependencies on models or services to avoid circular imports.
"""

# Candidates scoring below this are discarded before ranking. A candidate
# scoring exactly the cutoff is kept.
MATCH_PREFILTER_CUTOFF = 0.25

# A fuzzy match is auto-accepted only when its score is strictly greater than
# this. Must stay above 0.7025 so "sychick" -> "psychic" remains a suggestion.
MATCH_AUTO_ACCEPT_THRESHOLD = 0.71

# Exponent applied to the bigram distance: score = 1 - (1 - jaccard) ** warp.
# 1.0 is plain Jaccard similarity.
SIMILARITY_WARP = 2.0
