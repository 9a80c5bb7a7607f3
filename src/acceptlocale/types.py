"""Type aliases for the locale negotiation domain.

Provides semantic type aliases used throughout the package and by user
code when annotating negotiation call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LanguageTag",
    "OrderedCandidates",
    "QualityWeight",
]

type LanguageTag = str
"""Opaque locale identifier (e.g., 'en', 'de-AT', 'pt-BR'). Compared by exact equality."""

type QualityWeight = float
"""Client-stated preference strength in [0.0, 1.0]."""

type OrderedCandidates = tuple[LanguageTag, ...]
"""Language tags ordered by descending preference, header order kept for ties."""
