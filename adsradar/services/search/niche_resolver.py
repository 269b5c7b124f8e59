"""Correct free-text niches towards the canonical niche catalog."""

from __future__ import annotations

from collections.abc import Sequence

from adsradar.services.search.catalogs import CANONICAL_NICHES
from adsradar.services.search.similarity import similarity
from adsradar.services.search.types import NicheMatch

NICHE_MATCH_THRESHOLD = 0.25


class NicheResolver:
    """Map user input to the closest canonical niche.

    Below the threshold the input is kept as typed: an unknown niche is
    still a valid keyword seed.
    """

    def __init__(
        self,
        niches: Sequence[str] = CANONICAL_NICHES,
        *,
        threshold: float = NICHE_MATCH_THRESHOLD,
    ) -> None:
        self.niches = tuple(niches)
        self.threshold = threshold

    def match(self, text: str) -> NicheMatch:
        best_niche: str | None = None
        best_score = 0.0
        for niche in self.niches:
            score = similarity(text, niche)
            if score > best_score:
                best_score = score
                best_niche = niche

        if best_niche is None or best_score < self.threshold:
            return NicheMatch(input=text, niche=text, score=best_score)
        return NicheMatch(input=text, niche=best_niche, score=best_score)

    def resolve(self, text: str) -> str:
        return self.match(text).niche
