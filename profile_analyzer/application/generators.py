import random
from typing import List, Protocol, Sequence

from profile_analyzer.domain.models import LanguageTotals, Profile, Repository

WEEKS_PER_YEAR = 52
MAX_WEEKLY_COMMITS = 25
FALLBACK_FOCUS = "core technologies"

REVIEW_TEMPLATE = (
    "This profile showcases a strong focus on {focus}, backed by a Hireability Score of "
    "{score}/100. The repository filter highlights {repo_count} public projects, "
    "demonstrating consistent activity. This candidate exhibits high potential for roles "
    "requiring deep expertise in {focus}. (This is a mock AI review to demonstrate UI functionality.)"
)

class ReviewGenerator(Protocol):
    """Produces the short text review shown next to the score."""

    async def generate(self, profile: Profile, totals: LanguageTotals, score: int) -> str:
        ...

class ActivityGenerator(Protocol):
    """Produces the weekly activity series for the last year."""

    async def generate(self, profile: Profile, repos: Sequence[Repository]) -> List[int]:
        ...

class MockReviewGenerator:
    """
    Fixed-template review. Stands in for a generative model call with the same signature.

    The focus language is the first key of `totals` in iteration order, which is
    not necessarily the language with the most bytes.
    """

    async def generate(self, profile: Profile, totals: LanguageTotals, score: int) -> str:
        focus = next(iter(totals), None) or FALLBACK_FOCUS
        return REVIEW_TEMPLATE.format(focus=focus, score=score, repo_count=profile.public_repos)

class MockActivityGenerator:
    """Deterministic pseudo-random weekly commit counts, seeded by the login."""

    def __init__(self, weeks: int = WEEKS_PER_YEAR, max_weekly: int = MAX_WEEKLY_COMMITS):
        self.weeks = weeks
        self.max_weekly = max_weekly

    async def generate(self, profile: Profile, repos: Sequence[Repository]) -> List[int]:
        rng = random.Random(profile.login.lower())
        return [rng.randint(0, self.max_weekly) for _ in range(self.weeks)]
