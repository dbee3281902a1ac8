from typing import Sequence

from profile_analyzer.domain.models import LanguageTotals, Profile, Repository

MAX_FOLLOWER_POINTS = 30
MAX_VOLUME_POINTS = 30
MAX_DIVERSITY_POINTS = 40
MAX_SCORE = 100

def follower_points(followers: int) -> int:
    return min(MAX_FOLLOWER_POINTS, followers // 10)

def volume_points(repo_count: int) -> int:
    # Step function: two points per full block of five repositories
    return min(MAX_VOLUME_POINTS, (repo_count // 5) * 2)

def diversity_points(language_count: int) -> int:
    # Saturates at five distinct languages
    return min(MAX_DIVERSITY_POINTS, max(0, (language_count - 1) * 10))

def calculate_hireability_score(
    profile: Profile,
    repos: Sequence[Repository],
    totals: LanguageTotals,
) -> int:
    """
    Computes the hireability score (0-100) from the effective repository set.

    The sum of three independently capped terms: followers, repository
    volume and language diversity.
    """
    score = 0
    score += follower_points(profile.followers)
    score += volume_points(len(repos))
    score += diversity_points(len(totals))

    score = min(MAX_SCORE, max(0, score))
    assert 0 <= score <= MAX_SCORE, f"hireability score out of range: {score}"
    return score
