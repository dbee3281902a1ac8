import logging
from typing import Any, Dict, List, Optional

import aiohttp

from profile_analyzer.application.generators import (
    ActivityGenerator,
    MockActivityGenerator,
    MockReviewGenerator,
    ReviewGenerator,
)
from profile_analyzer.application.languages import aggregate_languages, rank_languages
from profile_analyzer.application.repo_filter import filter_repositories
from profile_analyzer.application.scoring import calculate_hireability_score
from profile_analyzer.domain.exceptions import ConfigurationException
from profile_analyzer.domain.models import AnalysisResult, Repository
from profile_analyzer.infrastructure.acl import GitHubTranslator
from profile_analyzer.infrastructure.config import Settings
from profile_analyzer.infrastructure.github_client import GitHubRestClient

logger = logging.getLogger(__name__)


class ProfileAnalyzerService:
    """
    Service responsible for orchestrating one profile analysis: fetching the
    profile and its repositories, filtering, aggregating languages, scoring
    and generating the review and activity series.

    Holds no per-request state; every analysis builds its entities from scratch.
    """

    def __init__(
            self,
            settings: Settings,
            github_client: Optional[GitHubRestClient] = None,
            review_generator: Optional[ReviewGenerator] = None,
            activity_generator: Optional[ActivityGenerator] = None,
    ):
        self.settings = settings
        self.github_client = github_client or GitHubRestClient(
            token=settings.github_token.get_secret_value() if settings.github_token else "",
            api_url=settings.github_api_url,
            timeout_seconds=settings.request_timeout,
        )
        self.review_generator = review_generator or MockReviewGenerator()
        self.activity_generator = activity_generator or MockActivityGenerator()

    @staticmethod
    def _to_repositories(raw_repos: List[Dict[str, Any]]) -> List[Repository]:
        repos: List[Repository] = []
        for raw in raw_repos:
            if not isinstance(raw, dict):
                continue
            try:
                repos.append(GitHubTranslator.to_repository(raw))
            except ValueError as e:
                logger.warning(f"Skipping malformed repository entry: {e}")
        return repos

    async def analyze(self, username: str, filter_enabled: bool = False) -> AnalysisResult:
        """
        Runs the full analysis for `username`.

        Profile and repository failures abort the analysis; per-repository
        language failures are absorbed by the aggregator.

        Raises:
            ConfigurationException: no GitHub token is configured.
            NotFoundException, UnauthorizedException, UpstreamException: from the client.
        """
        if self.settings.github_token is None:
            raise ConfigurationException()

        logger.info(f"Analyzing '{username}' (filter={'on' if filter_enabled else 'off'}).")

        async with aiohttp.ClientSession() as session:
            raw_profile = await self.github_client.fetch_profile(session, username)
            profile = GitHubTranslator.to_profile(raw_profile)

            raw_repos = await self.github_client.fetch_repositories(session, username)
            repos = filter_repositories(self._to_repositories(raw_repos), filter_enabled)

            async def fetch_languages(repo: Repository) -> Dict[str, int]:
                return await self.github_client.fetch_language_bytes(session, username, repo.name)

            totals = await aggregate_languages(repos, fetch_languages)

        score = calculate_hireability_score(profile, repos, totals)
        review = await self.review_generator.generate(profile, totals, score)
        activity = await self.activity_generator.generate(profile, repos)

        ranked = rank_languages(totals)
        top_language = ranked[0][0] if ranked else "none"
        logger.info(
            f"Analysis of '{username}' done: {len(repos)} repositories, "
            f"{len(totals)} languages (top: {top_language}), score {score}."
        )

        return AnalysisResult(
            profile=profile,
            repositories=repos,
            languages_by_bytes=totals,
            hireability_score=score,
            ai_review=review,
            annual_activity=activity,
        )
