import aiohttp
import logging
from typing import Any, Dict, List, Optional

from profile_analyzer.domain.exceptions import (
    NotFoundException,
    UnauthorizedException,
    UpstreamException,
)

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.github.com"
# Only the first page is requested; pagination is not implemented.
REPOS_PER_PAGE = 100
DEFAULT_TIMEOUT_SECONDS = 60

class GitHubRestClient:
    """
    Client for the read-only parts of the GitHub REST API used by the analyzer.
    Handles authentication and maps upstream statuses to domain exceptions.
    Calls are never retried.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": "github-profile-analyzer",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        self.api_url = api_url.rstrip("/")
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def _get_json(
        self,
        session: aiohttp.ClientSession,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.api_url}{path}"
        async with session.get(url, headers=self.headers, params=params, timeout=self.timeout) as response:
            if response.status == 404:
                raise NotFoundException()
            if response.status == 401:
                raise UnauthorizedException()
            if response.status >= 300:
                logger.warning(f"GET {path} failed with status {response.status}.")
                raise UpstreamException(status=response.status)

            return await response.json()

    async def fetch_profile(self, session: aiohttp.ClientSession, username: str) -> Dict[str, Any]:
        """
        Fetches the raw profile of `username`.

        Raises:
            NotFoundException, UnauthorizedException, UpstreamException
        """
        data = await self._get_json(session, f"/users/{username}")
        if not isinstance(data, dict):
            raise UpstreamException(status=200, message="Unexpected profile payload.")
        return data

    async def fetch_repositories(self, session: aiohttp.ClientSession, username: str) -> List[Dict[str, Any]]:
        """
        Fetches a single page of at most 100 public repositories.

        A successful response whose body is not a JSON array yields an empty list.
        """
        data = await self._get_json(session, f"/users/{username}/repos", params={"per_page": REPOS_PER_PAGE})
        if not isinstance(data, list):
            logger.warning(f"Repository listing for '{username}' was not an array. Treating as empty.")
            return []
        return data

    async def fetch_language_bytes(
        self, session: aiohttp.ClientSession, username: str, repo_name: str
    ) -> Dict[str, int]:
        """Fetches the language -> bytes map of one repository."""
        data = await self._get_json(session, f"/repos/{username}/{repo_name}/languages")
        return data if isinstance(data, dict) else {}
