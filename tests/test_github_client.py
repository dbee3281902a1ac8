import unittest
from unittest.mock import AsyncMock, MagicMock

from profile_analyzer.domain.exceptions import NotFoundException, UnauthorizedException, UpstreamException
from profile_analyzer.infrastructure.github_client import GitHubRestClient


def _response(status: int, payload=None):
    resp = AsyncMock()
    resp.status = status
    resp.json = AsyncMock(return_value=payload)
    resp.__aenter__ = AsyncMock(return_value=resp)
    resp.__aexit__ = AsyncMock(return_value=False)
    return resp


def _session(*responses):
    session = AsyncMock()
    session.get = MagicMock(side_effect=list(responses))
    return session


class TestGitHubRestClient(unittest.TestCase):
    def test_headers_are_dict(self) -> None:
        token = "test-token"
        client = GitHubRestClient(token=token)

        self.assertIsInstance(client.headers, dict)
        self.assertEqual(client.headers["Authorization"], f"Bearer {token}")

    def test_headers_include_user_agent(self) -> None:
        client = GitHubRestClient(token="t")
        self.assertIn("User-Agent", client.headers)
        self.assertIn("Accept", client.headers)

    def test_api_url_trailing_slash_is_stripped(self) -> None:
        client = GitHubRestClient(token="t", api_url="https://ghe.example.com/api/v3/")
        self.assertEqual(client.api_url, "https://ghe.example.com/api/v3")


class TestStatusMapping(unittest.IsolatedAsyncioTestCase):
    async def test_profile_404_raises_not_found(self) -> None:
        client = GitHubRestClient(token="t")
        with self.assertRaises(NotFoundException):
            await client.fetch_profile(_session(_response(404)), "ghost")

    async def test_profile_401_raises_unauthorized(self) -> None:
        client = GitHubRestClient(token="t")
        with self.assertRaises(UnauthorizedException):
            await client.fetch_profile(_session(_response(401)), "octocat")

    async def test_other_error_carries_upstream_status(self) -> None:
        client = GitHubRestClient(token="t")
        with self.assertRaises(UpstreamException) as ctx:
            await client.fetch_profile(_session(_response(403, {"message": "rate limited"})), "octocat")
        self.assertEqual(ctx.exception.status, 403)

    async def test_profile_success_returns_payload(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, {"login": "octocat", "followers": 3}))

        profile = await client.fetch_profile(session, "octocat")

        self.assertEqual(profile["login"], "octocat")
        url = session.get.call_args.args[0]
        self.assertEqual(url, "https://api.github.com/users/octocat")


class TestRepositories(unittest.IsolatedAsyncioTestCase):
    async def test_requests_single_page_of_hundred(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, [{"name": "a"}]))

        repos = await client.fetch_repositories(session, "octocat")

        self.assertEqual(repos, [{"name": "a"}])
        self.assertEqual(session.get.call_args.kwargs["params"], {"per_page": 100})
        self.assertEqual(session.get.call_count, 1)

    async def test_listing_server_error_raises_upstream(self) -> None:
        client = GitHubRestClient(token="t")

        with self.assertRaises(UpstreamException) as ctx:
            await client.fetch_repositories(_session(_response(500)), "octocat")

        self.assertEqual(ctx.exception.status, 500)

    async def test_listing_401_raises_unauthorized(self) -> None:
        client = GitHubRestClient(token="t")
        with self.assertRaises(UnauthorizedException):
            await client.fetch_repositories(_session(_response(401)), "octocat")

    async def test_non_array_body_is_coerced_to_empty(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, {"message": "weird"}))

        self.assertEqual(await client.fetch_repositories(session, "octocat"), [])

    async def test_language_bytes_hits_repo_languages_endpoint(self) -> None:
        client = GitHubRestClient(token="t")
        session = _session(_response(200, {"Python": 1200, "Shell": 30}))

        langs = await client.fetch_language_bytes(session, "octocat", "hello-world")

        self.assertEqual(langs, {"Python": 1200, "Shell": 30})
        url = session.get.call_args.args[0]
        self.assertEqual(url, "https://api.github.com/repos/octocat/hello-world/languages")

    async def test_language_bytes_error_propagates(self) -> None:
        client = GitHubRestClient(token="t")
        with self.assertRaises(UpstreamException):
            await client.fetch_language_bytes(_session(_response(500)), "octocat", "repo")
