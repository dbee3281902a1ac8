from typing import Any, Dict
from profile_analyzer.domain.models import Profile, Repository

class GitHubTranslator:
    """
    Anti-corruption layer that translates raw GitHub REST JSON payloads into domain entities.
    """

    @staticmethod
    def to_profile(raw_user: Dict[str, Any]) -> Profile:
        """
        Transforms a raw `/users/{username}` payload into a Profile.

        Args:
            raw_user (Dict[str, Any]): The JSON object returned by GitHub.

        Returns:
            Profile: The domain model instance representing the user.
        """
        login = raw_user.get('login')
        if not login:
            raise ValueError("login is required to build Profile.")

        return Profile(
            login=login,
            name=raw_user.get('name'),
            avatar_url=raw_user.get('avatar_url') or '',
            html_url=raw_user.get('html_url'),
            bio=raw_user.get('bio'),
            # GitHub sends null for some counters on suspended/ghost accounts
            followers=raw_user.get('followers') or 0,
            public_repos=raw_user.get('public_repos') or 0,
        )

    @staticmethod
    def to_repository(raw_repo: Dict[str, Any]) -> Repository:
        """Transforms one item of `/users/{username}/repos` into a Repository."""
        name = raw_repo.get('name')
        if not name:
            raise ValueError("name is required to build Repository.")

        return Repository(
            id=raw_repo.get('id') or 0,
            name=name,
            fork=bool(raw_repo.get('fork', False)),
            size=raw_repo.get('size') or 0,
            description=raw_repo.get('description'),
            language=raw_repo.get('language'),
            stargazers_count=raw_repo.get('stargazers_count') or 0,
            html_url=raw_repo.get('html_url') or '',
        )
