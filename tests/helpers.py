from profile_analyzer.domain.models import Profile, Repository


def make_repo(name: str, fork: bool = False, size: int = 500, description=None, language=None) -> Repository:
    return Repository(
        id=abs(hash(name)) % 100_000,
        name=name,
        fork=fork,
        size=size,
        description=description,
        language=language,
        stargazers_count=1,
        html_url=f"https://github.com/octocat/{name}",
    )


def make_profile(followers: int = 0, public_repos: int = 0, login: str = "octocat") -> Profile:
    return Profile(login=login, name="The Octocat", followers=followers, public_repos=public_repos)
