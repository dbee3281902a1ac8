from typing import List, Sequence

from profile_analyzer.domain.models import Repository

# Upstream size unit (KB as reported by GitHub)
MIN_REPO_SIZE = 100
TEMPLATE_MARKER = "template"

def is_low_value(repo: Repository) -> bool:
    """Forks, tiny repositories and self-described templates are low value."""
    if repo.fork:
        return True
    if repo.size < MIN_REPO_SIZE:
        return True
    if repo.description and TEMPLATE_MARKER in repo.description.lower():
        return True
    return False

def filter_repositories(repos: Sequence[Repository], enabled: bool) -> List[Repository]:
    """
    Returns the effective repository set.

    With `enabled` False the input is returned unchanged (as a new list);
    otherwise low-value repositories are dropped and the survivors keep
    their relative order.
    """
    if not enabled:
        return list(repos)
    return [repo for repo in repos if not is_low_value(repo)]
