import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Sequence, Tuple

from profile_analyzer.domain.models import LanguageTotals, Repository

logger = logging.getLogger(__name__)

LanguageFetcher = Callable[[Repository], Awaitable[Dict[str, Any]]]

async def _fetch_or_empty(repo: Repository, fetch: LanguageFetcher) -> Dict[str, int]:
    """Runs one fetch; any failure becomes an empty map so it cannot abort the join."""
    try:
        raw = await fetch(repo)
    except Exception as e:
        logger.warning(f"Language fetch for '{repo.name}' failed: {e}. Skipping repository.")
        return {}

    if not isinstance(raw, dict):
        return {}

    langs: Dict[str, int] = {}
    for lang, size in raw.items():
        # bool is an int subclass; GitHub never sends it, so reject it
        if isinstance(size, int) and not isinstance(size, bool) and size >= 0:
            langs[lang] = size
    return langs

def merge_language_maps(maps: Sequence[Dict[str, int]]) -> LanguageTotals:
    totals: LanguageTotals = {}
    for langs in maps:
        for lang, size in langs.items():
            totals[lang] = totals.get(lang, 0) + size
    return totals

async def aggregate_languages(repos: Sequence[Repository], fetch: LanguageFetcher) -> LanguageTotals:
    """
    Fetches every repository's language map concurrently and sums the bytes
    per language once all fetches have settled.

    Each task returns its own partial map, so the totals do not depend on
    completion order. A failed repository contributes no entries.
    """
    if not repos:
        return {}

    tasks = [_fetch_or_empty(repo, fetch) for repo in repos]
    partials = await asyncio.gather(*tasks)

    return merge_language_maps(partials)

def rank_languages(totals: LanguageTotals) -> List[Tuple[str, int]]:
    """Byte-descending view of the totals, ties broken by name."""
    return sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
