"""Ranker: stable descending sort, dense 1-based ranks, then top-N cut."""

from ranking.models import Result


def rank_results(results: list[Result], top_n: int = 0) -> list[Result]:
    """
    Sort by score descending; equal scores keep discovery order.
    Ranks are assigned before truncation so kept rows keep their ranks.
    """
    ordered = sorted(results, key=lambda r: r.score, reverse=True)
    for i, result in enumerate(ordered):
        result.rank = i + 1
    if top_n > 0 and len(ordered) > top_n:
        ordered = ordered[:top_n]
    return ordered
