# Argvtree CLI Grammar — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Edit-distance based "did you mean" matching for unknown arguments.

Functions:
- edit_distance: Levenshtein distance with unit insert/delete/substitute cost.
- closest_match: Pick the candidate nearest to a token, earliest wins ties.
- suggestion_candidates: Every `--name` / `-x` form visible on a command node.

These helpers are read-only and never raise; they only shape the message of
`UnknownArgumentError`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from argvtree.command import CommandNode


def edit_distance(source: str, target: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Args:
        source (str): The string typed by the user.
        target (str): A known argument form.

    Returns:
        int: Minimum number of single-character inserts, deletes and substitutions.
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current = [i]
        for j, target_char in enumerate(target, start=1):
            cost = 0 if source_char == target_char else 1
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + cost,
                )
            )
        previous = current
    return previous[-1]


def closest_match(token: str, candidates: Iterable[str]) -> str | None:
    """
    Return the candidate with the smallest edit distance to `token`.

    Ties are broken by the order of `candidates`. Returns None when there are
    no candidates.
    """
    best: str | None = None
    best_distance = 0
    for candidate in candidates:
        distance = edit_distance(token, candidate)
        if best is None or distance < best_distance:
            best = candidate
            best_distance = distance
    return best


def suggestion_candidates(node: CommandNode) -> list[str]:
    """Collect `--name` and `-abbr` for every flag, then every option, on `node`."""
    candidates: list[str] = []
    for flag in node.flags.values():
        candidates.extend(flag.tokens)
    for option in node.options.values():
        candidates.extend(option.tokens)
    return candidates
