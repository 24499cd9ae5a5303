"""RoundRobinPolicy — rotate through eligible free agents."""

from __future__ import annotations

from support_desk.domain.entities.agent import Agent


def pick_next(candidates: list[Agent], last_index: int) -> tuple[Agent, int]:
    """Round-robin pick from a candidate list in enumeration order.

    The candidate list is NOT re-sorted: callers pass agents in the store's
    natural order, which is stable for the lifetime of the store.

    Args:
        candidates: non-empty list of eligible free agents.
        last_index: index picked last time for this category (-1 if never).

    Returns:
        (chosen_agent, index_to_store)

    Raises:
        ValueError: if candidates list is empty.
    """
    if not candidates:
        raise ValueError("Cannot pick from an empty candidate list")

    index = (last_index + 1) % len(candidates)
    return candidates[index], index
