from typing import Iterable, Optional, Set

from rulegraph.automaton import Automaton, NodeId


def advance(automaton: Automaton, frontier: Set[NodeId], symbol: str) -> Set[NodeId]:
    next_frontier = set()
    for node in frontier:
        next_frontier.update(automaton.successors(node, symbol))
    return next_frontier


def matches(automaton: Automaton, message: str, start: Optional[NodeId] = None) -> bool:
    if start is None:
        start = automaton.start

    # Several alternatives can share a prefix, so every live branch is tracked.
    frontier = {start}
    for symbol in message:
        frontier = advance(automaton, frontier, symbol)
        if not frontier:
            return False

    # Only a node at the end of a derivation completes the message.
    return any(automaton.is_accepting(node) for node in frontier)


def count_matches(automaton: Automaton, messages: Iterable[str], start: Optional[NodeId] = None) -> int:
    return sum(1 for message in messages if matches(automaton, message, start=start))


__all__ = ['advance', 'matches', 'count_matches']
