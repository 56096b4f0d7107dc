from typing import Iterator, List, Optional, Tuple

from rulegraph.errors import CyclicRule, InvalidGrammar, UnknownRule
from rulegraph.rules import ROOT_RULE, Chain, Literal, RuleId, RuleStore

NodeId = int

Edge = Tuple[str, NodeId]


class Automaton:
    """Directed graph with one symbol per edge.

    Nodes are indices into an adjacency table and a node without outgoing
    edges is accepting. Every path from ``start`` to an accepting node spells a
    string of the grammar the automaton was built from.
    """

    def __init__(self):
        self._edges: List[List[Edge]] = []
        self.start: NodeId = 0

    def add_node(self) -> NodeId:
        self._edges.append([])
        return len(self._edges) - 1

    def add_edge(self, source: NodeId, target: NodeId, symbol: str):
        self._edges[source].append((symbol, target))

    def edges(self, node: NodeId) -> List[Edge]:
        return self._edges[node]

    def successors(self, node: NodeId, symbol: str) -> Iterator[NodeId]:
        return (target for label, target in self._edges[node] if label == symbol)

    def is_accepting(self, node: NodeId) -> bool:
        return not self._edges[node]

    @property
    def node_count(self) -> int:
        return len(self._edges)

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges)

    def language(self, start: Optional[NodeId] = None) -> Iterator[str]:
        """Yield every accepted string, depth first.

        Strings reachable along several paths are yielded once per path. The
        walk only terminates on acyclic graphs, which is all the builder makes.
        """
        if start is None:
            start = self.start
        pending = [(start, '')]
        while pending:
            node, prefix = pending.pop()
            edges = self._edges[node]
            if not edges:
                yield prefix
                continue
            for symbol, target in reversed(edges):
                pending.append((target, prefix + symbol))

    def __repr__(self):
        return 'Automaton(nodes=%d, edges=%d, start=%d)' % (self.node_count, self.edge_count, self.start)


def expand_rule(automaton: Automaton, begin: NodeId, end: NodeId, rules: RuleStore, rule_id: RuleId,
                expanding: Tuple[RuleId, ...] = ()):
    if rule_id in expanding:
        raise CyclicRule(expanding[expanding.index(rule_id):] + (rule_id,))

    alternatives = rules.get(rule_id)
    if alternatives is None:
        raise UnknownRule(rule_id, referenced_by=expanding[-1] if expanding else None)

    if len(alternatives) == 1 and isinstance(alternatives[0], Literal):
        automaton.add_edge(begin, end, alternatives[0].symbol)
        return

    expanding = expanding + (rule_id,)

    for alternative in alternatives:
        if isinstance(alternative, Literal):
            raise InvalidGrammar(rule_id)
        if not isinstance(alternative, Chain):
            raise TypeError('unknown rule alternative: %r' % (alternative,))
        if len(alternative) == 0:
            raise InvalidGrammar(rule_id, 'empty alternative')

        chain_begin = begin
        for i, chained_rule in enumerate(alternative.rules):
            chain_next = end if i == len(alternative.rules) - 1 else automaton.add_node()
            expand_rule(automaton, chain_begin, chain_next, rules, chained_rule, expanding)
            chain_begin = chain_next


def build_automaton(rules: RuleStore, root: RuleId = ROOT_RULE) -> Automaton:
    automaton = Automaton()
    begin = automaton.add_node()
    end = automaton.add_node()
    automaton.start = begin

    expand_rule(automaton, begin, end, rules, root)

    return automaton


__all__ = ['NodeId', 'Edge', 'Automaton', 'expand_rule', 'build_automaton']
