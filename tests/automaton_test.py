import pytest

from rulegraph.automaton import Automaton, build_automaton
from rulegraph.errors import CyclicRule, InvalidGrammar, UnknownRule
from rulegraph.matcher import matches
from rulegraph.rulefile.parser import parse_rules
from rulegraph.rules import Chain, Literal

EXAMPLE_RULES = '''0: 4 1 5
1: 2 3 | 3 2
2: 4 4 | 5 5
3: 4 5 | 5 4
4: "a"
5: "b"'''

EXAMPLE_LANGUAGE = ['aaaabb', 'aaabab', 'abbabb', 'abbbab', 'aabaab', 'aabbbb', 'abaaab', 'ababbb']


def test_literal_rule_is_a_single_edge():
    automaton = build_automaton({0: [Literal('x')]})

    assert automaton.node_count == 2
    assert automaton.edges(automaton.start) == [('x', 1)]
    assert automaton.is_accepting(1)
    assert not automaton.is_accepting(automaton.start)


def test_example_graph_shape():
    automaton = build_automaton(parse_rules(EXAMPLE_RULES))

    # One node per position inside each chain, shared start and end.
    assert automaton.node_count == 14
    assert automaton.edge_count == 18

    accepting = [node for node in range(automaton.node_count) if automaton.is_accepting(node)]
    assert accepting == [1]


def test_example_language():
    automaton = build_automaton(parse_rules(EXAMPLE_RULES))
    assert sorted(automaton.language()) == sorted(EXAMPLE_LANGUAGE)


def test_alternatives_reconverge():
    rules = {0: [Chain((1, 2))], 1: [Chain((3,)), Chain((4,))], 2: [Literal('c')],
             3: [Literal('a')], 4: [Literal('b')]}
    automaton = build_automaton(rules)

    (_, middle), = automaton.edges(automaton.start)[:1]
    assert sorted(automaton.edges(automaton.start)) == [('a', middle), ('b', middle)]
    assert sorted(automaton.language()) == ['ac', 'bc']


def test_build_from_other_root():
    automaton = build_automaton(parse_rules(EXAMPLE_RULES), root=3)
    assert sorted(automaton.language()) == ['ab', 'ba']


def test_unknown_rule():
    with pytest.raises(UnknownRule) as excinfo:
        build_automaton({0: [Chain((1,))]})
    assert excinfo.value.rule_id == 1
    assert excinfo.value.referenced_by == 0


def test_unknown_root_rule():
    with pytest.raises(UnknownRule) as excinfo:
        build_automaton({1: [Literal('a')]})
    assert excinfo.value.rule_id == 0
    assert excinfo.value.referenced_by is None


def test_literal_mixed_with_chain():
    with pytest.raises(InvalidGrammar) as excinfo:
        build_automaton({0: [Literal('a'), Chain((1,))], 1: [Literal('b')]})
    assert excinfo.value.rule_id == 0

    with pytest.raises(InvalidGrammar):
        build_automaton({0: [Chain((1,))], 1: [Literal('a'), Literal('b')]})


def test_empty_alternative():
    with pytest.raises(InvalidGrammar) as excinfo:
        build_automaton({0: [Chain(())]})
    assert excinfo.value.rule_id == 0
    assert 'empty alternative' in str(excinfo.value)

    with pytest.raises(InvalidGrammar) as excinfo:
        build_automaton({0: [Chain((1,))], 1: [Chain((2,)), Chain(())], 2: [Literal('a')]})
    assert excinfo.value.rule_id == 1


def test_cyclic_rule():
    rules = {0: [Chain((8,))], 8: [Chain((42,)), Chain((42, 8))], 42: [Literal('a')]}

    with pytest.raises(CyclicRule) as excinfo:
        build_automaton(rules)
    assert excinfo.value.path == (8, 8)
    assert isinstance(excinfo.value, InvalidGrammar)


def test_indirect_cycle():
    rules = {0: [Chain((1, 2))], 1: [Literal('a')], 2: [Chain((3,))], 3: [Chain((1, 2))]}

    with pytest.raises(CyclicRule) as excinfo:
        build_automaton(rules)
    assert excinfo.value.path == (2, 3, 2)


def test_shared_rule_is_not_a_cycle():
    rules = {0: [Chain((1, 1, 1))], 1: [Chain((2,)), Chain((2, 2))], 2: [Literal('z')]}
    automaton = build_automaton(rules)

    assert set(automaton.language()) == {'z' * n for n in range(3, 7)}


def test_building_twice_accepts_same_language():
    rules = parse_rules(EXAMPLE_RULES)
    first = build_automaton(rules)
    second = build_automaton(rules)

    assert sorted(first.language()) == sorted(second.language())
    for message in EXAMPLE_LANGUAGE + ['bababa', 'aaabbb', '', 'a']:
        assert matches(first, message) == matches(second, message)


def test_hand_built_automaton_language():
    automaton = Automaton()
    root = automaton.add_node()
    a = automaton.add_node()
    b = automaton.add_node()
    automaton.add_edge(root, a, 'a')
    automaton.add_edge(root, b, 'b')
    end = automaton.add_node()
    automaton.add_edge(a, end, 'x')
    automaton.add_edge(b, end, 'y')

    assert sorted(automaton.language()) == ['ax', 'by']
    assert list(automaton.successors(root, 'a')) == [a]
    assert list(automaton.successors(root, 'c')) == []
