from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

RuleId = int

ROOT_RULE: RuleId = 0


@dataclass(frozen=True)
class Literal:
    symbol: str

    def __str__(self):
        return '"%s"' % self.symbol


@dataclass(frozen=True)
class Chain:
    rules: Tuple[RuleId, ...]

    def __post_init__(self):
        # Accept any sequence but store an immutable one.
        object.__setattr__(self, 'rules', tuple(self.rules))

    def __len__(self):
        return len(self.rules)

    def __iter__(self):
        return iter(self.rules)

    def __str__(self):
        return ' '.join(str(r) for r in self.rules)


Alternative = Union[Literal, Chain]

RuleStore = Dict[RuleId, List[Alternative]]


def format_rule(rule_id: RuleId, alternatives: List[Alternative]) -> str:
    return '%d: %s' % (rule_id, ' | '.join(str(alt) for alt in alternatives))


def format_rules(rules: RuleStore) -> str:
    return '\n'.join(format_rule(rule_id, rules[rule_id]) for rule_id in sorted(rules))


__all__ = ['RuleId', 'ROOT_RULE', 'Literal', 'Chain', 'Alternative', 'RuleStore',
           'format_rule', 'format_rules']
