from typing import Optional, Sequence


class RuleGrammarError(ValueError):
    pass


class MalformedInput(RuleGrammarError):
    pass


class MalformedRuleId(RuleGrammarError):
    def __init__(self, line_number: int, line: str):
        super().__init__('line %d: expected an integer rule id: %r' % (line_number, line))
        self.line_number = line_number
        self.line = line


class MalformedRuleBody(RuleGrammarError):
    def __init__(self, line_number: int, line: str, reason: str = 'malformed rule body'):
        super().__init__('line %d: %s: %r' % (line_number, reason, line))
        self.line_number = line_number
        self.line = line
        self.reason = reason


class UnknownRule(RuleGrammarError):
    def __init__(self, rule_id: int, referenced_by: Optional[int] = None):
        if referenced_by is None:
            message = 'rule %d not found' % rule_id
        else:
            message = 'rule %d not found (referenced by rule %d)' % (rule_id, referenced_by)
        super().__init__(message)
        self.rule_id = rule_id
        self.referenced_by = referenced_by


class InvalidGrammar(RuleGrammarError):
    def __init__(self, rule_id: int, reason: str = 'a literal must be the only alternative of its rule'):
        super().__init__('rule %d: %s' % (rule_id, reason))
        self.rule_id = rule_id
        self.reason = reason


class CyclicRule(InvalidGrammar):
    def __init__(self, path: Sequence[int]):
        self.path = tuple(path)
        super().__init__(self.path[-1], 'rule references itself: %s' % ' -> '.join(str(r) for r in self.path))


__all__ = ['RuleGrammarError', 'MalformedInput', 'MalformedRuleId', 'MalformedRuleBody',
           'UnknownRule', 'InvalidGrammar', 'CyclicRule']
