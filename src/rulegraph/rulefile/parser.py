import re

import lark
from lark import Lark
from lark.exceptions import UnexpectedInput
from lark.visitors import Transformer
from typing import List, Optional, Tuple

from rulegraph.errors import MalformedRuleBody, MalformedRuleId
from rulegraph.rulefile.grammar import GRAMMAR, LITERAL_QUOTE, RULE_SEPARATOR
from rulegraph.rules import Alternative, Chain, Literal, RuleId, RuleStore

RULE_BODY_PARSER = Lark(GRAMMAR, start='rule_body', parser='lalr', lexer='contextual', debug=False)

RULE_ID_PATTERN = re.compile(r'[0-9]+')


def parse_rule_id(text: str) -> Optional[RuleId]:
    if RULE_ID_PATTERN.fullmatch(text) is None:
        return None
    return int(text)


class RuleBodyTransformer(Transformer):
    """Turns a parsed rule body into a list of chains.

    Tokens that are not rule ids are left out of their chain and collected in
    ``rejected_tokens`` so the caller can decide whether that is an error.
    """

    def __init__(self):
        super().__init__()
        self.rejected_tokens: List[str] = []

    def rule_body(self, chains):
        return list(chains)

    def chain(self, tokens):
        rule_ids = []
        for token in tokens:
            token: lark.Token
            rule_id = parse_rule_id(token.value)
            if rule_id is None:
                self.rejected_tokens.append(token.value)
            else:
                rule_ids.append(rule_id)
        return Chain(rule_ids)


def parse_literal(body: str) -> Optional[Literal]:
    # Only the first character between the quotes counts.
    symbol = body.strip(LITERAL_QUOTE)[:1]
    if not symbol:
        return None
    return Literal(symbol)


def parse_rule_line(line: str, line_number: int = 1, strict: bool = False) -> Tuple[RuleId, List[Alternative]]:
    name, separator, body = line.partition(RULE_SEPARATOR)

    rule_id = parse_rule_id(name)
    if rule_id is None:
        raise MalformedRuleId(line_number, line)

    if not separator or not body.strip():
        raise MalformedRuleBody(line_number, line, 'expected rule options')

    if body.startswith(LITERAL_QUOTE):
        literal = parse_literal(body)
        if literal is None:
            raise MalformedRuleBody(line_number, line, 'empty literal')
        return rule_id, [literal]

    try:
        parse_tree = RULE_BODY_PARSER.parse(body)
    except UnexpectedInput as e:
        raise MalformedRuleBody(line_number, line, 'unexpected input at column %s' % e.column) from e

    transformer = RuleBodyTransformer()
    chains = transformer.transform(parse_tree)

    if strict and transformer.rejected_tokens:
        raise MalformedRuleBody(line_number, line,
                                'invalid rule reference(s): %s' % ', '.join(transformer.rejected_tokens))

    if any(len(chain) == 0 for chain in chains):
        raise MalformedRuleBody(line_number, line, 'empty alternative')

    return rule_id, chains


def parse_rules(text: str, strict: bool = False) -> RuleStore:
    rules: RuleStore = {}
    # Only newlines end a rule; other line breaks count as whitespace.
    lines = text.replace('\r\n', '\n').split('\n')
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        rule_id, alternatives = parse_rule_line(line, line_number=line_number, strict=strict)
        # Later definitions replace earlier ones.
        rules[rule_id] = alternatives
    return rules


def parse_rule_file(filepath, strict: bool = False, verbose: bool = False) -> RuleStore:
    if verbose:
        print('Parsing: %s' % filepath)
    with open(filepath, 'r') as f:
        data = f.read()
    return parse_rules(data, strict=strict)


__all__ = ['RULE_BODY_PARSER', 'RuleBodyTransformer', 'parse_rule_id', 'parse_literal',
           'parse_rule_line', 'parse_rules', 'parse_rule_file']
