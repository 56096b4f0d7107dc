from typing import List, NamedTuple, Tuple

from rulegraph.errors import MalformedInput
from rulegraph.rules import ROOT_RULE, RuleId


class RuleGraphOptions(NamedTuple):
    root: RuleId = ROOT_RULE
    strict: bool = False


BLOCK_SEPARATOR = '\n\n'


def split_blocks(text: str) -> Tuple[str, List[str]]:
    text = text.replace('\r\n', '\n')
    rules_block, separator, messages_block = text.partition(BLOCK_SEPARATOR)

    if not separator:
        raise MalformedInput('expected a messages block after the rules block')

    messages = [line for line in messages_block.splitlines() if line.strip()]
    return rules_block, messages


def read_puzzle_input(filepath) -> str:
    with open(filepath, 'r') as f:
        return f.read()


__all__ = ['RuleGraphOptions', 'BLOCK_SEPARATOR', 'split_blocks', 'read_puzzle_input']
