import collections.abc
from typing import Iterable, List, Optional, Union

import argparse

from rulegraph.automaton import Automaton, build_automaton
from rulegraph.matcher import matches
from rulegraph.message_verdict import MessageVerdict
from rulegraph.rulefile.parser import parse_rules
from rulegraph.util import RuleGraphOptions, read_puzzle_input, split_blocks
import pandas as pd


def compile_rules(rules_text: str, options: RuleGraphOptions = None, verbose: bool = False) -> Automaton:
    if options is None:
        options = RuleGraphOptions()

    rules = parse_rules(rules_text, strict=options.strict)
    if verbose:
        print('Parsed %d rules' % len(rules))

    automaton = build_automaton(rules, root=options.root)
    if verbose:
        print('Built automaton for rule %d: %d nodes, %d edges' % (
            options.root, automaton.node_count, automaton.edge_count))

    return automaton


def validate(messages: Union[str, Iterable[str]], automaton: Automaton, verbose: bool = False,
             want_dataframe: bool = False) -> Union[List[MessageVerdict], pd.DataFrame]:
    if type(messages) == str:
        messages = [messages, ]
    elif not isinstance(messages, collections.abc.Iterable):
        raise ValueError('validate: messages should be a string or a collection of strings')

    verdicts = []
    for message in messages:
        verdict = MessageVerdict(message=message, matches=matches(automaton, message))
        if verbose:
            print('\t', verdict)
        verdicts.append(verdict)

    if want_dataframe:
        return pd.DataFrame([v.__dict__ for v in verdicts], columns=['message', 'matches'])

    return verdicts


def solve(text: str, options: RuleGraphOptions = None, verbose: bool = False) -> int:
    rules_text, messages = split_blocks(text)
    automaton = compile_rules(rules_text, options=options, verbose=verbose)
    return sum(1 for verdict in validate(messages, automaton, verbose=verbose) if verdict.matches)


def format_answer(count: int, root: int = 0) -> str:
    return 'The amount of messages that completely match rule %d is: %d' % (root, count)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='monster messages')
    parser.add_argument('--input-file', type=str, required=True,
                        help='a file with the rules block, a blank line and the messages block')
    parser.add_argument('--output', metavar='output', type=str, default=None,
                        help='an output path for the per-message verdicts')
    parser.add_argument('--file-delimiter', default='comma', const='comma', nargs='?',
                        choices=['comma', 'pipe', 'tab'],
                        help='delimiter character for the output file (default: %(default)s)')
    parser.add_argument('--root', type=int, default=0,
                        help='the rule messages must match (default: %(default)s)')
    parser.add_argument('--strict', action='store_true',
                        help='reject rule references that are not integers instead of skipping them')
    parser.add_argument('--verbose', action='store_true')

    args = parser.parse_args(argv)

    options = RuleGraphOptions(root=args.root, strict=args.strict)
    delimiter = {'comma': ',', 'pipe': '|', 'tab': '\t'}[args.file_delimiter]

    if args.verbose:
        print('Loading input (%s)...' % args.input_file)

    rules_text, messages = split_blocks(read_puzzle_input(args.input_file))
    automaton = compile_rules(rules_text, options=options, verbose=args.verbose)
    verdicts_df = validate(messages, automaton, verbose=args.verbose, want_dataframe=True)

    if args.output:
        verdicts_df.to_csv(args.output, sep=delimiter, index=False)
        if args.verbose:
            print('Wrote %d verdicts to %s' % (len(verdicts_df), args.output))

    count = int(verdicts_df['matches'].sum())
    print(format_answer(count, root=args.root))
    return count


if __name__ == '__main__':
    main()

__all__ = ['compile_rules', 'validate', 'solve', 'format_answer', 'main']
