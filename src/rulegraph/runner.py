import os
from typing import Callable, Dict, List, Optional

import argparse

from rulegraph.monster_messages import format_answer, solve
from rulegraph.rules import ROOT_RULE
from rulegraph.util import read_puzzle_input

DEFAULT_INPUT_DIR = 'input'


def day_19(input_dir: str = DEFAULT_INPUT_DIR) -> int:
    count = solve(read_puzzle_input(os.path.join(input_dir, 'day_19.txt')))
    print(format_answer(count, root=ROOT_RULE))
    return count


COMPUTATIONS: Dict[str, Callable[[str], int]] = {
    'day_19': day_19,
}


def run(name: str, input_dir: str = DEFAULT_INPUT_DIR):
    try:
        computation = COMPUTATIONS[name]
    except KeyError:
        raise KeyError('unknown computation %r, expected one of: %s' % (name, ', '.join(sorted(COMPUTATIONS))))
    return computation(input_dir)


def main(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(description='run puzzle computations by name')
    parser.add_argument('names', metavar='name', nargs='+', choices=sorted(COMPUTATIONS),
                        help='computations to run, in order')
    parser.add_argument('--input-dir', type=str, default=DEFAULT_INPUT_DIR,
                        help='directory holding the puzzle inputs (default: %(default)s)')
    args = parser.parse_args(argv)

    for name in args.names:
        run(name, input_dir=args.input_dir)


if __name__ == '__main__':
    main()

__all__ = ['DEFAULT_INPUT_DIR', 'COMPUTATIONS', 'day_19', 'run', 'main']
