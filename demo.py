"""
small command line walkthrough of lazyseq pipelines.

  python demo.py
  python demo.py --scenario group --verbose
"""
import argparse
import logging
from collections import namedtuple
from lazyseq import sequence_of, as_sequence

# configure minimal logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
logger = logging.getLogger(__name__)

Point = namedtuple('Point', ['x', 'y'])

SOURCE = (2, 3, 4, 6, 7, 8, 10)
POINTS = [Point(10, 30), Point(20, 10), Point(30, 5), Point(10, 15), Point(20, 56)]


def run_evens():
    seq = sequence_of(*SOURCE).select(lambda x: x * 2).where(lambda x: x % 2 == 0)
    for item in seq:
        print(item)


def run_first():
    print(sequence_of(*SOURCE).select(lambda x: x // 2).first(lambda x: x > 3))


def run_group():
    for group in as_sequence(POINTS).group_by(lambda p: p.x):
        print(f"{group.key}: {group.select(lambda p: p.y).to.list()}")


def run_for_each():
    sequence_of(*SOURCE).where(lambda x: x > 5).for_each(lambda item, index: print(f"[{index}] {item}"))


SCENARIOS = {
    'evens': run_evens,
    'first': run_first,
    'group': run_group,
    'for_each': run_for_each,
}


def create_cli_interface():
    parser = argparse.ArgumentParser(description='lazyseq pipeline demo')
    parser.add_argument('--scenario', choices=sorted(SCENARIOS) + ['all'], default='all',
                        help='Which pipeline to run (default: all)')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def main():
    args = create_cli_interface().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    names = sorted(SCENARIOS) if args.scenario == 'all' else [args.scenario]
    for name in names:
        logger.info("running scenario '%s'", name)
        SCENARIOS[name]()


if __name__ == "__main__":
    main()
