#! /usr/bin/env python
# -*- coding: utf-8 -*-

# This file is part of GeneCounter.
#
# Licensed under MIT License.

""" Main functionality of GeneCounter

"""
import sys
import argparse

from genecounter import __version__
from .cli import count as cli_count
from .cli import merge as cli_merge
from .errors import GeneCounterError


USAGE = ''' %(prog)s <command> [<args>]

The most commonly used commands are:
   count          Count total and unique reads per gene from a transcriptome alignment
   merge          Sum count tables from separate shards of one alignment file

'''


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    if len(argv) == 0:
        empty_parser = argparse.ArgumentParser(
            description='Gene-level read counts from transcriptome alignments',
            usage=USAGE,
        )
        empty_parser.print_help(sys.stderr)
        sys.exit(1)

    parser = argparse.ArgumentParser(
        description='Gene-level read counts from transcriptome alignments',
    )
    parser.add_argument('--version',
        action='version',
        version=__version__,
        default=__version__,
    )

    subparser = parser.add_subparsers(help='Sub-command help', dest='subcommand')

    ''' Parser for count '''
    count_parser = subparser.add_parser('count',
        description='''Count total and unique reads per gene from a transcriptome alignment''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_count.CountOptions.add_arguments(count_parser)
    count_parser.set_defaults(func=cli_count.run)

    ''' Parser for merge '''
    merge_parser = subparser.add_parser('merge',
        description='''Sum count tables from separate shards of one alignment file''',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    cli_merge.MergeOptions.add_arguments(merge_parser)
    merge_parser.set_defaults(func=cli_merge.run)

    args = parser.parse_args(argv)
    if getattr(args, 'func', None) is None:
        parser.print_help(sys.stderr)
        sys.exit(1)
    try:
        args.func(args)
    except GeneCounterError as exc:
        print(f'Error: {exc}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
