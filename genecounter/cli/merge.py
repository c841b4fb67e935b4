# This file is part of GeneCounter.
#
# Licensed under MIT License.

""" GeneCounter merge

Sum count tables produced by running ``genecounter count`` on separate
shards of one alignment file (each read in exactly one shard).
"""

import logging as lg

from . import SubcommandOptions, configure_logging
from .console import Stopwatch
from ..core.reporter import merge_count_tables, output_counts


class MergeOptions(SubcommandOptions):

    OPTS = """
    - Output Options:
        - outfile:
            positional: True
            help: Merged count table. Overwritten if it exists.
    - Input Options:
        - countfiles:
            positional: True
            nargs: "+"
            help: Count tables to sum.
    """


def run(args):
    opts = MergeOptions(args)
    console = configure_logging(opts)
    stopwatch = Stopwatch()

    console.banner(opts.version, 'merge')
    console.item('Tables', len(opts.countfiles))
    merged = merge_count_tables(opts.countfiles)
    output_counts(
        ((gene, int(total), int(unique)) for gene, total, unique in merged.itertuples(index=False, name=None)),
        opts.outfile,
    )
    stopwatch.lap('Merge')
    lg.info(f'Merged {len(opts.countfiles)} tables into {len(merged)} genes')
    console.item('Genes', '{:,} -> {}'.format(len(merged), opts.outfile))
    console.done(stopwatch)
