# -*- coding: utf-8 -*-

# This file is part of GeneCounter.
#
# Licensed under MIT License.

""" GeneCounter count

"""
import os
import logging as lg

from . import SubcommandOptions, configure_logging
from .console import Stopwatch
from ..utils.helpers import format_minutes as fmtmins
from ..annotation import IsoformGeneMap
from ..core.counter import GeneReadCounter
from ..core.reporter import output_run_info


class CountOptions(SubcommandOptions):

    OPTS = """
    - Input Options:
        - mapfile:
            positional: True
            help: Path to isoform-gene mapping. Tab-delimited, isoform ID in
                  the first column and gene ID in the second (e.g. UCSC
                  knownToLocus).
        - samfile:
            positional: True
            help: Path to transcriptome alignment file (SAM or BAM) with
                  genomic coordinates in the --coord_tag tag. File must be
                  collated so that all alignments for a read appear
                  sequentially in the file.
        - coord_tag:
            default: XG
            help: Alignment tag holding the genomic coordinates of each
                  transcriptome alignment.
        - check_collated:
            action: store_true
            help: Fail if a read's alignments are not contiguous in the file.
                  Keeps the name of every read in memory.
        - ncpu:
            default: 1
            type: int
            help: Number of threads used for BAM decompression.
    - Output Options:
        - outfile:
            positional: True
            help: Output file. One line per gene with gene ID, total read
                  count and unique read count. Overwritten if it exists.
        - stats_file:
            help: Also write alignment statistics to this file.
    """


def run(args):
    """Load the isoform-gene map, count reads and write per-gene counts.

    Args:
        args: Parsed argparse namespace.
    """
    opts = CountOptions(args)
    console = configure_logging(opts)
    lg.info('\n{}\n'.format(opts))
    stopwatch = Stopwatch()

    console.banner(opts.version, 'count')
    console.item('Mapping', os.path.basename(opts.mapfile))
    console.item('Alignments', os.path.basename(opts.samfile))
    console.item('Coord tag', opts.coord_tag)

    isoform_map = IsoformGeneMap.load(opts.mapfile)
    stopwatch.lap('Load mapping')
    console.item('Genes', '{:,} ({:,} isoforms)'.format(len(isoform_map.sorted_genes()), len(isoform_map)))
    console.item('Output', opts.outfile)

    counter = GeneReadCounter(isoform_map, coord_tag=opts.coord_tag)
    counter.count(opts.samfile, threads=opts.ncpu, check_collated=opts.check_collated)
    stopwatch.lap('Count reads')
    lg.info('Counted reads in {}'.format(fmtmins(stopwatch.stages[-1][1])))
    counter.print_summary(lg.INFO)
    console.summary(counter.run_info)

    counter.write_counts(opts.outfile)
    if opts.stats_file:
        output_run_info(counter.run_info, opts.stats_file)
    stopwatch.lap('Write output')

    console.done(stopwatch)
    lg.info('genecounter count complete (%s)' % fmtmins(stopwatch.total))
