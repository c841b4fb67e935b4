# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Gene-level total and unique read counting.

A read counts toward every gene any of its alignments' isoforms belong to,
once per gene. It is "unique" when every alignment carries the same
genomic-coordinate tag, i.e. all isoform alignments project back to one
genomic locus.
"""

import logging as lg
from collections import Counter, OrderedDict

from ..alignment.bundles import MultiMappingReader
from ..errors import MissingCoordinateTagError
from .reporter import output_counts

DEFAULT_COORD_TAG = 'XG'


def _print_progress(nreads, infolev=1000000):
    msg = f'...processed {nreads / 1e6:.1f}M reads'
    if nreads % infolev == 0:
        lg.info(msg)
    else:
        lg.debug(msg)


def classify_bundle(alns, isoform_map, coord_tag=DEFAULT_COORD_TAG):
    """Resolve the genes hit by one read and whether the read is unique.

    Args:
        alns: Non-empty list of alignments for a single read.
        isoform_map: IsoformGeneMap used to resolve ``reference_name``.
        coord_tag: Tag holding the genomic coordinates of the alignment.

    Returns:
        (set of gene IDs, bool is_unique)

    Raises:
        UnknownIsoformError: an isoform is not in ``isoform_map``.
        MissingCoordinateTagError: an alignment lacks ``coord_tag``.
    """
    genes = set()
    is_unique = True
    prev_coords = None
    for aln in alns:
        genes.add(isoform_map.gene_of(aln.reference_name))
        if not aln.has_tag(coord_tag):
            raise MissingCoordinateTagError(aln.query_name, coord_tag)
        coords = aln.get_tag(coord_tag)
        # Pairwise check; once False it stays False so this is "all equal"
        if prev_coords is not None and coords != prev_coords:
            is_unique = False
        prev_coords = coords
    return genes, is_unique


class GeneTally:
    """Total and unique read counts per gene. Missing genes count as 0."""

    def __init__(self):
        self.total_counts = Counter()
        self.unique_counts = Counter()

    def add(self, genes, is_unique):
        for gene in genes:
            self.total_counts[gene] += 1
            if is_unique:
                self.unique_counts[gene] += 1

    def total(self, gene):
        return self.total_counts[gene]

    def unique(self, gene):
        return self.unique_counts[gene]

    def merge(self, other):
        """Add the counts of another tally (e.g. from a separate shard)."""
        self.total_counts.update(other.total_counts)
        self.unique_counts.update(other.unique_counts)
        return self

    def rows(self, genes):
        for gene in genes:
            yield gene, self.total(gene), self.unique(gene)

    def __len__(self):
        return len(self.total_counts)


class GeneReadCounter:
    """Fold per-read alignment bundles into gene tallies and write them out."""

    def __init__(self, isoform_map, coord_tag=DEFAULT_COORD_TAG):
        self.isoform_map = isoform_map
        self.coord_tag = coord_tag
        self.reset()

    def reset(self):
        """Start a new run with empty tallies and statistics."""
        self.tally = GeneTally()
        self.run_info = OrderedDict()
        self.run_info['total_alignments'] = 0
        self.run_info['unmapped_alignments'] = 0
        self.run_info['total_reads'] = 0
        self.run_info['unique_reads'] = 0
        self.run_info['ambiguous_reads'] = 0
        self.run_info['genes_hit'] = 0

    def count_bundles(self, bundles):
        """Add every bundle from an iterable of per-read alignment lists to the current tallies."""
        _isoform_map, _tag = self.isoform_map, self.coord_tag
        for alns in bundles:
            genes, is_unique = classify_bundle(alns, _isoform_map, _tag)
            self.tally.add(genes, is_unique)

            self.run_info['total_reads'] += 1
            if is_unique:
                self.run_info['unique_reads'] += 1
            else:
                self.run_info['ambiguous_reads'] += 1
            if self.run_info['total_reads'] % 100000 == 0:
                _print_progress(self.run_info['total_reads'])
        self.run_info['genes_hit'] = len(self.tally)
        return self.tally

    def count(self, samfile, threads=1, check_collated=False):
        """Count reads in a collated SAM/BAM file, replacing any previous tallies."""
        self.reset()
        reader = MultiMappingReader(samfile, threads=threads, check_collated=check_collated)
        self.count_bundles(reader)
        self.run_info['total_alignments'] = reader.nalignments
        self.run_info['unmapped_alignments'] = reader.nunmapped
        lg.info(f'Counted {reader.ngroups} reads from {reader.nalignments} alignments')
        return self.tally

    def write_counts(self, filename):
        """Write one ``gene, total, unique`` row per known gene, sorted by gene."""
        output_counts(self.tally.rows(self.isoform_map.sorted_genes()), filename)

    def print_summary(self, loglev=lg.WARNING):
        _d = Counter(self.run_info)
        lg.log(loglev, 'Alignment Summary:')
        lg.log(loglev, '    {} total alignments.'.format(_d['total_alignments']))
        lg.log(loglev, '    {} unmapped alignments skipped.'.format(_d['unmapped_alignments']))
        lg.log(loglev, '    {} total reads.'.format(_d['total_reads']))
        lg.log(loglev, '        {} unique.'.format(_d['unique_reads']))
        lg.log(loglev, '        {} ambiguous.'.format(_d['ambiguous_reads']))
        lg.log(loglev, '    {} genes with reads.'.format(_d['genes_hit']))
