# -*- coding: utf-8 -*-

# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Group a collated alignment stream into per-read bundles.

The alignment file must be collated (or sorted by query name) so that every
alignment for a read appears sequentially. Boundaries are detected by a
change of ``query_name``; nothing is re-sorted.
"""

import logging as lg

import pysam

from ..errors import UnsortedAlignmentError


def fetch_bundle(alignments, check_collated=False, stats=None):
    """Iterate over alignments for reads with the same ID

    Unmapped alignments carry no isoform and are dropped. A read with no
    mapped alignments produces no bundle.

    Args:
        alignments: Iterable of alignment records (``pysam.AlignedSegment``
            or anything with ``query_name`` and ``is_unmapped``).
        check_collated: Raise :class:`UnsortedAlignmentError` if a read ID
            shows up again after its bundle was closed.
        stats: Optional dict updated with ``nalignments`` and ``nunmapped``.

    Yields:
        list: Non-empty list of mapped alignments sharing one query name.
    """
    if stats is None:
        stats = {}
    stats.setdefault('nalignments', 0)
    stats.setdefault('nunmapped', 0)

    _closed = set() if check_collated else None
    _qname = None
    bundle = []
    for aln in alignments:
        stats['nalignments'] += 1
        if aln.query_name != _qname:
            if bundle:
                yield bundle
            if _closed is not None:
                if aln.query_name in _closed:
                    raise UnsortedAlignmentError(aln.query_name)
                if _qname is not None:
                    _closed.add(_qname)
            _qname = aln.query_name
            bundle = []
        if aln.is_unmapped:
            stats['nunmapped'] += 1
            continue
        bundle.append(aln)
    if bundle:
        yield bundle


class MultiMappingReader:
    """Iterate over a SAM/BAM file one read (bundle of alignments) at a time.

    Each iteration opens the file anew; a pass cannot be resumed.
    """

    def __init__(self, samfile, threads=1, check_collated=False):
        self.samfile = samfile
        self.threads = threads
        self.check_collated = check_collated
        self.nalignments = 0
        self.nunmapped = 0
        self.ngroups = 0

    def __iter__(self):
        self.nalignments = self.nunmapped = self.ngroups = 0
        _stats = {}
        with pysam.AlignmentFile(self.samfile, check_sq=False, threads=self.threads) as sf:
            _so = sf.header.to_dict().get('HD', {}).get('SO')
            if _so == 'coordinate':
                lg.warning(f'{self.samfile} is coordinate-sorted; multi-mapped reads will be split. '
                           'Collate the file (samtools collate) before counting.')
            try:
                for bundle in fetch_bundle(sf.fetch(until_eof=True), self.check_collated, _stats):
                    self.ngroups += 1
                    yield bundle
            finally:
                self.nalignments = _stats.get('nalignments', 0)
                self.nunmapped = _stats.get('nunmapped', 0)
