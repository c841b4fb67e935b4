# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Exceptions raised by GeneCounter.

None of these are recovered from locally; each one aborts the run.
"""


class GeneCounterError(Exception):
    """Base class for all GeneCounter failures."""


class MappingLoadError(GeneCounterError):
    """Isoform-gene mapping source is missing, unreadable or malformed."""


class UnknownIsoformError(GeneCounterError):
    """An alignment references an isoform absent from the mapping."""

    def __init__(self, isoform):
        super().__init__(f'Isoform "{isoform}" is not present in the isoform-gene mapping')
        self.isoform = isoform


class MissingCoordinateTagError(GeneCounterError):
    """An alignment lacks the genomic-coordinate tag."""

    def __init__(self, query_name, tag):
        super().__init__(f'Alignment for read "{query_name}" is missing the "{tag}" tag')
        self.query_name = query_name
        self.tag = tag


class UnsortedAlignmentError(GeneCounterError):
    """A read reappears after its alignments were already grouped."""

    def __init__(self, query_name):
        super().__init__(
            f'Read "{query_name}" appears in more than one block; alignment file must be '
            'collated so that all alignments for a read appear sequentially'
        )
        self.query_name = query_name
