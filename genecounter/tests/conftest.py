# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Shared fixtures: in-memory alignments and small synthetic BAM files."""

import os
import tempfile

import pysam
import pytest

from genecounter.annotation import IsoformGeneMap


class FakeAlignment:
    """Stand-in for pysam.AlignedSegment exposing the attributes used when counting."""

    def __init__(self, query_name, reference_name=None, coords=None, is_unmapped=False):
        self.query_name = query_name
        self.reference_name = reference_name
        self.is_unmapped = is_unmapped
        self.tags = {} if coords is None else {'XG': coords}

    def has_tag(self, tag):
        return tag in self.tags

    def get_tag(self, tag):
        return self.tags[tag]

    def __repr__(self):
        return f'FakeAlignment({self.query_name!r}, {self.reference_name!r}, {self.tags!r})'


def write_bam(path, isoforms, records, sort_order='queryname', coord_tag='XG'):
    """Write a BAM with one 10M alignment per record.

    Args:
        path: Output BAM path.
        isoforms: Reference (isoform) names for the header.
        records: ``(query_name, isoform, coords)`` tuples in file order.
            ``isoform=None`` writes an unmapped record; ``coords=None`` omits
            the coordinate tag.
    """
    header = {
        'HD': {'VN': '1.6', 'SO': sort_order},
        'SQ': [{'SN': iso, 'LN': 5000} for iso in isoforms],
    }
    _seen = set()
    with pysam.AlignmentFile(path, 'wb', header=header) as outf:
        for qname, isoform, coords in records:
            a = pysam.AlignedSegment(outf.header)
            a.query_name = qname
            a.query_sequence = 'ACGTACGTAC'
            a.query_qualities = pysam.qualitystring_to_array('IIIIIIIIII')
            if isoform is None:
                a.flag = 4
            else:
                a.flag = 256 if qname in _seen else 0
                a.reference_name = isoform
                a.reference_start = 100
                a.mapping_quality = 255
                a.cigarstring = '10M'
                _seen.add(qname)
            if coords is not None:
                a.set_tag(coord_tag, coords, value_type='Z')
            outf.write(a)
    return path


@pytest.fixture
def workdir():
    return tempfile.mkdtemp()


@pytest.fixture
def isoform_map():
    """iso1 and iso2 belong to geneA, iso3 to geneB."""
    return IsoformGeneMap({'iso1': 'geneA', 'iso2': 'geneA', 'iso3': 'geneB'})


@pytest.fixture
def mapfile(workdir):
    path = os.path.join(workdir, 'knownToLocus.txt')
    with open(path, 'w') as fh:
        fh.write('iso1\tgeneA\n')
        fh.write('iso2\tgeneA\n')
        fh.write('iso3\tgeneB\n')
    return path
