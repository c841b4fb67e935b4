# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Tests for the isoform-gene lookup table."""

import io
import os
import pathlib

import pytest

from genecounter.annotation import IsoformGeneMap
from genecounter.errors import MappingLoadError, UnknownIsoformError


def _write(workdir, text, name='map.txt'):
    path = os.path.join(workdir, name)
    with open(path, 'w') as fh:
        fh.write(text)
    return path


class TestLoad:
    def test_load_from_path(self, mapfile):
        m = IsoformGeneMap.load(mapfile)
        assert len(m) == 3
        assert m.gene_of('iso1') == 'geneA'
        assert m.gene_of('iso2') == 'geneA'
        assert m.gene_of('iso3') == 'geneB'

    def test_load_from_pathlib_path(self, mapfile):
        m = IsoformGeneMap.load(pathlib.Path(mapfile))
        assert m.sorted_genes() == ['geneA', 'geneB']
        assert m.gene_of('iso3') == 'geneB'

    def test_load_from_handle(self):
        m = IsoformGeneMap.load(io.StringIO('uc001aaa.3\tDDX11L1\nuc010nxq.1\tDDX11L1\n'))
        assert m.sorted_genes() == ['DDX11L1']
        assert 'uc010nxq.1' in m

    def test_extra_columns_comments_and_blank_lines(self, workdir):
        path = _write(workdir, '# isoform\tgene\n\niso1\tgeneA\textra\n\r\niso2\tgeneB\r\n')
        m = IsoformGeneMap.load(path)
        assert m.gene_of('iso1') == 'geneA'
        assert m.gene_of('iso2') == 'geneB'
        assert len(m) == 2

    def test_exact_duplicate_row_is_tolerated(self, workdir):
        path = _write(workdir, 'iso1\tgeneA\niso1\tgeneA\n')
        assert len(IsoformGeneMap.load(path)) == 1

    def test_load_twice_is_identical(self, mapfile):
        m1 = IsoformGeneMap.load(mapfile)
        m2 = IsoformGeneMap.load(mapfile)
        assert m1.sorted_genes() == m2.sorted_genes()
        for iso in ('iso1', 'iso2', 'iso3'):
            assert m1.gene_of(iso) == m2.gene_of(iso)


class TestLoadErrors:
    def test_missing_file(self, workdir):
        with pytest.raises(MappingLoadError, match='Cannot read'):
            IsoformGeneMap.load(os.path.join(workdir, 'nope.txt'))

    def test_missing_pathlib_path(self, workdir):
        with pytest.raises(MappingLoadError, match='Cannot read'):
            IsoformGeneMap.load(pathlib.Path(workdir) / 'nope.txt')

    def test_source_is_not_lines(self):
        with pytest.raises(MappingLoadError):
            IsoformGeneMap.load(42)

    def test_single_column_row(self, workdir):
        path = _write(workdir, 'iso1\tgeneA\niso2\n')
        with pytest.raises(MappingLoadError, match='line 2'):
            IsoformGeneMap.load(path)

    def test_empty_gene_field(self, workdir):
        path = _write(workdir, 'iso1\t\n')
        with pytest.raises(MappingLoadError):
            IsoformGeneMap.load(path)

    def test_conflicting_gene(self, workdir):
        path = _write(workdir, 'iso1\tgeneA\niso1\tgeneB\n')
        with pytest.raises(MappingLoadError, match='iso1'):
            IsoformGeneMap.load(path)

    def test_no_mappings(self, workdir):
        path = _write(workdir, '# only a comment\n\n')
        with pytest.raises(MappingLoadError, match='No isoform-gene mappings'):
            IsoformGeneMap.load(path)


class TestLookup:
    def test_unknown_isoform(self, isoform_map):
        with pytest.raises(UnknownIsoformError) as excinfo:
            isoform_map.gene_of('iso99')
        assert excinfo.value.isoform == 'iso99'
        assert 'iso99' in str(excinfo.value)

    def test_sorted_genes_lexicographic_and_distinct(self):
        m = IsoformGeneMap({'t1': 'b', 't2': 'B', 't3': 'a', 't4': 'b', 't5': 'A10', 't6': 'A2'})
        assert m.sorted_genes() == ['A10', 'A2', 'B', 'a', 'b']

    def test_sorted_genes_is_a_copy(self, isoform_map):
        genes = isoform_map.sorted_genes()
        genes.append('geneZ')
        assert isoform_map.sorted_genes() == ['geneA', 'geneB']
