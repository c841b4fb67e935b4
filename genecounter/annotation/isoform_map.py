# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Isoform to gene lookup table.

The mapping source is a tab-delimited text file with the isoform identifier
in the first column and the owning gene identifier in the second (UCSC
``knownToLocus`` layout). Additional columns are ignored.
"""

import logging as lg
import os
from collections import OrderedDict

from ..errors import MappingLoadError, UnknownIsoformError


class IsoformGeneMap:
    """Immutable isoform -> gene lookup.

    Build with :meth:`load` from a file, or directly from a dict. The map is
    read-only after construction and may be shared freely.
    """

    def __init__(self, isoform_genes):
        self._genes = dict(isoform_genes)
        self._sorted_genes = sorted(set(self._genes.values()))

    @classmethod
    def load(cls, source):
        """Load mappings from a path or an open text handle.

        Args:
            source: Path to the mapping file, or an iterable of lines.

        Returns:
            IsoformGeneMap

        Raises:
            MappingLoadError: source is missing, unreadable or malformed.
        """
        _opened = isinstance(source, (str, os.PathLike))
        try:
            fh = open(source, encoding='utf-8') if _opened else source  # noqa: SIM115
        except OSError as exc:
            raise MappingLoadError(f'Cannot read isoform-gene mapping "{source}": {exc}') from exc

        _name = os.fspath(source) if _opened else getattr(source, 'name', '<stream>')
        mapping = OrderedDict()
        try:
            for rownum, line in enumerate(fh, start=1):
                line = line.rstrip('\r\n')
                if not line.strip() or line.startswith('#'):
                    continue
                fields = line.split('\t')
                if len(fields) < 2 or not fields[0] or not fields[1]:
                    raise MappingLoadError(
                        f'{_name}, line {rownum}: expected "isoform<TAB>gene", got {line!r}'
                    )
                isoform, gene = fields[0], fields[1]
                prev = mapping.setdefault(isoform, gene)
                if prev != gene:
                    raise MappingLoadError(
                        f'{_name}, line {rownum}: isoform "{isoform}" mapped to both "{prev}" and "{gene}"'
                    )
        except (OSError, UnicodeDecodeError, TypeError) as exc:
            raise MappingLoadError(f'Cannot read isoform-gene mapping "{_name}": {exc}') from exc
        finally:
            if _opened:
                fh.close()

        if not mapping:
            raise MappingLoadError(f'No isoform-gene mappings found in "{_name}"')

        obj = cls(mapping)
        lg.info(f'Loaded {len(obj)} isoforms for {len(obj._sorted_genes)} genes from {_name}')
        return obj

    def gene_of(self, isoform):
        try:
            return self._genes[isoform]
        except KeyError:
            raise UnknownIsoformError(isoform) from None

    def sorted_genes(self):
        """All distinct genes in lexicographic order."""
        return list(self._sorted_genes)

    def __len__(self):
        return len(self._genes)

    def __contains__(self, isoform):
        return isoform in self._genes
