# This file is part of GeneCounter.
#
# Licensed under MIT License.

from .isoform_map import IsoformGeneMap

__all__ = ['IsoformGeneMap']
