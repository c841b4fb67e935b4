# This file is part of GeneCounter.
#
# Licensed under MIT License.

from .bundles import MultiMappingReader, fetch_bundle

__all__ = ['MultiMappingReader', 'fetch_bundle']
