# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Count table and run statistics output.

Count tables have no header: ``gene<TAB>total<TAB>unique`` per line.
"""

import csv

import pandas as pd

COUNT_COLUMNS = ['gene', 'total', 'unique']


def output_counts(rows, counts_filename):
    """Write ``(gene, total, unique)`` rows to ``counts_filename``.

    The file is truncated if it exists.
    """
    with open(counts_filename, 'w', encoding='utf-8', newline='\n') as outh:
        for gene, total, unique in rows:
            outh.write(f'{gene}\t{total:d}\t{unique:d}\n')


def read_counts(counts_filename):
    """Load a count table written by :func:`output_counts`."""
    return pd.read_csv(
        counts_filename,
        sep='\t',
        header=None,
        names=COUNT_COLUMNS,
        dtype={'gene': str, 'total': 'int64', 'unique': 'int64'},
        keep_default_na=False,
        quoting=csv.QUOTE_NONE,
    )


def merge_count_tables(counts_filenames):
    """Sum count tables from independent shards of one alignment file.

    Args:
        counts_filenames: Paths of count tables to combine.

    Returns:
        DataFrame with one row per gene (union over all tables), sorted by gene.
    """
    if not counts_filenames:
        raise ValueError('No count tables to merge')
    _tables = [read_counts(f) for f in counts_filenames]
    merged = pd.concat(_tables, ignore_index=True).groupby('gene', sort=False)[['total', 'unique']].sum()
    merged = merged.loc[sorted(merged.index)].reset_index()
    return merged


def output_run_info(run_info, stats_filename):
    """Write run statistics as a ``## RunInfo`` comment line."""
    _comment = ['## RunInfo']
    _comment += ['{}:{}'.format(*tup) for tup in run_info.items()]
    with open(stats_filename, 'w', encoding='utf-8') as outh:
        outh.write('\t'.join(_comment) + '\n')
