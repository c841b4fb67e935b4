# This file is part of GeneCounter.
#
# Licensed under MIT License.

"""Human-readable progress on stdout.

Independent of Python logging, which writes diagnostics to stderr or the
log file.
"""

import sys
from time import perf_counter


class Stopwatch:
    """Wall-clock time for each stage of a run (load, count, write)."""

    def __init__(self):
        self._begin = perf_counter()
        self.stages = []          # [(name, seconds)]

    def lap(self, name):
        """Close the stage ``name``, which ran since the previous lap."""
        now = perf_counter()
        _prev = self._begin + sum(s for _, s in self.stages)
        self.stages.append((name, now - _prev))

    @property
    def total(self):
        return perf_counter() - self._begin


class Console:
    """Leveled stdout writer for the GeneCounter CLI."""

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2
    DEBUG = 3

    def __init__(self, level=NORMAL, stream=None):
        self.level = level
        self.stream = stream or sys.stdout

    def banner(self, version, subcommand):
        self._write('', 'GeneCounter v{} -- {}'.format(version, subcommand), '')

    def item(self, label, value):
        """Print an indented ``label: value`` line."""
        self._write('    {:<14}{}'.format(label + ':', value))

    def verbose(self, message):
        if self.level >= self.VERBOSE:
            self._write('    {}'.format(message))

    def summary(self, run_info):
        """Print the read classification of a counting run."""
        _total = run_info['total_reads']
        _pct = (lambda n: '{:.1f}%'.format(100 * n / _total)) if _total else (lambda n: '-')
        self._write('', '  Reads')
        self.item('Total', '{:,}'.format(_total))
        self.item('Unique', '{:,} ({})'.format(run_info['unique_reads'], _pct(run_info['unique_reads'])))
        self.item('Ambiguous', '{:,} ({})'.format(run_info['ambiguous_reads'], _pct(run_info['ambiguous_reads'])))
        self.item('Genes hit', '{:,}'.format(run_info['genes_hit']))
        self.verbose('{:,} alignments read, {:,} unmapped skipped'.format(
            run_info['total_alignments'], run_info['unmapped_alignments']))
        self._write('')

    def done(self, stopwatch):
        """Print per-stage timings and the total elapsed wall-clock time."""
        for name, seconds in stopwatch.stages:
            self.verbose('{:<18}{:>6.1f}s'.format(name, seconds))
        self._write('  Done.  Elapsed secs: {:.1f}'.format(stopwatch.total))

    def _write(self, *lines):
        if self.level < self.NORMAL:
            return
        for line in lines:
            print(line, file=self.stream)
