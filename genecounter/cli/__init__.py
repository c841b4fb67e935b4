# This file is part of GeneCounter.
#
# Licensed under MIT License.

import argparse
import logging
import sys
import textwrap
from collections import OrderedDict

import yaml

from .console import Console

# Type names allowed in YAML option blocks
_SAFE_TYPES = {
    'int': int,
    "argparse.FileType('w')": argparse.FileType('w'),
}

# Shared by every sub-command
REPORTING_OPTS = """
- Reporting Options:
    - quiet:
        action: store_true
        help: Silence (most) output.
    - verbose:
        action: store_true
        help: Show detailed progress.
    - debug:
        action: store_true
        help: Print debug messages.
    - logfile:
        type: argparse.FileType('w')
        help: Log output to this file.
"""

# (console level, logging level, log format) by verbosity flag, most verbose first
_VERBOSITY = [
    ('debug', Console.DEBUG, logging.DEBUG,
     '%(asctime)s %(levelname)-8s %(message)-60s (%(funcName)s in %(filename)s:%(lineno)d)'),
    ('verbose', Console.VERBOSE, logging.INFO, '%(asctime)s %(levelname)-8s %(message)s'),
    ('quiet', Console.QUIET, logging.WARNING, '%(asctime)s %(levelname)-8s %(message)s'),
]


class SubcommandOptions:
    """Parsed options for one sub-command.

    ``OPTS`` is a YAML list of option groups. Each option maps to the keyword
    arguments of ``ArgumentParser.add_argument``, plus ``positional: True``
    for positional arguments. :data:`REPORTING_OPTS` is appended to every
    sub-command.
    """

    OPTS = ''

    def __init__(self, args):
        for k, v in vars(args).items():
            setattr(self, k, v)
        if getattr(self, 'logfile', None) is None:
            self.logfile = sys.stderr

    @classmethod
    def option_groups(cls):
        groups = OrderedDict()
        for grp in yaml.load(textwrap.dedent(cls.OPTS) + REPORTING_OPTS, Loader=yaml.SafeLoader):
            (grp_name, opts), = grp.items()
            groups[grp_name] = [next(iter(opt.items())) for opt in opts]
        return groups

    @classmethod
    def add_arguments(cls, parser):
        for group_name, opts in cls.option_groups().items():
            argparse_grp = parser.add_argument_group(group_name)
            for opt_name, opt_d in opts:
                _d = dict(opt_d)
                _flag = opt_name if _d.pop('positional', False) else f'--{opt_name}'
                if 'type' in _d:
                    if _d['type'] not in _SAFE_TYPES:
                        raise ValueError(f"Unsupported type '{_d['type']}' for option '{opt_name}'")
                    _d['type'] = _SAFE_TYPES[_d['type']]
                argparse_grp.add_argument(_flag, **_d)

    def __str__(self):
        ret = [f'genecounter {self.subcommand} {getattr(self, "version", "")}']
        for group_name, opts in self.option_groups().items():
            if group_name == 'Reporting Options':
                continue
            for opt_name, _ in opts:
                v = getattr(self, opt_name, None)
                if isinstance(v, list):
                    v = ', '.join(v)
                ret.append('    {:18}{}'.format(opt_name + ':', v))
        return '\n'.join(ret)


def configure_logging(opts):
    """Set up stderr logging and return a Console for stdout progress.

    The most verbose of ``--debug``, ``--verbose`` and ``--quiet`` wins.
    ``--quiet`` only silences the console; logging stays at WARNING.
    """
    console_level, loglev, logfmt = Console.NORMAL, logging.WARNING, _VERBOSITY[-1][3]
    for flag, _console_level, _loglev, _logfmt in _VERBOSITY:
        if getattr(opts, flag, False):
            console_level, loglev, logfmt = _console_level, _loglev, _logfmt
            break

    logging.basicConfig(level=loglev, format=logfmt, datefmt='%Y-%m-%d %H:%M:%S',
                        stream=opts.logfile, force=True)
    return Console(level=console_level)
