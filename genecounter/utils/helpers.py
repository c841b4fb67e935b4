# This file is part of GeneCounter.
#
# Licensed under MIT License.


def format_minutes(seconds):
    mins = seconds // 60
    secs = seconds % 60
    return '%d minutes and %d secs' % (mins, secs)
