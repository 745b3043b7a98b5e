#!/usr/bin/env python
# coding: utf-8
"""Convenient objects about logging.
"""


class BraceMessage:
    """Message formatted with ``str.format`` only when a handler emits it.
    """
    def __init__(self, fmt, *args, **kwargs):
        self.fmt = fmt
        self.args = args
        self.kwargs = kwargs

    def __str__(self):
        return self.fmt.format(*self.args, **self.kwargs)


__ = BraceMessage
