#!/usr/bin/env python
# coding: utf-8
"""Interface to logging package.
"""
import os
import sys
import logging


class Logger(object):
    """Attach handlers to a logger.

    Parameters
    ----------
    filename : str, optional
        Log file; default is ``<main script>.log``.
    level : {'debug', 'info', 'warn', 'warning', 'error', 'critical'}
    stream_fmt : str, optional
        If given, also log to stderr with this format.
    file_fmt : str
    name : str, optional
        Name of the logger; default is the root logger, which is where
        minicplx reports.
    """
    levels = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
        'critical': logging.CRITICAL
    }

    def __init__(self,
        filename=None, level='info',
        stream_fmt=None,
        file_fmt='%(message)s',
        name=None
    ):
        if level not in self.levels:
            raise ValueError("Cannot recognize level {} as any in {}."
                             .format(level, list(self.levels.keys())))
        if filename is None:
            # Use the same name of the main script as the default name
            filename = os.path.splitext(os.path.basename(sys.argv[0]))[0] + '.log'
        self.filename = str(filename)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(self.levels[level])
        self.handlers = []
        if stream_fmt is not None:
            sh = logging.StreamHandler()
            sh.setFormatter(logging.Formatter(stream_fmt))
            self.handlers.append(sh)
        th = logging.FileHandler(filename=self.filename, mode='w', encoding='utf-8')
        th.setFormatter(logging.Formatter(file_fmt))
        self.handlers.append(th)
        for handler in self.handlers:
            self.logger.addHandler(handler)

    def close(self):
        """Detach and close the handlers added by this object."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
        return
