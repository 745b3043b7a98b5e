#!/usr/bin/env python3
# coding: utf-8
import logging

import pytest

from minicplx.complex import Complex, Complex64
from minicplx.lib.logging import Logger
from minicplx.lib.tools import __


def test_brace_message():
    msg = __('{} / {x}', 1, x=2)
    assert str(msg) == '1 / 2'


def test_logger_file(tmp_path):
    filename = tmp_path / 'minicplx.log'
    root = logging.getLogger()
    level = root.level
    Complex.config(zero_division='warn')
    logger = Logger(filename=filename, level='warning',
                    file_fmt='%(levelname)s %(message)s')
    try:
        Complex64(1.0, 2.0) / Complex64(0.0, 0.0)
    finally:
        logger.close()
        Complex.config(zero_division='ignore')
        root.setLevel(level)
    text = filename.read_text(encoding='utf-8')
    assert text.startswith(
        'WARNING Division of Complex64(1.0, 2.0) by zero-magnitude Complex64(0.0, 0.0)'
    )
    assert 'zero-magnitude' in text
    assert logger.handlers == []


def test_logger_named(tmp_path):
    logger = Logger(filename=tmp_path / 'named.log', level='debug',
                    stream_fmt='%(message)s', name='minicplx.test')
    try:
        assert logger.logger.level == logging.DEBUG
        assert len(logger.logger.handlers) == 2
        logger.logger.debug(__('value {}', 42))
    finally:
        logger.close()
    assert (tmp_path / 'named.log').read_text(encoding='utf-8') == 'value 42\n'
    assert logging.getLogger('minicplx.test').handlers == []


def test_logger_level():
    with pytest.raises(ValueError):
        Logger(level='verbose')
