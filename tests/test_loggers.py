# -*- coding: utf-8 -*-
"""Unit tests for the two-channel logging package."""

import io
import json
import logging

import numpy as np
import pandas as pd

from loggers import (
    ConsoleLogger, DebugLogger, LogContext, get_module_logger,
    log_context, log_execution,
)


class TestDebugLogger:
    def test_intercepts_engine_records(self, tmp_path):
        dl = DebugLogger(output_dir=str(tmp_path))
        get_module_logger('weighting').info('weights derived')
        logging.getLogger('unrelated').warning('not captured')
        path = dl.close()

        with open(path, encoding='utf-8') as fh:
            entries = json.load(fh)
        assert [e['message'] for e in entries] == ['weights derived']
        assert entries[0]['module'] == 'ahp_engine.weighting'

    def test_handler_detached_on_close(self, tmp_path):
        dl = DebugLogger(output_dir=str(tmp_path))
        dl.close()
        get_module_logger('weighting').info('after close')
        assert dl.entry_count == 0

    def test_numpy_and_pandas_payloads(self, tmp_path):
        dl = DebugLogger(output_dir=str(tmp_path))
        dl.log_data('matrix', pd.DataFrame(np.eye(2), index=['A', 'B'], columns=['A', 'B']))
        dl.log_data('vector', np.array([0.25, 0.75]))
        path = dl.close()
        with open(path, encoding='utf-8') as fh:
            entries = json.load(fh)
        assert entries[0]['data'] == {'A': {'A': 1.0, 'B': 0.0}, 'B': {'A': 0.0, 'B': 1.0}}
        assert entries[1]['data'] == [0.25, 0.75]

    def test_context_recorded(self, tmp_path):
        dl = DebugLogger(output_dir=str(tmp_path))
        with log_context(model='Suppliers'):
            dl.info('inside')
        dl.info('outside')
        dl.close()
        assert [e['model'] for e in dl.entries] == ['Suppliers', '']


class TestLogContext:
    def test_restores_previous_value(self):
        LogContext.set('model', 'outer')
        with log_context(model='inner'):
            assert LogContext.get()['model'] == 'inner'
        assert LogContext.get()['model'] == 'outer'
        LogContext.remove('model')


class TestLogExecution:
    def test_reraises(self, caplog):
        @log_execution()
        def fail():
            raise KeyError('missing')

        with caplog.at_level('ERROR', logger='ahp_engine'):
            try:
                fail()
            except KeyError:
                pass
            else:
                raise AssertionError('KeyError not propagated')
        assert any('failed after' in r.getMessage() for r in caplog.records)


class TestConsoleLogger:
    def test_phase_output_without_colour(self):
        buf = io.StringIO()
        console = ConsoleLogger(use_color=False, stream=buf)
        with console.phase('Ranking', total_phases=3) as ph:
            ph.metric('Alternatives', 2)
        text = buf.getvalue()
        assert '[1/3] Ranking' in text
        assert 'OK' in text
        assert '\033[' not in text
        assert console.phases[0].details == {'Alternatives': 2}

    def test_table_alignment(self):
        buf = io.StringIO()
        console = ConsoleLogger(use_color=False, stream=buf)
        console.table(['Name', 'Score'], [['X', '76.62'], ['Longer', '74.70']])
        lines = buf.getvalue().splitlines()
        assert len(lines) == 4
        assert len({len(l) for l in lines}) == 1
        assert lines[3].rstrip().endswith('74.70')
