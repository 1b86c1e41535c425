"""Tests for logging configuration."""

import json
import logging

from foldertree.utils.logging import JSONFormatter, configure_loggers


def test_store_loggers_quieted():
    """Test driver and ODM loggers only report warnings and above."""
    configure_loggers('FolderTree API')

    for name in ('pymongo', 'motor', 'beanie'):
        assert logging.getLogger(name).level == logging.WARNING


def test_json_formatter():
    """Test records are rendered as one JSON object."""
    record = logging.LogRecord(
        'foldertree.services', logging.ERROR, __file__, 10, 'Folder %s failed', ('x',), None,
    )

    payload = json.loads(JSONFormatter().format(record))

    assert payload['level'] == 'ERROR'
    assert payload['logger'] == 'foldertree.services'
    assert payload['message'] == 'Folder x failed'
