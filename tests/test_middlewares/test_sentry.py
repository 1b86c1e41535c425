"""Tests for the Sentry event filters."""

from foldertree.middlewares.sentry import _drop_untraced_transactions, _strip_sensitive


def test_health_and_docs_transactions_dropped():
    """Test liveness and docs routes are not traced."""
    for path in ('/health', '/scalar', '/openapi.json'):
        assert _drop_untraced_transactions({'transaction': path}, {}) is None


def test_api_transactions_kept():
    """Test API routes are traced, including ones that merely contain a dropped path."""
    for path in ('/v1/folder/{folder_id}', '/v1/files', '/v1/folder/health'):
        event = {'transaction': path}
        assert _drop_untraced_transactions(event, {}) is event


def test_sensitive_headers_filtered():
    """Test credentials are scrubbed from request headers."""
    event = {'request': {'headers': {'Authorization': 'Bearer x', 'Content-Type': 'application/json'}}}

    result = _strip_sensitive(event, {})

    assert result['request']['headers']['Authorization'] == '[Filtered]'
    assert result['request']['headers']['Content-Type'] == 'application/json'
