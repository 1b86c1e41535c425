"""Tests for the health endpoint."""

from types import SimpleNamespace


def _store(reachable):
    async def ping():
        return reachable
    return SimpleNamespace(ping=ping)


def test_health_with_reachable_store(client):
    """Test health pings the store and reports it up."""
    client.app.state.mongodb = _store(True)

    response = client.get('/health')

    assert response.status_code == 200
    body = response.json()
    assert body['status'] == 'healthy'
    assert body['database'] == 'up'
    assert body['version'] == '1.0.0'
    assert body['uptime'] >= 0


def test_health_with_unreachable_store(client):
    """Test a failed ping degrades the status."""
    client.app.state.mongodb = _store(False)

    response = client.get('/health')

    assert response.status_code == 200
    assert response.json()['status'] == 'degraded'
    assert response.json()['database'] == 'down'


def test_health_before_store_is_opened(client):
    """Test health answers when no store handle exists yet."""
    response = client.get('/health')

    assert response.json()['database'] == 'down'
