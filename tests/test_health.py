from fastapi.testclient import TestClient
from app.main import app


def test_health_and_welcome():
    with TestClient(app) as client:
        health = client.get('/api/v1/health')
        assert health.status_code == 200
        assert health.json()['status'] == 'ok'

        root = client.get('/')
        assert root.status_code == 200
        assert root.json()['endpoints']['swap_requests'] == '/api/v1/swap-requests'
