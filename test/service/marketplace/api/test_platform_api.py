from unittest.mock import AsyncMock, patch

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import HEALTH, METRICS


@pytest.mark.unit
class TestPlatformEndpoints:
    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get('/api/does-not-exist')

        assert response.status_code == 404
        assert response.json() == {
            'status': 'error',
            'message': "Can't find /api/does-not-exist on this server!",
        }

    def test_health_ok(self, client: TestClient) -> None:
        with patch('src.platform.app_factory.check_database_connection', AsyncMock()):
            response = client.get(HEALTH)

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'ok'
        assert body['database'] == 'connected'
        assert 'timestamp' in body
        assert body['uptime'] >= 0

    def test_health_database_down(self, client: TestClient) -> None:
        with patch(
            'src.platform.app_factory.check_database_connection',
            AsyncMock(side_effect=ConnectionRefusedError('db down')),
        ):
            response = client.get(HEALTH)

        assert response.status_code == 503
        assert response.json() == {
            'status': 'error',
            'message': 'Service Unavailable',
            'database': 'disconnected',
        }

    def test_metrics_exposition(self, client: TestClient) -> None:
        response = client.get(METRICS)

        assert response.status_code == 200
        assert 'marketplace_product_mutations_total' in response.text
