"""
Testes para a aplicação principal Boardcamp
"""

import inspect

from fastapi.routing import APIRoute

from boardcamp.version import APP_VERSION
from main import app


class TestMainApplication:
    """Testes para aplicação principal"""

    def test_health_check(self, client):
        """Teste do endpoint de health check"""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == APP_VERSION

    def test_validation_errors_return_400(self, client):
        """Erros de formato usam 400 em vez de 422"""
        response = client.post("/rentals", json={"customerId": "abc"})
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 3
        assert any(e.startswith("customerId:") for e in errors)
        assert any(e.startswith("gameId:") for e in errors)
        assert any(e.startswith("daysRented:") for e in errors)

    def test_invalid_path_id_returns_400(self, client):
        response = client.get("/customers/abc")
        assert response.status_code == 400

    def test_cors_headers(self, client):
        response = client.get("/categories", headers={"Origin": "http://localhost:3000"})
        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers

    def test_unknown_route(self, client):
        response = client.get("/pagina-inexistente")
        assert response.status_code == 404

    def test_database_routes_run_in_threadpool(self):
        """Rotas com acesso síncrono ao banco não são corrotinas"""
        routes = [r for r in app.routes if isinstance(r, APIRoute) and r.path != "/health"]
        assert len(routes) == 12
        for route in routes:
            assert not inspect.iscoroutinefunction(route.endpoint), route.path
