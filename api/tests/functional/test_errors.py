from fastapi.testclient import TestClient
from inventory_api.main import create_app


def test_unexpected_error_renders_message_body(settings):
    app = create_app(settings)

    @app.get("/explode")
    async def explode():
        raise RuntimeError("boom")

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/explode")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error."}
