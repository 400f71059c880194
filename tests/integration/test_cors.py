from fastapi.testclient import TestClient

from calculator_web.main import create_app


def test_cors_allows_configured_origin() -> None:
    app = create_app()
    client = TestClient(app)

    response = client.options(
        "/calculate",
        headers={
            "Origin": "http://localhost:8000",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:8000"
