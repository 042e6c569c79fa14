import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session
from inventory_api.config import Settings
from inventory_api.database import Database
from inventory_api.main import create_app


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://")


@pytest.fixture
def client(settings):
    # Each test gets its own in-memory database through the app lifespan
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(name="session")
def session_fixture():
    db = Database("sqlite://")
    db.init_db()
    with db.session() as session:
        yield session
    db.drop_all_tables()
    db.close()


@pytest.fixture
def app_session(client):
    with Session(client.app.state.db.engine) as session:
        yield session


@pytest.fixture
def test_product_data():
    return {
        "name": "Apple",
        "price": "25",
        "description": "Red apples",
        "category": "Fruits"
    }


@pytest.fixture
def test_profile_data():
    return {
        "firstName": "Maria",
        "lastName": "Santos",
        "gender": "Female",
        "address": "12 Mabini St."
    }


@pytest.fixture
def network_codes():
    return {
        "success": [200, 201],
        "error": [400, 404]
    }
