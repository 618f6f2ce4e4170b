"""
pytest configuration and fixtures for Punto Hogar tests.
"""
import logging
import sys
from pathlib import Path

import pytest

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to a test's captured stdout."""
    yield
    logger = logging.getLogger("puntohogar")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logging.getLogger("werkzeug").setLevel(logging.NOTSET)


@pytest.fixture
def project_root():
    """Return the project root path."""
    return PROJECT_ROOT


@pytest.fixture
def test_db_path(tmp_path):
    """Create a temporary database path for testing."""
    return tmp_path / "test_punto_hogar.db"


@pytest.fixture
def test_db(test_db_path):
    """Empty database with schema."""
    from puntohogar.core.database import PuntoHogarDatabase
    db = PuntoHogarDatabase(str(test_db_path))
    yield db
    db.close()


@pytest.fixture
def seeded_db(test_db):
    """Database holding the sample catalog."""
    from puntohogar.core.seed import sample_properties
    test_db.seed_if_empty(sample_properties())
    return test_db


@pytest.fixture
def app_config(test_db_path, tmp_path):
    """Configuration dict for create_app()."""
    return {
        'database': {'path': str(test_db_path), 'seed_on_startup': True},
        'logging': {'level': 'WARNING'},
        'server': {'host': '127.0.0.1', 'port': 3000, 'debug': False,
                   'static_dir': str(tmp_path / 'dist')},
        'cors': {'origins': ['*']},
    }


@pytest.fixture
def app(app_config):
    """Flask app backed by a seeded temporary database."""
    from puntohogar.api.app import create_app
    from puntohogar.api.routes.properties import DB_EXTENSION_KEY
    application = create_app(app_config)
    application.config['TESTING'] = True
    yield application
    application.extensions[DB_EXTENSION_KEY].close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_property():
    """Sample property data for testing."""
    return {
        "title": "Casa de Campo en Cieneguilla",
        "description": "Amplio jardín y piscina.",
        "price": 210000,
        "location": "Lima, Cieneguilla",
        "type": "venta",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 300,
        "image_url": "/img/imagen7.png",
        "category": "casa",
    }


@pytest.fixture
def env_vars(monkeypatch):
    """Set up test environment variables."""
    monkeypatch.setenv("PUNTOHOGAR_DB_PATH", ":memory:")
    monkeypatch.setenv("PUNTOHOGAR_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("PORT", "8080")
