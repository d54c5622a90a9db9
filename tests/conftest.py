import sys, os, pathlib

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

os.environ.setdefault("APP_ENV", "test")

import pytest

from carrental import create_app
from carrental.models.store import Store
from carrental.services.accounts import AccountDirectory
from carrental.services.catalog import VehicleCatalog


@pytest.fixture
def catalog():
    """A catalog holding the default fleet (C1 car, T1 truck, B1 bike)."""
    c = VehicleCatalog()
    c.seed()
    return c


@pytest.fixture
def directory():
    return AccountDirectory()


@pytest.fixture
def customer(directory):
    return directory.register("U1", "Alice", "pw1")


@pytest.fixture
def data_path(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_path):
    """A seeded store backed by a file under tmp_path (not yet written)."""
    return Store(data_path)


@pytest.fixture
def app(data_path):
    """
    App factory with an isolated data file. Saving on exit is enabled so
    the console tests can check what gets written.
    """
    app = create_app({
        "TESTING": True,
        "DATA_PATH": str(data_path),
        "SAVE_ON_EXIT": True,
        "LOG_LEVEL": "WARNING",
    })
    yield app


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
