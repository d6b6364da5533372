import pytest
from fastapi.testclient import TestClient

from tea_roulette.config import Settings
from tea_roulette.main import create_app
from tea_roulette.models import Preference
from tea_roulette.store import PreferenceStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data" / "preferences.json"


@pytest.fixture
def store(data_file):
    return PreferenceStore(data_file)


@pytest.fixture
def settings(tmp_path, data_file):
    return Settings(data_file=data_file, static_dir=tmp_path / "no-static")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def amy():
    return Preference(name="Amy", sugar=1, milk=True)


@pytest.fixture
def bo():
    return Preference(name="Bo", sugar=0, milk=False)
