"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import app...' / 'import main' work,
and provides a data folder with small CSV resources plus an app built on it.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from fastapi.testclient import TestClient  # noqa: E402

from config import Settings  # noqa: E402
from main import create_app  # noqa: E402


AGENCIES_CSV = (
    "id,name,state,type,population,website\n"
    "1,Springfield Police Department,IL,municipal,116250,https://example.org/spd\n"
    '2,"Shelbyville Sheriff, County Office",IL,county,0032000,\n'
    "3,Capital City Transit,IL,transit,,https://example.org/cct\n"
)

CONTACTS_CSV = (
    "id,first_name,last_name,email,agency_id\n"
    "10,Marge,Bouvier,marge@example.org,1\n"
    "11,Ned,Flanders,ned@example.org,2\n"
)

SIGNED_IN = {"X-Auth-User": "user_123"}


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    d = tmp_path / "data"
    d.mkdir()
    (d / "agencies_agency_rows.csv").write_text(AGENCIES_CSV, encoding="utf-8")
    (d / "contacts_contact_rows.csv").write_text(CONTACTS_CSV, encoding="utf-8")
    return d


@pytest.fixture
def settings(data_dir: Path) -> Settings:
    return Settings(data_dir=data_dir)


@pytest.fixture
def client(settings: Settings) -> TestClient:
    return TestClient(create_app(settings))


@pytest.fixture
def signed_in_headers():
    return dict(SIGNED_IN)
