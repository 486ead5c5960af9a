"""
Pytest configuration and fixtures for test isolation.
"""
import pytest
import sqlalchemy as sa

from trigger.config.environment import EnvironmentVariables
from trigger.store.memory import InMemoryLookupStore


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Pointing HOME and the working directory at temporary directories,
       so no user or project configuration file is picked up
    2. Removing trigger-lookup environment variables
    """
    home = tmp_path / "home"
    home.mkdir()
    workdir = tmp_path / "work"
    workdir.mkdir()

    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(workdir)
    for name in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(name, raising=False)

    yield


GROUP_ROWS = [
    {"id": 7, "identifier": "G7", "name": "Group seven"},
    {"id": 8, "identifier": "G8", "name": "Group eight"},
]

ROLE_ROWS = [
    {"id": 3, "short_name": "editor", "name": "Editor"},
    {"id": 5, "short_name": "student", "name": "Student"},
]


@pytest.fixture
def lookup_store():
    """In-memory store with a couple of groups and roles."""
    return InMemoryLookupStore({"groups": GROUP_ROWS, "roles": ROLE_ROWS})


def create_lookup_tables(url: str, prefix: str = "") -> None:
    """Create and fill groups and roles tables in the database at ``url``."""
    engine = sa.create_engine(url)
    metadata = sa.MetaData()
    groups = sa.Table(
        f"{prefix}groups", metadata,
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("identifier", sa.String(100)),
        sa.Column("name", sa.String(254)),
    )
    roles = sa.Table(
        f"{prefix}roles", metadata,
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("short_name", sa.String(100)),
        sa.Column("name", sa.String(255)),
    )
    metadata.create_all(engine)
    with engine.begin() as connection:
        connection.execute(groups.insert(), GROUP_ROWS)
        connection.execute(roles.insert(), ROLE_ROWS)
    engine.dispose()


@pytest.fixture
def sqlite_url(tmp_path):
    """URL of a SQLite database holding the groups and roles tables."""
    url = f"sqlite:///{tmp_path / 'lookup.db'}"
    create_lookup_tables(url)
    return url


@pytest.fixture
def prefixed_sqlite_url(tmp_path):
    """URL of a SQLite database whose tables carry the mdl_ prefix."""
    url = f"sqlite:///{tmp_path / 'moodle.db'}"
    create_lookup_tables(url, prefix="mdl_")
    return url
