import pytest

from clinic.database import Database


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'clinic.db'}", echo=False)
    db.open()
    yield db
    db.close()
