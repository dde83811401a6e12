import pytest

from string_analyzer.config import Settings
from string_analyzer.main import create_app


@pytest.fixture
def strings_file(tmp_path):
    return tmp_path / "strings.json"


# fresh app and store file per test
@pytest.fixture
def app(strings_file):
    return create_app(Settings(strings_file=str(strings_file)))
