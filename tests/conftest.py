import pytest
from click.testing import CliRunner


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def isolated_cwd(tmp_path, monkeypatch):
    """Runs the test from an empty directory so no config file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
