import random

import pytest
from click.testing import CliRunner

from pwd_policy import PolicyConfiguration, PolicyRule


@pytest.fixture
def rng():
    return random.Random(20240517)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def strict_policy():
    return PolicyConfiguration(password_length=8, rules=frozenset(PolicyRule))


@pytest.fixture
def write_config(tmp_path):
    def _write(content: str):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return path

    return _write
