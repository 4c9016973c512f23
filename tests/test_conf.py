import importlib.util
import json
from pathlib import Path

import pydantic
import pytest

from pwd_policy import PolicyConfiguration, PolicyRule
from pwd_policy._conf import Settings
from pwd_policy.generator import DEFAULT_MAX_ATTEMPTS
from pwd_policy.util.pydantic import convert_errors, format_errors

SCRIPTS_DIR = Path(__file__).resolve().parents[1] / "shell_scripts"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PWD_POLICY_MAX_ATTEMPTS", "PWD_POLICY_POLICY"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings()

    assert settings.policy == PolicyConfiguration()
    assert settings.max_attempts == DEFAULT_MAX_ATTEMPTS


def test_policy_accepts_camel_case_and_rule_names():
    settings = Settings(
        policy={"passwordLength": 10, "rules": ["mixed-case", "numbers"]},
        max_attempts=3,
    )

    assert settings.policy.password_length == 10
    assert settings.policy.rules == {PolicyRule.MIXED_CASE, PolicyRule.NUMBERS}
    assert settings.max_attempts == 3


def test_policy_is_immutable():
    policy = PolicyConfiguration(password_length=4)

    with pytest.raises(pydantic.ValidationError):
        policy.password_length = 8


def test_environment_overrides_file_values(monkeypatch):
    monkeypatch.setenv("PWD_POLICY_MAX_ATTEMPTS", "5")
    monkeypatch.setenv(
        "PWD_POLICY_POLICY", '{"passwordLength": 9, "rules": ["special"]}'
    )

    settings = Settings(max_attempts=100)

    assert settings.max_attempts == 5
    assert settings.policy == PolicyConfiguration(
        password_length=9, rules=frozenset({PolicyRule.SPECIAL})
    )


@pytest.mark.parametrize(
    "payload, fragment",
    [
        ({"policy": {"passwordLength": -1}}, "greater than or equal to 0"),
        ({"policy": {"rules": ["uppercase"]}}, "one of the following values"),
        ({"policy": {"colour": "blue"}}, "Extra fields not allowed"),
        ({"policy": "strict"}, "valid mapping"),
    ],
)
def test_validation_errors_are_readable(payload, fragment):
    with pytest.raises(pydantic.ValidationError) as excinfo:
        Settings(**payload)

    message = format_errors(convert_errors(excinfo.value))

    assert message.startswith("policy")
    assert fragment in message


def test_collect_json_schemas(tmp_path):
    spec = importlib.util.spec_from_file_location(
        "collect_json_schemas", SCRIPTS_DIR / "collect_json_schemas.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    generated = module.execute(str(tmp_path))

    assert sorted(p.name for p in generated) == ["configuration.json", "policy.json"]
    schema = json.loads((tmp_path / "policy.json").read_text())
    assert "passwordLength" in schema["properties"]
