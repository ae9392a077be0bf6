import pytest

from paymill_client import (
    ConfigError,
    PaymillConfig,
    PaymillParameters,
    create_paymill_client,
    load_paymill_config,
)
from paymill_client.core.config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from paymill_client.core.environment import build_environment, read_env_file


def test_defaults_from_mapping():
    config = PaymillConfig.from_mapping({"PAYMILL_API_KEY": " key "})

    assert config.api_key == "key"
    assert config.api_url == DEFAULT_API_URL
    assert config.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
    assert config.auth == ("key", "")


def test_missing_api_key():
    with pytest.raises(ConfigError):
        PaymillConfig.from_mapping({})


@pytest.mark.parametrize("url", ["ftp://api.paymill.com", "not a url"])
def test_invalid_api_url(url):
    with pytest.raises(ConfigError):
        PaymillConfig.from_mapping({"PAYMILL_API_KEY": "key", "PAYMILL_API_URL": url})


@pytest.mark.parametrize("timeout", ["soon", "0", "-5"])
def test_invalid_timeout(timeout):
    with pytest.raises(ConfigError):
        PaymillConfig.from_mapping({"PAYMILL_API_KEY": "key", "PAYMILL_TIMEOUT_SECONDS": timeout})


def test_config_is_immutable_and_hides_the_key():
    config = PaymillConfig(api_key="secret")
    with pytest.raises(AttributeError):
        config.api_key = "other"
    assert "secret" not in repr(config)


def test_layering_env_file_then_overrides(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "# comment\n"
        "PAYMILL_API_KEY=from_file\n"
        "export PAYMILL_API_URL='https://file.example/v2.1/'\n"
        "PAYMILL_TIMEOUT_SECONDS=12\n",
        encoding="utf-8",
    )

    config = load_paymill_config(
        env_file=str(env_file),
        base={"PAYMILL_TIMEOUT_SECONDS": "7"},
        api_key="from_kwarg",
    )

    assert config.api_key == "from_kwarg"
    assert config.api_url == "https://file.example/v2.1"
    # values already present in the base environment win over the file
    assert config.timeout_seconds == 7


def test_parameters_bundle():
    config = PaymillConfig.from_env(
        env_file=None,
        base={},
        parameters=PaymillParameters(api_key="bundle", timeout_seconds=9),
    )
    assert (config.api_key, config.timeout_seconds) == ("bundle", 9)


def test_missing_env_file_is_ignored(tmp_path):
    environment = build_environment(
        env_file=str(tmp_path / "absent"),
        base={"PAYMILL_API_KEY": "1", "HOME": "/root"},
    )
    assert dict(environment.variables) == {"PAYMILL_API_KEY": "1"}


def test_unrelated_variables_are_not_collected(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DATABASE_URL=postgres://db\nPAYMILL_API_URL=https://file.example\n", encoding="utf-8")

    environment = build_environment(
        env_file=str(env_file),
        base={"PATH": "/usr/bin"},
        overrides={"OTHER": "x"},
    )

    assert dict(environment.variables) == {"PAYMILL_API_URL": "https://file.example"}


def test_each_value_records_its_source(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PAYMILL_API_KEY=file\nPAYMILL_API_URL=https://file.example\n", encoding="utf-8")

    environment = build_environment(
        env_file=str(env_file),
        base={"PAYMILL_API_KEY": "process"},
        overrides={"PAYMILL_TIMEOUT_SECONDS": "5"},
    )

    assert environment.get("PAYMILL_API_KEY") == "process"
    assert environment.source("PAYMILL_API_KEY") == "environment"
    assert environment.source("PAYMILL_API_URL") == f"file {env_file}"
    assert environment.source("PAYMILL_TIMEOUT_SECONDS") == "override"
    assert environment.source("PAYMILL_MISSING") is None
    assert "process" not in environment.describe()


def test_read_env_file_keeps_only_prefixed_keys(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "export PAYMILL_API_KEY=\"quoted\"\nA=file\nPAYMILL_API_KEY_TYPO\n",
        encoding="utf-8",
    )

    assert read_env_file(str(env_file)) == {"PAYMILL_API_KEY": "quoted"}


def test_config_error_names_the_offending_source(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PAYMILL_TIMEOUT_SECONDS=soon\n", encoding="utf-8")

    with pytest.raises(ConfigError) as excinfo:
        load_paymill_config(env_file=str(env_file), base={}, api_key="key")

    assert f"PAYMILL_TIMEOUT_SECONDS=<file {env_file}>" in excinfo.value.message
    assert "PAYMILL_API_KEY=<override>" in excinfo.value.message
    assert excinfo.value.details["sources"]["PAYMILL_API_KEY"] == "override"


def test_client_rejects_config_plus_parameters():
    with pytest.raises(ValueError):
        create_paymill_client(config=PaymillConfig(api_key="key"), api_key="other")


def test_client_built_from_parameters():
    paymill = create_paymill_client(env_file=None, base={}, api_key="key")
    assert paymill.config.api_key == "key"
    assert paymill.offers.resource == "offers"
