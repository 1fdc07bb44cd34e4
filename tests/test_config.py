from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from types import SimpleNamespace

import pytest

from hive_intelligence.config import DEFAULT_ENDPOINT, DEFAULT_TEMPERATURE, HiveSettings, load_secrets, settings_from_agent_config


@pytest.mark.parametrize("api_key", [None, "", "   ", "<your-hive-api-key>", 123])
def test_settings_treat_blank_or_placeholder_key_as_absent(api_key):
    settings = HiveSettings(api_key=api_key)

    assert settings.api_key is None
    assert not settings.has_credential


def test_settings_defaults():
    settings = HiveSettings(api_key=" abc ")

    assert settings.api_key == "abc"
    assert settings.has_credential
    assert settings.endpoint == DEFAULT_ENDPOINT
    assert settings.temperature == DEFAULT_TEMPERATURE
    assert settings.include_data_sources is False
    assert settings.timeout is None


@pytest.mark.parametrize(
    "agent_config",
    [
        None,
        {},
        {"settings": None},
        {"settings": {"secrets": None}},
        {"settings": {"secrets": {}}},
        {"settings": {"secrets": {"HIVE_API_KEY": ""}}},
        SimpleNamespace(settings=SimpleNamespace()),
        "not-a-config",
    ],
)
def test_settings_from_agent_config_without_key(agent_config):
    settings = settings_from_agent_config(agent_config)

    assert settings.api_key is None


def test_settings_from_agent_config_with_key():
    settings = settings_from_agent_config({"settings": {"secrets": {"HIVE_API_KEY": "dev_key"}}})

    assert settings.api_key == "dev_key"


def test_load_secrets_reads_hive_section(tmp_path, monkeypatch):
    secrets_file = tmp_path / "secret.toml"
    secrets_file.write_text(
        "\n".join(
            [
                "[hive]",
                'api_key = "toml-key"',
                'endpoint = "https://hive.example.com/v1/search"',
                "temperature = 0.1",
                "include_data_sources = true",
                "timeout = 12",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("HIVE_SECRETS_PATH", str(secrets_file))
    monkeypatch.delenv("HIVE_API_KEY", raising=False)

    bundle = load_secrets()

    assert bundle.source_path == secrets_file
    assert bundle.hive.api_key == "toml-key"
    assert bundle.hive.endpoint == "https://hive.example.com/v1/search"
    assert bundle.hive.temperature == 0.1
    assert bundle.hive.include_data_sources is True
    assert bundle.hive.timeout == 12.0


def test_load_secrets_falls_back_to_environment_key(tmp_path, monkeypatch):
    secrets_file = tmp_path / "secret.toml"
    secrets_file.write_text('[hive]\napi_key = "<placeholder>"\n', encoding="utf-8")
    monkeypatch.setenv("HIVE_SECRETS_PATH", str(secrets_file))
    monkeypatch.setenv("HIVE_API_KEY", "env-key")

    bundle = load_secrets()

    assert bundle.hive.api_key == "env-key"


def test_load_secrets_without_files(tmp_path, monkeypatch):
    monkeypatch.setenv("HIVE_SECRETS_PATH", str(tmp_path / "missing.toml"))
    monkeypatch.delenv("HIVE_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("hive_intelligence.config._discover_project_root", lambda: None)

    bundle = load_secrets()

    assert bundle.source_path is None
    assert bundle.hive.api_key is None

    with pytest.raises(FileNotFoundError):
        load_secrets(strict=True)


def test_settings_are_immutable_once_built():
    settings = HiveSettings(api_key="abc")

    with pytest.raises(FrozenInstanceError):
        settings.api_key = None  # type: ignore[misc]

    assert settings.api_key == "abc"


def test_settings_replace_normalises_new_key():
    settings = replace(HiveSettings(api_key="abc"), api_key="  <placeholder>  ")

    assert settings.api_key is None
