import pytest
from pydantic import ValidationError

from healthcare_chain.core.config import Settings
from healthcare_chain.core.exceptions import NetworkConfigurationError


def make_settings(**overrides) -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(_env_file=None, **overrides)


def test_default_network_is_crossfi_testnet():
    network = make_settings().get_network_config()

    assert network.name == "crossFi"
    assert network.url == "https://rpc.testnet.ms"


def test_private_key_is_rendered_with_prefix():
    config = make_settings(CROSSFI_PRIVATE_KEY="ab" * 32)

    assert config.get_network_config().accounts == ["0x" + "ab" * 32]


def test_prefixed_private_key_is_not_double_prefixed():
    config = make_settings(CROSSFI_PRIVATE_KEY="0x" + "cd" * 32)

    assert config.get_accounts() == ["0x" + "cd" * 32]


def test_missing_private_key_means_no_accounts():
    assert make_settings(CROSSFI_PRIVATE_KEY=None).get_accounts() == []


def test_alchemy_endpoint_used_when_enabled():
    config = make_settings(ALCHEMY_API_URL="key123", USE_ALCHEMY=True)

    assert config.ACTIVE_RPC_URL == "https://crossfi-testnet.g.alchemy.com/2/key123"


def test_alchemy_key_alone_keeps_public_rpc():
    config = make_settings(ALCHEMY_API_URL="key123")

    assert config.ACTIVE_RPC_URL == "https://rpc.testnet.ms"


def test_unknown_network_raises():
    with pytest.raises(NetworkConfigurationError) as exc_info:
        make_settings().get_network_config("mainnet")

    assert exc_info.value.details == {"available": ["crossFi"]}


def test_toolchain_config_matches_compiler_and_paths():
    config = make_settings(CROSSFI_PRIVATE_KEY="ab" * 32).get_toolchain_config()

    assert config["defaultNetwork"] == "crossFi"
    assert config["networks"]["crossFi"]["accounts"] == ["<redacted>"]
    assert config["solidity"] == {
        "version": "0.8.24",
        "optimizer": {"enabled": True, "runs": 200},
    }
    assert config["paths"] == {
        "sources": "./contracts",
        "tests": "./test",
        "cache": "./cache",
        "artifacts": "./artifacts",
    }
    assert config["mocha"] == {"timeout": 40000}


def test_toolchain_config_without_redaction_exposes_accounts():
    config = make_settings(CROSSFI_PRIVATE_KEY="ab" * 32).get_toolchain_config(redact=False)

    assert config["networks"]["crossFi"]["accounts"] == ["0x" + "ab" * 32]


def test_error_signatures_parsed_from_string():
    config = make_settings(ERROR_SIGNATURES="Foo(uint256,address); Bar()")

    assert config.ERROR_SIGNATURES == ["Foo(uint256,address)", "Bar()"]


def test_invalid_environment_rejected():
    with pytest.raises(ValidationError):
        make_settings(ENVIRONMENT="qa")


def test_optimizer_runs_must_be_positive():
    with pytest.raises(ValidationError):
        make_settings(OPTIMIZER_RUNS=0)


def test_settings_expose_no_unused_environment_flags():
    assert "DEBUG" not in Settings.model_fields
    assert not hasattr(Settings, "is_production")
    assert not hasattr(Settings, "is_development")


def test_logging_module_exports_only_function_helpers():
    from healthcare_chain.core import logging as app_logging

    assert not hasattr(app_logging, "LoggerMixin")
    assert callable(app_logging.log_error)
