"""Unit tests for MarketSettings and its loaders."""

from __future__ import annotations

from pathlib import Path

import pytest

from nft_market.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MarketSettings,
    MissingRequiredSettingError,
    SettingsFactory,
)
from nft_market.kernel.marketplace import Network

_GRAPH = "https://graph.test/subgraphs/name/marketplace"
_MARKET = "0x8e5660b4ab70168b5a6feea0e0315cb49c8cd539"


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "GRAPH_URL",
        "MARKETPLACE_ADDRESS",
        "NETWORK",
        "REQUEST_TIMEOUT",
        "LOG_LEVEL",
        "LOG_JSON",
        "CONTRACT_ADDRESSES",
    ):
        monkeypatch.delenv(f"NFT_MARKET_{name}", raising=False)
    return monkeypatch


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestMarketSettings:
    def test_defaults(self) -> None:
        settings = MarketSettings(graph_url=_GRAPH, marketplace_address=_MARKET)
        assert settings.network_enum is Network.ETHEREUM
        assert settings.request_timeout == 10.0
        assert settings.log_json is True
        assert settings.contract_addresses == {}

    def test_network_case_insensitive(self) -> None:
        settings = MarketSettings(graph_url=_GRAPH, marketplace_address=_MARKET, network="matic")
        assert settings.network_enum is Network.MATIC

    @pytest.mark.parametrize(
        ("field", "value"),
        [
            ("graph_url", "ftp://graph"),
            ("marketplace_address", "0x12"),
            ("network", "SOLANA"),
            ("request_timeout", 0),
            ("log_level", "CHATTY"),
            ("contract_addresses", {"Hats": "nope"}),
        ],
    )
    def test_invalid_values(self, field: str, value: object) -> None:
        kwargs = {"graph_url": _GRAPH, "marketplace_address": _MARKET, field: value}
        with pytest.raises(InvalidSettingValueError):
            MarketSettings(**kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Loaders
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_prefixed_variables(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)
        clean_env.setenv("NFT_MARKET_MARKETPLACE_ADDRESS", _MARKET)
        clean_env.setenv("NFT_MARKET_REQUEST_TIMEOUT", "2.5")
        clean_env.setenv("NFT_MARKET_LOG_JSON", "false")
        clean_env.setenv(
            "NFT_MARKET_CONTRACT_ADDRESSES",
            "Hats=0x00000000000000000000000000000000000000aa, Shoes=0x00000000000000000000000000000000000000bb",
        )

        settings = EnvSettingsLoader().load(MarketSettings)

        assert settings.graph_url == _GRAPH
        assert settings.request_timeout == 2.5
        assert settings.log_json is False
        assert settings.contract_addresses == {
            "Hats": "0x00000000000000000000000000000000000000aa",
            "Shoes": "0x00000000000000000000000000000000000000bb",
        }

    def test_missing_required(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)
        with pytest.raises(MissingRequiredSettingError) as info:
            EnvSettingsLoader().load(MarketSettings)
        assert info.value.setting_name == "marketplace_address"
        assert info.value.env_key == "NFT_MARKET_MARKETPLACE_ADDRESS"
        assert "NFT_MARKET_MARKETPLACE_ADDRESS" in info.value.message

    def test_validation_error_names_the_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", "ftp://graph")
        clean_env.setenv("NFT_MARKET_MARKETPLACE_ADDRESS", _MARKET)
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(MarketSettings)
        err = info.value
        assert err.setting_name == "graph_url"
        assert err.env_key == "NFT_MARKET_GRAPH_URL"
        assert err.message.startswith("Setting 'NFT_MARKET_GRAPH_URL'")
        assert err.detail == {
            "setting": "graph_url",
            "env_key": "NFT_MARKET_GRAPH_URL",
            "reason": "must be an http(s) URL",
        }

    def test_bad_contract_address_names_the_variable(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)
        clean_env.setenv("NFT_MARKET_MARKETPLACE_ADDRESS", _MARKET)
        clean_env.setenv("NFT_MARKET_CONTRACT_ADDRESSES", "Hats=0x12")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(MarketSettings)
        assert info.value.setting_name == "contract_addresses.Hats"
        assert info.value.env_key == "NFT_MARKET_CONTRACT_ADDRESSES"

    def test_uncoercible_value(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)
        clean_env.setenv("NFT_MARKET_MARKETPLACE_ADDRESS", _MARKET)
        clean_env.setenv("NFT_MARKET_REQUEST_TIMEOUT", "soon")
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader().load(MarketSettings)
        assert info.value.env_key == "NFT_MARKET_REQUEST_TIMEOUT"
        assert info.value.value == "soon"

    def test_malformed_pairs(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)
        clean_env.setenv("NFT_MARKET_MARKETPLACE_ADDRESS", _MARKET)
        clean_env.setenv("NFT_MARKET_CONTRACT_ADDRESSES", "Hats")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(MarketSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, clean_env: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            f"NFT_MARKET_GRAPH_URL={_GRAPH}\nNFT_MARKET_MARKETPLACE_ADDRESS={_MARKET}\nNFT_MARKET_NETWORK=MATIC\n"
        )
        # load_dotenv writes into os.environ; register the keys so they are undone
        for key in ("NFT_MARKET_GRAPH_URL", "NFT_MARKET_MARKETPLACE_ADDRESS", "NFT_MARKET_NETWORK"):
            clean_env.setenv(key, "")
            clean_env.delenv(key)

        settings = DotenvSettingsLoader(str(env_file)).load(MarketSettings)

        assert settings.network_enum is Network.MATIC


class TestSettingsFactory:
    def test_overrides_complete_missing_fields(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("NFT_MARKET_GRAPH_URL", _GRAPH)

        settings = SettingsFactory.create(
            MarketSettings,
            loaders=[EnvSettingsLoader()],
            overrides={"graph_url": _GRAPH, "marketplace_address": _MARKET, "log_level": "DEBUG"},
        )

        assert settings.log_level == "DEBUG"
        assert settings.marketplace_address == _MARKET

    def test_missing_after_all_sources(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(MissingRequiredSettingError) as info:
            SettingsFactory.create(MarketSettings, loaders=[EnvSettingsLoader()])
        assert info.value.setting_name == "graph_url"
        assert info.value.env_key == "NFT_MARKET_GRAPH_URL"

    def test_invalid_override(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            SettingsFactory.create(
                MarketSettings,
                overrides={"graph_url": _GRAPH, "marketplace_address": "bad"},
            )
        # overrides are not environment variables
        assert info.value.env_key is None
        assert info.value.setting_name == "marketplace_address"


class TestSettingsKeys:
    def test_env_key(self) -> None:
        assert MarketSettings.env_key("graph_url") == "NFT_MARKET_GRAPH_URL"
        assert MarketSettings.env_key("contract_addresses.Hats") == "NFT_MARKET_CONTRACT_ADDRESSES"

    def test_required_fields(self) -> None:
        assert MarketSettings.required_fields() == ["graph_url", "marketplace_address"]
