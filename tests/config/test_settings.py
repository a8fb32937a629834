"""
Tests for trading configuration.
"""

import json

import pytest

from trading_platform.config.settings import TradingConfig, DEFAULT_CATALOG, parse_catalog
from trading_platform.core.exceptions import ConfigurationError


class TestTradingConfig:
    def test_defaults(self):
        """Test default configuration values"""
        config = TradingConfig()
        assert config.initial_cash == 10000.0
        assert config.catalog == DEFAULT_CATALOG
        assert config.max_price_change == 5.0
        assert config.seed is None

    def test_default_catalog_not_shared(self):
        """Test each config gets its own catalog copy"""
        config = TradingConfig()
        config.catalog['TSLA'] = 1.0
        assert 'TSLA' not in DEFAULT_CATALOG

    @pytest.mark.parametrize("kwargs", [
        {'initial_cash': 0},
        {'catalog': {}},
        {'catalog': {'AAPL': -1.0}},
        {'catalog': {' ': 1.0}},
        {'max_price_change': 0},
        {'initial_cash': float('nan')},
        {'initial_cash': float('inf')},
        {'initial_cash': '10000'},
        {'catalog': ['AAPL']},
        {'catalog': {'AAPL': '150'}},
        {'catalog': {'AAPL': float('nan')}},
        {'max_price_change': float('nan')},
        {'seed': '7'},
    ])
    def test_validate_rejects(self, kwargs):
        """Test invalid values raise ConfigurationError"""
        with pytest.raises(ConfigurationError):
            TradingConfig(**kwargs).validate()

    def test_file_round_trip(self, tmp_path):
        """Test saving and loading JSON config"""
        path = tmp_path / "trading.json"
        TradingConfig(initial_cash=500.0, catalog={'X': 1.5}, seed=3).save_to_file(str(path))

        loaded = TradingConfig.from_file(str(path))
        assert loaded == TradingConfig(initial_cash=500.0, catalog={'X': 1.5}, seed=3)

    def test_from_file_missing(self, tmp_path):
        """Test missing config file"""
        with pytest.raises(ConfigurationError):
            TradingConfig.from_file(str(tmp_path / "missing.json"))

    def test_from_file_unknown_key(self, tmp_path):
        """Test config file with unexpected fields"""
        path = tmp_path / "bad.json"
        path.write_text('{"leverage": 10}')
        with pytest.raises(ConfigurationError):
            TradingConfig.from_file(str(path))

    @pytest.mark.parametrize("payload", [
        {'catalog': ['AAPL']},
        {'catalog': {'AAPL': None}},
        {'initial_cash': 'plenty'},
        {'max_price_change': [5]},
    ])
    def test_from_file_wrong_types(self, tmp_path, payload):
        """Test well-formed JSON with wrongly typed values"""
        path = tmp_path / "typed.json"
        path.write_text(json.dumps(payload))
        with pytest.raises(ConfigurationError):
            TradingConfig.from_file(str(path))

    def test_from_env(self, monkeypatch):
        """Test configuration from environment variables"""
        monkeypatch.setenv('TRADING_INITIAL_CASH', '2500')
        monkeypatch.setenv('TRADING_CATALOG', 'AAPL:150, IBM:120.5')
        monkeypatch.setenv('TRADING_MAX_PRICE_CHANGE', '1.5')
        monkeypatch.setenv('TRADING_SEED', '9')

        config = TradingConfig.from_env()
        assert config.initial_cash == 2500.0
        assert config.catalog == {'AAPL': 150.0, 'IBM': 120.5}
        assert config.max_price_change == 1.5
        assert config.seed == 9

    def test_from_env_defaults(self, monkeypatch):
        """Test environment loader falls back to defaults"""
        for name in ('TRADING_INITIAL_CASH', 'TRADING_CATALOG',
                     'TRADING_MAX_PRICE_CHANGE', 'TRADING_SEED'):
            monkeypatch.delenv(name, raising=False)
        assert TradingConfig.from_env() == TradingConfig()

    @pytest.mark.parametrize("value", ['nan', 'inf', '-5'])
    def test_from_env_non_positive_cash(self, monkeypatch, value):
        """Test NaN, infinite or negative starting cash from the environment"""
        monkeypatch.setenv('TRADING_INITIAL_CASH', value)
        with pytest.raises(ConfigurationError):
            TradingConfig.from_env()

    def test_from_env_invalid(self, monkeypatch):
        """Test malformed environment values"""
        monkeypatch.setenv('TRADING_INITIAL_CASH', 'lots')
        with pytest.raises(ConfigurationError):
            TradingConfig.from_env()


class TestParseCatalog:
    def test_parse(self):
        """Test catalog string parsing"""
        assert parse_catalog('A:1,B:2.5,') == {'A': 1.0, 'B': 2.5}

    def test_parse_missing_price(self):
        """Test entries without a price"""
        with pytest.raises(ValueError):
            parse_catalog('AAPL')
