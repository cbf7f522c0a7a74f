"""
Tests for YAML configuration loading.
"""

import pytest

from prime_oracle.bounds import DEFAULT_MAX_SIEVE_LIMIT
from prime_oracle.config import DEFAULT_CONFIG_PATH, DEFAULTS, load_config
from prime_oracle.errors import ConfigError


def write(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text)
    return path


class TestLoading:

    def test_bundled_default(self):
        assert DEFAULT_CONFIG_PATH.exists()
        config = load_config()
        assert config['max_sieve_limit'] == DEFAULT_MAX_SIEVE_LIMIT
        assert 10000 in config['benchmark']['limits']

    def test_partial_file_merges_defaults(self, tmp_path):
        path = write(tmp_path, "max_sieve_limit: 5000\n")
        config = load_config(path)
        assert config['max_sieve_limit'] == 5000
        assert config['benchmark'] == DEFAULTS['benchmark']

    def test_nested_override(self, tmp_path):
        path = write(tmp_path, "benchmark:\n  limits: [10, 20]\n")
        config = load_config(str(path))
        assert config['benchmark']['limits'] == [10, 20]
        assert config['benchmark']['time_budget_seconds'] == 1.0

    def test_empty_file_gives_defaults(self, tmp_path):
        path = write(tmp_path, "")
        assert load_config(path) == DEFAULTS

    def test_defaults_not_mutated(self, tmp_path):
        path = write(tmp_path, "benchmark:\n  limits: [7]\n")
        load_config(path)
        assert DEFAULTS['benchmark']['limits'] != [7]


class TestErrors:

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_not_a_mapping(self, tmp_path):
        path = write(tmp_path, "- 1\n- 2\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path):
        path = write(tmp_path, "max_sieve_limit: [1, 2\n")
        with pytest.raises(ConfigError, match="parse"):
            load_config(path)

    @pytest.mark.parametrize("value", ["-1", "'big'", "1.5", "true"])
    def test_bad_max_sieve_limit(self, tmp_path, value):
        path = write(tmp_path, f"max_sieve_limit: {value}\n")
        with pytest.raises(ConfigError, match="max_sieve_limit"):
            load_config(path)

    @pytest.mark.parametrize("value", ["0", "-2.5", "'fast'"])
    def test_bad_time_budget(self, tmp_path, value):
        path = write(tmp_path, f"benchmark:\n  time_budget_seconds: {value}\n")
        with pytest.raises(ConfigError, match="time_budget_seconds"):
            load_config(path)

    def test_bad_limits_list(self, tmp_path):
        path = write(tmp_path, "benchmark:\n  limits: [10, 'x']\n")
        with pytest.raises(ConfigError, match="benchmark.limits"):
            load_config(path)

    def test_config_error_is_value_error(self, tmp_path):
        with pytest.raises(ValueError):
            load_config(tmp_path / "nope.yaml")
