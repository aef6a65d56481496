"""
测试配置和配置验证器
"""
import pytest

from expression_tree.config import SystemSettings, ConfigValidator
from expression_tree.exceptions import ConfigError, ValidationError


class TestSystemSettings:

    def test_defaults(self):
        settings = SystemSettings()
        assert settings.log_level == "INFO"
        assert settings.default_tree_size == 10
        assert settings.operators == ['+', '-', '*']
        assert settings.seed is None
        assert settings.export_format == "csv"

    def test_log_level_normalised(self):
        assert SystemSettings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            SystemSettings(log_level="LOUD")
        assert exc_info.value.details["config_key"] == "log_level"

    def test_invalid_tree_sizes(self):
        with pytest.raises(ConfigError):
            SystemSettings(default_tree_size=0)
        with pytest.raises(ConfigError):
            SystemSettings(default_tree_size=20, max_tree_size=10)

    @pytest.mark.parametrize("overrides", [
        {"default_tree_size": "5"},
        {"max_tree_size": 2.5},
        {"default_tree_size": True},
    ])
    def test_non_integer_tree_sizes(self, overrides):
        with pytest.raises(ConfigError) as exc_info:
            SystemSettings(**overrides)
        assert exc_info.value.details["config_key"] == next(iter(overrides))

    def test_invalid_operators(self):
        with pytest.raises(ConfigError):
            SystemSettings(operators=[])
        with pytest.raises(ConfigError):
            SystemSettings(operators=['+', '/'])

    def test_invalid_export_format(self):
        with pytest.raises(ConfigError):
            SystemSettings(export_format="json")

    def test_from_dict_ignores_unknown_keys(self):
        settings = SystemSettings.from_dict({"seed": 5, "unknown": 1})
        assert settings.seed == 5
        assert "unknown" not in settings.to_dict()

    def test_operator_lists_are_independent(self):
        first = SystemSettings()
        first.operators.append('+')
        assert SystemSettings().operators == ['+', '-', '*']


class TestConfigValidator:

    @pytest.fixture
    def validator(self):
        return ConfigValidator()

    def test_valid_config(self, validator):
        assert validator.validate_system_config({
            "log_level": "INFO",
            "operators": ['+', '*'],
            "default_tree_size": 5,
            "seed": 1,
        })

    def test_invalid_seed(self, validator):
        with pytest.raises(ValidationError):
            validator.validate_system_config({"seed": "abc"})

    def test_invalid_log_level_type(self, validator):
        with pytest.raises(ValidationError):
            validator.validate_system_config({"log_level": 10})

    @pytest.mark.parametrize("size", [0, -3, 1.5, None, True])
    def test_invalid_tree_size(self, validator, size):
        with pytest.raises(ValidationError):
            validator.validate_tree_size(size)

    def test_tree_size_limit(self, validator):
        assert validator.validate_tree_size(10, max_size=10) == 10
        with pytest.raises(ValidationError) as exc_info:
            validator.validate_tree_size(11, max_size=10)
        assert exc_info.value.details["reason"] == "out_of_range"

    def test_validate_operators(self, validator):
        assert validator.validate_operators(['*', '+', '*']) == ['*', '+']
        with pytest.raises(ValidationError):
            validator.validate_operators([])
        with pytest.raises(ValidationError):
            validator.validate_operators('+-*')
        with pytest.raises(ValidationError):
            validator.validate_operators(['%'])
