import pytest

from _data.deepseek import SYSTEM_PROMPT
from _engine.config import create_default_config, load_config, require_api_key
from _engine.errors import ConfigurationError, MissingAPIKeyError
from _types.model import Config, DeepSeekConfig


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / ".config" / "git-aicommit" / "config.toml"


class TestLoadConfig:

    def test_bootstraps_default_file(self, config_path):
        config = load_config(config_path)

        assert config_path.exists()
        assert config.deepseek.api_key == ""
        assert config.deepseek.temperature == pytest.approx(0.7)
        assert config.deepseek.prompt == SYSTEM_PROMPT.lstrip("\n")

    def test_existing_file_is_not_overwritten(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('[deepseek]\napi_key = "sk-123"\n', encoding="utf-8")

        config = load_config(config_path)

        assert config.deepseek.api_key == "sk-123"
        assert config.deepseek.temperature is None
        assert config.deepseek.prompt is None
        assert "sk-123" in config_path.read_text(encoding="utf-8")

    def test_missing_section_uses_defaults(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("", encoding="utf-8")

        assert load_config(config_path) == Config()

    def test_integer_temperature_accepted(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('[deepseek]\napi_key = "k"\ntemperature = 1\n', encoding="utf-8")

        assert load_config(config_path).deepseek.temperature == 1.0

    @pytest.mark.parametrize("value", ["nan", "inf", "-inf"])
    def test_non_finite_temperature_rejected(self, config_path, value):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(f'[deepseek]\napi_key = "k"\ntemperature = {value}\n', encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_invalid_toml(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("[deepseek\napi_key = ", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_wrong_value_type(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("[deepseek]\napi_key = 42\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            load_config(config_path)

    def test_create_default_config_returns_path(self, config_path):
        assert create_default_config(config_path) == config_path
        assert "[deepseek]" in config_path.read_text(encoding="utf-8")


class TestRequireApiKey:

    def test_returns_key(self):
        config = Config(deepseek=DeepSeekConfig(api_key="sk-abc"))
        assert require_api_key(config) == "sk-abc"

    @pytest.mark.parametrize("key", ["", "   "])
    def test_missing_key(self, key):
        with pytest.raises(MissingAPIKeyError):
            require_api_key(Config(deepseek=DeepSeekConfig(api_key=key)))

    def test_missing_key_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError):
            require_api_key(Config())
