"""
Unit tests for configuration loading.
"""
import pytest

from reply_auto.config.settings import OPENAI_CHAT_COMPLETIONS_URL, AppConfig, load_config, load_environment
from reply_auto.errors import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("OPENAI_API_KEY", "OPENAI_API_URL", "OPENAI_REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoadConfig:
    """Tests for reading the environment."""

    def test_defaults(self, clean_env):
        """Test configuration with nothing set."""
        config = load_config()

        assert config.openai_api_key == ""
        assert config.has_api_key is False
        assert config.api_url == OPENAI_CHAT_COMPLETIONS_URL
        assert config.request_timeout is None

    def test_reads_values(self, clean_env):
        """Test that environment values are picked up."""
        clean_env.setenv("OPENAI_API_KEY", " sk-live ")
        clean_env.setenv("OPENAI_API_URL", "http://proxy.local/v1/chat/completions")
        clean_env.setenv("OPENAI_REQUEST_TIMEOUT", "12.5")

        config = load_config()

        assert config.openai_api_key == "sk-live"
        assert config.api_url == "http://proxy.local/v1/chat/completions"
        assert config.request_timeout == 12.5

    @pytest.mark.parametrize("value", ["soon", "0", "-3"])
    def test_invalid_timeout(self, clean_env, value):
        """Test that a bad timeout is a configuration error."""
        clean_env.setenv("OPENAI_REQUEST_TIMEOUT", value)

        with pytest.raises(ConfigurationError):
            load_config()


class TestApiKey:
    """Tests for the explicit presence check."""

    def test_require_api_key(self):
        assert AppConfig(openai_api_key="abc").require_api_key() == "abc"

    def test_require_api_key_missing(self):
        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig().require_api_key()

        assert exc_info.value.user_message == "OpenAI API key not configured"


class TestLoadEnvironment:
    """Tests for .env loading."""

    def test_loads_dotenv_file(self, clean_env, tmp_path):
        """Test that values from the .env file reach the environment."""
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=from-file\n")

        load_environment(str(env_file))

        assert load_config().openai_api_key == "from-file"

    def test_existing_env_wins(self, clean_env, tmp_path):
        """Test that the host environment is not overridden."""
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=from-file\n")
        clean_env.setenv("OPENAI_API_KEY", "from-host")

        load_environment(str(env_file))

        assert load_config().openai_api_key == "from-host"
