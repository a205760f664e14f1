"""Tests for configuration loading and saving."""

from pathlib import Path

from task_tracker.config import Config, ConfigModel


class TestConfigModel:
    """Test the configuration model."""

    def test_defaults(self, config, tmp_path):
        assert config.data_file == "tasks.txt"
        assert config.display_datetime_format == "%b %d %Y %H:%M"
        assert config.get_data_path() == tmp_path / "tasks.txt"
        assert config.get_config_path() == tmp_path / "config.yaml"

    def test_expands_home(self):
        config = ConfigModel(data_dir="~/tasks")
        assert not config.data_dir.startswith("~")
        assert config.data_dir == str(Path.home() / "tasks")

    def test_yaml_round_trip(self, config):
        """Test serializing and deserializing config."""
        config.no_color = True
        config.log_level = "DEBUG"

        restored = ConfigModel.from_yaml(config.to_yaml())
        assert restored == config

    def test_unknown_keys_are_ignored(self, tmp_path, caplog):
        yaml_str = f"data_dir: {tmp_path}\nfavourite_colour: blue\n"

        with caplog.at_level("WARNING"):
            config = ConfigModel.from_yaml(yaml_str)

        assert config.data_dir == str(tmp_path)
        assert "favourite_colour" in caplog.text


class TestConfig:
    """Test the configuration manager."""

    def test_load_creates_default_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"

        config = Config.load(config_path)

        assert config_path.exists()
        assert isinstance(config, ConfigModel)

    def test_load_existing_file(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        Config.save(ConfigModel(data_dir=str(tmp_path), data_file="mine.txt"), config_path)

        config = Config.reload(config_path)
        assert config.data_file == "mine.txt"
        assert Config.get() is config

    def test_invalid_file_falls_back_to_defaults(self, tmp_path, caplog):
        """Test that a broken config file does not stop the application."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        with caplog.at_level("WARNING"):
            config = Config.load(config_path)

        assert config.data_file == "tasks.txt"
        assert "Failed to load config" in caplog.text
