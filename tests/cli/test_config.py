"""Tests for configuration handling"""

import json

import yaml
from parcel_cli.config import Config, Profile
from parcel_cli.main import cli


class TestProfile:
    """Test suite for configuration profiles"""

    def test_profile_defaults(self):
        """Test default profile values"""
        profile = Profile()

        assert profile.namespace == "default"
        assert profile.kubernetes_config_path is None
        assert profile.trace is False

    def test_profile_from_dict_ignores_unknown_keys(self):
        """Test building a profile from a file written by another version"""
        profile = Profile.from_dict({"namespace": "research", "color": "blue"})

        assert profile.namespace == "research"
        assert not hasattr(profile, "color")


class TestConfig:
    """Test suite for the configuration file"""

    def test_load_missing_file(self, config_file):
        """Test loading when no configuration file exists"""
        config = Config()

        assert not config.exists()
        assert list(config.profiles) == ["default"]

    def test_save_and_load(self, config_file):
        """Test that saved profiles are read back"""
        config = Config()
        config.add_profile("research", Profile(namespace="research", trace=True))
        config.set_default_profile("research")
        config.save()

        loaded = Config()

        assert loaded.exists()
        assert loaded.default_profile == "research"
        assert loaded.get_profile().namespace == "research"
        assert loaded.get_profile().trace is True

    def test_delete_default_profile(self, config_file):
        """Test deleting the default profile falls back to 'default'"""
        config = Config()
        config.set_default_profile("research")
        config.delete_profile("research")

        assert config.default_profile == "default"
        assert "default" in config.profiles


class TestConfigCommands:
    """Test suite for config commands"""

    def test_config_show(self, cli_runner):
        """Test showing the default profile"""
        result = cli_runner.invoke(cli, ["--output", "json", "config", "show"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["profile"] == "default"
        assert data["namespace"] == "default"

    def test_config_set(self, cli_runner, config_file):
        """Test saving a profile"""
        result = cli_runner.invoke(
            cli,
            [
                "config", "set",
                "--profile", "research",
                "--namespace", "research",
                "--catalog-url", "http://catalog.local:8080",
                "--trace",
                "--default",
            ],
        )

        assert result.exit_code == 0
        assert "Profile 'research' saved" in result.output
        data = yaml.safe_load(config_file.read_text())
        assert data["default_profile"] == "research"
        assert data["profiles"]["research"]["namespace"] == "research"
        assert data["profiles"]["research"]["catalog_service_url"] == "http://catalog.local:8080"
        assert data["profiles"]["research"]["trace"] is True

    def test_profile_settings_used(self, cli_runner, config_file, mock_volume_manager, mocker):
        """Test that commands pick up the default profile"""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            yaml.safe_dump(
                {
                    "default_profile": "research",
                    "profiles": {
                        "research": {
                            "namespace": "research",
                            "kubernetes_config_path": "/etc/parcel/kubeconfig",
                        }
                    },
                }
            )
        )
        mock_volume_manager.list_mounts.return_value = []
        mock_get = mocker.patch("parcel.get_volume_manager", return_value=mock_volume_manager)

        result = cli_runner.invoke(cli, ["mounts", "list"])

        assert result.exit_code == 0
        mock_get.assert_called_once_with(
            kubernetes_config_path="/etc/parcel/kubeconfig", namespace="research"
        )

    def test_environment_overrides_profile(self, cli_runner, config_file, mock_volume_manager, mocker):
        """Test that PARCEL_* variables override the profile"""
        config_file.parent.mkdir(parents=True)
        config_file.write_text(
            yaml.safe_dump({"profiles": {"default": {"namespace": "research"}}})
        )
        mock_volume_manager.list_mounts.return_value = []
        mock_get = mocker.patch("parcel.get_volume_manager", return_value=mock_volume_manager)

        result = cli_runner.invoke(cli, ["mounts", "list"], env={"PARCEL_NAMESPACE": "staging"})

        assert result.exit_code == 0
        assert mock_get.call_args.kwargs["namespace"] == "staging"

    def test_option_overrides_environment(self, cli_runner, mock_volume_manager, mocker):
        """Test that command-line options override PARCEL_* variables"""
        mock_volume_manager.list_mounts.return_value = []
        mock_get = mocker.patch("parcel.get_volume_manager", return_value=mock_volume_manager)

        result = cli_runner.invoke(
            cli,
            ["--namespace", "cli-ns", "mounts", "list"],
            env={"PARCEL_NAMESPACE": "staging"},
        )

        assert result.exit_code == 0
        assert mock_get.call_args.kwargs["namespace"] == "cli-ns"

    def test_invalid_config_file(self, cli_runner, config_file, mock_volume_manager):
        """Test that a broken configuration file is reported"""
        config_file.parent.mkdir(parents=True)
        config_file.write_text("profiles: [unterminated")

        result = cli_runner.invoke(cli, ["mounts", "list"])

        assert result.exit_code == 1
        assert "Failed to load configuration" in result.output
        mock_volume_manager.list_mounts.assert_not_called()
