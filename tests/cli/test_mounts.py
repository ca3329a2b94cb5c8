"""Tests for mount CLI commands"""

import json

from parcel.client.exceptions import BackendError, MountDeletionError, MountNotFoundError
from parcel_cli.main import cli


class TestMountsCommands:
    """Test suite for mount commands"""

    def test_mounts_list(self, cli_runner, mock_volume_manager, mock_mount):
        """Test listing mounts"""
        # Setup mock
        mock_volume_manager.list_mounts.return_value = [mock_mount]

        # Run command
        result = cli_runner.invoke(cli, ["--output", "json", "mounts", "list"])

        # Verify
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {
                "dataset_id": 42,
                "dataset_name": "Plant Genomes!",
                "volume": "parcel-pv-PlantGenomes-abc",
                "claim": "parcel-pv-PlantGenomes-abc-claim",
                "namespace": "default",
                "phase": "Bound",
            }
        ]

    def test_mounts_list_yaml(self, cli_runner, mock_volume_manager, mock_mount):
        """Test listing mounts as YAML"""
        # Setup mock
        mock_volume_manager.list_mounts.return_value = [mock_mount]

        # Run command
        result = cli_runner.invoke(cli, ["--output", "yaml", "mounts", "list"])

        # Verify
        assert result.exit_code == 0
        assert "- dataset_id: 42" in result.output
        assert "volume: parcel-pv-PlantGenomes-abc" in result.output

    def test_mounts_list_empty(self, cli_runner, mock_volume_manager):
        """Test listing mounts when none exist"""
        # Setup mock
        mock_volume_manager.list_mounts.return_value = []

        # Run command
        result = cli_runner.invoke(cli, ["mounts", "list"])

        # Verify
        assert result.exit_code == 0
        assert "No mounts found" in result.output

    def test_mounts_list_backend_error(self, cli_runner, mock_volume_manager):
        """Test listing mounts when the cluster cannot be reached"""
        # Setup mock
        mock_volume_manager.list_mounts.side_effect = BackendError("list", "PersistentVolume")

        # Run command
        result = cli_runner.invoke(cli, ["mounts", "list"])

        # Verify
        assert result.exit_code == 1
        assert "Failed to list mounts" in result.output

    def test_mounts_get(self, cli_runner, mock_volume_manager, mock_mount):
        """Test getting a mount with its driver details"""
        # Setup mock
        mock_volume_manager.get_mount.return_value = mock_mount

        # Run command
        result = cli_runner.invoke(
            cli, ["--output", "json", "mounts", "get", "parcel-pv-PlantGenomes-abc"]
        )

        # Verify
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["volume"] == "parcel-pv-PlantGenomes-abc"
        assert data["client"] == "irodsfuse"
        assert data["url"] == "irods://data.cyverse.org/iplant/home/shared/plant_genomes"
        mock_volume_manager.get_mount.assert_called_once_with("parcel-pv-PlantGenomes-abc")

    def test_mounts_get_not_found(self, cli_runner, mock_volume_manager):
        """Test getting a mount that does not exist"""
        # Setup mock
        mock_volume_manager.get_mount.side_effect = MountNotFoundError("parcel-pv-missing")

        # Run command
        result = cli_runner.invoke(cli, ["mounts", "get", "parcel-pv-missing"])

        # Verify
        assert result.exit_code == 1
        assert "Mount 'parcel-pv-missing' not found" in result.output

    def test_mounts_delete(self, cli_runner, mock_volume_manager):
        """Test deleting a mount with --yes"""
        # Run command
        result = cli_runner.invoke(cli, ["mounts", "delete", "parcel-pv-PlantGenomes-abc", "--yes"])

        # Verify
        assert result.exit_code == 0
        assert "deleted successfully" in result.output
        mock_volume_manager.delete_mount.assert_called_once_with("parcel-pv-PlantGenomes-abc")
        mock_volume_manager.close.assert_called_once()

    def test_mounts_return_confirmed(self, cli_runner, mock_volume_manager):
        """Test the return alias with interactive confirmation"""
        # Run command
        result = cli_runner.invoke(cli, ["mounts", "return", "parcel-pv-PlantGenomes-abc"], input="y\n")

        # Verify
        assert result.exit_code == 0
        mock_volume_manager.delete_mount.assert_called_once_with("parcel-pv-PlantGenomes-abc")

    def test_mounts_delete_cancelled(self, cli_runner, mock_volume_manager):
        """Test cancelling a deletion"""
        # Run command
        result = cli_runner.invoke(cli, ["mounts", "delete", "parcel-pv-PlantGenomes-abc"], input="n\n")

        # Verify
        assert result.exit_code == 0
        assert "Deletion cancelled" in result.output
        mock_volume_manager.delete_mount.assert_not_called()

    def test_mounts_delete_partial_failure(self, cli_runner, mock_volume_manager):
        """Test deleting a mount whose claim could not be deleted"""
        # Setup mock
        claim_error = BackendError(
            "delete", "PersistentVolumeClaim", name="parcel-pv-PlantGenomes-abc-claim"
        )
        mock_volume_manager.delete_mount.side_effect = MountDeletionError(
            "parcel-pv-PlantGenomes-abc", claim_error=claim_error
        )

        # Run command
        result = cli_runner.invoke(cli, ["mounts", "delete", "parcel-pv-PlantGenomes-abc", "--yes"])

        # Verify
        assert result.exit_code == 1
        assert "Failed to delete mount" in result.output
