"""Pytest fixtures for CLI tests"""

import pytest
from unittest.mock import Mock
from click.testing import CliRunner
from kubernetes import client as k8s_client

from parcel.dataset import Dataset
from parcel.mount import DatasetMount


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner"""
    return CliRunner()


@pytest.fixture(autouse=True)
def config_file(tmp_path, mocker, monkeypatch):
    """Point the CLI at an empty configuration file and a clean environment"""
    for var in ["PARCEL_CATALOG_URL", "PARCEL_NAMESPACE", "PARCEL_KUBECONFIG", "PARCEL_PROFILE"]:
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "parcel" / "config.yaml"
    mocker.patch("parcel_cli.config.CONFIG_FILE", path)
    return path


@pytest.fixture(autouse=True)
def mock_basic_config(mocker):
    """Keep the CLI logging setup away from the test process root logger"""
    return mocker.patch("logging.basicConfig")


@pytest.fixture
def mock_catalog_api(mocker):
    """Mock catalog API"""
    catalog_api = Mock()
    mocker.patch("parcel.get_catalog_api", return_value=catalog_api)
    return catalog_api


@pytest.fixture
def mock_volume_manager(mocker):
    """Mock volume manager"""
    volume_manager = Mock()
    volume_manager.ensure_storage_class.return_value = False
    volume_manager.get_mounts_for_dataset.return_value = []
    mocker.patch("parcel.get_volume_manager", return_value=volume_manager)
    return volume_manager


@pytest.fixture
def catalog_datasets():
    """Datasets as returned by the catalog service"""
    return [
        Dataset(
            id=42,
            name="Plant Genomes!",
            url="irods://data.cyverse.org/iplant/home/shared/plant_genomes",
            description="Reference genome assemblies. " * 20,
        ),
        Dataset(
            id=7,
            name="Ocean Temperature",
            url="https://data.example.org/webdav/ocean/temperature",
            description="Daily sea surface temperature grids.",
        ),
    ]


def _make_mount(dataset, volume_name, namespace="default", url=None, client="irodsfuse"):
    volume = k8s_client.V1PersistentVolume(
        metadata=k8s_client.V1ObjectMeta(name=volume_name),
        spec=k8s_client.V1PersistentVolumeSpec(
            csi=k8s_client.V1CSIPersistentVolumeSource(
                driver="parcel.csi.iychoi",
                volume_handle=f"{volume_name}-handle",
                volume_attributes={"client": client, "url": url or dataset.url, "user": "anonymous"},
            )
        ),
    )
    claim = k8s_client.V1PersistentVolumeClaim(
        metadata=k8s_client.V1ObjectMeta(name=f"{volume_name}-claim", namespace=namespace),
        status=k8s_client.V1PersistentVolumeClaimStatus(phase="Bound"),
    )
    return DatasetMount(dataset, volume, claim)


@pytest.fixture
def make_mount():
    """Build a mount the way the control plane returns it"""
    return _make_mount


@pytest.fixture
def mock_mount(catalog_datasets):
    """Mount of the first catalog dataset"""
    return _make_mount(catalog_datasets[0], "parcel-pv-PlantGenomes-abc")
