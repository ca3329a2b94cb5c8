#
#   Copyright 2026 Hopsworks AB
#
#   Licensed under the Apache License, Version 2.0 (the "License");
#   you may not use this file except in compliance with the License.
#   You may obtain a copy of the License at
#
#       http://www.apache.org/licenses/LICENSE-2.0
#
#   Unless required by applicable law or agreed to in writing, software
#   distributed under the License is distributed on an "AS IS" BASIS,
#   WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#   See the License for the specific language governing permissions and
#   limitations under the License.
#
from __future__ import annotations

import platform
from typing import Optional

from parcel import constants, version
from parcel.core.catalog_api import CatalogApi
from parcel.core.volume_api import VolumeManager
from parcel.dataset import Dataset
from parcel.mount import DatasetMount


__version__ = version.__version__

__all__ = [
    "CatalogApi",
    "Dataset",
    "DatasetMount",
    "VolumeManager",
    "get_catalog_api",
    "get_version_info",
    "get_volume_manager",
]


def get_catalog_api(
    catalog_service_url: str = constants.CATALOG_SERVICE_URL, trace: bool = False
) -> CatalogApi:
    """Get a client for the dataset catalog service.

    ```python
    import parcel

    catalog = parcel.get_catalog_api("http://catalog.example.org:8080")
    datasets = catalog.search_datasets(["genome"])
    ```

    # Arguments
        catalog_service_url: Base URL of the catalog service.
        trace: Log every catalog response.
    # Returns
        `CatalogApi`
    """
    return CatalogApi(catalog_service_url, trace=trace)


def get_volume_manager(
    kubernetes_config_path: Optional[str] = None,
    namespace: str = constants.VOLUME_NAMESPACE,
) -> VolumeManager:
    """Get a volume manager connected to a Kubernetes cluster.

    ```python
    import parcel

    manager = parcel.get_volume_manager(namespace="datasets")
    manager.ensure_storage_class()
    mount = manager.create_volume_for(dataset)
    ```

    # Arguments
        kubernetes_config_path: Path to a kubeconfig file, defaults to `~/.kube/config`.
        namespace: Namespace of the persistent volume claims.
    # Returns
        `VolumeManager`
    # Raises
        `parcel.client.exceptions.BackendError`: If the kubeconfig cannot be loaded
    """
    return VolumeManager(namespace=namespace, kubernetes_config_path=kubernetes_config_path)


def get_version_info() -> dict:
    return {
        "version": version.__version__,
        "git_commit": version.__git_commit__,
        "build_date": version.__build_date__,
        "python_version": platform.python_version(),
    }
