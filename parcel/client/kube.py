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

import logging
from typing import Any, Callable, List, Optional

import urllib3
from kubernetes import client as k8s_client
from kubernetes import config as k8s_config
from kubernetes.client.rest import ApiException
from parcel.client import exceptions


_logger = logging.getLogger(__name__)


class Client:
    """Thin wrapper around the Kubernetes API used as the control plane.

    Persistent volumes and storage classes are cluster-scoped, persistent
    volume claims are namespaced. Every failure is raised as
    `parcel.client.exceptions.BackendError`.
    """

    STORAGE_CLASS = "StorageClass"
    PERSISTENT_VOLUME = "PersistentVolume"
    PERSISTENT_VOLUME_CLAIM = "PersistentVolumeClaim"

    def __init__(
        self,
        config_path: Optional[str] = None,
        context: Optional[str] = None,
        api_client: Optional[k8s_client.ApiClient] = None,
    ):
        if api_client is None:
            _logger.debug("Loading kubernetes configuration from %s", config_path)
            try:
                api_client = k8s_config.new_client_from_config(
                    config_file=config_path, context=context
                )
            except (k8s_config.ConfigException, OSError) as e:
                raise exceptions.BackendError(
                    "load configuration for",
                    "cluster",
                    name=config_path,
                    cause=e,
                ) from e
        self._api_client = api_client
        self._core_api = k8s_client.CoreV1Api(api_client)
        self._storage_api = k8s_client.StorageV1Api(api_client)

    def _call(
        self,
        operation: str,
        kind: str,
        fn: Callable[..., Any],
        *args,
        name: Optional[str] = None,
        namespace: Optional[str] = None,
        **kwargs,
    ) -> Any:
        _logger.debug(
            "%s %s name=%s namespace=%s", operation, kind, name, namespace
        )
        try:
            return fn(*args, **kwargs)
        except (ApiException, urllib3.exceptions.HTTPError) as e:
            raise exceptions.BackendError(
                operation, kind, name=name, namespace=namespace, cause=e
            ) from e

    # storage classes

    def list_storage_classes(self) -> List[k8s_client.V1StorageClass]:
        return self._call(
            "list", self.STORAGE_CLASS, self._storage_api.list_storage_class
        ).items

    def create_storage_class(
        self, storage_class: k8s_client.V1StorageClass
    ) -> k8s_client.V1StorageClass:
        return self._call(
            "create",
            self.STORAGE_CLASS,
            self._storage_api.create_storage_class,
            storage_class,
            name=storage_class.metadata.name,
        )

    # persistent volumes

    def list_persistent_volumes(self) -> List[k8s_client.V1PersistentVolume]:
        return self._call(
            "list", self.PERSISTENT_VOLUME, self._core_api.list_persistent_volume
        ).items

    def get_persistent_volume(self, name: str) -> k8s_client.V1PersistentVolume:
        return self._call(
            "get",
            self.PERSISTENT_VOLUME,
            self._core_api.read_persistent_volume,
            name,
            name=name,
        )

    def create_persistent_volume(
        self, volume: k8s_client.V1PersistentVolume
    ) -> k8s_client.V1PersistentVolume:
        return self._call(
            "create",
            self.PERSISTENT_VOLUME,
            self._core_api.create_persistent_volume,
            volume,
            name=volume.metadata.name,
        )

    def delete_persistent_volume(self, name: str) -> None:
        self._call(
            "delete",
            self.PERSISTENT_VOLUME,
            self._core_api.delete_persistent_volume,
            name,
            name=name,
        )

    # persistent volume claims

    def list_persistent_volume_claims(
        self, namespace: str
    ) -> List[k8s_client.V1PersistentVolumeClaim]:
        return self._call(
            "list",
            self.PERSISTENT_VOLUME_CLAIM,
            self._core_api.list_namespaced_persistent_volume_claim,
            namespace,
            namespace=namespace,
        ).items

    def get_persistent_volume_claim(
        self, name: str, namespace: str
    ) -> k8s_client.V1PersistentVolumeClaim:
        return self._call(
            "get",
            self.PERSISTENT_VOLUME_CLAIM,
            self._core_api.read_namespaced_persistent_volume_claim,
            name,
            namespace,
            name=name,
            namespace=namespace,
        )

    def create_persistent_volume_claim(
        self, claim: k8s_client.V1PersistentVolumeClaim, namespace: str
    ) -> k8s_client.V1PersistentVolumeClaim:
        return self._call(
            "create",
            self.PERSISTENT_VOLUME_CLAIM,
            self._core_api.create_namespaced_persistent_volume_claim,
            namespace,
            claim,
            name=claim.metadata.name,
            namespace=namespace,
        )

    def delete_persistent_volume_claim(self, name: str, namespace: str) -> None:
        self._call(
            "delete",
            self.PERSISTENT_VOLUME_CLAIM,
            self._core_api.delete_namespaced_persistent_volume_claim,
            name,
            namespace,
            name=name,
            namespace=namespace,
        )

    def _close(self):
        self._api_client.close()
