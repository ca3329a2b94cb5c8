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
from typing import List, Optional, Union

from parcel import constants, util
from parcel.client import exceptions, kube
from parcel.core import labels, volume_builder
from parcel.dataset import Dataset
from parcel.mount import DatasetMount


_logger = logging.getLogger(__name__)


class VolumeManager:
    """Creates, lists and returns dataset mounts on a Kubernetes cluster.

    The cluster is the only store: the association between a dataset and its
    volume lives in the labels of the persistent volume and its claim. Claims
    are created in `namespace`, volumes and the storage class are
    cluster-scoped.

    None of the multi-object operations are atomic. A failure half-way is
    raised as `PartialMountError` or `MountDeletionError` and the objects
    created or left behind are not cleaned up.
    """

    def __init__(
        self,
        namespace: str = constants.VOLUME_NAMESPACE,
        kubernetes_config_path: Optional[str] = None,
        client: Optional[kube.Client] = None,
    ):
        if client is None:
            client = kube.Client(
                config_path=kubernetes_config_path
                or util.get_home_kubernetes_config_path()
            )
        self._client = client
        self._namespace = namespace or constants.VOLUME_NAMESPACE

    @property
    def namespace(self) -> str:
        return self._namespace

    def close(self):
        self._client._close()

    def ensure_storage_class(self) -> bool:
        """Create the parcel storage class unless it already exists.

        # Returns
            `bool`: `True` if the storage class was created, `False` if it existed
        # Raises
            `parcel.client.exceptions.BackendError`: If a control-plane call fails
        """
        storage_class = volume_builder.build_storage_class()
        name = storage_class.metadata.name

        for existing in self._client.list_storage_classes():
            if existing.metadata is not None and existing.metadata.name == name:
                _logger.debug("Storage class %s already exists", name)
                return False

        self._client.create_storage_class(storage_class)
        _logger.info("Created storage class %s", name)
        return True

    def create_volume_for(self, dataset: Dataset) -> DatasetMount:
        """Create a persistent volume and its claim exposing `dataset`.

        Every call creates a new volume with a freshly generated name, even
        for a dataset that is already mounted.

        # Arguments
            dataset: Catalog dataset to mount.
        # Returns
            `DatasetMount`: The dataset with the created volume and claim
        # Raises
            `parcel.client.exceptions.DatasetException`: If the dataset URL is malformed or unsupported,
                nothing is created in that case
            `parcel.client.exceptions.PartialMountError`: If the volume was created but the claim was not
            `parcel.client.exceptions.BackendError`: If the volume creation fails
        """
        volume_name = labels.generate_volume_name(dataset)
        volume = volume_builder.build_volume(dataset, volume_name)
        claim = volume_builder.build_claim(dataset, volume_name)

        created_volume = self._client.create_persistent_volume(volume)
        _logger.info("Created persistent volume %s", volume_name)

        try:
            created_claim = self._client.create_persistent_volume_claim(
                claim, self._namespace
            )
        except exceptions.BackendError as e:
            raise exceptions.PartialMountError(created_volume, e) from e
        _logger.info(
            "Created persistent volume claim %s in namespace %s",
            claim.metadata.name,
            self._namespace,
        )

        return DatasetMount(dataset, created_volume, created_claim)

    def list_mounts(self) -> List[DatasetMount]:
        """List the dataset mounts found on the cluster.

        Volumes whose labels cannot be decoded and volumes without a claim in
        the namespace are left out.

        # Returns
            `List[DatasetMount]`: Mounts, in the order the volumes are listed
        # Raises
            `parcel.client.exceptions.BackendError`: If listing volumes or claims fails
        """
        volumes = self._client.list_persistent_volumes()
        claims = self._client.list_persistent_volume_claims(self._namespace)

        mounts = []
        for volume in volumes:
            if not labels.recognize_managed(volume):
                continue

            volume_name = volume.metadata.name
            try:
                dataset = labels.decode_dataset(volume.metadata.labels)
            except exceptions.MissingLabelError as e:
                _logger.warning("Skipping persistent volume %s: %s", volume_name, e)
                continue

            claim = next(
                (c for c in claims if labels.references_volume(c, volume_name)),
                None,
            )
            if claim is None:
                _logger.debug("Persistent volume %s has no claim", volume_name)
                continue

            mounts.append(DatasetMount(dataset, volume, claim))
        return mounts

    def get_mounts_for_dataset(self, dataset_id: Union[int, str]) -> List[DatasetMount]:
        """List the mounts of one dataset."""
        return [m for m in self.list_mounts() if str(m.dataset.id) == str(dataset_id)]

    def get_mount(self, volume_name: str) -> DatasetMount:
        """Get the mount backed by the volume `volume_name`.

        # Arguments
            volume_name: Name of the persistent volume.
        # Returns
            `DatasetMount`: The mount
        # Raises
            `parcel.client.exceptions.MountNotFoundError`: If the volume or its claim does not exist
            `parcel.client.exceptions.MissingLabelError`: If the volume labels do not identify a dataset
            `parcel.client.exceptions.BackendError`: If a control-plane call fails
        """
        try:
            volume = self._client.get_persistent_volume(volume_name)
        except exceptions.BackendError as e:
            if e.is_not_found:
                raise exceptions.MountNotFoundError(volume_name) from e
            raise

        if volume.metadata is None or volume.metadata.name != volume_name:
            raise exceptions.MountNotFoundError(
                volume_name, f"Could not find pv with name {volume_name}"
            )

        claim_name = labels.claim_name_for(volume_name)
        try:
            claim = self._client.get_persistent_volume_claim(
                claim_name, self._namespace
            )
        except exceptions.BackendError as e:
            if e.is_not_found:
                raise exceptions.MountNotFoundError(
                    volume_name, f"Could not find pvc with name {claim_name}"
                ) from e
            raise

        if not labels.references_volume(claim, volume_name):
            raise exceptions.MountNotFoundError(
                volume_name,
                f"Persistent volume claim {claim_name} does not reference {volume_name}",
            )

        dataset = labels.decode_dataset(volume.metadata.labels)
        return DatasetMount(dataset, volume, claim)

    def delete_mount(self, volume_name: str) -> None:
        """Delete the claim and then the volume of a mount.

        The volume delete is attempted even if the claim delete fails.

        # Arguments
            volume_name: Name of the persistent volume.
        # Raises
            `parcel.client.exceptions.MountDeletionError`: If either delete fails
        """
        claim_name = labels.claim_name_for(volume_name)
        claim_error = None
        volume_error = None

        try:
            self._client.delete_persistent_volume_claim(claim_name, self._namespace)
            _logger.info(
                "Deleted persistent volume claim %s in namespace %s",
                claim_name,
                self._namespace,
            )
        except exceptions.BackendError as e:
            _logger.warning("Failed to delete persistent volume claim %s: %s", claim_name, e)
            claim_error = e

        try:
            self._client.delete_persistent_volume(volume_name)
            _logger.info("Deleted persistent volume %s", volume_name)
        except exceptions.BackendError as e:
            volume_error = e

        if claim_error is not None or volume_error is not None:
            raise exceptions.MountDeletionError(volume_name, claim_error, volume_error)
