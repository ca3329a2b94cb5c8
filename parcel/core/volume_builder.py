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

from kubernetes import client as k8s_client
from parcel.constants import CSI, VOLUME
from parcel.core import labels, scheme
from parcel.dataset import Dataset


def build_storage_class() -> k8s_client.V1StorageClass:
    """Storage class served by the parcel CSI driver."""
    return k8s_client.V1StorageClass(
        api_version="storage.k8s.io/v1",
        kind="StorageClass",
        metadata=k8s_client.V1ObjectMeta(name=CSI.STORAGE_CLASS_NAME),
        provisioner=CSI.DRIVER_NAME,
    )


def build_volume(dataset: Dataset, volume_name: str) -> k8s_client.V1PersistentVolume:
    """Build the persistent volume exposing a dataset.

    The reclaim policy is `Retain`: deleting the claim never removes the
    volume, volumes are only removed through `VolumeManager.delete_mount`.

    # Raises
        `parcel.client.exceptions.MalformedURLError`: If the dataset URL cannot be parsed.
        `parcel.client.exceptions.UnsupportedSchemeError`: If no driver serves the URL scheme.
    """
    driver = scheme.resolve_driver(dataset.url)

    return k8s_client.V1PersistentVolume(
        api_version="v1",
        kind="PersistentVolume",
        metadata=k8s_client.V1ObjectMeta(
            name=volume_name,
            labels=labels.encode_labels(dataset, volume_name),
        ),
        spec=k8s_client.V1PersistentVolumeSpec(
            capacity={"storage": VOLUME.DEFAULT_CAPACITY},
            volume_mode=VOLUME.VOLUME_MODE,
            access_modes=[VOLUME.ACCESS_MODE],
            persistent_volume_reclaim_policy=VOLUME.RECLAIM_POLICY,
            storage_class_name=CSI.STORAGE_CLASS_NAME,
            csi=k8s_client.V1CSIPersistentVolumeSource(
                driver=CSI.DRIVER_NAME,
                volume_handle=labels.volume_handle_for(volume_name),
                volume_attributes={
                    "client": driver,
                    "url": dataset.url,
                    "user": VOLUME.ANONYMOUS_USER,
                },
            ),
        ),
    )


def build_claim(
    dataset: Dataset, volume_name: str
) -> k8s_client.V1PersistentVolumeClaim:
    """Build the claim bound to the volume `volume_name`.

    The selector matches the full label set of the volume so the claim can
    only bind to it.
    """
    claim_labels = labels.encode_labels(dataset, volume_name)

    return k8s_client.V1PersistentVolumeClaim(
        api_version="v1",
        kind="PersistentVolumeClaim",
        metadata=k8s_client.V1ObjectMeta(
            name=labels.claim_name_for(volume_name),
            labels=claim_labels,
        ),
        spec=k8s_client.V1PersistentVolumeClaimSpec(
            access_modes=[VOLUME.ACCESS_MODE],
            storage_class_name=CSI.STORAGE_CLASS_NAME,
            selector=k8s_client.V1LabelSelector(match_labels=dict(claim_labels)),
            resources=k8s_client.V1VolumeResourceRequirements(
                requests={"storage": VOLUME.DEFAULT_CAPACITY}
            ),
        ),
    )
