"""Library client construction for CLI commands"""

import parcel
from parcel.core.catalog_api import CatalogApi
from parcel.core.volume_api import VolumeManager


def get_catalog_api(ctx) -> CatalogApi:
    """
    Get a catalog API client using context parameters

    # Arguments
        ctx: Click context object

    # Returns
        CatalogApi object
    """
    catalog_api = parcel.get_catalog_api(
        ctx.obj["catalog_service_url"], trace=ctx.obj.get("trace", False)
    )
    ctx.call_on_close(catalog_api.close)
    return catalog_api


def get_volume_manager(ctx) -> VolumeManager:
    """
    Get a volume manager using context parameters

    # Arguments
        ctx: Click context object

    # Returns
        VolumeManager object

    # Raises
        BackendError: If the kubernetes configuration cannot be loaded
    """
    volume_manager = parcel.get_volume_manager(
        kubernetes_config_path=ctx.obj.get("kubernetes_config_path"),
        namespace=ctx.obj["namespace"],
    )
    ctx.call_on_close(volume_manager.close)
    return volume_manager
