"""Dataset catalog commands"""

import click
from parcel_cli.clients import get_catalog_api, get_volume_manager
from parcel_cli.output import OutputFormatter, print_success, print_error, print_warning
from parcel_cli.utils.exceptions import DatasetNotFoundError, InvalidDatasetIdError


@click.group()
def datasets():
    """Browse the dataset catalog and order datasets"""
    pass


def _dataset_data(dataset, short):
    return {
        "id": dataset.id,
        "name": dataset.name,
        "url": dataset.url,
        "description": dataset.short_description() if short else dataset.description,
    }


def _print_datasets(ctx, datasets_list, short):
    if not datasets_list:
        print("No datasets found")
        return

    datasets_data = [_dataset_data(ds, short) for ds in datasets_list]

    formatter = OutputFormatter()
    output = formatter.format(datasets_data, ctx.obj["output_format"])
    click.echo(output)


@datasets.command("list")
@click.option("--short", is_flag=True, help="Truncate long descriptions")
@click.pass_context
def list_datasets(ctx, short):
    """List available datasets"""
    try:
        catalog_api = get_catalog_api(ctx)
        _print_datasets(ctx, catalog_api.get_all_datasets(), short or ctx.obj.get("short"))

    except Exception as e:
        print_error(f"Failed to list datasets: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


@datasets.command("search")
@click.argument("keywords", nargs=-1, required=True)
@click.option("--short", is_flag=True, help="Truncate long descriptions")
@click.pass_context
def search_datasets(ctx, keywords, short):
    """Search datasets by keywords (at least 4 characters each)"""
    try:
        catalog_api = get_catalog_api(ctx)
        _print_datasets(ctx, catalog_api.search_datasets(list(keywords)), short or ctx.obj.get("short"))

    except Exception as e:
        print_error(f"Failed to search datasets: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


@datasets.command("order")
@click.argument("ids", nargs=-1, required=True)
@click.option("--skip-existing", is_flag=True, help="Do not order datasets that are already mounted")
@click.pass_context
def order_datasets(ctx, ids, skip_existing):
    """Order datasets, creating a persistent volume and claim for each"""
    try:
        invalid = [i for i in ids if not i.isdigit()]
        if invalid:
            raise InvalidDatasetIdError(invalid)

        catalog_api = get_catalog_api(ctx)
        datasets_list = catalog_api.select_datasets(ids)

        found_ids = {str(ds.id) for ds in datasets_list}
        for dataset_id in ids:
            if dataset_id not in found_ids:
                print_warning(f"Dataset '{dataset_id}' not found in the catalog")

        if not datasets_list:
            raise DatasetNotFoundError(ids)

        volume_manager = get_volume_manager(ctx)
        volume_manager.ensure_storage_class()

        click.echo(f"Ordering {len(datasets_list)} datasets...")
        mounts_data = []
        for dataset in datasets_list:
            if skip_existing:
                existing = volume_manager.get_mounts_for_dataset(dataset.id)
                if existing:
                    print_warning(
                        f"[{dataset.id}] {dataset.name} is already mounted by volume({existing[0].volume_name})"
                    )
                    mounts_data.append(existing[0].to_dict())
                    continue

            mount = volume_manager.create_volume_for(dataset)
            print_success(
                f"[{dataset.id}] {dataset.name} => volume({mount.volume_name}) claim({mount.claim_name})"
            )
            mounts_data.append(mount.to_dict())

        formatter = OutputFormatter()
        output = formatter.format(mounts_data, ctx.obj["output_format"])
        click.echo(output)

    except Exception as e:
        print_error(f"Failed to order datasets: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


datasets.add_command(search_datasets, name="find")
datasets.add_command(order_datasets, name="mount")
