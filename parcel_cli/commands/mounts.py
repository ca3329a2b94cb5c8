"""Dataset mount commands"""

import click
from parcel.client.exceptions import MountNotFoundError
from parcel_cli.clients import get_volume_manager
from parcel_cli.output import OutputFormatter, print_success, print_error
from parcel_cli.utils.exceptions import UnknownMountError


@click.group()
def mounts():
    """Manage ordered dataset mounts"""
    pass


@mounts.command("list")
@click.pass_context
def list_mounts(ctx):
    """List all dataset mounts in the namespace"""
    try:
        volume_manager = get_volume_manager(ctx)
        mounts_list = volume_manager.list_mounts()

        if not mounts_list:
            print("No mounts found")
            return

        formatter = OutputFormatter()
        output = formatter.format([m.to_dict() for m in mounts_list], ctx.obj["output_format"])
        click.echo(output)

    except Exception as e:
        print_error(f"Failed to list mounts: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


@mounts.command("get")
@click.argument("volume_name")
@click.pass_context
def get_mount(ctx, volume_name):
    """Get details of the mount backed by a volume"""
    try:
        volume_manager = get_volume_manager(ctx)
        try:
            mount = volume_manager.get_mount(volume_name)
        except MountNotFoundError as e:
            raise UnknownMountError(volume_name, e) from e

        mount_data = mount.to_dict()
        csi = mount.volume.spec.csi if mount.volume.spec is not None else None
        if csi is not None and csi.volume_attributes:
            mount_data["client"] = csi.volume_attributes.get("client")
            mount_data["url"] = csi.volume_attributes.get("url")

        formatter = OutputFormatter()
        output = formatter.format(mount_data, ctx.obj["output_format"])
        click.echo(output)

    except Exception as e:
        print_error(f"Failed to get mount: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


@mounts.command("delete")
@click.argument("volume_name")
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_mount(ctx, volume_name, yes):
    """Return a dataset, deleting its claim and then its volume"""
    try:
        if not yes:
            if not click.confirm(f"Are you sure you want to delete mount '{volume_name}'?"):
                click.echo("Deletion cancelled")
                return

        volume_manager = get_volume_manager(ctx)
        volume_manager.delete_mount(volume_name)

        print_success(f"Mount '{volume_name}' deleted successfully")

    except Exception as e:
        print_error(f"Failed to delete mount: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


mounts.add_command(delete_mount, name="return")
