"""Parcel CLI - Main entry point"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

import parcel
from parcel import constants, util
from parcel_cli.config import Config
from parcel_cli.commands.configure import configure
from parcel_cli.commands.datasets import datasets, list_datasets, search_datasets, order_datasets
from parcel_cli.commands.mounts import mounts
from parcel_cli.output import print_error


def setup_logging(verbose: bool, trace: bool):
    """Route library logging through rich on stderr"""
    if verbose:
        level = logging.DEBUG
    elif trace:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(version=parcel.__version__, prog_name="parcel")
@click.option(
    "--catalog-url",
    envvar="PARCEL_CATALOG_URL",
    help=f"Catalog service URL [default: {constants.CATALOG_SERVICE_URL}]",
)
@click.option(
    "--namespace",
    envvar="PARCEL_NAMESPACE",
    help=f"Namespace of the persistent volume claims [default: {constants.VOLUME_NAMESPACE}]",
)
@click.option(
    "--kubeconfig",
    envvar="PARCEL_KUBECONFIG",
    type=click.Path(dir_okay=False),
    help="Path to a kubeconfig file [default: ~/.kube/config]",
)
@click.option(
    "--profile",
    envvar="PARCEL_PROFILE",
    help="Configuration profile name",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Trace communication with the catalog service",
)
@click.option(
    "--short",
    is_flag=True,
    help="Print short dataset descriptions",
)
@click.option(
    "--output",
    "output_format",
    type=click.Choice(["json", "table", "yaml"], case_sensitive=False),
    default="table",
    help="Output format [default: table]",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable verbose output with full stack traces",
)
@click.pass_context
def cli(
    ctx,
    catalog_url,
    namespace,
    kubeconfig,
    profile,
    trace,
    short,
    output_format,
    verbose,
):
    """
    Parcel CLI - Mount catalog datasets as Kubernetes persistent volumes

    \b
    Examples:
      # Search the catalog
      parcel search genome

      # Order datasets 42 and 43 into namespace "research"
      parcel --namespace research order 42 43

      # List and return mounts
      parcel mounts list
      parcel mounts return parcel-pv-PlantGenomes-... --yes

    \b
    Configuration:
      The CLI can be configured using:
      1. Command-line arguments (highest priority)
      2. Environment variables (PARCEL_*)
      3. Configuration file (~/.parcel/config.yaml)
      4. Default values (lowest priority)
    """
    # Initialize context object
    ctx.ensure_object(dict)

    try:
        config = Config()
        profile_obj = config.get_profile(profile)
    except Exception as e:
        print_error(f"Failed to load configuration: {e}")
        sys.exit(1)

    # CLI args override profile settings
    catalog_url = catalog_url or profile_obj.catalog_service_url or constants.CATALOG_SERVICE_URL
    namespace = namespace or profile_obj.namespace or constants.VOLUME_NAMESPACE
    kubeconfig = kubeconfig or profile_obj.kubernetes_config_path or util.get_home_kubernetes_config_path()
    trace = trace or profile_obj.trace

    setup_logging(verbose, trace)

    # Store configuration in context
    ctx.obj["config"] = config
    ctx.obj["profile"] = profile
    ctx.obj["catalog_service_url"] = catalog_url
    ctx.obj["namespace"] = namespace
    ctx.obj["kubernetes_config_path"] = kubeconfig
    ctx.obj["trace"] = trace
    ctx.obj["short"] = short
    ctx.obj["output_format"] = output_format.lower()
    ctx.obj["verbose"] = verbose


@cli.command("version")
def version():
    """Print version information as JSON"""
    click.echo(json.dumps(parcel.get_version_info(), indent=2))


# Register command groups
cli.add_command(datasets)
cli.add_command(mounts)
cli.add_command(configure)

# Shortcuts for the catalog commands
cli.add_command(list_datasets, name="list")
cli.add_command(search_datasets, name="search")
cli.add_command(search_datasets, name="find")
cli.add_command(order_datasets, name="order")
cli.add_command(order_datasets, name="mount")


def main():
    """Entry point for the CLI"""
    try:
        cli(obj={})
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
