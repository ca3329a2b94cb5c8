"""Configuration commands"""

import click
from parcel_cli.output import OutputFormatter, print_success, print_error


@click.group("config")
def configure():
    """Show and edit the configuration file"""
    pass


@configure.command("show")
@click.option("--profile", "profile_name", help="Profile to show (defaults to the active profile)")
@click.pass_context
def show_config(ctx, profile_name):
    """Show a configuration profile"""
    try:
        config = ctx.obj["config"]
        name = profile_name or ctx.obj.get("profile") or config.default_profile
        profile_data = {"profile": name, **config.get_profile(name).to_dict()}

        formatter = OutputFormatter()
        output = formatter.format(profile_data, ctx.obj["output_format"])
        click.echo(output)

    except Exception as e:
        print_error(f"Failed to show configuration: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)


@configure.command("set")
@click.option("--profile", "profile_name", help="Profile to edit (defaults to the active profile)")
@click.option("--catalog-url", help="Catalog service URL")
@click.option("--namespace", help="Namespace of the persistent volume claims")
@click.option("--kubeconfig", type=click.Path(dir_okay=False), help="Path to a kubeconfig file")
@click.option("--trace/--no-trace", default=None, help="Trace catalog service responses")
@click.option("--default", "make_default", is_flag=True, help="Make this the default profile")
@click.pass_context
def set_config(ctx, profile_name, catalog_url, namespace, kubeconfig, trace, make_default):
    """Update a configuration profile and save it"""
    try:
        config = ctx.obj["config"]
        name = profile_name or ctx.obj.get("profile") or config.default_profile
        profile = config.get_profile(name)

        if catalog_url is not None:
            profile.catalog_service_url = catalog_url
        if namespace is not None:
            profile.namespace = namespace
        if kubeconfig is not None:
            profile.kubernetes_config_path = kubeconfig
        if trace is not None:
            profile.trace = trace

        config.add_profile(name, profile)
        if make_default:
            config.set_default_profile(name)
        config.save()

        print_success(f"Profile '{name}' saved to {config.config_file}")

    except Exception as e:
        print_error(f"Failed to save configuration: {e}")
        if ctx.obj.get("verbose"):
            raise
        ctx.exit(1)
