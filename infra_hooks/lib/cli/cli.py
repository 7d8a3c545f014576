import json
import logging

import click
from click_option_group import optgroup, RequiredMutuallyExclusiveOptionGroup

from infra_hooks.helper_manager import helper_manager
from infra_hooks.launcher import get_permissions, run_helper
from infra_hooks.lib.config import get_raw_helper_config
from infra_hooks.lib.errors import HooksException

output_option = click.option(
    "-o",
    "--output",
    type=click.File("w"),
    default="-",
    help="Write the hooks to a file instead of stdout",
)


def echo_key_value(key, value):
    click.echo(click.style(f"{key}: ", fg="green", bold=True) + str(value))


def echo_hooks(hooks, output):
    click.echo(json.dumps([[hook.kind.value, hook.payload] for hook in hooks], indent=2), file=output)


@click.group()
@click.option("--debug", is_flag=True, default=False, help="Enable DEBUG logging")
def cli(debug):
    logging.basicConfig(format="[%(asctime)s %(levelname)s %(name)s %(threadName)s]: %(message)s")

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        click.echo("Enabled debug mode!", err=True)


@cli.command(name="list")
def list_helpers():
    for provider, helpers in helper_manager.get_all_helpers().items():
        echo_key_value(provider, ", ".join(helpers))


@cli.command()
@click.argument("helper")
@optgroup.group(
    "Configuration",
    cls=RequiredMutuallyExclusiveOptionGroup,
    help="Where the hook configuration comes from",
)
@optgroup.option("--file", "config_file", type=click.Path(exists=True, dir_okay=False), help="YAML or JSON file")
@optgroup.option("--json", "config_json", help="Inline JSON object")
@click.option("--provider", default="aws", show_default=True, help="Provider of the helper")
@click.option(
    "--with-permissions",
    help="Prepend the static IAM statements of the helper",
    is_flag=True,
)
@output_option
def build(helper, config_file, config_json, provider, with_permissions, output):
    try:
        raw_config = get_raw_helper_config(config_file) if config_file else json.loads(config_json)

        hooks = run_helper(provider, helper, raw_config)

        if with_permissions:
            hooks = [*get_permissions(provider, helper), *hooks]
    except (HooksException, ModuleNotFoundError, json.JSONDecodeError) as e:
        raise click.UsageError(str(e))

    echo_hooks(hooks, output)


@cli.command()
@click.argument("helper")
@click.option("--provider", default="aws", show_default=True, help="Provider of the helper")
@output_option
def permissions(helper, provider, output):
    try:
        hooks = get_permissions(provider, helper)
    except ModuleNotFoundError as e:
        raise click.UsageError(str(e))

    echo_hooks(hooks, output)


def run():
    exit(cli())


if __name__ == "__main__":
    run()
