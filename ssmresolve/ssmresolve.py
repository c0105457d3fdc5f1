"""
ssmresolve Main Module.

Command line entry point for resolving `{{ parameter }}` placeholders in
documents against the AWS SSM Parameter Store.

Examples:
    Resolve a deployment script into a new file:
        $ ssmresolve file deploy.tmpl.sh deploy.sh

    Resolve text from stdin, allowing secure parameters:
        $ echo "pass={{ ssm-secure:db/pass }}" | ssmresolve --secure text

    List what a document references:
        $ ssmresolve extract config.tmpl.yaml

Note:
    Secure parameters are refused unless --secure is given or
    SSMR_RESOLVESECUREPARAMETERS=true is set. Errors exit with a non-zero
    code specific to their kind (input 2, policy 3, store 4, output 5).
"""

from typing import Final, Optional
import click
from ssmresolve.commands.base import RichGroup
from ssmresolve.commands.resolve import extract, file, refs, text
from ssmresolve.config.settings import appsettings, options_fromSettings

__version__: Final[str] = "0.1.0"


@click.group(
    cls=RichGroup,
    help="Resolve parameter placeholders in documents from the SSM Parameter Store.",
)
@click.option(
    "--secure/--no-secure",
    "resolve_secure",
    default=None,
    help="Allow resolving secure parameters (default from SSMR_RESOLVESECUREPARAMETERS)",
)
@click.option("--region", type=str, default=None, help="AWS region of the parameter store")
@click.option("--endpoint-url", type=str, default=None, help="Parameter store endpoint override")
@click.option("--quiet", "-q", is_flag=True, help="Suppress log output")
@click.version_option(__version__, "-V", "--version", prog_name="ssmresolve")
@click.pass_context
def cli(
    ctx: click.Context,
    resolve_secure: Optional[bool],
    region: Optional[str],
    endpoint_url: Optional[str],
    quiet: bool,
) -> None:
    """
    Root group: collects the options every command shares.
    """
    if quiet:
        appsettings.beQuiet = True

    ctx.ensure_object(dict)
    ctx.obj["options"] = options_fromSettings(appsettings, resolve_secure)
    ctx.obj["region"] = region or appsettings.awsRegion
    ctx.obj["endpoint_url"] = endpoint_url or appsettings.ssmEndpointUrl


cli.add_command(file)
cli.add_command(text)
cli.add_command(extract)
cli.add_command(refs)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
