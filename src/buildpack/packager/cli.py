"""The `bppackage` command-line interface."""

import os

import click

from .config import PackagerConfig, configure_logging
from .exceptions import PackagingError
from .packaging.orchestrator import Packager


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("output_dir", required=False)
def cli(output_dir: str | None) -> None:
    """Packages the buildpack in the current directory into OUTPUT_DIR.

    The archive is written to
    OUTPUT_DIR/<id segments>/<id>/<version>/<id>-<version>.tgz.
    Set BP_DEBUG to log diagnostics to stderr.
    """
    config = PackagerConfig.from_env(os.environ)
    configure_logging(config)

    try:
        packager = Packager.default(output_dir, config)
        packager.create()
    except (PackagingError, OSError) as e:
        click.secho(f"❌ Packaging Failed:\n{e}", fg="red", err=True)
        raise click.Abort() from e


main = cli
