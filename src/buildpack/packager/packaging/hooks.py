"""Runs a buildpack's pre-package command."""

import shlex
import subprocess

from ..exceptions import PrePackageError
from ..interfaces import Buildpack, Logger


def run_pre_package(buildpack: Buildpack, logger: Logger) -> None:
    command = buildpack.pre_package
    if not command:
        return

    try:
        args = shlex.split(command)
    except ValueError as e:
        raise PrePackageError(f"Unable to parse pre-package command '{command}': {e}") from e
    if not args:
        return

    logger.first_line(f"Pre-Package with {' '.join(args)}")
    logger.debug("Running pre-package", command=args, cwd=str(buildpack.root))

    # stdout/stderr are inherited so the hook's output streams through.
    try:
        subprocess.run(args, cwd=buildpack.root, check=True)
    except subprocess.CalledProcessError as e:
        raise PrePackageError(
            f"Pre-package command failed with exit code {e.returncode}.\n"
            f"  Command: {' '.join(args)}"
        ) from e
    except OSError as e:
        raise PrePackageError(f"Unable to run pre-package command '{command}': {e}") from e
