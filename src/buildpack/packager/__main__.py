from buildpack.packager.cli import cli

cli()
