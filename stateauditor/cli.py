"""StateAuditor CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from stateauditor import __version__


@click.group()
@click.version_option(version=__version__, prog_name="stateauditor")
@click.help_option("-h", "--help")
def cli():
    """StateAuditor - useState naming checks for React code

    \b
    QUICK START:
      stateauditor check src/         # Report naming issues
      stateauditor check --fix src/   # Apply default renames"""
    pass


from stateauditor.commands.check import check

cli.add_command(check)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
