"""modeltext CLI - main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from modeltext import __version__


@click.group()
@click.version_option(version=__version__, prog_name="modeltext")
@click.help_option("-h", "--help")
def cli():
    """modeltext - full text discovery over shape models

    \b
    QUICK START:
      modeltext scan model.json               # List every text occurrence
      modeltext terms model.json --term foo   # Search text for terms

    \b
    For detailed options: modeltext <command> --help"""
    pass


from modeltext.commands.scan import scan
from modeltext.commands.terms import terms

cli.add_command(scan)
cli.add_command(terms)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
