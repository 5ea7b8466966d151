"""Main CLI entry point for Ledgit."""

import logging

import click
from colorama import init

from ledgit import __version__
from ledgit.cli.output import BANNER
from ledgit.cli.commands import replay_cmd, demo_cmd, hash_object_cmd, cat_file_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class LedgitGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=LedgitGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Log repository activity to stderr')
def cli(verbose):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(levelname)s %(name)s: %(message)s'
        )


# Register commands
cli.add_command(replay_cmd)
cli.add_command(demo_cmd)
cli.add_command(hash_object_cmd)
cli.add_command(cat_file_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
