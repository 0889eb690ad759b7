"""ginatra CLI entry point."""

import click

from .commands import config, render, version


@click.group()
def main():
    """ginatra - view helpers for browsing Git repositories.

    Render the HTML fragments used by ginatra pages from the command line.
    """


main.add_command(version)
main.add_command(config)
main.add_command(render)


if __name__ == "__main__":
    main()
