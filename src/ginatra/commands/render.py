"""Render commands - print view fragments for commits and values."""

from __future__ import annotations

import sys

import click
from rich.console import Console

from ..config import load_config
from ..loader import load_commit
from ..utils import (
    gravatar_url,
    nicetime,
    parse_timestamp,
    prefix_url,
    rfc_date,
    simple_format,
    time_tag,
    truncate,
)
from ..views import archive_link, atom_feed_link, commit_refs, file_listing, html_escape, patch_link

console = Console(stderr=True)

config_option = click.option("--config", "-c", "config_path", default=None, help="Config file path")


@click.group("render")
def render():
    """Render HTML fragments used by ginatra pages.

    Fragments are written to stdout so they can be piped into templates.
    """


@render.command()
@click.argument("commit_file", type=click.Path(exists=True))
def files(commit_file):
    """List the files changed by a commit (commit JSON file)."""
    commit = load_commit(commit_file)
    if not commit.changes:
        console.print("[yellow]Commit has no changed files.[/yellow]")
    click.echo(file_listing(commit))


@render.command("commit")
@click.argument("commit_file", type=click.Path(exists=True))
@click.option("--style", "-s", type=click.Choice(["tag", "nice"]), default="tag",
              help="How to show the commit time")
@config_option
def commit_header(commit_file, style, config_path):
    """Render the author, subject, time and message of a commit."""
    cfg = load_config(config_path)
    commit = load_commit(commit_file)

    if commit.author_email:
        click.echo(f"<img class='gravatar' src='{gravatar_url(commit.author_email, cfg.gravatar_size)}' alt='' />")

    # Truncate before escaping so entities are never cut in half
    subject = commit.message.split("\n", 1)[0]
    short = truncate(subject, length=cfg.truncate_length, separator=" ")
    click.echo(f"<strong title='{html_escape(subject)}'>{html_escape(short)}</strong>")

    if commit.committed_at is not None:
        formatter = time_tag if style == "tag" else nicetime
        click.echo(formatter(commit.committed_at))
    else:
        console.print("[yellow]Commit has no committed_at, time omitted.[/yellow]")

    if commit.message:
        click.echo(f"<p class='message'>{simple_format(html_escape(commit.message))}</p>")


@render.command()
@click.argument("commit_file", type=click.Path(exists=True))
@click.option("--repo", "-r", "repo_param", required=True, help="URL-safe repository name")
@config_option
def refs(commit_file, repo_param, config_path):
    """Link every branch and tag pointing at a commit."""
    cfg = load_config(config_path)
    commit = load_commit(commit_file)
    click.echo(commit_refs(commit.refs, repo_param, cfg.prefix))


@render.command()
@click.argument("commit_file", type=click.Path(exists=True))
@click.option("--repo", "-r", "repo_param", required=True, help="URL-safe repository name")
@click.option("--tree", "tree_id", default=None, help="Tree id for the archive link (default: commit id)")
@click.option("--ref", default=None, help="Ref for the feed link (default: whole repository)")
@config_option
def links(commit_file, repo_param, tree_id, ref, config_path):
    """Print the patch, archive and feed links for a commit."""
    cfg = load_config(config_path)
    commit = load_commit(commit_file)
    click.echo(patch_link(commit.id, repo_param, cfg.prefix))
    click.echo(archive_link(tree_id or commit.id, repo_param, cfg.prefix))
    click.echo(atom_feed_link(repo_param, ref, cfg.prefix))


@render.command()
@click.argument("text")
@click.option("--format", "-f", "with_breaks", is_flag=True, help="Also convert newlines to <br />")
def escape(text, with_breaks):
    """HTML-escape TEXT."""
    escaped = html_escape(text)
    if with_breaks:
        escaped = simple_format(escaped)
    click.echo(escaped)


@render.command("truncate")
@click.argument("text")
@click.option("--length", "-l", type=int, default=None, help="Maximum length (default: from config)")
@click.option("--omission", default="...", help="Marker for omitted text")
@click.option("--separator", default=None, help="Prefer cutting at this string")
@config_option
def truncate_cmd(text, length, omission, separator, config_path):
    """Truncate TEXT to a maximum length."""
    if length is None:
        length = load_config(config_path).truncate_length
    click.echo(truncate(text, length=length, omission=omission, separator=separator))


@render.command()
@click.argument("timestamp")
@click.option("--style", "-s", type=click.Choice(["nice", "tag", "rfc"]), default="nice",
              help="Output style")
def date(timestamp, style):
    """Format an ISO-8601 TIMESTAMP."""
    try:
        value = parse_timestamp(timestamp)
    except ValueError:
        console.print(f"[red]Invalid timestamp:[/red] {timestamp}")
        sys.exit(1)

    formatters = {"nice": nicetime, "tag": time_tag, "rfc": rfc_date}
    click.echo(formatters[style](value))


@render.command()
@click.argument("email")
@click.option("--size", "-s", type=int, default=None, help="Size in pixels (default: from config)")
@config_option
def gravatar(email, size, config_path):
    """Print the Gravatar URL for EMAIL."""
    if size is None:
        size = load_config(config_path).gravatar_size
    click.echo(gravatar_url(email, size))


@render.command()
@click.argument("path", default="")
@config_option
def url(path, config_path):
    """Print PATH joined onto the configured prefix."""
    click.echo(prefix_url(path, load_config(config_path).prefix))
