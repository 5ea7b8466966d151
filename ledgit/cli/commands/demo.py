"""Demo command - walk through the file lifecycle in memory."""

import click

from ledgit.core.config import get_config
from ledgit.core.repository import Repository
from ledgit.cli.output import success, info, format_status


@click.command('demo')
def demo_cmd():
    """
    Walk through create, modify, add and commit.
    
    Starts a repository tracking file1.txt and file2.txt, creates
    new.txt, modifies and stages file1.txt and commits it.
    
    Examples:
        ledgit demo
    """
    repo = Repository.from_config(get_config(), tracked_paths=['file1.txt', 'file2.txt'])
    
    repo.create_file('new.txt', b'a brand new file\n')
    click.echo(info("Created new.txt"))
    
    repo.modify_file('file1.txt', b'first line\n')
    click.echo(info("Modified file1.txt"))
    
    staged = repo.add_files(['file1.txt'])
    click.echo(info(f"Staged {', '.join(entry.path for entry in staged)}"))
    
    commit = repo.commit('Initial commit')
    click.echo(success(f"Created commit {commit.id[:7]}"))
    click.echo()
    
    for line in format_status(repo.status()):
        click.echo(line)
