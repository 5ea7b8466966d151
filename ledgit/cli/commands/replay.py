"""Replay command - run a script of operations against one repository."""

import shlex
from pathlib import Path

import click

from ledgit.core.config import get_config
from ledgit.core.errors import LedgitError
from ledgit.core.repository import Repository
from ledgit.core.store import FileObjectStore
from ledgit.cli.output import success, error, info, warning, format_status, format_commit
from ledgit.cli.provider import WorkTreeProvider

OPERATIONS = ('create', 'modify', 'add', 'commit', 'status', 'log', 'show')


def build_repository(tracked, store_dir=None, config_path=None):
    """Create a repository from configuration with an optional on-disk store."""
    config = get_config(Path(config_path) if config_path else None)
    store = FileObjectStore(store_dir) if store_dir else None
    return Repository.from_config(config, tracked_paths=tracked, store=store)


def run_operation(repo, provider, args):
    """
    Run one script operation against repo.
    
    Supported operations:
        create PATH...
        modify PATH...
        add PATH...
        commit MESSAGE
        status
        log
        show PATH [COMMIT]
    """
    op, operands = args[0], args[1:]
    
    if op == 'create':
        for path in operands:
            repo.create_file(path)
            click.echo(info(f"Created {path} (untracked)"))
    
    elif op == 'modify':
        for path in operands:
            if path not in repo:
                click.echo(warning(f"Ignoring unknown path {path}"))
                continue
            repo.modify_file(path)
            click.echo(info(f"{path}: {repo.state(path).value}"))
    
    elif op == 'add':
        staged = repo.add_files(operands, provider)
        click.echo(success(f"Added {len(staged)} file(s) to staging area"))
        for entry in staged:
            click.echo(info(f"  {entry.digest[:7]} {entry.path}"))
        skipped = len(operands) - len(staged)
        if skipped:
            click.echo(warning(f"Skipped {skipped} file(s) that were not modified"))
    
    elif op == 'commit':
        if len(operands) != 1:
            raise click.UsageError("commit takes exactly one message argument")
        commit = repo.commit(operands[0])
        click.echo(success(f"Created commit {commit.id[:7]}"))
        click.echo(info(f"Message: {commit.message}"))
        if commit.parent:
            click.echo(info(f"Parent: {commit.parent[:7]}"))
        else:
            click.echo(info("(root commit)"))
        click.echo(info(f"Files: {len(commit.snapshot)}"))
    
    elif op == 'status':
        for line in format_status(repo.status()):
            click.echo(line)
    
    elif op == 'log':
        commits = repo.log()
        if not commits:
            click.echo(info("No commits yet"))
        for commit in commits:
            for line in format_commit(commit):
                click.echo(line)
    
    elif op == 'show':
        if not 1 <= len(operands) <= 2:
            raise click.UsageError("show takes PATH [COMMIT]")
        commit = operands[1] if len(operands) == 2 else None
        click.echo(repo.read_file(operands[0], commit), nl=False)
    
    else:
        raise click.UsageError(
            f"Unknown operation '{op}' (expected one of: {', '.join(OPERATIONS)})"
        )


@click.command('replay')
@click.argument('script', type=click.File('r'))
@click.option('-t', '--track', 'tracked', multiple=True, help='Path tracked from the start')
@click.option('-C', '--work-tree', default='.', type=click.Path(file_okay=False),
              help='Directory file contents are read from')
@click.option('--store', 'store_dir', type=click.Path(file_okay=False),
              help='Directory for the object store (in memory by default)')
@click.option('--config', 'config_path', type=click.Path(dir_okay=False),
              help='Repository config file')
def replay_cmd(script, tracked, work_tree, store_dir, config_path):
    """
    Run a script of repository operations.
    
    Each line of SCRIPT is one operation; blank lines and lines starting
    with '#' are skipped. File contents are read from the work tree when
    files are added.
    
    Examples:
        ledgit replay session.txt -t file1.txt -t file2.txt
        ledgit replay session.txt -C ./project --store ./objects
    """
    try:
        repo = build_repository(tracked, store_dir, config_path)
    except ValueError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    provider = WorkTreeProvider(work_tree)
    
    for lineno, line in enumerate(script, start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        
        try:
            run_operation(repo, provider, shlex.split(line))
        except click.UsageError as e:
            click.echo(error(f"line {lineno}: {e.message}"))
            raise click.Abort()
        except (LedgitError, OSError, ValueError) as e:
            click.echo(error(f"line {lineno}: {e}"))
            raise click.Abort()
