"""Object commands - hash content and read it back from a store."""

import click

from ledgit.core.errors import NotFoundError
from ledgit.core.hash import SUPPORTED_ALGORITHMS, hash_file
from ledgit.core.store import FileObjectStore
from ledgit.cli.output import error


@click.command('hash-object')
@click.argument('file', type=click.Path(exists=True, dir_okay=False))
@click.option('-w', '--write', is_flag=True, help='Write the content to the object store')
@click.option('--store', 'store_dir', type=click.Path(file_okay=False),
              help='Object store directory (required with -w)')
@click.option('--algorithm', type=click.Choice(SUPPORTED_ALGORITHMS), default='sha1',
              show_default=True, help='Hash algorithm')
def hash_object_cmd(file, write, store_dir, algorithm):
    """
    Compute the content digest of FILE.
    
    Examples:
        ledgit hash-object notes.txt
        ledgit hash-object -w --store ./objects notes.txt
    """
    if write and not store_dir:
        click.echo(error("--store is required with -w"))
        raise click.Abort()
    
    digest = hash_file(file, algorithm)
    
    if write:
        with open(file, 'rb') as f:
            FileObjectStore(store_dir).put(digest, f.read())
    
    click.echo(digest)


@click.command('cat-file')
@click.argument('digest')
@click.option('--store', 'store_dir', required=True, type=click.Path(file_okay=False),
              help='Object store directory')
def cat_file_cmd(digest, store_dir):
    """
    Print the content stored under DIGEST.
    
    Examples:
        ledgit cat-file --store ./objects 2aae6c3
    """
    try:
        data = FileObjectStore(store_dir).get(digest)
    except NotFoundError as e:
        click.echo(error(str(e)))
        raise click.Abort()
    
    click.echo(data, nl=False)
