"""CLI commands for Ledgit."""

from ledgit.cli.commands.replay import replay_cmd
from ledgit.cli.commands.demo import demo_cmd
from ledgit.cli.commands.objects import hash_object_cmd, cat_file_cmd

__all__ = ['replay_cmd', 'demo_cmd', 'hash_object_cmd', 'cat_file_cmd']
