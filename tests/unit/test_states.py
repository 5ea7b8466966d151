"""File state machine tests."""

import pytest
from ledgit.core.errors import DuplicatePathError, UnknownPathError
from ledgit.core.states import FileState, FileStateMachine


@pytest.fixture
def machine():
    """State machine with two tracked paths."""
    return FileStateMachine(['a.txt', 'b.txt'])


def test_seed(machine):
    """Test seeded paths are tracked."""
    assert machine.state('a.txt') is FileState.TRACKED
    assert len(machine) == 2


def test_seed_known_path_is_ignored(machine):
    """Test seeding an existing path keeps its state."""
    machine.modify('a.txt')
    assert machine.seed('a.txt') is False
    assert machine.state('a.txt') is FileState.MODIFIED


def test_create(machine):
    """Test created paths are untracked."""
    machine.create('new.txt')
    assert machine.state('new.txt') is FileState.UNTRACKED


def test_create_duplicate(machine):
    """Test creating a known path raises."""
    with pytest.raises(DuplicatePathError) as exc_info:
        machine.create('a.txt')
    assert exc_info.value.path == 'a.txt'


@pytest.mark.parametrize('setup, expected, changed', [
    ([], FileState.MODIFIED, True),
    (['modify'], FileState.MODIFIED, False),
    (['modify', 'stage'], FileState.MODIFIED, True),
])
def test_modify_transitions(machine, setup, expected, changed):
    """Test modify from tracked, modified and staged."""
    for step in setup:
        getattr(machine, step)('a.txt')
    assert machine.modify('a.txt') is changed
    assert machine.state('a.txt') is expected


def test_modify_untracked_is_noop(machine):
    """Test modify leaves untracked paths alone."""
    machine.create('new.txt')
    assert machine.modify('new.txt') is False
    assert machine.state('new.txt') is FileState.UNTRACKED


def test_modify_unknown_is_noop(machine):
    """Test modify ignores unknown paths."""
    assert machine.modify('ghost.txt') is False
    assert 'ghost.txt' not in machine


def test_stage_requires_modified(machine):
    """Test only modified paths can be staged."""
    machine.create('new.txt')
    assert machine.stage('a.txt') is False
    assert machine.stage('new.txt') is False
    assert machine.stage('ghost.txt') is False
    
    machine.modify('a.txt')
    assert machine.stage('a.txt') is True
    assert machine.state('a.txt') is FileState.STAGED
    assert machine.stage('a.txt') is False


def test_commit_moves_staged_to_tracked(machine):
    """Test commit returns every staged path to tracked."""
    machine.create('new.txt')
    for path in ('b.txt', 'a.txt'):
        machine.modify(path)
        machine.stage(path)
    
    assert machine.commit() == ['a.txt', 'b.txt']
    assert machine.state('a.txt') is FileState.TRACKED
    assert machine.state('b.txt') is FileState.TRACKED
    assert machine.state('new.txt') is FileState.UNTRACKED


def test_commit_leaves_modified_alone(machine):
    """Test commit only touches staged paths."""
    machine.modify('a.txt')
    assert machine.commit() == []
    assert machine.state('a.txt') is FileState.MODIFIED


def test_state_unknown(machine):
    """Test querying an unknown path raises."""
    with pytest.raises(UnknownPathError):
        machine.state('ghost.txt')


def test_paths(machine):
    """Test listing paths by state."""
    machine.create('c.txt')
    machine.modify('b.txt')
    assert machine.paths() == ['a.txt', 'b.txt', 'c.txt']
    assert machine.paths(FileState.TRACKED) == ['a.txt']
    assert machine.paths(FileState.MODIFIED) == ['b.txt']
    assert machine.paths(FileState.UNTRACKED) == ['c.txt']
