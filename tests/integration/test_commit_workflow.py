"""Integration tests for the create, modify, add and commit workflow."""

from ledgit.core.hash import hash_object
from ledgit.core.repository import Repository
from ledgit.core.states import FileState
from ledgit.core.store import FileObjectStore
from ledgit.cli.provider import WorkTreeProvider


def test_walkthrough(clock):
    """Test the full lifecycle of tracked and untracked files."""
    repo = Repository(['file1.txt', 'file2.txt'], clock=clock)
    repo.create_file('new.txt', b'new')
    repo.modify_file('file1.txt', b'one')
    repo.add_files(['file1.txt'])
    commit = repo.commit('Initial commit')
    
    assert commit.snapshot == {'file1.txt': hash_object(b'one')}
    assert repo.status() == {
        FileState.UNTRACKED: ['new.txt'],
        FileState.TRACKED: ['file1.txt', 'file2.txt'],
        FileState.MODIFIED: [],
        FileState.STAGED: [],
    }


def test_untracked_file_never_committed(repo, provider):
    """Test untracked files stay out of every snapshot."""
    repo.create_file('c.txt', b'charlie')
    repo.modify_file('c.txt')
    repo.modify_file('a.txt')
    repo.add_files(['a.txt', 'c.txt'], provider)
    commit = repo.commit('only tracked')
    
    assert 'c.txt' not in commit.snapshot
    assert repo.state('c.txt') is FileState.UNTRACKED


def test_restaging_replaces_digest(repo):
    """Test modifying and re-adding a staged file stages the new content."""
    repo.modify_file('a.txt', b'v1')
    repo.add_files(['a.txt'])
    repo.modify_file('a.txt', b'v2')
    assert repo.state('a.txt') is FileState.MODIFIED
    
    repo.add_files(['a.txt'])
    commit = repo.commit('v2')
    
    assert commit.snapshot == {'a.txt': hash_object(b'v2')}
    assert repo.store.contains(hash_object(b'v1'))


def test_remodified_staged_file_commits_staged_content(repo, provider):
    """Test a staged file re-modified before commit keeps its staged content."""
    repo.modify_file('a.txt')
    repo.modify_file('b.txt')
    repo.add_files(['a.txt', 'b.txt'], provider)
    repo.modify_file('b.txt')
    
    commit = repo.commit('staged content')
    
    assert commit.snapshot['b.txt'] == hash_object(b'bravo\n')
    assert repo.state('b.txt') is FileState.MODIFIED
    assert repo.state('a.txt') is FileState.TRACKED


def test_commit_chain(repo):
    """Test a chain of commits carries every file forward."""
    for i in range(3):
        repo.modify_file('a.txt', f'a{i}'.encode())
        repo.add_files(['a.txt'])
        repo.commit(f'a{i}')
    
    repo.modify_file('b.txt', b'b')
    repo.add_files(['b.txt'])
    last = repo.commit('b')
    
    log = repo.log()
    assert len(log) == 4
    assert log[0] is last
    assert log[-1].parent is None
    for child, parent in zip(log, log[1:]):
        assert child.parent == parent.id
    assert last.snapshot == {'a.txt': hash_object(b'a2'), 'b.txt': hash_object(b'b')}
    assert [repo.read_file('a.txt', c) for c in reversed(log[1:])] == [b'a0', b'a1', b'a2']


def test_repeated_content_stored_once(repo):
    """Test reverting to earlier content reuses the stored blob."""
    for content in (b'same', b'other', b'same'):
        repo.modify_file('a.txt', content)
        repo.add_files(['a.txt'])
        repo.commit(content.decode())
    
    assert len(repo.store) == 2


def test_on_disk_store(work_tree, tmp_path):
    """Test committing with a file-backed store and work-tree provider."""
    store = FileObjectStore(str(tmp_path / 'objects'))
    repo = Repository(['file1.txt', 'subdir/file3.txt'], store=store)
    provider = WorkTreeProvider(str(work_tree))
    
    repo.modify_file('file1.txt')
    repo.modify_file('subdir/file3.txt')
    repo.add_files(['file1.txt', 'subdir/file3.txt'], provider)
    commit = repo.commit('from disk')
    
    reopened = FileObjectStore(str(tmp_path / 'objects'))
    assert reopened.get(commit.snapshot['file1.txt']) == b'Content 1'
    assert reopened.get(commit.snapshot['subdir/file3.txt']) == b'Content 3'
