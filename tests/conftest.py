"""Shared fixtures for setrepo tests."""

from pathlib import Path

import pytest

from model import SyncAction
from repository import RepositoryError


class FakeHost:
    """Records what a DialogSession asks of its window."""

    def __init__(self):
        self.title = None
        self.resizable = None
        self.accept_count = 0
        self.cancel_count = 0

    def set_title(self, title):
        self.title = title

    def set_resizable(self, resizable):
        self.resizable = resizable

    def get_actions(self):
        return ()

    def get_center_content(self):
        return None

    def get_preferred_focus(self):
        return None

    def accept(self):
        self.accept_count += 1

    def cancel(self):
        self.cancel_count += 1


class FakeStore:
    """Upstream store returning a fixed URL."""

    def __init__(self, upstream=None):
        self.upstream = upstream

    def get_upstream(self):
        return self.upstream


class RecordingFactory:
    """Action factory that builds three plain actions and remembers its inputs."""

    def __init__(self, labels=("Merge", "Overwrite Local", "Overwrite Remote")):
        self.labels = labels
        self.invoked: list[str] = []
        self.context = None
        self.url_field = None
        self.container = None
        self.on_success = None

    def __call__(self, context, url_field, container, on_success):
        self.context = context
        self.url_field = url_field
        self.container = container
        self.on_success = on_success
        return [
            SyncAction(
                label.lower().replace(" ", "-"),
                label,
                lambda label=label: self.invoked.append(label),
                default=(i == 0),
            )
            for i, label in enumerate(self.labels)
        ]


class ImmediateContainer:
    """SyncContainer that runs work synchronously on the calling thread."""

    def __init__(self):
        self.notifications: list[str] = []
        self.errors: list[tuple[str, str]] = []

    def run_in_background(self, work, on_done, on_error):
        try:
            work()
        except Exception as e:
            on_error(e)
        else:
            on_done()

    def notify(self, message):
        self.notifications.append(message)

    def show_error(self, title, message):
        self.errors.append((title, message))


class FakeRepositoryManager:
    """In-memory stand-in for GitRepositoryManager."""

    def __init__(self, exists=False, upstream=None, sync_error=None, upstream_error=None, delete_error=None):
        self.repository_dir = Path("/nonexistent/settings-repo")
        self.exists = exists
        self.upstream = upstream
        self.sync_error = sync_error
        self.upstream_error = upstream_error
        self.delete_error = delete_error
        self.synced: list = []
        self.deleted = False

    def is_repository_exists(self):
        return self.exists

    def create_repository_if_needed(self):
        created = not self.exists
        self.exists = True
        return created

    def delete_repository(self):
        if self.delete_error is not None:
            raise self.delete_error
        self.exists = False
        self.deleted = True

    def get_upstream(self):
        return self.upstream if self.exists else None

    def set_upstream(self, url):
        if self.upstream_error is not None:
            raise self.upstream_error
        self.upstream = url

    def sync(self, sync_type):
        if self.sync_error is not None:
            raise self.sync_error
        self.synced.append(sync_type)


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def factory():
    return RecordingFactory()


@pytest.fixture
def container():
    return ImmediateContainer()


@pytest.fixture
def repo_manager():
    return FakeRepositoryManager()


@pytest.fixture
def broken_upstream_manager():
    return FakeRepositoryManager(upstream_error=RepositoryError("cannot write config"))


@pytest.fixture
def xdg_dirs(tmp_path, monkeypatch):
    """Point XDG base directories at a temp dir."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    return tmp_path


@pytest.fixture
def make_session(host, factory):
    """Build a DialogSession whose store holds the given upstream URL."""
    from controller import DialogSession

    def _make(upstream=None, context=None):
        return DialogSession(host, FakeStore(upstream), factory, context)

    return _make


@pytest.fixture
def make_repo_manager():
    """Build a FakeRepositoryManager with custom behavior."""
    return FakeRepositoryManager
