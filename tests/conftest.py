"""Pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

from mvcmodel import CounterIdentity, Model


class Alarm(Model):
    """Alarm with a flat default template."""

    DEFAULT_OPTIONS = {"time": "23:55", "active": False}


class Playlist(Model):
    """Model with nested mutable defaults."""

    DEFAULT_OPTIONS = {
        "name": "Untitled",
        "tracks": [],
        "settings": {"shuffle": False, "repeat": "off"},
    }


@pytest.fixture
def identity():
    """A fresh id counter starting at zero."""
    return CounterIdentity()


@pytest.fixture
def alarm(identity):
    """An Alarm built from defaults only."""
    return Alarm(identity=identity)


@pytest.fixture
def playlist(identity):
    """A Playlist built from defaults only."""
    return Playlist(identity=identity)


@pytest.fixture
def listener():
    """A mock event listener."""
    return Mock()
