"""Shared fixtures: bundled data and deterministic random sources."""
import pytest

from syllogism.localization import Localization
from syllogism.templates import load_library

from .helpers import IdentitySource, ReversingSource


@pytest.fixture(scope="session")
def library():
    return load_library()


@pytest.fixture(scope="session")
def localization():
    return Localization.from_directory()


@pytest.fixture
def identity_source():
    return IdentitySource()


@pytest.fixture
def reversing_source():
    return ReversingSource()
