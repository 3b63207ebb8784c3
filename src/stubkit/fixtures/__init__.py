"""Testing fixtures – pytest plugin.

Enable in your ``conftest.py``::

    pytest_plugins = ["stubkit.fixtures"]
"""
from stubkit.fixtures.data import frozen_clock, random_source
from stubkit.fixtures.settings import stubkit_settings
from stubkit.fixtures.stubs import mocker_stubs, stubs

__all__ = [
    "frozen_clock",
    "mocker_stubs",
    "random_source",
    "stubkit_settings",
    "stubs",
]
