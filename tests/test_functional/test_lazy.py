"""
Tests for koolkit/functional/lazy.py
"""

import types
from unittest.mock import MagicMock

from koolkit.functional.lazy import lazy_get


class Host:
    def __init__(self):
        self.name = "host"


class TestLazyGet:
    """Test lazily initialized attributes."""

    def test_not_initialized_until_used(self):
        host = Host()
        initializer = MagicMock(return_value={"message": "Hello!"})

        lazy_get(host, "my_prop", initializer)
        initializer.assert_not_called()

        assert host.my_prop["message"] == "Hello!"
        initializer.assert_called_once_with(host)

    def test_initialized_once(self):
        host = Host()
        initializer = MagicMock(return_value=[1, 2])

        lazy_get(host, "items", initializer)
        first = host.items
        second = host.items

        assert first is second
        assert initializer.call_count == 1

    def test_reassignable(self):
        host = Host()
        lazy_get(host, "my_prop", lambda h: "computed")
        assert host.my_prop == "computed"

        host.my_prop = None
        assert host.my_prop is None

    def test_assign_before_first_use(self):
        """Test that assigning before access skips the initializer."""
        host = Host()
        initializer = MagicMock(return_value="computed")
        lazy_get(host, "my_prop", initializer)

        host.my_prop = "assigned"
        assert host.my_prop == "assigned"
        initializer.assert_not_called()

    def test_replaces_existing_attribute(self):
        host = Host()
        lazy_get(host, "name", lambda h: "lazy")
        assert host.name == "lazy"

    def test_initializer_sees_host(self):
        host = Host()
        lazy_get(host, "greeting", lambda h: f"hi from {h.name}")
        assert host.greeting == "hi from host"

    def test_other_instances_unaffected(self):
        host, other = Host(), Host()
        lazy_get(host, "extra", lambda h: 1)
        assert not hasattr(other, "extra")
        assert isinstance(host, Host)

    def test_module_host(self):
        module = types.ModuleType("settings")
        initializer = MagicMock(return_value=42)

        lazy_get(module, "answer", initializer)
        assert module.answer == 42
        assert module.answer == 42
        initializer.assert_called_once_with(module)
