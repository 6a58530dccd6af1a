"""Tests for key/value sources."""

import pytest

from envkit.config.sources import DictSource, EnvironSource, KeyValueSource


class TestDictSource:
    """Verify the in-memory source."""

    def test_lookup(self) -> None:
        """Set keys should be returned, unset keys should be None."""
        source = DictSource({"A": "1"})
        assert source.lookup("A") == "1"
        assert source.lookup("B") is None

    def test_initial_mapping_is_copied(self) -> None:
        """Changing the original dict should not affect the source."""
        initial = {"A": "1"}
        source = DictSource(initial)
        initial["A"] = "2"
        assert source.lookup("A") == "1"

    def test_set_and_unset(self) -> None:
        """set() should overwrite and unset() should remove."""
        source = DictSource()
        source.set("A", "x")
        source.set("A", "y")
        assert source.lookup("A") == "y"
        source.unset("A")
        source.unset("A")
        assert source.lookup("A") is None
        assert len(source) == 0


class TestEnvironSource:
    """Verify the live environment source."""

    def test_reads_current_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Each lookup should see the environment as it is now."""
        source = EnvironSource()
        monkeypatch.setenv("ENVKIT_SOURCE_KEY", "first")
        assert source.lookup("ENVKIT_SOURCE_KEY") == "first"
        monkeypatch.setenv("ENVKIT_SOURCE_KEY", "second")
        assert source.lookup("ENVKIT_SOURCE_KEY") == "second"
        monkeypatch.delenv("ENVKIT_SOURCE_KEY")
        assert source.lookup("ENVKIT_SOURCE_KEY") is None

    def test_is_key_value_source(self) -> None:
        """EnvironSource should implement the source interface."""
        assert isinstance(EnvironSource(), KeyValueSource)

    def test_interface_is_abstract(self) -> None:
        """The base interface should not be instantiable."""
        with pytest.raises(TypeError):
            KeyValueSource()  # type: ignore[abstract]
