"""Tests for essentio.__init__ — lazy public names."""

import pytest

import essentio


@pytest.mark.parametrize("name", essentio.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(essentio, name)
    assert obj is not None, f"essentio.{name} resolved to None"


def test_unknown_name() -> None:
    with pytest.raises(AttributeError, match="no_such_thing"):
        essentio.no_such_thing  # noqa: B018
