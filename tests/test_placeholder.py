"""Placeholder test verifying package import."""


def test_import() -> None:
    """Verify top-level package is importable."""
    import json_orbit

    assert json_orbit.__version__ is not None
    assert json_orbit.__version__ == "0.1.0"
