from __future__ import annotations

import wrapsmith
from wrapsmith.version import get_version


def test_version_is_exposed() -> None:
    version = get_version()

    assert isinstance(version, str)
    assert version
    assert wrapsmith.__version__ == version
