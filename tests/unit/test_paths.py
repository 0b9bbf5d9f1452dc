"""Tests for recovery path naming."""

import pytest

from editor_autosave.core.paths import RecoveryPathResolver, resolve_recovery_path


@pytest.mark.parametrize("path", ["a.txt", "/work/a.txt", "/work/dir/", "no_ext", ""])
def test_resolve_appends_suffix(path: str) -> None:
    result = RecoveryPathResolver().resolve(path)

    assert result.startswith(path)
    assert result.endswith(".swp")
    assert result == path + ".swp"


def test_resolve_is_deterministic() -> None:
    resolver = RecoveryPathResolver()
    assert resolver.resolve("/work/a.txt") == resolver.resolve("/work/a.txt")


def test_custom_suffix() -> None:
    assert RecoveryPathResolver("bak").resolve("/work/a.txt") == "/work/a.txt.bak"
    assert resolve_recovery_path("/work/a.txt", "bak") == "/work/a.txt.bak"


@pytest.mark.parametrize("suffix", ["", "a/b"])
def test_bad_suffix_is_rejected(suffix: str) -> None:
    with pytest.raises(ValueError):
        RecoveryPathResolver(suffix)


def test_is_recovery_path() -> None:
    resolver = RecoveryPathResolver()
    assert resolver.is_recovery_path("/work/a.txt.swp")
    assert not resolver.is_recovery_path("/work/a.txt")
    assert not resolver.is_recovery_path("/work/swp")
