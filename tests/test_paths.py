import pytest

from mixinkit.paths import import_line, sanitize_numeric_path_segments


def test_numeric_segment_prefixed():
    assert sanitize_numeric_path_segments("/Game/123/BP.BP") == "/Game/_123/BP.BP"


def test_non_numeric_unchanged():
    path = "/Game/Chars/BP_Hero.BP_Hero"
    assert sanitize_numeric_path_segments(path) == path


@pytest.mark.parametrize("path", ["Game/A", "//Game//A/", "/Game/A"])
def test_slashes_normalised(path):
    assert sanitize_numeric_path_segments(path) == "/Game/A"


def test_mixed_digits_not_prefixed():
    result = sanitize_numeric_path_segments("/Game/v2/10")
    assert result.split("/")[2:] == ["v2", "_10"]


def test_idempotent():
    once = sanitize_numeric_path_segments("/1/2/x")
    assert sanitize_numeric_path_segments(once) == once


def test_import_line():
    assert import_line("/Chars/BP") == "import './Chars/BP';"