from pathlib import Path

import pytest

from wpfind.version import extract_version, read_version


@pytest.mark.parametrize(
    "contents, expected",
    [
        ("<?php\n$wp_version = '4.8-alpha-39357-src';\n", "4.8-alpha-39357-src"),
        ('<?php\n$wp_version = "6.4.2";\n', "6.4.2"),
        ("$wp_version='5.0'", "5.0"),
        ("$wp_version   =\t'3.9.1'", "3.9.1"),
    ],
)
def test_extracts_quoted_assignment(contents, expected):
    assert extract_version(contents) == expected


def test_first_assignment_wins():
    contents = "$wp_version = '1.0';\n$wp_version = '2.0';\n"
    assert extract_version(contents) == "1.0"


@pytest.mark.parametrize(
    "contents",
    [
        "",
        "<?php\n// nothing to see\n",
        "$wp_db_version = 12345;",
        "$wp_version = get_version();",
        "$wp_version = '';",
    ],
)
def test_no_match_returns_empty_string(contents):
    assert extract_version(contents) == ""


def test_file_is_scanned_not_executed(tmp_path: Path):
    marker = tmp_path / "version.php"
    marker.write_text(
        "<?php\nexit(1);\nrequire ABSPATH . 'boom.php';\n$wp_version = '6.1';\n",
        encoding="utf-8",
    )
    assert read_version(marker) == "6.1"


def test_undecodable_bytes_are_tolerated(tmp_path: Path):
    marker = tmp_path / "version.php"
    marker.write_bytes(b"<?php\n// \xff\xfe\n$wp_version = '4.9.8';\n")
    assert read_version(marker) == "4.9.8"


def test_missing_file_raises_oserror(tmp_path: Path):
    with pytest.raises(OSError):
        read_version(tmp_path / "version.php")
