"""Contains unit tests for the utils.repository_list module."""

from pathlib import Path

import pytest

from gh_migrate_custom_properties.utils.repository_list import RepositoryListError, parse_repository_file


def write_list(tmp_path: Path, content: str) -> Path:
    """Write a repository list file and return its path."""
    path = tmp_path / "repositories.txt"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,expected",
    [
        pytest.param(
            "https://github.com/org/repo1\nhttps://github.com/org/repo2\nhttps://github.com/different-org/repo3",
            ["org/repo1", "org/repo2", "different-org/repo3"],
            id="full URLs",
        ),
        pytest.param("org/repo1\nother-org/repo2", ["org/repo1", "other-org/repo2"], id="owner/repo"),
        pytest.param(
            "org/repo1\nhttps://github.example.com/org/repo2\nhttp://github.com/org/repo3.git",
            ["org/repo1", "org/repo2", "org/repo3"],
            id="mixed formats",
        ),
        pytest.param("\norg/repo1\n\n   \n  org/repo2  \n", ["org/repo1", "org/repo2"], id="blank lines and whitespace"),
        pytest.param("org/repo1\norg/repo1", ["org/repo1", "org/repo1"], id="duplicates are kept"),
        pytest.param("/org/repo1/", ["org/repo1"], id="surrounding slashes"),
    ],
)
def test_parse_repository_file_valid(tmp_path: Path, content: str, expected: list[str]) -> None:
    """Test that well-formed lines become owner/repo strings in file order."""
    repositories = parse_repository_file(write_list(tmp_path, content))
    assert repositories == expected
    assert len(repositories) == len([line for line in content.splitlines() if line.strip()])


@pytest.mark.parametrize("content", [pytest.param("", id="empty file"), pytest.param("\n  \n\n", id="only blank lines")])
def test_parse_repository_file_empty(tmp_path: Path, content: str) -> None:
    """Test that a list without repositories is rejected."""
    with pytest.raises(RepositoryListError, match="no repositories found in the list"):
        parse_repository_file(write_list(tmp_path, content))


def test_parse_repository_file_invalid_uri(tmp_path: Path) -> None:
    """Test that a line with a colon that is not an http(s) URL fails with its line number."""
    path = write_list(tmp_path, "https://github.com/org/repo1\n:invalid:\nhttps://github.com/org/repo3")
    with pytest.raises(RepositoryListError, match="invalid URI") as exc_info:
        parse_repository_file(path)
    assert exc_info.value.line_number == 2
    assert "line 2" in str(exc_info.value)


@pytest.mark.parametrize(
    "line",
    [
        pytest.param("https://github.com/org", id="URL with one segment"),
        pytest.param("https://github.com/org/repo/tree/main", id="URL with extra segments"),
        pytest.param("org/repo/extra", id="too many parts"),
        pytest.param("org/", id="missing repo"),
    ],
)
def test_parse_repository_file_malformed(tmp_path: Path, line: str) -> None:
    """Test that malformed lines fail the whole read."""
    with pytest.raises(RepositoryListError) as exc_info:
        parse_repository_file(write_list(tmp_path, f"org/ok\n{line}\n"))
    assert exc_info.value.line_number == 2


def test_parse_repository_file_bare_name_requires_owner(tmp_path: Path) -> None:
    """Test that a bare repository name fails without a default owner."""
    with pytest.raises(RepositoryListError, match="has no owner"):
        parse_repository_file(write_list(tmp_path, "repo1\n"))


def test_parse_repository_file_bare_name_with_default_owner(tmp_path: Path) -> None:
    """Test that bare repository names are qualified with the default owner."""
    repositories = parse_repository_file(write_list(tmp_path, "repo1\nother-org/repo2\n"), default_owner="source-org")
    assert repositories == ["source-org/repo1", "other-org/repo2"]


def test_parse_repository_file_not_found(tmp_path: Path) -> None:
    """Test that a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        parse_repository_file(tmp_path / "missing.txt")
