"""Unit tests for read_file."""

import asyncio

import httpx
import pytest

from ..api_client import GitLabApiError
from ..models import MAX_READ_BYTES
from .read_file import FileTooLargeError, ReadFileArgs, number_lines, read_file, select_lines

FIVE_LINES = "one\ntwo\nthree\nfour\nfive"


def describe_select_lines():
    def it_selects_everything_without_range():
        start, lines, total = select_lines(FIVE_LINES)
        assert start == 1
        assert lines == ["one", "two", "three", "four", "five"]
        assert total == 5

    def it_clamps_range_to_file():
        start, lines, _ = select_lines(FIVE_LINES, (0, 10000))
        assert start == 1
        assert len(lines) == 5

    def it_selects_inclusive_range():
        start, lines, _ = select_lines(FIVE_LINES, (3, 4))
        assert start == 3
        assert lines == ["three", "four"]

    def it_returns_nothing_for_inverted_range():
        _, lines, total = select_lines(FIVE_LINES, (4, 2))
        assert lines == []
        assert total == 5

    def it_clamps_negative_end_to_nothing():
        start, lines, total = select_lines(FIVE_LINES, (1, -1))
        assert start == 1
        assert lines == []
        assert total == 5

    def it_counts_trailing_newline_as_a_line():
        _, lines, total = select_lines("a\nb\n")
        assert total == 3
        assert lines[-1] == ""


def describe_number_lines():
    def it_prefixes_absolute_line_numbers():
        assert number_lines(["three", "four"], 3) == "3: three\n4: four"

    def it_handles_empty_selection():
        assert number_lines([], 1) == ""


def describe_ReadFileArgs():
    def it_parses_arguments():
        args = ReadFileArgs.from_arguments({"project": "g/p", "path": "a.py", "read_range": [1.0, 5]})
        assert args == ReadFileArgs(project="g/p", path="a.py", read_range=(1, 5))

    def it_requires_path():
        with pytest.raises(ValueError, match="path is required"):
            ReadFileArgs.from_arguments({"project": "g/p"})

    def it_rejects_malformed_range():
        with pytest.raises(ValueError, match="read_range"):
            ReadFileArgs.from_arguments({"project": "g/p", "path": "a.py", "read_range": [1]})


def describe_read_file():
    def it_reads_numbered_lines(gitlab, config):
        requests = gitlab(lambda request: httpx.Response(200, text=FIVE_LINES))

        result = asyncio.run(
            read_file(ReadFileArgs(project="group/project", path="src/app.py", read_range=(3, 4)), config)
        )

        assert result == {"absolutePath": "/group/project/src/app.py", "content": "3: three\n4: four"}
        assert requests[0].url.raw_path == b"/api/v4/projects/group%2Fproject/repository/files/src%2Fapp.py/raw"

    def it_normalizes_project_url_and_path(gitlab, config):
        requests = gitlab(lambda request: httpx.Response(200, text="x"))

        result = asyncio.run(
            read_file(
                ReadFileArgs(
                    project="https://gitlab.com/group/project.git",
                    path="file:///group/project/README.md",
                ),
                config,
            )
        )

        assert result["absolutePath"] == "/group/project/README.md"
        assert requests[0].url.raw_path.endswith(b"/files/README.md/raw")

    def it_reports_progress(gitlab, config):
        gitlab(lambda request: httpx.Response(200, text="x"))
        messages = []

        asyncio.run(read_file(ReadFileArgs(project="g/p", path="a.py"), config, messages.append))

        assert messages == ['Reading file "a.py" from g/p...']

    def it_accepts_exactly_the_size_cap(gitlab, config):
        gitlab(lambda request: httpx.Response(200, text="a" * MAX_READ_BYTES))

        result = asyncio.run(read_file(ReadFileArgs(project="g/p", path="big.txt"), config))

        assert result["content"].startswith("1: aaa")

    def it_rejects_one_byte_over_the_cap(gitlab, config):
        gitlab(lambda request: httpx.Response(200, text="a" * (MAX_READ_BYTES + 1)))

        with pytest.raises(FileTooLargeError, match="The file has 1 lines") as exc:
            asyncio.run(read_file(ReadFileArgs(project="g/p", path="big.txt"), config))

        assert exc.value.size_bytes == MAX_READ_BYTES + 1
        assert exc.value.total_lines == 1

    def it_measures_size_in_utf8_bytes(gitlab, config):
        # 3 bytes per character
        gitlab(lambda request: httpx.Response(200, text="€" * (MAX_READ_BYTES // 3 + 1)))

        with pytest.raises(FileTooLargeError):
            asyncio.run(read_file(ReadFileArgs(project="g/p", path="euro.txt"), config))

    def it_allows_a_narrow_range_of_a_large_file(gitlab, config):
        big = "\n".join("x" * 1000 for _ in range(500))
        gitlab(lambda request: httpx.Response(200, text=big))

        result = asyncio.run(read_file(ReadFileArgs(project="g/p", path="big.txt", read_range=(10, 11)), config))

        assert result["content"].splitlines()[0].startswith("10: x")

    def it_raises_on_platform_rejection(gitlab, config):
        gitlab(lambda request: httpx.Response(404, json={"message": "404 File Not Found"}))

        with pytest.raises(GitLabApiError, match="Failed to read file: 404 Not Found"):
            asyncio.run(read_file(ReadFileArgs(project="g/p", path="missing.py"), config))
