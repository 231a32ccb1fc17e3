"""Unit tests for path normalization."""

from .paths import build_path, encode, normalize_file_path, normalize_project


def describe_normalize_project():
    def it_passes_bare_paths_through():
        assert normalize_project("group/project") == "group/project"

    def it_strips_git_suffix():
        assert normalize_project("group/project.git") == "group/project"

    def it_strips_scheme_and_host():
        assert normalize_project("https://gitlab.com/group/sub/project") == "group/sub/project"
        assert normalize_project("http://gitlab.local:8080/group/project") == "group/project"

    def it_strips_both():
        assert normalize_project("https://gitlab.com/group/project.git") == "group/project"

    def it_only_strips_one_suffix():
        assert normalize_project("group/project.git.git") == "group/project.git"

    def it_leaves_other_schemes_alone():
        assert normalize_project("ssh://gitlab.com/group/project") == "ssh://gitlab.com/group/project"

    def it_is_idempotent():
        for raw in [
            "group/project",
            "group/project.git",
            "https://gitlab.com/group/project.git",
            "https://gitlab.com/a/b/c",
            "",
        ]:
            once = normalize_project(raw)
            assert normalize_project(once) == once


def describe_normalize_file_path():
    def it_leaves_relative_paths_alone():
        assert normalize_file_path("src/main.py", "group/project") == "src/main.py"

    def it_strips_leading_slash():
        assert normalize_file_path("/src/main.py", "group/project") == "src/main.py"

    def it_strips_project_prefix():
        assert normalize_file_path("/group/project/src/main.py", "group/project") == "src/main.py"

    def it_strips_file_scheme_before_project_prefix():
        assert normalize_file_path("file:///group/project/src/main.py", "group/project") == "src/main.py"

    def it_strips_file_scheme_on_plain_paths():
        assert normalize_file_path("file://src/main.py", "group/project") == "src/main.py"

    def it_does_not_strip_a_sibling_project_prefix():
        assert (
            normalize_file_path("/group/project-two/main.py", "group/project")
            == "group/project-two/main.py"
        )

    def it_returns_empty_for_the_project_root():
        assert normalize_file_path("/group/project", "group/project") == ""
        assert normalize_file_path("/group/project/", "group/project") == ""


def describe_encode():
    def it_encodes_slashes():
        assert encode("group/project") == "group%2Fproject"

    def it_encodes_spaces_and_specials():
        assert encode("a b&c") == "a%20b%26c"


def describe_build_path():
    def it_appends_query():
        assert build_path("projects", per_page=10, page=2) == "projects?per_page=10&page=2"

    def it_skips_none():
        assert build_path("projects", search=None, page=1) == "projects?page=1"

    def it_returns_bare_path_without_params():
        assert build_path("projects") == "projects"

    def it_encodes_values():
        assert build_path("x", path="src/app") == "x?path=src%2Fapp"
