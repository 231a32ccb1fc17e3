"""CLI commands for reading GitLab repositories."""

import argparse
import asyncio
import json
import sys


def _progress(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _add_project(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "project",
        help='Project path (e.g., "group/project") or full URL',
    )


def _add_paging(parser: argparse.ArgumentParser, default_limit: int) -> None:
    parser.add_argument(
        "--limit",
        type=int,
        default=default_limit,
        help=f"Maximum number of results (default: {default_limit})",
    )
    parser.add_argument(
        "--offset",
        type=int,
        default=0,
        help="Number of results to skip (default: 0)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse GitLab repositories without a local checkout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve subcommand
    subparsers.add_parser(
        "serve",
        help="Run the MCP server on stdio (default)",
    )

    # read-file subcommand
    read_parser = subparsers.add_parser(
        "read-file",
        help="Print a file with line numbers",
    )
    _add_project(read_parser)
    read_parser.add_argument(
        "path",
        help="File path within the repository",
    )
    read_parser.add_argument(
        "--range",
        type=int,
        nargs=2,
        default=None,
        metavar=("START", "END"),
        help="Only read lines START..END (1-based, inclusive)",
    )

    # list-directory subcommand
    dir_parser = subparsers.add_parser(
        "list-directory",
        help="List one directory level",
    )
    _add_project(dir_parser)
    dir_parser.add_argument(
        "path",
        nargs="?",
        default="",
        help="Directory path (default: root)",
    )
    dir_parser.add_argument(
        "--limit",
        type=int,
        default=100,
        help="Maximum number of entries (default: 100)",
    )

    # list-projects subcommand
    projects_parser = subparsers.add_parser(
        "list-projects",
        help="List or search projects",
    )
    projects_parser.add_argument(
        "--search",
        default=None,
        help="Filter projects by name",
    )
    _add_paging(projects_parser, 30)

    # glob-files subcommand
    glob_parser = subparsers.add_parser(
        "glob-files",
        help="Find files matching a glob pattern",
    )
    _add_project(glob_parser)
    glob_parser.add_argument(
        "pattern",
        help='Glob pattern (e.g., "**/*.py")',
    )
    _add_paging(glob_parser, 100)

    # search-code subcommand
    search_parser = subparsers.add_parser(
        "search-code",
        help="Search code in a project",
    )
    _add_project(search_parser)
    search_parser.add_argument(
        "query",
        help="Keywords to find in code",
    )
    search_parser.add_argument(
        "--path",
        default=None,
        help="Limit search to file names/paths containing this",
    )
    _add_paging(search_parser, 25)

    # api subcommand
    api_parser = subparsers.add_parser(
        "api",
        help="Make a single GitLab API call and print the response",
    )
    api_parser.add_argument(
        "endpoint",
        help="API path with query string (e.g., projects?per_page=5)",
    )
    api_parser.add_argument(
        "--method",
        default="GET",
        help="HTTP method (default: GET)",
    )

    return parser


def _tool_call(args) -> tuple[str, dict]:
    """Map a parsed tool subcommand onto (tool name, tool arguments)."""
    if args.command == "read-file":
        arguments = {"project": args.project, "path": args.path}
        if args.range:
            arguments["read_range"] = list(args.range)
        return "read_file", arguments
    if args.command == "list-directory":
        return "list_directory", {"project": args.project, "path": args.path, "limit": args.limit}
    if args.command == "list-projects":
        return "list_projects", {"search": args.search, "limit": args.limit, "offset": args.offset}
    if args.command == "glob-files":
        return "glob_files", {
            "project": args.project,
            "filePattern": args.pattern,
            "limit": args.limit,
            "offset": args.offset,
        }
    return "search_code", {
        "project": args.project,
        "query": args.query,
        "path": args.path,
        "limit": args.limit,
        "offset": args.offset,
    }


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    command = args.command or "serve"

    from .api_client import GitLabApiError
    from .settings import get_settings

    try:
        config = get_settings().to_config()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if command == "serve":
        from .server import serve

        serve()
    elif command == "api":
        from .api_client import fetch_from_gitlab_api

        resp = asyncio.run(fetch_from_gitlab_api(args.endpoint, config, method=args.method))
        if not resp.ok:
            print(f"Error: {GitLabApiError.from_response('call API', resp)}", file=sys.stderr)
            sys.exit(1)
        if resp.has_data:
            json.dump(resp.data, sys.stdout, indent=2)
            sys.stdout.write("\n")
        else:
            sys.stdout.write(resp.text or "")
    else:
        from .server import run_tool

        name, arguments = _tool_call(args)
        try:
            result = asyncio.run(run_tool(name, arguments, config, on_progress=_progress))
        except (GitLabApiError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        json.dump(result, sys.stdout, indent=2)
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
