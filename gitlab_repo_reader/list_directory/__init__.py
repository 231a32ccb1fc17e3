from .list_directory import TOOL_DEFINITION, ListDirectoryArgs, list_directory, sort_entries

__all__ = ["TOOL_DEFINITION", "ListDirectoryArgs", "list_directory", "sort_entries"]
