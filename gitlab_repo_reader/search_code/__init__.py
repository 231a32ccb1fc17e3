from .search_code import TOOL_DEFINITION, SearchCodeArgs, group_matches, search_code, truncate_fragment

__all__ = ["TOOL_DEFINITION", "SearchCodeArgs", "group_matches", "search_code", "truncate_fragment"]
