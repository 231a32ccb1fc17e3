from .glob_files import TOOL_DEFINITION, GlobFilesArgs, compile_glob, glob_files, match_paths

__all__ = ["TOOL_DEFINITION", "GlobFilesArgs", "compile_glob", "glob_files", "match_paths"]
