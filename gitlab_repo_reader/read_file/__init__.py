from .read_file import TOOL_DEFINITION, FileTooLargeError, ReadFileArgs, read_file

__all__ = ["TOOL_DEFINITION", "FileTooLargeError", "ReadFileArgs", "read_file"]
