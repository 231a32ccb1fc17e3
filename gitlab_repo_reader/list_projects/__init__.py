from .list_projects import TOOL_DEFINITION, ListProjectsArgs, list_projects, project_info

__all__ = ["TOOL_DEFINITION", "ListProjectsArgs", "list_projects", "project_info"]
