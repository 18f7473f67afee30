"""
The fixed Figma tool catalogue, in the order tools are listed to callers.
"""

from typing import Tuple

from figma_mcp.infrastructure.http import endpoints as ep
from figma_mcp.infrastructure.tools.tool_base import ToolDefinition

_FILE = {"fileKey": "file_key"}
_COMMENT = {"fileKey": "file_key", "commentId": "comment_id"}
_TEAM = {"teamId": "team_id"}
_KEY = {"key": "key"}

FIGMA_TOOLS: Tuple[ToolDefinition, ...] = (
    ToolDefinition("figma_get_me", "Get the current user", ep.GET_ME),
    ToolDefinition("figma_get_file", "Get a Figma file by key", ep.GET_FILE, "get_file", _FILE),
    ToolDefinition(
        "figma_get_file_nodes", "Get specific nodes from a Figma file", ep.GET_FILE_NODES, "get_file_nodes", _FILE
    ),
    ToolDefinition("figma_get_images", "Render images from a Figma file", ep.GET_IMAGES, "get_images", _FILE),
    ToolDefinition("figma_get_image_fills", "Get image fills in a Figma file", ep.GET_IMAGE_FILLS, "file_key", _FILE),
    ToolDefinition(
        "figma_get_file_versions",
        "Get version history of a Figma file",
        ep.GET_FILE_VERSIONS,
        "get_file_versions",
        _FILE,
    ),
    ToolDefinition("figma_get_comments", "Get comments in a Figma file", ep.GET_COMMENTS, "get_comments", _FILE),
    ToolDefinition(
        "figma_post_comment", "Add a comment to a Figma file", ep.POST_COMMENT, "post_comment", _FILE, "body"
    ),
    ToolDefinition(
        "figma_delete_comment", "Delete a comment from a Figma file", ep.DELETE_COMMENT, "delete_comment", _COMMENT
    ),
    ToolDefinition(
        "figma_get_comment_reactions",
        "Get reactions for a comment",
        ep.GET_COMMENT_REACTIONS,
        "get_comment_reactions",
        _COMMENT,
    ),
    ToolDefinition(
        "figma_post_comment_reaction",
        "Add a reaction to a comment",
        ep.POST_COMMENT_REACTION,
        "post_comment_reaction",
        _COMMENT,
        "body",
    ),
    # The API reads the emoji to remove from the query string on DELETE.
    ToolDefinition(
        "figma_delete_comment_reaction",
        "Delete a reaction from a comment",
        ep.DELETE_COMMENT_REACTION,
        "delete_comment_reaction",
        _COMMENT,
    ),
    ToolDefinition(
        "figma_get_team_projects", "Get projects in a team", ep.GET_TEAM_PROJECTS, "get_team_projects", _TEAM
    ),
    ToolDefinition(
        "figma_get_project_files",
        "Get files in a project",
        ep.GET_PROJECT_FILES,
        "get_project_files",
        {"projectId": "project_id"},
    ),
    ToolDefinition(
        "figma_get_team_components",
        "Get components in a team",
        ep.GET_TEAM_COMPONENTS,
        "get_team_components",
        _TEAM,
    ),
    ToolDefinition(
        "figma_get_file_components", "Get components in a file", ep.GET_FILE_COMPONENTS, "file_key", _FILE
    ),
    ToolDefinition("figma_get_component", "Get a component by key", ep.GET_COMPONENT, "get_component", _KEY),
    ToolDefinition(
        "figma_get_team_component_sets",
        "Get component sets in a team",
        ep.GET_TEAM_COMPONENT_SETS,
        "get_team_component_sets",
        _TEAM,
    ),
    ToolDefinition(
        "figma_get_file_component_sets",
        "Get component sets in a file",
        ep.GET_FILE_COMPONENT_SETS,
        "file_key",
        _FILE,
    ),
    ToolDefinition(
        "figma_get_component_set",
        "Get a component set by key",
        ep.GET_COMPONENT_SET,
        "get_component_set",
        _KEY,
    ),
    ToolDefinition("figma_get_team_styles", "Get styles in a team", ep.GET_TEAM_STYLES, "get_team_styles", _TEAM),
    ToolDefinition("figma_get_file_styles", "Get styles in a file", ep.GET_FILE_STYLES, "file_key", _FILE),
    ToolDefinition("figma_get_style", "Get a style by key", ep.GET_STYLE, "get_style", _KEY),
)
