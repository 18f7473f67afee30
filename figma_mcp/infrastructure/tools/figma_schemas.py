"""
Argument shapes accepted by the Figma tools.

Field names are the ones callers send; path parameters use camelCase
(fileKey, commentId, teamId, ...) and query/body fields keep the API's
snake_case names so they pass through unchanged.
"""

from figma_mcp.infrastructure.tools.schema import (
    ArgumentSchema,
    SchemaRegistry,
    any_value,
    boolean,
    enum,
    number,
    string,
)

IMAGE_FORMATS = ("jpg", "png", "svg", "pdf")

FILE_KEY = ArgumentSchema({
    "fileKey": string("The file key to use for the operation"),
})

GET_FILE = FILE_KEY.extend(
    version=string("A specific version ID to get", required=False),
    ids=string("Comma separated list of nodes that you care about in the document", required=False),
    depth=number("Positive integer representing how deep into the document tree to traverse", required=False),
    geometry=string('Set to "paths" to export vector data', required=False),
    plugin_data=string('A comma separated list of plugin IDs and/or the string "shared"', required=False),
    branch_data=boolean("Returns branch metadata for the requested file", required=False),
)

GET_FILE_NODES = FILE_KEY.extend(
    ids=string("A comma separated list of node IDs to retrieve and convert"),
    version=string("A specific version ID to get", required=False),
    depth=number("Positive integer representing how deep into the node tree to traverse", required=False),
    geometry=string('Set to "paths" to export vector data', required=False),
    plugin_data=string('A comma separated list of plugin IDs and/or the string "shared"', required=False),
)

GET_IMAGES = FILE_KEY.extend(
    ids=string("A comma separated list of node IDs to render"),
    version=string("A specific version ID to get", required=False),
    scale=number("A number between 0.01 and 4, the image scaling factor", required=False),
    format=enum(IMAGE_FORMATS, "A string enum for the image output format", required=False),
    svg_outline_text=boolean(
        "Whether text elements are rendered as outlines (vector paths) or as <text> elements in SVGs",
        required=False,
    ),
    svg_include_id=boolean("Whether to include id attributes for all SVG elements", required=False),
    svg_include_node_id=boolean("Whether to include node id attributes for all SVG elements", required=False),
    svg_simplify_stroke=boolean(
        "Whether to simplify inside/outside strokes and use stroke attribute if possible",
        required=False,
    ),
    contents_only=boolean("Whether content that overlaps the node should be excluded from rendering", required=False),
    use_absolute_bounds=boolean(
        "Use the full dimensions of the node regardless of whether or not it is cropped",
        required=False,
    ),
)

GET_FILE_VERSIONS = FILE_KEY.extend(
    page_size=number("The number of items returned in a page of the response", required=False),
    before=number("A version ID for one of the versions in the history. Gets versions before this ID", required=False),
    after=number("A version ID for one of the versions in the history. Gets versions after this ID", required=False),
)

GET_COMMENTS = FILE_KEY.extend(
    as_md=boolean("Whether to return the comments as markdown", required=False, default=False),
)

POST_COMMENT = FILE_KEY.extend(
    message=string("The text contents of the comment to post"),
    comment_id=string("The ID of the comment to reply to, if any", required=False),
    client_meta=any_value("The position where to place the comment", required=False),
)

DELETE_COMMENT = FILE_KEY.extend(
    commentId=string("The ID of the comment to delete"),
)

GET_COMMENT_REACTIONS = FILE_KEY.extend(
    commentId=string("The ID of the comment to get reactions for"),
    cursor=string("Cursor for pagination", required=False),
)

POST_COMMENT_REACTION = FILE_KEY.extend(
    commentId=string("The ID of the comment to add a reaction to"),
    emoji=string("The emoji to react with"),
)

DELETE_COMMENT_REACTION = FILE_KEY.extend(
    commentId=string("The ID of the comment to delete a reaction from"),
    emoji=string("The emoji to remove"),
)

GET_TEAM_PROJECTS = ArgumentSchema({
    "teamId": string("The ID of the team to get projects for"),
})

GET_PROJECT_FILES = ArgumentSchema({
    "projectId": string("The ID of the project to get files for"),
    "branch_data": boolean("Returns branch metadata in the response", required=False),
})


def _team_paged(subject: str) -> ArgumentSchema:
    return ArgumentSchema({
        "teamId": string(f"The ID of the team to get {subject} for"),
        "page_size": number("Number of items to return in a paged list of results", required=False),
        "after": number(
            f"Cursor indicating which id after which to start retrieving {subject} for",
            required=False,
        ),
        "before": number(
            f"Cursor indicating which id before which to start retrieving {subject} for",
            required=False,
        ),
    })


GET_TEAM_COMPONENTS = _team_paged("components")
GET_TEAM_COMPONENT_SETS = _team_paged("component sets")
GET_TEAM_STYLES = _team_paged("styles")

GET_COMPONENT = ArgumentSchema({"key": string("The key of the component to get")})
GET_COMPONENT_SET = ArgumentSchema({"key": string("The key of the component set to get")})
GET_STYLE = ArgumentSchema({"key": string("The key of the style to get")})

FIGMA_SCHEMAS = {
    "file_key": FILE_KEY,
    "get_file": GET_FILE,
    "get_file_nodes": GET_FILE_NODES,
    "get_images": GET_IMAGES,
    "get_file_versions": GET_FILE_VERSIONS,
    "get_comments": GET_COMMENTS,
    "post_comment": POST_COMMENT,
    "delete_comment": DELETE_COMMENT,
    "get_comment_reactions": GET_COMMENT_REACTIONS,
    "post_comment_reaction": POST_COMMENT_REACTION,
    "delete_comment_reaction": DELETE_COMMENT_REACTION,
    "get_team_projects": GET_TEAM_PROJECTS,
    "get_project_files": GET_PROJECT_FILES,
    "get_team_components": GET_TEAM_COMPONENTS,
    "get_team_component_sets": GET_TEAM_COMPONENT_SETS,
    "get_team_styles": GET_TEAM_STYLES,
    "get_component": GET_COMPONENT,
    "get_component_set": GET_COMPONENT_SET,
    "get_style": GET_STYLE,
}


def register_figma_schemas(registry: SchemaRegistry) -> SchemaRegistry:
    for schema_id, schema in FIGMA_SCHEMAS.items():
        registry.register(schema_id, schema)
    return registry
