"""
Figma REST endpoints reachable through the client.

Paths use str.format placeholders; the dispatcher fills them from validated
arguments, quoting each value as a single path segment.
"""

from dataclasses import dataclass
from string import Formatter
from typing import FrozenSet
from urllib.parse import quote


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str

    @property
    def placeholders(self) -> FrozenSet[str]:
        return frozenset(name for _, name, _, _ in Formatter().parse(self.path) if name)

    def render(self, **params: str) -> str:
        return self.path.format(**{k: quote(str(v), safe="") for k, v in params.items()})


GET_ME = Endpoint("GET", "/v1/me")

GET_FILE = Endpoint("GET", "/v1/files/{file_key}")
GET_FILE_NODES = Endpoint("GET", "/v1/files/{file_key}/nodes")
GET_IMAGES = Endpoint("GET", "/v1/images/{file_key}")
GET_IMAGE_FILLS = Endpoint("GET", "/v1/files/{file_key}/images")
GET_FILE_VERSIONS = Endpoint("GET", "/v1/files/{file_key}/versions")

GET_COMMENTS = Endpoint("GET", "/v1/files/{file_key}/comments")
POST_COMMENT = Endpoint("POST", "/v1/files/{file_key}/comments")
DELETE_COMMENT = Endpoint("DELETE", "/v1/files/{file_key}/comments/{comment_id}")
GET_COMMENT_REACTIONS = Endpoint("GET", "/v1/files/{file_key}/comments/{comment_id}/reactions")
POST_COMMENT_REACTION = Endpoint("POST", "/v1/files/{file_key}/comments/{comment_id}/reactions")
DELETE_COMMENT_REACTION = Endpoint("DELETE", "/v1/files/{file_key}/comments/{comment_id}/reactions")

GET_TEAM_PROJECTS = Endpoint("GET", "/v1/teams/{team_id}/projects")
GET_PROJECT_FILES = Endpoint("GET", "/v1/projects/{project_id}/files")

GET_TEAM_COMPONENTS = Endpoint("GET", "/v1/teams/{team_id}/components")
GET_FILE_COMPONENTS = Endpoint("GET", "/v1/files/{file_key}/components")
GET_COMPONENT = Endpoint("GET", "/v1/components/{key}")

GET_TEAM_COMPONENT_SETS = Endpoint("GET", "/v1/teams/{team_id}/component_sets")
GET_FILE_COMPONENT_SETS = Endpoint("GET", "/v1/files/{file_key}/component_sets")
GET_COMPONENT_SET = Endpoint("GET", "/v1/component_sets/{key}")

GET_TEAM_STYLES = Endpoint("GET", "/v1/teams/{team_id}/styles")
GET_FILE_STYLES = Endpoint("GET", "/v1/files/{file_key}/styles")
GET_STYLE = Endpoint("GET", "/v1/styles/{key}")
