"""Request bodies sent to the Jira REST API."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchRequest(BaseModel):
    """Body of ``POST /api/2/search``."""

    model_config = ConfigDict(populate_by_name=True)

    jql: str
    start_at: Optional[int] = Field(default=None, alias="startAt")
    max_results: Optional[int] = Field(default=None, alias="maxResults")
    expand: Optional[List[str]] = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CommentBody(BaseModel):
    body: str

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class IssueUpdate(BaseModel):
    """Body of ``POST /api/2/issue``; ``fields`` is an open key/value bag."""

    fields: Dict[str, Any] = Field(default_factory=dict)

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
