"""
Parameter schemas for the Jira tools.

One pydantic model per operation.  The models validate incoming tool
arguments and produce the JSON Schema advertised to tool-calling clients.
"""

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, Field

_ISSUE_KEY_DESCRIPTION = "JIRA issue key (e.g., PROJ-123)"
_WIKI_MARKUP = "in the format suitable for JIRA DATA CENTER edition (JIRA Wiki Markup)."


class SearchIssuesParams(BaseModel):
    jql: str = Field(description="JQL query string")
    max_results: Optional[int] = Field(
        default=None, description="Maximum number of results to return"
    )
    start_at: Optional[int] = Field(
        default=None, description="Index of the first result to return"
    )
    expand: Optional[List[str]] = Field(default=None, description="Fields to expand")


class GetIssueParams(BaseModel):
    issue_key: str = Field(description=_ISSUE_KEY_DESCRIPTION)
    expand: Optional[str] = Field(
        default=None, description="Comma separated fields to expand"
    )


class GetIssueCommentsParams(BaseModel):
    issue_key: str = Field(description=_ISSUE_KEY_DESCRIPTION)
    expand: Optional[str] = Field(
        default=None, description="Comma separated fields to expand"
    )


class PostIssueCommentParams(BaseModel):
    issue_key: str = Field(description=_ISSUE_KEY_DESCRIPTION)
    comment: str = Field(description=f"Comment text {_WIKI_MARKUP}")


class CreateIssueParams(BaseModel):
    project_key: str = Field(description="Project key (e.g., PROJ)")
    summary: str = Field(description="Issue summary")
    description: str = Field(description=f"Issue description {_WIKI_MARKUP}")
    issue_type_id: str = Field(
        description=(
            "Issue type id (e.g. id of Task, Bug, Story). Should be found first "
            "a correct number for specific JIRA installation."
        )
    )
    custom_fields: Optional[Dict[str, Any]] = Field(
        default=None,
        description=(
            "Optional custom fields as key-value pairs. Examples: "
            "{'customfield_10001': 'Custom Value', 'priority': {'id': '1'}, "
            "'assignee': {'name': 'john.doe'}, 'labels': ['urgent', 'bug']}"
        ),
    )


JIRA_TOOL_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "search_issues": SearchIssuesParams,
    "get_issue": GetIssueParams,
    "get_issue_comments": GetIssueCommentsParams,
    "post_issue_comment": PostIssueCommentParams,
    "create_issue": CreateIssueParams,
}


def input_schema(model: Type[BaseModel]) -> Dict[str, Any]:
    """JSON Schema for *model* with pydantic's ``title`` noise removed."""
    schema = model.model_json_schema()
    schema.pop("title", None)
    for prop in schema.get("properties", {}).values():
        prop.pop("title", None)
    return schema
