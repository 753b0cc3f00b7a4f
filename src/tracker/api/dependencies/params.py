"""Path parameter parsing dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from src.tracker.core.logging import bind_project_context

# Upper bound of the INTEGER primary key column
MAX_PROJECT_ID = 2**31 - 1


def parse_project_id(project_id: str) -> int:
    """Parse the `{project_id}` path segment as a positive 32-bit integer.

    The segment is declared as a string so that malformed IDs produce the
    400 `Invalid project ID` error rather than a generic validation error.
    """
    value = project_id.strip()
    if not (value.isascii() and value.isdigit()) or not 1 <= int(value) <= MAX_PROJECT_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid project ID",
        )
    parsed = int(value)
    bind_project_context(parsed)
    return parsed


ProjectId = Annotated[int, Depends(parse_project_id)]
