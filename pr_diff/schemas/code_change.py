from enum import Enum

from pydantic import BaseModel, ConfigDict


class ChangeType(str, Enum):
    """Enum for file change types."""

    ADDED = "A"
    MODIFIED = "M"
    DELETED = "D"


class CodeChange(BaseModel):
    """Represents one changed file with its content on both sides."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    old_content: str = ""  # Empty when the file did not exist on the base branch
    new_content: str = ""  # Empty when the file no longer exists on the compare branch
    change_type: ChangeType
