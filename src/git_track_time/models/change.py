"""Change statistics for a single commit."""

from pydantic import BaseModel, Field


class ChangeStats(BaseModel):
    """File and line counts taken from a commit's diff summary."""

    files_changed: int = Field(default=1, ge=0)
    lines_added: int = Field(default=0, ge=0)
    lines_removed: int = Field(default=0, ge=0)

    model_config = {"frozen": True}

    @property
    def total_lines(self) -> int:
        """Lines added plus lines removed."""
        return self.lines_added + self.lines_removed
