"""Commit model for the analysed git history."""

from pydantic import BaseModel


class Commit(BaseModel):
    """Represents a single commit read from the repository history."""

    hexsha: str
    timestamp: int  # Seconds since epoch, as used by git log --since/--until
    message: str

    model_config = {"frozen": True}

    @property
    def short_hash(self) -> str:
        """First 8 characters of the commit hash."""
        return self.hexsha[:8]
