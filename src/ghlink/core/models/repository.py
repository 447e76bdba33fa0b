"""Repository identity models."""

from pydantic import BaseModel, Field


class RemoteIdentity(BaseModel):
    """Forge host and repository path taken from a git remote.

    For ``git@github.com:org/repo.git`` this is ``github.com`` and
    ``org/repo``.
    """

    host: str = Field(min_length=1)
    repo_path: str = Field(min_length=1)

    class Config:
        frozen = True

    @property
    def web_base(self) -> str:
        return f"https://{self.host}/{self.repo_path}"
