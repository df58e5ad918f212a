from __future__ import annotations

from pydantic import BaseModel, Field
from pathlib import Path

class RunSettings(BaseModel):
    cwd: Path | None = None
    # Merged over os.environ, never replaces it
    env: dict[str, str] | None = None
    timeout: float | None = Field(default=None, gt=0)
    exit_code: int = Field(default=1, ge=1)

class ValidateSettings(BaseModel):
    list_ancestors: bool = True
