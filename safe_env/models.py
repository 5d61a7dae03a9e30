"""
Pydantic models for environment checks
"""

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CheckEnvOptions(BaseModel):
    """Options shared by the check_env entry points; unknown keys are rejected"""

    model_config = ConfigDict(extra="forbid")

    prefix: Optional[str] = Field(None, description="Only names and source keys starting with this are checked")
    source: Optional[Dict[str, Optional[str]]] = Field(
        None, description="Explicit mapping to check; os.environ is used when omitted"
    )
    exit_on_error: bool = Field(True, description="Terminate the process when variables are missing")


class CheckEnvResult(BaseModel):
    """
    Outcome of a single check.

    success is always the negation of "missing is non-empty"; a result where
    the two disagree cannot be constructed.
    """

    model_config = ConfigDict(frozen=True)

    missing: List[str] = Field(default_factory=list, description="Missing names in required order")
    success: bool = Field(..., description="True when nothing is missing")

    @model_validator(mode="after")
    def _success_matches_missing(self) -> "CheckEnvResult":
        if self.success != (len(self.missing) == 0):
            raise ValueError("success must be True exactly when missing is empty")
        return self

    @classmethod
    def from_missing(cls, missing: Iterable[str]) -> "CheckEnvResult":
        names = list(missing)
        return cls(missing=names, success=not names)
