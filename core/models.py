"""
Data model for the Knit bundler.

All models are frozen: a Module is read once per bundle run and never
changes afterwards.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_EXTENSION = ".js"


class ImportStatement(BaseModel):
    """A recognized import declaration and its exact source span."""
    model_config = ConfigDict(frozen=True)

    specifier: str
    start: int
    end: int  # exclusive, covers the trailing ';' when present
    line: int


class Module(BaseModel):
    """A source file, identified by its absolute path."""
    model_config = ConfigDict(frozen=True)

    path: str
    content: str
    imports: List[ImportStatement]
    dependencies: List[str]
    stripped: str


class Bundle(BaseModel):
    """The output of one bundle run."""
    model_config = ConfigDict(frozen=True)

    entry: str
    text: str
    modules: List[str]  # emission order, entry last


class LineChange(BaseModel):
    """One differing line index between two bundle texts."""
    model_config = ConfigDict(frozen=True)

    index: int
    removed: Optional[str] = None
    added: Optional[str] = None


class BundleConfig(BaseModel):
    """Settings for a bundle run or watch session."""
    model_config = ConfigDict(frozen=True)

    entry: str
    output: str
    watch: bool = False
    diff: bool = False
    extension: str = DEFAULT_EXTENSION
    refresh_watches: bool = True

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value):
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must look like '.js', got {value!r}")
        return value
