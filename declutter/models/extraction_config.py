# declutter/models/extraction_config.py
import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ----------------------------------------------------------------------
#  Scoring strategies – both are selectable, UNIFORM is the default
# ----------------------------------------------------------------------
class ScoringStrategy(str, Enum):
    UNIFORM = "uniform"
    PARAGRAPH = "paragraph"


# ----------------------------------------------------------------------
#  Phase boundaries reported to the instrumentation hook
# ----------------------------------------------------------------------
class ExtractionPhase(str, Enum):
    FILTER = "filter"
    SELECT = "select"
    RECONSTRUCT = "reconstruct"


_TAG_NAME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9-]*$")


class ExtractionConfig(BaseModel):
    """
    Options for a single ``extract`` call.

    Keyword vocabularies and score thresholds are deliberately *not* part of
    the configuration – they live as constants in
    ``declutter.services.extractor.classifiers``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: ScoringStrategy = Field(
        default=ScoringStrategy.UNIFORM,
        description="How content scores are computed before candidate selection",
    )
    container_tag: str = Field(
        default="div",
        description="Tag name of the element wrapping the extracted content",
    )

    @field_validator("container_tag")
    @classmethod
    def _validate_tag(cls, value: str) -> str:
        """Reject anything that could not be a plain element name."""
        if not _TAG_NAME_RE.match(value):
            raise ValueError(f"Invalid container tag '{value}'")
        return value.lower()
