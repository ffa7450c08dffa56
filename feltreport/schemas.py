from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional, Union

class Event(BaseModel):
    """A single felt report as read from the USGS feed."""
    model_config = ConfigDict(frozen=True)

    title: str
    num_of_people: int = Field(ge=0, description="Number of people who reported feeling it")
    perceived_strength: str = Field(description="Community decimal intensity (CDI) as text")

    @field_validator("perceived_strength", mode="before")
    @classmethod
    def _strength_as_text(cls, value):
        # The feed carries CDI as a number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

class Found(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["found"] = "found"
    event: Event

class NotFound(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["not_found"] = "not_found"

FetchOutcome = Union[Found, NotFound]

def outcome_from(event: Optional[Event]) -> FetchOutcome:
    """Wrap an optional event into its explicit outcome."""
    if event is None:
        return NotFound()
    return Found(event=event)

class ScreenState(BaseModel):
    state: Literal["idle", "fetching", "displayed", "not_found"]
    title: str = ""
    number_of_people: str = ""
    perceived_strength: str = ""
    notices: List[str] = Field(default_factory=list, description="Transient notices still visible")
