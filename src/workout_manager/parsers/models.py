"""
Parser Models

Pydantic models for a single parsed workout block.

A block parses to exactly one WorkoutEntry variant, selected by its `kind`:
- 'workout': a v1 or v2 workout with details and exercise sets
- 'week':    a week marker row
- 'unknown': a block whose header matched nothing

Textual fields are never None: an empty string means "absent". Set lines
inherit the entry's global set count and rest time when they carry none.
"""

from typing import Annotated, Dict, List, Literal, Union
from pydantic import BaseModel, Field


class ExerciseSet(BaseModel):
    """One exercise line of a workout block (values are kept verbatim)"""
    name: str = Field(default="", description="Exercise name")
    sets: str = Field(default="", description="Effective set count")
    reps: str = Field(default="", description="Reps per set, e.g. '5 3 2 2'")
    weight: str = Field(default="", description="Load, e.g. '2x20lb' or 'body'")
    rest: str = Field(default="", description="Effective rest time, e.g. '30s'")


class WorkoutDetails(BaseModel):
    """Header-level data of a workout block"""
    name: str = ""
    date: str = Field(default="", description="Date as written, e.g. '1/11'")
    hour: str = Field(default="", description="Hour as written, e.g. '7p'")
    duration: str = Field(default="", description="Total workout duration ('dur=')")
    work_time: str = Field(default="", description="Total non-rest time ('worktime=')")
    external_link: str = Field(default="", description="Garmin id or url ('garmin=')")
    global_set_count: str = ""
    global_rest_time: str = ""
    metadata: Dict[str, str] = Field(
        default_factory=dict,
        description="Raw key=value pairs from a v2 header, including unrecognized keys",
    )


class WorkoutLog(BaseModel):
    """A decoded workout block (either dialect)"""
    kind: Literal["workout"] = "workout"
    dialect: Literal["v1", "v2"]
    details: WorkoutDetails = Field(default_factory=WorkoutDetails)
    sets: List[ExerciseSet] = Field(default_factory=list)


class WeekMarker(BaseModel):
    """A 'week' header block"""
    kind: Literal["week"] = "week"
    name: str = "Week"


class UnknownEntry(BaseModel):
    """A block whose header matched no dialect"""
    kind: Literal["unknown"] = "unknown"


WorkoutEntry = Annotated[
    Union[WorkoutLog, WeekMarker, UnknownEntry],
    Field(discriminator="kind"),
]
