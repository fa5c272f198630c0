"""Result sheet rows and per-day rider entries."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from showjumping.models.scoring import (
    NO_RESULT,
    NOT_CONTINUING_CODE,
    RawValue,
    is_blank,
    is_elimination,
)


class ResultRow(BaseModel):
    """A normalized row of a day/category result sheet."""

    model_config = ConfigDict(frozen=True)

    license: str = Field(default="", description="Federation license (rider identity)")
    rider_name: str = Field(default="", description="Rider name")
    mount: str = Field(default="", description="Horse name")
    club: str = Field(default="", description="Club")
    score: RawValue = Field(default=None, description="Penalties or elimination code")
    time: RawValue = Field(default=None, description="Time as recorded (M:SS, SS.ss)")
    run_order: RawValue = Field(default=None, description="Order of start (O.S.)")
    placement: RawValue = Field(default=None, description="Placement as recorded")
    mount_number: RawValue = Field(default=None, description="Bib / horse number")
    extra: dict[str, Any] = Field(
        default_factory=dict,
        description="Columns outside the logical schema, as read",
    )

    @field_validator("license", "rider_name", "mount", "club", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> str:
        if is_blank(value):
            return ""
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        return str(value).strip()

    @property
    def is_elimination(self) -> bool:
        """Check if the recorded score is an elimination code."""
        return is_elimination(self.score)


class DayResult(BaseModel):
    """All rows of one day's result sheet for one category."""

    model_config = ConfigDict(frozen=True)

    day: str = Field(..., description="Day identifier, e.g. SABADO")
    category: str = Field(..., description="Category identifier, e.g. 110")
    rows: tuple[ResultRow, ...] = Field(default_factory=tuple)
    source: str = Field(default="", description="Sheet the rows were read from")

    @property
    def is_empty(self) -> bool:
        """A sheet without rows counts as missing."""
        return len(self.rows) == 0


class RiderDayEntry(BaseModel):
    """A rider's result for one day."""

    score: RawValue = Field(default=NO_RESULT, description="Score as displayed")
    original_score: RawValue = Field(
        default=None, description="Score token as recorded in the sheet"
    )
    time: RawValue = Field(default=NO_RESULT)
    mount: str = Field(default=NO_RESULT)
    placement: RawValue = Field(default=NO_RESULT)

    @computed_field
    @property
    def has_result(self) -> bool:
        """Whether the rider has any result for the day."""
        return self.score != NO_RESULT and self.score is not None

    @computed_field
    @property
    def is_elimination(self) -> bool:
        """Whether the recorded score is an elimination code."""
        return is_elimination(self.original_score)

    @computed_field
    @property
    def tooltip(self) -> str:
        """Multi-line summary of the day's result."""
        if not self.has_result:
            return "Sin resultado"
        return (
            f"Caballo: {str(self.mount).upper()}\n"
            f"Tiempo: {str(self.time).upper()}\n"
            f"Puntos: {str(self.score).upper()}\n"
            f"Clasificación: {str(self.placement).upper()}"
        )

    @computed_field
    @property
    def tiebreak_display(self) -> str:
        """Score/time label used for jump-off results."""
        if is_elimination(self.score):
            if str(self.score).strip().upper() == NOT_CONTINUING_CODE:
                return "NO CONTINUA"
            return "Eliminado"
        return f"{self.score}/{self.time if not is_blank(self.time) else NO_RESULT}"

    @classmethod
    def missing(cls) -> "RiderDayEntry":
        """Entry for a day the rider has no row."""
        return cls()
