"""Format options schema"""

from typing import Any, Dict, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, field_validator
from pydantic.alias_generators import to_camel

from duration_format.core.config import settings
from duration_format.domain.value_objects.duration import TimeUnit

HideZero = Union[StrictBool, Literal["leading"]]


class FormatOptions(BaseModel):
    """Schema for format_duration() options

    Options can be given by field name or by their camelCase alias, e.g.
    ``max_entries`` or ``maxEntries``.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
        json_schema_extra={
            "example": {
                "hideZero": "leading",
                "maxEntries": 2,
                "noSpaceBeforeUnit": True,
                "separator": " ",
                "yearUnitNameSingular": "y",
                "yearUnitNamePlural": "y",
            }
        },
    )

    hide_zero: HideZero = Field(
        default=False,
        description='True hides every zero entry, "leading" hides only the leading run of zeros',
    )
    max_entries: Optional[StrictInt] = Field(
        default=None, gt=0, description="Maximum number of entries"
    )
    no_space_before_unit: StrictBool = False
    separator: str = Field(default_factory=lambda: settings.default_separator)

    year_unit_name_singular: str = "year"
    year_unit_name_plural: str = "years"
    day_unit_name_singular: str = "day"
    day_unit_name_plural: str = "days"
    hour_unit_name_singular: str = "hour"
    hour_unit_name_plural: str = "hours"
    minute_unit_name_singular: str = "minute"
    minute_unit_name_plural: str = "minutes"
    second_unit_name_singular: str = "second"
    second_unit_name_plural: str = "seconds"
    millisecond_unit_name_singular: str = "millisecond"
    millisecond_unit_name_plural: str = "milliseconds"

    @field_validator("max_entries", mode="before")
    @classmethod
    def reject_bool_max_entries(cls, value: Any) -> Any:
        """bool is an int subclass, but not an entry count"""
        if isinstance(value, bool):
            raise ValueError("max_entries must be a positive integer")
        return value

    def unit_names(self) -> Dict[TimeUnit, Tuple[str, str]]:
        """Get the (singular, plural) names of every unit"""
        return {
            TimeUnit.YEARS: (self.year_unit_name_singular, self.year_unit_name_plural),
            TimeUnit.DAYS: (self.day_unit_name_singular, self.day_unit_name_plural),
            TimeUnit.HOURS: (self.hour_unit_name_singular, self.hour_unit_name_plural),
            TimeUnit.MINUTES: (self.minute_unit_name_singular, self.minute_unit_name_plural),
            TimeUnit.SECONDS: (self.second_unit_name_singular, self.second_unit_name_plural),
            TimeUnit.MILLISECONDS: (
                self.millisecond_unit_name_singular,
                self.millisecond_unit_name_plural,
            ),
        }

    def unit_name(self, unit: TimeUnit, value: int) -> str:
        """Get the singular name when value is exactly 1, otherwise the plural"""
        singular, plural = self.unit_names()[unit]
        return singular if value == 1 else plural
