"""Index range model for safe slicing."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class IndexRange(BaseModel):
    """A contiguous range of sequence indices.

    A half-open range ``[lower, upper)`` excludes ``upper``; a closed range
    ``[lower, upper]`` includes it, so it covers one more element for the
    same bounds.

    Example:
        >>> IndexRange.half_open(6, 11).length
        5
        >>> IndexRange.closed(6, 11).length
        6
    """

    model_config = ConfigDict(frozen=True)

    lower: int = Field(description="First index in the range")
    upper: int = Field(description="Upper bound (excluded unless inclusive)")
    inclusive: bool = Field(default=False, description="True for a closed range")

    @model_validator(mode="after")
    def validate_bounds(self) -> "IndexRange":
        """Ensure the range is not reversed."""
        if self.lower > self.upper:
            raise ValueError(f"Range lower bound {self.lower} exceeds upper bound {self.upper}")
        return self

    @classmethod
    def half_open(cls, lower: int, upper: int) -> "IndexRange":
        """Create ``[lower, upper)``."""
        return cls(lower=lower, upper=upper)

    @classmethod
    def closed(cls, lower: int, upper: int) -> "IndexRange":
        """Create ``[lower, upper]``."""
        return cls(lower=lower, upper=upper, inclusive=True)

    @classmethod
    def coerce(cls, value: "IndexRange | range") -> "IndexRange":
        """Accept an IndexRange, or a builtin ``range`` with step 1 as half-open.

        Raises:
            ValueError: If a builtin range has a step other than 1
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, range):
            if value.step != 1:
                raise ValueError(f"Only ranges with step 1 can be sliced, got step {value.step}")
            return cls.half_open(value.start, value.stop)
        raise TypeError(f"Expected IndexRange or range, got {type(value).__name__}")

    @property
    def length(self) -> int:
        """Number of indices covered."""
        return self.upper - self.lower + (1 if self.inclusive else 0)
