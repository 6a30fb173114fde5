"""Error value hierarchy — inspectors return these inside Err, never raise them.

Every error is a frozen dataclass value that can be pattern-matched,
serialized, and stored. Base class ExerciseError, three @final subclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import final

from optexercise.core.types import UtcDatetime


@dataclass(frozen=True, slots=True)
class ExerciseError:
    """Base error value. NOT @final — has subclasses."""

    message: str
    code: str
    timestamp: UtcDatetime
    source: str  # "module.function" that produced this error

    def with_context(self, context: str) -> ExerciseError:
        """Return a copy with context prepended to message."""
        return replace(self, message=f"{context}: {self.message}")

    def to_dict(self) -> dict[str, object]:
        return {
            "message": self.message,
            "code": self.code,
            "timestamp": self.timestamp.value.isoformat(),
            "source": self.source,
        }


@final
@dataclass(frozen=True, slots=True)
class FieldViolation:
    """Describes a single constructor argument that failed validation."""

    path: str  # e.g. "RebatedExercise.rebates"
    constraint: str  # e.g. "length must equal number of exercise dates (3)"
    actual_value: str  # e.g. "2"


@final
@dataclass(frozen=True, slots=True)
class ConstructionError(ExerciseError):
    """Malformed constructor input; no value was built."""

    fields: tuple[FieldViolation, ...]

    def to_dict(self) -> dict[str, object]:
        return {
            **ExerciseError.to_dict(self),
            "fields": [
                {"path": f.path, "constraint": f.constraint, "actual_value": f.actual_value}
                for f in self.fields
            ],
        }


@final
@dataclass(frozen=True, slots=True)
class IndexOutOfRangeError(ExerciseError):
    """Indexed accessor called outside [0, size)."""

    index: int
    size: int

    def to_dict(self) -> dict[str, object]:
        return {**ExerciseError.to_dict(self), "index": self.index, "size": self.size}


@final
@dataclass(frozen=True, slots=True)
class UnsupportedOperationError(ExerciseError):
    """Operation is not defined for this exercise style. Permanent, not transient."""

    operation: str
    exercise_type: str

    def to_dict(self) -> dict[str, object]:
        return {
            **ExerciseError.to_dict(self),
            "operation": self.operation,
            "exercise_type": self.exercise_type,
        }


# ---------------------------------------------------------------------------
# Builders used by the instrument modules
# ---------------------------------------------------------------------------


def construction_error(
    source: str, code: str, path: str, constraint: str, actual_value: object,
) -> ConstructionError:
    return ConstructionError(
        message=f"{path} {constraint}, got {actual_value!r}",
        code=code,
        timestamp=UtcDatetime.now(),
        source=source,
        fields=(FieldViolation(
            path=path, constraint=constraint, actual_value=repr(actual_value),
        ),),
    )


def index_out_of_range(source: str, what: str, index: int, size: int) -> IndexOutOfRangeError:
    return IndexOutOfRangeError(
        message=f"{what} with index {index} does not exist, valid range is [0, {size})",
        code="INDEX_OUT_OF_RANGE",
        timestamp=UtcDatetime.now(),
        source=source,
        index=index,
        size=size,
    )
