"""optexercise.core — result values, errors, dates and calendars."""

from optexercise.core.calendar import add_business_days as add_business_days
from optexercise.core.calendar import adjust_date as adjust_date
from optexercise.core.calendar import advance as advance
from optexercise.core.calendar import end_of_month as end_of_month
from optexercise.core.calendar import is_business_day as is_business_day
from optexercise.core.calendar import is_end_of_month as is_end_of_month
from optexercise.core.errors import ConstructionError as ConstructionError
from optexercise.core.errors import ExerciseError as ExerciseError
from optexercise.core.errors import FieldViolation as FieldViolation
from optexercise.core.errors import IndexOutOfRangeError as IndexOutOfRangeError
from optexercise.core.errors import UnsupportedOperationError as UnsupportedOperationError
from optexercise.core.money import EXERCISE_DECIMAL_CONTEXT as EXERCISE_DECIMAL_CONTEXT
from optexercise.core.money import parse_amount as parse_amount
from optexercise.core.result import Err as Err
from optexercise.core.result import Ok as Ok
from optexercise.core.result import Result as Result
from optexercise.core.result import sequence as sequence
from optexercise.core.result import unwrap as unwrap
from optexercise.core.types import NULL_CALENDAR as NULL_CALENDAR
from optexercise.core.types import WEEKENDS_ONLY as WEEKENDS_ONLY
from optexercise.core.types import BusinessCalendar as BusinessCalendar
from optexercise.core.types import BusinessDayConvention as BusinessDayConvention
from optexercise.core.types import PeriodUnit as PeriodUnit
from optexercise.core.types import UtcDatetime as UtcDatetime
from optexercise.core.types import parse_convention as parse_convention
