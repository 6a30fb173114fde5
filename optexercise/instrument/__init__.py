"""optexercise.instrument — exercise styles and rebated exercise."""

from optexercise.instrument.exercise import MIN_DATE as MIN_DATE
from optexercise.instrument.exercise import AmericanExercise as AmericanExercise
from optexercise.instrument.exercise import BermudanExercise as BermudanExercise
from optexercise.instrument.exercise import EarlyExercise as EarlyExercise
from optexercise.instrument.exercise import EuropeanExercise as EuropeanExercise
from optexercise.instrument.exercise import Exercise as Exercise
from optexercise.instrument.exercise import ExerciseType as ExerciseType
from optexercise.instrument.exercise import exercise_date as exercise_date
from optexercise.instrument.exercise import exercise_dates as exercise_dates
from optexercise.instrument.exercise import exercise_type as exercise_type
from optexercise.instrument.exercise import is_chronological as is_chronological
from optexercise.instrument.exercise import is_early_exercise as is_early_exercise
from optexercise.instrument.exercise import last_date as last_date
from optexercise.instrument.exercise import payoff_at_expiry as payoff_at_expiry
from optexercise.instrument.rebated import RebatedExercise as RebatedExercise
