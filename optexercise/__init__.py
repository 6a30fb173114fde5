"""optexercise — option exercise rights and rebated exercise."""

import logging

from optexercise.core import ConstructionError as ConstructionError
from optexercise.core import Err as Err
from optexercise.core import IndexOutOfRangeError as IndexOutOfRangeError
from optexercise.core import Ok as Ok
from optexercise.core import UnsupportedOperationError as UnsupportedOperationError
from optexercise.instrument import AmericanExercise as AmericanExercise
from optexercise.instrument import BermudanExercise as BermudanExercise
from optexercise.instrument import EuropeanExercise as EuropeanExercise
from optexercise.instrument import Exercise as Exercise
from optexercise.instrument import ExerciseType as ExerciseType
from optexercise.instrument import RebatedExercise as RebatedExercise

logging.getLogger(__name__).addHandler(logging.NullHandler())
