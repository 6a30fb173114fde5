"""optexercise.infra — configuration."""

from optexercise.infra.config import DEFAULT_REBATE_TERMS as DEFAULT_REBATE_TERMS
from optexercise.infra.config import NAMED_CALENDARS as NAMED_CALENDARS
from optexercise.infra.config import RebateDefaults as RebateDefaults
from optexercise.infra.config import rebate_defaults_from_mapping as rebate_defaults_from_mapping
