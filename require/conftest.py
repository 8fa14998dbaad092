# fixture setup
from require.tests.fixtures import (
    # function-scope element requirement, rejecting negative numbers
    fail_negative,
    # function-scope element requirement, rejecting anything
    fail_all,
    # function-scope DEBUG log capture of the aggregate checker
    aggregate_debug_log,
)
