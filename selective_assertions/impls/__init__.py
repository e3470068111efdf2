from .assert_eq_excluding import assert_eq_excluding
from .assert_eq_ignoring import assert_eq_ignoring
from .assert_eq_only import assert_eq_only, assert_eq_selected
