from .loop import fixed_point
from .loop import DEFAULT_MAX_ITER

from .errors import FixedPointError
from .errors import IterationLimitExceeded
from .errors import ValueLimitExceeded
from .errors import InvalidConfiguration

from .converge import adjust_tol_for_dtype
from .converge import exceeds
from .converge import is_tolerance_achievable
from .converge import make_tolerance_test
from .converge import max_diff_test
from .converge import values_equal

from .observe import Observer
from .observe import LoggingObserver
from .observe import RecordingObserver
