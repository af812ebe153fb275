"""pwstrength - password repetition / sequence metrics and permissibility check."""

__version__ = "0.1.0"

# 주요 API export
from .analyzer import max_repetition_count, max_sequence_length, is_permissible
from .audit import audit, summarize
from .backends import BACKENDS, Backend, get_backend
from .checker import PasswordChecker
from .errors import ConfigError, PasswordTypeError, UnknownBackendError
from .models import PasswordPolicy, StrengthReport

# camelCase aliases of the metric functions
maxRepetitionCount = max_repetition_count
maxSequenceLength = max_sequence_length
isPermissible = is_permissible

__all__ = [
    "max_repetition_count",
    "max_sequence_length",
    "is_permissible",
    "maxRepetitionCount",
    "maxSequenceLength",
    "isPermissible",
    "audit",
    "summarize",
    "BACKENDS",
    "Backend",
    "get_backend",
    "PasswordChecker",
    "ConfigError",
    "PasswordTypeError",
    "UnknownBackendError",
    "PasswordPolicy",
    "StrengthReport",
]
