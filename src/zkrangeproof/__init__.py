import logging

from .errors import ParameterError, RangeProofError, RangeViolationError

logging.getLogger(__name__).addHandler(logging.NullHandler())
