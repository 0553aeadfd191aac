class RangeProofError(Exception):
    """Base class of every error raised by zkrangeproof"""


class ParameterError(RangeProofError, ValueError):
    """Invalid range parameters, curve name or mismatched public parameters"""


class RangeViolationError(RangeProofError, ValueError):
    """Secret value lies outside of the provable interval [0, u^l)"""
