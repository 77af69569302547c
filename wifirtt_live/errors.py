from __future__ import annotations


class ScanUnavailable(RuntimeError):
    """External scanner missing, timed out, failed or produced unusable output."""


class ProbeAttemptFailed(Exception):
    """One connect/echo attempt did not produce a sample."""


class InvalidHostParameter(ValueError):
    pass
