"""
One-time process initialization.

A host calls init() once before computing. It only installs diagnostics;
no kernel function depends on it having run.
"""

import faulthandler
import sys

_initialized = False


def init(stream=None) -> bool:
    """
    Enable the fault handler so crashes inside native kernels print a traceback.

    Parameters
    ----------
    stream : file, optional
        Where tracebacks are written. Defaults to sys.stderr.

    Returns
    -------
    bool
        True if this call installed the hook, False if it was already installed.
    """
    global _initialized
    if _initialized:
        return False

    faulthandler.enable(file=stream if stream is not None else sys.stderr)
    _initialized = True
    return True


def is_initialized() -> bool:
    """Return True once init() has installed the fault handler."""
    return _initialized
