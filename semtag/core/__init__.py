"""Core plumbing shared by the CLI: results, exit codes, config helpers.

Configuration lives in `semtag.core.config` and is imported from there
directly, since it depends on the version package.
"""

from .errors import ErrorCode
from .result import Err, Ok, Result

__all__ = [
    # errors
    "ErrorCode",
    # result
    "Err",
    "Ok",
    "Result",
]
