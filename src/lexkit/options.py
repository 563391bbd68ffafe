"""
Scanner Configuration
=====================

Options controlling how a scan behaves. Configuration can come from:
- Default values (defined here)
- Explicit ScannerOptions(...) arguments
- Environment variables, through ScannerOptions.from_env()

Environment Variables
---------------------
| Variable              | Values                     | Default     |
|-----------------------|----------------------------|-------------|
| LEXKIT_ERROR_POLICY   | fail_fast, collect         | fail_fast   |
| LEXKIT_EMIT_EOF       | 1/0, true/false, yes/no    | true        |
| LEXKIT_MAX_ERRORS     | positive integer           | 100         |
| LEXKIT_KEYWORDS       | comma separated words      | (empty)     |
"""

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Optional
import os

from lexkit.keywords import KEYWORDS


class ErrorPolicy(Enum):
    """How the scanner reacts to lexical errors."""

    FAIL_FAST = "fail_fast"     # raise the first error
    COLLECT = "collect"         # record every error and keep scanning


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class ScannerOptions:
    """
    Scanner configuration options.

    Attributes:
        filename: Source name used in token and error locations
        error_policy: FAIL_FAST raises on the first error; COLLECT records
            every error and continues past the offending character
        emit_eof: Append a trailing EOF token to the token list
        keywords: Words re-tagged from IDENTIFIER to KEYWORD
        max_errors: With COLLECT, stop scanning after this many errors
    """
    filename: str = "<input>"
    error_policy: ErrorPolicy = ErrorPolicy.FAIL_FAST
    emit_eof: bool = True
    keywords: AbstractSet[str] = KEYWORDS
    max_errors: int = 100

    def __post_init__(self):
        if isinstance(self.error_policy, str):
            self.error_policy = ErrorPolicy(self.error_policy.lower())
        self.keywords = frozenset(self.keywords)
        if self.max_errors < 1:
            raise ValueError(f"max_errors must be at least 1, got {self.max_errors}")

    @property
    def collect_errors(self) -> bool:
        """True when errors are recorded instead of raised."""
        return self.error_policy is ErrorPolicy.COLLECT

    @classmethod
    def from_env(cls, filename: str = "<input>") -> "ScannerOptions":
        """
        Create ScannerOptions from environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable holds an invalid value
        """
        options = {"filename": filename}

        policy = os.environ.get("LEXKIT_ERROR_POLICY")
        if policy:
            try:
                options["error_policy"] = ErrorPolicy(policy.strip().lower())
            except ValueError:
                valid = ", ".join(p.value for p in ErrorPolicy)
                raise ValueError(
                    f"invalid LEXKIT_ERROR_POLICY {policy!r} (expected one of: {valid})"
                ) from None

        emit_eof = os.environ.get("LEXKIT_EMIT_EOF")
        if emit_eof:
            options["emit_eof"] = _parse_bool("LEXKIT_EMIT_EOF", emit_eof)

        max_errors = os.environ.get("LEXKIT_MAX_ERRORS")
        if max_errors:
            try:
                options["max_errors"] = int(max_errors)
            except ValueError:
                raise ValueError(
                    f"invalid LEXKIT_MAX_ERRORS {max_errors!r} (expected an integer)"
                ) from None

        keywords = os.environ.get("LEXKIT_KEYWORDS")
        if keywords:
            options["keywords"] = frozenset(
                word.strip() for word in keywords.split(",") if word.strip()
            )

        return cls(**options)


def _parse_bool(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid {name} {value!r} (expected true or false)")


def resolve_options(options: Optional[ScannerOptions]) -> ScannerOptions:
    """Return options, or the defaults when None."""
    return options if options is not None else ScannerOptions()
