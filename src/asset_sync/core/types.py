"""Type definitions shared by the copier and the validation engine."""

from typing import Literal

# Status of a single validation outcome
OutcomeStatus = Literal["pass", "fail", "warn"]

# Outcome of copying one catalog entry
CopyStatus = Literal["copied", "not_found", "io_error"]
