"""Structural validation of agent documents.

Each file in an agents directory is run through an ordered list of rules.
Every rule reports one or more outcomes (pass, fail or warn); all rules run
for every file, except that an empty file stops after the first rule.
Outcomes are tallied into a ValidationSummary, which is an immutable value
combined report by report rather than a running counter.
"""

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .core.header import HEADER_DELIMITER, HeaderBlock, parse_header
from .core.types import OutcomeStatus
from .core.validator import allowed_values, field_error

# Non-blank body lines needed for a document to count as substantial
MIN_CONTENT_LINES = 10

# Lines longer than this are reported
MAX_LINE_LENGTH = 500


@dataclass(frozen=True)
class RuleOutcome:
    """Result of one check on one file."""

    rule: str
    status: OutcomeStatus
    message: str


@dataclass(frozen=True)
class AssetDocument:
    """A file's content in the forms the rules need.

    Attributes:
        path: File location
        raw: Undecoded bytes
        text: Content decoded as UTF-8 (invalid bytes replaced)
        lines: Text split on LF; a trailing CR stays part of its line
        header: Parsed header block
    """

    path: Path
    raw: bytes
    text: str
    lines: list[str]
    header: HeaderBlock

    @classmethod
    def from_bytes(cls, path: Path, raw: bytes) -> "AssetDocument":
        text = raw.decode("utf-8", errors="replace")
        lines = text.split("\n")
        if lines and lines[-1] == "":
            lines.pop()
        return cls(path=path, raw=raw, text=text, lines=lines, header=parse_header(lines))

    @classmethod
    def load(cls, path: Path) -> "AssetDocument":
        return cls.from_bytes(path, path.read_bytes())

    @property
    def body_lines(self) -> list[str]:
        """Lines after the closing header delimiter (all lines if unclosed)."""
        if self.header.end is None:
            return self.lines
        return self.lines[self.header.end:]


Check = Callable[[AssetDocument], list[RuleOutcome]]


@dataclass(frozen=True)
class ValidationRule:
    """A named check.

    Attributes:
        name: Rule identifier used in outcomes
        severity: Worst status the rule can report ('fail' or 'warn')
        check: Function producing the rule's outcomes for a document
    """

    name: str
    severity: OutcomeStatus
    check: Check

    def __call__(self, document: AssetDocument) -> list[RuleOutcome]:
        return self.check(document)


@dataclass
class ValidationReport:
    """All outcomes for one path (a file, or the directory itself)."""

    path: Path
    outcomes: list[RuleOutcome] = field(default_factory=list)

    def count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status == status)

    def for_rule(self, rule: str) -> list[RuleOutcome]:
        return [outcome for outcome in self.outcomes if outcome.rule == rule]


@dataclass(frozen=True)
class ValidationSummary:
    """Totals across reports. The run is ok iff nothing failed.

    total counts passed and failed checks; warnings are tallied apart.
    """

    passed: int = 0
    failed: int = 0
    warnings: int = 0

    @property
    def total(self) -> int:
        return self.passed + self.failed

    @property
    def ok(self) -> bool:
        return self.failed == 0

    def add(self, report: ValidationReport) -> "ValidationSummary":
        return ValidationSummary(
            passed=self.passed + report.count("pass"),
            failed=self.failed + report.count("fail"),
            warnings=self.warnings + report.count("warn"),
        )


# ============================================================================
# Rules
# ============================================================================

def check_not_empty(doc: AssetDocument) -> list[RuleOutcome]:
    if doc.raw:
        return [RuleOutcome("non-empty", "pass", "File is not empty")]
    return [RuleOutcome("non-empty", "fail", "File is empty")]


def check_header_start(doc: AssetDocument) -> list[RuleOutcome]:
    if doc.lines and doc.lines[0].rstrip("\r") == HEADER_DELIMITER:
        return [RuleOutcome("header-start", "pass", "Has header delimiter")]
    return [RuleOutcome("header-start", "fail", f"Missing header start ({HEADER_DELIMITER})")]


def check_header_close(doc: AssetDocument) -> list[RuleOutcome]:
    if doc.header.is_closed:
        return [RuleOutcome("header-close", "pass", "Header block closes correctly")]
    return [RuleOutcome("header-close", "fail", "Header block not closed properly")]


def _missing(rule: str) -> RuleOutcome:
    return RuleOutcome(rule, "fail", f"Missing '{rule}' field in header")


def check_name(doc: AssetDocument) -> list[RuleOutcome]:
    name = doc.header.get("name")
    if name is None:
        return [_missing("name")]

    outcomes = [RuleOutcome("name", "pass", f"Has 'name' field: {name}")]
    if field_error("name", name) is None:
        outcomes.append(RuleOutcome("name", "pass", "Name follows kebab-case convention"))
    else:
        outcomes.append(
            RuleOutcome("name", "warn", "Name should be in kebab-case (lowercase with hyphens)")
        )
    return outcomes


def check_description(doc: AssetDocument) -> list[RuleOutcome]:
    description = doc.header.get("description")
    if description is None:
        return [_missing("description")]

    length = len(description)
    outcomes = [RuleOutcome("description", "pass", "Has 'description' field")]

    error = field_error("description", description)
    if error is None:
        message = f"Description length is appropriate: {length} chars"
        outcomes.append(RuleOutcome("description", "pass", message))
    elif error.validator == "minLength":
        message = f"Description is too short (<{error.validator_value} chars): {length} chars"
        outcomes.append(RuleOutcome("description", "warn", message))
    else:
        message = f"Description is too long (>{error.validator_value} chars): {length} chars"
        outcomes.append(RuleOutcome("description", "warn", message))
    return outcomes


def check_model(doc: AssetDocument) -> list[RuleOutcome]:
    model = doc.header.get("model")
    if model is None:
        return [_missing("model")]

    if field_error("model", model) is None:
        return [RuleOutcome("model", "pass", f"Has valid 'model' field: {model}")]

    choices = ", ".join(allowed_values("model"))
    return [RuleOutcome("model", "fail", f"Invalid 'model' value: {model} (should be one of: {choices})")]


def check_color(doc: AssetDocument) -> list[RuleOutcome]:
    color = doc.header.get("color")
    if color is None:
        return [_missing("color")]

    if field_error("color", color) is None:
        return [RuleOutcome("color", "pass", f"Has valid 'color' field: {color}")]

    common = ", ".join(allowed_values("color"))
    return [RuleOutcome("color", "warn", f"Uncommon 'color' value: {color} (common: {common})")]


def check_content(doc: AssetDocument) -> list[RuleOutcome]:
    content_lines = sum(1 for line in doc.body_lines if line.strip())
    if content_lines > MIN_CONTENT_LINES:
        return [RuleOutcome("content", "pass", f"Has substantial content: {content_lines} lines")]
    if content_lines > 0:
        return [RuleOutcome("content", "warn", f"Content seems short: only {content_lines} lines")]
    return [RuleOutcome("content", "fail", "No content after header")]


def check_heading(doc: AssetDocument) -> list[RuleOutcome]:
    headings = sum(1 for line in doc.body_lines if line.startswith("# "))
    if headings:
        return [RuleOutcome("heading", "pass", f"Has H1 heading(s): {headings}")]
    return [RuleOutcome("heading", "warn", "No H1 heading found (recommended for structure)")]


def check_line_endings(doc: AssetDocument) -> list[RuleOutcome]:
    if b"\r" in doc.raw:
        return [RuleOutcome("line-endings", "fail", "Contains Windows line endings (CRLF)")]
    return [RuleOutcome("line-endings", "pass", "Has Unix line endings (LF)")]


def check_encoding(doc: AssetDocument) -> list[RuleOutcome]:
    try:
        doc.raw.decode("utf-8")
    except UnicodeDecodeError:
        return [RuleOutcome("encoding", "warn", "File encoding might not be UTF-8")]
    return [RuleOutcome("encoding", "pass", "File encoding is UTF-8")]


def check_line_length(doc: AssetDocument) -> list[RuleOutcome]:
    long_lines = sum(1 for line in doc.lines if len(line) > MAX_LINE_LENGTH)
    if long_lines:
        message = f"Found {long_lines} line(s) longer than {MAX_LINE_LENGTH} characters"
        return [RuleOutcome("line-length", "warn", message)]
    return [RuleOutcome("line-length", "pass", "No excessively long lines")]


RULES: tuple[ValidationRule, ...] = (
    ValidationRule("non-empty", "fail", check_not_empty),
    ValidationRule("header-start", "fail", check_header_start),
    ValidationRule("header-close", "fail", check_header_close),
    ValidationRule("name", "fail", check_name),
    ValidationRule("description", "fail", check_description),
    ValidationRule("model", "fail", check_model),
    ValidationRule("color", "fail", check_color),
    ValidationRule("content", "fail", check_content),
    ValidationRule("heading", "warn", check_heading),
    ValidationRule("line-endings", "fail", check_line_endings),
    ValidationRule("encoding", "warn", check_encoding),
    ValidationRule("line-length", "warn", check_line_length),
)


# ============================================================================
# Engine
# ============================================================================

def validate_document(
    document: AssetDocument,
    rules: Sequence[ValidationRule] = RULES,
) -> ValidationReport:
    """Run every rule over one document.

    Args:
        document: Loaded document
        rules: Ordered rule set (defaults to RULES); on an empty file only
            the first rule runs

    Returns:
        ValidationReport holding each rule's outcomes in order
    """
    report = ValidationReport(path=document.path)

    # Nothing past the emptiness check applies to an empty file
    for rule in rules if document.raw else rules[:1]:
        report.outcomes.extend(rule(document))
    return report


def validate_file(path: Path) -> ValidationReport:
    """Load and validate a single file.

    Raises:
        OSError: If the file cannot be read
    """
    return validate_document(AssetDocument.load(path))


def validate_directory(directory: Path) -> list[ValidationReport]:
    """Validate every ``*.md`` file directly inside a directory.

    The first report covers the directory itself: it fails if the
    directory is missing or holds no asset files, in which case no
    per-file reports follow.

    Args:
        directory: Folder of agent documents (not searched recursively)

    Returns:
        Directory report followed by one report per file, sorted by name
    """
    directory_report = ValidationReport(path=directory)
    reports = [directory_report]

    if not directory.is_dir():
        directory_report.outcomes.append(
            RuleOutcome("directory", "fail", f"Agents directory not found: {directory}")
        )
        return reports
    directory_report.outcomes.append(RuleOutcome("directory", "pass", "Agents directory exists"))

    files = sorted(path for path in directory.glob("*.md") if path.is_file())
    if not files:
        directory_report.outcomes.append(
            RuleOutcome("directory", "fail", f"No agent files found in {directory}")
        )
        return reports
    directory_report.outcomes.append(
        RuleOutcome("directory", "pass", f"Found {len(files)} agent file(s)")
    )

    for path in files:
        try:
            reports.append(validate_file(path))
        except OSError as e:
            reports.append(
                ValidationReport(path, [RuleOutcome("readable", "fail", f"Cannot read file: {e}")])
            )

    return reports


def summarize(reports: Iterable[ValidationReport]) -> ValidationSummary:
    """Fold reports into totals."""
    summary = ValidationSummary()
    for report in reports:
        summary = summary.add(report)
    return summary
