"""Classification and reporting of request targets.

Runs targets through the classifier, checks them against the request
method, and renders the outcome as a plain-text report.
"""

from __future__ import annotations

from collections.abc import Iterable

from request_target.target import (
    ParseError,
    ParseErrorKind,
    RequestTarget,
    classify_target,
)

FORM_DESCRIPTIONS = {
    RequestTarget.ORIGIN_FORM: "Absolute path on the origin server.",
    RequestTarget.ABSOLUTE_FORM: "Absolute URI, usually sent to a proxy.",
    RequestTarget.AUTHORITY_FORM: "host[:port] authority, used with CONNECT.",
    RequestTarget.ASTERISK_FORM: "Whole-server target, used with OPTIONS.",
}


class ClassificationResult:
    """Container for the classification of a single target."""

    __slots__ = (
        "target",
        "form",
        "error",
        "method",
        "is_valid",
        "analysis",
    )

    def __init__(
        self,
        target: str,
        form: RequestTarget | None,
        error: ParseError | None,
        method: str | None,
        is_valid: bool,
        analysis: str,
    ) -> None:
        self.target = target
        self.form = form
        self.error = error
        self.method = method
        self.is_valid = is_valid
        self.analysis = analysis

    def __repr__(self) -> str:
        form = self.form.value if self.form else None
        return (
            f"ClassificationResult(target={self.target!r}, form={form!r}, "
            f"is_valid={self.is_valid})"
        )


def analyze_target(
    target: str, method: str | None = None
) -> ClassificationResult:
    """Classify a target and check it against the request method.

    Outcomes:
      - empty target → [EMPTY]
      - unrecognized target → [INVALID]
      - form not allowed for the method → [MISMATCH]
      - otherwise the form name, e.g. [ORIGIN-FORM]

    Args:
        target: The request target string.
        method: Optional request method the target arrived with.

    Returns:
        A ClassificationResult describing the outcome.
    """
    try:
        form = classify_target(target)
    except ParseError as exc:
        if exc.kind is ParseErrorKind.EMPTY:
            analysis = "[EMPTY] No request target was given."
        else:
            analysis = f"[INVALID] {exc}."
        return ClassificationResult(
            target=target,
            form=None,
            error=exc,
            method=method,
            is_valid=False,
            analysis=analysis,
        )

    if method is not None and not form.permits(method):
        return ClassificationResult(
            target=target,
            form=form,
            error=None,
            method=method,
            is_valid=False,
            analysis=(
                f"[MISMATCH] {form.value} is not allowed with {method} "
                "requests."
            ),
        )

    return ClassificationResult(
        target=target,
        form=form,
        error=None,
        method=method,
        is_valid=True,
        analysis=f"[{form.value.upper()}] {FORM_DESCRIPTIONS[form]}",
    )


def classify_targets(
    targets: Iterable[str], method: str | None = None
) -> list[ClassificationResult]:
    """Analyze every target, keeping input order."""
    return [analyze_target(target, method) for target in targets]


def print_report(results: list[ClassificationResult]) -> None:
    """Print a formatted classification report to stdout.

    Args:
        results: The results to report on.
    """
    banner = "=" * 60
    print(f"\n{banner}")
    print("  REQUEST-TARGET: Classification Report")
    print(banner)

    for result in results:
        print(f"\n  {result.target!r}")
        print(f"    Form     : {result.form.value if result.form else '-'}")
        if result.method:
            print(f"    Method   : {result.method}")
        print(f"    Analysis : {result.analysis}")

    invalid = sum(1 for result in results if not result.is_valid)
    print(f"\n  Classified : {len(results)}")
    print(f"  Valid      : {len(results) - invalid}")
    print(f"  Invalid    : {invalid}")
    print(f"\n{banner}\n")
