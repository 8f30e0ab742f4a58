"""Compare the predicted channel with the channel a marketer intended."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import constants
from .channels import get_rule
from .classifier import normalize

INFO = "info"
WARNING = "warning"
SUCCESS = "success"


@dataclass
class ComplianceResult:
    predicted: Optional[str]
    expected: Optional[str]
    level: str
    message: str

    @property
    def ok(self) -> bool:
        return self.level != WARNING


def check_compliance(classifier, source, medium, campaign="", expected: Optional[str] = None) -> ComplianceResult:
    """Predict the channel and grade it against ``expected``.

    Raises:
        errors.UnknownChannel: When ``expected`` is not a known channel name.
    """
    expected = expected or None
    if expected is not None:
        get_rule(expected)

    if not normalize(source) and not normalize(medium):
        return ComplianceResult(
            predicted=None,
            expected=expected,
            level=INFO,
            message="Enter at least Source and Medium to see GA4 channel prediction.",
        )

    predicted = classifier.classify(source, medium, campaign)
    message = f"Predicted GA4 Channel: {predicted}."
    level = INFO
    if predicted == constants.UNASSIGNED:
        message += " This combination might result in 'Unassigned' traffic. Review Source/Medium values for GA4 alignment."
        level = WARNING
    elif expected is not None and expected != predicted:
        message += (
            f" Potential Mismatch: You selected channel group '{expected}', "
            f"but GA4 will likely categorize this traffic as '{predicted}'."
        )
        level = WARNING
    elif expected is not None:
        message += f" This aligns with your selected channel group '{expected}'."
        level = SUCCESS

    return ComplianceResult(predicted=predicted, expected=expected, level=level, message=message)
