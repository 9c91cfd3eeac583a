from __future__ import annotations

import re
from typing import Any

from content_validation.findings import Findings
from content_validation.structure import field_of, is_missing
from lib.validation.url_utils import check_absolute_url
from schemas.report import PerformanceSummary, ValidationReport


HEX_COLOR_RE = re.compile(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$")

LOGO_LOAD_TIME_MS = 100


def validate_branding(branding: Any) -> ValidationReport:
    """
    Validate a municipal branding record.

    Policy:
      - no branding at all is valid; default styling is used (warning)
      - municipality is required
      - primaryColor is optional (warning) but must be #RGB / #RRGGBB when given
      - logoUrl is optional but must be an absolute URL when given
    """
    if branding is None:
        return ValidationReport.from_findings(
            errors=[],
            warnings=["No municipal branding provided - using default styling"],
            performance=PerformanceSummary(),
        )

    out = Findings()
    if not isinstance(branding, dict):
        out.error(f"Municipal branding must be an object, got {type(branding).__name__}")
        return ValidationReport.from_findings(
            errors=out.errors, warnings=out.warnings, performance=PerformanceSummary()
        )

    if is_missing(field_of(branding, "municipality")):
        out.error("Municipal branding missing municipality name")

    color = field_of(branding, "primaryColor")
    if is_missing(color):
        out.warn("Municipal branding missing primaryColor - using default")
    elif not (isinstance(color, str) and HEX_COLOR_RE.fullmatch(color)):
        out.error(f"Invalid primaryColor format: {color}. Use hex format (#RRGGBB)")

    logo_url = field_of(branding, "logoUrl")
    has_logo = not is_missing(logo_url)
    if has_logo and not check_absolute_url(logo_url).ok:
        out.error(f"Invalid logoUrl: {logo_url}")

    return ValidationReport.from_findings(
        errors=out.errors,
        warnings=out.warnings,
        performance=PerformanceSummary(
            content_size=1,
            estimated_load_time=LOGO_LOAD_TIME_MS if has_logo else 0,
            lighthouse_impact=0,
        ),
    )
