from __future__ import annotations

import unittest

from content_validation.branding import validate_branding
from lib.validation.url_utils import check_absolute_url, is_valid_absolute_url


def _branding(**overrides) -> dict:
    data = {
        "municipality": "Göteborg",
        "primaryColor": "#005EB8",
        "logoUrl": "https://cdn.example.se/goteborg/logo.svg",
    }
    data.update(overrides)
    return data


class TestValidateBranding(unittest.TestCase):
    def test_valid_branding(self) -> None:
        report = validate_branding(_branding())
        self.assertTrue(report.is_valid)
        self.assertEqual(report.errors, [])
        self.assertEqual(report.warnings, [])
        self.assertEqual(report.performance.content_size, 1)
        self.assertEqual(report.performance.estimated_load_time, 100)

    def test_missing_branding_falls_back_to_default(self) -> None:
        report = validate_branding(None)
        self.assertTrue(report.is_valid)
        self.assertEqual(report.warnings, ["No municipal branding provided - using default styling"])
        self.assertEqual(report.performance.content_size, 0)
        self.assertEqual(report.performance.lighthouse_impact, 0)

    def test_empty_record_is_not_treated_as_missing(self) -> None:
        report = validate_branding({})
        self.assertFalse(report.is_valid)
        self.assertEqual(report.errors, ["Municipal branding missing municipality name"])
        self.assertEqual(report.warnings, ["Municipal branding missing primaryColor - using default"])
        self.assertEqual(report.performance.content_size, 1)

    def test_requires_municipality(self) -> None:
        report = validate_branding(_branding(municipality=""))
        self.assertFalse(report.is_valid)
        self.assertEqual(report.errors, ["Municipal branding missing municipality name"])

    def test_color_format(self) -> None:
        for color in ("#FFF", "#a1b2c3"):
            self.assertTrue(validate_branding(_branding(primaryColor=color)).is_valid, color)

        for color in ("red", "#12345", "#GGGGGG", "005EB8", "#fff\n", 255):
            report = validate_branding(_branding(primaryColor=color))
            self.assertFalse(report.is_valid, color)
            self.assertTrue(report.errors[0].startswith("Invalid primaryColor format"))

    def test_missing_color_is_a_warning(self) -> None:
        data = _branding()
        del data["primaryColor"]
        report = validate_branding(data)
        self.assertTrue(report.is_valid)
        self.assertEqual(report.warnings, ["Municipal branding missing primaryColor - using default"])

    def test_logo_url(self) -> None:
        report = validate_branding(_branding(logoUrl="not a url"))
        self.assertFalse(report.is_valid)
        self.assertEqual(report.errors, ["Invalid logoUrl: not a url"])

    def test_no_logo_means_no_load_time(self) -> None:
        data = _branding()
        del data["logoUrl"]
        report = validate_branding(data)
        self.assertTrue(report.is_valid)
        self.assertEqual(report.performance.estimated_load_time, 0)

    def test_non_object_branding(self) -> None:
        report = validate_branding("Göteborg")
        self.assertFalse(report.is_valid)
        self.assertEqual(report.errors, ["Municipal branding must be an object, got str"])


class TestUrlUtils(unittest.TestCase):
    def test_absolute_urls(self) -> None:
        self.assertTrue(is_valid_absolute_url("https://example.se/logo.png"))
        self.assertTrue(is_valid_absolute_url("http://localhost:8080/a.svg"))

    def test_rejects_relative_and_empty(self) -> None:
        self.assertFalse(is_valid_absolute_url("/images/logo.png"))
        self.assertFalse(is_valid_absolute_url("logo.png"))
        self.assertFalse(is_valid_absolute_url("   "))
        self.assertFalse(is_valid_absolute_url(None))

    def test_result_carries_error(self) -> None:
        res = check_absolute_url("nope")
        self.assertFalse(res.ok)
        self.assertIsNone(res.normalized)
        self.assertTrue(res.error)


if __name__ == "__main__":
    unittest.main()
