"""Tests for alert composition and severity helpers."""

import pytest

from allergy_guard.config import settings
from allergy_guard.services.allergens import (
    AllergenMatch,
    compose_alert,
    format_match_summary,
    severity_color,
    severity_label,
    to_unified_severity,
)
from allergy_guard.services.allergens.alerts import HIGH_SEVERITY_WARNING


def _match(name, severity, reason=None, found_in=None):
    return AllergenMatch(
        prohibited_ingredient=name,
        found_in=found_in or [name.title()],
        severity=severity,
        reason=reason,
    )


def test_compose_alert_severe():
    alert = compose_alert([_match("peanuts", 9, found_in=["Roasted Peanuts"])], "Trail Mix")
    assert alert.severity_class == "danger"
    assert alert.highest_severity == 9
    assert "SEVERE ALLERGY ALERT" in alert.title
    assert "Trail Mix" in alert.message
    assert "peanuts" in alert.message
    assert HIGH_SEVERITY_WARNING in alert.message


def test_compose_alert_warning():
    alert = compose_alert([_match("soy", 4)], "Miso Soup")
    assert alert.severity_class == "warning"
    assert alert.title == "Allergy Alert"
    assert alert.message == '"Miso Soup" contains prohibited ingredient: soy'


def test_compose_alert_lists_names_and_dedupes_reasons():
    matches = [
        _match("milk", 6, reason="Lactose Intolerant"),
        _match("cheese", 5, reason="Lactose Intolerant"),
        _match("wheat", 5),
        _match("soy", 4, reason="Soy Allergy"),
    ]
    alert = compose_alert(matches, "Pizza")
    assert "prohibited ingredients: milk, cheese, wheat, soy" in alert.message
    assert "Reasons: Lactose Intolerant, Soy Allergy" in alert.message
    assert alert.message.count("Lactose Intolerant") == 1
    assert alert.highest_severity == 6
    assert HIGH_SEVERITY_WARNING not in alert.message


def test_compose_alert_threshold_boundary():
    assert compose_alert([_match("fish", 8)], "Sushi").severity_class == "danger"
    assert compose_alert([_match("fish", 7)], "Sushi").severity_class == "warning"


def test_compose_alert_threshold_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "danger_severity_threshold", 10)
    assert compose_alert([_match("fish", 9)], "Sushi").severity_class == "warning"


def test_compose_alert_requires_matches():
    with pytest.raises(ValueError):
        compose_alert([], "Water")


def test_alert_to_dict_wire_names():
    payload = compose_alert([_match("peanuts", 10)], "Cookie").to_dict()
    assert payload["severityClass"] == "danger"
    assert "severity" not in payload
    assert payload["highestSeverity"] == 10
    assert payload["matches"][0]["prohibitedIngredient"] == "peanuts"


@pytest.mark.parametrize(
    "severity,label,color",
    [
        (10, "EMERGENCY", "#d32f2f"),
        (9, "EMERGENCY", "#d32f2f"),
        (8, "HIGH RISK", "#f57c00"),
        (7, "HIGH RISK", "#f57c00"),
        (6, "MODERATE", "#fbc02d"),
        (5, "MODERATE", "#fbc02d"),
        (4, "LOW RISK", "#689f38"),
        (1, "LOW RISK", "#689f38"),
    ],
)
def test_severity_label_and_color(severity, label, color):
    assert severity_label(severity) == label
    assert severity_color(severity) == color


def test_format_match_summary():
    assert format_match_summary([]) == "No allergens detected"
    summary = format_match_summary([
        _match("peanuts", 9, found_in=["Peanut Butter"]),
        _match("milk", 5, found_in=["Milk", "Whey"]),
    ])
    assert summary == (
        "[EMERGENCY] peanuts (found in: Peanut Butter)\n\n"
        "[MODERATE] milk (found in: Milk, Whey)"
    )


def test_to_unified_severity():
    assert [to_unified_severity(s) for s in (1, 2, 3)] == [3, 6, 9]
    with pytest.raises(ValueError):
        to_unified_severity(4)


def test_alert_is_hashable():
    alert = compose_alert([_match("milk", 5), _match("soy", 4)], "Latte")
    assert isinstance(alert.matches, tuple)
    assert hash(alert) == hash(compose_alert([_match("milk", 5), _match("soy", 4)], "Latte"))
