"""
Quiz personas: which persona a driving style maps to, how each persona ranks
candidates, and the per-listing warnings attached to a recommendation.

Everything here is pure. `annotate` builds a new row and never touches the
row it was given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from listings.pricing import with_price_position

ECONOMIZER = "Economizer"
SAFETY_FIRST = "Safety First"
ENTHUSIAST = "Enthusiast"
STANDARD = "Standard"

PERSONA_BY_DRIVING_STYLE = {
    "City": ECONOMIZER,
    "Family": SAFETY_FIRST,
    "Performance": ENTHUSIAST,
}

# Whitelisted ORDER BY bodies; never built from request input.
ORDERINGS = {
    SAFETY_FIRST: "l.safety_grade DESC, os.reliability_score DESC",
    ECONOMIZER: "os.projected_annual_maintenance_cost ASC, os.future_resale_value_24m DESC",
    ENTHUSIAST: "os.smart_score DESC",
    STANDARD: "os.smart_score DESC",
}

NOTE_SEPARATOR = " | "
LOW_SAFETY_NOTE = "⚠️ Low Safety Grade for Family use."
SCRAPPING_NOTE = "⚠️ Near Scrapping Age."
NEW_DRIVER_NOTE = "ℹ️ Better options exist for new drivers."

MIN_FAMILY_SAFETY_GRADE = 4
MIN_NEW_DRIVER_SMART_SCORE = 6
SCRAPPING_AGE = 18
AGING_AGE = 12
AGING_MAINTENANCE_FACTOR = 1.15

NEW_DRIVER = "New"


def persona_for(driving_style: str | None) -> str:
    return PERSONA_BY_DRIVING_STYLE.get(driving_style or "", STANDARD)


def order_clause(persona: str) -> str:
    return ORDERINGS.get(persona, ORDERINGS[STANDARD])


@dataclass(frozen=True)
class Annotation:
    notes: tuple[str, ...] = ()
    end_of_life: bool = False
    maintenance_factor: float | None = None


def _lt(value: Any, bound: float) -> bool:
    # A missing score counts as 0, so it always trips the warning.
    return (value or 0) < bound


def assess(
    row: dict[str, Any],
    *,
    persona: str,
    experience_level: str | None,
    current_year: int,
) -> Annotation:
    """
    Work out which warnings apply to one candidate.

    Order of notes: safety, age, new-driver. The age rule is exclusive:
    past scrapping age the car is flagged end-of-life, otherwise an aging car
    gets its maintenance projection inflated.
    """
    notes: list[str] = []
    end_of_life = False
    maintenance_factor = None

    if persona == SAFETY_FIRST and _lt(row.get("safety_grade"), MIN_FAMILY_SAFETY_GRADE):
        notes.append(LOW_SAFETY_NOTE)

    year = row.get("year")
    if year is not None:
        age = current_year - int(year)
        if age > SCRAPPING_AGE:
            end_of_life = True
            notes.append(SCRAPPING_NOTE)
        elif age > AGING_AGE:
            maintenance_factor = AGING_MAINTENANCE_FACTOR

    if experience_level == NEW_DRIVER and _lt(row.get("smart_score"), MIN_NEW_DRIVER_SMART_SCORE):
        notes.append(NEW_DRIVER_NOTE)

    return Annotation(notes=tuple(notes), end_of_life=end_of_life, maintenance_factor=maintenance_factor)


def _append_notes(strategy: str | None, notes: tuple[str, ...]) -> str | None:
    if not notes:
        return strategy
    return NOTE_SEPARATOR.join([strategy or "", *notes])


def annotate(
    row: dict[str, Any],
    *,
    persona: str,
    experience_level: str | None,
    current_year: int,
) -> dict[str, Any]:
    annotation = assess(
        row,
        persona=persona,
        experience_level=experience_level,
        current_year=current_year,
    )

    changes: dict[str, Any] = {"persona": persona}
    if annotation.notes:
        changes["negotiation_strategy"] = _append_notes(row.get("negotiation_strategy"), annotation.notes)
    if annotation.end_of_life:
        changes["end_of_life_warning"] = True
    if annotation.maintenance_factor is not None:
        cost = row.get("projected_annual_maintenance_cost")
        changes["projected_annual_maintenance_cost"] = float(cost or 0) * annotation.maintenance_factor

    return with_price_position({**row, **changes})
