"""
Maintenance report settings.
TC-SAFE: visual references only, no regulatory validation.
All limits are editable - rules can change.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from enum import Enum


# Default limits - can be modified by the user
DEFAULT_LIMITS = {
    "CELLULE_YEARS": 5,        # Airframe - 5 years max
    "HELICE_YEARS": 5,         # Propeller - 5 years max
    "AVIONIQUE_MONTHS": 24,    # Avionics - 24 months
    "MAGNETOS_HOURS": 500,     # Magnetos - 500 hours
    "POMPE_VIDE_HOURS": 400,   # Vacuum pump - 400 hours
    "ELT_TEST_MONTHS": 12,     # ELT test - 12 months
    "ELT_BATTERY_MONTHS": 24,  # ELT battery - 24 months
}


class _CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class EditableLimits(_CamelModel):
    cellule_years: int = DEFAULT_LIMITS["CELLULE_YEARS"]
    helice_years: int = DEFAULT_LIMITS["HELICE_YEARS"]
    avionique_months: int = DEFAULT_LIMITS["AVIONIQUE_MONTHS"]
    magnetos_hours: int = DEFAULT_LIMITS["MAGNETOS_HOURS"]
    pompe_vide_hours: int = DEFAULT_LIMITS["POMPE_VIDE_HOURS"]
    elt_test_months: int = DEFAULT_LIMITS["ELT_TEST_MONTHS"]
    elt_battery_months: int = DEFAULT_LIMITS["ELT_BATTERY_MONTHS"]


class ReportSettings(_CamelModel):
    # Engine
    motor_tbo: float = 2000  # TBO hours, user defined

    # Dates
    avionique_date: str = ""        # Last avionics certification
    magnetos_hours_used: float = 0  # Hours since magnetos inspection
    pompe_vide_hours_used: float = 0  # Hours since vacuum pump replacement
    helice_date: str = ""           # Last propeller inspection
    cellule_date: str = ""          # Last annual inspection

    # ELT
    elt_test_date: str = ""
    elt_battery_expiry: str = ""


class ProgressStatus(str, Enum):
    OK = "ok"
    WARNING = "warning"
    EXCEEDED = "exceeded"


class ReportItem(_CamelModel):
    """One progress row of the maintenance report"""
    key: str
    label: str
    percent: int
    status: ProgressStatus
    days_remaining: Optional[int] = None
    limit: str = ""
