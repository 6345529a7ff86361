"""
Maintenance Report Store - report settings and editable limits
TC-SAFE: visual references only, no regulatory validation
"""

import logging
from datetime import date
from typing import List, Optional
from models.elt import DateProgress
from models.report_settings import EditableLimits, ProgressStatus, ReportItem, ReportSettings
from services.progress import date_progress, elt_to_report_status, hours_progress

logger = logging.getLogger(__name__)


class ReportSettingsStore:
    def __init__(self, settings: Optional[ReportSettings] = None, limits: Optional[EditableLimits] = None):
        self.settings = settings or ReportSettings()
        self.limits = limits or EditableLimits()

    def update_settings(self, **changes):
        self.settings = ReportSettings(**{**self.settings.model_dump(), **changes})

    def update_limits(self, **changes):
        self.limits = EditableLimits(**{**self.limits.model_dump(), **changes})

    def reset_limits_to_default(self):
        self.limits = EditableLimits()

    def build_report(
        self,
        engine_hours: float,
        elt_test_progress: Optional[DateProgress] = None,
        today: Optional[date] = None,
    ) -> List[ReportItem]:
        """Progress rows of the maintenance report screen"""
        settings, limits = self.settings, self.limits
        items = []

        percent, status = hours_progress(engine_hours, settings.motor_tbo)
        items.append(ReportItem(key="motor", label="Engine TBO", percent=percent, status=status,
                                limit=f"{settings.motor_tbo:g} h"))

        for key, label, last_date, months in (
            ("helice", "Propeller", settings.helice_date, limits.helice_years * 12),
            ("cellule", "Airframe", settings.cellule_date, limits.cellule_years * 12),
            ("avionique", "Avionics", settings.avionique_date, limits.avionique_months),
        ):
            percent, status, days_remaining = date_progress(last_date, months, today)
            items.append(ReportItem(key=key, label=label, percent=percent, status=status,
                                    days_remaining=days_remaining, limit=f"{months} months"))

        for key, label, used, limit in (
            ("magnetos", "Magnetos", settings.magnetos_hours_used, limits.magnetos_hours),
            ("pompe_vide", "Vacuum pump", settings.pompe_vide_hours_used, limits.pompe_vide_hours),
        ):
            percent, status = hours_progress(used, limit)
            items.append(ReportItem(key=key, label=label, percent=percent, status=status, limit=f"{limit} h"))

        if elt_test_progress is None:
            percent, status, days_remaining = date_progress(settings.elt_test_date, limits.elt_test_months, today)
        else:
            percent = elt_test_progress.percent
            status = elt_to_report_status(elt_test_progress.status)
            days_remaining = elt_test_progress.days_remaining
        items.append(ReportItem(key="elt", label="ELT", percent=percent, status=status,
                                days_remaining=days_remaining, limit=f"{limits.elt_test_months} months"))

        return items

    def alerts(self, items: List[ReportItem]) -> List[str]:
        """Informational alerts for exceeded calendar items"""
        return [f"{item.label}: limit reached" for item in items
                if item.status == ProgressStatus.EXCEEDED and item.days_remaining is not None]


class NullReportSettingsStore(ReportSettingsStore):
    """Defaults used when no ReportSettingsProvider is mounted"""

    def update_settings(self, **changes):
        logger.warning("ReportSettingsProvider not found")

    def update_limits(self, **changes):
        logger.warning("ReportSettingsProvider not found")

    def reset_limits_to_default(self):
        logger.warning("ReportSettingsProvider not found")
