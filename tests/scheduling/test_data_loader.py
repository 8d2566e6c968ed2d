import pytest
from datetime import date
from pydantic import ValidationError

from staff_scheduler.core.config import settings
from staff_scheduler.schemas.schedules import ScheduleRequest
from staff_scheduler.services.scheduling.types import AbsenceKind, CoveragePreset, ShiftCategory
from staff_scheduler.services.scheduling.generator import ScheduleInputError
from staff_scheduler.services.scheduling.data_loader import load_schedule_context
from staff_scheduler.services.scheduling.periods import days_in_period


def build_request(**overrides) -> ScheduleRequest:
    payload = {
        "industry": "healthcare",
        "period": {"calendar_style": "monthly", "year": 2024, "month": 2},
        "groups": [
            {"name": "Red", "employees": [{"name": "Alice"}, {"name": "Bob"}]},
            {"name": "Blue", "employees": [
                {"name": "Cara", "unavailability": [
                    {"kind": "LEAVE", "start_date": "2024-02-05", "end_date": "2024-02-09"},
                ]},
            ]},
        ],
    }
    payload.update(overrides)
    return ScheduleRequest.model_validate(payload)


class TestLoadScheduleContext:

    def test_flattens_groups_in_order(self):
        context = load_schedule_context(build_request())

        assert [(e.id, e.name, e.group_index, e.employee_index) for e in context.employees] == [
            (0, "Alice", 0, 0),
            (1, "Bob", 0, 1),
            (2, "Cara", 1, 0),
        ]
        assert context.employees[2].group_name == "Blue"
        window = context.employees[2].unavailability[0]
        assert window.kind == AbsenceKind.LEAVE
        assert window.start_date == date(2024, 2, 5)

    def test_month_period(self):
        context = load_schedule_context(build_request())
        assert days_in_period(context.period) == 29

    def test_industry_default_shifts(self):
        context = load_schedule_context(build_request())
        assert [s.code for s in context.shifts] == ["D", "E", "N", "S", "F", "B", "A"]

    def test_explicit_shifts(self):
        request = build_request(shifts=[
            {"code": "X", "coverage": 2, "priority": 1},
            {"code": "R", "category": "backup"},
        ])
        context = load_schedule_context(request)

        assert context.shifts[0].required_coverage == 2
        assert context.shifts[0].priority == 1
        assert context.shifts[1].category == ShiftCategory.BACKUP

    def test_constraints_fall_back_to_industry(self):
        request = build_request(industry="public_safety", constraints={"max_consecutive_days": 3})
        context = load_schedule_context(request)

        assert context.constraints.max_consecutive_days == 3
        assert context.constraints.min_rest_hours == 12
        assert context.constraints.max_hours_week == 56

    def test_rotation_pattern_resolved(self):
        context = load_schedule_context(build_request(rotation_pattern="4on4off"))
        assert context.rotation_pattern.cycle_length == 8

    def test_no_pattern(self):
        context = load_schedule_context(build_request(coverage_preset="8x5"))
        assert context.rotation_pattern.pattern is None
        assert context.coverage_preset == CoveragePreset.EIGHT_BY_FIVE

    def test_unknown_pattern(self):
        with pytest.raises(ScheduleInputError, match="Unknown rotation pattern"):
            load_schedule_context(build_request(rotation_pattern="dupont", industry="retail"))

    def test_roster_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_EMPLOYEES", 2)
        with pytest.raises(ScheduleInputError, match="maximum is 2"):
            load_schedule_context(build_request())

    def test_period_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "MAX_PERIOD_DAYS", 10)
        with pytest.raises(ScheduleInputError, match="maximum of 10 days"):
            load_schedule_context(build_request())

    def test_period_past_last_date(self):
        request = build_request(period={
            "calendar_style": "range", "start_date": "9999-12-31", "duration_days": 2,
        })
        with pytest.raises(ScheduleInputError, match="last representable date"):
            load_schedule_context(request)

    def test_period_ending_on_last_date(self):
        request = build_request(period={
            "calendar_style": "range", "start_date": "9999-12-30", "duration_days": 2,
        })
        context = load_schedule_context(request)
        assert days_in_period(context.period) == 2


class TestScheduleRequestValidation:

    def test_monthly_needs_month(self):
        with pytest.raises(ValidationError):
            build_request(period={"calendar_style": "monthly", "year": 2025})

    def test_range_needs_duration(self):
        with pytest.raises(ValidationError):
            build_request(period={"calendar_style": "range", "start_date": "2025-01-20"})

    def test_negative_coverage_rejected(self):
        with pytest.raises(ValidationError):
            build_request(shifts=[{"code": "D", "coverage": -1}])

    def test_unknown_absence_kind_rejected(self):
        with pytest.raises(ValidationError):
            build_request(groups=[{"name": "G", "employees": [
                {"name": "A", "unavailability": [{"kind": "SICK", "start_date": "2025-01-01"}]},
            ]}])

    def test_reversed_unavailability_rejected(self):
        with pytest.raises(ValidationError, match="end_date is before start_date"):
            build_request(groups=[{"name": "G", "employees": [
                {"name": "A", "unavailability": [
                    {"kind": "LEAVE", "start_date": "2025-01-22", "end_date": "2025-01-20"},
                ]},
            ]}])

    def test_end_date_only_marks_single_day(self):
        request = build_request(groups=[{"name": "G", "employees": [
            {"name": "A", "unavailability": [{"kind": "TAD", "end_date": "2024-02-14"}]},
        ]}])
        window = load_schedule_context(request).employees[0].unavailability[0]

        assert window.start_date == date(2024, 2, 14)
        assert window.end_date == date(2024, 2, 14)
