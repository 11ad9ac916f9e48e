"""Tests for pydantic models — camelCase serialization and error bodies."""

import pytest
from pydantic import ValidationError

from models.data import Course, CurrentUser, Role
from models.errors import ErrorCode, error_body, format_error
from models.request import CreateGradeRequest, UpdateGradeRequest
from models.stats import DistributionStats, NormalCurvePoint
from tools.stats_tools import compute_summary


class TestCamelCase:
    def test_course_dump(self):
        course = Course(id="crs-1", name="Physics", is_public=True)
        dumped = course.model_dump(by_alias=True)
        assert dumped["isPublic"] is True
        assert dumped["acceptingGrades"] is True
        assert dumped["groupIds"] == []

    def test_request_accepts_camel_and_snake(self):
        a = CreateGradeRequest.model_validate({"value": 80, "studentId": "s", "courseId": "c"})
        b = CreateGradeRequest(value=80, student_id="s", course_id="c")
        assert a == b

    def test_update_request_tracks_sent_fields(self):
        req = UpdateGradeRequest.model_validate({"groupId": None})
        assert req.model_fields_set == {"group_id"}
        assert UpdateGradeRequest().model_fields_set == set()


class TestStatsModels:
    def test_distribution_stats_from_summary(self):
        stats = DistributionStats.from_summary(compute_summary([10, 20, 30, 40]))
        dumped = stats.model_dump(by_alias=True)
        assert dumped["mean"] == 25
        assert dumped["totalGrades"] == 4
        assert sum(dumped["distribution"].values()) == 4

    def test_summary_is_frozen(self):
        summary = compute_summary([1, 2, 3])
        with pytest.raises(ValidationError):
            summary.mean = 5

    def test_curve_point_frozen(self):
        point = NormalCurvePoint(x=1.0, y=0.2)
        with pytest.raises(ValidationError):
            point.x = 2.0


class TestIdentity:
    def test_roles(self):
        assert CurrentUser(user_id="u", role=Role.ADMIN).is_admin
        assert not CurrentUser(user_id="u").is_admin
        assert Role("student") is Role.STUDENT


class TestErrorFormatting:
    def test_format_error(self):
        assert format_error(ErrorCode.NOT_FOUND, "gone") == "NOT_FOUND: gone"

    def test_error_body(self):
        assert error_body(ErrorCode.FORBIDDEN, "no") == {"detail": "FORBIDDEN: no", "code": "FORBIDDEN"}
