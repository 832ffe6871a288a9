"""
Unit tests for the Course / Commitment model.

Model contract:
- summer-term letters are moved from the department onto the number,
  but only for Summer courses
- scraped_at, colors and core are always filled in after construction
- colors are copied, never shared with the snapshot
"""

import time
import unittest

from courseplan.colors import CourseColors, get_course_colors
from courseplan.instructor import Instructor
from courseplan.model import Commitment, Course, Semester, Status, clean_summer_term
from courseplan.schedule import CourseSchedule


def make_course_snapshot(**overrides):
    snapshot = {
        "unique_id": 50805,
        "number": "314H",
        "full_name": "C S 314H DATA STRUCTURES: HONORS",
        "course_name": "DATA STRUCTURES: HONORS",
        "department": "C S",
        "credit_hours": 3,
        "status": "OPEN",
        "instructors": [{"full_name": "SCOTT, MICHAEL", "first_name": "MICHAEL", "last_name": "SCOTT"}],
        "is_reserved": False,
        "schedule": {
            "meetings": [
                {
                    "days": ["Monday", "Wednesday"],
                    "start_time": 600,
                    "end_time": 690,
                    "location": {"building": "GDC", "room": "2.216"},
                }
            ]
        },
        "url": "https://utdirect.utexas.edu/apps/registrar/course_schedule/20239/50805/",
        "flags": ["Quantitative Reasoning"],
        "instruction_mode": "In Person",
        "semester": {"year": 2023, "season": "Fall", "code": "20239"},
        "scraped_at": 1700000000000,
    }
    snapshot.update(overrides)
    return snapshot


class TestCleanSummerTerm(unittest.TestCase):
    def test_known_cases(self) -> None:
        cases = [
            (("C S", "314H"), ("C S", "314H")),
            (("P R", "f378"), ("P R", "f378")),
            (("P R f", "378"), ("P R", "f378")),
            (("P S", "n303"), ("P S", "n303")),
            (("P S n", "303"), ("P S", "n303")),
        ]
        for given, expected in cases:
            with self.subTest(given=given):
                self.assertEqual(clean_summer_term(*given), expected)

    def test_second_run_is_noop(self) -> None:
        once = clean_summer_term("P S w", "303")
        self.assertEqual(once, ("P S", "w303"))
        self.assertEqual(clean_summer_term(*once), once)

    def test_double_encoded_prefix_is_kept(self) -> None:
        # Known quirk: a prefix on both sides is not deduplicated
        self.assertEqual(clean_summer_term("P R f", "f378"), ("P R", "ff378"))

    def test_uppercase_letter_is_not_a_term(self) -> None:
        self.assertEqual(clean_summer_term("M F", "201"), ("M F", "201"))

    def test_trailing_newline_is_not_a_term(self) -> None:
        # only the very last character counts
        self.assertEqual(clean_summer_term("P R f\n", "378"), ("P R f\n", "378"))
        self.assertEqual(clean_summer_term("", "378"), ("", "378"))


class TestCourseConstruction(unittest.TestCase):
    def test_fields_are_copied(self) -> None:
        course = Course.from_snapshot(make_course_snapshot())

        self.assertEqual(course.unique_id, 50805)
        self.assertEqual(course.department, "C S")
        self.assertEqual(course.number, "314H")
        self.assertEqual(course.status, Status.OPEN)
        self.assertEqual(course.semester, Semester(2023, "Fall", "20239"))
        self.assertEqual(course.scraped_at, 1700000000000)
        self.assertIsNone(course.register_url)
        self.assertIsNone(course.description)

    def test_schedule_and_instructors_are_owned_objects(self) -> None:
        course = Course.from_snapshot(make_course_snapshot())

        self.assertIsInstance(course.schedule, CourseSchedule)
        self.assertEqual(len(course.schedule.meetings), 1)
        self.assertEqual(course.schedule.meetings[0].days, ("Monday", "Wednesday"))
        self.assertEqual(course.instructors, [Instructor("SCOTT, MICHAEL", "MICHAEL", "SCOTT")])

    def test_missing_scraped_at_defaults_to_now(self) -> None:
        snapshot = make_course_snapshot()
        del snapshot["scraped_at"]

        before = int(time.time() * 1000)
        course = Course.from_snapshot(snapshot)
        after = int(time.time() * 1000)

        self.assertGreaterEqual(course.scraped_at, before)
        self.assertLessEqual(course.scraped_at, after)

    def test_zero_scraped_at_defaults_to_now(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(scraped_at=0))
        self.assertGreater(course.scraped_at, 0)

    def test_missing_colors_uses_default_theme(self) -> None:
        course = Course.from_snapshot(make_course_snapshot())
        self.assertEqual(course.colors, get_course_colors("emerald", 500))
        self.assertEqual(course.colors, CourseColors("#10b981", "#065f46"))

    def test_given_colors_are_copied(self) -> None:
        colors = CourseColors("#0ea5e9", "#075985")
        course = Course.from_snapshot(make_course_snapshot(colors=colors))

        self.assertEqual(course.colors, colors)
        self.assertIsNot(course.colors, colors)

        colors.primary_color = "#000000"
        self.assertEqual(course.colors.primary_color, "#0ea5e9")

    def test_given_color_dict_is_not_aliased(self) -> None:
        colors = {"primary_color": "#0ea5e9", "secondary_color": "#075985"}
        course = Course.from_snapshot(make_course_snapshot(colors=colors))

        self.assertEqual(course.colors.to_snapshot(), colors)

        colors["primary_color"] = "#000000"
        self.assertEqual(course.colors.primary_color, "#0ea5e9")

    def test_empty_color_dict_uses_default_theme(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(colors={}))
        self.assertEqual(course.colors, CourseColors("#10b981", "#065f46"))

    def test_default_colors_can_be_injected(self) -> None:
        calls = []

        def fake_colors(theme, shade):
            calls.append((theme, shade))
            return CourseColors("#111111", "#222222")

        course = Course.from_snapshot(make_course_snapshot(), get_default_colors=fake_colors)
        self.assertEqual(calls, [("emerald", 500)])
        self.assertEqual(course.colors, CourseColors("#111111", "#222222"))

    def test_missing_core_defaults_to_empty(self) -> None:
        course = Course.from_snapshot(make_course_snapshot())
        self.assertEqual(course.core, [])

        course2 = Course.from_snapshot(make_course_snapshot(core=["010", "090"]))
        self.assertEqual(course2.core, ["010", "090"])

    def test_summer_course_is_repaired(self) -> None:
        snapshot = make_course_snapshot(
            department="P R f",
            number="378",
            semester={"year": 2024, "season": "Summer", "code": "20246"},
        )
        course = Course.from_snapshot(snapshot)
        self.assertEqual(course.department, "P R")
        self.assertEqual(course.number, "f378")

    def test_fall_course_is_not_repaired(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(department="P R f", number="378"))
        self.assertEqual(course.department, "P R f")
        self.assertEqual(course.number, "378")

    def test_unknown_status_is_kept(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(status="SOMETHING"))
        self.assertEqual(course.status, "SOMETHING")

    def test_unknown_field_raises(self) -> None:
        with self.assertRaises(TypeError):
            Course.from_snapshot(make_course_snapshot(favourite=True))

    def test_snapshot_roundtrip(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(description=["Line one", "Line two"]))
        again = Course.from_snapshot(course.to_snapshot())
        self.assertEqual(again, course)


class TestNumberWithoutTerm(unittest.TestCase):
    def test_strips_summer_prefix(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(number="f301"))
        self.assertEqual(course.number_without_term(), "301")

    def test_plain_number_unchanged(self) -> None:
        course = Course.from_snapshot(make_course_snapshot(number="314H"))
        self.assertEqual(course.number_without_term(), "314H")


class TestCourseConflicts(unittest.TestCase):
    def test_course_against_course(self) -> None:
        a = Course.from_snapshot(make_course_snapshot())
        b = Course.from_snapshot(
            make_course_snapshot(
                unique_id=50810,
                schedule={"meetings": [{"days": ["Wednesday"], "start_time": 660, "end_time": 750}]},
            )
        )
        self.assertEqual(a.get_conflicts(b), [(a.schedule.meetings[0], b.schedule.meetings[0])])

    def test_course_against_disjoint_commitment(self) -> None:
        course = Course.from_snapshot(make_course_snapshot())
        commitment = Commitment.from_snapshot(
            {
                "unique_id": 2,
                "number": "GYM",
                "full_name": "Gym",
                "course_name": "Gym",
                "schedule": {"meetings": [{"days": ["Saturday"], "start_time": 600, "end_time": 690}]},
            }
        )
        self.assertEqual(course.get_conflicts(commitment), [])


class TestCommitment(unittest.TestCase):
    def test_defaults_and_schedule(self) -> None:
        commitment = Commitment.from_snapshot(
            {
                "unique_id": 1,
                "number": "JOB",
                "full_name": "Part-time job",
                "course_name": "Library shift",
                "schedule": {"meetings": [{"days": ["Tuesday"], "start_time": 780, "end_time": 900}]},
            }
        )
        self.assertEqual(commitment.colors, CourseColors("#10b981", "#065f46"))
        self.assertEqual(len(commitment.schedule.meetings), 1)
        self.assertIsNone(commitment.description)
        self.assertIsNone(commitment.schedule.meetings[0].location)

    def test_commitment_has_no_registrar_fields(self) -> None:
        with self.assertRaises(TypeError):
            Commitment.from_snapshot(
                {
                    "unique_id": 1,
                    "number": "JOB",
                    "full_name": "Part-time job",
                    "course_name": "Library shift",
                    "schedule": {"meetings": []},
                    "status": "OPEN",
                }
            )


if __name__ == "__main__":
    unittest.main()
