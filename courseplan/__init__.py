"""
courseplan: course/commitment model and schedule conflict detection.
"""

from courseplan.conflicts import find_conflicts, get_conflicts
from courseplan.model import Commitment, Course, Semester, clean_summer_term

__all__ = ["Commitment", "Course", "Semester", "clean_summer_term", "find_conflicts", "get_conflicts"]
