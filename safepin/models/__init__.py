# safepin/models/__init__.py
from safepin.models.teacher import Teacher  # noqa
from safepin.models.classroom import Classroom  # noqa
from safepin.models.student import Student  # noqa
from safepin.models.safety_pin import SafetyPin  # noqa
from safepin.models.solution import Solution  # noqa
from safepin.models.feedback import TeacherFeedback  # noqa
