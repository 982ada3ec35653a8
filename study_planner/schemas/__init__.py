from .assignment import AssignmentCollection, AssignmentCreate, AssignmentRead, AssignmentUpdate
from .course import CourseCollection, CourseCreate, CourseRead, CourseSummaryRead, CourseUpdate
from .dashboard import DashboardRead, DashboardStatsRead, DayProgressRead, UpcomingAssignmentRead
from .schedule import ScheduleRunRequest, ScheduleRunResponse
from .session import StudySessionCollection, StudySessionCreate, StudySessionRead, StudySessionUpdate
from .user import AuthStatus, LoginRequest, UserRead

__all__ = [
    "AssignmentCollection",
    "AssignmentCreate",
    "AssignmentRead",
    "AssignmentUpdate",
    "AuthStatus",
    "CourseCollection",
    "CourseCreate",
    "CourseRead",
    "CourseSummaryRead",
    "CourseUpdate",
    "DashboardRead",
    "DashboardStatsRead",
    "DayProgressRead",
    "LoginRequest",
    "ScheduleRunRequest",
    "ScheduleRunResponse",
    "StudySessionCollection",
    "StudySessionCreate",
    "StudySessionRead",
    "StudySessionUpdate",
    "UpcomingAssignmentRead",
    "UserRead",
]
