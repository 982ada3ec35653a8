from .greedy import GreedyStudyScheduler, ScheduleRequest, ScheduleResult, SessionProposal

__all__ = [
    "GreedyStudyScheduler",
    "ScheduleRequest",
    "ScheduleResult",
    "SessionProposal",
]
