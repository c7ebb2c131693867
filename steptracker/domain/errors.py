# steptracker/domain/errors.py
"""
Business-rule errors raised by the service layer.

Every error is raised before any state is changed, so callers can report it
and carry on with the same in-memory data.
"""


class StepTrackerError(ValueError):
    pass


class NotFoundError(StepTrackerError):
    pass


class DuplicateIdError(StepTrackerError):
    pass


class DuplicateGroupIdError(StepTrackerError):
    pass


class CapacityExceededError(StepTrackerError):
    pass


class NoValidMembersError(StepTrackerError):
    pass


class InsufficientDataError(StepTrackerError):
    pass


class InvalidMergeError(StepTrackerError):
    pass
