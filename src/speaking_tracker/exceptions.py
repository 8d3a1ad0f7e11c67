"""Domain exceptions raised by repositories and services."""


class TrackerError(Exception):
    """Base error for the tracker."""


class ReferenceNotFoundError(TrackerError):
    """A referenced event or session does not exist."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class SessionInUseError(TrackerError):
    """A session cannot be hard-deleted while submissions reference it."""

    def __init__(self, session_id: str, submission_count: int):
        self.session_id = session_id
        self.submission_count = submission_count
        super().__init__(
            f"Session {session_id} is referenced by {submission_count} submission(s)"
        )


class DuplicateSubmissionError(TrackerError):
    """The session has already been submitted to the event."""

    def __init__(self, session_id: str, event_id: str):
        self.session_id = session_id
        self.event_id = event_id
        super().__init__(f"Session {session_id} already submitted to event {event_id}")


class SessionizeFetchError(TrackerError):
    """The Sessionize page could not be fetched."""


class InvalidDateRangeError(TrackerError):
    """An event ends before it starts."""

    def __init__(self, date_start: str, date_end: str):
        self.date_start = date_start
        self.date_end = date_end
        super().__init__(f"dateEnd {date_end} is before dateStart {date_start}")
