from collections.abc import Sequence
from typing import Protocol

from studyflow.domain.study.entities import Assignment, StudySession, Subject


class StudyPersistenceGatewayProtocol(Protocol):
    """Loads and saves the three study collections, each under its own key.

    Implementations raise PersistenceError when durable storage cannot be
    read or written. Absent records load as empty lists.
    """

    def load_subjects(self) -> list[Subject]: ...

    def load_assignments(self) -> list[Assignment]: ...

    def load_sessions(self) -> list[StudySession]: ...

    def save_subjects(self, subjects: Sequence[Subject]) -> None: ...

    def save_assignments(self, assignments: Sequence[Assignment]) -> None: ...

    def save_sessions(self, sessions: Sequence[StudySession]) -> None: ...
