"""Read-only view of the study store at one point in time."""

from dataclasses import dataclass

from studyflow.domain.common.value_objects import AssignmentId, SubjectId
from studyflow.domain.study.entities import Assignment, StudySession, Subject


@dataclass(frozen=True)
class StudySnapshot:
    """
    Immutable snapshot of the three study collections.

    The store hands out copies of its entities, so mutating anything
    reachable from a snapshot never affects the store or later snapshots.
    """

    subjects: tuple[Subject, ...] = ()
    assignments: tuple[Assignment, ...] = ()
    sessions: tuple[StudySession, ...] = ()

    def get_subject(self, subject_id: SubjectId) -> Subject | None:
        return next((s for s in self.subjects if s.id == subject_id), None)

    def get_assignment(self, assignment_id: AssignmentId) -> Assignment | None:
        return next((a for a in self.assignments if a.id == assignment_id), None)
