"""Tests for the StudyStore mutation operations and change notifications."""

from datetime import UTC, date, datetime, timedelta

import pytest

from studyflow.application.study.store import StudyStore
from studyflow.domain.common.value_objects import MonotonicIdGenerator, SubjectId
from studyflow.domain.study.entities import SUBJECT_COLORS, Priority
from studyflow.domain.study.events import (
    AssignmentAdded,
    AssignmentCompletionToggled,
    AssignmentRemoved,
    Collection,
    StudyEvent,
    StudyTimeLogged,
    SubjectAdded,
    SubjectRemoved,
)
from tests.conftest import NOW, FakeClock


@pytest.fixture
def events(store: StudyStore) -> list[StudyEvent]:
    """Collect every event the store emits."""
    received: list[StudyEvent] = []
    store.subscribe(received.append)
    return received


# --- Subjects ---


class TestAddSubject:
    def test_adds_subject_with_defaults(self, store: StudyStore) -> None:
        subject = store.add_subject("DSA Practice")

        assert subject is not None
        snapshot = store.snapshot()
        assert len(snapshot.subjects) == 1
        stored = snapshot.subjects[0]
        assert stored.name == "DSA Practice"
        assert stored.studied_hours == 0
        assert stored.target_hours == 40
        assert stored.last_studied is None
        assert stored.color in SUBJECT_COLORS

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_is_a_no_op(
        self, store: StudyStore, events: list[StudyEvent], name: str
    ) -> None:
        assert store.add_subject(name) is None
        assert store.snapshot().subjects == ()
        assert events == []

    def test_every_subject_gets_a_distinct_id(self) -> None:
        # Frozen millisecond clock: every id is requested in the same instant
        store = StudyStore(id_generator=MonotonicIdGenerator(time_ms=lambda: 1_000))
        names = ["DSA", "DBMS", "OS", "  ", "Networks", "DSA"]

        for name in names:
            store.add_subject(name)

        subjects = store.snapshot().subjects
        assert len(subjects) == 5
        assert len({s.id for s in subjects}) == 5

    def test_color_is_picked_from_palette(self) -> None:
        seen: list[tuple[str, ...]] = []

        def pick_last(colors: tuple[str, ...]) -> str:
            seen.append(tuple(colors))
            return colors[-1]

        store = StudyStore(color_picker=pick_last)
        subject = store.add_subject("Maths")

        assert subject is not None
        assert subject.color == SUBJECT_COLORS[-1]
        assert seen == [SUBJECT_COLORS]

    def test_custom_target_hours(self, store: StudyStore) -> None:
        subject = store.add_subject("Compilers", target_hours=12)

        assert subject is not None
        assert subject.target_hours == 12

    @pytest.mark.parametrize("target", [0, -5, float("nan")])
    def test_non_positive_target_is_a_no_op(self, store: StudyStore, target: float) -> None:
        assert store.add_subject("Compilers", target_hours=target) is None
        assert store.snapshot().subjects == ()

    def test_store_default_target(self) -> None:
        store = StudyStore(default_target_hours=25)

        subject = store.add_subject("Physics")

        assert subject is not None
        assert subject.target_hours == 25

    def test_emits_subject_added(self, store: StudyStore, events: list[StudyEvent]) -> None:
        subject = store.add_subject("OS")

        assert subject is not None
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, SubjectAdded)
        assert event.subject_id == subject.id
        assert event.collections == frozenset({Collection.SUBJECTS})


class TestLogStudyTime:
    def test_scenario_two_sessions(self, store: StudyStore, clock: FakeClock) -> None:
        subject = store.add_subject("DSA Practice")
        assert subject is not None

        store.log_study_time(subject.id, 0.5)
        clock.advance(minutes=45)
        second_call = clock.now
        store.log_study_time(subject.id, 1)

        snapshot = store.snapshot()
        stored = snapshot.get_subject(subject.id)
        assert stored is not None
        assert stored.studied_hours == 1.5
        assert stored.last_studied == second_call
        assert [s.duration for s in snapshot.sessions] == [0.5, 1]
        assert all(s.subject_id == subject.id for s in snapshot.sessions)

    def test_records_session_snapshot(self, store: StudyStore) -> None:
        subject = store.add_subject("DBMS")
        assert subject is not None

        session = store.log_study_time(subject.id, 2)

        assert session is not None
        assert session.subject_id == subject.id
        assert session.subject_name == "DBMS"
        assert session.duration == 2
        assert session.date == NOW

    def test_accepts_plain_string_ids(self, store: StudyStore) -> None:
        subject = store.add_subject("OS")
        assert subject is not None

        assert store.log_study_time(subject.id.value, 1) is not None

    @pytest.mark.parametrize("subject_id", ["does-not-exist", ""])
    def test_unknown_subject_is_a_no_op(
        self, store: StudyStore, events: list[StudyEvent], subject_id: str
    ) -> None:
        store.add_subject("OS")
        events.clear()

        assert store.log_study_time(subject_id, 1) is None
        assert store.snapshot().sessions == ()
        assert events == []

    @pytest.mark.parametrize("hours", [0, -1])
    def test_non_positive_hours_is_a_no_op(self, store: StudyStore, hours: float) -> None:
        subject = store.add_subject("OS")
        assert subject is not None

        assert store.log_study_time(subject.id, hours) is None
        stored = store.snapshot().get_subject(subject.id)
        assert stored is not None
        assert stored.studied_hours == 0
        assert store.snapshot().sessions == ()

    def test_emits_study_time_logged(self, store: StudyStore, events: list[StudyEvent]) -> None:
        subject = store.add_subject("OS")
        assert subject is not None
        events.clear()

        session = store.log_study_time(subject.id, 1)

        assert session is not None
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, StudyTimeLogged)
        assert event.session_id == session.id
        assert event.hours == 1
        assert event.collections == frozenset({Collection.SUBJECTS, Collection.SESSIONS})


class TestRemoveSubject:
    def test_cascades_to_own_sessions_only(self, store: StudyStore) -> None:
        dsa = store.add_subject("DSA")
        dbms = store.add_subject("DBMS")
        assert dsa is not None
        assert dbms is not None
        store.log_study_time(dsa.id, 1)
        store.log_study_time(dbms.id, 2)
        store.log_study_time(dsa.id, 0.5)

        assert store.remove_subject(dsa.id) is True

        snapshot = store.snapshot()
        assert [s.id for s in snapshot.subjects] == [dbms.id]
        assert [s.subject_id for s in snapshot.sessions] == [dbms.id]
        assert snapshot.sessions[0].duration == 2

    def test_unknown_id_is_a_no_op(self, store: StudyStore, events: list[StudyEvent]) -> None:
        subject = store.add_subject("OS")
        assert subject is not None
        store.log_study_time(subject.id, 1)
        events.clear()

        assert store.remove_subject(SubjectId("missing")) is False

        snapshot = store.snapshot()
        assert len(snapshot.subjects) == 1
        assert len(snapshot.sessions) == 1
        assert events == []

    def test_emits_removed_session_ids(self, store: StudyStore, events: list[StudyEvent]) -> None:
        subject = store.add_subject("OS")
        assert subject is not None
        first = store.log_study_time(subject.id, 1)
        second = store.log_study_time(subject.id, 2)
        assert first is not None
        assert second is not None
        events.clear()

        store.remove_subject(subject.id)

        assert len(events) == 1
        event = events[0]
        assert isinstance(event, SubjectRemoved)
        assert event.removed_session_ids == (first.id, second.id)
        assert event.collections == frozenset({Collection.SUBJECTS, Collection.SESSIONS})

    def test_removing_subject_without_sessions_touches_subjects_only(
        self, store: StudyStore, events: list[StudyEvent]
    ) -> None:
        subject = store.add_subject("OS")
        assert subject is not None

        store.remove_subject(subject.id)

        assert events[-1].collections == frozenset({Collection.SUBJECTS})


# --- Assignments ---


class TestAddAssignment:
    def test_adds_incomplete_assignment(self, store: StudyStore) -> None:
        assignment = store.add_assignment("Lab Report", "OS", "2026-03-15", "High")

        assert assignment is not None
        stored = store.snapshot().assignments
        assert len(stored) == 1
        assert stored[0].title == "Lab Report"
        assert stored[0].subject == "OS"
        assert stored[0].deadline == datetime(2026, 3, 15, tzinfo=UTC)
        assert stored[0].priority is Priority.HIGH
        assert stored[0].completed is False

    def test_accepts_date_objects(self, store: StudyStore) -> None:
        assignment = store.add_assignment("Essay", "English", date(2026, 4, 1), Priority.LOW)

        assert assignment is not None
        assert assignment.deadline == datetime(2026, 4, 1, tzinfo=UTC)

    @pytest.mark.parametrize(
        ("title", "subject", "deadline"),
        [
            ("", "OS", "2026-03-15"),
            ("Lab Report", "", "2026-03-15"),
            ("Lab Report", "OS", ""),
            ("Lab Report", "OS", None),
        ],
    )
    def test_missing_field_is_a_no_op(
        self,
        store: StudyStore,
        events: list[StudyEvent],
        title: str,
        subject: str,
        deadline: str | None,
    ) -> None:
        assert store.add_assignment(title, subject, deadline) is None
        assert store.snapshot().assignments == ()
        assert events == []

    def test_whitespace_title_is_kept_as_typed(self, store: StudyStore) -> None:
        assignment = store.add_assignment("   ", "OS", "2026-03-15")

        assert assignment is not None
        assert assignment.title == "   "
        assert len(store.snapshot().assignments) == 1

    def test_unparseable_deadline_is_a_no_op(self, store: StudyStore) -> None:
        assert store.add_assignment("Lab Report", "OS", "someday") is None
        assert store.snapshot().assignments == ()

    def test_unknown_priority_is_a_no_op(self, store: StudyStore) -> None:
        assert store.add_assignment("Lab Report", "OS", "2026-03-15", "Critical") is None
        assert store.snapshot().assignments == ()

    def test_subject_label_is_free_text(self, store: StudyStore) -> None:
        """The subject does not have to match any tracked Subject."""
        assignment = store.add_assignment("Proof set", "Number Theory", "2026-03-15")

        assert assignment is not None
        assert store.snapshot().subjects == ()

    def test_emits_assignment_added(self, store: StudyStore, events: list[StudyEvent]) -> None:
        assignment = store.add_assignment("Lab Report", "OS", "2026-03-15")

        assert assignment is not None
        assert len(events) == 1
        assert isinstance(events[0], AssignmentAdded)
        assert events[0].assignment_id == assignment.id
        assert events[0].collections == frozenset({Collection.ASSIGNMENTS})


class TestToggleAndRemoveAssignment:
    def test_toggle_twice_restores_state(self, store: StudyStore) -> None:
        assignment = store.add_assignment("Lab Report", "OS", "2026-03-15")
        assert assignment is not None

        first = store.toggle_assignment_completion(assignment.id)
        second = store.toggle_assignment_completion(assignment.id)

        assert first is not None
        assert first.completed is True
        assert second is not None
        assert second.completed is False
        assert store.snapshot().assignments[0].completed is False

    def test_toggle_unknown_id_is_a_no_op(
        self, store: StudyStore, events: list[StudyEvent]
    ) -> None:
        assert store.toggle_assignment_completion("missing") is None
        assert events == []

    def test_toggle_emits_new_state(self, store: StudyStore, events: list[StudyEvent]) -> None:
        assignment = store.add_assignment("Lab Report", "OS", "2026-03-15")
        assert assignment is not None
        events.clear()

        store.toggle_assignment_completion(assignment.id)

        assert len(events) == 1
        assert isinstance(events[0], AssignmentCompletionToggled)
        assert events[0].completed is True

    def test_remove_assignment(self, store: StudyStore, events: list[StudyEvent]) -> None:
        keep = store.add_assignment("Essay", "English", "2026-03-20")
        drop = store.add_assignment("Lab Report", "OS", "2026-03-15")
        assert keep is not None
        assert drop is not None
        events.clear()

        assert store.remove_assignment(drop.id) is True

        assert [a.id for a in store.snapshot().assignments] == [keep.id]
        assert len(events) == 1
        assert isinstance(events[0], AssignmentRemoved)

    def test_remove_unknown_assignment_is_a_no_op(
        self, store: StudyStore, events: list[StudyEvent]
    ) -> None:
        store.add_assignment("Essay", "English", "2026-03-20")
        events.clear()

        assert store.remove_assignment("missing") is False
        assert len(store.snapshot().assignments) == 1
        assert events == []


# --- Snapshots and subscriptions ---


class TestSnapshots:
    def test_snapshot_is_isolated_from_later_mutations(self, store: StudyStore) -> None:
        subject = store.add_subject("OS")
        assert subject is not None
        before = store.snapshot()

        store.log_study_time(subject.id, 2)
        store.add_assignment("Lab Report", "OS", "2026-03-15")

        assert before.subjects[0].studied_hours == 0
        assert before.sessions == ()
        assert before.assignments == ()

    def test_mutating_snapshot_entities_does_not_touch_store(self, store: StudyStore) -> None:
        store.add_subject("OS")
        store.add_assignment("Lab Report", "OS", "2026-03-15")

        snapshot = store.snapshot()
        snapshot.subjects[0].studied_hours = 99
        snapshot.assignments[0].toggle_completion()

        fresh = store.snapshot()
        assert fresh.subjects[0].studied_hours == 0
        assert fresh.assignments[0].completed is False

    def test_returned_entities_are_copies(self, store: StudyStore) -> None:
        subject = store.add_subject("OS")
        assert subject is not None

        subject.studied_hours = 10

        assert store.snapshot().subjects[0].studied_hours == 0

    def test_renaming_does_not_rewrite_session_history(self, store: StudyStore) -> None:
        subject = store.add_subject("OS")
        assert subject is not None
        store.log_study_time(subject.id, 1)

        # Sessions keep the name the subject had when they were logged
        store.snapshot().subjects[0].name = "Operating Systems"

        assert store.snapshot().sessions[0].subject_name == "OS"


class TestSubscriptions:
    def test_unsubscribe_stops_notifications(self, store: StudyStore) -> None:
        received: list[StudyEvent] = []
        unsubscribe = store.subscribe(received.append)

        store.add_subject("OS")
        unsubscribe()
        store.add_subject("DBMS")

        assert len(received) == 1

    def test_failing_handler_does_not_block_others(self, store: StudyStore) -> None:
        received: list[StudyEvent] = []

        def broken(event: StudyEvent) -> None:
            raise RuntimeError("boom")

        store.subscribe(broken)
        store.subscribe(received.append)

        subject = store.add_subject("OS")

        assert subject is not None
        assert len(received) == 1
        assert len(store.snapshot().subjects) == 1

    def test_handlers_see_the_mutated_state(self, store: StudyStore) -> None:
        counts: list[int] = []
        store.subscribe(lambda event: counts.append(len(store.snapshot().subjects)))

        store.add_subject("OS")
        store.add_subject("DBMS")

        assert counts == [1, 2]

    def test_now_uses_injected_clock(self, store: StudyStore, clock: FakeClock) -> None:
        clock.advance(days=1)

        assert store.now == NOW + timedelta(days=1)
