from conftest import MONDAY, make_candidate, make_entry

from app.schemas.conflict import ConflictSeverity, ConflictType
from app.services.conflict_classifier import classify


def test_exact_duplicate_stops_classification():
    duplicate = make_entry()
    same_batch_other_class = make_entry(subject_id="subject-2", faculty_id="faculty-g")
    same_faculty_other_batch = make_entry(batch_id="batch-c", subject_id="subject-3")

    conflicts = classify(make_candidate(), [same_batch_other_class, duplicate, same_faculty_other_batch])

    assert len(conflicts) == 1
    assert conflicts[0].type == ConflictType.EXACT_DUPLICATE
    assert conflicts[0].severity == ConflictSeverity.blocking
    assert conflicts[0].entries == [duplicate]


def test_batch_double_booking_lists_every_offending_entry():
    first = make_entry(subject_id="subject-2", faculty_id="faculty-g")
    second = make_entry(subject_id="subject-3", faculty_id="faculty-h", date=MONDAY)

    conflicts = classify(make_candidate(date=MONDAY), [first, second])

    assert [conflict.type for conflict in conflicts] == [ConflictType.BATCH_DOUBLE_BOOKING]
    assert conflicts[0].entries == [first, second]
    assert conflicts[0].is_blocking


def test_faculty_conflict_for_other_batch():
    other_batch = make_entry(batch_id="batch-c", subject_id="subject-9")

    conflicts = classify(make_candidate(), [other_batch])

    assert [conflict.type for conflict in conflicts] == [ConflictType.FACULTY_CONFLICT]
    assert conflicts[0].entries == [other_batch]


def test_same_class_taught_by_other_faculty_is_a_batch_conflict_only():
    # Same batch and subject but another instructor: the batch is busy, the faculty is not.
    other_instructor = make_entry(faculty_id="faculty-g")

    conflicts = classify(make_candidate(), [other_instructor])

    assert [conflict.type for conflict in conflicts] == [ConflictType.BATCH_DOUBLE_BOOKING]


def test_batch_and_faculty_conflicts_are_both_reported():
    batch_busy = make_entry(subject_id="subject-2", faculty_id="faculty-g")
    faculty_busy = make_entry(batch_id="batch-c", subject_id="subject-7")

    conflicts = classify(make_candidate(), [batch_busy, faculty_busy])

    assert [conflict.type for conflict in conflicts] == [
        ConflictType.BATCH_DOUBLE_BOOKING,
        ConflictType.FACULTY_CONFLICT,
    ]


def test_candidate_without_faculty_never_gets_faculty_conflicts():
    candidate = make_candidate(subject_id=None, faculty_id=None)
    entries = [
        make_entry(batch_id="batch-c", faculty_id=None, subject_id=None),
        make_entry(batch_id="batch-d", faculty_id="faculty-f"),
    ]

    conflicts = classify(candidate, entries)

    assert all(conflict.type != ConflictType.FACULTY_CONFLICT for conflict in conflicts)
    assert conflicts == []


def test_no_contacting_entries_means_no_conflicts():
    assert classify(make_candidate(), []) == []
