import random
from types import SimpleNamespace
from campus_admin.utils.rollup import (
    aggregate, count_by, rollup_colleges, serialize, summarize_faculty,
    StudentRecord, Gender, IncidentType, GENDER_VALUES,
)


def record(faculty_id, year, gender="male", incident_type="none"):
    return {"faculty_id": faculty_id, "year": year, "gender": gender, "incident_type": incident_type}


EXAMPLE = [
    record("F1", 2, "male", "none"),
    record("F1", 2, "female", "repeat"),
    record("F1", 1, "male", "none"),
    record("F2", 1, "other", "none"),
]


def test_example_rollup():
    result = serialize(aggregate(EXAMPLE))

    assert result == {
        "F1": [
            {"year": 1, "stats": {"total": 1, "male": 1, "female": 0, "other": 0,
                                  "repeat": 0, "dismissed": 0, "medical": 0}},
            {"year": 2, "stats": {"total": 2, "male": 1, "female": 1, "other": 0,
                                  "repeat": 1, "dismissed": 0, "medical": 0}},
        ],
        "F2": [
            {"year": 1, "stats": {"total": 1, "male": 0, "female": 0, "other": 1,
                                  "repeat": 0, "dismissed": 0, "medical": 0}},
        ],
    }


def test_empty_input():
    assert aggregate([]) == {}


def test_records_missing_a_grouping_key_are_skipped():
    rows = EXAMPLE + [
        record(None, 1),
        record("F1", None),
        {"gender": "female"},
    ]

    result = aggregate(rows)

    assert sum(b.total for buckets in result.values() for b in buckets) == len(EXAMPLE)
    assert None not in result


def test_unknown_values_only_count_towards_total():
    result = aggregate([record("F1", 1, "unknown", "expelled")])

    bucket = result["F1"][0]
    assert bucket.total == 1
    assert sum(bucket.count_by_category.values()) == 0
    assert sum(bucket.count_by_flag.values()) == 0


def test_category_counts_add_up_to_total():
    rng = random.Random(7)
    rows = [
        record(rng.choice(["A", "B", "C"]), rng.randint(1, 4),
               rng.choice(GENDER_VALUES),
               rng.choice([t.value for t in IncidentType]))
        for _ in range(200)
    ]

    for buckets in aggregate(rows).values():
        for bucket in buckets:
            assert sum(bucket.count_by_category.values()) == bucket.total
            assert sum(bucket.count_by_flag.values()) <= bucket.total


def test_bucket_totals_match_record_counts():
    rng = random.Random(11)
    rows = [record(rng.choice(["A", "B", None]), rng.choice([1, 2, 3, None])) for _ in range(150)]

    result = aggregate(rows)

    for faculty_id, buckets in result.items():
        for bucket in buckets:
            expected = sum(
                1 for r in rows
                if r["faculty_id"] == faculty_id and r["year"] == bucket.year
            )
            assert bucket.total == expected


def test_order_of_input_does_not_matter():
    rng = random.Random(3)
    rows = [
        record(rng.choice(["A", "B"]), rng.randint(1, 5), rng.choice(GENDER_VALUES))
        for _ in range(60)
    ]
    shuffled = rows[:]
    rng.shuffle(shuffled)

    assert aggregate(rows) == aggregate(shuffled)


def test_years_sorted_within_each_faculty():
    rows = [record("A", year) for year in (4, 1, 3, 2, 1, 4)]

    years = [bucket.year for bucket in aggregate(rows)["A"]]

    assert years == [1, 2, 3, 4]


def test_adding_a_record_touches_exactly_one_bucket():
    before = serialize(aggregate(EXAMPLE))
    after = serialize(aggregate(EXAMPLE + [record("F2", 3, "female")]))

    assert after["F1"] == before["F1"]
    assert after["F2"][0] == before["F2"][0]
    assert after["F2"][1]["year"] == 3
    assert after["F2"][1]["stats"]["total"] == 1


def test_records_from_objects_and_enums():
    student = SimpleNamespace(faculty_id=5, year=1, gender=Gender.FEMALE,
                              incident_type=IncidentType.MEDICAL_DISCHARGE)

    rec = StudentRecord.from_row(student)
    stats = aggregate([rec])[5][0].stats

    assert rec.gender == "female"
    assert stats["female"] == 1
    assert stats["medical"] == 1


def test_summarize_faculty_sums_years():
    totals = summarize_faculty(aggregate(EXAMPLE)["F1"])

    assert totals["total"] == 3
    assert totals["male"] == 2
    assert totals["repeat"] == 1


def test_rollup_colleges_builds_hierarchy():
    colleges = [{"id": 1, "college_name": "Arts"}, {"id": 2, "college_name": "Science"}]
    faculties = [
        {"id": "F1", "faculty_name": "Physics", "college_id": 2},
        {"id": "F2", "faculty_name": "Chemistry", "college_id": 2},
        {"id": "F3", "faculty_name": "History", "college_id": 1},
    ]

    tree = rollup_colleges(colleges, faculties, aggregate(EXAMPLE))

    arts, science = tree
    assert arts["faculty_count"] == 1
    assert arts["totals"]["total"] == 0
    assert arts["faculties"][0]["years"] == []
    assert science["totals"]["total"] == 4
    assert [f["faculty_name"] for f in science["faculties"]] == ["Physics", "Chemistry"]


def test_count_by_with_known_values():
    rows = [{"gender": "male"}, {"gender": "female"}, {"gender": "male"}, {"gender": "robot"}]

    assert count_by(rows, "gender", known=GENDER_VALUES) == {"male": 2, "female": 1, "other": 0}
    assert count_by(rows, "gender") == {"male": 2, "female": 1, "robot": 1}
