"""
Roll-up aggregation of student records.

Student rows are summarised into per-faculty, per-year counters
(total, gender split, incident split) and, one level up, into a
college -> faculty -> year hierarchy for the colleges view.

Everything here is a pure function over its arguments: no database
access, no logging. Callers load the rows, call ``aggregate`` and throw
the result away on the next write.
"""
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class IncidentType(str, Enum):
    NONE = "none"
    REPEAT = "repeat"
    DISMISSED = "dismissed"
    MEDICAL_DISCHARGE = "medical_discharge"


GENDER_VALUES = tuple(g.value for g in Gender)
FLAG_VALUES = tuple(i.value for i in IncidentType if i is not IncidentType.NONE)

# Output field for each incident flag
FLAG_FIELDS = {
    IncidentType.REPEAT.value: "repeat",
    IncidentType.DISMISSED.value: "dismissed",
    IncidentType.MEDICAL_DISCHARGE.value: "medical",
}

STAT_FIELDS = ("total",) + GENDER_VALUES + tuple(FLAG_FIELDS.values())


@dataclass(frozen=True)
class StudentRecord:
    """Snapshot of the student fields the roll-up reads."""
    faculty_id: object = None
    year: int = None
    gender: str = None
    incident_type: str = None

    @classmethod
    def from_row(cls, row):
        """Build a record from a mapping or from any object with matching attributes."""
        if isinstance(row, dict):
            get = row.get
        else:
            def get(name):
                return getattr(row, name, None)

        return cls(
            faculty_id=get("faculty_id"),
            year=get("year"),
            gender=_enum_value(get("gender")),
            incident_type=_enum_value(get("incident_type")),
        )

    @property
    def is_grouped(self):
        # Zero or empty keys count as missing, same as null
        return bool(self.faculty_id) and bool(self.year)


@dataclass
class YearStats:
    """Counters for one (faculty, year) bucket."""
    year: int
    total: int = 0
    count_by_category: dict = field(default_factory=lambda: dict.fromkeys(GENDER_VALUES, 0))
    count_by_flag: dict = field(default_factory=lambda: dict.fromkeys(FLAG_VALUES, 0))

    def add(self, record):
        self.total += 1

        if record.gender in self.count_by_category:
            self.count_by_category[record.gender] += 1

        if record.incident_type in self.count_by_flag:
            self.count_by_flag[record.incident_type] += 1

    @property
    def stats(self):
        stats = {"total": self.total}
        stats.update(self.count_by_category)
        for flag, name in FLAG_FIELDS.items():
            stats[name] = self.count_by_flag[flag]
        return stats

    def to_dict(self):
        return {"year": self.year, "stats": self.stats}


def aggregate(records):
    """
    Group student records by faculty and year.

    Returns ``{faculty_id: [YearStats, ...]}`` with each list sorted by
    year. Records missing a faculty or a year are skipped. Gender and
    incident values outside the known sets leave their counters alone
    but still count towards ``total``.
    """
    buckets = defaultdict(dict)

    for row in records:
        record = row if isinstance(row, StudentRecord) else StudentRecord.from_row(row)

        if not record.is_grouped:
            continue

        by_year = buckets[record.faculty_id]
        bucket = by_year.get(record.year)
        if bucket is None:
            bucket = by_year[record.year] = YearStats(year=record.year)

        bucket.add(record)

    return {
        faculty_id: [by_year[year] for year in sorted(by_year)]
        for faculty_id, by_year in buckets.items()
    }


def empty_stats():
    return dict.fromkeys(STAT_FIELDS, 0)


def sum_stats(stats_list):
    totals = empty_stats()
    for stats in stats_list:
        for name in STAT_FIELDS:
            totals[name] += stats.get(name, 0)
    return totals


def summarize_faculty(year_stats):
    return sum_stats(ys.stats for ys in year_stats)


def serialize(by_faculty):
    return {
        faculty_id: [ys.to_dict() for ys in year_stats]
        for faculty_id, year_stats in by_faculty.items()
    }


def rollup_colleges(colleges, faculties, by_faculty):
    """
    Nest faculty/year statistics under their colleges.

    ``colleges`` and ``faculties`` are rows (models or dicts) exposing
    ``id``/``college_name`` and ``id``/``faculty_name``/``college_id``.
    Ordering follows the input order, so pass them already sorted.
    """
    faculties_by_college = defaultdict(list)
    for faculty in faculties:
        faculties_by_college[_field(faculty, "college_id")].append(faculty)

    tree = []
    for college in colleges:
        college_id = _field(college, "id")

        faculty_nodes = []
        for faculty in faculties_by_college.get(college_id, []):
            year_stats = by_faculty.get(_field(faculty, "id"), [])
            faculty_nodes.append({
                "id": _field(faculty, "id"),
                "faculty_name": _field(faculty, "faculty_name"),
                "description": _field(faculty, "description"),
                "totals": summarize_faculty(year_stats),
                "years": [ys.to_dict() for ys in year_stats],
            })

        tree.append({
            "id": college_id,
            "college_name": _field(college, "college_name"),
            "description": _field(college, "description"),
            "faculty_count": len(faculty_nodes),
            "totals": sum_stats(node["totals"] for node in faculty_nodes),
            "faculties": faculty_nodes,
        })

    return tree


def count_by(rows, key, known=None):
    """
    Count rows per value of ``key``.

    With ``known`` the result always has exactly those keys (zero when
    absent) and any other value is dropped.
    """
    counts = dict.fromkeys(known, 0) if known is not None else {}

    for row in rows:
        value = _enum_value(key(row) if callable(key) else _field(row, key))
        if known is not None and value not in counts:
            continue
        if value is None:
            continue
        counts[value] = counts.get(value, 0) + 1

    return counts


def _field(row, name):
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def _enum_value(value):
    if isinstance(value, Enum):
        return value.value
    return value
