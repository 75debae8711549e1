from dataclasses import dataclass


def _contains(value, term):
    return term in (value or "").lower()


def _arg(args, name, default="all"):
    value = (args.get(name) or "").strip()
    return value or default


@dataclass(frozen=True)
class SearchFilter:
    """Case-insensitive substring search over a fixed set of fields."""
    term: str = ""

    @classmethod
    def from_args(cls, args):
        return cls(term=(args.get("search") or "").strip().lower())

    def matches(self, row, fields):
        if not self.term:
            return True
        return any(_contains(getattr(row, name, None), self.term) for name in fields)

    def apply(self, rows, fields):
        return [row for row in rows if self.matches(row, fields)]


@dataclass(frozen=True)
class StudentFilter:
    search: SearchFilter = SearchFilter()
    faculty_id: int = None
    year: int = None
    gender: str = "all"

    @classmethod
    def from_args(cls, args):
        return cls(
            search=SearchFilter.from_args(args),
            faculty_id=args.get("faculty_id", type=int),
            year=args.get("year", type=int),
            gender=_arg(args, "gender"),
        )

    def apply(self, students):
        result = []
        for student in students:
            if self.faculty_id is not None and student.faculty_id != self.faculty_id:
                continue
            if self.year is not None and student.year != self.year:
                continue
            if self.gender != "all" and student.gender != self.gender:
                continue
            if not self.search.matches(student, ("full_name", "student_id", "program")):
                continue
            result.append(student)
        return result


@dataclass(frozen=True)
class OccupantFilter:
    house_id: int = None
    gender: str = "all"
    status: str = "all"
    search: SearchFilter = SearchFilter()

    @classmethod
    def from_args(cls, args):
        return cls(
            house_id=args.get("house_id", type=int),
            gender=_arg(args, "gender"),
            status=_arg(args, "status"),
            search=SearchFilter.from_args(args),
        )

    def apply(self, occupants):
        result = []
        for occ in occupants:
            if self.house_id is not None and occ.room.house_id != self.house_id:
                continue
            if self.gender != "all" and occ.gender != self.gender:
                continue
            if self.status != "all" and occ.status != self.status:
                continue
            if not self.search.matches(occ, ("occupant_name", "subject_teaching")):
                continue
            result.append(occ)
        return result


@dataclass(frozen=True)
class IncidentFilter:
    incident_type: str = "all"

    @classmethod
    def from_args(cls, args):
        return cls(incident_type=_arg(args, "type"))

    def apply(self, incidents):
        if self.incident_type == "all":
            return list(incidents)
        return [inc for inc in incidents if inc.incident_type == self.incident_type]
