from datetime import date, datetime


def material_status(quantity, threshold):
    if quantity == 0:
        return "out_of_stock"
    elif quantity < threshold:
        return "low_stock"
    return "available"


def room_status_for_occupant(occupant_status):
    """Hostel room status implied by the status of the occupant checked into it."""
    return "occupied" if occupant_status == "checked_in" else "available"


def apply_medical_status(record, status, now=None):
    """Move a medical record to ``status``; discharging stamps the check-out time."""
    now = now or datetime.utcnow()

    record.status = status
    record.updated_at = now

    if status == "discharged":
        record.check_out_date = now

    return record


def check_out_occupant(occupant, today=None):
    occupant.status = "checked_out"
    occupant.check_out_date = today or date.today()

    if occupant.room is not None:
        occupant.room.status = "available"

    return occupant


def group_by_status(rows, statuses):
    groups = {status: [] for status in statuses}
    for row in rows:
        if row.status in groups:
            groups[row.status].append(row)
    return groups
