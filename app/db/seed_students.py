"""
Sample students written to a fresh document the first time it is loaded.

These two records are a bootstrap convenience for the dashboard; nothing
depends on them being present.
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, List, Tuple

from app.core.enums import StudentClass

# (first_name, last_name, email, phone, class, address, parent_name, parent_phone)
SAMPLE_STUDENTS: List[Tuple[str, str, str, str, StudentClass, str, str, str]] = [
    (
        "John", "Doe", "john.doe@email.com", "+1-234-567-8901", StudentClass.CLASS_10,
        "123 Main St, City, State", "Jane Doe", "+1-234-567-8902",
    ),
    (
        "Alice", "Smith", "alice.smith@email.com", "+1-234-567-8903", StudentClass.CLASS_9,
        "456 Oak Ave, City, State", "Bob Smith", "+1-234-567-8904",
    ),
]


def build_seed_students() -> List[Dict[str, str]]:
    now = datetime.now(timezone.utc)
    timestamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    today = now.date().isoformat()
    return [
        {
            "id": str(uuid.uuid4()),
            "firstName": first_name,
            "lastName": last_name,
            "email": email,
            "phone": phone,
            "class": student_class.value,
            "address": address,
            "parentName": parent_name,
            "parentPhone": parent_phone,
            "enrollmentDate": today,
            "createdAt": timestamp,
            "updatedAt": timestamp,
        }
        for first_name, last_name, email, phone, student_class, address, parent_name, parent_phone in SAMPLE_STUDENTS
    ]
