"""Built-in import profiles for school and business modules."""

from typing import Optional

from .models import ImportProfile

IMPORT_PROFILES: dict[str, ImportProfile] = {
    profile.module: profile
    for profile in (
        ImportProfile(
            module="students",
            label="Students",
            description="Import student records including admission numbers and contact details",
            system_fields=[
                "admissionNumber",
                "studentName",
                "dateOfBirth",
                "gender",
                "parentName",
                "parentPhone",
                "parentEmail",
                "class",
                "stream",
            ],
            required_fields=["admissionNumber", "studentName", "class"],
        ),
        ImportProfile(
            module="staff",
            label="Staff Members",
            description="Import staff records including positions and contact details",
            system_fields=[
                "staffId",
                "staffName",
                "email",
                "phone",
                "position",
                "department",
                "dateJoined",
                "salary",
            ],
            required_fields=["staffId", "staffName", "position"],
        ),
        ImportProfile(
            module="fees",
            label="Fee Records",
            description="Import student fee information and amounts",
            system_fields=[
                "admissionNumber",
                "studentName",
                "feeType",
                "amount",
                "dueDate",
                "term",
                "class",
            ],
            required_fields=["admissionNumber", "studentName", "feeType", "amount"],
        ),
        ImportProfile(
            module="attendance",
            label="Attendance Records",
            description="Import student attendance for a specific date or period",
            system_fields=["admissionNumber", "studentName", "date", "status", "class", "notes"],
            required_fields=["admissionNumber", "studentName", "date", "status"],
        ),
        ImportProfile(
            module="inventory",
            label="Inventory Items",
            description="Import inventory items with quantities and prices",
            system_fields=[
                "itemCode",
                "itemName",
                "category",
                "quantity",
                "unitPrice",
                "supplier",
                "reorderLevel",
                "location",
            ],
            required_fields=["itemCode", "itemName", "category", "quantity", "unitPrice"],
        ),
        ImportProfile(
            module="parents",
            label="Parent/Guardian Information",
            description="Import parent and guardian contact information",
            system_fields=[
                "parentName",
                "relationship",
                "email",
                "phone",
                "occupation",
                "address",
                "studentAdmissionNumber",
            ],
            required_fields=["parentName", "phone", "studentAdmissionNumber"],
        ),
        ImportProfile(
            module="classes",
            label="Classes/Forms",
            description="Import class/form information",
            system_fields=["className", "form", "classTeacher", "level", "capacity", "year"],
            required_fields=["className", "classTeacher"],
        ),
        ImportProfile(
            module="subjects",
            label="Subjects",
            description="Import subject information",
            system_fields=[
                "subjectCode",
                "subjectName",
                "category",
                "creditHours",
                "teacher",
                "class",
            ],
            required_fields=["subjectCode", "subjectName", "category"],
        ),
    )
}


def get_profile(module: str) -> Optional[ImportProfile]:
    """Get the import profile for a module, or None if unknown."""
    return IMPORT_PROFILES.get(module)


def all_profiles() -> list[ImportProfile]:
    """Get all built-in import profiles."""
    return list(IMPORT_PROFILES.values())
