"""Built-in demonstration employees."""

from __future__ import annotations

from datetime import date

from models import Employee


def sample_employees() -> list[Employee]:
    """Return a fresh list of the ten demonstration employees."""
    return [
        Employee(1001, "John", "Smith", "john.smith@company.com",
                 "Engineering", "Software Engineer", 75000.0, date(2022, 3, 15),
                 "+1-555-0123", "123 Main St, Anytown, USA"),
        Employee(1002, "Sarah", "Johnson", "sarah.johnson@company.com",
                 "Marketing", "Marketing Manager", 68000.0, date(2021, 8, 22),
                 "+1-555-0124", "456 Oak Ave, Somewhere, USA"),
        Employee(1003, "Michael", "Brown", "michael.brown@company.com",
                 "Finance", "Financial Analyst", 62000.0, date(2023, 1, 10),
                 "+1-555-0125", "789 Pine Rd, Anywhere, USA"),
        Employee(1004, "Emily", "Davis", "emily.davis@company.com",
                 "HR", "HR Specialist", 58000.0, date(2022, 11, 5),
                 "+1-555-0126", "321 Elm St, Nowhere, USA"),
        Employee(1005, "David", "Wilson", "david.wilson@company.com",
                 "Engineering", "Senior Developer", 85000.0, date(2020, 6, 1),
                 "+1-555-0127", "654 Maple Dr, Everytown, USA"),
        Employee(1006, "Lisa", "Martinez", "lisa.martinez@company.com",
                 "Sales", "Sales Representative", 55000.0, date(2023, 4, 18),
                 "+1-555-0128", "987 Cedar Ln, Hometown, USA"),
        Employee(1007, "Robert", "Garcia", "robert.garcia@company.com",
                 "Engineering", "DevOps Engineer", 78000.0, date(2021, 12, 8),
                 "+1-555-0129", "147 Birch Ct, Yourtown, USA"),
        Employee(1008, "Jennifer", "Taylor", "jennifer.taylor@company.com",
                 "Marketing", "Content Specialist", 52000.0, date(2023, 2, 14),
                 "+1-555-0130", "258 Spruce Way, Mytown, USA"),
        Employee(1009, "Chris", "Anderson", "chris.anderson@company.com",
                 "Finance", "Senior Accountant", 70000.0, date(2022, 7, 30),
                 "+1-555-0131", "369 Fir Blvd, Ourtown, USA"),
        Employee(1010, "Amanda", "Thomas", "amanda.thomas@company.com",
                 "HR", "HR Manager", 72000.0, date(2021, 4, 12),
                 "+1-555-0132", "741 Ash St, Thistown, USA"),
    ]
