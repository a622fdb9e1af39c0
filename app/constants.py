"""
Policy constants for self-service requests
"""

SERVICE_NAME = "employee-self-service"

# Leave credit pools (annual allotment in days)
LEAVE_CREDITS = {
    "Sick Leave": 15,
    "Vacation Leave": 15,
    "Solo Parent Leave": 7,
}

# A pending record may be edited for this long after submission
EDIT_WINDOW_HOURS = 24

# Overtime and attendance entries may be backdated at most this many days
BACKDATED_MAX_DAYS = 7

# Work from Home time-in later than this is flagged late
LATE_THRESHOLD = "09:30"
LATE_MARKER = "[LATE]"

EXEMPT_TITLES = (
    "Executive",
    "Manager",
    "Supervisor",
    "Team Leader",
    "Assistant Team Leader",
)

PURPOSE_MAX_LENGTH = 300

COE_TEMPLATES = (
    "Pag-Ibig Multipurpose Loan",
    "Bank Loan/Housing",
    "Credit Card Application",
    "Travel Order",
    "Employee Reference (with or without compensation)",
    "Visa Application",
)
