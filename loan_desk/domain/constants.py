"""Intake bounds and suggested category values"""

from decimal import Decimal

MIN_LOAN_AMOUNT = Decimal("1000")
MAX_LOAN_AMOUNT = Decimal("100000")

MIN_CREDIT_SCORE = 300
MAX_CREDIT_SCORE = 850

MIN_MONTHLY_INCOME = Decimal("1")

# Purpose and employment status are open sets; these are the values offered by the intake form.
LOAN_PURPOSES = [
    "Home Purchase",
    "Home Renovation",
    "Debt Consolidation",
    "Education",
    "Medical Expenses",
    "Business",
    "Vehicle Purchase",
    "Travel",
    "Wedding",
    "Other",
]

EMPLOYMENT_STATUSES = [
    "Full-time",
    "Part-time",
    "Self-employed",
    "Unemployed",
    "Retired",
    "Student",
]
