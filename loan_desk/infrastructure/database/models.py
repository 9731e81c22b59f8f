"""SQLAlchemy ORM models for the loan application store"""

from sqlalchemy import Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LoanApplicationRecord(Base):
    """Persisted loan application"""

    __tablename__ = "loan_application"

    id = Column(String(36), primary_key=True)
    full_name = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    phone_number = Column(Text, nullable=False)
    loan_amount = Column(Numeric(12, 2), nullable=False)
    purpose = Column(Text, nullable=False)
    credit_score = Column(Integer, nullable=False)
    employment_status = Column(Text, nullable=False)
    monthly_income = Column(Numeric(12, 2), nullable=False)
    status = Column(String(16), nullable=False, default="pending", index=True)
    submitted_at = Column(DateTime(timezone=True), nullable=False, index=True)
