"""
Employee profile model
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
import enum
from app.db.base import Base


class EmploymentType(str, enum.Enum):
    REGULAR = "Regular"
    PROBATIONARY = "Probationary"
    PART_TIME = "Part-time"


class Gender(str, enum.Enum):
    MALE = "Male"
    FEMALE = "Female"


class CivilStatus(str, enum.Enum):
    SINGLE = "Single"
    MARRIED = "Married"
    WIDOWED = "Widowed"
    SEPARATED = "Separated"
    ANNULLED = "Annulled"


class YesNo(str, enum.Enum):
    YES = "Yes"
    NO = "No"


class EmployeeProfile(Base):
    __tablename__ = "employee_profiles"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False)
    # Lower-cased username, enforces case-insensitive uniqueness
    username_key = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    employment_type = Column(String, nullable=False, default=EmploymentType.REGULAR.value)
    department = Column(String, nullable=False)
    team = Column(String, nullable=False)
    position = Column(String, nullable=False)
    gender = Column(String, nullable=False, default=Gender.MALE.value)
    civil_status = Column(String, nullable=False, default=CivilStatus.SINGLE.value)
    solo_parent = Column(String, nullable=False, default=YesNo.NO.value)
    password_hash = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.current_timestamp(), onupdate=func.current_timestamp(), nullable=False)
