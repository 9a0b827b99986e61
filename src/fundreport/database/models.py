"""SQLAlchemy models for the fundreport database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class PoliticalOrganization(Base):
    """Political organization model."""

    __tablename__ = "political_organizations"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    profiles = relationship(
        "OrganizationReportProfile", back_populates="organization", cascade="all, delete-orphan"
    )
    transactions = relationship(
        "Transaction", back_populates="organization", cascade="all, delete-orphan"
    )


class OrganizationReportProfile(Base):
    """Per-year report profile (SYUUSHI07_01 data)."""

    __tablename__ = "organization_report_profiles"

    id = Column(Integer, primary_key=True)
    political_organization_id = Column(
        Integer, ForeignKey("political_organizations.id"), nullable=False
    )
    financial_year = Column(Integer, nullable=False)
    official_name = Column(String, nullable=True)
    official_name_kana = Column(String, nullable=True)
    office_address = Column(String, nullable=True)
    office_address_building = Column(String, nullable=True)
    representative_last_name = Column(String, nullable=True)
    representative_first_name = Column(String, nullable=True)
    accountant_last_name = Column(String, nullable=True)
    accountant_first_name = Column(String, nullable=True)
    organization_type = Column(String, nullable=True)
    activity_area = Column(String, nullable=True)
    previous_year_carryover = Column(Integer, default=0, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint(
            "political_organization_id", "financial_year", name="uq_profile_org_year"
        ),
    )

    # Relationships
    organization = relationship("PoliticalOrganization", back_populates="profiles")
    contact_persons = relationship(
        "ReportContactPerson",
        back_populates="profile",
        cascade="all, delete-orphan",
        order_by="ReportContactPerson.position",
    )


class ReportContactPerson(Base):
    """Clerical contact person attached to a report profile."""

    __tablename__ = "report_contact_persons"

    id = Column(Integer, primary_key=True)
    profile_id = Column(Integer, ForeignKey("organization_report_profiles.id"), nullable=False)
    position = Column(Integer, nullable=False)
    last_name = Column(String, nullable=False, default="")
    first_name = Column(String, nullable=False, default="")
    tel = Column(String, nullable=False, default="")

    # Relationships
    profile = relationship("OrganizationReportProfile", back_populates="contact_persons")


class Counterpart(Base):
    """Payee, lender or donor of a transaction."""

    __tablename__ = "counterparts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    occupation = Column(String, nullable=True)

    __table_args__ = (UniqueConstraint("name", "address", name="uq_counterpart_name_address"),)

    # Relationships
    transactions = relationship("Transaction", back_populates="counterpart")


class Transaction(Base):
    """Ledger transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    political_organization_id = Column(
        Integer, ForeignKey("political_organizations.id"), nullable=False
    )
    transaction_no = Column(String, nullable=False)
    transaction_date = Column(Date, nullable=False)
    financial_year = Column(Integer, nullable=False)
    transaction_type = Column(String, nullable=False)
    category_key = Column(String, nullable=False)
    debit_account = Column(String, nullable=False, default="")
    debit_amount = Column(Numeric(15, 2), nullable=False, default=0)
    credit_account = Column(String, nullable=False, default="")
    credit_amount = Column(Numeric(15, 2), nullable=False, default=0)
    friendly_category = Column(String, nullable=True)
    label = Column(String, nullable=True)
    description = Column(String, nullable=True)
    memo = Column(String, nullable=True)
    counterpart_id = Column(Integer, ForeignKey("counterparts.id"), nullable=True)
    is_grant_expenditure = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        Index(
            "ix_transactions_report_section",
            "political_organization_id",
            "financial_year",
            "transaction_type",
            "category_key",
        ),
    )

    # Relationships
    organization = relationship("PoliticalOrganization", back_populates="transactions")
    counterpart = relationship("Counterpart", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
