"""Person ORM model. Directory entry with a nullable self-referential manager."""

from datetime import datetime

from sqlalchemy import DateTime, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from orgchart.domain.enums import PersonStatus, PersonType
from orgchart.infrastructure.persistence.database import Base
from orgchart.infrastructure.persistence.models.mixins import TimestampMixin


class Person(TimestampMixin, Base):
    """Person. Table: person. manager_id is not checked for cycles by the database."""

    __tablename__ = "person"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    job_title: Mapped[str] = mapped_column(String(255), nullable=False)
    department: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    manager_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("person.id", ondelete="SET NULL"), nullable=True, index=True
    )
    photo_path: Mapped[str | None] = mapped_column(String(512), nullable=True)
    type: Mapped[PersonType] = mapped_column(
        Enum(PersonType, name="person_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PersonType.EMPLOYEE,
    )
    status: Mapped[PersonStatus] = mapped_column(
        Enum(PersonStatus, name="person_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PersonStatus.ACTIVE,
        index=True,
    )
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    hire_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    manager: Mapped["Person | None"] = relationship(
        back_populates="direct_reports", remote_side=[id], lazy="raise"
    )
    direct_reports: Mapped[list["Person"]] = relationship(
        back_populates="manager", lazy="raise", passive_deletes=True
    )
