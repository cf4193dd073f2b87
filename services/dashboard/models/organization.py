"""
Organization Database Models
============================

SQLAlchemy ORM models for tenant-owned compliance progress. Rows here are
written by other parts of the product; the dashboard only reads them.

Version: 0.1.0
"""

import uuid
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from shared.database.postgres import Base
from shared.models.framework import ArtifactType, ControlStatus, FrameworkStatus


def _new_id() -> str:
    return str(uuid.uuid4())


class OrganizationModel(Base):
    """A tenant."""

    __tablename__ = "organizations"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)

    frameworks = relationship("OrganizationFrameworkModel", back_populates="organization")


class OrganizationFrameworkModel(Base):
    """An organization's adoption of a framework."""

    __tablename__ = "organization_frameworks"
    __table_args__ = (
        UniqueConstraint("organization_id", "framework_id", name="uq_organization_framework"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    organization_id = Column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )
    framework_id = Column(
        String(36),
        ForeignKey("frameworks.id", ondelete="CASCADE"),
        nullable=False,
    )
    status = Column(
        SQLEnum(FrameworkStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=FrameworkStatus.NOT_STARTED,
    )
    adopted_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    last_assessed = Column(DateTime(timezone=True))
    next_assessment = Column(DateTime(timezone=True))

    organization = relationship("OrganizationModel", back_populates="frameworks")
    framework = relationship("FrameworkModel")
    organization_controls = relationship(
        "OrganizationControlModel",
        back_populates="organization_framework",
        order_by="OrganizationControlModel.created_at",
    )


class OrganizationControlModel(Base):
    """An organization's status for one control."""

    __tablename__ = "organization_controls"
    __table_args__ = (
        Index("ix_organization_controls_org_control", "organization_id", "control_id"),
    )

    id = Column(String(36), primary_key=True, default=_new_id)
    organization_id = Column(
        String(36),
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )
    organization_framework_id = Column(
        String(36),
        ForeignKey("organization_frameworks.id", ondelete="CASCADE"),
        nullable=False,
    )
    control_id = Column(
        String(36),
        ForeignKey("controls.id", ondelete="CASCADE"),
        nullable=False,
    )
    status = Column(
        SQLEnum(ControlStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ControlStatus.NOT_STARTED,
    )
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    organization_framework = relationship(
        "OrganizationFrameworkModel",
        back_populates="organization_controls",
    )
    control = relationship("ControlModel", back_populates="organization_controls")
    artifacts = relationship(
        "ArtifactModel",
        back_populates="organization_control",
        order_by="ArtifactModel.created_at",
        cascade="all, delete-orphan",
    )


class ArtifactModel(Base):
    """Evidence attached to an organization control."""

    __tablename__ = "artifacts"
    __table_args__ = (Index("ix_artifacts_organization_control", "organization_control_id"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    organization_control_id = Column(
        String(36),
        ForeignKey("organization_controls.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    type = Column(
        SQLEnum(ArtifactType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=ArtifactType.EVIDENCE,
    )
    url = Column(String(500))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)

    organization_control = relationship("OrganizationControlModel", back_populates="artifacts")
