"""
Framework Database Models
=========================

SQLAlchemy ORM models for seeded framework reference data.

Version: 0.1.0
"""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import relationship

from shared.database.postgres import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class FrameworkModel(Base):
    """A compliance framework (e.g. SOC 2, ISO 27001)."""

    __tablename__ = "frameworks"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(Text)
    version = Column(String(50))
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)

    categories = relationship(
        "FrameworkCategoryModel",
        back_populates="framework",
        order_by="FrameworkCategoryModel.code",
        cascade="all, delete-orphan",
    )


class FrameworkCategoryModel(Base):
    """A grouping of controls within a framework."""

    __tablename__ = "framework_categories"
    __table_args__ = (Index("ix_framework_categories_framework", "framework_id"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    framework_id = Column(
        String(36),
        ForeignKey("frameworks.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    code = Column(String(50))
    description = Column(Text)

    framework = relationship("FrameworkModel", back_populates="categories")
    controls = relationship(
        "ControlModel",
        back_populates="category",
        order_by="ControlModel.code",
        cascade="all, delete-orphan",
    )


class ControlModel(Base):
    """A single control requirement."""

    __tablename__ = "controls"
    __table_args__ = (Index("ix_controls_category", "framework_category_id"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    framework_category_id = Column(
        String(36),
        ForeignKey("framework_categories.id", ondelete="CASCADE"),
        nullable=False,
    )
    name = Column(String(255), nullable=False)
    code = Column(String(50), nullable=False)
    description = Column(Text)
    domain = Column(String(100))

    category = relationship("FrameworkCategoryModel", back_populates="controls")
    organization_controls = relationship(
        "OrganizationControlModel",
        back_populates="control",
        order_by="OrganizationControlModel.created_at",
    )
