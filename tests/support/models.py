from pydantic import BaseModel
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from simple_paginate.orm import SimplePaginateMixin


class Base(DeclarativeBase):
    pass


class Manufacturer(SimplePaginateMixin, Base):
    __tablename__ = "manufacturers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)


class Part(Base):
    __tablename__ = "parts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    engine_id: Mapped[int] = mapped_column(ForeignKey("engines.id"), nullable=False)


class Engine(Base):
    __tablename__ = "engines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    parts: Mapped[list[Part]] = relationship(Part, order_by=Part.id)


class Car(SimplePaginateMixin, Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    manufacturer_id: Mapped[int] = mapped_column(ForeignKey("manufacturers.id"), nullable=False)
    engine_id: Mapped[int] = mapped_column(ForeignKey("engines.id"), nullable=False)

    manufacturer: Mapped[Manufacturer] = relationship(Manufacturer)
    engine: Mapped[Engine] = relationship(Engine)


class CarResponse(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}
