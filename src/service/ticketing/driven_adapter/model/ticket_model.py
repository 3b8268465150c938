from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import CheckConstraint, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base

if TYPE_CHECKING:
    from src.service.ticketing.driven_adapter.model.event_model import EventModel
    from src.service.ticketing.driven_adapter.model.user_model import UserModel


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey('user.id'), nullable=False, index=True)
    event_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('event.id'), nullable=False, index=True
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
    unit_price: Mapped[float] = mapped_column(Float, nullable=False)
    total_amount: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='waiting', nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)

    # Relationships
    user: Mapped['UserModel'] = relationship('UserModel', foreign_keys=[user_id], lazy='raise')
    event: Mapped['EventModel'] = relationship('EventModel', foreign_keys=[event_id], lazy='raise')

    __table_args__ = (
        CheckConstraint('quantity > 0', name='ck_ticket_quantity_positive'),
    )
