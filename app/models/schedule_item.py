from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class ScheduleItem(Base):
    __tablename__ = "schedule_items"

    id = Column(String(64), primary_key=True)
    schedule_id = Column(
        String(64),
        ForeignKey("schedules.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    title = Column(String(200), nullable=False)  # class name
    description = Column(Text)
    teacher = Column(String(200))
    room = Column(String(50))
    period = Column(Integer)
    grade = Column(String(20))

    day_of_week = Column(Integer, nullable=False, index=True)  # 0-6, Sunday = 0
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM
    duration = Column(Integer, nullable=False)  # minutes

    is_completed = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    schedule = relationship("Schedule", back_populates="items")
