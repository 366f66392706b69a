from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.orm import relationship
from app.core.base import Base
from app.models.activity import project_activity
from datetime import datetime


class Project(Base):
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    city = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    activities = relationship("Activity", secondary=project_activity, lazy="selectin")
    quotes = relationship("Quote", back_populates="project", cascade="all, delete", passive_deletes=True)

    @property
    def activity_ids(self):
        return [activity.id for activity in self.activities]
