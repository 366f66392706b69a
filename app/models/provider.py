from sqlalchemy import Column, Integer, String, Text, Date, ForeignKey
from sqlalchemy.orm import relationship
from app.core.base import Base
from app.models.activity import provider_activity


class Provider(Base):
    __tablename__ = "providers"

    id = Column(Integer, primary_key=True, index=True)
    id_user = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)
    registration_date = Column(Date, nullable=False)
    company_name = Column(String(255), nullable=True)
    siret = Column(String(14), nullable=True)
    phone = Column(String(30), nullable=True)
    city = Column(String(100), nullable=True)
    description = Column(Text, nullable=True)

    user = relationship("User", back_populates="provider")
    activities = relationship("Activity", secondary=provider_activity, lazy="selectin")
    # Строки quotes удаляет ON DELETE CASCADE на quotes.provider_id
    quotes = relationship("Quote", back_populates="provider", cascade="all, delete", passive_deletes=True)

    @property
    def activity_ids(self):
        return [activity.id for activity in self.activities]
