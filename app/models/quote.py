from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from app.core.base import Base
from datetime import datetime


class Quote(Base):
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)
    file = Column(String(512), nullable=False)          # путь относительно UPLOAD_ROOT
    filename = Column(String(255), nullable=True)       # исходное имя, только для отображения
    content_type = Column(String(100), nullable=True)
    size = Column(Integer, nullable=True)               # bytes
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    provider_id = Column(Integer, ForeignKey("providers.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    project = relationship("Project", back_populates="quotes")
    provider = relationship("Provider", back_populates="quotes")
