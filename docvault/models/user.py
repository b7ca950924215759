
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from docvault.db.session import Base
from docvault.models.document import utcnow

class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    documents = relationship("Document", back_populates="owner")
