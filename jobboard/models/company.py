from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from jobboard.core.database import Base


class Company(Base):
    """A company owned by an EMPLOYER user. Jobs may be posted under it."""
    __tablename__ = "companies"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    location = Column(String, nullable=True)
    logo = Column(Text, nullable=True)
    employer_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Relationships
    employer = relationship("User", back_populates="companies")
    jobs = relationship("Job", back_populates="company", cascade="all, delete")

    def __repr__(self):
        return f"<Company(id={self.id}, name='{self.name}', employer_id={self.employer_id})>"
