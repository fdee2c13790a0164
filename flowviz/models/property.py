"""Property model backing the SQL property store."""
import uuid
from datetime import datetime
from sqlalchemy import Column, String, Text, DateTime
from flowviz.extensions import db


class Property(db.Model):
    """One string-valued property addressed by its canonical path."""

    __tablename__ = "property"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    path = Column(String(1024), unique=True, nullable=False, index=True)
    value = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<Property {self.path}>"
