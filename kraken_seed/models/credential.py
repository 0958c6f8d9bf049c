# models/credential.py
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint
from datetime import datetime
from kraken_seed.extension.extensions import db

class Credential(db.Model):
    __tablename__ = 'credentials'

    id = Column(Integer, primary_key=True)
    service = Column(String(64), nullable=False)          # e.g. 'discord', 'license-server'
    username = Column(String(191), nullable=False)
    secret = Column(Text, nullable=False)                 # stored encrypted by the owning service
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    __table_args__ = (UniqueConstraint('service', 'username', name='uq_credentials_service_username'),)

    def __str__(self):
        return f"Credential(id={self.id}, service='{self.service}', username='{self.username}')"

    def __repr__(self):
        return self.__str__()
