from sqlalchemy import Column, Integer, String, DateTime
from datetime import datetime
from kraken_seed.extension.extensions import db

class HardwareIdentifier(db.Model):
    __tablename__ = 'hardware_identifiers'

    id = Column(Integer, primary_key=True)
    hwid = Column(String(191), unique=True, nullable=False)
    label = Column(String(100), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    last_seen_at = Column(DateTime, nullable=True)

    def __repr__(self):
        return f"<HardwareIdentifier hwid={self.hwid} label={self.label}>"
