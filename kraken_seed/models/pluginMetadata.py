# models/pluginMetadata.py
import json

from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from kraken_seed.extension.extensions import db


class PluginMetadata(db.Model):
    __tablename__ = 'plugin_metadata'

    id = Column(Integer, primary_key=True)
    name = Column(String(191), unique=True, nullable=False)   # natural key used by the importers
    title = Column(String(255), nullable=False, default='')
    description = Column(Text)
    image_url = Column(String(500))
    video_url = Column(String(500))
    top_pick = Column(Boolean, nullable=False, default=False)
    tier = Column(Integer, nullable=False, default=0)

    price_details = relationship(
        'PluginPriceDetails',
        back_populates='plugin',
        uselist=False,
        cascade='all, delete-orphan'
    )
    configuration_options = relationship(
        'PluginConfigOption',
        back_populates='plugin',
        cascade='all, delete-orphan',
        order_by='PluginConfigOption.id'
    )

    @classmethod
    def from_dict(cls, data):
        """Build an unsaved plugin row from one record of the plugin file"""
        return cls(
            name=data.get('name') or '',
            title=data.get('title') or '',
            description=data.get('description') or '',
            image_url=data.get('imageUrl') or '',
            video_url=data.get('videoUrl') or '',
            top_pick=bool(data.get('topPick')),
            tier=data.get('tier') or 0
        )

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'title': self.title,
            'description': self.description,
            'imageUrl': self.image_url,
            'videoUrl': self.video_url,
            'topPick': self.top_pick,
            'tier': self.tier,
            'priceDetails': self.price_details.to_dict() if self.price_details else None,
            'configurationOptions': [o.to_dict() for o in self.configuration_options]
        }

    def __repr__(self):
        return f"<PluginMetadata {self.name} tier={self.tier}>"


class PluginPriceDetails(db.Model):
    __tablename__ = 'plugin_price_details'

    id = Column(Integer, primary_key=True)
    month = Column(Integer, nullable=False, default=0)
    three_month = Column(Integer, nullable=False, default=0)
    year = Column(Integer, nullable=False, default=0)
    plugin_metadata_id = Column(Integer, ForeignKey('plugin_metadata.id'), nullable=False, index=True)

    plugin = relationship('PluginMetadata', back_populates='price_details')

    @classmethod
    def from_dict(cls, data):
        return cls(
            month=data.get('month') or 0,
            three_month=data.get('threeMonth') or 0,
            year=data.get('year') or 0
        )

    def to_dict(self):
        return {
            'id': self.id,
            'month': self.month,
            'threeMonth': self.three_month,
            'year': self.year,
            'pluginMetadataId': self.plugin_metadata_id
        }

    def __repr__(self):
        return f"<PluginPriceDetails plugin={self.plugin_metadata_id} month={self.month}>"


class PluginConfigOption(db.Model):
    """
    A typed configuration knob exposed by a plugin.
    The allowed values are stored JSON-encoded in a text column and
    decoded back to a list for API responses.
    """
    __tablename__ = 'plugin_config_options'

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False)
    section = Column(String(255))
    description = Column(Text)
    type = Column(String(64))
    is_bool = Column(Boolean, nullable=False, default=False)
    values = Column(Text, nullable=True)   # e.g. '["low","medium","high"]'
    plugin_metadata_id = Column(Integer, ForeignKey('plugin_metadata.id'), nullable=False, index=True)

    plugin = relationship('PluginMetadata', back_populates='configuration_options')

    @classmethod
    def from_dict(cls, data):
        option = cls(
            name=data.get('name') or '',
            section=data.get('section') or '',
            description=data.get('description') or '',
            type=data.get('type') or '',
            is_bool=bool(data.get('isBool'))
        )
        option.values_list = data.get('values') or []
        return option

    @property
    def values_list(self):
        """Decoded value list, empty when nothing is stored"""
        if not self.values:
            return []
        return json.loads(self.values)

    @values_list.setter
    def values_list(self, items):
        self.values = json.dumps(list(items)) if items else None

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'section': self.section,
            'description': self.description,
            'type': self.type,
            'isBool': self.is_bool,
            'values': self.values_list,
            'pluginMetadataId': self.plugin_metadata_id
        }

    def __repr__(self):
        return f"<PluginConfigOption {self.section}/{self.name} plugin={self.plugin_metadata_id}>"
