# models/pluginPack.py
from sqlalchemy import Column, Integer, String, Text, Boolean, Float, ForeignKey
from sqlalchemy.orm import relationship
from kraken_seed.extension.extensions import db


class PluginPack(db.Model):
    __tablename__ = 'plugin_packs'

    id = Column(Integer, primary_key=True)
    name = Column(String(191), unique=True, nullable=False)
    title = Column(String(255), nullable=False, default='')
    description = Column(Text)
    image_url = Column(String(500))
    discount = Column(Float, nullable=False, default=0.0)
    active = Column(Boolean, nullable=False, default=False)

    price_details = relationship('PluginPackPriceDetails', back_populates='pack', uselist=False)
    items = relationship('PluginPackItem', back_populates='pack', order_by='PluginPackItem.id')

    @classmethod
    def from_dict(cls, data):
        """Build an unsaved pack row from one record of the pack file"""
        pack = cls(name=data.get('name') or '')
        pack.apply_fields(data)
        return pack

    def apply_fields(self, data):
        """Overwrite the display fields; the name is never changed"""
        self.title = data.get('title') or ''
        self.description = data.get('description') or ''
        self.image_url = data.get('imageUrl') or ''
        self.discount = data.get('discount') or 0.0
        self.active = bool(data.get('active'))

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'title': self.title,
            'description': self.description,
            'imageUrl': self.image_url,
            'discount': self.discount,
            'active': self.active,
            'plugins': [item.plugin.name for item in self.items if item.plugin],
            'priceDetails': self.price_details.to_dict() if self.price_details else None
        }

    def __repr__(self):
        return f"<PluginPack {self.name} active={self.active}>"


class PluginPackPriceDetails(db.Model):
    __tablename__ = 'plugin_pack_price_details'

    id = Column(Integer, primary_key=True)
    month = Column(Integer, nullable=False, default=0)
    three_month = Column(Integer, nullable=False, default=0)
    year = Column(Integer, nullable=False, default=0)
    plugin_pack_id = Column(Integer, ForeignKey('plugin_packs.id'), nullable=False, index=True)
    # Shared with the plugin price shape; never written for packs
    plugin_metadata_id = Column(Integer, ForeignKey('plugin_metadata.id'), nullable=True)

    pack = relationship('PluginPack', back_populates='price_details')

    @staticmethod
    def price_fields(data):
        """Column values for the numeric price fields of a priceDetails block"""
        return {
            'month': data.get('month') or 0,
            'three_month': data.get('threeMonth') or 0,
            'year': data.get('year') or 0
        }

    def to_dict(self):
        return {
            'id': self.id,
            'month': self.month,
            'threeMonth': self.three_month,
            'year': self.year,
            'pluginPackId': self.plugin_pack_id
        }

    def __repr__(self):
        return f"<PluginPackPriceDetails pack={self.plugin_pack_id} month={self.month}>"


class PluginPackItem(db.Model):
    __tablename__ = 'plugin_pack_items'

    id = Column(Integer, primary_key=True)
    pack_id = Column(Integer, ForeignKey('plugin_packs.id'), nullable=False, index=True)
    plugin_metadata_id = Column(Integer, ForeignKey('plugin_metadata.id'), nullable=False, index=True)

    pack = relationship('PluginPack', back_populates='items')
    plugin = relationship('PluginMetadata')

    def __repr__(self):
        return f"<PluginPackItem pack={self.pack_id} plugin={self.plugin_metadata_id}>"
