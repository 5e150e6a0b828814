from app import db
from app.data.core.timestamped_base import TimestampedBase

class Product(TimestampedBase):
    __tablename__ = 'products'
    
    code = db.Column(db.String(100), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    price = db.Column(db.Numeric(10, 2), nullable=False, default=0)
    # Stock on hand; only the stock ledger changes it as part of an order
    amount = db.Column(db.Integer, nullable=False, default=0)
    
    orders = db.relationship('Order', back_populates='product')
    
    def __repr__(self):
        return f'<Product {self.code}: {self.name} ({self.amount})>'
    
    def has_stock_for(self, quantity):
        return (self.amount or 0) >= quantity
