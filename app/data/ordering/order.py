from app import db
from app.data.core.timestamped_base import TimestampedBase

# uid and code are snapshots taken when the order is placed; they are not
# re-synchronized when the user or product changes later.

class Order(TimestampedBase):
    __tablename__ = 'orders'
    
    uid = db.Column(db.String(36), nullable=False, index=True)
    code = db.Column(db.String(100), nullable=False)
    amount = db.Column(db.Integer, nullable=False)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id', ondelete='SET NULL'), nullable=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id', ondelete='SET NULL'), nullable=True)
    
    user = db.relationship('User', back_populates='orders')
    product = db.relationship('Product', back_populates='orders')
    
    def __repr__(self):
        return f'<Order {self.id}: {self.code} x{self.amount} for {self.uid}>'
    
    def to_list_dict(self):
        """Order with the user/product fields shown in order listings"""
        result = self.to_dict()
        result['user'] = self.user.to_summary('name', 'email') if self.user else None
        result['product'] = self.product.to_summary('name', 'description') if self.product else None
        return result
    
    def to_user_dict(self):
        """Order with its full product, as listed for a single user"""
        result = self.to_dict()
        result['product'] = self.product.to_dict() if self.product else None
        return result
