from app import db
from app.data.core.timestamped_base import TimestampedBase

class User(TimestampedBase):
    __tablename__ = 'users'
    
    uid = db.Column(db.String(36), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    
    # Deleting a user keeps its orders; their user_id is cleared
    orders = db.relationship('Order', back_populates='user')
    
    def __repr__(self):
        return f'<User {self.uid}: {self.email}>'
