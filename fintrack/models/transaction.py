from ..extensions import db
from .base import new_id, utcnow, isoformat
from .category import DEFAULT_CATEGORY


class Transaction(db.Model):
    __tablename__ = "transactions"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    amount = db.Column(db.Float, nullable=False)
    description = db.Column(db.String(100), nullable=False)
    date = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    category = db.Column(db.String(50), nullable=False, default=DEFAULT_CATEGORY)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        db.CheckConstraint("amount > 0", name="ck_transaction_amount_positive"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "amount": self.amount,
            "description": self.description,
            "date": isoformat(self.date),
            "category": self.category,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
