from ..extensions import db
from .base import new_id, utcnow, isoformat


class Budget(db.Model):
    __tablename__ = "budgets"
    id = db.Column(db.String(32), primary_key=True, default=new_id)
    category = db.Column(db.String(50), nullable=False)
    amount = db.Column(db.Float, nullable=False)
    month = db.Column(db.String(7), nullable=False)  # YYYY-MM
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow, onupdate=utcnow)

    __table_args__ = (
        db.UniqueConstraint("category", "month", name="uq_budget_category_month"),
        db.CheckConstraint("amount >= 0", name="ck_budget_amount_non_negative"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.category,
            "amount": self.amount,
            "month": self.month,
            "createdAt": isoformat(self.created_at),
            "updatedAt": isoformat(self.updated_at),
        }
