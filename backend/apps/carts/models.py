from django.db import models

from apps.users.models import User


class CartLine(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="cart_lines")
    # No FK: a line may outlive the goods it points at.
    goods_id = models.BigIntegerField(db_index=True)
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "carts"
        unique_together = ("user", "goods_id")
        ordering = ["id"]

    def __str__(self):
        return f"CartLine user={self.user_id} goods={self.goods_id} x{self.quantity}"
