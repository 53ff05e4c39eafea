import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CartLine",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("goods_id", models.BigIntegerField(db_index=True)),
                ("quantity", models.PositiveIntegerField()),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cart_lines",
                        to="users.user",
                    ),
                ),
            ],
            options={
                "db_table": "carts",
                "ordering": ["id"],
                "unique_together": {("user", "goods_id")},
            },
        ),
    ]
