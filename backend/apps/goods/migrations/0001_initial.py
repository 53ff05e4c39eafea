import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Goods",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("thumbnail_url", models.TextField(blank=True, default="")),
                ("category", models.CharField(max_length=100)),
                ("price", models.DecimalField(decimal_places=2, max_digits=10)),
                ("date", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "db_table": "goods",
                "verbose_name_plural": "goods",
                "indexes": [
                    models.Index(fields=["category", "-date"], name="goods_category_date_idx"),
                ],
            },
        ),
    ]
