from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CalculatorSettings",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "key",
                    models.CharField(
                        default="fuel_calculator.settings", max_length=64, unique=True
                    ),
                ),
                ("default_distance", models.FloatField(verbose_name="Default distance")),
                (
                    "default_consumption",
                    models.FloatField(verbose_name="Default consumption"),
                ),
                (
                    "default_price_per_liter",
                    models.FloatField(verbose_name="Default price per liter"),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "fuel calculator settings",
                "verbose_name_plural": "fuel calculator settings",
            },
        ),
    ]
