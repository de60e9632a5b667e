import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("sites", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Hold",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "bed_type",
                    models.CharField(
                        choices=[("apple", "Apple"), ("orange", "Orange"), ("lemon", "Lemon"), ("grape", "Grape")],
                        max_length=16,
                    ),
                ),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "expires_at",
                    models.DateTimeField(
                        db_index=True,
                        help_text="The hold stops counting against capacity at this instant.",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="holds",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="holds",
                        to="sites.site",
                    ),
                ),
            ],
            options={
                "verbose_name": "Hold",
                "verbose_name_plural": "Holds",
                "ordering": ["-expires_at"],
                "indexes": [
                    models.Index(fields=["site", "bed_type"], name="hold_site_bed_type_idx"),
                    models.Index(fields=["owner", "expires_at"], name="hold_owner_expiry_idx"),
                ],
            },
        ),
    ]
