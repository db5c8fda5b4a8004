from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Locale",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("code", models.SlugField(max_length=32, unique=True)),
                ("name", models.CharField(max_length=128)),
                ("nplurals", models.PositiveSmallIntegerField(default=2)),
                (
                    "plural_rule",
                    models.CharField(
                        choices=[
                            ("nonplural", "Single form"),
                            ("one_other", "One / other"),
                            ("zero_one_other", "Zero and one / other"),
                            ("east_slavic", "East Slavic"),
                            ("czech", "Czech / Slovak"),
                            ("polish", "Polish"),
                            ("arabic", "Arabic"),
                            ("irish", "Irish"),
                            ("slovenian", "Slovenian"),
                            ("romanian", "Romanian"),
                            ("lithuanian", "Lithuanian"),
                        ],
                        default="one_other",
                        max_length=32,
                    ),
                ),
                ("enabled", models.BooleanField(default=True)),
            ],
        ),
    ]
