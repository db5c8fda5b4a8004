from django.db import models

from .services.plurals import PLURAL_RULES, numbers_for_index


class Locale(models.Model):
    class PluralRule(models.TextChoices):
        NONPLURAL = "nonplural", "Single form"
        ONE_OTHER = "one_other", "One / other"
        ZERO_ONE_OTHER = "zero_one_other", "Zero and one / other"
        EAST_SLAVIC = "east_slavic", "East Slavic"
        CZECH = "czech", "Czech / Slovak"
        POLISH = "polish", "Polish"
        ARABIC = "arabic", "Arabic"
        IRISH = "irish", "Irish"
        SLOVENIAN = "slovenian", "Slovenian"
        ROMANIAN = "romanian", "Romanian"
        LITHUANIAN = "lithuanian", "Lithuanian"

    code = models.SlugField(max_length=32, unique=True)
    name = models.CharField(max_length=128)
    nplurals = models.PositiveSmallIntegerField(default=2)
    plural_rule = models.CharField(
        max_length=32,
        choices=PluralRule.choices,
        default=PluralRule.ONE_OTHER,
    )
    enabled = models.BooleanField(default=True)

    def __str__(self) -> str:
        return f"{self.code} ({self.name})"

    @property
    def slug(self) -> str:
        return self.code

    def numbers_for_index(self, index: int, how_many: int = 3, test_up_to: int = 1000) -> list[int]:
        if self.plural_rule not in PLURAL_RULES:
            return []
        return numbers_for_index(
            self.plural_rule, index, how_many=how_many, test_up_to=test_up_to
        )

    def check_translations(self, singular: str, plural: str | None, translations):
        """Run the default translation warnings for this locale."""
        from .services.registry import default_warnings

        return default_warnings().check(singular, plural, translations, self)
