from django.apps import AppConfig


class L10nQAConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "l10n_qa"
    verbose_name = "Translation warnings"

    def ready(self):
        # Build the registry once at start-up; checks only read it afterwards.
        from .services.registry import default_warnings

        default_warnings()
