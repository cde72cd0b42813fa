from django.apps import AppConfig

class MacrosConfig(AppConfig):
  default_auto_field = "django.db.models.BigAutoField"
  name = "macros"
  label = "macros"
  verbose_name = "Macros"

  def ready(self) -> None:
    # Build the default template registry at startup
    from . import rendering  # noqa: F401
