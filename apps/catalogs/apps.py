from django.apps import AppConfig


class CatalogsConfig(AppConfig):
    name = "apps.catalogs"
    label = "catalogs"
    verbose_name = "Translation Catalogs"

    def ready(self):
        import apps.catalogs.checks  # noqa: F401
