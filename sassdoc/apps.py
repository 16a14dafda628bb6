from django.apps import AppConfig


class SassdocConfig(AppConfig):
    name = "sassdoc"
    verbose_name = "Sass documentation helpers"
