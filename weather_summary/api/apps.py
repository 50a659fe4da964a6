from django.apps import AppConfig


class ApiConfig(AppConfig):
    name = "weather_summary.api"
    label = "weather_api"
