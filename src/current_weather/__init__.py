"""Current-location weather screen backed by the OpenWeather API."""

__version__ = "0.1.0"
