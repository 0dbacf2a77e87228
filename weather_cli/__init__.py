# ABOUTME: Command-line weather client for the OpenWeatherMap app backend.
# ABOUTME: Resolves a location by name, coordinates or public IP and prints current conditions.

__version__ = "0.1.0"
