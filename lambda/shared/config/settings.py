"""
Configurações centralizadas da aplicação
"""
import os

# API OpenWeather
OPENWEATHER_API_KEY = os.environ.get('OPENWEATHER_API_KEY', '')
OPENWEATHER_BASE_URL = os.environ.get('OPENWEATHER_BASE_URL', 'https://api.openweathermap.org/data/2.5')
OPENWEATHER_GEO_URL = os.environ.get('OPENWEATHER_GEO_URL', 'https://api.openweathermap.org/geo/1.0')

# Sugestões restritas a um único país (ISO 3166)
TARGET_COUNTRY = os.environ.get('TARGET_COUNTRY', 'BR').upper()

# CORS
CORS_ORIGIN = os.environ.get('CORS_ORIGIN', '*')
