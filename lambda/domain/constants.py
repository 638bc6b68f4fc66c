"""
Domain Constants - Todas as constantes da aplicação centralizadas
Valores fixos de domínio (labels, palavras-chave, limites) e de APIs externas
"""


class API:
    """Constantes de APIs externas"""

    # OpenWeather
    OPENWEATHER_UNITS = "metric"
    OPENWEATHER_LANG = "pt_br"

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos


class Weather:
    """Constantes relacionadas a dados meteorológicos"""

    # Condição assumida quando a API não informa weather[0].main
    DEFAULT_CONDITION = "Clear"

    # Palavras-chave (case-insensitive) por família, em ordem de prioridade
    RAIN_KEYWORDS = ("rain", "drizzle", "thunderstorm")
    CLOUD_KEYWORDS = ("cloud", "mist", "fog", "haze", "smoke")

    # Conversão m/s → km/h
    MS_TO_KMH = 3.6

    # Número máximo de dias agregados na previsão
    MAX_DAILY_DAYS = 6


class Suggestions:
    """Constantes da busca de cidades (autocomplete)"""

    DEFAULT_LIMIT = 5
    MAX_LIMIT = 5
    SINGLE_CITY_LIMIT = 5
    MIN_QUERY_LENGTH = 3


class Labels:
    """Textos fixos em pt-BR usados na apresentação"""

    PRECIPITATION = "Chuva"
    HUMIDITY = "Umidade"
    WIND = "Vento"
    PRECIPITATION_UNKNOWN = "Chuva: --%"

    WEEKDAYS_SHORT = ("seg.", "ter.", "qua.", "qui.", "sex.", "sáb.", "dom.")
    WEEKDAYS_LONG = (
        "segunda-feira",
        "terça-feira",
        "quarta-feira",
        "quinta-feira",
        "sexta-feira",
        "sábado",
        "domingo",
    )

    CITY_NOT_FOUND = "Cidade não encontrada."
    WEATHER_UNAVAILABLE = "Não foi possível carregar o clima para essa cidade."
    SUGGESTIONS_UNAVAILABLE = "Não foi possível carregar sugestões."
