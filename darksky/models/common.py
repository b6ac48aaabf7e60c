"""Request option enums shared across the client."""

from enum import StrEnum

# Time sentinel: omit the time segment and ask for the current forecast.
NO_TIME = -1


class Units(StrEnum):
    US = "us"
    SI = "si"
    CA = "ca"
    UK = "uk"
    UK2 = "uk2"
    AUTO = "auto"


class Lang(StrEnum):
    ARABIC = "ar"
    BOSNIAN = "bs"
    GERMAN = "de"
    GREEK = "el"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    CROATIAN = "hr"
    ITALIAN = "it"
    DUTCH = "nl"
    POLISH = "pl"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    SLOVAK = "sk"
    SWEDISH = "sv"
    TETUM = "tet"
    TURKISH = "tr"
    UKRAINIAN = "uk"
    PIG_LATIN = "x-pig-latin"
    CHINESE = "zh"
    TRADITIONAL_CHINESE = "zh-tw"
