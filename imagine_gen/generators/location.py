from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from imagine_gen.core.rng import Seed, rng_from
from imagine_gen.core.seed import get_global_rng
from imagine_gen.core.utils import round_half_up

# (English name, ISO 3166-1 alpha-2)
COUNTRIES = [
    ("Argentina", "AR"), ("Australia", "AU"), ("Austria", "AT"), ("Belgium", "BE"), ("Brazil", "BR"),
    ("Canada", "CA"), ("Chile", "CL"), ("China", "CN"), ("Czechia", "CZ"), ("Denmark", "DK"),
    ("Egypt", "EG"), ("Finland", "FI"), ("France", "FR"), ("Germany", "DE"), ("Greece", "GR"),
    ("India", "IN"), ("Ireland", "IE"), ("Italy", "IT"), ("Japan", "JP"), ("Kenya", "KE"),
    ("Mexico", "MX"), ("Netherlands", "NL"), ("New Zealand", "NZ"), ("Nigeria", "NG"), ("Norway", "NO"),
    ("Poland", "PL"), ("Portugal", "PT"), ("South Africa", "ZA"), ("South Korea", "KR"), ("Spain", "ES"),
    ("Sweden", "SE"), ("Switzerland", "CH"), ("Turkey", "TR"), ("Ukraine", "UA"),
    ("United Kingdom", "GB"), ("United States", "US"),
]
# (English name, ISO 639-1 or None)
LANGUAGES = [
    ("Arabic", "ar"), ("Bengali", "bn"), ("Chinese", "zh"), ("Dutch", "nl"), ("English", "en"),
    ("French", "fr"), ("German", "de"), ("Greek", "el"), ("Hindi", "hi"), ("Italian", "it"),
    ("Japanese", "ja"), ("Korean", "ko"), ("Polish", "pl"), ("Portuguese", "pt"), ("Russian", "ru"),
    ("Spanish", "es"), ("Swahili", "sw"), ("Swedish", "sv"), ("Turkish", "tr"), ("Ukrainian", "uk"),
    ("Cantonese", None), ("Hawaiian", None),
]
TIMEZONES = [
    "Africa/Cairo", "Africa/Johannesburg", "Africa/Lagos", "America/Chicago", "America/Los_Angeles",
    "America/Mexico_City", "America/New_York", "America/Sao_Paulo", "America/Toronto",
    "America/Vancouver", "Asia/Kolkata", "Asia/Seoul", "Asia/Shanghai", "Asia/Singapore",
    "Asia/Tokyo", "Australia/Melbourne", "Australia/Sydney", "Europe/Berlin", "Europe/Kyiv",
    "Europe/London", "Europe/Madrid", "Europe/Paris", "Europe/Warsaw", "Pacific/Auckland", "UTC",
]
CITIES = [
    "New York", "Los Angeles", "Chicago", "London", "Paris", "Berlin", "Warsaw", "Kyiv", "Tokyo",
    "Osaka", "Seoul", "Sydney", "Melbourne", "Toronto", "Vancouver", "São Paulo", "Rio de Janeiro",
    "Mexico City", "Mumbai", "Delhi", "Johannesburg", "Cairo",
]
STREET_NAMES = ["Main", "Oak", "Maple", "Pine", "Cedar", "Elm", "Park", "Washington", "Lake", "Hill"]
STREET_TYPES = ["St", "Ave", "Blvd", "Rd", "Ln", "Dr"]


@dataclass(frozen=True)
class Coordinates:
    lat: float
    lng: float


def country(code_only: bool = False, *, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    name, iso2 = rng.pick(COUNTRIES)
    return iso2 if code_only else name


def country_code(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(COUNTRIES)[1]


def city(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(CITIES)


def zip(*, seed: Optional[Seed] = None) -> str:
    """Five-digit ZIP-like code."""
    rng = rng_from(seed, get_global_rng())
    return "".join(str(math.floor(rng.next() * 10)) for _ in range(5))


def address(*, seed: Optional[Seed] = None) -> str:
    """'123 Main St, City 12345, US'."""
    rng = rng_from(seed, get_global_rng())
    number = 1 + math.floor(rng.next() * 9999)
    street = f"{rng.pick(STREET_NAMES)} {rng.pick(STREET_TYPES)}"
    town = city(seed=rng.child_seed())
    code = country_code(seed=rng.child_seed())
    postal = zip(seed=rng.child_seed())
    return f"{number} {street}, {town} {postal}, {code}"


def coordinates(*, seed: Optional[Seed] = None) -> Coordinates:
    """Latitude in [-90, 90) and longitude in [-180, 180), 6 decimals."""
    rng = rng_from(seed, get_global_rng())
    lat = rng.next() * 180 - 90
    lng = rng.next() * 360 - 180
    return Coordinates(round_half_up(lat * 1e6) / 1e6, round_half_up(lng * 1e6) / 1e6)


def timezone(*, seed: Optional[Seed] = None) -> str:
    rng = rng_from(seed, get_global_rng())
    return rng.pick(TIMEZONES)


def language(*, seed: Optional[Seed] = None) -> str:
    """ISO 639-1 code, or the English name where there is none."""
    rng = rng_from(seed, get_global_rng())
    name, code = rng.pick(LANGUAGES)
    return code or name
