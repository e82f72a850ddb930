# astroveda/core/panchang.py
from __future__ import annotations
from datetime import date
from typing import Tuple

from astroveda.core.constants import normalize_degree
from astroveda.core.models import Panchang
from astroveda.core.nakshatra import NAKSHATRA_SPAN, resolve_nakshatra

TITHI_NAMES_CORE = (
    "Pratipada", "Dwitiya", "Tritiya", "Chaturthi", "Panchami",
    "Shashthi", "Saptami", "Ashtami", "Navami", "Dashami",
    "Ekadashi", "Dwadashi", "Trayodashi", "Chaturdashi",
)
# 15th of each half is full / new moon
FULL_MOON = "Purnima"
NEW_MOON = "Amavasya"

NITYA_YOGAS = (
    "Vishkumbha", "Preeti", "Ayushman", "Saubhagya", "Sobhana", "Atiganda",
    "Sukarma", "Dhriti", "Shoola", "Ganda", "Vriddhi", "Dhruva",
    "Vyaghata", "Harshana", "Vajra", "Siddhi", "Vyatipata", "Variyan",
    "Parigha", "Shiva", "Siddha", "Sadhya", "Shubha", "Shukla",
    "Brahma", "Indra", "Vaidhriti",
)

MOVABLE_KARANAS = ("Bava", "Balava", "Kaulava", "Taitila", "Gara", "Vanija", "Vishti")
FIXED_KARANAS = {0: "Kimstughna", 57: "Shakuni", 58: "Chatushpada", 59: "Naga"}

VARAS = ("Somavara", "Mangalavara", "Budhavara", "Guruvara", "Shukravara", "Shanivara", "Ravivara")


def tithi_from_elongation(delta_deg: float) -> Tuple[str, str, int]:
    """
    delta_deg: (Moon_lon - Sun_lon) in degrees
    returns (paksha, tithi_name, tithi_number[1..30])
    """
    d = normalize_degree(delta_deg)
    tithi_no = min(int(d // 12.0) + 1, 30)
    if tithi_no <= 15:
        paksha = "Shukla"
        tname = FULL_MOON if tithi_no == 15 else TITHI_NAMES_CORE[tithi_no - 1]
    else:
        paksha = "Krishna"
        tname = NEW_MOON if tithi_no == 30 else TITHI_NAMES_CORE[tithi_no - 16]
    return paksha, tname, tithi_no


def nitya_yoga(sun_lon: float, moon_lon: float) -> str:
    total = normalize_degree(sun_lon + moon_lon)
    return NITYA_YOGAS[min(int(total // NAKSHATRA_SPAN), 26)]


def karana(delta_deg: float) -> str:
    half = min(int(normalize_degree(delta_deg) // 6.0), 59)
    if half in FIXED_KARANAS:
        return FIXED_KARANAS[half]
    return MOVABLE_KARANAS[(half - 1) % 7]


def vara(d: date) -> str:
    return VARAS[d.weekday()]


def build_panchang(sun_lon: float, moon_lon: float, on: date) -> Panchang:
    elongation = normalize_degree(moon_lon - sun_lon)
    paksha, tname, tnum = tithi_from_elongation(elongation)
    return Panchang(
        tithi=tname,
        tithi_number=tnum,
        paksha=paksha,
        yoga=nitya_yoga(sun_lon, moon_lon),
        karana=karana(elongation),
        nakshatra=resolve_nakshatra(moon_lon).name,
        vara=vara(on),
    )
