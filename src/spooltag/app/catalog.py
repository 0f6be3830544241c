"""Material and color tables, and the chip's radio descriptor."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    name: str
    hex: str


@dataclass(frozen=True)
class RFIDSpecs:
    protocol: str
    frequency: str
    baud_rate: str
    operating_distance: str
    encryption: str


MATERIALS: dict[int, str] = {
    1: "PLA",
    2: "PLA Matte",
    3: "PLA Metal",
    4: "PLA Silk",
    5: "PLA-CF",
    6: "PLA-Wood",
    7: "PLA Basic",
    8: "PLA Matte Basic",
    11: "ABS",
    12: "ABS-GF",
    13: "ABS-Metal",
    14: "ABS-Odorless",
    18: "ASA",
    19: "ASA-AERO",
    24: "UltraPA",
    25: "PA-CF",
    26: "UltraPA-CF25",
    27: "PA12-CF",
    30: "PAHT-CF",
    31: "PAHT-GF",
    32: "Support For PAHT",
    33: "Support For PET/PA",
    34: "PC/ABS-FR",
    37: "PET-CF",
    38: "PET-GF",
    39: "PETG Basic",
    40: "PETG Tough",
    41: "PETG Rapido",
    42: "PETG-CF",
    43: "PETG-GF",
    44: "PPS-CF",
    45: "PETG Translucent",
    47: "PVA",
    49: "TPU-Aero",
    50: "TPU",
}

COLORS: dict[int, Color] = {
    1: Color("White", "#FAFAFA"),
    2: Color("Black", "#060606"),
    3: Color("Light Blue", "#D9E3ED"),
    4: Color("Lime Green", "#5CF30F"),
    5: Color("Mint Green", "#63E492"),
    6: Color("Blue", "#2850FF"),
    7: Color("Pink", "#FE98FE"),
    8: Color("Yellow", "#DFD628"),
    9: Color("Dark Green", "#228332"),
    10: Color("Sky Blue", "#99DEFF"),
    11: Color("Navy Blue", "#1714B0"),
    12: Color("Lavender", "#CEC0FE"),
    13: Color("Lime Yellow", "#CADE4B"),
    14: Color("Royal Blue", "#1353AB"),
    15: Color("Light Blue 2", "#5EA9FD"),
    16: Color("Purple", "#A878FF"),
    17: Color("Coral", "#FE717A"),
    18: Color("Red", "#FF362D"),
    19: Color("Beige", "#E2DFCD"),
    20: Color("Gray", "#898F9B"),
    21: Color("Brown", "#6E3812"),
    22: Color("Khaki", "#CAC59F"),
    23: Color("Orange", "#F28636"),
    24: Color("Dark Brown", "#B87F2B"),
}

RFID_SPECS = RFIDSpecs(
    protocol="ISO/IEC 14443-A",
    frequency="13.56 MHz",
    baud_rate="106 Kbit/s",
    operating_distance="Not less than 100 mm (dependent on antenna size)",
    encryption="Compliant with M1 standard",
)
