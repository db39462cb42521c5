# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Built-in country housing reference table.

Construction costs per m², infrastructure connection costs, occupancy,
per-capita utility consumption, labour share and typical project budgets,
all in USD equivalent. Figures are planning-grade estimates compiled from
World Bank, UN-Habitat and national statistics publications.
"""

from __future__ import annotations

from typing import Dict

from .models import (
    BudgetRange,
    ConstructionCosts,
    CountryData,
    InfrastructureUnitCosts,
    PersonsPerUnit,
    TypicalProjectBudgets,
    UtilityConsumption,
)

# Columns: code, name, region, subregion, currency, development level,
#   construction costs (basic, standard, improved) per m²,
#   infrastructure (water, sewer per connection, roads per metre),
#   occupancy (1, 2, 3 bedroom), utilities (water L, kWh, waste kg per day),
#   labour % of construction cost,
#   typical budgets ((small), (medium), (large)) as (min, max)
_COUNTRY_ROWS = (
    # Africa - East
    ("KE", "Kenya", "Africa", "East Africa", "KES", "lower-middle",
     (250, 400, 650), (800, 1200, 80), (2.5, 3.5, 4.5), (50, 2.5, 0.6), 35,
     ((500_000, 2_000_000), (2_000_000, 8_000_000), (8_000_000, 50_000_000))),
    ("UG", "Uganda", "Africa", "East Africa", "UGX", "low-income",
     (200, 350, 600), (600, 900, 60), (2.8, 3.8, 4.8), (45, 2.0, 0.5), 32,
     ((400_000, 1_500_000), (1_500_000, 6_000_000), (6_000_000, 30_000_000))),
    ("TZ", "Tanzania", "Africa", "East Africa", "TZS", "low-income",
     (220, 380, 620), (700, 1100, 70), (2.6, 3.6, 4.6), (48, 2.2, 0.55), 33,
     ((450_000, 1_800_000), (1_800_000, 7_000_000), (7_000_000, 40_000_000))),
    ("RW", "Rwanda", "Africa", "East Africa", "RWF", "low-income",
     (240, 380, 630), (750, 1050, 75), (2.7, 3.7, 4.7), (50, 2.3, 0.6), 34,
     ((480_000, 1_900_000), (1_900_000, 7_500_000), (7_500_000, 42_000_000))),
    ("ET", "Ethiopia", "Africa", "East Africa", "ETB", "low-income",
     (180, 320, 550), (500, 800, 50), (3.0, 4.0, 5.0), (40, 1.8, 0.5), 30,
     ((350_000, 1_400_000), (1_400_000, 5_500_000), (5_500_000, 28_000_000))),
    # Africa - West
    ("NG", "Nigeria", "Africa", "West Africa", "NGN", "lower-middle",
     (180, 320, 550), (500, 800, 50), (3.0, 4.0, 5.0), (40, 1.8, 0.7), 30,
     ((300_000, 1_200_000), (1_200_000, 5_000_000), (5_000_000, 25_000_000))),
    ("GH", "Ghana", "Africa", "West Africa", "GHS", "lower-middle",
     (240, 400, 680), (750, 1100, 75), (2.7, 3.7, 4.7), (50, 2.3, 0.6), 34,
     ((500_000, 1_900_000), (1_900_000, 7_500_000), (7_500_000, 45_000_000))),
    ("CI", "Ivory Coast", "Africa", "West Africa", "XOF", "lower-middle",
     (220, 380, 640), (700, 1050, 70), (2.8, 3.8, 4.8), (48, 2.2, 0.58), 33,
     ((450_000, 1_800_000), (1_800_000, 7_200_000), (7_200_000, 40_000_000))),
    ("SN", "Senegal", "Africa", "West Africa", "XOF", "lower-middle",
     (210, 360, 610), (650, 950, 65), (2.9, 3.9, 4.9), (45, 2.0, 0.55), 31,
     ((400_000, 1_600_000), (1_600_000, 6_500_000), (6_500_000, 35_000_000))),
    # Africa - Central
    ("CM", "Cameroon", "Africa", "Central Africa", "XAF", "lower-middle",
     (210, 360, 600), (650, 950, 65), (2.9, 3.9, 4.9), (45, 1.9, 0.52), 31,
     ((400_000, 1_600_000), (1_600_000, 6_500_000), (6_500_000, 35_000_000))),
    ("CG", "Congo", "Africa", "Central Africa", "XAF", "lower-middle",
     (200, 340, 580), (600, 900, 60), (3.0, 4.0, 5.0), (42, 1.8, 0.5), 30,
     ((350_000, 1_400_000), (1_400_000, 5_500_000), (5_500_000, 28_000_000))),
    ("CD", "DR Congo", "Africa", "Central Africa", "CDF", "low-income",
     (160, 280, 480), (400, 600, 40), (3.2, 4.2, 5.2), (35, 1.5, 0.45), 28,
     ((250_000, 1_000_000), (1_000_000, 4_000_000), (4_000_000, 20_000_000))),
    # Africa - Southern
    ("ZA", "South Africa", "Africa", "Southern Africa", "ZAR", "upper-middle",
     (320, 520, 900), (1200, 1600, 120), (2.4, 3.4, 4.4), (120, 4.5, 1.2), 40,
     ((1_000_000, 3_500_000), (3_500_000, 12_000_000), (12_000_000, 60_000_000))),
    ("BW", "Botswana", "Africa", "Southern Africa", "BWP", "upper-middle",
     (300, 480, 820), (1100, 1500, 110), (2.5, 3.5, 4.5), (100, 4.0, 1.0), 38,
     ((900_000, 3_200_000), (3_200_000, 11_000_000), (11_000_000, 55_000_000))),
    ("ZM", "Zambia", "Africa", "Southern Africa", "ZMW", "lower-middle",
     (210, 360, 600), (650, 950, 65), (2.9, 3.9, 4.9), (45, 2.0, 0.55), 31,
     ((400_000, 1_600_000), (1_600_000, 6_500_000), (6_500_000, 35_000_000))),
    ("ZW", "Zimbabwe", "Africa", "Southern Africa", "ZWL", "lower-middle",
     (200, 340, 580), (600, 900, 60), (3.0, 4.0, 5.0), (42, 1.8, 0.5), 30,
     ((350_000, 1_400_000), (1_400_000, 5_500_000), (5_500_000, 28_000_000))),
    # Africa - North
    ("EG", "Egypt", "Africa", "North Africa", "EGP", "lower-middle",
     (230, 390, 660), (720, 1080, 72), (2.8, 3.8, 4.8), (50, 2.4, 0.62), 33,
     ((480_000, 1_900_000), (1_900_000, 7_400_000), (7_400_000, 41_000_000))),
    ("MA", "Morocco", "Africa", "North Africa", "MAD", "lower-middle",
     (250, 420, 700), (800, 1200, 80), (2.6, 3.6, 4.6), (52, 2.6, 0.65), 35,
     ((520_000, 2_100_000), (2_100_000, 8_200_000), (8_200_000, 46_000_000))),
    ("TN", "Tunisia", "Africa", "North Africa", "TND", "lower-middle",
     (260, 440, 740), (850, 1300, 85), (2.5, 3.5, 4.5), (55, 2.7, 0.68), 36,
     ((550_000, 2_200_000), (2_200_000, 8_500_000), (8_500_000, 47_000_000))),
    # Asia - South
    ("IN", "India", "Asia", "South Asia", "INR", "lower-middle",
     (140, 240, 420), (400, 600, 40), (3.5, 4.5, 5.5), (60, 2.0, 0.4), 25,
     ((200_000, 800_000), (800_000, 3_200_000), (3_200_000, 16_000_000))),
    ("PK", "Pakistan", "Asia", "South Asia", "PKR", "lower-middle",
     (150, 260, 450), (450, 680, 45), (3.4, 4.4, 5.4), (58, 1.9, 0.42), 26,
     ((220_000, 880_000), (880_000, 3_500_000), (3_500_000, 17_500_000))),
    ("BD", "Bangladesh", "Asia", "South Asia", "BDT", "lower-middle",
     (120, 210, 370), (350, 520, 35), (3.8, 4.8, 5.8), (50, 1.5, 0.35), 22,
     ((150_000, 600_000), (600_000, 2_400_000), (2_400_000, 12_000_000))),
    ("LK", "Sri Lanka", "Asia", "South Asia", "LKR", "lower-middle",
     (180, 310, 530), (550, 820, 55), (3.2, 4.2, 5.2), (55, 2.1, 0.48), 29,
     ((300_000, 1_200_000), (1_200_000, 4_800_000), (4_800_000, 24_000_000))),
    # Asia - Southeast
    ("ID", "Indonesia", "Asia", "Southeast Asia", "IDR", "lower-middle",
     (170, 290, 500), (520, 780, 52), (3.3, 4.3, 5.3), (65, 2.2, 0.52), 28,
     ((280_000, 1_120_000), (1_120_000, 4_480_000), (4_480_000, 22_400_000))),
    ("PH", "Philippines", "Asia", "Southeast Asia", "PHP", "lower-middle",
     (180, 310, 530), (550, 820, 55), (3.2, 4.2, 5.2), (60, 2.3, 0.55), 29,
     ((300_000, 1_200_000), (1_200_000, 4_800_000), (4_800_000, 24_000_000))),
    ("TH", "Thailand", "Asia", "Southeast Asia", "THB", "upper-middle",
     (220, 380, 650), (700, 1050, 70), (2.8, 3.8, 4.8), (75, 3.0, 0.65), 33,
     ((450_000, 1_800_000), (1_800_000, 7_200_000), (7_200_000, 40_000_000))),
    ("VN", "Vietnam", "Asia", "Southeast Asia", "VND", "lower-middle",
     (160, 280, 480), (500, 750, 50), (3.4, 4.4, 5.4), (70, 2.5, 0.58), 27,
     ((250_000, 1_000_000), (1_000_000, 4_000_000), (4_000_000, 20_000_000))),
    # Asia - East
    ("CN", "China", "Asia", "East Asia", "CNY", "upper-middle",
     (280, 480, 820), (900, 1350, 90), (2.2, 3.2, 4.2), (110, 3.8, 1.0), 37,
     ((800_000, 3_200_000), (3_200_000, 12_800_000), (12_800_000, 64_000_000))),
    # Americas - South
    ("BR", "Brazil", "Americas", "South America", "BRL", "upper-middle",
     (300, 510, 880), (1000, 1500, 100), (2.3, 3.3, 4.3), (130, 4.2, 1.1), 39,
     ((950_000, 3_800_000), (3_800_000, 15_200_000), (15_200_000, 76_000_000))),
    ("CO", "Colombia", "Americas", "South America", "COP", "upper-middle",
     (260, 450, 770), (850, 1280, 85), (2.6, 3.6, 4.6), (100, 3.5, 0.9), 36,
     ((800_000, 3_200_000), (3_200_000, 12_800_000), (12_800_000, 64_000_000))),
    # Americas - Central
    ("MX", "Mexico", "Americas", "Central America", "MXN", "upper-middle",
     (270, 460, 800), (880, 1320, 88), (2.4, 3.4, 4.4), (120, 3.8, 1.05), 37,
     ((870_000, 3_480_000), (3_480_000, 13_920_000), (13_920_000, 69_600_000))),
    # Europe - Eastern
    ("PL", "Poland", "Europe", "Eastern Europe", "PLN", "high-income",
     (350, 600, 1050), (1200, 1800, 120), (2.0, 3.0, 4.0), (140, 5.0, 1.3), 42,
     ((1_200_000, 4_800_000), (4_800_000, 19_200_000), (19_200_000, 96_000_000))),
    ("RO", "Romania", "Europe", "Eastern Europe", "RON", "high-income",
     (320, 550, 950), (1100, 1650, 110), (2.1, 3.1, 4.1), (135, 4.8, 1.25), 41,
     ((1_100_000, 4_400_000), (4_400_000, 17_600_000), (17_600_000, 88_000_000))),
    ("UA", "Ukraine", "Europe", "Eastern Europe", "UAH", "lower-middle",
     (240, 420, 720), (800, 1200, 80), (2.5, 3.5, 4.5), (130, 4.5, 1.1), 34,
     ((600_000, 2_400_000), (2_400_000, 9_600_000), (9_600_000, 48_000_000))),
    # Europe - Western
    ("DE", "Germany", "Europe", "Western Europe", "EUR", "high-income",
     (500, 850, 1500), (1600, 2400, 160), (1.8, 2.8, 3.8), (160, 6.0, 1.6), 48,
     ((2_000_000, 8_000_000), (8_000_000, 32_000_000), (32_000_000, 160_000_000))),
    ("FR", "France", "Europe", "Western Europe", "EUR", "high-income",
     (520, 880, 1550), (1650, 2500, 165), (1.8, 2.8, 3.8), (165, 6.2, 1.65), 49,
     ((2_100_000, 8_400_000), (8_400_000, 33_600_000), (33_600_000, 168_000_000))),
    ("GB", "United Kingdom", "Europe", "Western Europe", "GBP", "high-income",
     (550, 950, 1700), (1800, 2700, 180), (1.7, 2.7, 3.7), (170, 6.5, 1.7), 50,
     ((2_300_000, 9_200_000), (9_200_000, 36_800_000), (36_800_000, 184_000_000))),
    # Middle East
    ("SA", "Saudi Arabia", "Asia", "Middle East", "SAR", "high-income",
     (400, 680, 1180), (1400, 2100, 140), (2.5, 3.5, 4.5), (200, 7.0, 1.5), 45,
     ((1_600_000, 6_400_000), (6_400_000, 25_600_000), (25_600_000, 128_000_000))),
    ("AE", "United Arab Emirates", "Asia", "Middle East", "AED", "high-income",
     (450, 770, 1350), (1500, 2250, 150), (2.4, 3.4, 4.4), (210, 7.5, 1.6), 46,
     ((1_700_000, 6_800_000), (6_800_000, 27_200_000), (27_200_000, 136_000_000))),
    # Oceania
    ("AU", "Australia", "Oceania", "Oceania", "AUD", "high-income",
     (600, 1000, 1800), (2000, 3000, 200), (1.6, 2.6, 3.6), (180, 7.0, 1.8), 52,
     ((2_500_000, 10_000_000), (10_000_000, 40_000_000), (40_000_000, 200_000_000))),
    ("NZ", "New Zealand", "Oceania", "Oceania", "NZD", "high-income",
     (580, 980, 1750), (1950, 2925, 195), (1.7, 2.7, 3.7), (175, 6.8, 1.75), 51,
     ((2_400_000, 9_600_000), (9_600_000, 38_400_000), (38_400_000, 192_000_000))),
)


def _build_database() -> Dict[str, CountryData]:
    database = {}
    for (
        code,
        name,
        region,
        subregion,
        currency,
        level,
        costs,
        infrastructure,
        occupancy,
        utilities,
        labor,
        budgets,
    ) in _COUNTRY_ROWS:
        small, medium, large = budgets
        database[code] = CountryData(
            name=name,
            code=code,
            region=region,
            subregion=subregion,
            currency=currency,
            development_level=level,
            construction_costs=ConstructionCosts(
                basic=costs[0], standard=costs[1], improved=costs[2]
            ),
            infrastructure=InfrastructureUnitCosts(
                water_per_connection=infrastructure[0],
                sewer_per_connection=infrastructure[1],
                roads_per_meter=infrastructure[2],
            ),
            occupancy=PersonsPerUnit(
                one_bedroom=occupancy[0],
                two_bedroom=occupancy[1],
                three_bedroom=occupancy[2],
            ),
            utilities=UtilityConsumption(
                water_liters_per_person=utilities[0],
                electricity_kwh_per_person=utilities[1],
                waste_kg_per_person=utilities[2],
            ),
            labor_cost_percentage=labor,
            typical_project_budgets=TypicalProjectBudgets(
                small=BudgetRange(min=small[0], max=small[1]),
                medium=BudgetRange(min=medium[0], max=medium[1]),
                large=BudgetRange(min=large[0], max=large[1]),
            ),
        )
    return database


COUNTRY_DATABASE: Dict[str, CountryData] = _build_database()

DEFAULT_COUNTRY_CODE = "IN"
