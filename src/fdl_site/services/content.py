"""Static marketing copy for the site front end."""

from __future__ import annotations

import copy
from datetime import date
from typing import Optional

BRAND = "Fond du Lac Cold Storage"
TAGLINE = "Reliable refrigerated warehousing & professional handling solutions."

NAV_LINKS = (
    {"label": "Warehouse", "href": "#warehouse"},
    {"label": "Transportation", "href": "#transport"},
    {"label": "Services", "href": "#services"},
    {"label": "Contact", "href": "#contact"},
    {"label": "Customer Portal", "href": "http://fdl.zapto.org/wm/", "style": "button"},
)

HERO_CHIPS = ("55°F Climate Control", "Importer-Friendly 3PL", "Final-Mile Delivery")

TICKER_ITEMS = (
    "55°F Climate Control",
    "Secure, Organized Storage",
    "Pick & Pack",
    "Labeling & Repack",
    "Final-Mile Delivery",
    "Real-Time Oversight",
    "On-Site USDA Inspections",
    "Cross-Docking in Controlled Conditions",
    "HACCP-Compliant Handling",
    "Inventory Lifecycle Reporting",
    "Eco-Friendly Refrigeration Systems",
)

SECTIONS = (
    {
        "id": "warehouse",
        "title": "Warehouse",
        "intro": "Purpose-built, climate-controlled storage that protects quality and delivers readiness.",
        "cards": [
            {
                "title": "55°F Climate-Controlled Storage",
                "image": "/images/image2.jpg",
                "imageAlt": "Climate-controlled warehouse",
                "body": (
                    "Our facility maintains a precise 55 °F environment, ideal for wine, cheese, "
                    "chocolate, craft beer, and other premium goods. Each pallet is secured, "
                    "organized, and monitored for full traceability."
                ),
                "bullets": ["Continuous temperature monitoring", "SKU/lot/vintage separation"],
            },
            {
                "title": "Operational Integrity",
                "image": "/images/work.jpg",
                "imageAlt": "Worker handling inventory",
                "body": (
                    "From inbound receiving to outbound staging, workflows minimize dwell time and "
                    "preserve product integrity, ensuring your inventory is ready the moment you need it."
                ),
                "bullets": ["Appointment-based receiving", "QC checks on arrival"],
            },
        ],
    },
    {
        "id": "transport",
        "title": "Transportation",
        "intro": (
            "Refrigerated delivery with the same precision as our storage. Find out if you are "
            "in our range with the Zip Locator"
        ),
        "cards": [
            {
                "title": "Temperature-Assured Transit",
                "image": "/images/truck.jpg",
                "imageAlt": "Refrigerated truck",
                "body": (
                    "Our dedicated refrigerated fleet keeps products at a constant 55 °F throughout "
                    "the journey. Trained drivers handle temperature-sensitive goods with care and reliable timing."
                ),
                "bullets": ["Pre-cooled trailers", "Seal & temperature logs"],
            },
        ],
    },
    {
        "id": "services",
        "title": "Value-Added Services",
        "intro": "Flexible support designed to fit your operations.",
        "cards": [
            {
                "title": "Pick & Pack",
                "body": "Efficient order assembly and cartonization to meet your downstream requirements and timelines.",
            },
            {
                "title": "Labeling",
                "body": "SKU relabeling, compliance labels, and retail-ready presentation without interrupting your supply chain.",
            },
            {
                "title": "Repacking",
                "body": "Case breaking, kitting, and reconfiguration services tailored to product and channel needs.",
            },
        ],
    },
)

ZIP_NOTE = "Coverage updates periodically. If your ZIP isn’t listed, reach out, we may still help."

FOOTER = {
    "blurb": "Temperature-controlled warehousing and delivery. Edison, NJ.",
    "links": [
        {"label": "Warehouse", "href": "#warehouse"},
        {"label": "Transport", "href": "#transport"},
        {"label": "Services", "href": "#services"},
        {"label": "Contact", "href": "#contact"},
        {"label": "DNT Express", "href": "https://dntexpress.com/"},
        {"label": "FDL Staff Login", "href": "http://www.fdlwarehouse.com/imlogin.php?loginstatus=-3"},
    ],
    "contact": {
        "email": "info@fdlwarehouse.com",
        "phone": "(732) 650-9200",
        "address": "78 Saw Mill Pond Rd, Edison, NJ",
    },
}


def get_site_content(today: Optional[date] = None) -> dict:
    """Assemble the page content; the copyright year follows the current date."""

    year = (today or date.today()).year
    return {
        "brand": BRAND,
        "tagline": TAGLINE,
        "nav": copy.deepcopy(list(NAV_LINKS)),
        "heroChips": list(HERO_CHIPS),
        "ticker": list(TICKER_ITEMS),
        "sections": copy.deepcopy(list(SECTIONS)),
        "zipNote": ZIP_NOTE,
        "footer": {**copy.deepcopy(FOOTER), "copyright": f"© {year} FDL Cold Storage. All rights reserved."},
    }
