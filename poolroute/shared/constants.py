"""Fixed vocabularies shared by the record domains and the reports"""

# Route days in visiting order; Saturday exists as a service day but is never a route day
ROUTE_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
SERVICE_DAYS = ROUTE_DAYS + ["Saturday"]
WEEKDAY_NAMES = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]

POOL_TYPES = ["Salt", "Chlorine"]
SURFACE_TYPES = ["Plaster", "Vinyl", "Fiberglass", "Tile"]

READING_LEVELS = ["low", "good", "high", "critical"]

CHEMICAL_TYPES = [
    "Liquid Chlorine",
    "Chlorine Tablets",
    "Muriatic Acid",
    "Soda Ash",
    "Baking Soda",
    "Calcium Chloride",
    "Stabilizer (CYA)",
    "Algaecide",
    "Clarifier",
    "Salt",
    "Phosphate Remover",
    "Other",
]

NOTE_CATEGORIES = ["General", "Customer", "Equipment", "Reminder", "Chemical", "Billing"]
NOTE_PRIORITIES = ["low", "medium", "high"]

# Descending-order sentinels understood by the list endpoints
SERVICE_LOG_DESC_ORDER = "-service_date"
CREATED_DATE_DESC_ORDER = "-created_date"

UNKNOWN_CUSTOMER_NAME = "Unknown Customer"
