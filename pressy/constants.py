# ---------- constants.py ----------
"""Project-wide constants: catalogs, enumerations and persistence keys."""
from typing import Dict, List, Union

# All persisted keys live under this prefix in the local storage table
STORAGE_PREFIX: str = "pressy_"

DEFAULT_SERVICES: List[Dict[str, Union[str, float]]] = [
    {"id": "1", "name": "BOUBOU", "price": 50},
    {"id": "2", "name": "CHEMISE", "price": 30},
    {"id": "3", "name": "PANTALON", "price": 30},
    {"id": "4", "name": "VOILE", "price": 30},
    {"id": "5", "name": "ROBE", "price": 20},
    {"id": "6", "name": "GOMME", "price": 10},
]

PAYMENT_METHODS: List[str] = [
    "Cash",
    "Click",
    "Moov Money",
    "BCI Pay",
    "Amanety",
    "Bankily",
    "Sedad",
    "Masrivi",
    "Bim Bank",
]

ORDER_STATUSES: List[str] = [
    "pending",     # Received at the counter
    "processing",  # Being washed / ironed
    "ready",       # Waiting for pickup (and payment)
    "completed",   # Picked up and paid
    "cancelled",
]
TERMINAL_STATUSES: List[str] = ["completed", "cancelled"]

THEMES: List[str] = ["light", "dark", "system"]
LANGUAGES: List[str] = ["fr", "ar"]
RTL_LANGUAGES: List[str] = ["ar"]

ROLE_MANAGER = "manager"
ROLE_EMPLOYEE = "employee"
NOTIFICATION_INFO = "info"

DEFAULT_THEME = "system"
DEFAULT_LANGUAGE = "fr"
FIRST_ORDER_NUMBER: int = 1001

# Persistence keys, one per state slice (keep in sync with AppState)
KEY_THEME = "theme"
KEY_LANGUAGE = "language"
KEY_USER = "user"
KEY_SERVICES = "services"
KEY_ORDERS = "orders"
KEY_EXPENSES = "expenses"
KEY_EMPLOYEES = "employees"
KEY_NOTIFICATIONS = "notifications"

# Prefix tags for generated ids
ID_TAG_ORDER = "ORD"
ID_TAG_SERVICE = "SVC"
ID_TAG_EMPLOYEE = "EMP"
ID_TAG_EXPENSE = "EXP"
ID_TAG_MANAGER = "MGR"

# Fabricated identity used by the mock manager login
MOCK_MANAGER_NAME = "Ahmed Fall"
MOCK_MANAGER_EMAIL = "manager@pressy.com"
MOCK_LAUNDRY_NAME = "Pressy Laundry"
