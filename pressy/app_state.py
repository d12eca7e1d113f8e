"""Application state store for the laundry dashboard.

`AppState` owns every piece of session state (preferences, the logged-in
user and the domain collections). Each slice is loaded from `LocalStore`
at construction and written back by every operation that changes it.
Consumers receive the instance explicitly and only read copies.
"""
from __future__ import annotations

import copy
import hashlib
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import uuid4

from pressy.constants import (
    DEFAULT_LANGUAGE,
    DEFAULT_SERVICES,
    DEFAULT_THEME,
    FIRST_ORDER_NUMBER,
    ID_TAG_EMPLOYEE,
    ID_TAG_EXPENSE,
    ID_TAG_MANAGER,
    ID_TAG_ORDER,
    ID_TAG_SERVICE,
    KEY_EMPLOYEES,
    KEY_EXPENSES,
    KEY_LANGUAGE,
    KEY_NOTIFICATIONS,
    KEY_ORDERS,
    KEY_SERVICES,
    KEY_THEME,
    KEY_USER,
    LANGUAGES,
    MOCK_LAUNDRY_NAME,
    MOCK_MANAGER_EMAIL,
    MOCK_MANAGER_NAME,
    NOTIFICATION_INFO,
    ORDER_STATUSES,
    ROLE_EMPLOYEE,
    ROLE_MANAGER,
    TERMINAL_STATUSES,
    THEMES,
)
from pressy.config import Settings, load_settings
from pressy.db_init import init_db
from pressy.demo_data import DEMO_EMPLOYEES, DEMO_EXPENSES, DEMO_NOTIFICATIONS, DEMO_ORDERS
from pressy.i18n import direction_for, translate
from pressy.storage import LocalStore

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash password using SHA-256."""
    return hashlib.sha256(password.encode()).hexdigest()


def new_id(tag: str) -> str:
    """Generate a unique id prefixed with an entity tag (e.g. ``ORD``)."""
    return f"{tag}{uuid4().hex}"


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _public_employee(employee: dict) -> dict:
    return {k: v for k, v in employee.items() if k not in ("password", "password_hash")}


def order_total(items: Iterable[dict]) -> float:
    """Sum of quantity x unit price over an order's lines."""
    return sum(item["quantity"] * item["price"] for item in items)


class AppState:
    """Single source of truth for the running session."""

    def __init__(self, store: LocalStore, seed_demo_data: bool = False) -> None:
        self._store = store
        self._seed_demo_data = seed_demo_data
        self._load()

    # ------------------------------------------------------------------
    # Initialization and persistence
    # ------------------------------------------------------------------
    def _load(self) -> None:
        seed = self._seed_demo_data
        self._theme: str = self._init_slice(KEY_THEME, DEFAULT_THEME, str, allowed=THEMES)
        self._language: str = self._init_slice(KEY_LANGUAGE, DEFAULT_LANGUAGE, str, allowed=LANGUAGES)
        self._user: Optional[dict] = self._init_slice(KEY_USER, None, dict)
        self._services: List[dict] = self._init_slice(KEY_SERVICES, DEFAULT_SERVICES, list)
        self._orders: List[dict] = self._init_slice(KEY_ORDERS, DEMO_ORDERS if seed else [], list)
        self._expenses: List[dict] = self._init_slice(KEY_EXPENSES, DEMO_EXPENSES if seed else [], list)
        self._employees: List[dict] = self._init_slice(KEY_EMPLOYEES, DEMO_EMPLOYEES if seed else [], list)
        self._notifications: List[dict] = self._init_slice(
            KEY_NOTIFICATIONS, DEMO_NOTIFICATIONS if seed else [], list
        )

    def _init_slice(
        self,
        key: str,
        default: Any,
        expected_type: type,
        allowed: Optional[Iterable[Any]] = None,
    ) -> Any:
        """Adopt the persisted value for `key`, or persist and return `default`."""
        saved = self._store.get(key)
        if saved is not None:
            if isinstance(saved, expected_type) and (allowed is None or saved in allowed):
                return saved
            logger.warning("Ignoring invalid persisted value for %s: %r", key, saved)

        value = copy.deepcopy(default)
        self._store.set(key, value)
        return value

    def _persist(self, key: str, value: Any) -> None:
        self._store.set(key, value)

    def reset(self) -> None:
        """Erase every persisted slice and start over from defaults."""
        self._store.clear()
        self._load()

    # ------------------------------------------------------------------
    # Preferences
    # ------------------------------------------------------------------
    @property
    def theme(self) -> str:
        return self._theme

    def set_theme(self, theme: str) -> None:
        if theme not in THEMES:
            raise ValueError(f"Unknown theme: {theme}")
        self._theme = theme
        self._persist(KEY_THEME, self._theme)

    def effective_theme(self, prefers_dark: bool = False) -> str:
        """Resolve 'system' against the host's colour-scheme preference."""
        if self._theme == "system":
            return "dark" if prefers_dark else "light"
        return self._theme

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> None:
        if language not in LANGUAGES:
            raise ValueError(f"Unknown language: {language}")
        self._language = language
        self._persist(KEY_LANGUAGE, self._language)

    @property
    def direction(self) -> str:
        return direction_for(self._language)

    def t(self, key: str) -> str:
        return translate(self._language, key)

    # ------------------------------------------------------------------
    # Authentication (mock: nothing is verified)
    # ------------------------------------------------------------------
    @property
    def user(self) -> Optional[dict]:
        return copy.deepcopy(self._user)

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def is_manager(self) -> bool:
        return self._user is not None and self._user.get("role") == ROLE_MANAGER

    def login(self, phone: str, password: str) -> bool:
        """Log in as the shop manager. Any non-empty phone/password is accepted."""
        if not phone or not password:
            return False
        self._user = {
            "id": new_id(ID_TAG_MANAGER),
            "name": MOCK_MANAGER_NAME,
            "phone": phone,
            "email": MOCK_MANAGER_EMAIL,
            "role": ROLE_MANAGER,
            "laundry_name": MOCK_LAUNDRY_NAME,
        }
        self._persist(KEY_USER, self._user)
        logger.info("Manager logged in with phone %s", phone)
        return True

    def signup(
        self,
        phone: str,
        password: str,
        laundry_name: str,
        manager_name: str,
        email: Optional[str] = None,
    ) -> bool:
        """Register a new laundry and log its manager in."""
        if not (phone and password and laundry_name and manager_name):
            return False
        self._user = {
            "id": new_id(ID_TAG_MANAGER),
            "name": manager_name,
            "phone": phone,
            "email": email,
            "role": ROLE_MANAGER,
            "laundry_name": laundry_name,
        }
        self._persist(KEY_USER, self._user)
        logger.info("New laundry %s registered", laundry_name)
        return True

    def logout(self) -> None:
        self._user = None
        self._persist(KEY_USER, None)

    # ------------------------------------------------------------------
    # Services
    # ------------------------------------------------------------------
    @property
    def services(self) -> List[dict]:
        return copy.deepcopy(self._services)

    def get_service(self, service_id: str) -> Optional[dict]:
        for service in self._services:
            if service["id"] == service_id:
                return dict(service)
        return None

    def update_service_price(self, service_id: str, price: float) -> None:
        self._services = [
            {**s, "price": price} if s["id"] == service_id else s for s in self._services
        ]
        self._persist(KEY_SERVICES, self._services)

    def add_service(self, name: str, price: float) -> dict:
        service = {"id": new_id(ID_TAG_SERVICE), "name": name, "price": price}
        self._services = [*self._services, service]
        self._persist(KEY_SERVICES, self._services)
        return dict(service)

    def restore_default_services(self) -> None:
        """Drop custom services and price edits, back to the default catalog."""
        self._services = copy.deepcopy(DEFAULT_SERVICES)
        self._persist(KEY_SERVICES, self._services)

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------
    @property
    def orders(self) -> List[dict]:
        return copy.deepcopy(self._orders)

    def orders_by_status(self, status: str) -> List[dict]:
        return [copy.deepcopy(o) for o in self._orders if o.get("status") == status]

    def search_orders(self, term: str = "", status: Optional[str] = None) -> List[dict]:
        """Orders whose client name, phone or "#<number>" matches `term`.

        Name matching ignores case. `status` narrows the result; None or
        "all" keeps every status.
        """
        if status not in (None, "all") and status not in ORDER_STATUSES:
            raise ValueError(f"Unknown order status: {status}")
        needle = term.lower()
        matches = []
        for order in self._orders:
            if status not in (None, "all") and order.get("status") != status:
                continue
            if (
                needle in order.get("client_name", "").lower()
                or term in order.get("client_phone", "")
                or term in f"#{order.get('order_number')}"
            ):
                matches.append(copy.deepcopy(order))
        return matches

    def make_order_item(self, service_id: str, quantity: int) -> Optional[dict]:
        """Build an order line priced at the service's current price."""
        service = self.get_service(service_id)
        if service is None:
            return None
        return {
            "service_id": service["id"],
            "service_name": service["name"],
            "quantity": quantity,
            "price": service["price"],
        }

    def _next_order_number(self) -> int:
        return max((o["order_number"] for o in self._orders), default=FIRST_ORDER_NUMBER - 1) + 1

    def add_order(
        self,
        client_name: str,
        client_phone: str,
        items: List[dict],
        total_price: float,
        payment_method: str,
        status: str,
        notes: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> dict:
        """Record a new order (most recent first) and return it.

        `total_price` is stored as given. Orders added by an employee also
        raise an info notification for the manager.
        """
        order = {
            "id": new_id(ID_TAG_ORDER),
            "order_number": self._next_order_number(),
            "client_name": client_name,
            "client_phone": client_phone,
            "items": copy.deepcopy(list(items)),
            "total_price": total_price,
            "payment_method": payment_method,
            "status": status,
            "created_at": _utc_now_iso(),
        }
        if employee_id is not None:
            order["employee_id"] = employee_id
        if notes is not None:
            order["notes"] = notes

        self._orders = [order, *self._orders]
        self._persist(KEY_ORDERS, self._orders)

        if self._user is not None and self._user.get("role") == ROLE_EMPLOYEE:
            self._notify_new_order(order)

        return copy.deepcopy(order)

    def update_order_status(self, order_id: str, status: str) -> None:
        """Set an order's status. Transitions are not restricted."""
        updated: List[dict] = []
        for order in self._orders:
            if order["id"] == order_id:
                if order["status"] in TERMINAL_STATUSES and status != order["status"]:
                    logger.info(
                        "Order #%s moved out of terminal status %s to %s",
                        order["order_number"], order["status"], status,
                    )
                order = {**order, "status": status}
            updated.append(order)
        self._orders = updated
        self._persist(KEY_ORDERS, self._orders)

    # ------------------------------------------------------------------
    # Expenses
    # ------------------------------------------------------------------
    @property
    def expenses(self) -> List[dict]:
        return copy.deepcopy(self._expenses)

    def add_expense(self, title: str, amount: float, date: str, notes: Optional[str] = None) -> dict:
        expense = {"id": new_id(ID_TAG_EXPENSE), "title": title, "amount": amount, "date": date}
        if notes is not None:
            expense["notes"] = notes
        self._expenses = [expense, *self._expenses]
        self._persist(KEY_EXPENSES, self._expenses)
        return dict(expense)

    # ------------------------------------------------------------------
    # Employees
    # ------------------------------------------------------------------
    @property
    def employees(self) -> List[dict]:
        return [_public_employee(e) for e in self._employees]

    def add_employee(self, name: str, phone: str, status: str, password: Optional[str] = None) -> dict:
        employee: Dict[str, Any] = {
            "id": new_id(ID_TAG_EMPLOYEE),
            "name": name,
            "phone": phone,
            "status": status,
        }
        if password:
            employee["password_hash"] = hash_password(password)
        self._employees = [*self._employees, employee]
        self._persist(KEY_EMPLOYEES, self._employees)
        return _public_employee(employee)

    def update_employee(self, employee: dict) -> None:
        """Replace the employee with the same id.

        A non-empty ``password`` resets the stored hash; otherwise the
        existing hash is kept.
        """
        updated: List[dict] = []
        for existing in self._employees:
            if existing["id"] != employee.get("id"):
                updated.append(existing)
                continue
            replacement = _public_employee(employee)
            if employee.get("password"):
                replacement["password_hash"] = hash_password(employee["password"])
            elif "password_hash" in existing:
                replacement["password_hash"] = existing["password_hash"]
            updated.append(replacement)
        self._employees = updated
        self._persist(KEY_EMPLOYEES, self._employees)

    def delete_employee(self, employee_id: str) -> None:
        self._employees = [e for e in self._employees if e["id"] != employee_id]
        self._persist(KEY_EMPLOYEES, self._employees)

    # ------------------------------------------------------------------
    # Notifications
    # ------------------------------------------------------------------
    @property
    def notifications(self) -> List[dict]:
        return copy.deepcopy(self._notifications)

    def unseen_notifications(self) -> List[dict]:
        return [copy.deepcopy(n) for n in self._notifications if not n.get("seen")]

    def _notify_new_order(self, order: dict) -> None:
        next_id = max((n["id"] for n in self._notifications), default=0) + 1
        message = self.t("newOrderNotificationMessage").format(
            name=self._user.get("name", ""), order_number=order["order_number"]
        )
        notification = {
            "id": next_id,
            "title": self.t("newOrderNotificationTitle"),
            "message": message,
            "type": NOTIFICATION_INFO,
            "seen": False,
            "created_at": _utc_now_iso(),
        }
        self._notifications = [notification, *self._notifications]
        self._persist(KEY_NOTIFICATIONS, self._notifications)


def create_app_state(settings: Optional[Settings] = None) -> AppState:
    """Open the configured database and build the session's `AppState`."""
    if settings is None:
        settings = load_settings()
    conn = init_db(settings.db_path)
    return AppState(LocalStore(conn), seed_demo_data=settings.seed_demo_data)
