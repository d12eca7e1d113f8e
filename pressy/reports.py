"""Dashboard and finance figures computed from store reads."""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

ORDER_COLUMNS = [
    "id",
    "order_number",
    "client_name",
    "client_phone",
    "total_price",
    "payment_method",
    "status",
    "created_at",
]
EXPENSE_COLUMNS = ["id", "title", "amount", "date"]


def _today_utc() -> date:
    return datetime.now(timezone.utc).date()


def orders_frame(orders: Iterable[dict]) -> pd.DataFrame:
    """Return orders as a DataFrame with parsed `created_at` and a `created_date` column."""
    df = pd.DataFrame(list(orders))
    for col in ORDER_COLUMNS:
        if col not in df.columns:
            df[col] = pd.Series(dtype="object")
    df["total_price"] = pd.to_numeric(df["total_price"], errors="coerce").fillna(0)
    df["created_at"] = pd.to_datetime(df["created_at"], utc=True, format="ISO8601")
    df["created_date"] = df["created_at"].dt.date
    return df


def expenses_frame(expenses: Iterable[dict]) -> pd.DataFrame:
    df = pd.DataFrame(list(expenses))
    for col in EXPENSE_COLUMNS:
        if col not in df.columns:
            df[col] = pd.Series(dtype="object")
    df["amount"] = pd.to_numeric(df["amount"], errors="coerce").fillna(0)
    return df


def dashboard_summary(orders: Iterable[dict], today: Optional[date] = None) -> Dict[str, float]:
    """Headline numbers for the dashboard.

    Unpaid orders are the ones waiting at status 'ready', whatever their date.
    Income only counts completed orders.
    """
    today = today or _today_utc()
    df = orders_frame(orders)
    todays = df[df["created_date"] == today]
    completed_today = todays[todays["status"] == "completed"]
    return {
        "orders_today": int(len(todays)),
        "completed_today": int(len(completed_today)),
        "unpaid_orders": int((df["status"] == "ready").sum()),
        "daily_income": float(completed_today["total_price"].sum()),
    }


def weekly_income(orders: Iterable[dict], today: Optional[date] = None) -> List[Tuple[date, float]]:
    """Completed-order income for the last 7 days, oldest first."""
    today = today or _today_utc()
    df = orders_frame(orders)
    completed = df[df["status"] == "completed"]
    per_day = completed.groupby("created_date")["total_price"].sum()
    days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
    return [(day, float(per_day.get(day, 0))) for day in days]


def finance_summary(orders: Iterable[dict], expenses: Iterable[dict]) -> Dict[str, float]:
    df = orders_frame(orders)
    income = float(df.loc[df["status"] == "completed", "total_price"].sum())
    total_expenses = float(expenses_frame(expenses)["amount"].sum())
    return {
        "income": income,
        "expenses": total_expenses,
        "profit": income - total_expenses,
    }
