"""Sample records used to seed an empty store when demo data is enabled."""
from typing import List

DEMO_ORDERS: List[dict] = [
    {
        "id": "1", "order_number": 1001, "client_name": "Moussa Ali", "client_phone": "22334455",
        "items": [
            {"service_id": "1", "service_name": "BOUBOU", "quantity": 2, "price": 50},
            {"service_id": "2", "service_name": "CHEMISE", "quantity": 3, "price": 30},
        ],
        "total_price": 190, "payment_method": "Bankily", "status": "completed",
        "created_at": "2023-10-27T10:00:00+00:00",
    },
    {
        "id": "2", "order_number": 1002, "client_name": "Fatima Ahmed", "client_phone": "44556677",
        "items": [{"service_id": "3", "service_name": "PANTALON", "quantity": 5, "price": 30}],
        "total_price": 150, "payment_method": "Cash", "status": "ready",
        "created_at": "2023-10-27T11:30:00+00:00",
    },
    {
        "id": "3", "order_number": 1003, "client_name": "Yacoub Sidi", "client_phone": "33445566",
        "items": [{"service_id": "4", "service_name": "VOILE", "quantity": 10, "price": 30}],
        "total_price": 300, "payment_method": "Click", "status": "processing",
        "created_at": "2023-10-28T09:00:00+00:00",
    },
    {
        "id": "4", "order_number": 1004, "client_name": "Mariam Mint", "client_phone": "20304050",
        "items": [
            {"service_id": "5", "service_name": "ROBE", "quantity": 4, "price": 20},
            {"service_id": "6", "service_name": "GOMME", "quantity": 1, "price": 10},
        ],
        "total_price": 90, "payment_method": "Cash", "status": "pending",
        "created_at": "2023-10-28T14:00:00+00:00",
    },
]

DEMO_EXPENSES: List[dict] = [
    {"id": "1", "title": "Detergent", "amount": 1500, "date": "2023-10-25"},
    {"id": "2", "title": "Electricity Bill", "amount": 3500, "date": "2023-10-28"},
    {"id": "3", "title": "Rent", "amount": 10000, "date": "2023-10-01"},
]

DEMO_EMPLOYEES: List[dict] = [
    {"id": "1", "name": "Brahim Salem", "phone": "41424344", "status": "active"},
    {"id": "2", "name": "Aicha Fall", "phone": "36373839", "status": "active"},
    {"id": "3", "name": "Sidi Mohamed", "phone": "28292021", "status": "disabled"},
]

DEMO_NOTIFICATIONS: List[dict] = [
    {
        "id": 1, "title": "Unpaid Order",
        "message": "Order #1002 for Fatima Ahmed is ready but remains unpaid.",
        "type": "warning", "seen": False, "created_at": "2023-10-27T12:00:00+00:00",
    },
    {
        "id": 2, "title": "New Employee Order",
        "message": "Employee Brahim Salem has added a new order #1004.",
        "type": "info", "seen": True, "created_at": "2023-10-28T14:05:00+00:00",
    },
]
