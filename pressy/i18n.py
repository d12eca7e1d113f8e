"""Translation strings for text generated by the state store."""
from typing import Dict

from pressy.constants import DEFAULT_LANGUAGE, RTL_LANGUAGES

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "fr": {
        "newOrderNotificationTitle": "Nouvelle commande",
        "newOrderNotificationMessage": "L'employé {name} a ajouté la commande #{order_number}",
        "income": "Revenus",
        "expenses": "Dépenses",
        "profit": "Bénéfice",
        "pending": "En attente",
        "processing": "En cours",
        "ready": "Prête",
        "completed": "Terminée",
        "cancelled": "Annulée",
    },
    "ar": {
        "newOrderNotificationTitle": "طلب جديد",
        "newOrderNotificationMessage": "أضاف الموظف {name} الطلب رقم #{order_number}",
        "income": "الدخل",
        "expenses": "المصاريف",
        "profit": "الربح",
        "pending": "قيد الانتظار",
        "processing": "قيد المعالجة",
        "ready": "جاهز",
        "completed": "مكتمل",
        "cancelled": "ملغى",
    },
}


def translate(language: str, key: str) -> str:
    """Look up `key` for `language`; unknown keys are returned unchanged."""
    table = TRANSLATIONS.get(language) or TRANSLATIONS[DEFAULT_LANGUAGE]
    return table.get(key, key)


def direction_for(language: str) -> str:
    """Text direction for a language: 'rtl' for Arabic, 'ltr' otherwise."""
    return "rtl" if language in RTL_LANGUAGES else "ltr"
