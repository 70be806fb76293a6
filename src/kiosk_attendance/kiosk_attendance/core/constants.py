"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

LOGIN_DOMAIN = "bodega.local"
MIN_PASSWORD_LENGTH = 4
PADDED_PASSWORD_LENGTH = 6

MIN_BADGE_LOOKUP_LENGTH = 3
MAX_TASKS_PER_EVENT = 1

AREAS = (
    "ADMINISTRACIÓN",
    "PUNTO DE VENTA",
    "EXTERNO",
    "BODEGA",
    "SISTEMAS",
    "SUPERVISOR",
    "MANTENIMIENTO",
)

# Areas shared by every store.
GLOBAL_AREAS = frozenset({"ADMINISTRACIÓN", "SISTEMAS", "EXTERNO", "SUPERVISOR", "MANTENIMIENTO"})

PERSONAL_ITEM_OPTIONS = {
    "BANDA_RELOJ": "BANDA/RELOJ INTELIGENTE",
    "CELULAR": "CELULAR CORPORATIVO",
    "PORTATIL": "COMPUTADORA PORTÁTIL",
    "NINGUNO": "NO INGRESA NADA",
}

TASK_CATEGORIES = {
    "TAREAS_DIARIAS": "TAREAS DIARIAS DIGITALES",
    "APOYO_TAREAS": "APOYO TAREAS DIGITALES",
    "INVENTARIO": "INVENTARIO",
    "INVENTARIO_SELECTIVO": "INVENTARIO SELECTIVO",
    "SISTEMAS": "SISTEMAS",
    "REVISION_PROCESOS": "REVISIÓN DE PROCESOS",
    "SUPERVISOR_ADMIN": "SUPERVISOR / ADMIN",
    "MANTENIMIENTO": "MANTENIMIENTO",
    "PERSONAL_EXTERNO": "PERSONAL EXTERNO",
    "COORDINADOR": "COORDINADOR",
    "JEFE_TIENDA": "JEFE DE TIENDA",
    "SST_PERSONAL": "SST PERSONAL",
    "SEGURIDAD": "SEGURIDAD",
    "CAJEROS": "CAJEROS",
}

EXPORT_SHEET_NAME = "Registros"
EXPORT_FILENAME_PREFIX = "registros"
EXPORT_COLUMN_WIDTHS = (15, 35, 20, 10, 12, 12, 22, 30)
