# Routers package
from . import auth_router
from . import doctors_router
from . import patients_router
from . import appointments_router

__all__ = [
    "auth_router",
    "doctors_router",
    "patients_router",
    "appointments_router",
]
