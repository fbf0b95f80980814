from app.api.routes.profile import router as profile_router
from app.api.routes.social_links import router as social_links_router
from app.api.routes.payment_methods import router as payment_methods_router
from app.api.routes.qr_codes import router as qr_codes_router

__all__ = [
    "profile_router",
    "social_links_router",
    "payment_methods_router",
    "qr_codes_router",
]
