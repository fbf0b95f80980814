from app.models.base import Base
from app.models.user import User
from app.models.social_link import SocialLink, SocialPlatform
from app.models.payment_method import PaymentMethod, PaymentMethodType
from app.models.qr_code import QRCode, QRCodeType

__all__ = [
    "Base",
    "User",
    # Reorderable profile collections
    "SocialLink",
    "SocialPlatform",
    "PaymentMethod",
    "PaymentMethodType",
    "QRCode",
    "QRCodeType",
]
