from app.schemas.ordering import (
    AnyOrderedItem,
    CollectionType,
    OrderedItem,
    PaymentMethodItem,
    PersistResult,
    PositionUpdate,
    QRCodeItem,
    ReorderRequest,
    ReorderResponse,
    SocialLinkItem,
)
from app.schemas.social_link import (
    SocialLinkCreate,
    SocialLinkUpdate,
    SocialLinkResponse,
)
from app.schemas.payment_method import (
    PaymentMethodCreate,
    PaymentMethodUpdate,
    PaymentMethodResponse,
)
from app.schemas.qr_code import (
    QRCodeCreate,
    QRCodeUpdate,
    QRCodeResponse,
)

__all__ = [
    # Ordering
    "AnyOrderedItem",
    "CollectionType",
    "OrderedItem",
    "PaymentMethodItem",
    "PersistResult",
    "PositionUpdate",
    "QRCodeItem",
    "ReorderRequest",
    "ReorderResponse",
    "SocialLinkItem",
    # Social links
    "SocialLinkCreate",
    "SocialLinkUpdate",
    "SocialLinkResponse",
    # Payment methods
    "PaymentMethodCreate",
    "PaymentMethodUpdate",
    "PaymentMethodResponse",
    # QR codes
    "QRCodeCreate",
    "QRCodeUpdate",
    "QRCodeResponse",
]
