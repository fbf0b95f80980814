"""Service for social link operations."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError

from app.models.social_link import SocialLink
from app.schemas.social_link import SocialLinkCreate, SocialLinkUpdate, validate_platform_url
from app.services.collection_service import OwnedCollectionService


class SocialLinkService(OwnedCollectionService[SocialLink]):
    """Service for social link CRUD operations."""

    model = SocialLink

    async def create(self, data: SocialLinkCreate, user_id: UUID) -> SocialLink:
        """Create a new social link at the end of the user's list."""
        position = await self._get_next_position(user_id)

        social_link = SocialLink(
            user_id=user_id,
            platform=data.platform,
            url=data.url,
            label=data.label,
            enabled=data.enabled,
            position=position,
        )

        try:
            return await self._add(social_link)
        except IntegrityError:
            await self.db.rollback()
            raise ValueError(f"A {data.platform.value} link already exists for this profile")

    async def update(
        self, social_link_id: UUID, data: SocialLinkUpdate, user_id: UUID
    ) -> SocialLink | None:
        """Update a social link, re-validating the URL for its platform."""
        if data.url is not None:
            social_link = await self.get_by_id(social_link_id, user_id)
            if not social_link:
                return None
            data.url = validate_platform_url(social_link.platform, data.url)

        return await super().update(social_link_id, data, user_id)
