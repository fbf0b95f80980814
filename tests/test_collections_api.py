"""Tests for the social link, payment method and QR code routes."""

import pytest


async def create(client, headers, path: str, payload: dict) -> dict:
    response = await client.post(path, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


class TestSocialLinks:
    """Tests for /api/v1/social-links."""

    @pytest.mark.asyncio
    async def test_new_links_append_to_end(self, client, headers):
        first = await create(client, headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/creator",
        })
        second = await create(client, headers, "/api/v1/social-links", {
            "platform": "twitch", "url": "https://twitch.tv/creator", "label": "Live",
        })

        assert first["position"] == 0
        assert first["label"] == "instagram"
        assert second["position"] == 1
        assert second["label"] == "Live"

    @pytest.mark.asyncio
    async def test_url_is_normalized(self, client, headers):
        link = await create(client, headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/creator/?igsh=abc123",
        })

        assert link["url"] == "https://instagram.com/creator"

    @pytest.mark.asyncio
    async def test_url_must_match_platform(self, client, headers):
        response = await client.post(
            "/api/v1/social-links",
            json={"platform": "tiktok", "url": "https://instagram.com/creator"},
            headers=headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_duplicate_platform_conflicts(self, client, headers):
        payload = {"platform": "youtube", "url": "https://youtube.com/@creator"}
        await create(client, headers, "/api/v1/social-links", payload)

        response = await client.post("/api/v1/social-links", json=payload, headers=headers)

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_update_keeps_position(self, client, headers):
        await create(client, headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/creator",
        })
        link = await create(client, headers, "/api/v1/social-links", {
            "platform": "twitter", "url": "https://x.com/creator",
        })

        response = await client.put(
            f"/api/v1/social-links/{link['id']}",
            json={"label": "X", "enabled": False},
            headers=headers,
        )

        assert response.status_code == 200
        assert response.json()["label"] == "X"
        assert response.json()["enabled"] is False
        assert response.json()["position"] == 1

    @pytest.mark.asyncio
    async def test_update_revalidates_url(self, client, headers):
        link = await create(client, headers, "/api/v1/social-links", {
            "platform": "twitter", "url": "https://x.com/creator",
        })

        response = await client.put(
            f"/api/v1/social-links/{link['id']}",
            json={"url": "https://example.com/not-twitter"},
            headers=headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_null_for_required_field_rejected(self, client, headers):
        link = await create(client, headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/creator",
        })

        response = await client.put(
            f"/api/v1/social-links/{link['id']}", json={"label": None}, headers=headers
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_delete_closes_gap(self, client, headers):
        links = []
        for platform, url in [
            ("instagram", "https://instagram.com/creator"),
            ("twitter", "https://x.com/creator"),
            ("youtube", "https://youtube.com/@creator"),
        ]:
            links.append(await create(client, headers, "/api/v1/social-links", {
                "platform": platform, "url": url,
            }))

        response = await client.delete(f"/api/v1/social-links/{links[1]['id']}", headers=headers)
        assert response.status_code == 204

        rows = (await client.get("/api/v1/social-links", headers=headers)).json()
        assert [(row["id"], row["position"]) for row in rows] == [
            (links[0]["id"], 0),
            (links[2]["id"], 1),
        ]

    @pytest.mark.asyncio
    async def test_other_users_link_is_not_found(self, client, headers, other_headers):
        link = await create(client, headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/creator",
        })

        update = await client.put(
            f"/api/v1/social-links/{link['id']}", json={"label": "mine now"}, headers=other_headers
        )
        delete = await client.delete(f"/api/v1/social-links/{link['id']}", headers=other_headers)
        listed = await client.get("/api/v1/social-links", headers=other_headers)

        assert update.status_code == 404
        assert delete.status_code == 404
        assert listed.json() == []


class TestPaymentMethods:
    """Tests for /api/v1/payment-methods."""

    @pytest.mark.asyncio
    async def test_url_defaults_to_handle(self, client, headers):
        method = await create(client, headers, "/api/v1/payment-methods", {
            "type": "cashapp", "name": "Cash App", "handle": "$creator",
        })

        assert method["url"] == "$creator"
        assert method["position"] == 0

    @pytest.mark.asyncio
    async def test_only_one_preferred(self, client, headers):
        first = await create(client, headers, "/api/v1/payment-methods", {
            "type": "venmo", "name": "Venmo", "handle": "@creator", "preferred": True,
        })
        second = await create(client, headers, "/api/v1/payment-methods", {
            "type": "paypal", "name": "PayPal", "url": "https://paypal.me/creator", "preferred": True,
        })

        rows = (await client.get("/api/v1/payment-methods", headers=headers)).json()
        preferred = {row["id"]: row["preferred"] for row in rows}

        assert preferred == {first["id"]: False, second["id"]: True}

    @pytest.mark.asyncio
    async def test_delete_first_renumbers_rest(self, client, headers):
        methods = []
        for kind in ["venmo", "zelle", "crypto"]:
            methods.append(await create(client, headers, "/api/v1/payment-methods", {
                "type": kind, "name": kind.title(), "handle": f"@{kind}",
            }))

        await client.delete(f"/api/v1/payment-methods/{methods[0]['id']}", headers=headers)

        rows = (await client.get("/api/v1/payment-methods", headers=headers)).json()
        assert [row["position"] for row in rows] == [0, 1]
        assert [row["id"] for row in rows] == [methods[1]["id"], methods[2]["id"]]

    @pytest.mark.asyncio
    async def test_update_missing_returns_404(self, client, headers):
        response = await client.put(
            "/api/v1/payment-methods/00000000-0000-0000-0000-000000000000",
            json={"name": "Nope"},
            headers=headers,
        )

        assert response.status_code == 404


class TestQRCodes:
    """Tests for /api/v1/qr-codes."""

    @pytest.mark.asyncio
    async def test_cannot_link_other_users_item(self, client, headers, other_headers):
        theirs = await create(client, other_headers, "/api/v1/social-links", {
            "platform": "instagram", "url": "https://instagram.com/other",
        })

        response = await client.post(
            "/api/v1/qr-codes",
            json={
                "type": "social",
                "name": "Not mine",
                "data_content": "https://instagram.com/other",
                "linked_social_link_id": theirs["id"],
            },
            headers=headers,
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_cannot_link_two_items(self, client, headers):
        response = await client.post(
            "/api/v1/qr-codes",
            json={
                "type": "custom",
                "name": "Both",
                "data_content": "https://example.com",
                "linked_social_link_id": "00000000-0000-0000-0000-000000000001",
                "linked_payment_method_id": "00000000-0000-0000-0000-000000000002",
            },
            headers=headers,
        )

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_create_update_delete(self, client, headers):
        first = await create(client, headers, "/api/v1/qr-codes", {
            "type": "profile", "name": "Profile", "data_content": "https://tipjar.example/creator",
        })
        second = await create(client, headers, "/api/v1/qr-codes", {
            "type": "custom", "name": "Merch", "data_content": "https://shop.example",
        })

        assert (first["position"], second["position"]) == (0, 1)
        assert first["scan_count"] == 0

        update = await client.put(
            f"/api/v1/qr-codes/{second['id']}", json={"is_active": False}, headers=headers
        )
        assert update.json()["is_active"] is False

        await client.delete(f"/api/v1/qr-codes/{first['id']}", headers=headers)
        rows = (await client.get("/api/v1/qr-codes", headers=headers)).json()
        assert [(row["id"], row["position"]) for row in rows] == [(second["id"], 0)]

    @pytest.mark.asyncio
    async def test_null_for_required_field_rejected(self, client, headers):
        qr = await create(client, headers, "/api/v1/qr-codes", {
            "type": "profile", "name": "Profile", "data_content": "https://tipjar.example/creator",
        })

        name = await client.put(f"/api/v1/qr-codes/{qr['id']}", json={"name": None}, headers=headers)
        active = await client.put(
            f"/api/v1/qr-codes/{qr['id']}", json={"is_active": None}, headers=headers
        )
        description = await client.put(
            f"/api/v1/qr-codes/{qr['id']}", json={"description": None}, headers=headers
        )

        assert name.status_code == 422
        assert active.status_code == 422
        assert description.status_code == 200
        assert description.json()["name"] == "Profile"


class TestHealth:
    """Tests for unauthenticated endpoints."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.json() == {"status": "healthy", "service": "tipjar-profile-service"}
