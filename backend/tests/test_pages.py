"""Tests for the server-rendered pages and service endpoints."""
import pytest

from app.models.partner_endpoint import PartnerEndpoint
from conftest import VALID_WALLET


def _create(client, name="Acme", **extra):
    payload = {"name": name, "wallet_address": VALID_WALLET, **extra}
    return client.post("/api/partners", json=payload).json()["partner"]["id"]


def _earn(client, partner_id, amount, **extra):
    return client.post("/api/earnings", json={"partner_id": partner_id, "amount_ustx": amount, **extra})


def test_dashboard_after_first_earning(client):
    response = client.post("/api/partners", json={"name": "Acme", "wallet_address": VALID_WALLET})
    partner = response.json()["partner"]
    assert partner["tier"] == "builder"
    assert partner["revenue_share"] == 10

    earned = _earn(client, partner["id"], 5_000_000, endpoint="test")
    assert earned.status_code == 201
    assert client.get(f"/api/partners/{partner['id']}").json()["partner"]["total_earnings"] == 5_000_000

    page = client.get(f"/partners/{partner['id']}")

    assert page.status_code == 200
    assert "text/html" in page.headers["content-type"]
    html = page.text
    assert html.count('class="earning-row"') == 1
    assert "5.000000 STX" in html
    assert "Acme" in html
    assert VALID_WALLET in html
    assert f"/embed/{partner['id']}" in html
    assert "No earnings yet" not in html


def test_dashboard_links_transactions(client):
    partner_id = _create(client)
    _earn(client, partner_id, 1000, endpoint="inference", tx_id="0xdeadbeefcafe")

    html = client.get(f"/partners/{partner_id}").text

    assert "https://explorer.hiro.so/txid/0xdeadbeefcafe" in html
    assert "0xdeadbe..." in html


def test_dashboard_without_earnings(client):
    partner_id = _create(client, twitter="acme", website="https://acme.dev", description="Acme tools")

    html = client.get(f"/partners/{partner_id}").text

    assert "No earnings yet" in html
    assert "https://twitter.com/acme" in html
    assert "https://acme.dev" in html
    assert "Acme tools" in html


@pytest.mark.asyncio
async def test_dashboard_lists_partner_endpoints(client, test_db):
    partner_id = _create(client)
    test_db.add(PartnerEndpoint(partner_id=partner_id, path="/api/v1/inference", price_ustx=2500))
    await test_db.commit()

    html = client.get(f"/partners/{partner_id}").text

    assert "/api/v1/inference" in html
    assert "0.002500 STX" in html


def test_unknown_partner_renders_not_found_page(client):
    response = client.get("/partners/unknown-id")

    assert response.status_code == 200
    assert "Partner Not Found" in response.text


def test_partner_name_is_escaped(client):
    partner_id = _create(client, name="<script>alert(1)</script>")

    html = client.get(f"/partners/{partner_id}").text

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html


@pytest.mark.parametrize("website", ["javascript:alert(1)", " JavaScript:alert(1)", "data:text/html,hi"])
def test_dashboard_does_not_link_non_http_website(client, website):
    partner_id = _create(client, website=website)

    html = client.get(f"/partners/{partner_id}").text

    assert "Website:" in html
    assert 'href="javascript:' not in html.lower()
    assert 'href="data:' not in html


def test_dashboard_links_http_website(client):
    partner_id = _create(client, website="https://acme.example")

    html = client.get(f"/partners/{partner_id}").text

    assert '<a href="https://acme.example"' in html


def test_landing_shows_active_partners_and_pipeline(client):
    active_id = _create(client, name="Acme")
    _earn(client, active_id, 2_000_000)
    client.post("/api/seed-prospects")
    pending_ids = [
        p["id"] for p in client.get("/api/partners").json()["partners"] if p["status"] == "pending"
    ]

    response = client.get("/")

    assert response.status_code == 200
    html = response.text
    assert "x402 Partner Program" in html
    assert f'href="/partners/{active_id}"' in html
    assert all(f'href="/partners/{pid}"' not in html for pid in pending_ids)
    assert "2.000000" in html
    # First 12 prospects appear in the pipeline with prefilled onboarding links
    assert "HeyElsa AI" in html
    assert "/onboard?name=HeyElsa+AI" in html
    assert "Onboard</a>" in html
    assert html.count('class="prospect-card"') == 12


def test_onboard_form_prefill(client):
    response = client.get("/onboard", params={"name": "Heurist AI", "twitter": "heurist_ai", "tier": "ai"})

    assert response.status_code == 200
    html = response.text
    assert 'value="Heurist AI"' in html
    assert 'value="heurist_ai"' in html
    assert '<option value="ai" selected>' in html
    assert 'pattern="^S[PM][A-Z0-9]{38,40}$"' in html


def test_onboard_form_defaults_to_builder(client):
    html = client.get("/onboard", params={"tier": "bogus"}).text

    assert '<option value="builder" selected>' in html


def test_embed_widget(client):
    partner_id = _create(client)
    _earn(client, partner_id, 3_500_000)

    response = client.get(f"/embed/{partner_id}")

    assert response.status_code == 200
    assert "Acme" in response.text
    assert "3.500000" in response.text
    assert "x-frame-options" not in response.headers


def test_embed_widget_unknown_partner(client):
    response = client.get("/embed/unknown-id")

    assert response.status_code == 200
    assert "Partner not found" in response.text


def test_non_embed_pages_deny_framing(client):
    response = client.get("/leaderboard")
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["x-content-type-options"] == "nosniff"


def test_leaderboard_ranks_active_partners(client):
    small = _create(client, name="Small")
    big = _create(client, name="Big")
    _earn(client, small, 100)
    _earn(client, big, 9_000)
    client.post("/api/seed-prospects")

    html = client.get("/leaderboard").text

    assert html.count('class="leaderboard-row"') == 2
    assert html.index("Big") < html.index("Small")
    assert "\U0001F947" in html
    assert "HeyElsa AI" not in html


def test_leaderboard_empty(client):
    assert "No partners yet" in client.get("/leaderboard").text


def test_admin_console_lists_everyone(client):
    partner_id = _create(client, name="Acme")
    _earn(client, partner_id, 1234, endpoint="manual")
    client.post("/api/seed-prospects")

    response = client.get("/admin")

    assert response.status_code == 200
    html = response.text
    assert html.count('class="admin-partner-row"') == 14
    assert html.count('class="admin-earning-row"') == 1
    assert "pending" in html
    assert "Seed Prospect Partners" in html
    assert f"recordEarning('{partner_id}')" in html


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "x402-partners"}


def test_api_directory(client):
    data = client.get("/api").json()

    assert data["service"] == "x402 Partner Program"
    assert data["version"] == "1.0.0"
    assert "POST /api/earnings" in data["endpoints"]
    assert "POST /api/seed-prospects" in data["endpoints"]
