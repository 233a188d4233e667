"""Session and Navigation Routes: login/logout transitions and token-driven views."""


async def test_session_starts_logged_out_on_home(client):
    res = await client.get("/api/v1/session")
    assert res.json() == {"authorized": False, "view": "home", "product_id": None}


async def test_wrong_passcode_returns_401_and_keeps_state(client):
    res = await client.post("/api/v1/session/login", json={"passcode": "nope"})
    assert res.status_code == 401
    error = res.json()["error"]
    assert error["code"] == "INVALID_PASSCODE"
    assert error["message"] == "Incorrect passcode."
    assert (await client.get("/api/v1/session")).json()["authorized"] is False


async def test_login_moves_to_admin(client):
    res = await client.post("/api/v1/session/login", json={"passcode": "test-passcode"})
    assert res.status_code == 200
    assert res.json()["authorized"] is True
    assert res.json()["view"] == "admin"


async def test_logout_moves_home(admin_client):
    res = await admin_client.post("/api/v1/session/logout")
    assert res.json() == {"authorized": False, "view": "home", "product_id": None}


async def test_navigation_admin_prompts_login_when_logged_out(client):
    res = await client.post("/api/v1/navigation", json={"token": "admin"})
    assert res.json()["view"] == "admin_login_prompt"


async def test_navigation_product_detail(client):
    res = await client.post("/api/v1/navigation", json={"token": "product/blade-001"})
    assert res.json() == {
        "token": "product/blade-001", "view": "product_detail", "product_id": "blade-001",
    }


async def test_navigation_unknown_token_falls_back_home(client):
    res = await client.post("/api/v1/navigation", json={"token": "xyz"})
    assert res.json()["view"] == "home"


async def test_health(client):
    assert (await client.get("/api/v1/health/")).status_code == 200
    ready = await client.get("/api/v1/health/ready")
    assert ready.json()["status"] == "ready"


async def test_readiness_reports_storage_outage(client, api_ctx):
    api_ctx.storage.available = False
    res = await client.get("/api/v1/health/ready")
    assert res.status_code == 503
