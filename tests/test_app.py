async def test_health(client):
    resp = await client.get("/api/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "OK"


async def test_openapi_marks_admin_routes_as_bearer(client):
    schema = (await client.get("/openapi.json")).json()

    assert schema["components"]["securitySchemes"]["BearerAuth"]["scheme"] == "bearer"
    assert schema["paths"]["/api/admin/menu"]["get"]["security"] == [{"BearerAuth": []}]
    assert "security" not in schema["paths"]["/api/menu"]["get"]
    assert "security" not in schema["paths"]["/api/admin/login"]["post"]


async def test_malformed_body_uses_error_envelope(client):
    resp = await client.post("/api/admin/login", json={"username": "owner"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert body["details"][0]["field"] == "body.password"
