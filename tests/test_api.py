"""
API tests for Cash Deposit API.
Tests account registration, lookup, and error handling.
"""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.errors import register_exception_handlers


# ==================== HEALTH CHECK TESTS ====================

def test_root_endpoint(client):
    """Test root endpoint returns correct response."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "running"
    assert "Cash Deposit API" in data["message"]


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_route_uses_error_body(client):
    """Test that router-level 404s use the {"error": ...} shape."""
    response = client.get("/nowhere")
    assert response.status_code == 404
    assert "error" in response.json()


# ==================== ACCOUNT TESTS ====================

def test_empty_account_table(client):
    """Test listing accounts on an empty table returns an empty array."""
    response = client.get("/account")
    assert response.status_code == 200
    assert response.json() == []


def test_create_account(client):
    """Test registering a new account."""
    response = client.post(
        "/account",
        json={
            "idcardno": "1234567890123456",
            "name": "Michael",
            "email": "mike@x.com"
        }
    )
    assert response.status_code == 201
    data = response.json()
    assert data["accountid"] == 1
    assert data["idcardno"] == "1234567890123456"
    assert data["name"] == "Michael"
    assert data["email"] == "mike@x.com"
    assert data["balance"] == 0


def test_create_duplicate_account(client):
    """Test that reusing an ID card number fails without a second row."""
    payload = {"idcardno": "1234567890123456", "name": "Michael", "email": "mike@x.com"}
    assert client.post("/account", json=payload).status_code == 201

    response = client.post(
        "/account",
        json={**payload, "name": "Another Person", "email": "other@x.com"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Account exists!"}

    assert len(client.get("/account").json()) == 1


def test_create_account_invalid_id_card(client):
    """Test that a non-numeric ID card is rejected."""
    response = client.post(
        "/account",
        json={"idcardno": "1234567890ABCDEF", "name": "Michael", "email": "mike@x.com"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID Card"
    assert client.get("/account").json() == []


def test_create_account_short_id_card(client):
    """Test that a 15-digit ID card is rejected."""
    response = client.post(
        "/account",
        json={"idcardno": "123456789012345", "name": "Michael", "email": "mike@x.com"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID Card"


def test_create_account_invalid_name(client):
    """Test that names with digits are rejected."""
    response = client.post(
        "/account",
        json={"idcardno": "1234567890123456", "name": "th3nun", "email": "th3nun@mail.com"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid Name"


def test_create_account_invalid_email(client):
    """Test that an address without @ is rejected."""
    response = client.post(
        "/account",
        json={"idcardno": "1234567890123456", "name": "Michael", "email": "michaelmail.com"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid Email Address"


def test_create_account_reports_first_invalid_field(client):
    """Test that ID card is checked before name and email."""
    response = client.post(
        "/account",
        json={"idcardno": "bad", "name": "x", "email": "nope"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID Card"


def test_create_account_missing_fields(client):
    """Test that missing fields are reported by field validation."""
    response = client.post("/account", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid ID Card"


def test_create_account_malformed_json(client):
    """Test that a broken JSON body is rejected."""
    response = client.post(
        "/account",
        content=b'{"idcardno": "1234567890123456",',
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request payload"}


def test_get_account(client, create_account):
    """Test retrieving account details."""
    created = create_account(name="Alice")

    response = client.get(f"/account/{created['accountid']}")
    assert response.status_code == 200
    data = response.json()
    assert data["accountid"] == created["accountid"]
    assert data["name"] == "Alice"
    assert data["balance"] == 0


def test_get_nonexistent_account(client):
    """Test that getting non-existent account returns 404."""
    response = client.get("/account/1")
    assert response.status_code == 404
    assert response.json()["error"] == "Account not found"


def test_get_account_non_numeric_id(client):
    """Test that a non-numeric account id is a bad request."""
    response = client.get("/account/abc")
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid account ID"


def test_list_accounts(client, create_account):
    """Test listing accounts."""
    for _ in range(3):
        create_account()

    response = client.get("/account")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert [a["accountid"] for a in data] == [1, 2, 3]


def test_list_accounts_orders_by_latest_deposit(client, create_account):
    """Test that the most recently credited account is listed first."""
    for _ in range(3):
        create_account()

    client.post("/transaction", json={"depositdest": 2, "externalsource": "a@b.com", "amount": 10})
    client.post("/transaction", json={"depositdest": 1, "externalsource": "a@b.com", "amount": 5})

    data = client.get("/account").json()
    assert [a["accountid"] for a in data] == [1, 2, 3]
    assert [a["balance"] for a in data] == [5, 10, 0]

    client.post("/transaction", json={"depositdest": 3, "externalsource": "a@b.com", "amount": 1})
    data = client.get("/account").json()
    assert [a["accountid"] for a in data] == [3, 1, 2]


def test_create_account_wrongly_typed_field(client):
    """Test that a numeric ID card is a malformed payload."""
    response = client.post(
        "/account",
        json={"idcardno": 1234567890123456, "name": "Michael", "email": "mike@x.com"}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request payload"}
    assert client.get("/account").json() == []


def test_get_account_id_out_of_range(client):
    """Test that ids beyond the store's integer range are a bad request."""
    for path in ("/account/99999999999999999999", "/account/2147483648"):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid account ID"}


def test_history_id_out_of_range(client):
    """Test that history ids beyond the store's integer range are a bad request."""
    response = client.get("/account/99999999999999999999/history")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid account ID"}


def test_get_account_largest_id_not_found(client):
    """Test that the largest storable id is looked up normally."""
    response = client.get("/account/2147483647")
    assert response.status_code == 404
    assert response.json()["error"] == "Account not found"


# ==================== ERROR HANDLER TESTS ====================

def test_unhandled_error_uses_error_body():
    """Test that unexpected exceptions become a JSON 500."""
    broken = FastAPI()
    register_exception_handlers(broken)

    @broken.get("/boom")
    def boom():
        raise OverflowError("int too large")

    response = TestClient(broken, raise_server_exceptions=False).get("/boom")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
