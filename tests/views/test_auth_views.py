from aiohttp.test_utils import TestClient
from marshmallow.fields import String

from carrental.serializer import JSendSchema, JSendStatus
from carrental.serializer.models import UserSchema
from tests.conftest import PASSWORD

auth_response_schema = JSendSchema.of(user=UserSchema(), message=String())


class TestRegisterView:

    async def test_register(self, client: TestClient):
        """Assert that a user can register."""
        request_data = {"name": "Alex", "email": "Alex@Example.com", "password": "abcdef", "role": "customer"}
        response = await client.post('/api/v1/auth/register', json=request_data)
        response_data = auth_response_schema.load(await response.json())

        assert response.status == 201
        assert response_data["status"] == JSendStatus.SUCCESS
        assert response_data["data"]["message"] == "Registration successful."
        assert response_data["data"]["user"]["email"] == "alex@example.com"
        assert response_data["data"]["user"]["role"].value == "CUSTOMER"

    async def test_register_duplicate(self, client: TestClient, random_user):
        request_data = {"name": "Alex", "email": random_user.email.upper(), "password": "abcdef", "role": "ADMIN"}
        response = await client.post('/api/v1/auth/register', json=request_data)
        response_data = JSendSchema().load(await response.json())

        assert response.status == 409
        assert response_data["status"] == JSendStatus.FAIL
        assert response_data["data"]["message"] == "An account with this email already exists."

    async def test_register_missing_name(self, client: TestClient):
        request_data = {"email": "alex@example.com", "password": "abcdef", "role": "ADMIN"}
        response = await client.post('/api/v1/auth/register', json=request_data)
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert response_data["data"]["message"] == "Name is required."

    async def test_register_bad_role(self, client: TestClient):
        request_data = {"name": "Alex", "email": "alex@example.com", "password": "abcdef", "role": "manager"}
        response = await client.post('/api/v1/auth/register', json=request_data)
        response_data = JSendSchema().load(await response.json())

        assert response.status == 400
        assert response_data["data"]["message"] == "Role must be CUSTOMER or ADMIN."


class TestLoginView:

    async def test_login(self, client: TestClient, random_user):
        request_data = {"email": random_user.email, "password": PASSWORD}
        response = await client.post('/api/v1/auth/login', json=request_data)
        response_data = auth_response_schema.load(await response.json())

        assert response.status == 200
        assert response_data["data"]["message"] == "Login successful."
        assert response_data["data"]["user"]["id"] == random_user.id

    async def test_login_failures_match(self, client: TestClient, random_user):
        """Assert that a wrong password and an unknown email are reported identically."""
        wrong_password = await client.post(
            '/api/v1/auth/login', json={"email": random_user.email, "password": "wrong-password"}
        )
        unknown_email = await client.post(
            '/api/v1/auth/login', json={"email": "nobody@example.com", "password": PASSWORD}
        )

        assert wrong_password.status == unknown_email.status == 401
        assert await wrong_password.json() == await unknown_email.json()
        assert (await unknown_email.json())["data"]["message"] == "Invalid email or password."
