"""
Some tests for the expects and returns decorators.
"""

import json
from http import HTTPStatus

from aiohttp.test_utils import TestClient

from carrental.serializer import JSendSchema, JSendStatus, returns


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient):
        """Assert that trying to add a car with no data fails."""
        resp = await client.post('/api/v1/cars')
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL
        assert "schema" in data["data"]

    async def test_expects_malformed_json(self, client: TestClient):
        """Assert that trying to add a car with broken JSON fails."""
        resp = await client.post('/api/v1/cars', data="[", headers={"Content-Type": "application/json"})
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_invalid_data(self, client: TestClient):
        """Assert that trying to add a car with invalid data fails."""
        resp = await client.post('/api/v1/cars', json={"wrong": "data"})
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        assert "make" in data["data"]["errors"]
        assert "wrong" in data["data"]["errors"]


class TestReturnsDecorator:

    async def test_returns_named_schema(self):
        """Assert that the named schema picks the status code."""

        @returns(missing=(JSendSchema(), HTTPStatus.NOT_FOUND), found=JSendSchema())
        async def handler(view):
            return "missing", {"status": JSendStatus.FAIL, "data": {"message": "Gone."}}

        resp = await handler(None)
        assert resp.status == 404
        assert json.loads(resp.text) == {"status": "fail", "data": {"message": "Gone."}}

    async def test_returns_unknown_schema_name(self):
        """Assert that returning under an unknown name gives an error instead."""

        @returns(found=JSendSchema())
        async def handler(view):
            return "lost", {"status": JSendStatus.SUCCESS, "data": {}}

        resp = await handler(None)
        data = JSendSchema().load(json.loads(resp.text))
        assert resp.status == 500
        assert data["status"] == JSendStatus.ERROR
        assert "came out wrong" in data["message"]
