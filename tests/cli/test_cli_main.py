"""Integration tests for the CLI: end-to-end command execution."""

import json
import os

import httpx
import pytest
from typer.testing import CliRunner

from shippo_client.cli.main import app
from shippo_client.client import ShippoClient

runner = CliRunner()

TOKEN = "shippo_test_abcdef1234"

PARCEL_PARAMS = (
    "length: 5\nwidth: 5\nheight: 5\ndistance_unit: cm\nweight: 2\nmass_unit: lb\n"
)


@pytest.fixture(autouse=True)
def isolated(monkeypatch, tmp_path):
    """No config files or SHIPPO_* variables from the developer's machine."""
    for key in list(os.environ):
        if key.startswith("SHIPPO_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def fake_api(monkeypatch):
    """Route every client the CLI builds to canned responses."""

    def _install(routes: dict[str, tuple[int, dict]]) -> list[httpx.Request]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            key = f"{request.method} {request.url.path.removeprefix('/v1/')}"
            status, body = routes.get(key, (404, {"detail": "Not found."}))
            return httpx.Response(status, json=body)

        original = ShippoClient.from_config.__func__

        def from_config(cls, config, transport=None):
            return original(cls, config, transport=httpx.MockTransport(handler))

        monkeypatch.setattr(ShippoClient, "from_config", classmethod(from_config))
        return seen

    return _install


class TestHelp:

    def test_lists_commands(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("addresses", "parcels", "shipments", "transactions", "track", "check", "config"):
            assert command in result.stdout

    def test_resource_subcommands(self):
        result = runner.invoke(app, ["parcels", "--help"])
        assert result.exit_code == 0
        for command in ("create", "get", "validate", "list"):
            assert command in result.stdout


class TestCheck:
    """Local validation never needs a token or the network."""

    def test_valid(self, tmp_path):
        (tmp_path / "parcel.yaml").write_text(PARCEL_PARAMS)
        result = runner.invoke(app, ["check", "parcels", "parcel.yaml"])
        assert result.exit_code == 0
        assert "Parameters are valid." in result.stdout
        assert "6 field(s)" in result.stdout

    def test_invalid(self, tmp_path):
        (tmp_path / "parcel.yaml").write_text(
            "length: 5\nwidth: 5\nheight: 5\ndistance_unit: parsec\nmass_unit: lb\n"
        )
        result = runner.invoke(app, ["check", "parcels", "parcel.yaml"])
        assert result.exit_code == 1
        assert "2 error type(s) found" in result.stdout
        assert "E-2001" in result.stdout
        assert "E-2002" in result.stdout

    def test_unknown_resource(self, tmp_path):
        (tmp_path / "parcel.yaml").write_text(PARCEL_PARAMS)
        result = runner.invoke(app, ["check", "tracks", "parcel.yaml"])
        assert result.exit_code == 1
        assert "Unknown resource" in result.stdout

    def test_missing_file(self):
        result = runner.invoke(app, ["check", "parcels", "nope.yaml"])
        assert result.exit_code == 1
        assert "E-2003" in result.stdout


class TestResourceCommands:

    def test_create_json(self, tmp_path, fake_api, parcel_json):
        seen = fake_api({"POST parcels/": (201, parcel_json)})
        (tmp_path / "parcel.yaml").write_text(PARCEL_PARAMS)
        result = runner.invoke(
            app, ["--token", TOKEN, "parcels", "create", "parcel.yaml", "--json"]
        )
        assert result.exit_code == 0, result.stdout
        assert json.loads(result.stdout)["object_id"] == parcel_json["object_id"]
        assert json.loads(seen[0].content)["mass_unit"] == "lb"

    def test_create_invalid_never_sent(self, tmp_path, fake_api):
        seen = fake_api({})
        (tmp_path / "parcel.yaml").write_text("length: five\n")
        result = runner.invoke(app, ["--token", TOKEN, "parcels", "create", "parcel.yaml"])
        assert result.exit_code == 1
        assert "E-2002" in result.stdout
        assert seen == []

    def test_missing_token(self, fake_api):
        fake_api({})
        result = runner.invoke(app, ["addresses", "get", "a1"])
        assert result.exit_code == 1
        assert "E-5002" in result.stdout

    def test_token_from_environment(self, fake_api, address_json, monkeypatch):
        monkeypatch.setenv("SHIPPO_PRIVATE_ACCESS_TOKEN", TOKEN)
        seen = fake_api({"GET addresses/a1/": (200, address_json)})
        result = runner.invoke(app, ["addresses", "get", "a1"])
        assert result.exit_code == 0
        assert seen[0].headers["Authorization"] == f"ShippoToken {TOKEN}"

    def test_not_found(self, fake_api):
        fake_api({})
        result = runner.invoke(app, ["--token", TOKEN, "parcels", "get", "missing"])
        assert result.exit_code == 1
        assert "E-3004" in result.stdout

    def test_list(self, fake_api, address_json, collection_json):
        seen = fake_api({"GET addresses/": (200, collection_json(address_json))})
        result = runner.invoke(
            app, ["--token", TOKEN, "addresses", "list", "--page", "3", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["count"] == 1
        assert seen[0].url.params["page"] == "3"

    def test_shipment_rates(self, fake_api, rate_json, collection_json):
        fake_api({"GET shipments/s1/rates/EUR/": (200, collection_json(rate_json))})
        result = runner.invoke(
            app, ["--token", TOKEN, "shipments", "rates", "s1", "--currency", "EUR", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["results"][0]["provider"] == "USPS"

    def test_track(self, fake_api, track_json):
        fake_api({"GET tracks/usps/9205590164917312751089/": (200, track_json)})
        result = runner.invoke(
            app, ["--token", TOKEN, "track", "usps", "9205590164917312751089", "--json"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["carrier"] == "usps"


class TestConfigCommands:

    def test_validate_with_file(self, tmp_path):
        config_file = tmp_path / "custom.yaml"
        config_file.write_text("api:\n  timeout: 10\n")
        result = runner.invoke(app, ["config", "validate", "--config", str(config_file)])
        assert result.exit_code == 0
        assert "valid" in result.stdout.lower()

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(
            app, ["config", "validate", "--config", str(tmp_path / "nope.yaml")]
        )
        assert result.exit_code == 1

    def test_validate_invalid_values(self, tmp_path):
        (tmp_path / "shippo.yaml").write_text("api:\n  timeout: -1\n")
        result = runner.invoke(app, ["config", "validate"])
        assert result.exit_code == 1
        assert "validation failed" in result.stdout.lower()

    def test_show_masks_token(self):
        result = runner.invoke(app, ["--token", TOKEN, "config", "show"])
        assert result.exit_code == 0
        assert "***1234" in result.stdout
        assert TOKEN not in result.stdout
