"""test suite for the command line."""
import json
import pytest
import respx
import sys
from pathlib import Path
from typer.testing import CliRunner

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from linkedin_profile import config
from linkedin_profile.api.fields import ALL_FIELDS
from linkedin_profile.cli.main import app

MINIMAL_URL = "https://api.linkedin.com/v1/people/~?format=json"
NAMES_URL = "https://api.linkedin.com/v1/people/~:(first-name,last-name)?format=json"

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    config_dir = tmp_path / ".linkedin-profile"
    monkeypatch.setattr(config, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config, "CONFIG_FILE", config_dir / "config")
    monkeypatch.delenv(config.TOKEN_KEY, raising=False)
    monkeypatch.delenv(config.BASE_URL_KEY, raising=False)
    return config_dir


class TestShow:
    def test_missing_token(self):
        with respx.mock(assert_all_called=False) as mock:
            route = mock.get(MINIMAL_URL).respond(json={})
            result = runner.invoke(app, ["show"])
        assert result.exit_code == 1
        assert "no access token" in result.output
        assert not route.called

    def test_json_output(self):
        with respx.mock:
            route = respx.get(NAMES_URL).respond(json={"firstName": "Ann", "lastName": "Lee"})
            result = runner.invoke(app, ["show", "first-name", "last-name", "--token", "tok", "--json"])

        assert result.exit_code == 0, result.output
        assert route.calls.last.request.headers["Authorization"] == "Bearer tok"
        assert json.loads(result.output) == {"firstName": "Ann", "lastName": "Lee"}

    def test_token_from_config(self):
        config.set_access_token("stored")
        with respx.mock:
            route = respx.get(MINIMAL_URL).respond(json={"id": "abc123"})
            result = runner.invoke(app, ["show"])

        assert result.exit_code == 0, result.output
        assert route.calls.last.request.headers["Authorization"] == "Bearer stored"
        assert "abc123" in result.output

    def test_table_output_with_positions(self):
        body = {
            "formattedName": "Ann Lee",
            "location": {"name": "Berlin", "country": {"code": "de"}},
            "positions": {
                "_total": 1,
                "values": [
                    {
                        "title": "CTO",
                        "isCurrent": True,
                        "startDate": {"month": 4, "year": 2020},
                        "company": {"name": "Acme"},
                    }
                ],
            },
        }
        with respx.mock:
            respx.get(MINIMAL_URL).respond(json=body)
            result = runner.invoke(app, ["show", "--token", "tok"])

        assert result.exit_code == 0, result.output
        assert "Ann Lee" in result.output
        assert "Berlin, DE" in result.output
        assert "Acme" in result.output
        assert "2020-04" in result.output

    def test_strict_fails_on_error_status(self):
        with respx.mock:
            respx.get(MINIMAL_URL).respond(status_code=401, json={"status": 401})
            result = runner.invoke(app, ["show", "--token", "tok", "--strict"])

        assert result.exit_code == 1
        assert "HTTP 401" in result.output

    def test_decode_failure(self):
        with respx.mock:
            respx.get(MINIMAL_URL).respond(text="not json")
            result = runner.invoke(app, ["show", "--token", "tok"])

        assert result.exit_code == 1
        assert "Request failed" in result.output

    def test_empty_token_option_falls_back_to_missing(self):
        result = runner.invoke(app, ["show", "--token", ""])
        assert result.exit_code == 1
        assert "no access token" in result.output

    def test_invalid_base_url(self, monkeypatch):
        monkeypatch.setenv(config.BASE_URL_KEY, "https://api.linkedin.com\x7f")
        with respx.mock(assert_all_called=False):
            result = runner.invoke(app, ["show", "--token", "tok"])

        assert result.exit_code == 1
        assert "Request failed" in result.output


class TestFields:
    def test_lists_canonical_fields(self):
        result = runner.invoke(app, ["fields"])
        assert result.exit_code == 0
        assert result.output.split() == list(ALL_FIELDS)


class TestSetToken:
    def test_saves_token(self, isolated_config):
        result = runner.invoke(app, ["set-token", "abc"])
        assert result.exit_code == 0
        assert config.get_access_token() == "abc"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
