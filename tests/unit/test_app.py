"""Tests for the CDK application entry point."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import aws_cdk as cdk
import pytest

from signal_frontend import app as app_module

REQUIRED_VARS = ("HOSTED_ZONE_ID", "HOSTED_ZONE_NAME", "HOSTED_ZONE_CERTIFICATE")


@pytest.fixture(autouse=True)
def no_dotenv():
  """Keep a developer's .env file out of the tests."""
  with patch.object(app_module, "load_dotenv") as mock_load:
    yield mock_load


class TestGetAccountId:
  """Tests for get_account_id."""

  def test_prefers_cdk_default_account(self, monkeypatch: pytest.MonkeyPatch) -> None:
    """The CDK CLI's resolved account wins over STS."""
    monkeypatch.setenv("CDK_DEFAULT_ACCOUNT", "111111111111")

    with patch.object(app_module.boto3, "client") as mock_client:
      assert app_module.get_account_id() == "111111111111"

    mock_client.assert_not_called()

  def test_falls_back_to_sts(self, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without CDK_DEFAULT_ACCOUNT the caller identity is used."""
    monkeypatch.delenv("CDK_DEFAULT_ACCOUNT", raising=False)
    mock_sts = MagicMock()
    mock_sts.get_caller_identity.return_value = {"Account": "222222222222"}

    with patch.object(app_module.boto3, "client", return_value=mock_sts) as mock_client:
      assert app_module.get_account_id() == "222222222222"

    mock_client.assert_called_once_with("sts")


class TestMain:
  """Tests for main."""

  def test_missing_config_exits_nonzero(
    self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
  ) -> None:
    """A missing variable aborts with status 1 and names the variable."""
    for name in REQUIRED_VARS:
      monkeypatch.delenv(name, raising=False)

    with (
      patch.object(app_module, "FrontendStack") as mock_stack,
      pytest.raises(SystemExit) as exc_info,
    ):
      app_module.main()

    assert exc_info.value.code == 1
    assert "HOSTED_ZONE_ID" in capsys.readouterr().err
    mock_stack.assert_not_called()

  def test_synthesizes_stack(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """With complete configuration the stack is created and synthesized."""
    monkeypatch.setenv("HOSTED_ZONE_ID", "Z123")
    monkeypatch.setenv("HOSTED_ZONE_NAME", "example.com")
    monkeypatch.setenv(
      "HOSTED_ZONE_CERTIFICATE",
      "arn:aws:acm:us-east-1:123456789012:certificate/abc-123",
    )
    monkeypatch.setenv("CDK_DEFAULT_ACCOUNT", "123456789012")
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("REMOVAL_POLICY", raising=False)
    monkeypatch.delenv("SIGNAL_RECORD_NAME", raising=False)
    real_app = cdk.App

    with patch.object(
      app_module.cdk, "App", side_effect=lambda: real_app(outdir=str(tmp_path))
    ):
      app_module.main()

    assert (tmp_path / "SignalFrontend.template.json").exists()

  def test_malformed_yaml_exits_nonzero(
    self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
  ) -> None:
    """A config file without a mapping aborts with status 1."""
    config_path = tmp_path / "frontend.yaml"
    config_path.write_text("- a\n- b\n")
    real_app = cdk.App

    with (
      patch.object(
        app_module.cdk,
        "App",
        side_effect=lambda: real_app(
          outdir=str(tmp_path), context={"config": str(config_path)}
        ),
      ),
      patch.object(app_module, "FrontendStack") as mock_stack,
      pytest.raises(SystemExit) as exc_info,
    ):
      app_module.main()

    assert exc_info.value.code == 1
    assert "must contain a mapping" in capsys.readouterr().err
    mock_stack.assert_not_called()
