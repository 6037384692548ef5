"""
Tests para cli/form.py - Comandos del formulario.
"""

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from dynaform.cli import app


runner = CliRunner()


@pytest.fixture
def schemas_file(tmp_path):
    """Archivo de esquemas propio."""
    path = tmp_path / "forms.json"
    path.write_text(json.dumps({
        "forms": [
            {
                "key": "ticket",
                "title": "Support Ticket",
                "fields": [
                    {"name": "subject", "type": "text", "label": "Subject", "required": True},
                    {"name": "priority", "type": "dropdown", "label": "Priority",
                     "options": ["Low", "High"], "required": False},
                ],
            },
        ],
    }), encoding="utf-8")
    return path


class TestSchemasCommand:
    """Tests para comando schemas."""

    def test_lists_system_schemas(self):
        result = runner.invoke(app, ["schemas"])

        assert result.exit_code == 0
        assert "userInfo" in result.output
        assert "Address Information" in result.output
        assert "paymentInfo" in result.output

    def test_custom_file(self, schemas_file):
        result = runner.invoke(app, ["--schemas", str(schemas_file), "schemas"])

        assert result.exit_code == 0
        assert "ticket" in result.output
        assert "userInfo" not in result.output

    def test_bad_file(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("[]", encoding="utf-8")

        result = runner.invoke(app, ["--schemas", str(bad), "schemas"])

        assert result.exit_code == 1
        assert "forms" in result.output


class TestShowCommand:
    """Tests para comando show."""

    def test_show_dropdown_options(self):
        result = runner.invoke(app, ["show", "addressInfo"])

        assert result.exit_code == 0
        assert "Zip Code" in result.output
        assert "California" in result.output

    def test_unknown_form_type(self):
        result = runner.invoke(app, ["show", "shippingInfo"])

        assert result.exit_code == 1
        assert "Unknown form type" in result.output


class TestCheckCommand:
    """Tests para comando check."""

    def test_missing_required(self):
        result = runner.invoke(app, ["check", "userInfo", "-v", "firstName=A"])

        assert result.exit_code == 1
        assert "Last Name is required" in result.output
        assert "First Name is required" not in result.output
        assert "50%" in result.output

    def test_complete(self):
        result = runner.invoke(app, [
            "check", "userInfo",
            "-v", "firstName=A",
            "-v", "lastName=B",
            "-v", "age=30",
        ])

        assert result.exit_code == 0
        assert "100%" in result.output
        assert "all required fields present" in result.output

    def test_custom_schema(self, schemas_file):
        result = runner.invoke(app, ["--schemas", str(schemas_file), "check", "ticket", "-v", "subject=Hi"])

        assert result.exit_code == 0

    def test_unknown_field(self):
        result = runner.invoke(app, ["check", "userInfo", "-v", "street=Main"])

        assert result.exit_code == 1
        assert "street" in result.output

    def test_number_field(self):
        result = runner.invoke(app, ["check", "userInfo", "-v", "age=abc"])

        assert result.exit_code == 1
        assert "Age must be a number" in result.output

    def test_bad_assignment(self):
        result = runner.invoke(app, ["check", "userInfo", "-v", "firstName"])

        assert result.exit_code == 2


class TestRunCommand:
    """Tests para comando run (visor simulado)."""

    def test_unknown_form_type(self):
        result = runner.invoke(app, ["run", "--form-type", "nope"])

        assert result.exit_code == 1
        assert "Unknown form type" in result.output

    def test_runs_viewer_with_selected_form(self):
        def fake_viewer(controller):
            controller.set_field_value("street", "Main")
            controller.set_field_value("city", "Austin")
            controller.set_field_value("state", "Texas")
            controller.submit()
            return controller.snapshot()

        with patch("dynaform.cli.form.interactive_form", side_effect=fake_viewer):
            result = runner.invoke(app, ["run", "-f", "addressInfo"])

        assert result.exit_code == 0
        assert "1 entry submitted" in result.output
        assert "Austin" in result.output

    def test_asks_form_type(self):
        seen = {}

        def fake_viewer(controller):
            seen["form_type"] = controller.form_type
            return controller.snapshot()

        with patch("dynaform.cli.form.questionary.select") as select, \
                patch("dynaform.cli.form.interactive_form", side_effect=fake_viewer):
            select.return_value.ask.return_value = "paymentInfo"
            result = runner.invoke(app, ["run"])

        assert result.exit_code == 0
        assert seen["form_type"] == "paymentInfo"
        assert "No entries submitted" in result.output

    def test_cancelled_selection(self):
        with patch("dynaform.cli.form.questionary.select") as select:
            select.return_value.ask.return_value = None
            result = runner.invoke(app, ["run"])

        assert result.exit_code == 0

    def test_empty_schema_file(self, tmp_path):
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"forms": []}), encoding="utf-8")

        with patch("dynaform.cli.form.questionary.select") as select:
            result = runner.invoke(app, ["--schemas", str(path), "run"])

        assert result.exit_code == 1
        assert "No form schemas defined" in result.output
        select.assert_not_called()

    def test_default_form_type_preselected(self):
        with patch("dynaform.cli.form.questionary.select") as select:
            select.return_value.ask.return_value = None
            result = runner.invoke(app, ["--default-form-type", "addressInfo", "run"])

        assert result.exit_code == 0
        assert select.call_args.kwargs["default"].value == "addressInfo"

    def test_default_form_type_from_env(self):
        with patch("dynaform.cli.form.questionary.select") as select:
            select.return_value.ask.return_value = None
            result = runner.invoke(app, ["run"], env={"DYNAFORM_DEFAULT_FORM_TYPE": "paymentInfo"})

        assert result.exit_code == 0
        assert select.call_args.kwargs["default"].value == "paymentInfo"

    def test_unknown_default_falls_back_to_registry(self):
        with patch("dynaform.cli.form.questionary.select") as select:
            select.return_value.ask.return_value = None
            result = runner.invoke(app, ["--default-form-type", "nope", "run"])

        assert result.exit_code == 0
        assert select.call_args.kwargs["default"].value == "userInfo"
