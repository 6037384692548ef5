"""Tests para core/controller.py - Controlador del formulario."""

import pytest

from dynaform.core.controller import (
    DELETE_SUCCESS_MESSAGE,
    SUBMIT_SUCCESS_MESSAGE,
    FormController,
    FormPhase,
)
from dynaform.exceptions import LedgerIndexError, UnknownField, UnknownFormType


def _fill_user(ctrl, first="A", last="B"):
    ctrl.set_field_value("firstName", first)
    ctrl.set_field_value("lastName", last)


class TestInitialState:
    """Tests para el estado inicial."""

    def test_default_form_type(self, registry):
        ctrl = FormController(registry)
        assert ctrl.form_type == "userInfo"
        assert ctrl.values == {}
        assert ctrl.errors == {}
        assert ctrl.progress == 0.0
        assert ctrl.phase == FormPhase.IDLE
        assert len(ctrl.ledger) == 0

    def test_unknown_initial_form_type(self, registry):
        with pytest.raises(UnknownFormType):
            FormController(registry, "nope")


class TestSelectFormType:
    """Tests para select_form_type."""

    def test_clears_state(self, controller):
        controller.set_field_value("firstName", "A")
        controller.submit()

        controller.select_form_type("addressInfo")

        assert controller.form_type == "addressInfo"
        assert controller.values == {}
        assert controller.errors == {}
        assert controller.progress == 0.0
        assert controller.phase == FormPhase.IDLE

    def test_no_leak_between_schemas_with_shared_names(self, custom_registry):
        """Test un valor no pasa a otro esquema aunque el nombre coincida."""
        ctrl = FormController(custom_registry, "contact")
        ctrl.set_field_value("firstName", "Ana")

        ctrl.select_form_type("feedback")
        ctrl.select_form_type("contact")

        assert ctrl.values == {}
        assert ctrl.progress == 0.0

    def test_unknown_keeps_state(self, controller):
        """Test una clave desconocida no cambia el estado."""
        controller.set_field_value("firstName", "A")

        with pytest.raises(UnknownFormType):
            controller.select_form_type("nope")

        assert controller.form_type == "userInfo"
        assert controller.values == {"firstName": "A"}
        assert controller.progress == 50.0

    def test_ledger_survives_switch(self, controller):
        _fill_user(controller)
        controller.submit()
        controller.select_form_type("paymentInfo")
        assert len(controller.ledger) == 1


class TestSetFieldValue:
    """Tests para set_field_value."""

    def test_recomputes_progress(self, controller):
        assert controller.set_field_value("firstName", "A") == 50.0
        assert controller.progress == 50.0
        assert controller.phase == FormPhase.EDITING

    def test_optional_does_not_change_progress(self, controller):
        controller.set_field_value("age", 30)
        assert controller.progress == 0.0
        assert controller.values == {"age": 30}

    def test_clearing_a_value(self, controller):
        _fill_user(controller)
        controller.set_field_value("lastName", "")
        assert controller.progress == 50.0

    def test_unknown_field(self, controller):
        with pytest.raises(UnknownField):
            controller.set_field_value("street", "Main")
        assert controller.values == {}

    def test_errors_not_recomputed(self, controller):
        """Test los errores solo cambian al enviar."""
        controller.submit()
        controller.set_field_value("firstName", "A")
        assert "firstName" in controller.errors

    def test_values_property_is_a_copy(self, controller):
        controller.values["firstName"] = "X"
        assert controller.values == {}


class TestSubmit:
    """Tests para submit."""

    def test_user_info_scenario(self, controller, notifications):
        """Test escenario completo de userInfo."""
        controller.set_field_value("firstName", "A")

        result = controller.submit()

        assert result.ok is False
        assert result.errors == {"lastName": "Last Name is required"}
        assert controller.errors == {"lastName": "Last Name is required"}
        assert len(controller.ledger) == 0
        assert controller.progress == 50.0
        assert controller.values == {"firstName": "A"}
        assert notifications == []

        controller.set_field_value("lastName", "B")
        result = controller.submit()

        assert result.ok is True
        assert [r.values for r in controller.ledger] == [{"firstName": "A", "lastName": "B"}]
        assert controller.values == {}
        assert controller.errors == {}
        assert controller.progress == 0.0
        assert controller.phase == FormPhase.IDLE
        assert notifications == [SUBMIT_SUCCESS_MESSAGE]

    def test_failed_submit_reports_exactly_missing(self, registry):
        ctrl = FormController(registry, "paymentInfo")
        ctrl.set_field_value("cvv", "123")

        result = ctrl.submit()

        assert set(result.errors) == {"cardNumber", "expiryDate", "cardholderName"}
        assert result.errors["expiryDate"] == "Expiry Date is required"

    def test_success_appends_one_record(self, controller):
        _fill_user(controller)
        controller.set_field_value("age", 41)

        result = controller.submit()

        assert len(controller.ledger) == 1
        assert result.record is controller.ledger[0]
        assert result.record.values == {"firstName": "A", "lastName": "B", "age": 41}
        assert result.record.form_type == "userInfo"

    def test_record_is_a_snapshot(self, controller):
        """Test editar después de enviar no modifica el registro."""
        _fill_user(controller)
        result = controller.submit()
        controller.set_field_value("firstName", "Z")
        assert result.record.values["firstName"] == "A"

    def test_submit_clears_previous_errors(self, controller):
        controller.submit()
        _fill_user(controller)
        controller.submit()
        assert controller.errors == {}

    def test_zero_required_schema_submits_empty(self, custom_registry):
        ctrl = FormController(custom_registry, "feedback")
        assert ctrl.submit().ok is True
        assert ctrl.ledger[0].values == {}

    def test_snapshot_is_consistent(self, controller):
        """Test el snapshot tras enviar no tiene valores y sí el registro."""
        _fill_user(controller)
        controller.submit()

        snap = controller.snapshot()

        assert snap.values == {}
        assert snap.progress == 0.0
        assert len(snap.entries) == 1
        assert snap.form_type == "userInfo"

    def test_snapshot_entries_are_read_only(self, controller):
        """Test los registros del snapshot no se pueden modificar."""
        _fill_user(controller)
        controller.submit()
        snap = controller.snapshot()

        with pytest.raises(TypeError):
            snap.entries[0].values["firstName"] = "Z"

        assert controller.ledger[0].values == {"firstName": "A", "lastName": "B"}


class TestLoadForEdit:
    """Tests para load_for_edit."""

    def test_checkout_and_resubmit(self, controller):
        """Test editar y reenviar sin cambios mantiene la cantidad de registros."""
        _fill_user(controller, "A", "1")
        controller.submit()
        _fill_user(controller, "B", "2")
        controller.submit()
        first_record = controller.ledger[0]

        record = controller.load_for_edit(0)

        assert record is first_record
        assert len(controller.ledger) == 1
        assert controller.values == {"firstName": "A", "lastName": "1"}
        assert controller.progress == 100.0
        assert controller.errors == {}
        assert controller.phase == FormPhase.EDITING

        result = controller.submit()

        assert len(controller.ledger) == 2
        assert result.record.values == first_record.values
        assert result.record.id != first_record.id
        assert [r.values["firstName"] for r in controller.ledger] == ["B", "A"]

    def test_switches_form_type(self, controller):
        """Test un registro de otro formulario activa su esquema."""
        _fill_user(controller)
        controller.submit()
        controller.select_form_type("addressInfo")
        controller.set_field_value("street", "Main")

        controller.load_for_edit(0)

        assert controller.form_type == "userInfo"
        assert controller.values == {"firstName": "A", "lastName": "B"}

    def test_partial_record_progress(self, custom_registry):
        ctrl = FormController(custom_registry, "contact")
        ctrl.set_field_value("firstName", "Ana")
        ctrl.set_field_value("channel", "Phone")
        ctrl.submit()

        ctrl.load_for_edit(0)

        assert ctrl.progress == 100.0

    def test_out_of_range(self, controller):
        with pytest.raises(LedgerIndexError):
            controller.load_for_edit(0)
        assert controller.form_type == "userInfo"


class TestDeleteAndReset:
    """Tests para delete_entry y reset_form."""

    def test_delete(self, controller, notifications):
        _fill_user(controller)
        controller.submit()
        controller.set_field_value("firstName", "Z")

        controller.delete_entry(0)

        assert len(controller.ledger) == 0
        assert controller.values == {"firstName": "Z"}
        assert notifications == [SUBMIT_SUCCESS_MESSAGE, DELETE_SUCCESS_MESSAGE]

    def test_delete_out_of_range(self, controller, notifications):
        with pytest.raises(LedgerIndexError):
            controller.delete_entry(3)
        assert notifications == []

    def test_reset_form(self, controller):
        controller.submit()
        controller.set_field_value("firstName", "A")

        controller.reset_form()

        assert controller.form_type == "userInfo"
        assert controller.values == {}
        assert controller.errors == {}
        assert controller.progress == 0.0
