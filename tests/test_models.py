import pytest
from pydantic import ValidationError

from core.models.network import NOT_STARTED, OperationSnapshot, OperationState
from core.models.user import User


class TestUser:
    def test_parses_wire_keys(self):
        user = User.model_validate(
            {
                "id": 1,
                "nombre": "Ana García",
                "email": "ana@ejemplo.com",
                "rol": "Desarrolladora Flutter",
            }
        )

        assert user.id == 1
        assert user.name == "Ana García"
        assert user.email == "ana@ejemplo.com"
        assert user.role == "Desarrolladora Flutter"

    def test_accepts_field_names(self):
        user = User(id=2, name="Carlos Ruiz", email="carlos@ejemplo.com", role="Diseñador UI/UX")

        assert user.to_wire() == {
            "id": 2,
            "nombre": "Carlos Ruiz",
            "email": "carlos@ejemplo.com",
            "rol": "Diseñador UI/UX",
        }

    def test_is_immutable(self):
        user = User(id=1, name="Ana", email="a@b.c", role="dev")

        with pytest.raises(ValidationError):
            user.name = "Otra"

    def test_missing_field_is_rejected(self):
        with pytest.raises(ValidationError):
            User.model_validate({"id": 1, "nombre": "Ana"})

    @pytest.mark.parametrize(
        ("name", "initial"),
        [("maría", "M"), ("Ñandú", "Ñ"), ("", "?")],
    )
    def test_initial(self, name, initial):
        assert User(id=1, name=name, email="x@y.z", role="r").initial == initial


class TestOperationSnapshot:
    def test_not_started_has_nothing(self):
        assert NOT_STARTED.state is OperationState.NOT_STARTED
        assert not NOT_STARTED.has_data
        assert not NOT_STARTED.has_error

    def test_equal_by_value(self):
        users = (User(id=1, name="Ana", email="a@b.c", role="dev"),)
        a = OperationSnapshot(OperationState.SUCCEEDED, 1.0, data=users)
        b = OperationSnapshot(OperationState.SUCCEEDED, 1.0, data=users)

        assert a == b
        assert a.has_data
