import pytest
from pydantic import ValidationError

from tea_api.domain.models import Tea, TeaCreate, TeaNotFoundError, TeaUpdate


def test_tea_serialization() -> None:
    tea = Tea(id=1, name="Green Tea", price=100)
    assert tea.model_dump() == {"id": 1, "name": "Green Tea", "price": 100}


def test_integer_price_stays_integer() -> None:
    assert isinstance(TeaCreate(name="Green Tea", price=100).price, int)
    assert TeaCreate(name="Matcha", price=12.5).price == 12.5


@pytest.mark.parametrize("missing", ["name", "price"])
def test_create_requires_both_fields(missing: str) -> None:
    data = {"name": "Green Tea", "price": 100}
    del data[missing]
    with pytest.raises(ValidationError):
        TeaCreate(**data)


def test_update_requires_both_fields() -> None:
    with pytest.raises(ValidationError):
        TeaUpdate(name="Only a name")  # type: ignore[call-arg]


def test_price_is_not_range_checked() -> None:
    assert TeaCreate(name="Free Sample", price=-1).price == -1


def test_not_found_error_carries_id() -> None:
    err = TeaNotFoundError(7)
    assert err.tea_id == 7
    assert "7" in str(err)
