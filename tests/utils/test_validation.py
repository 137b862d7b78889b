"""Field checks used by the routers."""

import pytest

from paycash.api.routers.webhooks import nest_form_fields
from paycash.core.exceptions import GatewayError
from paycash.utils.validation import parse_amount, require_fields


class TestRequireFields:
    def test_all_present(self):
        require_fields({"a": 1, "b": "x"}, ("a", "b"))

    def test_lists_every_missing_field(self):
        with pytest.raises(GatewayError) as exc:
            require_fields({"a": None, "b": "", "c": "ok"}, ("a", "b", "c", "d"))
        assert exc.value.message == "Missing required fields: a, b, d"
        assert exc.value.status_code == 400


class TestParseAmount:
    @pytest.mark.parametrize("value, expected", [(500, 500), ("250", 250), (12.5, 12.5), ("100.00", 100)])
    def test_valid(self, value, expected):
        assert parse_amount(value) == expected

    def test_whole_amount_is_int(self):
        assert isinstance(parse_amount(100.0), int)

    @pytest.mark.parametrize(
        "value", [0, -1, "abc", True, "nan", "inf", [1], "1e5000", "1e100000000", 10 ** 13, "1e-100000000"]
    )
    def test_invalid(self, value):
        with pytest.raises(GatewayError):
            parse_amount(value)


def test_nest_form_fields():
    nested = nest_form_fields(
        [("data[invoice][token]", "tok"), ("data[status]", "completed"), ("hash", "h")]
    )
    assert nested == {"data": {"invoice": {"token": "tok"}, "status": "completed"}, "hash": "h"}
