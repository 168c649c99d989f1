"""Tests for the data file line codec."""

from __future__ import annotations

import pytest

from cargoregistry_app.errors import InvalidNumericFieldError, MalformedRecordError
from cargoregistry_app.models import Cargo, CargoItem
from cargoregistry_app.services import cargo_codec

SAMPLE_LINE = "1|TRK1000|Acme Co|123 Main St|Springfield|In Transit|15.50|1|Widget|10|1.55|\n"


class TestEncode:
    def test_encode_matches_file_format(self, sample_cargo):
        sample_cargo.tracking_number = "TRK1000"
        assert cargo_codec.encode(sample_cargo) == SAMPLE_LINE

    def test_encode_without_items(self):
        c = Cargo(id=3, tracking_number="TRK1002", sender="S", sender_address="A",
                  destination="D", status="Warehouse")
        assert cargo_codec.encode(c) == "3|TRK1002|S|A|D|Warehouse|0.00|0|\n"

    def test_weights_use_two_decimals(self):
        c = Cargo(id=1, tracking_number="TRK1000",
                  items=[CargoItem("Bolt", 3, 0.333)])
        line = cargo_codec.encode(c)
        assert "|1.00|1|Bolt|3|0.33|" in line


class TestDecode:
    def test_decode_sample_line(self):
        c = cargo_codec.decode(SAMPLE_LINE)
        assert c.id == 1
        assert c.tracking_number == "TRK1000"
        assert c.sender == "Acme Co"
        assert c.sender_address == "123 Main St"
        assert c.destination == "Springfield"
        assert c.status == "In Transit"
        assert c.item_count == 1
        assert c.items[0] == CargoItem("Widget", 10, 1.55)
        assert c.total_weight_kg == pytest.approx(15.5)

    def test_round_trip(self):
        original = Cargo(
            id=42,
            tracking_number="TRK1041",
            sender="Globex",
            sender_address="9 Harbour Way",
            destination="Shelbyville",
            status="Delivered",
            items=[CargoItem("Drum", 4, 12.25), CargoItem("Pallet", 1, 300.0)],
        )
        decoded = cargo_codec.decode(cargo_codec.encode(original))
        assert decoded == original

    def test_accepts_line_without_trailing_delimiter(self):
        c = cargo_codec.decode("5|TRK1004|S|A|D|Hold|0.00|0")
        assert c.id == 5
        assert c.items == []

    def test_accepts_crlf(self):
        c = cargo_codec.decode(SAMPLE_LINE.replace("\n", "\r\n"))
        assert c.items[0].unit_weight_kg == pytest.approx(1.55)

    def test_missing_prefix_fields(self):
        with pytest.raises(MalformedRecordError):
            cargo_codec.decode("1|TRK1000|Acme Co|123 Main St|\n")

    def test_empty_line(self):
        with pytest.raises(MalformedRecordError):
            cargo_codec.decode("\n")

    def test_invalid_id(self):
        with pytest.raises(InvalidNumericFieldError) as exc:
            cargo_codec.decode("abc|TRK1000|S|A|D|St|0.00|0|\n")
        assert exc.value.field_name == "id"
        assert isinstance(exc.value, MalformedRecordError)

    def test_invalid_total_weight(self):
        with pytest.raises(InvalidNumericFieldError) as exc:
            cargo_codec.decode("1|TRK1000|S|A|D|St|heavy|0|\n")
        assert exc.value.field_name == "total_weight"

    def test_invalid_item_quantity(self):
        with pytest.raises(InvalidNumericFieldError) as exc:
            cargo_codec.decode("1|TRK1000|S|A|D|St|1.00|1|Box|ten|1.00|\n")
        assert exc.value.field_name == "quantity"

    def test_non_finite_weight_rejected(self):
        with pytest.raises(InvalidNumericFieldError):
            cargo_codec.decode("1|TRK1000|S|A|D|St|1.00|1|Box|1|nan|\n")

    def test_item_count_out_of_range(self):
        with pytest.raises(MalformedRecordError):
            cargo_codec.decode("1|TRK1000|S|A|D|St|1.00|11|\n")
        with pytest.raises(MalformedRecordError):
            cargo_codec.decode("1|TRK1000|S|A|D|St|1.00|-1|\n")

    def test_short_item_list_padded_with_defaults(self):
        c = cargo_codec.decode("1|TRK1000|S|A|D|St|25.00|3|Box|2|5.00|Crate|\n")
        assert c.item_count == 3
        assert c.items[0] == CargoItem("Box", 2, 5.0)
        assert c.items[1] == CargoItem()
        assert c.items[2] == CargoItem()
        assert c.total_weight_kg == pytest.approx(10.0)

    def test_total_is_derived_from_items(self):
        c = cargo_codec.decode("1|TRK1000|S|A|D|St|999.00|1|Box|2|5.00|\n")
        assert c.total_weight_kg == pytest.approx(10.0)

    def test_empty_text_fields_preserved(self):
        c = cargo_codec.decode("1|TRK1000||A||St|0.00|0|\n")
        assert c.sender == ""
        assert c.destination == ""
        assert c.sender_address == "A"

    def test_empty_tracking_number_rejected(self):
        with pytest.raises(MalformedRecordError):
            cargo_codec.decode("1||S|A|D|St|0.00|0|\n")
