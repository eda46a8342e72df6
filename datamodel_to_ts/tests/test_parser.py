import json
from pathlib import Path

import pytest

from datamodel_to_ts.errors import SchemaReferenceError
from datamodel_to_ts.pipeline.schema_ast import FieldKind, parse_datamodel


class TestDatamodelParser:
    def test_full_document(self):
        with open(Path(__file__).parent / "test_data" / "base.datamodel.json") as f:
            datamodel = parse_datamodel(json.load(f))

        assert [e.name for e in datamodel.enums] == ["Gender", "DataTest"]
        assert datamodel.enums[0].values == ("Male", "Female", "Other")
        assert [m.name for m in datamodel.models] == ["Person", "Address", "Data"]
        assert datamodel.types == ()

        person_id = datamodel.models[0].fields[0]
        assert person_id.name == "id"
        assert person_id.kind is FieldKind.SCALAR
        assert person_id.type_name == "Int"
        assert person_id.has_default_value is True

    def test_bare_datamodel_with_defaults(self):
        datamodel = parse_datamodel(
            {
                "enums": [{"name": "Color", "values": ["Red", "Blue"], "documentation": "Colors"}],
                "models": [{"name": "Car", "fields": [{"name": "color", "kind": "enum", "type": "Color"}]}],
                "types": [{"name": "Wheel", "fields": [{"name": "size", "type": "Int"}]}],
            }
        )

        assert datamodel.enums[0].values == ("Red", "Blue")
        assert datamodel.enums[0].documentation == "Colors"

        color = datamodel.models[0].fields[0]
        assert color.kind is FieldKind.ENUM
        assert color.is_required is True
        assert color.is_list is False
        assert color.has_default_value is False
        assert color.documentation is None

        assert datamodel.types[0].fields[0].kind is FieldKind.SCALAR
        assert [m.name for m in datamodel.declarations] == ["Car", "Wheel"]

    def test_unknown_field_kind(self):
        document = {"models": [{"name": "Car", "fields": [{"name": "x", "kind": "composite", "type": "X"}]}]}

        with pytest.raises(SchemaReferenceError, match=r"Unknown field kind: composite \(Car.x\)"):
            parse_datamodel(document)
