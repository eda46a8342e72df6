from unittest import TestCase

import pytest

from datamodel_to_ts.errors import SchemaReferenceError
from datamodel_to_ts.pipeline.analyzer import TypeRegistry, build_name_maps
from datamodel_to_ts.pipeline.config import resolve_config
from datamodel_to_ts.pipeline.emitters import EnumEmitter, ModelEmitter
from datamodel_to_ts.pipeline.schema_ast import Datamodel, EnumNode, FieldKind, FieldNode, ModelNode

GENDER = EnumNode("Gender", ("Male", "Female"))


def emit_enum(enum, options=None):
    config = resolve_config(options)
    return EnumEmitter(config, build_name_maps(Datamodel(enums=(enum,)), config)).emit(enum)


def emit_model(model, options=None, enums=(), models=(), types=()):
    """Emit a model declaration; the model itself is added to the datamodel."""
    config = resolve_config(options)
    datamodel = Datamodel(enums=tuple(enums), models=(model, *models), types=tuple(types))
    emitter = ModelEmitter(config, build_name_maps(datamodel, config), TypeRegistry(config, datamodel))
    return emitter.emit(model)


class TestEnumEmitter(TestCase):
    def test_string_union(self):
        self.assertEqual(emit_enum(GENDER), 'export type Gender = "Male" | "Female";')

    def test_empty_enum(self):
        self.assertEqual(emit_enum(EnumNode("Empty")), "export type Empty = never;")

    def test_native_enum_with_prefix(self):
        self.assertEqual(
            emit_enum(GENDER, {"enumType": "enum", "enumPrefix": "E"}),
            'export enum EGender {\n  Male = "Male",\n  Female = "Female"\n}',
        )

    def test_object(self):
        self.assertEqual(
            emit_enum(GENDER, {"enumType": "object", "enumObjectSuffix": "Values", "exportEnums": "false"}),
            "const GenderValues = {\n"
            '  Male: "Male",\n'
            '  Female: "Female"\n'
            '} satisfies Record<string, "Male" | "Female">;\n'
            "\n"
            "type Gender = (typeof GenderValues)[keyof typeof GenderValues];",
        )

    def test_comments(self):
        enum = EnumNode("Gender", ("Male", "Female"), documentation="Genders\n\nof people")

        self.assertEqual(
            emit_enum(enum, {"includeComments": "true"}),
            '/**\n * Genders\n *\n * of people\n */\nexport type Gender = "Male" | "Female";',
        )

    def test_comments_disabled(self):
        enum = EnumNode("Gender", ("Male", "Female"), documentation="Genders")

        self.assertEqual(emit_enum(enum), 'export type Gender = "Male" | "Female";')


class TestModelEmitter:
    def test_interface(self):
        model = ModelNode(
            "Person",
            (
                FieldNode("id", FieldKind.SCALAR, "Int", has_default_value=True),
                FieldNode("email", FieldKind.SCALAR, "String", is_required=False),
            ),
        )

        assert emit_model(model) == "export interface Person {\n  id: number;\n  email: string | null;\n}"

    def test_type_alias(self):
        model = ModelNode("Person", (FieldNode("id", FieldKind.SCALAR, "Int"),))

        assert emit_model(model, {"modelType": "type"}) == "export type Person = {\n  id: number;\n};"

    def test_optional_nullable_and_default(self):
        model = ModelNode("Person", (FieldNode("email", FieldKind.SCALAR, "String", is_required=False, has_default_value=True),))

        assert "  email: string | null;" in emit_model(model)
        assert "  email?: string | null;" in emit_model(model, {"optionalDefaults": "true"})
        assert "  email?: string | null;" in emit_model(model, {"optionalNullables": "true"})

    def test_unsupported_field(self):
        model = ModelNode("Shape", (FieldNode("area", FieldKind.UNSUPPORTED, 'Unsupported("polygon")', is_required=False),))

        assert "  area: any | null;" in emit_model(model)

    def test_enum_field(self):
        model = ModelNode("Person", (FieldNode("genders", FieldKind.ENUM, "Gender", is_list=True),))

        assert "  genders: GenderEnum[];" in emit_model(model, {"enumSuffix": "Enum"}, enums=[GENDER])

    def test_unknown_enum(self):
        model = ModelNode("Person", (FieldNode("mood", FieldKind.ENUM, "Mood"),))

        with pytest.raises(SchemaReferenceError, match="Unknown enum name: Mood"):
            emit_model(model)

    def test_unknown_model(self):
        model = ModelNode("Person", (FieldNode("ghost", FieldKind.OBJECT, "Ghost"),))

        with pytest.raises(SchemaReferenceError, match="Unknown model name: Ghost"):
            emit_model(model)

    def test_embedded_type_is_never_optional(self):
        photo = ModelNode("Photo", (FieldNode("url", FieldKind.SCALAR, "String"),))
        model = ModelNode(
            "Person",
            (
                FieldNode("photo", FieldKind.OBJECT, "Photo", is_required=False),
                FieldNode("photos", FieldKind.OBJECT, "Photo", is_list=True),
            ),
        )
        options = {"optionalNullables": "true", "optionalRelations": "true", "omitRelations": "true", "typePrefix": "T"}

        code = emit_model(model, options, types=[photo])

        assert "  photo: TPhoto | null;" in code
        assert "  photos: TPhoto[];" in code

    def test_relation_counts(self):
        post = ModelNode("Post", (FieldNode("id", FieldKind.SCALAR, "Int"),))
        model = ModelNode(
            "Person",
            (
                FieldNode("posts", FieldKind.OBJECT, "Post", is_list=True),
                FieldNode("bestPost", FieldKind.OBJECT, "Post", is_required=False),
                FieldNode("drafts", FieldKind.OBJECT, "Post", is_list=True),
            ),
        )

        assert emit_model(model, {"relationCounts": "true"}, models=[post]) == (
            "export interface Person {\n"
            "  posts?: Post[];\n"
            "  bestPost?: Post | null;\n"
            "  drafts?: Post[];\n"
            "  _count?: {\n"
            "    posts: number;\n"
            "    drafts: number;\n"
            "  };\n"
            "}"
        )

    def test_no_counts_without_list_relations(self):
        model = ModelNode("Person", (FieldNode("tags", FieldKind.SCALAR, "String", is_list=True),))

        assert "_count" not in emit_model(model, {"relationCounts": "true"})


class TestFieldTypes:
    def test_literal_type_gets_no_list_suffix(self):
        model = ModelNode("Person", (FieldNode("tags", FieldKind.SCALAR, "String", is_list=True, documentation="![string[]]"),))

        assert "  tags: string[];" in emit_model(model)

    def test_literal_union_list(self):
        model = ModelNode(
            "Person", (FieldNode("flags", FieldKind.SCALAR, "String", is_list=True, documentation='!["a" | "b"]'),)
        )

        assert '  flags: "a" | "b";' in emit_model(model)

    def test_imported_type_keeps_list_suffix(self):
        model = ModelNode("Person", (FieldNode("tags", FieldKind.SCALAR, "String", is_list=True, documentation="[import:Tag:./tag]"),))

        assert "  tags: Tag[];" in emit_model(model)

    def test_complex_list(self):
        model = ModelNode("Person", (FieldNode("ids", FieldKind.SCALAR, "String", is_list=True),))

        assert "  ids: (string | number)[];" in emit_model(model, {"stringType": "string | number"})

    def test_nullable_list(self):
        model = ModelNode("Person", (FieldNode("tags", FieldKind.SCALAR, "String", is_list=True, is_required=False),))

        assert "  tags: string[] | null;" in emit_model(model)
        assert "  tags: (string | number)[] | null;" in emit_model(model, {"stringType": "string | number"})

    def test_nullable_literal_list_keeps_null(self):
        model = ModelNode(
            "Person",
            (FieldNode("tags", FieldKind.SCALAR, "String", is_list=True, is_required=False, documentation="![string[]]"),),
        )

        assert "  tags: string[] | null;" in emit_model(model)

    def test_complex_nullable_literal(self):
        model = ModelNode(
            "Person", (FieldNode("callback", FieldKind.SCALAR, "String", is_required=False, documentation="![() => string]"),)
        )

        assert "  callback: (() => string) | null;" in emit_model(model)

    def test_field_comment_without_type_line(self):
        model = ModelNode(
            "Person",
            (FieldNode("nickname", FieldKind.SCALAR, "String", documentation="The nickname\n[import:Nick:./nick]"),),
            documentation="A person",
        )

        assert emit_model(model, {"includeComments": "true"}) == (
            "/**\n"
            " * A person\n"
            " */\n"
            "export interface Person {\n"
            "  /**\n"
            "   * The nickname\n"
            "   */\n"
            "  nickname: Nick;\n"
            "}"
        )

    def test_type_only_documentation_has_no_comment(self):
        model = ModelNode("Person", (FieldNode("nickname", FieldKind.SCALAR, "String", documentation="[import:Nick:./nick]"),))

        assert emit_model(model, {"includeComments": "true"}) == "export interface Person {\n  nickname: Nick;\n}"
