import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)

from rail_schema_docs.documentation import DocumentationConfig, HTMLDocumentSchemaPlugin
from rail_schema_docs.exceptions import DefaultValueSerializationError
from tests.utils import build_test_schema, plain_text


@pytest.fixture
def schema():
    return build_test_schema()


@pytest.fixture
def plugin():
    return HTMLDocumentSchemaPlugin(
        "Definition",
        lambda type_: f"/types/{type_.name}.html",
        config=DocumentationConfig(),
    )


def render(plugin, type_):
    return plain_text(plugin.render_type(type_))


@pytest.mark.unit
def test_scalar(plugin, schema):
    assert render(plugin, schema.get_type("DateTime")) == "scalar DateTime"


@pytest.mark.unit
def test_union_lists_members_in_declared_order(plugin, schema):
    rendered = plugin.render_type(schema.get_type("SearchResult"))

    assert plain_text(rendered) == "union SearchResult = Widget | Gadget"
    assert 'href="/types/Widget.html"' in rendered
    assert 'href="/types/Gadget.html"' in rendered


@pytest.mark.unit
def test_enum_values_carry_descriptions_and_deprecation(plugin, schema):
    assert render(plugin, schema.get_type("CacheScope")) == (
        "enum CacheScope {\n"
        "\n"
        "  # Visible to everyone\n"
        "  PUBLIC\n"
        "\n"
        "  PRIVATE @deprecated\n"
        "}"
    )


@pytest.mark.unit
def test_input_object_fields_and_defaults(plugin, schema):
    assert render(plugin, schema.get_type("PartFilter")) == (
        "input PartFilter {\n"
        "  size: Int = 3\n"
        '  tags: String[] = ["a", "b"]\n'
        "  kind: PartKind\n"
        "}"
    )


@pytest.mark.unit
def test_object_without_interfaces_has_no_implements_clause(plugin, schema):
    assert render(plugin, schema.get_type("Gadget")) == "type Gadget {\n\n  label: String\n}"


@pytest.mark.unit
def test_object_lists_interfaces_in_declared_order(plugin, schema):
    rendered = render(plugin, schema.get_type("Widget"))

    assert rendered.startswith("type Widget implements Node, Named {\n")
    assert rendered.endswith("\n}")


@pytest.mark.unit
def test_interface(plugin, schema):
    assert render(plugin, schema.get_type("Node")) == "interface Node {\n\n  id: ID!\n}"


@pytest.mark.unit
def test_field_descriptions_are_wrapped_comments(plugin, schema):
    rendered = render(plugin, schema.get_type("Widget"))

    assert (
        "\n  # Free-form labels attached to the widget by its\n"
        "  # owner, used for search and grouping\n"
        "  tags: String!"
    ) in rendered


@pytest.mark.unit
def test_description_width_comes_from_config(schema):
    narrow = HTMLDocumentSchemaPlugin("Definition", config=DocumentationConfig(description_width=20))

    rendered = render(narrow, schema.get_type("Widget"))

    assert "  # Free-form labels\n  # attached to the\n" in rendered


@pytest.mark.unit
def test_field_arguments_and_defaults(plugin, schema):
    rendered = render(plugin, schema.get_type("Widget"))

    assert (
        "  parts(first: Int = 10, after: String, kind: PartKind = BOLT, "
        "filter: PartFilter = {"
    ) in rendered
    assert "): Part[]" in rendered
    assert "  name: String\n" in rendered


@pytest.mark.unit
def test_deprecation_markers(plugin, schema):
    rendered = render(plugin, schema.get_type("Widget"))
    lines = rendered.split("\n")

    assert "  id: ID!" in lines
    assert "  oldName: String @deprecated" in lines
    assert "  legacyCode: String @deprecated" in lines
    assert '  code: String @deprecated(reason: "use X instead")' in lines


@pytest.mark.unit
def test_deprecation_reason_is_printed_as_string_literal(plugin):
    type_ = GraphQLObjectType(
        "Legacy",
        {"old": GraphQLField(GraphQLString, deprecation_reason='say "no"')},
    )

    assert '  old: String @deprecated(reason: "say \\"no\\"")' in render(plugin, type_)


@pytest.mark.unit
def test_type_links_use_resolver_and_description_as_title(plugin, schema):
    rendered = plugin.render_type(schema.get_type("Widget"))

    assert (
        '<a class="support type" href="/types/Node.html" '
        'title="A thing with an identifier">Node</a>'
    ) in rendered
    assert '<a class="support type" href="/types/Named.html" title="Named">Named</a>' in rendered


@pytest.mark.unit
@pytest.mark.parametrize(
    "type_, expected",
    [
        (GraphQLInt, "Int"),
        (GraphQLList(GraphQLInt), "Int[]"),
        (GraphQLNonNull(GraphQLInt), "Int!"),
        # Only the innermost wrapper is shown
        (GraphQLNonNull(GraphQLList(GraphQLInt)), "Int[]"),
        (GraphQLNonNull(GraphQLList(GraphQLNonNull(GraphQLInt))), "Int!"),
        (GraphQLList(GraphQLList(GraphQLInt)), "Int[]"),
    ],
)
def test_wrapped_type_reference_keeps_innermost_marker(plugin, type_, expected):
    assert plain_text(plugin._render_type_reference(type_)) == expected


@pytest.mark.unit
def test_unsupported_type_renders_nothing(plugin):
    assert plugin.render_type(GraphQLList(GraphQLInt)) is None
    assert plugin.render_type(object()) is None


@pytest.mark.unit
def test_invalid_default_value_propagates(plugin):
    type_ = GraphQLObjectType(
        "Broken",
        {
            "items": GraphQLField(
                GraphQLString,
                args={"limit": GraphQLArgument(GraphQLInt, default_value="many")},
            )
        },
    )

    with pytest.raises(DefaultValueSerializationError):
        plugin.render_type(type_)


@pytest.mark.unit
def test_descriptions_are_html_escaped(plugin):
    type_ = GraphQLObjectType(
        "Escaped",
        {"html": GraphQLField(GraphQLString, description="Returns <b>bold</b> & more")},
    )

    rendered = plugin.render_type(type_)

    assert "# Returns &lt;b&gt;bold&lt;/b&gt; &amp; more" in rendered
