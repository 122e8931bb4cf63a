import graphene

from rail_schema_docs import DocumentationConfig, DocumentationGenerator, HTMLDocumentSchemaPlugin


class Category(graphene.ObjectType):
    """A group of posts"""

    name = graphene.String(required=True)


class Post(graphene.ObjectType):
    title = graphene.String(required=True)
    category = graphene.Field(Category)
    legacy_slug = graphene.String(deprecation_reason="use title instead")


class Query(graphene.ObjectType):
    posts = graphene.List(Post, first=graphene.Int(default_value=20))


schema = graphene.Schema(query=Query)


if __name__ == "__main__":
    config = DocumentationConfig(title="Definition", page_title="Blog API")
    plugin = HTMLDocumentSchemaPlugin(
        config=config, url=lambda type_: f"/docs/{type_.name}.html"
    )
    print(plugin.get_sections(schema.graphql_schema.get_type("Post")).description)
    DocumentationGenerator([plugin], config=config).generate_html_documentation(
        schema.graphql_schema, output_path="blog-api.html"
    )
