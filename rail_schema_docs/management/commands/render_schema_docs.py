from django.core.management.base import BaseCommand, CommandError

from rail_schema_docs.documentation import (
    DocumentationConfig,
    DocumentationGenerator,
    HTMLDocumentSchemaPlugin,
    load_schema,
)
from rail_schema_docs.exceptions import SchemaDocumentationError


class Command(BaseCommand):
    help = "Render the GraphQL schema, or one of its types, as annotated SDL documentation."

    def add_arguments(self, parser):
        parser.add_argument(
            "--schema",
            dest="schema",
            help="Dotted path to a graphene or graphql-core schema (default: GRAPHENE.SCHEMA).",
        )
        parser.add_argument(
            "--type",
            dest="type_name",
            help="Render a single named type instead of the whole schema.",
        )
        parser.add_argument("--title", dest="title", help="Section title.")
        parser.add_argument(
            "--width",
            type=int,
            dest="width",
            help="Wrap width of description comments.",
        )
        parser.add_argument(
            "--page",
            action="store_true",
            help="Output a standalone HTML page with one section per type.",
        )
        parser.add_argument(
            "--out",
            dest="output_file",
            help="Output file path (default: stdout).",
        )

    def handle(self, *args, **options):
        try:
            schema = load_schema(options["schema"])
            config = DocumentationConfig.from_settings(
                title=options["title"], description_width=options["width"]
            )
        except (SchemaDocumentationError, ValueError) as error:
            raise CommandError(str(error)) from error

        try:
            if options["page"]:
                output = DocumentationGenerator(config=config).generate_html_documentation(schema)
            else:
                output = self._render_definition(schema, config, options["type_name"])
        except SchemaDocumentationError as error:
            raise CommandError(str(error)) from error

        if options["output_file"]:
            with open(options["output_file"], "w", encoding="utf-8") as f:
                f.write(output)
            self.stdout.write(self.style.SUCCESS(f"Documentation written to {options['output_file']}"))
        else:
            self.stdout.write(output)

    def _render_definition(self, schema, config, type_name):
        plugin = HTMLDocumentSchemaPlugin(config=config)
        if type_name:
            type_ = schema.get_type(type_name)
            if type_ is None:
                raise CommandError(f"Type '{type_name}' does not exist in the schema.")
            section = plugin.get_sections(type_)
        else:
            section = plugin.get_sections(schema)

        if section is None:
            raise CommandError(f"Type '{type_name}' cannot be rendered.")
        return section.description
