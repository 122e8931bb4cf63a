"""
Helpers shared by the documentation tests.
"""

import html
import re

from graphql import build_schema

TAG_RE = re.compile(r"<[^>]+>")
IDENTIFIER_RE = re.compile(r'<span class="identifier">([^<]+)</span>')

SDL = '''
directive @cacheControl(maxAge: Int = 60, scope: CacheScope) on FIELD_DEFINITION | OBJECT

enum CacheScope {
  "Visible to everyone"
  PUBLIC
  PRIVATE @deprecated
}

"""A thing with an identifier"""
interface Node {
  id: ID!
}

interface Named {
  name: String
}

scalar DateTime

enum PartKind {
  BOLT
  NUT
}

input PartFilter {
  size: Int = 3
  tags: [String] = ["a", "b"]
  kind: PartKind
}

type Part {
  kind: PartKind
}

"""A thing that can be built"""
type Widget implements Node & Named {
  id: ID!
  name: String
  "Free-form labels attached to the widget by its owner, used for search and grouping"
  tags: [String!]!
  oldName: String @deprecated
  legacyCode: String @deprecated(reason: "")
  code: String @deprecated(reason: "use X instead")
  parts(first: Int = 10, after: String, kind: PartKind = BOLT, filter: PartFilter = {size: 5}): [Part]
  createdAt: DateTime
}

type Gadget {
  label: String
}

union SearchResult = Widget | Gadget

type Query {
  widget(id: ID!): Widget
  search(text: String): [SearchResult]
}

type Mutation {
  buildWidget(name: String!): Widget
}
'''


def plain_text(markup: str) -> str:
    """Drop tags and entities, keeping the text a reader would see."""
    return html.unescape(TAG_RE.sub("", markup))


def defined_names(markup: str) -> list:
    """Names of the type definitions in rendering order."""
    return IDENTIFIER_RE.findall(markup)


def build_test_schema():
    return build_schema(SDL)
