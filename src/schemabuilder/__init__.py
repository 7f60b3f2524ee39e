"""
schemabuilder - assemble a schema from independently authored fragments.

Fragments (type definitions, resolver sets and directive sets) are
registered under string identifiers, ordered according to declared
before/after/start/end rules, and combined into a single payload for an
executable-schema factory.

Example usage:
    from schemabuilder import SchemaBuilder

    builder = SchemaBuilder()
    builder.import_from("schema/")
    payload = builder.build()
    # payload.definitions  -> ordered list of definitions
    # payload.resolvers    -> deep-merged resolver map
    # payload.directives   -> deep-merged directive map
"""

__version__ = "0.2.0"
__all__ = [
    "SchemaBuilder",
    "SchemaPayload",
    "FragmentKind",
    "__version__",
]


# Lazy imports to keep ``import schemabuilder`` light
def __getattr__(name: str):
    if name == "SchemaBuilder":
        from schemabuilder.builder import SchemaBuilder
        return SchemaBuilder
    if name == "SchemaPayload":
        from schemabuilder.aggregator import SchemaPayload
        return SchemaPayload
    if name == "FragmentKind":
        from schemabuilder.types import FragmentKind
        return FragmentKind
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
